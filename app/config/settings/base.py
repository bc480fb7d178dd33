# bestseatosky/app/config/settings/base.py
"""
Settings shared by every environment of the Best Sea to Sky directory.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# app/ directory, which holds manage.py and the Django apps
BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv(
    "SECRET_KEY",
    "django-insecure-bestseatosky-dev-key-change-in-production"
)

DEBUG = os.getenv("DEBUG", "False") == "True"

ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "bestseatosky.com,www.bestseatosky.com,localhost,127.0.0.1").split(",")


INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django.contrib.sitemaps",
    # Third-party apps
    "tinymce",
    "import_export",
    "phonenumber_field",
    # Local apps
    "core",
    "directory",
    "seo",
    "blog.apps.BlogConfig",
    "leads",
]

MIDDLEWARE = [
    "core.middleware.CanonicalHostMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "core.context_processors.site_context",
                "seo.context_processors.seo_tags",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# Configured in environment-specific settings
DATABASES = {}

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "en-ca"

TIME_ZONE = "America/Vancouver"

USE_I18N = True

USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Email
EMAIL_BACKEND = os.getenv("EMAIL_BACKEND", "django.core.mail.backends.smtp.EmailBackend")
EMAIL_HOST = os.getenv("EMAIL_HOST", "localhost")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "587"))
EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD", "")
EMAIL_USE_TLS = os.getenv("EMAIL_USE_TLS", "True") == "True"
DEFAULT_FROM_EMAIL = os.getenv("DEFAULT_FROM_EMAIL", "Best Sea to Sky <noreply@bestseatosky.com>")


# Site
SITE_NAME = "Best Sea to Sky"
CANONICAL_HOST = os.getenv("CANONICAL_HOST", "bestseatosky.com")
CANONICAL_SCHEME = "https"
CANONICAL_HOST_EXEMPT = os.getenv("CANONICAL_HOST_EXEMPT", "localhost:8000,127.0.0.1:8000").split(",")
SITE_URL = os.getenv("SITE_URL", f"https://{CANONICAL_HOST}")
CONTACT_EMAIL = os.getenv("CONTACT_EMAIL", "hello@bestseatosky.com")
LEAD_NOTIFICATION_RECIPIENTS = [
    address for address in os.getenv("LEAD_NOTIFICATION_RECIPIENTS", CONTACT_EMAIL).split(",") if address
]

# Directory limits
GUIDE_LISTING_LIMIT = 15
RELATED_LISTING_LIMIT = 4
CROSS_CATEGORY_LISTING_LIMIT = 3
FEATURED_LISTING_LIMIT = 6
SEARCH_RESULT_LIMIT = 12
SEARCH_MIN_QUERY_LENGTH = 2

PHONENUMBER_DEFAULT_REGION = "CA"

TINYMCE_DEFAULT_CONFIG = {
    "height": 500,
    "menubar": False,
    "plugins": "link image lists code",
    "toolbar": "undo redo | blocks | bold italic | bullist numlist | link image | code",
}


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "core": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "directory": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "seo": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "blog": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "leads": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}
