# bestseatosky/app/config/settings/development.py
"""
Development settings: SQLite, console email, relaxed host checks.
"""

from .base import *

DEBUG = True

ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

CANONICAL_HOST_EXEMPT = ["localhost:8000", "127.0.0.1:8000", "localhost:3000"]

for _app in ("core", "directory", "seo", "blog", "leads"):
    LOGGING["loggers"][_app]["level"] = "DEBUG"
