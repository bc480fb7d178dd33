# bestseatosky/app/config/settings/test.py
"""
Test settings: in-memory SQLite and the locmem email backend.
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

CANONICAL_HOST_EXEMPT = ["testserver", "localhost:8000"]

LEAD_NOTIFICATION_RECIPIENTS = ["leads@example.com"]

LOGGING["loggers"]["django"]["level"] = "WARNING"

AUTH_PASSWORD_VALIDATORS = []

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
