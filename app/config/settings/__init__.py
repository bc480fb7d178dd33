# bestseatosky/app/config/settings/__init__.py
"""
Loads the settings module named by DJANGO_ENV (development by default).
"""

import os

env = os.getenv("DJANGO_ENV", "development")

if env == "production":
    from .production import *
elif env == "test":
    from .test import *
else:
    from .development import *
