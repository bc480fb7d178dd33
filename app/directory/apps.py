# bestseatosky/app/directory/apps.py
from django.apps import AppConfig

class DirectoryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'directory'
