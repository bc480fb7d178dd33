# bestseatosky/app/seo/apps.py
from django.apps import AppConfig

class SeoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'seo'
    verbose_name = 'SEO'
