# bestseatosky/app/core/urls.py

from django.contrib import admin
from django.contrib.sitemaps.views import sitemap
from django.urls import path, include

from seo.sitemaps import sitemaps
from . import views as core_views

core_patterns = [
    path('', core_views.home, name='home'),
    path('advertise/', core_views.advertise, name='advertise'),
    path('privacy/', core_views.privacy, name='privacy'),
    path('terms/', core_views.terms, name='terms'),
]

urlpatterns = [
    path('admin/', admin.site.urls),
    path('tinymce/', include('tinymce.urls')),

    path('robots.txt', core_views.robots_txt, name='robots_txt'),
    path('sitemap.xml', sitemap, {'sitemaps': sitemaps}, name='sitemap'),

    path('', include((core_patterns, 'core'), namespace='core')),
    path('', include('leads.urls', namespace='leads')),
    path('guide/', include('seo.urls', namespace='seo')),
    path('blog/', include('blog.urls', namespace='blog')),

    # Category slugs sit at the root, so this include has to come last
    path('', include('directory.urls', namespace='directory')),
]
