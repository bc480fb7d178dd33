# bestseatosky/app/seo/admin.py
from django.contrib import admin
from .models import PageMetadata, SeoPage


@admin.register(PageMetadata)
class PageMetadataAdmin(admin.ModelAdmin):
    list_display = ('page_name', 'page_path', 'meta_title')
    search_fields = ('page_name', 'page_path', 'meta_title')


@admin.register(SeoPage)
class SeoPageAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'category', 'town', 'tag', 'status', 'updated_at')
    list_editable = ('status',)
    list_filter = ('status', 'category', 'town')
    search_fields = ('title', 'slug', 'meta_description')
    prepopulated_fields = {'slug': ('title',)}
    autocomplete_fields = ('tag',)
