# bestseatosky/app/directory/admin.py
from django.contrib import admin
from django.db.models import Count
from import_export.admin import ImportExportMixin

from .models import Category, Listing, ListingTag, Tag, Town
from .resources import CategoryResource, ListingResource, TagResource, TownResource


class CategoryAdmin(ImportExportMixin, admin.ModelAdmin):
    resource_class = CategoryResource
    list_display = ('slug', 'name', 'display_order', 'listing_count')
    list_editable = ('display_order',)
    search_fields = ('slug', 'name')

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.annotate(_listing_count=Count('listings'))

    @admin.display(ordering='_listing_count', description='Listings')
    def listing_count(self, obj):
        return obj._listing_count


class TownAdmin(ImportExportMixin, admin.ModelAdmin):
    resource_class = TownResource
    list_display = ('slug', 'name', 'display_order', 'latitude', 'longitude')
    list_editable = ('display_order',)
    search_fields = ('slug', 'name')


class TagAdmin(ImportExportMixin, admin.ModelAdmin):
    resource_class = TagResource
    list_display = ('slug', 'name', 'category')
    list_filter = ('category',)
    search_fields = ('slug', 'name', 'category__name')


class ListingTagInline(admin.TabularInline):
    model = ListingTag
    extra = 1
    autocomplete_fields = ('tag',)


class ListingAdmin(ImportExportMixin, admin.ModelAdmin):
    resource_class = ListingResource
    list_display = ('name', 'category', 'town', 'google_rating', 'google_review_count', 'status', 'featured', 'display_tags')
    list_editable = ('status', 'featured')
    list_filter = ('status', 'featured', 'category', 'town')
    search_fields = ('name', 'slug', 'address', 'description')
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ('created_at', 'updated_at')
    inlines = [ListingTagInline]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('category', 'town').prefetch_related('tags')

    def display_tags(self, obj):
        return ", ".join([tag.name for tag in obj.tags.all()])
    display_tags.short_description = 'Tags'


admin.site.register(Category, CategoryAdmin)
admin.site.register(Town, TownAdmin)
admin.site.register(Tag, TagAdmin)
admin.site.register(Listing, ListingAdmin)
