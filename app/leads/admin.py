# bestseatosky/app/leads/admin.py
from django.contrib import admin
from .models import ListingRequest


@admin.register(ListingRequest)
class ListingRequestAdmin(admin.ModelAdmin):
    list_display = ('business_name', 'contact_name', 'email', 'category', 'town', 'status', 'created_at')
    list_editable = ('status',)
    list_filter = ('status', 'category', 'town')
    search_fields = ('business_name', 'contact_name', 'email', 'message')
    readonly_fields = ('created_at',)
