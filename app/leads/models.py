# bestseatosky/app/leads/models.py
from django.db import models


class ListingRequest(models.Model):
    class RequestStatus(models.TextChoices):
        NEW = 'new', 'New'
        CONTACTED = 'contacted', 'Contacted'
        LISTED = 'listed', 'Listed'
        DECLINED = 'declined', 'Declined'

    business_name = models.CharField(max_length=255)
    contact_name = models.CharField(max_length=255)
    email = models.CharField(max_length=254)
    phone = models.CharField(max_length=50, null=True, blank=True)
    website = models.CharField(max_length=500, null=True, blank=True)
    category = models.ForeignKey('directory.Category', on_delete=models.SET_NULL, null=True, blank=True, related_name='listing_requests')
    town = models.ForeignKey('directory.Town', on_delete=models.SET_NULL, null=True, blank=True, related_name='listing_requests')
    message = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=RequestStatus.choices, default=RequestStatus.NEW)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'listing_requests'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.business_name} ({self.get_status_display()})"
