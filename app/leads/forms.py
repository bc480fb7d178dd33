# bestseatosky/app/leads/forms.py
import re

from django import forms
from django.core.exceptions import ValidationError

from directory.models import Category, Town
from .models import ListingRequest

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

REQUIRED_FIELDS_MESSAGE = 'Business name, contact name, and email are required.'
INVALID_EMAIL_MESSAGE = 'Please provide a valid email address.'

INPUT_CLASSES = 'w-full px-4 py-3 rounded-xl border border-slate-200 bg-white text-slate-900 text-sm focus:outline-none focus:ring-2 focus:ring-emerald-500 focus:border-transparent'


class ListingRequestForm(forms.Form):
    # Required fields are checked together in clean() so the visitor gets a
    # single message instead of one per field.
    business_name = forms.CharField(max_length=255, required=False, widget=forms.TextInput(attrs={'class': INPUT_CLASSES, 'placeholder': 'e.g. Wild Wood Bistro'}))
    contact_name = forms.CharField(max_length=255, required=False, widget=forms.TextInput(attrs={'class': INPUT_CLASSES, 'placeholder': 'Your full name'}))
    email = forms.CharField(max_length=254, required=False, widget=forms.EmailInput(attrs={'class': INPUT_CLASSES, 'placeholder': 'you@business.com'}))
    phone = forms.CharField(max_length=50, required=False, widget=forms.TextInput(attrs={'class': INPUT_CLASSES, 'placeholder': '(604) 555-0123', 'type': 'tel'}))
    website = forms.CharField(max_length=500, required=False, widget=forms.TextInput(attrs={'class': INPUT_CLASSES, 'placeholder': 'https://'}))
    category_id = forms.ModelChoiceField(
        queryset=Category.objects.all(),
        required=False,
        empty_label='Select a category',
        widget=forms.Select(attrs={'class': INPUT_CLASSES}),
    )
    town_id = forms.ModelChoiceField(
        queryset=Town.objects.all(),
        required=False,
        empty_label='Select a town',
        widget=forms.Select(attrs={'class': INPUT_CLASSES}),
    )
    message = forms.CharField(required=False, widget=forms.Textarea(attrs={'class': INPUT_CLASSES, 'rows': 4}))

    def clean(self):
        cleaned_data = super().clean()

        if not all(cleaned_data.get(name) for name in ('business_name', 'contact_name', 'email')):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, code='required')

        if not EMAIL_PATTERN.match(cleaned_data['email']):
            raise ValidationError(INVALID_EMAIL_MESSAGE, code='invalid_email')

        return cleaned_data

    def first_error(self):
        """The single message shown to the visitor for an invalid form."""
        for message in self.non_field_errors():
            return message
        for errors in self.errors.values():
            for message in errors:
                return message
        return 'Invalid request.'

    def save(self):
        data = self.cleaned_data
        return ListingRequest.objects.create(
            business_name=data['business_name'],
            contact_name=data['contact_name'],
            email=data['email'],
            phone=data['phone'] or None,
            website=data['website'] or None,
            category=data['category_id'],
            town=data['town_id'],
            message=data['message'] or None,
            status=ListingRequest.RequestStatus.NEW,
        )
