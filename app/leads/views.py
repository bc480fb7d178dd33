# bestseatosky/app/leads/views.py
import json
import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from directory.queries import get_categories, get_towns
from .forms import ListingRequestForm
from .notifications import send_listing_request_notification

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = 'Failed to submit request. Please try again.'
INVALID_REQUEST_MESSAGE = 'Invalid request.'


def submit_listing_request(form):
    """
    Persists a validated form and attempts the owner notification.
    Raises DatabaseError when the insert fails.
    """
    listing_request = form.save()
    logger.info(f"[submit_listing_request] Saved listing request {listing_request.pk} for '{listing_request.business_name}'")

    # The request is already stored; a mail failure must not undo that
    if not send_listing_request_notification(listing_request):
        logger.warning(f"[submit_listing_request] Notification not sent for listing request {listing_request.pk}")
    return listing_request


@require_POST
def api_get_listed(request):
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("[api_get_listed] Failed to decode JSON body.")
        return JsonResponse({'error': INVALID_REQUEST_MESSAGE}, status=400)

    if not isinstance(data, dict):
        return JsonResponse({'error': INVALID_REQUEST_MESSAGE}, status=400)

    form = ListingRequestForm(data)
    if not form.is_valid():
        logger.info(f"[api_get_listed] Rejected submission: {form.errors.as_json()}")
        return JsonResponse({'error': form.first_error()}, status=400)

    try:
        submit_listing_request(form)
    except DatabaseError as e:
        logger.error(f"[api_get_listed] Insert failed: {e}", exc_info=True)
        return JsonResponse({'error': SUBMIT_FAILED_MESSAGE}, status=500)

    return JsonResponse({'success': True})


def get_listed(request):
    """
    The get-listed page. The form posts JSON to api_get_listed from the
    browser; a plain form POST is handled here as a fallback.
    """
    if request.method == 'POST':
        form = ListingRequestForm(request.POST)
        if form.is_valid():
            try:
                submit_listing_request(form)
            except DatabaseError as e:
                logger.error(f"[get_listed] Insert failed: {e}", exc_info=True)
                messages.error(request, SUBMIT_FAILED_MESSAGE)
            else:
                messages.success(request, "Request submitted! We'll review your listing request and get back to you soon.")
                return redirect(reverse('leads:get_listed') + '?submitted=1')
        else:
            messages.error(request, form.first_error())
    else:
        form = ListingRequestForm()

    context = {
        'form': form,
        'submitted': request.GET.get('submitted') == '1',
        'categories': get_categories(),
        'towns': get_towns(),
        'meta_title': 'Get Listed | Best Sea to Sky',
        'meta_description': (
            'Submit your business to be featured on Best Sea to Sky, the top directory for restaurants, '
            'hotels, activities, and attractions in Squamish, Whistler, and Pemberton.'
        ),
    }
    return render(request, 'leads/get_listed.html', context)
