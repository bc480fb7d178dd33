# bestseatosky/app/leads/notifications.py
import logging
from django.core.mail import send_mail
from django.conf import settings
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


def send_listing_request_notification(listing_request):
    """
    Emails the site owners about a new listing request.
    Never raises; returns False when the message could not be sent.
    """
    recipients = getattr(settings, 'LEAD_NOTIFICATION_RECIPIENTS', [])
    if not recipients:
        logger.warning("[notifications] No LEAD_NOTIFICATION_RECIPIENTS configured, skipping email.")
        return False

    logger.info(f"[notifications] Sending listing request notification for '{listing_request.business_name}'")

    subject = f"New Listing Request: {listing_request.business_name}"
    context = {'listing_request': listing_request}
    from_email = getattr(settings, 'DEFAULT_FROM_EMAIL', 'noreply@bestseatosky.com')

    try:
        message = render_to_string('leads/email/listing_request.txt', context)
        html_message = render_to_string('leads/email/listing_request.html', context)
        send_mail(
            subject,
            message,
            from_email,
            recipients,
            fail_silently=False,
            html_message=html_message,
        )
        logger.info(f"[notifications] Notification sent for listing request {listing_request.pk}")
        return True

    except Exception as e:
        logger.exception(f"[notifications] Failed to send notification for listing request {listing_request.pk}: {e}")
        return False
