# bestseatosky/app/core/context_processors.py
import logging

from django.conf import settings
from django.db import DatabaseError

from directory.models import Category

logger = logging.getLogger(__name__)

EXTRA_NAV_ITEMS = [
    {'slug': 'guide', 'label': 'Guides'},
    {'slug': 'blog', 'label': 'Blog'},
]


def site_context(request):
    """
    Site name, navigation and defaults shared by every page.
    """
    try:
        categories = list(Category.objects.order_by('display_order', 'name'))
    except DatabaseError as e:
        logger.error(f"[site_context] Could not load categories: {e}")
        categories = []

    nav_items = [{'slug': category.slug, 'label': category.name} for category in categories]
    nav_items += EXTRA_NAV_ITEMS
    for item in nav_items:
        item['active'] = request.path.startswith(f"/{item['slug']}/")

    return {
        'site_name': getattr(settings, 'SITE_NAME', 'Best Sea to Sky'),
        'site_url': settings.SITE_URL,
        'contact_email': getattr(settings, 'CONTACT_EMAIL', 'hello@bestseatosky.com'),
        'nav_categories': categories,
        'nav_items': nav_items,
        'default_meta_title': 'Best Sea to Sky | Your Guide to Squamish, Whistler & Pemberton',
        'default_meta_description': (
            'Discover the best restaurants, hotels, adventures, and attractions across the Sea to Sky '
            'corridor. Curated guides for Squamish, Whistler, and Pemberton.'
        ),
    }
