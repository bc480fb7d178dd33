# bestseatosky/app/seo/selectors.py
import logging

from django.conf import settings
from django.db import DatabaseError

from directory.models import Listing, ListingTag
from .models import SeoPage

logger = logging.getLogger(__name__)


def select_guide_listings(category_id=None, town_id=None, tag_id=None, limit=None):
    """
    Resolves the listings backing a guide page.

    Each constraint is optional. A tag with no listings yields an empty
    guide whatever the other constraints are. Results are ordered by
    rating, then review count, and capped at GUIDE_LISTING_LIMIT.
    A database failure is logged and yields an empty guide.
    """
    if limit is None:
        limit = getattr(settings, 'GUIDE_LISTING_LIMIT', 15)

    try:
        queryset = Listing.objects.published().with_relations()

        if tag_id is not None:
            listing_ids = list(
                ListingTag.objects.filter(tag_id=tag_id).values_list('listing_id', flat=True)
            )
            if not listing_ids:
                return []
            queryset = queryset.filter(pk__in=listing_ids)

        if category_id is not None:
            queryset = queryset.filter(category_id=category_id)
        if town_id is not None:
            queryset = queryset.filter(town_id=town_id)

        return list(queryset.by_rating()[:limit])
    except DatabaseError as e:
        logger.error(f"[select_guide_listings] Query failed: {e}", exc_info=True)
        return []


def get_guide_listings(page):
    return select_guide_listings(
        category_id=page.category_id,
        town_id=page.town_id,
        tag_id=page.tag_id,
    )


def get_seo_page_by_slug(slug):
    return SeoPage.objects.published().select_related('category', 'tag', 'town').filter(slug=slug).first()


def get_all_seo_pages():
    try:
        return list(
            SeoPage.objects.published().select_related('category')
            .order_by('category__display_order', 'title')
        )
    except DatabaseError as e:
        logger.error(f"[get_all_seo_pages] Query failed: {e}", exc_info=True)
        return []


def group_guides_by_category(pages):
    """
    Groups guides under their category, in category display order.
    Guides without a category are left out of the index.
    """
    groups = {}
    for page in pages:
        category = page.category
        if category is None:
            continue
        if category.pk not in groups:
            groups[category.pk] = {'category': category, 'pages': []}
        groups[category.pk]['pages'].append(page)
    return sorted(groups.values(), key=lambda group: (group['category'].display_order, group['category'].name))
