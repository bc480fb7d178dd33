# bestseatosky/app/directory/queries.py
"""
Read helpers over the directory tables.

List-like reads degrade to an empty list when the database fails, so a page
can always render its empty state. Single-record reads return None when the
record does not exist; callers turn that into a 404.
"""
import asyncio
import logging

from asgiref.sync import async_to_sync, sync_to_async
from django.conf import settings
from django.db import DatabaseError
from django.db.models import F

from .models import Category, Listing, Tag, Town

logger = logging.getLogger(__name__)


def get_categories():
    try:
        return list(Category.objects.order_by('display_order', 'name'))
    except DatabaseError as e:
        logger.error(f"[get_categories] Query failed: {e}", exc_info=True)
        return []


def get_towns():
    try:
        return list(Town.objects.order_by('display_order', 'name'))
    except DatabaseError as e:
        logger.error(f"[get_towns] Query failed: {e}", exc_info=True)
        return []


def get_tags_by_category(category):
    try:
        return list(Tag.objects.filter(category=category).order_by('name'))
    except DatabaseError as e:
        logger.error(f"[get_tags_by_category] Query failed for {category.slug}: {e}", exc_info=True)
        return []


def get_category_by_slug(slug):
    return Category.objects.filter(slug=slug).first()


def get_listings(category=None, town=None, featured=None, limit=None):
    """
    Published listings, best rated first.
    """
    queryset = Listing.objects.published().with_relations()

    if category is not None:
        queryset = queryset.filter(category=category)
    if town is not None:
        queryset = queryset.filter(town=town)
    if featured:
        queryset = queryset.filter(featured=True)

    queryset = queryset.by_rating()
    if limit:
        queryset = queryset[:limit]

    try:
        return list(queryset)
    except DatabaseError as e:
        logger.error(f"[get_listings] Query failed: {e}", exc_info=True)
        return []


def get_listing_by_slug(slug):
    return Listing.objects.published().with_relations().filter(slug=slug).first()


def get_listing_count(category=None):
    queryset = Listing.objects.published()
    if category is not None:
        queryset = queryset.filter(category=category)
    try:
        return queryset.count()
    except DatabaseError as e:
        logger.error(f"[get_listing_count] Query failed: {e}", exc_info=True)
        return 0


def get_related_listings(listing):
    """Other listings of the same category in the same town."""
    if not listing.town_id:
        return []
    limit = getattr(settings, 'RELATED_LISTING_LIMIT', 4)
    try:
        return list(
            Listing.objects.published().with_relations()
            .filter(town_id=listing.town_id, category_id=listing.category_id)
            .exclude(pk=listing.pk)
            .by_rating()[:limit]
        )
    except DatabaseError as e:
        logger.error(f"[get_related_listings] Query failed for {listing.slug}: {e}", exc_info=True)
        return []


def get_cross_category_listings(listing):
    """Listings from other categories in the same town."""
    if not listing.town_id:
        return []
    limit = getattr(settings, 'CROSS_CATEGORY_LISTING_LIMIT', 3)
    try:
        return list(
            Listing.objects.published().with_relations()
            .filter(town_id=listing.town_id)
            .exclude(category_id=listing.category_id)
            .exclude(pk=listing.pk)
            .by_rating()[:limit]
        )
    except DatabaseError as e:
        logger.error(f"[get_cross_category_listings] Query failed for {listing.slug}: {e}", exc_info=True)
        return []


async def _gather_nearby(listing):
    results = await asyncio.gather(
        sync_to_async(get_related_listings)(listing),
        sync_to_async(get_cross_category_listings)(listing),
        return_exceptions=True,
    )
    nearby = []
    for result in results:
        if isinstance(result, Exception):
            logger.error(f"[get_nearby_listings] Lookup failed for {listing.slug}: {result}")
            nearby.append([])
        else:
            nearby.append(result)
    return nearby


def get_nearby_listings(listing):
    """
    Fetches the related and cross-category listings as one batch.
    Returns (related, cross_category); a failed branch is an empty list.
    """
    related, cross_category = async_to_sync(_gather_nearby)(listing)
    return related, cross_category


def search_listings(query):
    """Case-insensitive name search over published listings."""
    min_length = getattr(settings, 'SEARCH_MIN_QUERY_LENGTH', 2)
    limit = getattr(settings, 'SEARCH_RESULT_LIMIT', 12)

    query = (query or '').strip()
    if len(query) < min_length:
        return []

    try:
        return list(
            Listing.objects.published().with_relations()
            .filter(name__icontains=query)
            .order_by(F('google_rating').desc(nulls_last=True))[:limit]
        )
    except DatabaseError as e:
        logger.error(f"[search_listings] Search for '{query}' failed: {e}", exc_info=True)
        return []
