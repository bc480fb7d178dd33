# bestseatosky/app/directory/filters.py
"""
Town and tag narrowing for category pages.

A category page loads every published listing of the category once and
narrows it here. Listings only need to expose ``town_slug`` and
``tag_slugs``, which the Listing model provides.
"""
from dataclasses import dataclass, field

ALL_TOWNS = 'all'


@dataclass
class FilterResult:
    listings: list = field(default_factory=list)

    @property
    def count(self):
        return len(self.listings)

    @property
    def is_empty(self):
        return not self.listings


def matches_town(listing, active_town):
    if active_town == ALL_TOWNS:
        return True
    town_slug = listing.town_slug
    return town_slug is not None and town_slug == active_town


def matches_tags(listing, active_tags):
    # Any selected tag is enough, selections are OR-ed together
    if not active_tags:
        return True
    return not set(listing.tag_slugs).isdisjoint(active_tags)


def filter_listings(listings, active_town=ALL_TOWNS, active_tags=()):
    """
    Returns the listings passing both the town and the tag predicate,
    in their original order.
    """
    active_town = active_town or ALL_TOWNS
    selected = set(active_tags)
    return FilterResult(listings=[
        listing for listing in listings
        if matches_town(listing, active_town) and matches_tags(listing, selected)
    ])


def toggle_tag(active_tags, tag_slug):
    """
    Deselects tag_slug when it is active, otherwise appends it.
    Returns a new list and keeps selection order.
    """
    if tag_slug in active_tags:
        return [slug for slug in active_tags if slug != tag_slug]
    return [*active_tags, tag_slug]


def parse_active_tags(raw_tags):
    """De-duplicated tag slugs from the query string, first occurrence wins."""
    active = []
    for slug in raw_tags:
        slug = slug.strip()
        if slug and slug not in active:
            active.append(slug)
    return active
