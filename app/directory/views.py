# bestseatosky/app/directory/views.py
import logging
from urllib.parse import quote, urlencode

from django.conf import settings
from django.http import Http404, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from core.category_styles import category_heading, style_for
from seo.structured_data import absolute_url, category_item_list, listing_schema
from .filters import ALL_TOWNS, filter_listings, parse_active_tags, toggle_tag
from .queries import (
    get_category_by_slug, get_listing_by_slug, get_listings, get_nearby_listings,
    get_tags_by_category, get_towns, search_listings,
)
from .utm import build_utm_url, google_maps_directions_url

logger = logging.getLogger(__name__)


def _filter_url(path, town, tags):
    params = []
    if town and town != ALL_TOWNS:
        params.append(('town', town))
    params.extend(('tag', slug) for slug in tags)
    return f"{path}?{urlencode(params)}" if params else path


def category(request, category_slug):
    """
    All published listings of a category, narrowed by ?town= and ?tag=.
    """
    category = get_category_by_slug(category_slug)
    if category is None:
        raise Http404("Category not found")

    listings = get_listings(category=category)
    tags = get_tags_by_category(category)
    towns = get_towns()

    active_town = request.GET.get('town') or ALL_TOWNS
    active_tags = parse_active_tags(request.GET.getlist('tag'))
    result = filter_listings(listings, active_town, active_tags)

    town_options = [{
        'slug': ALL_TOWNS,
        'name': 'All',
        'active': active_town == ALL_TOWNS,
        'url': _filter_url(request.path, ALL_TOWNS, active_tags),
    }]
    for town in towns:
        town_options.append({
            'slug': town.slug,
            'name': town.name,
            'active': active_town == town.slug,
            'url': _filter_url(request.path, town.slug, active_tags),
        })

    tag_options = [
        {
            'slug': tag.slug,
            'name': tag.name,
            'active': tag.slug in active_tags,
            'url': _filter_url(request.path, active_town, toggle_tag(active_tags, tag.slug)),
        }
        for tag in tags
    ]

    heading = category_heading(category)
    description = (category.description or 'places').lower()
    context = {
        'category': category,
        'style': style_for(category.slug),
        'heading': heading,
        'total_count': len(listings),
        'listings': result.listings,
        'result_count': result.count,
        'is_empty': result.is_empty,
        'town_options': town_options,
        'tag_options': tag_options,
        'active_town': active_town,
        'active_tags': active_tags,
        'schema': category_item_list(category, heading, listings),
        'meta_title': f"{heading} in Sea to Sky",
        'meta_description': (
            f"Discover the best {description} across Squamish, Whistler, "
            f"and Pemberton in the Sea to Sky corridor."
        ),
        'canonical_url': absolute_url(category.get_absolute_url()),
    }
    return render(request, 'directory/category.html', context)


def listing_detail(request, category_slug, slug):
    listing = get_listing_by_slug(slug)
    if listing is None:
        raise Http404("Listing not found")

    category_slug = listing.category_slug or category_slug
    related_listings, cross_category_listings = get_nearby_listings(listing)

    directions_url = None
    if listing.address:
        directions_url = build_utm_url(
            google_maps_directions_url(listing.address),
            campaign=category_slug,
            content=listing.slug,
        )
    website_url = None
    if listing.website:
        website_url = build_utm_url(listing.website, campaign=category_slug, content=listing.slug)

    contact_email = getattr(settings, 'CONTACT_EMAIL', 'hello@bestseatosky.com')
    listing_path = f"{settings.CANONICAL_HOST}/{category_slug}/{listing.slug}"
    claim_url = (
        f"mailto:{contact_email}"
        f"?subject={quote(f'Claim: {listing.name}')}"
        f"&body={quote(f'I would like to claim the listing for {listing.name} at {listing_path}')}"
    )

    details = [{'label': 'Address', 'value': listing.address, 'icon': '📍'}]
    if listing.phone:
        details.append({'label': 'Phone', 'value': listing.phone.as_national, 'icon': '📞'})
    if listing.website:
        details.append({'label': 'Website', 'value': listing.website, 'icon': '🌐'})
    if listing.email:
        details.append({'label': 'Email', 'value': listing.email, 'icon': '✉️'})

    description = listing.meta_description or listing.short_description or listing.description[:160]
    context = {
        'listing': listing,
        'category_slug': category_slug,
        'style': style_for(category_slug),
        'tags': list(listing.tags.all()),
        'details': details,
        'directions_url': directions_url,
        'website_url': website_url,
        'claim_url': claim_url,
        'related_listings': related_listings,
        'cross_category_listings': cross_category_listings,
        'schema': listing_schema(listing),
        'meta_title': listing.meta_title or f"{listing.name} | Best Sea to Sky",
        'meta_description': description,
        'canonical_url': absolute_url(f"/{category_slug}/{listing.slug}/"),
        'og_image': listing.featured_image_url,
    }
    return render(request, 'directory/listing_detail.html', context)


def serialize_listing(listing):
    return {
        'id': listing.pk,
        'slug': listing.slug,
        'name': listing.name,
        'short_description': listing.short_description or listing.description[:160],
        'category': {'slug': listing.category.slug, 'name': listing.category.name} if listing.category_id else None,
        'town': {'slug': listing.town.slug, 'name': listing.town.name} if listing.town_id else None,
        'tags': [{'slug': tag.slug, 'name': tag.name} for tag in listing.tags.all()],
        'google_rating': listing.google_rating,
        'google_review_count': listing.google_review_count,
        'price_level': listing.price_level,
        'featured_image_url': listing.featured_image_url,
        'url': listing.get_absolute_url(),
    }


@require_GET
def api_search(request):
    """
    Name search for the search-as-you-type box. Always answers with a
    JSON array; short queries and failures give an empty one.
    """
    query = request.GET.get('q', '')
    results = search_listings(query)
    return JsonResponse([serialize_listing(listing) for listing in results], safe=False)
