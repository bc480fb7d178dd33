# bestseatosky/app/seo/structured_data.py
"""
JSON-LD builders for listing, category, guide and blog pages.
"""
from django.conf import settings

SCHEMA_CONTEXT = 'https://schema.org'
CATEGORY_ITEM_LIST_SIZE = 20


def absolute_url(path):
    return f"{settings.SITE_URL.rstrip('/')}{path}"


def aggregate_rating(listing):
    return {
        '@type': 'AggregateRating',
        'ratingValue': listing.google_rating,
        'reviewCount': listing.google_review_count,
    }


def listing_schema(listing):
    if listing.schema_json:
        return listing.schema_json

    schema = {
        '@context': SCHEMA_CONTEXT,
        '@type': listing.schema_type or 'LocalBusiness',
        'name': listing.name,
        'description': listing.description,
        'address': {
            '@type': 'PostalAddress',
            'streetAddress': listing.address,
            'addressLocality': listing.town.name if listing.town_id else 'Sea to Sky',
            'addressRegion': 'BC',
            'addressCountry': 'CA',
        },
    }
    # Google rejects an aggregateRating without reviews
    if listing.google_rating and listing.google_review_count:
        schema['aggregateRating'] = aggregate_rating(listing)
    if listing.phone:
        schema['telephone'] = str(listing.phone)
    schema['url'] = absolute_url(listing.get_absolute_url())
    schema['priceRange'] = listing.price_range
    if listing.website:
        schema['sameAs'] = [listing.website]
    if listing.featured_image_url:
        schema['image'] = listing.featured_image_url
    return schema


def category_item_list(category, heading, listings):
    return {
        '@context': SCHEMA_CONTEXT,
        '@type': 'ItemList',
        'name': f"{heading} in Sea to Sky",
        'description': category.description,
        'numberOfItems': len(listings),
        'itemListElement': [
            {
                '@type': 'ListItem',
                'position': position,
                'name': listing.name,
                'url': absolute_url(f"/{category.slug}/{listing.slug}/"),
            }
            for position, listing in enumerate(listings[:CATEGORY_ITEM_LIST_SIZE], start=1)
        ],
    }


def guide_item_list(page, listings):
    if page.schema_json:
        return page.schema_json

    elements = []
    for position, listing in enumerate(listings, start=1):
        item = {
            '@type': 'LocalBusiness',
            'name': listing.name,
            'description': listing.short_description or listing.description[:155],
            'address': listing.address,
        }
        if listing.google_rating:
            item['aggregateRating'] = aggregate_rating(listing)
        if listing.website:
            item['url'] = listing.website
        elements.append({'@type': 'ListItem', 'position': position, 'item': item})

    return {
        '@context': SCHEMA_CONTEXT,
        '@type': 'ItemList',
        'name': page.title,
        'description': page.meta_description,
        'numberOfItems': len(listings),
        'itemListElement': elements,
    }


def article_schema(post):
    site_name = getattr(settings, 'SITE_NAME', 'Best Sea to Sky')
    published = post.published_at or post.created_at
    schema = {
        '@context': SCHEMA_CONTEXT,
        '@type': 'Article',
        'headline': post.title,
        'description': post.meta_description or post.excerpt,
        'author': {
            '@type': 'Organization',
            'name': post.author or site_name,
        },
        'datePublished': published.isoformat() if published else None,
        'dateModified': (post.updated_at or published).isoformat() if (post.updated_at or published) else None,
        'publisher': {
            '@type': 'Organization',
            'name': site_name,
            'url': settings.SITE_URL,
        },
        'mainEntityOfPage': absolute_url(post.get_absolute_url()),
    }
    if post.featured_image:
        schema['image'] = post.featured_image
    return schema
