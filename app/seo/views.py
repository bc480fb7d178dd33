# bestseatosky/app/seo/views.py
import logging

from django.http import Http404
from django.shortcuts import render

from .selectors import get_all_seo_pages, get_guide_listings, get_seo_page_by_slug, group_guides_by_category
from .structured_data import absolute_url, guide_item_list

logger = logging.getLogger(__name__)


def guide_list(request):
    """
    Index of published guides, grouped by category.
    """
    pages = get_all_seo_pages()
    context = {
        'guide_groups': group_guides_by_category(pages),
        'guide_count': len(pages),
        'meta_title': 'Sea to Sky Guides | Best Of Lists for Squamish, Whistler & Pemberton',
        'meta_description': (
            'Browse our curated guides to the best restaurants, hikes, hotels, and attractions '
            'across the Sea to Sky corridor. Rankings based on real Google reviews.'
        ),
    }
    return render(request, 'seo/guide_list.html', context)


def guide_detail(request, slug):
    """
    A single guide with its ranked listings.
    """
    page = get_seo_page_by_slug(slug)
    if page is None:
        raise Http404("Guide not found")

    listings = get_guide_listings(page)
    logger.debug(f"[guide_detail] {slug}: {len(listings)} listings")

    context = {
        'page': page,
        'listings': listings,
        'schema': guide_item_list(page, listings),
        'meta_title': page.title,
        'meta_description': page.meta_description,
        'canonical_url': page.canonical_url or absolute_url(page.get_absolute_url()),
        'og_type': 'website',
    }
    return render(request, 'seo/guide_detail.html', context)
