# bestseatosky/app/core/views.py
from django.conf import settings
from django.http import HttpResponse
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.http import require_GET

from directory.queries import get_categories, get_listings

ADVERTISING_TIERS = [
    {
        'name': 'Claimed Listing',
        'price': 'Free',
        'period': '',
        'features': [
            'Verify your business ownership',
            'Update your description and contact info',
            'Add your logo and photos',
            'Respond to the "Is this your business?" link',
        ],
        'cta': 'Claim Your Listing',
        'subject': 'Claim My Listing',
        'highlight': False,
    },
    {
        'name': 'Featured Listing',
        'price': '$49',
        'period': '/month',
        'features': [
            'Everything in Claimed',
            'Featured badge on your listing',
            'Priority placement in category pages',
            'Appear in "Featured Places" on homepage',
            'Highlighted in relevant guide pages',
        ],
        'cta': 'Get Featured',
        'subject': 'Featured Listing Inquiry',
        'highlight': True,
    },
    {
        'name': 'Sponsored Guide',
        'price': '$149',
        'period': '/month',
        'features': [
            'Everything in Featured',
            'Top placement in a guide of your choice',
            'Sponsored banner on category pages',
            'Monthly traffic report',
        ],
        'cta': 'Sponsor a Guide',
        'subject': 'Sponsored Guide Inquiry',
        'highlight': False,
    },
]


def home(request):
    """
    Hero with category links, featured listings and the search box.
    """
    featured_limit = getattr(settings, 'FEATURED_LISTING_LIMIT', 6)
    context = {
        'categories': get_categories(),
        'featured_listings': get_listings(featured=True, limit=featured_limit),
    }
    return render(request, 'core/home.html', context)


def advertise(request):
    context = {
        'tiers': ADVERTISING_TIERS,
        'meta_title': 'Advertise on Best Sea to Sky | Reach Thousands of Visitors',
        'meta_description': (
            'Promote your business to tourists and locals exploring the Sea to Sky corridor. '
            'Featured listings, sponsored guides, and premium placement on bestseatosky.com'
        ),
    }
    return render(request, 'core/advertise.html', context)


def privacy(request):
    return render(request, 'core/privacy.html', {'meta_title': 'Privacy Policy | Best Sea to Sky'})


def terms(request):
    return render(request, 'core/terms.html', {'meta_title': 'Terms of Use | Best Sea to Sky'})


@require_GET
def robots_txt(request):
    lines = [
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin/",
        "Disallow: /api/",
        "",
        f"Sitemap: {settings.SITE_URL.rstrip('/')}{reverse('sitemap')}",
    ]
    return HttpResponse("\n".join(lines) + "\n", content_type="text/plain")
