"""
Pytest configuration and fixtures for the Best Sea to Sky test suite.
"""

import pytest


@pytest.fixture
def categories(db):
    """The eat and play categories."""
    from directory.models import Category

    return {
        "eat": Category.objects.create(slug="eat", name="Eat", description="Restaurants and cafes", display_order=1),
        "play": Category.objects.create(slug="play", name="Play", description="Outdoor adventures", display_order=3),
    }


@pytest.fixture
def towns(db):
    from directory.models import Town

    return {
        "squamish": Town.objects.create(slug="squamish", name="Squamish", display_order=1),
        "whistler": Town.objects.create(slug="whistler", name="Whistler", display_order=2),
        "pemberton": Town.objects.create(slug="pemberton", name="Pemberton", display_order=3),
    }


@pytest.fixture
def tags(categories):
    from directory.models import Tag

    return {
        "patio": Tag.objects.create(slug="patio", name="Patio", category=categories["eat"]),
        "vegan": Tag.objects.create(slug="vegan", name="Vegan", category=categories["eat"]),
        "brunch": Tag.objects.create(slug="brunch", name="Brunch", category=categories["eat"]),
        "hiking": Tag.objects.create(slug="hiking", name="Hiking", category=categories["play"]),
    }


@pytest.fixture
def make_listing(db):
    """Factory for listings, published unless told otherwise."""
    from directory.models import Listing, PublishStatus

    def _make(name, category=None, town=None, tags=(), **fields):
        fields.setdefault("slug", name.lower().replace(" ", "-").replace("'", ""))
        fields.setdefault("status", PublishStatus.PUBLISHED)
        fields.setdefault("description", f"{name} in the Sea to Sky corridor.")
        listing = Listing.objects.create(name=name, category=category, town=town, **fields)
        for tag in tags:
            listing.tags.add(tag)
        return listing

    return _make


@pytest.fixture
def listings(categories, towns, tags, make_listing):
    """
    A small directory: four published eat listings, one draft,
    one eat listing without a town and one play listing.
    """
    eat, play = categories["eat"], categories["play"]
    return {
        "brewpub": make_listing(
            "Howe Sound Brewing", eat, towns["squamish"], [tags["patio"]],
            google_rating=4.6, google_review_count=2000, featured=True, price_level=2,
            address="37801 Cleveland Ave, Squamish, BC", website="howesound.com",
            phone="+16048922603",
        ),
        "cafe": make_listing(
            "Fergies Cafe", eat, towns["squamish"], [tags["vegan"], tags["brunch"]],
            google_rating=4.7, google_review_count=800, price_level=1,
        ),
        "diner": make_listing(
            "Mountain Diner", eat, towns["whistler"], [tags["patio"]],
            google_rating=4.2, google_review_count=300, price_level=2,
        ),
        "grill": make_listing("Unrated Grill", eat, towns["squamish"]),
        "draft": make_listing(
            "Secret Bistro", eat, towns["squamish"], [tags["patio"]],
            google_rating=5.0, google_review_count=10, status="draft",
        ),
        "roaming": make_listing("Roaming Food Truck", eat, None, google_rating=4.0, google_review_count=50),
        "chief": make_listing(
            "Stawamus Chief Trail", play, towns["squamish"], [tags["hiking"]],
            google_rating=4.9, google_review_count=5000, price_level=0,
        ),
    }


@pytest.fixture
def guide(categories, towns, tags):
    from seo.models import SeoPage

    return SeoPage.objects.create(
        slug="best-patios-squamish",
        title="Best Patios in Squamish",
        meta_description="Sunny patios around Squamish.",
        intro_content="Our favourite patios.",
        category=categories["eat"],
        town=towns["squamish"],
        tag=tags["patio"],
        status="published",
    )


@pytest.fixture
def post(db):
    from blog.models import Post

    return Post.objects.create(
        title="A Weekend in Squamish",
        excerpt="Two days of climbing, coffee and craft beer.",
        content="<p>Start at the Chief.</p>",
        status=Post.PostStatus.PUBLISHED,
    )
