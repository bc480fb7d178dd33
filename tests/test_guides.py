"""
Tests for guide listing selection and the guide index.
"""

from unittest import mock

import pytest
from django.db import DatabaseError

from seo.models import SeoPage
from seo.selectors import get_all_seo_pages, get_guide_listings, group_guides_by_category, select_guide_listings


def names(items):
    return [item.name for item in items]


@pytest.mark.django_db
class TestSelectGuideListings:
    def test_tag_without_listings_is_empty_whatever_else(self, categories, towns, tags, listings):
        from directory.models import Tag

        lonely = Tag.objects.create(slug="rooftop", name="Rooftop", category=categories["eat"])
        assert select_guide_listings(tag_id=lonely.pk) == []
        assert select_guide_listings(category_id=categories["eat"].pk, town_id=towns["squamish"].pk, tag_id=lonely.pk) == []

    def test_tag_with_only_draft_listings_is_empty(self, categories, tags, make_listing):
        make_listing("Hidden Patio", categories["eat"], tags=[tags["brunch"]], status="draft")
        assert select_guide_listings(tag_id=tags["brunch"].pk) == []

    def test_all_constraints_intersect(self, categories, towns, tags, listings):
        result = select_guide_listings(
            category_id=categories["eat"].pk, town_id=towns["squamish"].pk, tag_id=tags["patio"].pk,
        )
        assert names(result) == ["Howe Sound Brewing"]

    def test_no_constraints_is_every_published_listing(self, listings):
        result = select_guide_listings()
        assert names(result)[:3] == ["Stawamus Chief Trail", "Fergies Cafe", "Howe Sound Brewing"]
        assert len(result) == 6

    def test_sorted_by_rating_then_reviews(self, categories, towns, make_listing):
        make_listing("B", categories["eat"], towns["whistler"], google_rating=4.5, google_review_count=10)
        make_listing("A", categories["eat"], towns["whistler"], google_rating=4.5, google_review_count=500)
        make_listing("C", categories["eat"], towns["whistler"], google_rating=4.8, google_review_count=1)
        make_listing("D", categories["eat"], towns["whistler"])
        result = select_guide_listings(town_id=towns["whistler"].pk)
        assert names(result) == ["C", "A", "B", "D"]

    def test_capped_at_fifteen(self, categories, make_listing):
        for index in range(18):
            make_listing(f"Spot {index}", categories["eat"], google_rating=3.0 + index / 10)
        result = select_guide_listings(category_id=categories["eat"].pk)
        assert len(result) == 15
        assert result[0].name == "Spot 17"

    def test_limit_comes_from_settings(self, settings, listings):
        settings.GUIDE_LISTING_LIMIT = 2
        assert len(select_guide_listings()) == 2

    def test_database_failure_gives_empty_guide(self, listings):
        with mock.patch("seo.selectors.Listing") as listing_model:
            listing_model.objects.published.side_effect = DatabaseError("timeout")
            assert select_guide_listings() == []

    def test_page_constraints_are_used(self, guide, listings):
        assert names(get_guide_listings(guide)) == ["Howe Sound Brewing"]


@pytest.mark.django_db
class TestGuideIndex:
    def test_only_published_guides(self, guide):
        SeoPage.objects.create(slug="draft-guide", title="Draft Guide", status="draft")
        assert [page.slug for page in get_all_seo_pages()] == ["best-patios-squamish"]

    def test_grouped_by_category_in_display_order(self, guide, categories):
        SeoPage.objects.create(slug="best-hikes", title="Best Hikes", category=categories["play"], status="published")
        SeoPage.objects.create(slug="best-brunch", title="Best Brunch", category=categories["eat"], status="published")
        SeoPage.objects.create(slug="uncategorised", title="Uncategorised", status="published")

        groups = group_guides_by_category(get_all_seo_pages())

        assert [group["category"].slug for group in groups] == ["eat", "play"]
        assert [page.slug for page in groups[0]["pages"]] == ["best-brunch", "best-patios-squamish"]
        assert all(page.slug != "uncategorised" for group in groups for page in group["pages"])
