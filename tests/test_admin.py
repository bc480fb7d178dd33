"""
Tests for the back office: changelists and spreadsheet export.
"""

import pytest

from directory.resources import ListingResource, TagResource


@pytest.mark.django_db
class TestAdminChangelists:
    @pytest.mark.parametrize("url", [
        "/admin/directory/category/",
        "/admin/directory/town/",
        "/admin/directory/tag/",
        "/admin/directory/listing/",
        "/admin/seo/seopage/",
        "/admin/seo/pagemetadata/",
        "/admin/blog/post/",
        "/admin/leads/listingrequest/",
    ])
    def test_changelist_loads(self, admin_client, listings, guide, post, url):
        assert admin_client.get(url).status_code == 200

    def test_listing_change_form_loads(self, admin_client, listings):
        response = admin_client.get(f"/admin/directory/listing/{listings['brewpub'].pk}/change/")
        assert response.status_code == 200


@pytest.mark.django_db
class TestExport:
    def test_listings_export_with_slugs_for_relations(self, listings):
        rows = {row["slug"]: row for row in ListingResource().export().dict}
        brewpub = rows["howe-sound-brewing"]
        assert brewpub["category"] == "eat"
        assert brewpub["town"] == "squamish"
        assert brewpub["tags"] == str(listings["brewpub"].tags.get().pk)
        assert rows["roaming-food-truck"]["town"] == ""

    def test_tags_export_with_category_slug(self, tags):
        rows = TagResource().export().dict
        assert {(row["category"], row["slug"]) for row in rows} == {
            ("eat", "patio"), ("eat", "vegan"), ("eat", "brunch"), ("play", "hiking"),
        }
