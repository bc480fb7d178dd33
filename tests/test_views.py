"""
Tests for the public pages and the search endpoint.
"""

from unittest import mock

import pytest
from django.db import DatabaseError
from django.urls import reverse

from seo.models import PageMetadata


@pytest.mark.django_db
class TestHomePage:
    def test_renders_categories_and_featured(self, client, listings):
        response = client.get("/")
        assert response.status_code == 200
        assert [listing.name for listing in response.context["featured_listings"]] == ["Howe Sound Brewing"]
        assert b"Featured Places" in response.content
        assert b"Best Sea to Sky | Your Guide to Squamish, Whistler &amp; Pemberton" in response.content

    def test_renders_with_empty_directory(self, client, db):
        response = client.get("/")
        assert response.status_code == 200
        assert b"Featured Places" not in response.content

    def test_category_read_failure_still_renders(self, client, listings):
        with mock.patch("directory.queries.Category") as category_model:
            category_model.objects.order_by.side_effect = DatabaseError("connection lost")
            response = client.get("/")
        assert response.status_code == 200
        assert response.context["categories"] == []



@pytest.mark.django_db
class TestCategoryPage:
    def test_lists_published_listings(self, client, listings):
        response = client.get("/eat/")
        assert response.status_code == 200
        assert response.context["heading"] == "Best Places to Eat"
        assert response.context["total_count"] == 5
        assert response.context["result_count"] == 5
        assert b"5 places found" in response.content
        assert b"Secret Bistro" not in response.content
        assert b'"@type": "ItemList"' in response.content

    def test_town_filter(self, client, listings):
        response = client.get("/eat/", {"town": "whistler"})
        assert [listing.name for listing in response.context["listings"]] == ["Mountain Diner"]
        assert response.context["total_count"] == 5

    def test_tag_filter_is_or(self, client, listings):
        response = client.get("/eat/?tag=patio&tag=vegan")
        assert [listing.name for listing in response.context["listings"]] == [
            "Fergies Cafe", "Howe Sound Brewing", "Mountain Diner",
        ]

    def test_tag_chip_links_toggle(self, client, listings):
        response = client.get("/eat/?town=squamish&tag=patio")
        options = {option["slug"]: option for option in response.context["tag_options"]}
        assert options["patio"]["active"]
        assert options["patio"]["url"] == "/eat/?town=squamish"
        assert options["vegan"]["url"] == "/eat/?town=squamish&tag=patio&tag=vegan"

    def test_empty_state(self, client, listings):
        response = client.get("/eat/?town=pemberton")
        assert response.context["is_empty"]
        assert b"No places found" in response.content
        assert b"Try adjusting your filters" in response.content

    def test_unknown_category_is_404(self, client, listings):
        assert client.get("/brunch/").status_code == 404


@pytest.mark.django_db
class TestListingDetailPage:
    def test_renders_listing_with_decorated_links(self, client, listings):
        response = client.get("/eat/howe-sound-brewing/")
        assert response.status_code == 200
        assert response.context["website_url"] == (
            "https://howesound.com/?utm_source=bestseatosky&utm_medium=directory"
            "&utm_campaign=eat&utm_content=howe-sound-brewing"
        )
        assert response.context["directions_url"].startswith("https://www.google.com/maps/search/?api=1&query=37801")
        assert "utm_content=howe-sound-brewing" in response.context["directions_url"]
        assert response.context["claim_url"].startswith("mailto:hello@bestseatosky.com?subject=Claim%3A%20Howe")

    def test_related_and_cross_category(self, client, listings):
        response = client.get("/eat/howe-sound-brewing/")
        assert [listing.name for listing in response.context["related_listings"]] == ["Fergies Cafe", "Unrated Grill"]
        assert [listing.name for listing in response.context["cross_category_listings"]] == ["Stawamus Chief Trail"]

    def test_listing_without_town_has_no_related_sections(self, client, listings):
        response = client.get("/eat/roaming-food-truck/")
        assert response.status_code == 200
        assert response.context["related_listings"] == []
        assert response.context["cross_category_listings"] == []
        assert response.context["directions_url"] is None

    def test_meta_title_defaults_to_listing_name(self, client, listings):
        response = client.get("/play/stawamus-chief-trail/")
        assert response.context["meta_title"] == "Stawamus Chief Trail | Best Sea to Sky"

    def test_draft_listing_is_404(self, client, listings):
        assert client.get("/eat/secret-bistro/").status_code == 404

    def test_missing_listing_is_404(self, client, listings):
        assert client.get("/eat/nowhere/").status_code == 404


@pytest.mark.django_db
class TestSearchApi:
    url = "/api/search/"

    def test_matches_by_name(self, client, listings):
        response = client.get(self.url, {"q": "brew"})
        assert response.status_code == 200
        data = response.json()
        assert [item["name"] for item in data] == ["Howe Sound Brewing"]
        assert data[0]["category"] == {"slug": "eat", "name": "Eat"}
        assert data[0]["town"] == {"slug": "squamish", "name": "Squamish"}
        assert data[0]["url"] == "/eat/howe-sound-brewing/"

    def test_short_query_is_empty_array(self, client, listings):
        response = client.get(self.url, {"q": "b"})
        assert response.status_code == 200
        assert response.json() == []

    def test_missing_query_is_empty_array(self, client, listings):
        assert client.get(self.url).json() == []

    def test_no_match_is_empty_array(self, client, listings):
        assert client.get(self.url, {"q": "sushi"}).json() == []

    def test_database_failure_is_empty_array(self, client, listings):
        with mock.patch("directory.queries.Listing") as listing_model:
            listing_model.objects.published.side_effect = DatabaseError("down")
            response = client.get(self.url, {"q": "brew"})
        assert response.status_code == 200
        assert response.json() == []

    def test_post_not_allowed(self, client, db):
        assert client.post(self.url, {"q": "brew"}).status_code == 405


@pytest.mark.django_db
class TestGuidePages:
    def test_guide_index(self, client, guide):
        response = client.get(reverse("seo:guide_list"))
        assert response.status_code == 200
        assert response.context["guide_count"] == 1
        assert b"Best Patios in Squamish" in response.content

    def test_guide_detail(self, client, guide, listings):
        response = client.get("/guide/best-patios-squamish/")
        assert response.status_code == 200
        assert [listing.name for listing in response.context["listings"]] == ["Howe Sound Brewing"]
        assert response.context["schema"]["numberOfItems"] == 1

    def test_guide_with_no_listings(self, client, guide):
        response = client.get("/guide/best-patios-squamish/")
        assert response.status_code == 200
        assert b"No listings found for this guide yet." in response.content

    def test_unknown_guide_is_404(self, client, db):
        assert client.get("/guide/missing/").status_code == 404


@pytest.mark.django_db
class TestBlogPages:
    def test_post_list_shows_published_only(self, client, post):
        from blog.models import Post

        Post.objects.create(title="Unfinished Draft", content="<p>todo</p>")
        response = client.get("/blog/")
        assert response.status_code == 200
        assert b"A Weekend in Squamish" in response.content
        assert b"Unfinished Draft" not in response.content

    def test_post_detail_renders_html_content(self, client, post):
        response = client.get(post.get_absolute_url())
        assert response.status_code == 200
        assert b"<p>Start at the Chief.</p>" in response.content
        assert response.context["schema"]["@type"] == "Article"

    def test_draft_post_is_404(self, client, db):
        from blog.models import Post

        draft = Post.objects.create(title="Hidden", content="<p>x</p>")
        assert client.get(f"/blog/{draft.slug}/").status_code == 404


@pytest.mark.django_db
class TestStaticPages:
    @pytest.mark.parametrize("path", ["/advertise/", "/privacy/", "/terms/", "/get-listed/"])
    def test_renders(self, client, path):
        assert client.get(path).status_code == 200

    def test_page_metadata_overrides_title(self, client):
        PageMetadata.objects.create(
            page_name="Advertise", page_path="/advertise/",
            meta_title="Advertise With Us", meta_description="Reach visitors.",
        )
        response = client.get("/advertise/")
        assert b"<title>Advertise With Us</title>" in response.content
        assert b'content="Reach visitors."' in response.content
