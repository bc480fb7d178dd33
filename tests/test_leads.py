"""
Tests for the get-listed lead form and its JSON endpoint.
"""

import json
from smtplib import SMTPException
from unittest import mock

import pytest
from django.core import mail
from django.db import DatabaseError

from leads.forms import INVALID_EMAIL_MESSAGE, REQUIRED_FIELDS_MESSAGE, ListingRequestForm
from leads.models import ListingRequest

API_URL = "/api/get-listed/"


def post_json(client, payload):
    body = payload if isinstance(payload, str) else json.dumps(payload)
    return client.post(API_URL, data=body, content_type="application/json")


@pytest.fixture
def submission(categories, towns):
    return {
        "business_name": "Wild Wood Bistro",
        "contact_name": "Sam Rivers",
        "email": "sam@wildwood.ca",
        "phone": "604-555-0123",
        "website": "wildwood.ca",
        "category_id": categories["eat"].pk,
        "town_id": towns["squamish"].pk,
        "message": "Family run since 2009.",
    }


@pytest.mark.django_db
class TestGetListedApi:
    def test_valid_submission_is_stored(self, client, submission):
        response = post_json(client, submission)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        listing_request = ListingRequest.objects.get()
        assert listing_request.business_name == "Wild Wood Bistro"
        assert listing_request.category.slug == "eat"
        assert listing_request.town.slug == "squamish"
        assert listing_request.status == ListingRequest.RequestStatus.NEW

    def test_owners_are_emailed(self, client, submission):
        post_json(client, submission)

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.subject == "New Listing Request: Wild Wood Bistro"
        assert message.to == ["leads@example.com"]
        assert "sam@wildwood.ca" in message.body

    def test_only_required_fields(self, client, db):
        response = post_json(client, {"business_name": "Tiny Co", "contact_name": "Al", "email": "al@tiny.co"})
        assert response.status_code == 200
        listing_request = ListingRequest.objects.get()
        assert listing_request.phone is None
        assert listing_request.category is None

    def test_whitespace_business_name_is_rejected(self, client, submission):
        submission["business_name"] = "   "
        response = post_json(client, submission)
        assert response.status_code == 400
        assert response.json() == {"error": REQUIRED_FIELDS_MESSAGE}
        assert not ListingRequest.objects.exists()

    @pytest.mark.parametrize("field", ["business_name", "contact_name", "email"])
    def test_each_required_field(self, client, submission, field):
        del submission[field]
        response = post_json(client, submission)
        assert response.status_code == 400
        assert response.json()["error"] == "Business name, contact name, and email are required."

    @pytest.mark.parametrize("email", ["foo@bar", "foo bar@baz.com", "@baz.com", "foo@"])
    def test_invalid_email_is_rejected(self, client, submission, email):
        submission["email"] = email
        response = post_json(client, submission)
        assert response.status_code == 400
        assert response.json() == {"error": INVALID_EMAIL_MESSAGE}
        assert not ListingRequest.objects.exists()

    def test_email_is_checked_after_trimming(self, client, submission):
        submission["email"] = "  sam@wildwood.ca  "
        assert post_json(client, submission).status_code == 200
        assert ListingRequest.objects.get().email == "sam@wildwood.ca"

    def test_unknown_category_is_rejected(self, client, submission):
        submission["category_id"] = 9999
        response = post_json(client, submission)
        assert response.status_code == 400
        assert not ListingRequest.objects.exists()

    @pytest.mark.parametrize("body", ["not json", "[1, 2]", "", "\"text\""])
    def test_malformed_body(self, client, db, body):
        response = post_json(client, body)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request."}

    def test_insert_failure_is_500(self, client, submission):
        with mock.patch.object(ListingRequestForm, "save", side_effect=DatabaseError("disk full")):
            response = post_json(client, submission)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to submit request. Please try again."}
        assert len(mail.outbox) == 0

    def test_mail_failure_does_not_fail_submission(self, client, submission):
        with mock.patch("leads.notifications.send_mail", side_effect=SMTPException("relay down")):
            response = post_json(client, submission)
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert ListingRequest.objects.count() == 1

    def test_email_template_failure_does_not_fail_submission(self, client, submission):
        with mock.patch("leads.notifications.render_to_string", side_effect=RuntimeError("template broke")):
            response = post_json(client, submission)
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert ListingRequest.objects.count() == 1
        assert len(mail.outbox) == 0

    def test_no_recipients_skips_mail(self, client, submission, settings):
        settings.LEAD_NOTIFICATION_RECIPIENTS = []
        assert post_json(client, submission).status_code == 200
        assert len(mail.outbox) == 0

    def test_get_not_allowed(self, client, db):
        assert client.get(API_URL).status_code == 405


@pytest.mark.django_db
class TestGetListedPage:
    def test_form_post_fallback_redirects(self, client, submission):
        response = client.post("/get-listed/", submission)
        assert response.status_code == 302
        assert response["Location"] == "/get-listed/?submitted=1"
        assert ListingRequest.objects.count() == 1

    def test_invalid_form_post_shows_error(self, client, submission):
        submission["email"] = "foo@bar"
        response = client.post("/get-listed/", submission)
        assert response.status_code == 200
        assert INVALID_EMAIL_MESSAGE.encode() in response.content

    def test_submitted_page_shows_confirmation(self, client, db):
        response = client.get("/get-listed/?submitted=1")
        assert response.context["submitted"]
        assert b"Request submitted!" in response.content
