"""Tests for the Flask listing page and filter form routes."""

import logging
from urllib.parse import parse_qs, urlsplit

import pytest

from jobboard.config.models import AppConfig, SiteConfig
from jobboard.domain.models import JobFilter
from jobboard.web import create_app

from tests.helpers import InMemoryJobStore, UnavailableJobStore, make_posting


class TestListingPage:
    """Tests for GET /."""

    def test_renders_approved_jobs_newest_first(self, client):
        response = client.get("/")

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "Unapproved Role" not in html
        positions = [
            html.index("Senior Python Developer"),
            html.index("Backend Engineer"),
            html.index("Data Engineer"),
        ]
        assert positions == sorted(positions)

    def test_renders_location_choices(self, client):
        html = client.get("/").get_data(as_text=True)

        assert '<option value="">All locations</option>' in html
        assert '<option value="Redmond, Washington, United States"' in html
        assert '<option value="Cupertino, California, United States"' in html

    def test_renders_job_type_choices(self, client):
        html = client.get("/").get_data(as_text=True)

        assert '<option value="">All types</option>' in html
        for job_type in ("Full-time", "Part-time", "Contract", "Temporary", "Volunteer"):
            assert f'<option value="{job_type}"' in html

    def test_no_locations_still_renders_default_option(self):
        store = InMemoryJobStore([make_posting(location=None)])
        client = create_app(store).test_client()

        html = client.get("/").get_data(as_text=True)

        assert '<option value="">All locations</option>' in html
        assert html.count('<option value="') == 1 + 1 + 5

    def test_empty_board_message(self):
        client = create_app(InMemoryJobStore()).test_client()

        response = client.get("/")

        assert response.status_code == 200
        assert "No jobs found" in response.get_data(as_text=True)

    def test_unfiltered_page_queries_without_criteria(self, client, store):
        client.get("/")

        assert store.criteria_seen == [None]

    def test_query_string_filters_listing(self, client, store):
        response = client.get("/?type=Temporary")

        html = response.get_data(as_text=True)
        assert "Senior Python Developer" in html
        assert "Backend Engineer" not in html
        assert store.criteria_seen == [JobFilter(type="Temporary")]

    def test_query_terms_match_across_fields(self, client):
        html = client.get("/?query=apple+engineer").get_data(as_text=True)

        assert "Backend Engineer" in html
        assert "Data Engineer" not in html
        assert "Senior Python Developer" not in html

    def test_remote_filter_from_query_string(self, client):
        html = client.get("/?remote=true").get_data(as_text=True)

        assert "Data Engineer" in html
        assert "Backend Engineer" not in html

    def test_sidebar_prefilled_from_query_string(self, client):
        html = client.get(
            "/?query=python&type=Temporary&location=Redmond%2C+Washington%2C+United+States&remote=true"
        ).get_data(as_text=True)

        assert 'value="python"' in html
        assert '<option value="Temporary" selected>' in html
        assert '<option value="Redmond, Washington, United States" selected>' in html
        assert 'name="remote" checked' in html

    def test_invalid_query_string_returns_400_with_full_listing(self, client):
        response = client.get("/?type=NotARealType")

        assert response.status_code == 400
        html = response.get_data(as_text=True)
        assert "type:" in html
        assert "Backend Engineer" in html

    def test_salary_and_age_rendered(self, client):
        html = client.get("/").get_data(as_text=True)

        assert "$100,000" in html
        assert " ago" in html

    def test_site_config_in_header(self, store):
        config = AppConfig(site=SiteConfig(title="Rust Jobs", tagline="Fearless hiring"))
        client = create_app(store, config).test_client()

        html = client.get("/").get_data(as_text=True)

        assert "<h1>Rust Jobs</h1>" in html
        assert "Fearless hiring" in html

    def test_html_is_escaped(self):
        store = InMemoryJobStore([make_posting(title="<script>alert(1)</script>")])
        client = create_app(store).test_client()

        html = client.get("/").get_data(as_text=True)

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_store_failure_returns_503(self):
        client = create_app(UnavailableJobStore()).test_client()

        response = client.get("/")

        assert response.status_code == 503
        assert "unavailable" in response.get_data(as_text=True)

    def test_request_id_header(self, client):
        response = client.get("/", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

    def test_request_id_generated_when_missing(self, client):
        response = client.get("/")

        assert len(response.headers["X-Request-ID"]) == 32


class TestFilterSubmission:
    """Tests for POST /filter."""

    def test_redirects_with_constructed_query_string(self, client):
        response = client.post(
            "/filter",
            data={
                "query": "microsoft",
                "type": "Temporary",
                "location": "Redmond, Washington, United States",
            },
        )

        assert response.status_code == 303
        location = response.headers["Location"]
        assert location == (
            "/?query=microsoft&type=Temporary&location=Redmond%2C+Washington%2C+United+States"
        )
        assert "remote" not in parse_qs(urlsplit(location).query)

    def test_ignores_bookkeeping_fields(self, client):
        response = client.post(
            "/filter",
            data={"$ACTION_ID_1ba9fa1e": "", "query": "python"},
        )

        assert response.status_code == 303
        assert response.headers["Location"] == "/?query=python"

    def test_remote_only(self, client):
        response = client.post(
            "/filter", data={"query": "", "type": "", "location": "", "remote": "on"}
        )

        assert response.status_code == 303
        assert parse_qs(urlsplit(response.headers["Location"]).query) == {"remote": ["true"]}

    def test_empty_submission_round_trip(self, client):
        response = client.post("/filter", data={"query": "", "type": "", "location": ""})

        assert response.status_code == 303
        # Werkzeug normalises "/?" to "/" in the Location header; the literal
        # "/?" target is asserted in test_filtering.py::TestBuildRedirectTarget
        location = urlsplit(response.headers["Location"])
        assert location.path == "/"
        assert location.query == ""

        followed = client.post(
            "/filter", data={"query": "", "type": "", "location": ""}, follow_redirects=True
        )
        assert followed.status_code == 200
        assert "Backend Engineer" in followed.get_data(as_text=True)

    def test_round_trip_applies_filter(self, client):
        response = client.post(
            "/filter", data={"query": "data", "remote": "on"}, follow_redirects=True
        )

        html = response.get_data(as_text=True)
        assert response.status_code == 200
        assert "Data Engineer" in html
        assert "Backend Engineer" not in html

    def test_invalid_type_does_not_redirect(self, client, caplog):
        with caplog.at_level(logging.WARNING):
            response = client.post("/filter", data={"type": "NotARealType"})

        assert response.status_code == 400
        assert "Location" not in response.headers
        assert "type:" in response.get_data(as_text=True)
        assert any(
            getattr(record, "event", None) == "filter.validation_failed"
            for record in caplog.records
        )

    def test_get_not_allowed(self, client):
        assert client.get("/filter").status_code == 405


class TestHealth:
    def test_ok(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}

    def test_unavailable(self):
        client = create_app(UnavailableJobStore()).test_client()

        response = client.get("/health")

        assert response.status_code == 503
        assert response.get_json() == {"status": "unavailable"}
