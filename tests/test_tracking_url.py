# tests/test_tracking_url.py
"""Tests for the UTM URL builder."""

import pytest
from seo_toolkit.exceptions import InvalidBaseUrlError, ToolkitError
from seo_toolkit.tracking_url import build_tracked_url, build_utm_url, extract_host


class TestBuildTrackedUrl:
    """Test suite for build_tracked_url."""

    def test_adds_parameter(self):
        url = build_tracked_url("https://site.com", {"utm_source": "x"})
        assert "utm_source=x" in url
        assert url == "https://site.com/?utm_source=x"

    def test_invalid_base(self):
        with pytest.raises(InvalidBaseUrlError):
            build_tracked_url("not a url", {})

    def test_invalid_base_is_toolkit_error(self):
        with pytest.raises(ToolkitError):
            build_tracked_url("/relative/path", {"utm_source": "x"})

    def test_empty_values_skipped(self):
        url = build_tracked_url(
            "https://site.com/page", {"utm_source": "news", "utm_medium": "", "utm_term": "   "}
        )
        assert url == "https://site.com/page?utm_source=news"

    def test_no_parameters_keeps_url(self):
        assert build_tracked_url("https://site.com/page?a=1", {}) == "https://site.com/page?a=1"

    def test_existing_query_preserved(self):
        url = build_tracked_url("https://site.com/page?ref=home", {"utm_source": "mail"})
        assert url == "https://site.com/page?ref=home&utm_source=mail"

    def test_existing_key_replaced_in_place(self):
        url = build_tracked_url(
            "https://site.com/?utm_source=old&a=1&utm_source=older", {"utm_source": "new"}
        )
        assert url == "https://site.com/?utm_source=new&a=1"

    def test_values_trimmed_and_encoded(self):
        url = build_tracked_url("https://site.com", {"utm_campaign": "  spring sale & more "})
        assert url == "https://site.com/?utm_campaign=spring+sale+%26+more"

    def test_fragment_kept(self):
        url = build_tracked_url("https://site.com/page#top", {"utm_source": "x"})
        assert url == "https://site.com/page?utm_source=x#top"

    def test_scheme_and_host_lowercased(self):
        url = build_tracked_url("HTTPS://Site.COM", {"utm_source": "x"})
        assert url == "https://site.com/?utm_source=x"

    def test_credentials_keep_case(self):
        url = build_tracked_url("https://Admin:Pw@Site.COM/Page", {})
        assert url == "https://Admin:Pw@site.com/Page"


class TestBuildUtmUrl:
    """Test suite for build_utm_url."""

    def test_parameter_order(self):
        url = build_utm_url(
            "https://site.com/landing",
            source="newsletter",
            medium="email",
            campaign="launch",
            term="shoes",
            content="header",
        )
        assert url == (
            "https://site.com/landing?utm_source=newsletter&utm_medium=email"
            "&utm_campaign=launch&utm_term=shoes&utm_content=header"
        )

    def test_partial(self):
        url = build_utm_url("https://site.com", source="x", campaign="y")
        assert url == "https://site.com/?utm_source=x&utm_campaign=y"


class TestExtractHost:
    """Test suite for extract_host."""

    def test_host(self):
        assert extract_host("https://www.example.com/path?q=1") == "www.example.com"

    def test_invalid_url_gives_empty_host(self):
        assert extract_host("not a url") == ""
        assert extract_host("") == ""
