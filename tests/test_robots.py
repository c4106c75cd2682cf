# tests/test_robots.py
"""Tests for the crawl directive evaluator."""

import pytest
from seo_toolkit.robots import audit_directives, is_allowed, parse_directives


class TestIsAllowed:
    """Test suite for is_allowed."""

    @pytest.fixture
    def admin_rules(self):
        return "User-agent: *\nDisallow: /admin"

    def test_prefix_denied(self, admin_rules):
        assert is_allowed(admin_rules, "/admin/edit") is False
        assert is_allowed(admin_rules, "/admin") is False

    def test_other_path_allowed(self, admin_rules):
        assert is_allowed(admin_rules, "/about") is True

    def test_plain_prefix_match(self, admin_rules):
        """Matching is a plain string prefix, not a path segment match."""
        assert is_allowed(admin_rules, "/administrator") is False

    @pytest.mark.parametrize("path", ["/", "/admin", "/anything/at/all"])
    def test_empty_disallow_allows_everything(self, path):
        text = "User-agent: *\nDisallow: /admin\nDisallow:"
        assert is_allowed(text, path) is True

    def test_named_agent_ignored(self):
        text = "User-agent: Googlebot\nDisallow: /private"
        assert is_allowed(text, "/private") is True

    def test_wildcard_group_after_named_group(self):
        text = (
            "User-agent: Googlebot\n"
            "Disallow: /only-google\n"
            "\n"
            "User-agent: *\n"
            "Disallow: /private\n"
        )
        assert is_allowed(text, "/only-google") is True
        assert is_allowed(text, "/private/x") is False

    def test_disallow_before_user_agent_ignored(self):
        text = "Disallow: /early\nUser-agent: *\nDisallow: /late"
        assert is_allowed(text, "/early") is True
        assert is_allowed(text, "/late") is False

    def test_comments_case_and_junk(self):
        text = (
            "# comment line\n"
            "USER-AGENT :  * \n"
            "this line has no colon\n"
            "DisAllow:   /tmp  \n"
            "Crawl-delay: 10\n"
        )
        assert is_allowed(text, "/tmp/file") is False
        assert is_allowed(text, "/home") is True

    def test_empty_text(self):
        assert is_allowed("", "/anything") is True


class TestParseDirectives:
    """Test suite for parse_directives."""

    def test_groups_and_sitemaps(self):
        rules = parse_directives(
            "User-agent: *\n"
            "Disallow: /a\n"
            "Disallow: /a\n"
            "User-agent: Bingbot\n"
            "Disallow: /b\n"
            "Sitemap: https://example.com/sitemap.xml\n"
        )
        assert [g.user_agent for g in rules.groups] == ["*", "Bingbot"]
        assert rules.groups[0].disallow == ["/a", "/a"]
        assert rules.applicable_disallows == ["/a", "/a"]
        assert rules.sitemaps == ["https://example.com/sitemap.xml"]


class TestAuditDirectives:
    """Test suite for audit_directives."""

    def test_missing_user_agent(self):
        warnings = audit_directives("Disallow: /x")
        assert "No User-agent directive found" in warnings

    def test_block_everything(self):
        warnings = audit_directives("User-agent: *\nDisallow: /")
        assert any("blocks ALL pages" in w for w in warnings)

    def test_blocked_resources(self):
        warnings = audit_directives("User-agent: *\nDisallow: /assets/css/")
        assert any("/assets/css/" in w for w in warnings)

    def test_clean_file(self):
        assert audit_directives("User-agent: *\nDisallow: /admin") == []
