# tests/test_social.py
"""Tests for the Open Graph and Twitter Card snippet builder."""

from bs4 import BeautifulSoup
from seo_toolkit.models import SocialField
from seo_toolkit.rendering import render_social_meta
from seo_toolkit.social import build_social_preview, build_social_snippet, card_type_for


class TestBuildSocialSnippet:
    """Test suite for build_social_snippet."""

    def test_full_field_order(self):
        fields = build_social_snippet(
            "My Page", "About my page", "https://example.com/page", "https://example.com/og.png"
        )
        assert [f.key for f in fields] == [
            "og:title",
            "og:description",
            "og:url",
            "og:image",
            "twitter:card",
            "twitter:title",
            "twitter:description",
            "twitter:image",
        ]

    def test_optional_fields_omitted(self):
        fields = build_social_snippet("Title", "Description")
        assert [f.key for f in fields] == [
            "og:title",
            "og:description",
            "twitter:card",
            "twitter:title",
            "twitter:description",
        ]

    def test_card_type(self):
        with_image = dict((f.key, f.value) for f in build_social_snippet("t", "d", "", "https://x.com/i.png"))
        without_image = dict((f.key, f.value) for f in build_social_snippet("t", "d"))
        assert with_image["twitter:card"] == "summary_large_image"
        assert without_image["twitter:card"] == "summary"
        assert card_type_for("   ") == "summary"

    def test_quotes_escaped(self):
        fields = dict(
            (f.key, f.value) for f in build_social_snippet('Say "hi"', 'A "quoted" line')
        )
        assert fields["og:title"] == "Say &quot;hi&quot;"
        assert fields["twitter:title"] == "Say &quot;hi&quot;"
        assert fields["og:description"] == "A &quot;quoted&quot; line"

    def test_values_trimmed(self):
        fields = build_social_snippet("  Title  ", " Description ")
        assert fields[0].value == "Title"
        assert fields[1].value == "Description"

    def test_attribute(self):
        assert SocialField("og:title", "x").attribute == "property"
        assert SocialField("twitter:title", "x").attribute == "name"


class TestBuildSocialPreview:
    """Test suite for build_social_preview."""

    def test_domain(self):
        preview = build_social_preview("t", "d", "https://www.example.com/a/b")
        assert preview.domain == "www.example.com"
        assert preview.card_type == "summary"

    def test_invalid_url_gives_empty_domain(self):
        preview = build_social_preview("t", "d", "not a url")
        assert preview.domain == ""
        assert ("og:url", "not a url") in preview.as_pairs()

    def test_render_meta_tags(self):
        """Rendered tags parse back to the original values."""
        preview = build_social_preview(
            'Say "hi"', "Desc", "https://example.com", "https://example.com/i.png"
        )
        soup = BeautifulSoup(render_social_meta(preview.fields), "lxml")

        og_title = soup.find("meta", attrs={"property": "og:title"})
        assert og_title["content"] == 'Say "hi"'

        card = soup.find("meta", attrs={"name": "twitter:card"})
        assert card["content"] == "summary_large_image"

        assert len(soup.find_all("meta")) == 8
