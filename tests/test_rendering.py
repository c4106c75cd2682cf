# tests/test_rendering.py
"""Tests for the Jinja2 snippet renderer."""

from bs4 import BeautifulSoup
from seo_toolkit.models import GeneratedIcon, SocialField
from seo_toolkit.rendering import SnippetRenderer, render_icon_links, render_social_meta


class TestSnippetRenderer:
    """Test suite for SnippetRenderer."""

    def test_social_meta_lines(self):
        html = render_social_meta([
            SocialField("og:title", "Title"),
            SocialField("twitter:card", "summary"),
        ])
        assert html.splitlines() == [
            '<meta property="og:title" content="Title">',
            '<meta name="twitter:card" content="summary">',
        ]

    def test_prescaped_values_not_escaped_twice(self):
        html = render_social_meta([SocialField("og:title", "A &quot;B&quot;")])
        assert "&amp;quot;" not in html
        meta = BeautifulSoup(html, "lxml").find("meta")
        assert meta["content"] == 'A "B"'

    def test_icon_links(self):
        icons = [
            GeneratedIcon(size=32, filename="favicon-32x32.png", rel="icon", data=b""),
            GeneratedIcon(size=180, filename="apple-touch-icon.png", rel="apple-touch-icon", data=b""),
        ]
        assert render_icon_links(icons, "#000000").splitlines() == [
            '<link rel="icon" type="image/png" sizes="32x32" href="/favicon-32x32.png">',
            '<link rel="apple-touch-icon" sizes="180x180" href="/apple-touch-icon.png">',
            '<meta name="theme-color" content="#000000">',
        ]

    def test_icon_links_without_icons(self):
        assert render_icon_links([], "#ffffff") == '<meta name="theme-color" content="#ffffff">'

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "social_meta.html").write_text(
            "{% for field in fields %}{{ field.key }}={{ field.value }};{% endfor %}"
        )
        renderer = SnippetRenderer(str(tmp_path))
        assert renderer.render_social_meta([SocialField("og:title", "x")]) == "og:title=x;"
