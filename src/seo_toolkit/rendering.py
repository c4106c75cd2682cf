"""HTML snippet rendering with Jinja2 templates."""

from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader

from seo_toolkit.models import GeneratedIcon, SocialField


class SnippetRenderer:
    """Renders head snippets from the packaged templates."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize snippet renderer.

        Args:
            template_dir: Directory containing Jinja2 templates; defaults to
                the templates shipped with the package
        """
        template_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"

        # Field values are already attribute-escaped by the builders
        self.env = Environment(loader=FileSystemLoader(str(template_path)), autoescape=False)
        self.env.filters['root_path'] = self._root_path

    @staticmethod
    def _root_path(filename: str) -> str:
        return "/" + filename.lstrip("/")

    def render_social_meta(self, fields: Iterable[SocialField]) -> str:
        template = self.env.get_template('social_meta.html')
        return template.render(fields=list(fields)).strip()

    def render_icon_links(self, icons: Iterable[GeneratedIcon], theme_color: str) -> str:
        template = self.env.get_template('icon_links.html')
        return template.render(icons=list(icons), theme_color=theme_color).strip()


_renderer: Optional[SnippetRenderer] = None


def _default_renderer() -> SnippetRenderer:
    global _renderer
    if _renderer is None:
        _renderer = SnippetRenderer()
    return _renderer


def render_social_meta(fields: Iterable[SocialField]) -> str:
    """Render social fields as <meta> tags, one per line.

    Open Graph keys go in a property attribute, Twitter keys in name.
    """
    return _default_renderer().render_social_meta(fields)


def render_icon_links(icons: Iterable[GeneratedIcon], theme_color: str) -> str:
    """Render icon <link> tags in the given order plus the theme-color <meta>."""
    return _default_renderer().render_icon_links(icons, theme_color)
