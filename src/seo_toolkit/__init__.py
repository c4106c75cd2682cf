"""SEO authoring toolkit: checks and generators for page metadata."""

__version__ = "0.1.0"

from seo_toolkit.text import slugify, clean_text
from seo_toolkit.length_classifier import (
    LengthClassifier,
    classify_length,
    build_serp_preview,
)
from seo_toolkit.tracking_url import build_tracked_url, build_utm_url
from seo_toolkit.contrast import (
    parse_color,
    relative_luminance,
    contrast_ratio,
    classify_contrast,
    check_contrast,
)
from seo_toolkit.social import build_social_snippet, build_social_preview
from seo_toolkit.structured_data import (
    StructuredDataValidator,
    validate_jsonld,
    format_jsonld,
)
from seo_toolkit.robots import parse_directives, is_allowed, audit_directives
from seo_toolkit.sitemap_parser import SitemapValidator, validate_sitemap
from seo_toolkit.security_headers import SecurityHeaderLinter, lint_headers, analyze_headers
from seo_toolkit.icons import generate_icons
from seo_toolkit.models import (
    Color,
    ContrastResult,
    LengthStatus,
    LengthResult,
    SerpPreview,
    CrawlRuleSet,
    SitemapReport,
    HeaderLintReport,
    LinkedDataResult,
    SocialField,
    SocialPreview,
    GeneratedIcon,
    IconSet,
)
from seo_toolkit.exceptions import (
    ToolkitError,
    InvalidBaseUrlError,
    StructuredDataParseError,
    XmlParseError,
    ImageDecodeError,
)
from seo_toolkit.config import settings, ToolkitThresholds

__all__ = [
    "slugify",
    "clean_text",
    "LengthClassifier",
    "classify_length",
    "build_serp_preview",
    "build_tracked_url",
    "build_utm_url",
    "parse_color",
    "relative_luminance",
    "contrast_ratio",
    "classify_contrast",
    "check_contrast",
    "build_social_snippet",
    "build_social_preview",
    "StructuredDataValidator",
    "validate_jsonld",
    "format_jsonld",
    "parse_directives",
    "is_allowed",
    "audit_directives",
    "SitemapValidator",
    "validate_sitemap",
    "SecurityHeaderLinter",
    "lint_headers",
    "analyze_headers",
    "generate_icons",
    "Color",
    "ContrastResult",
    "LengthStatus",
    "LengthResult",
    "SerpPreview",
    "CrawlRuleSet",
    "SitemapReport",
    "HeaderLintReport",
    "LinkedDataResult",
    "SocialField",
    "SocialPreview",
    "GeneratedIcon",
    "IconSet",
    "ToolkitError",
    "InvalidBaseUrlError",
    "StructuredDataParseError",
    "XmlParseError",
    "ImageDecodeError",
    "settings",
    "ToolkitThresholds",
]
