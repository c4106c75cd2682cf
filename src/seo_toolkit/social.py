# src/seo_toolkit/social.py
"""Open Graph and Twitter Card snippet builder."""

from typing import List

from seo_toolkit.constants import TWITTER_CARD_LARGE_IMAGE, TWITTER_CARD_SUMMARY
from seo_toolkit.models import SocialField, SocialPreview
from seo_toolkit.text import escape_attribute
from seo_toolkit.tracking_url import extract_host


def card_type_for(image_url: str) -> str:
    """Large image card when an image is available, summary card otherwise."""
    return TWITTER_CARD_LARGE_IMAGE if (image_url or "").strip() else TWITTER_CARD_SUMMARY


def build_social_snippet(
    title: str,
    description: str,
    site_url: str = "",
    image_url: str = "",
) -> List[SocialField]:
    """
    Build the social preview meta fields in their fixed order.

    Open Graph fields come first, followed by the Twitter Card fields that
    mirror them. URL and image fields are emitted only when provided.

    Args:
        title: Page title
        description: Page description
        site_url: Canonical page URL
        image_url: Preview image URL

    Returns:
        Ordered list of SocialField with double quotes escaped
    """
    title = escape_attribute((title or "").strip())
    description = escape_attribute((description or "").strip())
    site_url = escape_attribute((site_url or "").strip())
    image_url = escape_attribute((image_url or "").strip())

    fields = [
        SocialField("og:title", title),
        SocialField("og:description", description),
    ]
    if site_url:
        fields.append(SocialField("og:url", site_url))
    if image_url:
        fields.append(SocialField("og:image", image_url))

    fields.append(SocialField("twitter:card", card_type_for(image_url)))
    fields.append(SocialField("twitter:title", title))
    fields.append(SocialField("twitter:description", description))
    if image_url:
        fields.append(SocialField("twitter:image", image_url))

    return fields


def build_social_preview(
    title: str,
    description: str,
    site_url: str = "",
    image_url: str = "",
) -> SocialPreview:
    """Build the snippet fields plus the domain shown on the preview card.

    An unparseable site URL leaves the domain empty instead of failing.
    """
    return SocialPreview(
        fields=build_social_snippet(title, description, site_url, image_url),
        domain=extract_host(site_url),
        card_type=card_type_for(image_url),
    )
