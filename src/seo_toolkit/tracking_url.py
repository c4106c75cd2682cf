"""Tracking (UTM) URL builder."""

import logging
from typing import Mapping, Optional
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from seo_toolkit.constants import UTM_PARAMETERS
from seo_toolkit.exceptions import InvalidBaseUrlError

logger = logging.getLogger(__name__)

# Schemes whose empty path serializes as "/"
_SPECIAL_SCHEMES = {'http', 'https', 'ws', 'wss', 'ftp'}


def parse_absolute_url(url: str) -> SplitResult:
    """Parse an absolute URL.

    Args:
        url: URL text

    Returns:
        The split URL

    Raises:
        InvalidBaseUrlError: If the URL has no scheme or host
    """
    try:
        parsed = urlsplit((url or "").strip())
    except ValueError as e:
        raise InvalidBaseUrlError(url) from e

    if not parsed.scheme or not parsed.netloc:
        raise InvalidBaseUrlError(url)

    return parsed


def extract_host(url: str) -> str:
    """Return the host of an absolute URL, or "" when it cannot be parsed."""
    try:
        parsed = parse_absolute_url(url)
    except InvalidBaseUrlError:
        return ""
    return parsed.hostname or ""


def _set_param(pairs: list[tuple[str, str]], key: str, value: str) -> list[tuple[str, str]]:
    """Set key to value, replacing every existing occurrence in place of the first."""
    result = []
    placed = False
    for existing_key, existing_value in pairs:
        if existing_key != key:
            result.append((existing_key, existing_value))
        elif not placed:
            result.append((key, value))
            placed = True
    if not placed:
        result.append((key, value))
    return result


def build_tracked_url(base: str, params: Mapping[str, Optional[str]]) -> str:
    """
    Build a tagged URL from a base URL and query parameters.

    Parameters with an empty value are skipped. Existing keys keep their
    position in the query string; new keys are appended in the given order.

    Args:
        base: Absolute base URL
        params: Mapping of query key to value

    Returns:
        The re-serialized URL

    Raises:
        InvalidBaseUrlError: If base is not an absolute URL

    Examples:
        >>> build_tracked_url("https://site.com", {"utm_source": "news"})
        'https://site.com/?utm_source=news'
    """
    parsed = parse_absolute_url(base)

    path = parsed.path
    if not path and parsed.scheme in _SPECIAL_SCHEMES:
        path = "/"

    query = parsed.query
    updates = [
        (key, str(value).strip())
        for key, value in params.items()
        if value is not None and str(value).strip()
    ]
    if updates:
        pairs = parse_qsl(parsed.query, keep_blank_values=True)
        for key, value in updates:
            pairs = _set_param(pairs, key, value)
        query = urlencode(pairs)
        logger.debug(f"Set {len(updates)} query parameters on {parsed.netloc}")

    # Host names are case-insensitive; credentials are not
    userinfo, at, hostport = parsed.netloc.rpartition("@")
    netloc = userinfo + at + hostport.lower()

    return urlunsplit((parsed.scheme, netloc, path, query, parsed.fragment))


def build_utm_url(
    base: str,
    source: str = "",
    medium: str = "",
    campaign: str = "",
    term: str = "",
    content: str = "",
) -> str:
    """
    Convenience function to tag a URL with the standard UTM parameters.

    Args:
        base: Absolute base URL
        source: utm_source value
        medium: utm_medium value
        campaign: utm_campaign value
        term: utm_term value
        content: utm_content value

    Returns:
        The tagged URL
    """
    values = (source, medium, campaign, term, content)
    return build_tracked_url(base, dict(zip(UTM_PARAMETERS, values)))
