"""
Text normalization helpers for content editors.

Turns free text into URL slugs and cleans pasted copy: curly quotes are
straightened, emoji removed and whitespace collapsed. Every function here is
total; malformed input simply yields a cleaner (possibly empty) string.
"""

import re
import unicodedata

from seo_toolkit.constants import (
    CLEAN_OPERATIONS,
    DOUBLE_QUOTE_VARIANTS,
    EMOJI_RANGES,
    SINGLE_QUOTE_VARIANTS,
)

# Characters that survive slug filtering
SLUG_UNSAFE_PATTERN = re.compile(r"[^a-z0-9\s-]")

WHITESPACE_PATTERN = re.compile(r"\s+")

MULTIPLE_HYPHENS_PATTERN = re.compile(r"-+")

SINGLE_QUOTES_PATTERN = re.compile(f"[{SINGLE_QUOTE_VARIANTS}]")

DOUBLE_QUOTES_PATTERN = re.compile(f"[{DOUBLE_QUOTE_VARIANTS}]")

EMOJI_PATTERN = re.compile(
    "[" + "".join(
        re.escape(chr(start)) if start == end
        else f"{re.escape(chr(start))}-{re.escape(chr(end))}"
        for start, end in EMOJI_RANGES
    ) + "]"
)


def strip_diacritics(text: str) -> str:
    """Decompose text and drop combining marks ("é" -> "e")."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(text: str) -> str:
    """
    Convert free text into a URL slug.

    Args:
        text: Title or phrase to convert

    Returns:
        Lowercase slug of ASCII letters, digits and single hyphens

    Examples:
        >>> slugify("Héllo & Wörld!")
        'hello-and-world'

        >>> slugify("  Spaces   and -- dashes ")
        'spaces-and-dashes'

        >>> slugify("")
        ''
    """
    if not text:
        return ""

    result = strip_diacritics(text).lower()
    result = result.replace("&", " and ")
    result = SLUG_UNSAFE_PATTERN.sub("", result)
    result = result.strip()
    result = WHITESPACE_PATTERN.sub("-", result)
    result = MULTIPLE_HYPHENS_PATTERN.sub("-", result)

    # Input such as "- draft -" leaves hyphens at the edges
    return result.strip("-")


def straighten_quotes(text: str) -> str:
    """Replace curly single and double quotes with their ASCII forms."""
    text = SINGLE_QUOTES_PATTERN.sub("'", text)
    return DOUBLE_QUOTES_PATTERN.sub('"', text)


def strip_emoji(text: str) -> str:
    """Remove emoji-presentation and extended pictographic characters."""
    return EMOJI_PATTERN.sub("", text)


def collapse_spaces(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def escape_attribute(text: str) -> str:
    """Escape double quotes for use inside a quoted HTML attribute."""
    return text.replace('"', "&quot;")


_CLEANERS = {
    "quotes": straighten_quotes,
    "emoji": strip_emoji,
    "spaces": collapse_spaces,
}


def clean_text(text: str, operation: str) -> str:
    """Apply one cleanup operation by name.

    Args:
        text: Text to clean
        operation: One of "quotes", "emoji" or "spaces"

    Returns:
        Cleaned text; unknown operations return the text unchanged
    """
    if operation not in CLEAN_OPERATIONS:
        return text
    return _CLEANERS[operation](text)
