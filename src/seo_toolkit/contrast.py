"""WCAG color contrast checks."""

import logging
import re
from typing import Optional

from seo_toolkit.config import ToolkitThresholds, default_thresholds
from seo_toolkit.models import Color, ContrastResult

logger = logging.getLogger(__name__)

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def parse_color(value: str) -> Color:
    """Parse a 6-digit hex color such as "#1a2b3c".

    Malformed input is treated as black rather than raising, so a live
    preview keeps working while the editor is still typing.
    """
    match = HEX_COLOR_PATTERN.match((value or "").strip())
    if not match:
        logger.debug(f"Unparseable color {value!r}, using black")
        return Color(0, 0, 0)

    digits = match.group(1)
    return Color(
        red=int(digits[0:2], 16),
        green=int(digits[2:4], 16),
        blue=int(digits[4:6], 16),
    )


def _linearize(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """Relative luminance as defined by WCAG 2.x."""
    r, g, b = (_linearize(c) for c in color.channels)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(foreground: Color, background: Color) -> float:
    """Contrast ratio between two colors, from 1.0 to 21.0."""
    fg = relative_luminance(foreground)
    bg = relative_luminance(background)
    lighter = max(fg, bg)
    darker = min(fg, bg)
    return (lighter + 0.05) / (darker + 0.05)


def classify_contrast(
    ratio: float,
    large_text: bool = False,
    thresholds: Optional[ToolkitThresholds] = None,
) -> ContrastResult:
    """Apply the WCAG AA and AAA thresholds to a ratio.

    Args:
        ratio: Contrast ratio
        large_text: Whether the text is large (18pt, or 14pt bold)
        thresholds: Optional custom thresholds

    Returns:
        ContrastResult
    """
    thresholds = thresholds or default_thresholds
    if large_text:
        aa, aaa = thresholds.contrast_aa_large, thresholds.contrast_aaa_large
    else:
        aa, aaa = thresholds.contrast_aa_normal, thresholds.contrast_aaa_normal

    return ContrastResult(
        ratio=ratio,
        passes_aa=ratio >= aa,
        passes_aaa=ratio >= aaa,
        large_text=large_text,
    )


def check_contrast(
    foreground: str,
    background: str,
    large_text: bool = False,
    thresholds: Optional[ToolkitThresholds] = None,
) -> ContrastResult:
    """
    Convenience function to score a pair of hex colors.

    Args:
        foreground: Text color, e.g. "#111827"
        background: Background color, e.g. "#ffffff"
        large_text: Whether the text is large
        thresholds: Optional custom thresholds

    Returns:
        ContrastResult
    """
    ratio = contrast_ratio(parse_color(foreground), parse_color(background))
    return classify_contrast(ratio, large_text, thresholds)
