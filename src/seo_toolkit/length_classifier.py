"""Title and meta description length scoring."""

from typing import Optional

from seo_toolkit.config import ToolkitThresholds, default_thresholds, settings
from seo_toolkit.constants import (
    LENGTH_BANDS,
    SERP_DESCRIPTION_PLACEHOLDER,
    SERP_SLUG_PLACEHOLDER,
    SERP_TITLE_PLACEHOLDER,
)
from seo_toolkit.models import LengthResult, LengthStatus, SerpPreview


class LengthClassifier:
    """Bands character counts of titles and meta descriptions."""

    def __init__(self, thresholds: Optional[ToolkitThresholds] = None):
        """Initialize classifier with configurable thresholds.

        Args:
            thresholds: Band limits; defaults to the global thresholds
        """
        self.thresholds = thresholds or default_thresholds

    def limits(self, band: str) -> tuple[int, int, int]:
        """Return (good_min, good_max, long_max) for a band.

        Raises:
            ValueError: If band is not "title" or "description"
        """
        if band == "title":
            return (
                self.thresholds.title_min,
                self.thresholds.title_max,
                self.thresholds.title_long_max,
            )
        if band == "description":
            return (
                self.thresholds.description_min,
                self.thresholds.description_max,
                self.thresholds.description_long_max,
            )
        raise ValueError(f"Unknown length band {band!r}, expected one of {LENGTH_BANDS}")

    def classify(self, text: str, band: str = "title") -> LengthResult:
        """Classify trimmed text length into a status band.

        Args:
            text: Title or description as typed by the editor
            band: "title" or "description"

        Returns:
            LengthResult with the measured length and status
        """
        good_min, good_max, long_max = self.limits(band)
        length = len((text or "").strip())

        if length == 0:
            status = LengthStatus.EMPTY
        elif length < good_min:
            status = LengthStatus.SHORT
        elif length <= good_max:
            status = LengthStatus.GOOD
        elif length <= long_max:
            status = LengthStatus.LONG
        else:
            status = LengthStatus.TOO_LONG

        return LengthResult(
            length=length,
            status=status,
            band=band,
            hint=f"Aim {good_min}–{good_max}",
        )


def classify_length(
    text: str,
    band: str = "title",
    thresholds: Optional[ToolkitThresholds] = None,
) -> LengthResult:
    """
    Convenience function to classify a title or description length.

    Args:
        text: Text to measure
        band: "title" or "description"
        thresholds: Optional custom band limits

    Returns:
        LengthResult
    """
    return LengthClassifier(thresholds).classify(text, band)


def build_serp_preview(
    title: str,
    description: str,
    origin: Optional[str] = None,
    slug: str = "",
) -> SerpPreview:
    """Build the search result preview shown next to the title checker.

    Args:
        title: Page title
        description: Meta description
        origin: Site origin, e.g. "https://example.com"; defaults to settings
        slug: Page slug; a placeholder is used when empty

    Returns:
        SerpPreview with placeholders for empty fields
    """
    origin = (origin or settings.SITE_ORIGIN).rstrip("/")
    return SerpPreview(
        title=(title or "").strip() or SERP_TITLE_PLACEHOLDER,
        url=f"{origin}/{slug or SERP_SLUG_PLACEHOLDER}",
        description=(description or "").strip() or SERP_DESCRIPTION_PLACEHOLDER,
    )
