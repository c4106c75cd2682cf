"""Data models for the authoring toolkit."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Color:
    """An sRGB color with 0-255 channels."""

    red: int = 0
    green: int = 0
    blue: int = 0

    @property
    def channels(self) -> tuple[float, float, float]:
        """Channels normalized to [0, 1]."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0)

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class ContrastResult:
    """WCAG contrast evaluation for a color pair."""

    ratio: float
    passes_aa: bool
    passes_aaa: bool
    large_text: bool = False

    @property
    def label(self) -> str:
        return f"{self.ratio:.2f}:1"


class LengthStatus(Enum):
    """Character-count band of a title or meta description."""

    EMPTY = ("Empty", "bad")
    SHORT = ("Short", "warn")
    GOOD = ("Good", "ok")
    LONG = ("Long", "warn")
    TOO_LONG = ("Too long", "bad")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def severity(self) -> str:
        """Display class: ok, warn or bad."""
        return self.value[1]


@dataclass(frozen=True)
class LengthResult:
    """Length classification of a title or meta description."""

    length: int
    status: LengthStatus
    band: str = "title"
    hint: str = ""


@dataclass(frozen=True)
class SerpPreview:
    """Search engine result preview of a page."""

    title: str
    url: str
    description: str


@dataclass
class CrawlRuleGroup:
    """Disallow rules declared under one User-agent line."""

    user_agent: str
    disallow: list[str] = field(default_factory=list)

    @property
    def is_wildcard(self) -> bool:
        return self.user_agent == "*"


@dataclass
class CrawlRuleSet:
    """Parsed crawl directive text."""

    groups: list[CrawlRuleGroup] = field(default_factory=list)
    sitemaps: list[str] = field(default_factory=list)

    @property
    def applicable_disallows(self) -> list[str]:
        """Disallow values of wildcard groups, in declaration order."""
        return [
            rule
            for group in self.groups
            if group.is_wildcard
            for rule in group.disallow
        ]


@dataclass
class SitemapReport:
    """Location entries and duplicates found in a sitemap."""

    location_count: int = 0
    duplicates: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    root_tag: str = ""

    @property
    def unique_count(self) -> int:
        return len(set(self.locations))

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicates)


@dataclass
class HeaderLintReport:
    """Security header findings plus the parsed header block."""

    findings: list[str] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    passed: bool = False


@dataclass
class LinkedDataResult:
    """Validation outcome of a JSON-LD payload."""

    valid: bool
    type_label: Optional[str] = None
    error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SocialField:
    """A single social preview meta field."""

    key: str
    value: str

    @property
    def attribute(self) -> str:
        """Meta attribute carrying the key: Open Graph uses property, Twitter uses name."""
        return "property" if self.key.startswith("og:") else "name"


@dataclass
class SocialPreview:
    """Social preview fields together with their display data."""

    fields: list[SocialField] = field(default_factory=list)
    domain: str = ""
    card_type: str = "summary"

    def as_pairs(self) -> list[tuple[str, str]]:
        return [(f.key, f.value) for f in self.fields]


@dataclass(frozen=True)
class GeneratedIcon:
    """A square PNG icon."""

    size: int
    filename: str
    rel: str
    data: bytes
    content_type: str = "image/png"

    @property
    def sizes(self) -> str:
        return f"{self.size}x{self.size}"


@dataclass
class IconSet:
    """Icons generated from one source image plus their head snippet."""

    icons: list[GeneratedIcon] = field(default_factory=list)
    snippet: list[str] = field(default_factory=list)
    theme_color: str = "#ffffff"

    def get(self, size: int) -> Optional[GeneratedIcon]:
        for icon in self.icons:
            if icon.size == size:
                return icon
        return None

    def save(self, directory) -> list[Path]:
        """Write every icon into directory.

        Args:
            directory: Target directory, created if needed

        Returns:
            Paths of the written files
        """
        target = Path(directory)
        target.mkdir(parents=True, exist_ok=True)

        written = []
        for icon in self.icons:
            path = target / icon.filename
            path.write_bytes(icon.data)
            written.append(path)
        return written
