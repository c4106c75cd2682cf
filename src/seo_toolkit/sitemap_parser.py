"""Sitemap validator that reports duplicate location entries."""

import logging
from typing import List, Set
from xml.etree import ElementTree as ET

from seo_toolkit.exceptions import XmlParseError
from seo_toolkit.models import SitemapReport

logger = logging.getLogger(__name__)


class SitemapValidator:
    """
    Validate an XML sitemap document.

    Supports:
    - Standard sitemap.xml files (urlset)
    - Sitemap index files (sitemapindex)
    - Documents with or without the sitemaps.org namespace

    Surrounding whitespace in a loc element is trimmed; locations are
    otherwise compared exactly as written, so case and trailing slashes
    make two entries distinct.
    """

    KNOWN_ROOTS = ('urlset', 'sitemapindex')

    def validate(self, xml_text: str) -> SitemapReport:
        """
        Extract every loc entry and report repeats.

        Args:
            xml_text: Sitemap document

        Returns:
            SitemapReport with locations in document order

        Raises:
            XmlParseError: If the document is not well-formed XML
        """
        try:
            root = ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise XmlParseError(f"Failed to parse sitemap XML: {e}") from e

        # Get the root tag without namespace
        root_tag = self._local_name(root.tag)
        if root_tag not in self.KNOWN_ROOTS:
            logger.warning(f"Unknown sitemap root element: {root_tag}")

        locations = self._extract_locations(root)
        duplicates = self.find_duplicates(locations)

        logger.info(
            f"Extracted {len(locations)} locations from sitemap "
            f"({len(duplicates)} duplicates)"
        )

        return SitemapReport(
            location_count=len(locations),
            duplicates=duplicates,
            locations=locations,
            root_tag=root_tag,
        )

    @staticmethod
    def _local_name(tag) -> str:
        if not isinstance(tag, str):
            return ""
        return tag.split('}')[-1] if '}' in tag else tag

    def _extract_locations(self, root: ET.Element) -> List[str]:
        """Text of every loc element, in document order."""
        return [
            (elem.text or "").strip()
            for elem in root.iter()
            if self._local_name(elem.tag) == 'loc'
        ]

    @staticmethod
    def find_duplicates(locations: List[str]) -> List[str]:
        """Every repeat of an exact string after its first occurrence.

        Examples:
            >>> SitemapValidator.find_duplicates(["/a", "/b", "/a", "/a"])
            ['/a', '/a']
        """
        seen: Set[str] = set()
        duplicates = []
        for location in locations:
            if location in seen:
                duplicates.append(location)
            else:
                seen.add(location)
        return duplicates


def validate_sitemap(xml_text: str) -> SitemapReport:
    """
    Convenience function to validate a sitemap document.

    Args:
        xml_text: Sitemap XML

    Returns:
        SitemapReport

    Raises:
        XmlParseError: If the document is malformed
    """
    return SitemapValidator().validate(xml_text)
