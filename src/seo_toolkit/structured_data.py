"""
Structured Data Validator

Validates JSON-LD payloads pasted by editors:
- JSON syntax
- @context / @type presence
- Recommended properties for common Schema.org types
- Pretty-printing for the "prettify" action
"""

import json
import logging
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from seo_toolkit.exceptions import StructuredDataParseError
from seo_toolkit.models import LinkedDataResult

logger = logging.getLogger(__name__)


class StructuredDataValidator:
    """Validate JSON-LD structured data."""

    # Recommended properties per schema type; missing ones produce warnings
    RECOMMENDED_FIELDS: Dict[str, List[str]] = {
        'Product': ['name', 'image', 'offers'],
        'Organization': ['name', 'url', 'logo', 'sameAs'],
        'Article': ['headline', 'author', 'datePublished', 'image', 'publisher'],
        'BlogPosting': ['headline', 'author', 'datePublished', 'image', 'publisher'],
        'NewsArticle': ['headline', 'author', 'datePublished', 'image', 'publisher'],
        'LocalBusiness': ['name', 'address', 'telephone', 'openingHours'],
        'Event': ['name', 'startDate', 'location'],
    }

    def validate(self, text: str) -> LinkedDataResult:
        """Validate a JSON-LD payload.

        Args:
            text: Raw JSON-LD text

        Returns:
            LinkedDataResult; parse failures are reported in the result
        """
        try:
            data = self.parse(text)
        except StructuredDataParseError as e:
            return LinkedDataResult(valid=False, error=str(e))

        if not isinstance(data, dict) or '@context' not in data:
            return LinkedDataResult(valid=False, error="Missing @context")

        if '@type' not in data:
            return LinkedDataResult(valid=False, error="Missing @type")

        return LinkedDataResult(
            valid=True,
            type_label=self.type_label(data['@type']),
            warnings=self._recommended_field_warnings(data),
        )

    def parse(self, text: str) -> Any:
        """Parse JSON-LD text.

        Raises:
            StructuredDataParseError: If the text is not valid JSON
        """
        try:
            return json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise StructuredDataParseError(f"Invalid JSON-LD syntax: {str(e)[:100]}") from e

    def format(self, text: str) -> str:
        """Re-serialize JSON-LD with 2-space indentation.

        Raises:
            StructuredDataParseError: If the text is not valid JSON
        """
        return json.dumps(self.parse(text), indent=2, ensure_ascii=False)

    @staticmethod
    def type_label(type_value: Any) -> str:
        """Display label for an @type value; lists are joined with ", "."""
        if isinstance(type_value, list):
            return ", ".join(
                t if isinstance(t, str) else json.dumps(t) for t in type_value
            )
        if isinstance(type_value, str):
            return type_value
        return json.dumps(type_value)

    def _recommended_field_warnings(self, data: Dict) -> List[str]:
        """Collect missing-property hints for the primary schema type."""
        schema_type = data.get('@type', '')
        if isinstance(schema_type, list):
            schema_type = schema_type[0] if schema_type else ''
        if not isinstance(schema_type, str):
            return []

        warnings = []
        for field in self.RECOMMENDED_FIELDS.get(schema_type, []):
            if field not in data:
                warnings.append(f"{schema_type} schema missing recommended field: {field}")

        if schema_type == 'FAQPage':
            warnings.extend(self._faqpage_warnings(data))
        elif schema_type == 'BreadcrumbList':
            warnings.extend(self._breadcrumb_warnings(data))

        return warnings

    def _faqpage_warnings(self, data: Dict) -> List[str]:
        """Check FAQPage questions and answers."""
        if 'mainEntity' not in data:
            return ["FAQPage schema missing 'mainEntity' property"]

        main_entity = data['mainEntity']
        if not isinstance(main_entity, list):
            main_entity = [main_entity]

        warnings = []
        for i, question in enumerate(main_entity):
            if not isinstance(question, dict):
                continue
            if question.get('@type') != 'Question':
                warnings.append(f"FAQPage mainEntity[{i}] should have @type 'Question'")
            if 'name' not in question:
                warnings.append(f"FAQPage Question[{i}] missing 'name' (the question text)")
            if 'acceptedAnswer' not in question:
                warnings.append(f"FAQPage Question[{i}] missing 'acceptedAnswer'")
        return warnings

    def _breadcrumb_warnings(self, data: Dict) -> List[str]:
        """Check BreadcrumbList items."""
        items = data.get('itemListElement')
        if not items:
            return ["BreadcrumbList schema missing 'itemListElement'"]
        if not isinstance(items, list):
            items = [items]

        warnings = []
        for i, item in enumerate(items):
            if isinstance(item, dict) and 'position' not in item:
                warnings.append(f"BreadcrumbList item[{i}] missing 'position'")
        return warnings


def validate_jsonld(text: str) -> LinkedDataResult:
    """Convenience function to validate a JSON-LD payload."""
    return StructuredDataValidator().validate(text)


def format_jsonld(text: str) -> str:
    """Convenience function to prettify a JSON-LD payload.

    Raises:
        StructuredDataParseError: If the text is not valid JSON; callers
            should keep showing the original text
    """
    return StructuredDataValidator().format(text)


def extract_jsonld_blocks(html: str) -> List[str]:
    """Return the raw text of every JSON-LD script block in an HTML page.

    Args:
        html: Page markup

    Returns:
        Script bodies in document order, empty blocks skipped
    """
    soup = BeautifulSoup(html, 'lxml')
    blocks = []
    for script in soup.find_all('script', type='application/ld+json'):
        if script.string and script.string.strip():
            blocks.append(script.string.strip())
    logger.debug(f"Found {len(blocks)} JSON-LD blocks")
    return blocks


def collect_schema_types(data: Any, types: Optional[List[str]] = None) -> List[str]:
    """Recursively collect @type values, following @graph and nested objects.

    Args:
        data: Parsed JSON-LD
        types: Accumulator used by the recursion

    Returns:
        Unique schema types in first-seen order
    """
    if types is None:
        types = []

    if isinstance(data, dict):
        type_val = data.get('@type')
        if isinstance(type_val, str):
            if type_val not in types:
                types.append(type_val)
        elif isinstance(type_val, list):
            for t in type_val:
                if isinstance(t, str) and t not in types:
                    types.append(t)

        for value in data.values():
            if isinstance(value, (dict, list)):
                collect_schema_types(value, types)

    elif isinstance(data, list):
        for item in data:
            collect_schema_types(item, types)

    return types
