"""
Crawl Directive Evaluator

Evaluates robots.txt-style directive text against a URL path. Only groups
addressed to every crawler (User-agent: *) take part in the decision;
rules scoped to a named agent are parsed but never applied.
"""

import logging
from typing import List

from seo_toolkit.constants import RENDER_RESOURCE_PATHS
from seo_toolkit.models import CrawlRuleGroup, CrawlRuleSet

logger = logging.getLogger(__name__)


def parse_directives(text: str) -> CrawlRuleSet:
    """Parse directive text into user-agent groups.

    Args:
        text: Directive file content

    Returns:
        CrawlRuleSet with groups in declaration order
    """
    rules = CrawlRuleSet()
    current = None

    for line_number, raw_line in enumerate((text or "").splitlines(), start=1):
        line = raw_line.strip()

        # Skip comments and empty lines
        if not line or line.startswith('#'):
            continue

        if ':' not in line:
            logger.debug(f"Ignoring line {line_number} without ':': {line!r}")
            continue

        key, value = line.split(':', 1)
        key = key.strip().lower()
        value = value.strip()

        if key == 'user-agent':
            current = CrawlRuleGroup(user_agent=value)
            rules.groups.append(current)
        elif key == 'disallow':
            if current is None:
                logger.debug(f"Ignoring Disallow on line {line_number} outside a User-agent group")
                continue
            current.disallow.append(value)
        elif key == 'sitemap':
            rules.sitemaps.append(value)
        else:
            logger.debug(f"Ignoring unsupported directive {key!r} on line {line_number}")

    return rules


def path_allowed(rules: CrawlRuleSet, path: str) -> bool:
    """Decide whether path may be crawled under the wildcard groups of rules."""
    disallows = rules.applicable_disallows

    # An empty Disallow value allows everything
    if any(rule == "" for rule in disallows):
        return True

    return not any(path.startswith(rule) for rule in disallows)


def is_allowed(text: str, path: str) -> bool:
    """
    Convenience function to check a path against directive text.

    Args:
        text: Directive file content
        path: URL path, e.g. "/admin/edit"

    Returns:
        True if crawling the path is allowed

    Examples:
        >>> is_allowed("User-agent: *\\nDisallow: /admin", "/admin/edit")
        False
        >>> is_allowed("User-agent: *\\nDisallow: /admin", "/about")
        True
    """
    return path_allowed(parse_directives(text), path)


def audit_directives(text: str) -> List[str]:
    """Report common mistakes in directive text.

    Args:
        text: Directive file content

    Returns:
        Human readable warnings, empty when nothing stands out
    """
    rules = parse_directives(text)
    warnings = []

    if not rules.groups:
        warnings.append("No User-agent directive found")

    if "/" in rules.applicable_disallows:
        warnings.append("'Disallow: /' blocks ALL pages for every crawler")

    blocked = [
        rule
        for group in rules.groups
        for rule in group.disallow
        if any(fragment in rule for fragment in RENDER_RESOURCE_PATHS)
    ]
    if blocked:
        warnings.append(
            f"Blocks CSS, JavaScript, or images (may hurt rendering): {', '.join(blocked)}"
        )

    return warnings
