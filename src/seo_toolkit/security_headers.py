"""Security header linter for pasted HTTP response headers."""

import logging
from typing import Dict, List

from seo_toolkit.constants import HEADER_FINDINGS, NO_HEADER_ISSUES
from seo_toolkit.models import HeaderLintReport

logger = logging.getLogger(__name__)


def parse_header_block(text: str) -> Dict[str, str]:
    """Parse "Name: value" lines into a dict keyed by lower-cased name.

    Lines without ':' are ignored and later duplicates overwrite earlier ones.
    """
    headers = {}
    for line in (text or "").splitlines():
        if ':' not in line:
            continue
        key, value = line.split(':', 1)
        headers[key.strip().lower()] = value.strip()
    return headers


def parse_csp(policy: str) -> Dict[str, List[str]]:
    """Split a Content-Security-Policy value into directive -> source list.

    Examples:
        >>> parse_csp("default-src 'self'; object-src 'none'")
        {'default-src': ["'self'"], 'object-src': ["'none'"]}
    """
    directives = {}
    for part in policy.split(';'):
        tokens = part.strip().lower().split()
        if not tokens:
            continue
        # First occurrence of a directive wins, as browsers do
        directives.setdefault(tokens[0], tokens[1:])
    return directives


class SecurityHeaderLinter:
    """Checks a header block against a fixed set of security rules."""

    # Headers whose only rule is presence, in report order
    PRESENCE_RULES = {
        'x-frame-options': 'missing_xfo',
        'referrer-policy': 'missing_referrer',
        'permissions-policy': 'missing_permissions',
        'content-security-policy': 'missing_csp',
    }

    def analyze(self, text: str) -> HeaderLintReport:
        """Lint a pasted header block.

        Args:
            text: Raw response headers, one per line

        Returns:
            HeaderLintReport; findings hold a single informational entry
            when nothing is wrong
        """
        headers = parse_header_block(text)
        findings = self._baseline_findings(headers)

        csp = headers.get('content-security-policy')
        if csp is not None:
            findings.extend(self._csp_findings(csp, headers))

        passed = not findings
        if passed:
            findings = [NO_HEADER_ISSUES]

        logger.debug(f"Linted {len(headers)} headers, passed={passed}")
        return HeaderLintReport(findings=findings, headers=headers, passed=passed)

    def _baseline_findings(self, headers: Dict[str, str]) -> List[str]:
        findings = []

        if 'strict-transport-security' not in headers:
            findings.append(HEADER_FINDINGS['missing_hsts'])

        nosniff = headers.get('x-content-type-options')
        if nosniff is None:
            findings.append(HEADER_FINDINGS['missing_nosniff'])
        elif nosniff.lower() != 'nosniff':
            findings.append(HEADER_FINDINGS['wrong_nosniff'])

        for header, finding in self.PRESENCE_RULES.items():
            if header not in headers:
                findings.append(HEADER_FINDINGS[finding])

        return findings

    def _csp_findings(self, csp: str, headers: Dict[str, str]) -> List[str]:
        findings = []
        policy = csp.lower()
        directives = parse_csp(csp)

        if "unsafe-inline" in policy:
            findings.append(HEADER_FINDINGS['csp_unsafe_inline'])
        if "unsafe-eval" in policy:
            findings.append(HEADER_FINDINGS['csp_unsafe_eval'])
        if '*' in directives.get('default-src', []):
            findings.append(HEADER_FINDINGS['csp_wildcard_default'])
        if "'none'" not in directives.get('object-src', []):
            findings.append(HEADER_FINDINGS['csp_object_src'])
        if "'none'" not in directives.get('base-uri', []):
            findings.append(HEADER_FINDINGS['csp_base_uri'])
        if 'frame-ancestors' not in directives and 'x-frame-options' not in headers:
            findings.append(HEADER_FINDINGS['csp_frame_ancestors'])
        if 'upgrade-insecure-requests' not in directives:
            findings.append(HEADER_FINDINGS['csp_upgrade'])

        return findings


def analyze_headers(text: str) -> HeaderLintReport:
    """Convenience function returning findings together with the parsed headers."""
    return SecurityHeaderLinter().analyze(text)


def lint_headers(text: str) -> List[str]:
    """
    Convenience function to lint a header block.

    Args:
        text: Raw response headers

    Returns:
        Findings, or ["No major issues detected."]
    """
    return analyze_headers(text).findings
