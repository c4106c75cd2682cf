# src/seo_toolkit/constants.py
"""Centralized constants for the authoring toolkit.

This module contains fixed values that are used across multiple modules.
For user-configurable thresholds, see config.py and ToolkitThresholds.
"""

# =============================================================================
# Text Normalizer Constants
# =============================================================================

# Curly single quotes: left, right, low-9, high-reversed-9
SINGLE_QUOTE_VARIANTS = "‘’‚‛"

# Curly double quotes: left, right, low-9, high-reversed-9
DOUBLE_QUOTE_VARIANTS = "“”„‟"

# Code point ranges covering the Emoji_Presentation and Extended_Pictographic
# properties (Unicode emoji-data). Regional indicators and skin tone
# modifiers are Emoji_Presentation only.
EMOJI_RANGES = (
    (0x00A9, 0x00A9), (0x00AE, 0x00AE), (0x203C, 0x203C), (0x2049, 0x2049),
    (0x2122, 0x2122), (0x2139, 0x2139), (0x2194, 0x2199), (0x21A9, 0x21AA),
    (0x231A, 0x231B), (0x2328, 0x2328), (0x2388, 0x2388), (0x23CF, 0x23CF),
    (0x23E9, 0x23F3), (0x23F8, 0x23FA), (0x24C2, 0x24C2), (0x25AA, 0x25AB),
    (0x25B6, 0x25B6), (0x25C0, 0x25C0), (0x25FB, 0x25FE), (0x2600, 0x2605),
    (0x2607, 0x2612), (0x2614, 0x2685), (0x2690, 0x2705), (0x2708, 0x2712),
    (0x2714, 0x2714), (0x2716, 0x2716), (0x271D, 0x271D), (0x2721, 0x2721),
    (0x2728, 0x2728), (0x2733, 0x2734), (0x2744, 0x2744), (0x2747, 0x2747),
    (0x274C, 0x274C), (0x274E, 0x274E), (0x2753, 0x2755), (0x2757, 0x2757),
    (0x2763, 0x2767), (0x2795, 0x2797), (0x27A1, 0x27A1), (0x27B0, 0x27B0),
    (0x27BF, 0x27BF), (0x2934, 0x2935), (0x2B05, 0x2B07), (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50), (0x2B55, 0x2B55), (0x3030, 0x3030), (0x303D, 0x303D),
    (0x3297, 0x3297), (0x3299, 0x3299),
    (0x1F000, 0x1F0FF), (0x1F10D, 0x1F10F), (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171), (0x1F17E, 0x1F17F), (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A), (0x1F1AD, 0x1F1FF), (0x1F201, 0x1F20F),
    (0x1F21A, 0x1F21A), (0x1F22F, 0x1F22F), (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F), (0x1F249, 0x1F3FA), (0x1F3FB, 0x1F3FF),
    (0x1F400, 0x1F53D), (0x1F546, 0x1F64F), (0x1F680, 0x1F6FF),
    (0x1F774, 0x1F77F), (0x1F7D5, 0x1F7FF), (0x1F80C, 0x1F80F),
    (0x1F848, 0x1F84F), (0x1F85A, 0x1F85F), (0x1F888, 0x1F88F),
    (0x1F8AE, 0x1F8FF), (0x1F90C, 0x1F93A), (0x1F93C, 0x1F945),
    (0x1F947, 0x1FAFF), (0x1FC00, 0x1FFFD),
)

# Text cleanup operations offered by the editor panel
CLEAN_OPERATIONS = ("quotes", "emoji", "spaces")


# =============================================================================
# Length Classifier Constants
# =============================================================================

LENGTH_BANDS = ("title", "description")

# Placeholders shown in the search result preview
SERP_TITLE_PLACEHOLDER = "Your title preview"
SERP_DESCRIPTION_PLACEHOLDER = "Meta description preview goes here."
SERP_SLUG_PLACEHOLDER = "example"


# =============================================================================
# Tracking URL Constants
# =============================================================================

# Standard Urchin Tracking Module parameters, in builder order
UTM_PARAMETERS = (
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
)


# =============================================================================
# Social Snippet Constants
# =============================================================================

TWITTER_CARD_SUMMARY = "summary"
TWITTER_CARD_LARGE_IMAGE = "summary_large_image"


# =============================================================================
# Security Header Constants
# =============================================================================

HEADER_FINDINGS = {
    'missing_hsts': "Missing Strict-Transport-Security (HSTS) header.",
    'missing_nosniff': "Missing X-Content-Type-Options header.",
    'wrong_nosniff': "X-Content-Type-Options should be set to 'nosniff'.",
    'missing_xfo': "Missing X-Frame-Options header (clickjacking protection).",
    'missing_referrer': "Missing Referrer-Policy header.",
    'missing_permissions': "Missing Permissions-Policy header.",
    'missing_csp': "Missing Content-Security-Policy header.",
    'csp_unsafe_inline': "CSP: 'unsafe-inline' allows inline scripts and styles.",
    'csp_unsafe_eval': "CSP: 'unsafe-eval' allows string evaluation of code.",
    'csp_wildcard_default': "CSP: default-src allows any origin ('*').",
    'csp_object_src': "CSP: object-src 'none' is not set.",
    'csp_base_uri': "CSP: base-uri 'none' is not set.",
    'csp_frame_ancestors': "CSP: frame-ancestors is not set and X-Frame-Options is missing.",
    'csp_upgrade': "CSP: upgrade-insecure-requests is not set.",
}

NO_HEADER_ISSUES = "No major issues detected."


# =============================================================================
# Crawl Directive Constants
# =============================================================================

# Path fragments whose blocking hurts rendering by search engines
RENDER_RESOURCE_PATHS = ('/css', '/js', '/images')


# =============================================================================
# Icon Generator Constants
# =============================================================================

ICON_BACKGROUND = (255, 255, 255)

# size -> (filename, link rel)
ICON_FILES = {
    16: ("favicon-16x16.png", "icon"),
    32: ("favicon-32x32.png", "icon"),
    180: ("apple-touch-icon.png", "apple-touch-icon"),
}

# Order in which icon links are declared in the head snippet
ICON_SNIPPET_ORDER = (32, 16, 180)

# Leading bytes inspected when looking for SVG markup
SVG_SNIFF_BYTES = 1024


# =============================================================================
# Logging Constants
# =============================================================================

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Libraries that log decoder and event-loop internals at DEBUG
NOISY_LOGGERS = ('PIL', 'asyncio', 'cairosvg')
