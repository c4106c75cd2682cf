"""Command-line interface for the SEO authoring toolkit."""

import asyncio
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from seo_toolkit.config import ToolkitThresholds, default_thresholds, settings
from seo_toolkit.constants import CLEAN_OPERATIONS, LENGTH_BANDS
from seo_toolkit.contrast import check_contrast
from seo_toolkit.exceptions import StructuredDataParseError, ToolkitError
from seo_toolkit.icons import generate_icons
from seo_toolkit.length_classifier import build_serp_preview, classify_length
from seo_toolkit.logging_config import setup_logging
from seo_toolkit.rendering import render_social_meta
from seo_toolkit.robots import audit_directives, is_allowed
from seo_toolkit.security_headers import analyze_headers
from seo_toolkit.sitemap_parser import validate_sitemap
from seo_toolkit.social import build_social_preview
from seo_toolkit.structured_data import (
    StructuredDataValidator,
    collect_schema_types,
    extract_jsonld_blocks,
    format_jsonld,
    validate_jsonld,
)
from seo_toolkit.text import clean_text, slugify
from seo_toolkit.tracking_url import build_utm_url

logger = logging.getLogger(__name__)


def read_input(path: str) -> str:
    """Read a text input file; "-" reads standard input."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def slugify_command(args):
    """Print the slug for a title."""
    print(slugify(args.text))


def clean_command(args):
    """Apply a cleanup operation to text."""
    print(clean_text(args.text, args.operation))


def length_command(args):
    """Classify a title or description length."""
    result = classify_length(args.text, args.band, args.thresholds)

    if args.output == "json":
        print_json({
            "length": result.length,
            "status": result.status.label,
            "severity": result.status.severity,
            "band": result.band,
            "hint": result.hint,
        })
    else:
        print(f"{result.length} chars - {result.status.label} ({result.hint})")


def serp_command(args):
    """Print a search result preview."""
    preview = build_serp_preview(args.title, args.description, args.origin, args.slug)

    if args.output == "json":
        print_json(asdict(preview))
    else:
        print(preview.title)
        print(preview.url)
        print(preview.description)


def utm_command(args):
    """Build a UTM-tagged URL."""
    print(build_utm_url(
        args.base,
        source=args.source,
        medium=args.medium,
        campaign=args.campaign,
        term=args.term,
        content=args.content,
    ))


def contrast_command(args):
    """Score the contrast of a color pair."""
    result = check_contrast(
        args.foreground, args.background, large_text=args.large, thresholds=args.thresholds
    )

    if args.output == "json":
        print_json({**asdict(result), "label": result.label})
    else:
        print(f"Contrast: {result.label}")
        print(f"  AA:  {'pass' if result.passes_aa else 'fail'}")
        print(f"  AAA: {'pass' if result.passes_aaa else 'fail'}")


def social_command(args):
    """Build Open Graph and Twitter Card fields."""
    preview = build_social_preview(args.title, args.description, args.url, args.image)

    if args.html:
        print(render_social_meta(preview.fields))
    elif args.output == "json":
        print_json({
            "fields": dict(preview.as_pairs()),
            "domain": preview.domain,
            "card_type": preview.card_type,
        })
    else:
        for key, value in preview.as_pairs():
            print(f"{key}: {value}")


def payload_types(payload: str) -> List[str]:
    """Schema types declared anywhere in a payload, including @graph entries."""
    try:
        return collect_schema_types(StructuredDataValidator().parse(payload))
    except StructuredDataParseError:
        return []


def jsonld_command(args):
    """Validate or prettify JSON-LD."""
    text = read_input(args.file)

    if args.format:
        print(format_jsonld(text))
        return

    payloads = extract_jsonld_blocks(text) if args.from_html else [text]
    if not payloads:
        print("No JSON-LD blocks found")
        sys.exit(1)

    results = [(validate_jsonld(payload), payload_types(payload)) for payload in payloads]

    if args.output == "json":
        print_json([{**asdict(result), "types": types} for result, types in results])
    else:
        for index, (result, types) in enumerate(results, start=1):
            prefix = f"[{index}] " if len(results) > 1 else ""
            if result.valid:
                print(f"{prefix}✅ Valid JSON-LD ({result.type_label})")
            else:
                print(f"{prefix}❌ {result.error}")
            if types:
                print(f"{prefix}  Types: {', '.join(types)}")
            for warning in result.warnings:
                print(f"{prefix}  ⚠️  {warning}")

    if not all(result.valid for result, _ in results):
        sys.exit(1)


def robots_command(args):
    """Check a path against crawl directives."""
    text = read_input(args.file)
    allowed = is_allowed(text, args.path)
    print(f"{args.path}: {'allowed' if allowed else 'blocked'}")

    if args.audit:
        for warning in audit_directives(text):
            print(f"  ⚠️  {warning}")


def sitemap_command(args):
    """Report duplicate sitemap locations."""
    report = validate_sitemap(read_input(args.file))

    if args.output == "json":
        print_json({
            "location_count": report.location_count,
            "unique_count": report.unique_count,
            "duplicates": report.duplicates,
            "root_tag": report.root_tag,
        })
    else:
        print(f"Locations: {report.location_count} ({report.unique_count} unique)")
        if report.has_duplicates:
            print("Duplicates:")
            for location in report.duplicates:
                print(f"  • {location}")
        else:
            print("No duplicates found")


def headers_command(args):
    """Lint a security header block."""
    report = analyze_headers(read_input(args.file))

    if args.output == "json":
        print_json({"passed": report.passed, "findings": report.findings})
    else:
        for finding in report.findings:
            print(f"  • {finding}")


def icons_command(args):
    """Generate favicons and the apple-touch icon."""
    if args.image == "-":
        source = sys.stdin.buffer.read()
    else:
        source = Path(args.image)

    icon_set = asyncio.run(generate_icons(
        source, sizes=args.thresholds.icon_sizes, theme_color=args.theme_color
    ))
    written = icon_set.save(args.output_dir)

    for path in written:
        print(f"Wrote {path}")
    if args.html:
        print("\n".join(icon_set.snippet))


def build_parser():
    """Build the argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="SEO Toolkit - Authoring checks for titles, links, structured data and more"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.LOG_LEVEL.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help="Write logs to file in addition to console",
    )
    parser.add_argument(
        "--config",
        help="JSON file with threshold overrides (title and description bands, contrast, icon sizes)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_output_flag(subparser):
        subparser.add_argument(
            "--output",
            "-o",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )

    slug_parser = subparsers.add_parser("slugify", help="Turn a title into a URL slug.")
    slug_parser.add_argument("text", help="Text to slugify")
    slug_parser.set_defaults(func=slugify_command)

    clean_parser = subparsers.add_parser("clean", help="Clean up pasted text.")
    clean_parser.add_argument("operation", choices=CLEAN_OPERATIONS, help="Cleanup to apply")
    clean_parser.add_argument("text", help="Text to clean")
    clean_parser.set_defaults(func=clean_command)

    length_parser = subparsers.add_parser(
        "length", help="Check a title or meta description length."
    )
    length_parser.add_argument("band", choices=LENGTH_BANDS, help="Kind of text")
    length_parser.add_argument("text", help="Title or description")
    add_output_flag(length_parser)
    length_parser.set_defaults(func=length_command)

    serp_parser = subparsers.add_parser("serp", help="Preview a search result.")
    serp_parser.add_argument("--title", default="", help="Page title")
    serp_parser.add_argument("--description", default="", help="Meta description")
    serp_parser.add_argument("--slug", default="", help="Page slug")
    serp_parser.add_argument(
        "--origin", help=f"Site origin (default: {settings.SITE_ORIGIN})"
    )
    add_output_flag(serp_parser)
    serp_parser.set_defaults(func=serp_command)

    utm_parser = subparsers.add_parser("utm", help="Build a UTM-tagged URL.")
    utm_parser.add_argument("base", help="Absolute base URL")
    utm_parser.add_argument("--source", default="", help="utm_source")
    utm_parser.add_argument("--medium", default="", help="utm_medium")
    utm_parser.add_argument("--campaign", default="", help="utm_campaign")
    utm_parser.add_argument("--term", default="", help="utm_term")
    utm_parser.add_argument("--content", default="", help="utm_content")
    utm_parser.set_defaults(func=utm_command)

    contrast_parser = subparsers.add_parser("contrast", help="Check WCAG color contrast.")
    contrast_parser.add_argument("foreground", help="Text color, e.g. #111827")
    contrast_parser.add_argument("background", help="Background color, e.g. #ffffff")
    contrast_parser.add_argument(
        "--large", action="store_true", help="Use the large text thresholds"
    )
    add_output_flag(contrast_parser)
    contrast_parser.set_defaults(func=contrast_command)

    social_parser = subparsers.add_parser(
        "social", help="Build Open Graph and Twitter Card tags."
    )
    social_parser.add_argument("--title", default="", help="Page title")
    social_parser.add_argument("--description", default="", help="Page description")
    social_parser.add_argument("--url", default="", help="Canonical page URL")
    social_parser.add_argument("--image", default="", help="Preview image URL")
    social_parser.add_argument("--html", action="store_true", help="Print <meta> tags")
    add_output_flag(social_parser)
    social_parser.set_defaults(func=social_command)

    jsonld_parser = subparsers.add_parser("jsonld", help="Validate or prettify JSON-LD.")
    jsonld_parser.add_argument("file", help="JSON-LD file, or - for stdin")
    jsonld_parser.add_argument(
        "--format", action="store_true", help="Print with 2-space indentation"
    )
    jsonld_parser.add_argument(
        "--from-html", action="store_true", help="Validate every JSON-LD block in an HTML page"
    )
    add_output_flag(jsonld_parser)
    jsonld_parser.set_defaults(func=jsonld_command)

    robots_parser = subparsers.add_parser("robots", help="Check a path against robots.txt.")
    robots_parser.add_argument("file", help="robots.txt file, or - for stdin")
    robots_parser.add_argument("path", help="URL path, e.g. /admin/edit")
    robots_parser.add_argument(
        "--audit", action="store_true", help="Also report common mistakes"
    )
    robots_parser.set_defaults(func=robots_command)

    sitemap_parser = subparsers.add_parser("sitemap", help="Find duplicate sitemap entries.")
    sitemap_parser.add_argument("file", help="Sitemap XML file, or - for stdin")
    add_output_flag(sitemap_parser)
    sitemap_parser.set_defaults(func=sitemap_command)

    headers_parser = subparsers.add_parser("headers", help="Lint security headers.")
    headers_parser.add_argument("file", help="Header block file, or - for stdin")
    add_output_flag(headers_parser)
    headers_parser.set_defaults(func=headers_command)

    icons_parser = subparsers.add_parser("icons", help="Generate favicons from an image.")
    icons_parser.add_argument("image", help="Source image, or - for stdin")
    icons_parser.add_argument(
        "--output-dir",
        default=settings.ICON_OUTPUT_DIR,
        help=f"Directory for the PNG files (default: {settings.ICON_OUTPUT_DIR})",
    )
    icons_parser.add_argument(
        "--theme-color", default=None, help=f"Theme color (default: {settings.THEME_COLOR})"
    )
    icons_parser.add_argument("--html", action="store_true", help="Print the <head> snippet")
    icons_parser.set_defaults(func=icons_command)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging based on flags
    setup_logging(
        level=args.log_level,
        log_file=getattr(args, 'log_file', None),
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        if args.config:
            if not Path(args.config).exists():
                raise FileNotFoundError(f"Config file not found: {args.config}")
            args.thresholds = ToolkitThresholds.from_file(args.config)
        else:
            args.thresholds = default_thresholds

        args.func(args)
    except (ToolkitError, OSError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
