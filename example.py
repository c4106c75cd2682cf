"""Example usage of the SEO toolkit - Checking a draft page before publishing."""

import asyncio
import io

from PIL import Image

from seo_toolkit import (
    build_serp_preview,
    build_social_preview,
    build_utm_url,
    check_contrast,
    classify_length,
    generate_icons,
    lint_headers,
    slugify,
    validate_jsonld,
)


def main():
    """Run example checks on a draft page."""

    title = "Crème Brûlée & Other French Desserts"
    description = (
        "Step-by-step recipes for classic French desserts, from a silky crème brûlée "
        "to airy macarons, with tips for getting them right the first time."
    )

    slug = slugify(title)
    print(f"Slug: {slug}")

    for band, text in (("title", title), ("description", description)):
        result = classify_length(text, band)
        print(f"{band.title()}: {result.length} chars - {result.status.label} ({result.hint})")

    preview = build_serp_preview(title, description, "https://example.com", slug)
    print(f"\n{preview.title}\n{preview.url}\n{preview.description}")

    print("\nCampaign link:")
    print("  " + build_utm_url(
        f"https://example.com/{slug}", source="newsletter", medium="email", campaign="spring"
    ))

    contrast = check_contrast("#6b7280", "#ffffff")
    print(f"\nBody text contrast: {contrast.label} (AA: {contrast.passes_aa}, AAA: {contrast.passes_aaa})")

    social = build_social_preview(title, description, f"https://example.com/{slug}")
    print(f"\nSocial card for {social.domain} ({social.card_type}):")
    for key, value in social.as_pairs():
        print(f"  {key}: {value}")

    structured = validate_jsonld('{"@context": "https://schema.org", "@type": "Recipe"}')
    print(f"\nJSON-LD valid: {structured.valid} ({structured.type_label})")

    print("\nHeader findings for an empty response:")
    for finding in lint_headers(""):
        print(f"  • {finding}")

    buffer = io.BytesIO()
    Image.new("RGB", (256, 128), (200, 60, 40)).save(buffer, format="PNG")
    icon_set = asyncio.run(generate_icons(buffer.getvalue()))
    print("\nIcon snippet:")
    for line in icon_set.snippet:
        print(f"  {line}")


if __name__ == "__main__":
    main()
