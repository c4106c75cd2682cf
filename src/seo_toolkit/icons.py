"""
Icon Generator

Builds the favicon and apple-touch icon set from a single uploaded image.
Raster formats are decoded by Pillow; SVG markup is rasterized first.
Decoding and resizing run in worker threads so the event loop stays free;
the three sizes are rendered concurrently from the same decoded bitmap.
"""

import asyncio
import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Union

from PIL import Image, UnidentifiedImageError

from seo_toolkit.config import default_thresholds, settings
from seo_toolkit.constants import (
    ICON_BACKGROUND,
    ICON_FILES,
    ICON_SNIPPET_ORDER,
    SVG_SNIFF_BYTES,
)
from seo_toolkit.exceptions import ImageDecodeError
from seo_toolkit.models import GeneratedIcon, IconSet
from seo_toolkit.rendering import render_icon_links

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, str, Path, BinaryIO]


def _read_source(source: ImageSource) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    return source.read()


def is_svg(data: bytes) -> bool:
    """Sniff SVG markup; vector input is rasterized before decoding.

    Examples:
        >>> is_svg(b'<?xml version="1.0"?><svg xmlns="http://www.w3.org/2000/svg"/>')
        True
        >>> is_svg(b'\\x89PNG\\r\\n')
        False
    """
    head = data[:SVG_SNIFF_BYTES].lstrip(b"\xef\xbb\xbf \t\r\n")
    return head.startswith(b"<") and b"<svg" in head.lower()


def rasterize_svg(data: bytes) -> bytes:
    """Render SVG markup to PNG bytes at its intrinsic size.

    Raises:
        ImageDecodeError: If the markup cannot be rendered
    """
    try:
        import cairosvg

        return cairosvg.svg2png(bytestring=data)
    except (ValueError, SyntaxError, OSError) as e:
        raise ImageDecodeError(f"Could not rasterize SVG: {e}") from e


def decode_image(source: ImageSource) -> Image.Image:
    """Decode an image fully into memory as RGBA.

    Args:
        source: Encoded bytes, a file path, or a binary file object;
            raster formats Pillow reads, or SVG

    Returns:
        The decoded image

    Raises:
        ImageDecodeError: If the data cannot be read or decoded, or is
            larger than Pillow's decompression bomb limit
    """
    try:
        data = _read_source(source)
    except OSError as e:
        raise ImageDecodeError(f"Could not read image: {e}") from e

    if is_svg(data):
        logger.debug("Rasterizing SVG source")
        data = rasterize_svg(data)

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            return image.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e


def center_square_box(width: int, height: int) -> tuple[int, int, int, int]:
    """Largest centered square crop box for the given dimensions.

    Examples:
        >>> center_square_box(400, 200)
        (100, 0, 300, 200)
    """
    side = min(width, height)
    left = (width - side) // 2
    top = (height - side) // 2
    return (left, top, left + side, top + side)


def render_icon(image: Image.Image, size: int) -> GeneratedIcon:
    """Render one square icon on an opaque white canvas.

    The source image is only read, so several sizes can be rendered from
    the same image at once.
    """
    filename, rel = ICON_FILES.get(size, (f"icon-{size}x{size}.png", "icon"))

    square = image.crop(center_square_box(*image.size))
    scaled = square.resize((size, size), Image.Resampling.LANCZOS)

    canvas = Image.new("RGB", (size, size), ICON_BACKGROUND)
    canvas.paste(scaled, (0, 0), scaled)

    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG", optimize=True)

    return GeneratedIcon(size=size, filename=filename, rel=rel, data=buffer.getvalue())


def build_icon_snippet(icons: Iterable[GeneratedIcon], theme_color: str) -> List[str]:
    """Head declarations for the produced icons followed by the theme color."""
    by_size = {icon.size: icon for icon in icons}
    ordered = [by_size[size] for size in ICON_SNIPPET_ORDER if size in by_size]
    return render_icon_links(ordered, theme_color).splitlines()


async def generate_icons(
    source: ImageSource,
    sizes: Optional[Iterable[int]] = None,
    theme_color: Optional[str] = None,
) -> IconSet:
    """
    Generate the icon set from one image.

    Args:
        source: Encoded bytes, a file path, or a binary file object
        sizes: Square sizes in pixels; defaults to 16, 32 and 180
        theme_color: Theme color declared in the snippet

    Returns:
        IconSet with PNG data and the head snippet

    Raises:
        ImageDecodeError: If the source cannot be decoded
    """
    sizes = tuple(sizes or default_thresholds.icon_sizes)
    theme_color = theme_color or settings.THEME_COLOR

    image = await asyncio.to_thread(decode_image, source)
    logger.info(f"Decoded {image.width}x{image.height} image, rendering sizes {sizes}")

    icons = await asyncio.gather(
        *(asyncio.to_thread(render_icon, image, size) for size in sizes)
    )

    return IconSet(
        icons=list(icons),
        snippet=build_icon_snippet(icons, theme_color),
        theme_color=theme_color,
    )
