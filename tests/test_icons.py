# tests/test_icons.py
"""Tests for the async icon generator."""

import io

import pytest
from PIL import Image

from seo_toolkit.exceptions import ImageDecodeError
from seo_toolkit.icons import (
    center_square_box,
    decode_image,
    generate_icons,
    is_svg,
    render_icon,
)


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def striped_png():
    """A 300x100 image: red, blue and green thirds."""
    image = Image.new("RGB", (300, 100), (255, 0, 0))
    image.paste((0, 0, 255), (100, 0, 200, 100))
    image.paste((0, 255, 0), (200, 0, 300, 100))
    return png_bytes(image)


@pytest.fixture
def transparent_png():
    return png_bytes(Image.new("RGBA", (64, 64), (0, 0, 0, 0)))


@pytest.fixture
def svg_renderer():
    """Skip when the native cairo library behind cairosvg is unavailable."""
    try:
        import cairosvg  # noqa: F401
    except OSError:
        pytest.skip("cairo library not installed")


class TestGenerateIcons:
    """Test suite for generate_icons."""

    @pytest.mark.asyncio
    async def test_three_sizes(self, striped_png):
        icon_set = await generate_icons(striped_png)

        assert [icon.size for icon in icon_set.icons] == [16, 32, 180]
        for icon in icon_set.icons:
            decoded = Image.open(io.BytesIO(icon.data))
            assert decoded.format == "PNG"
            assert decoded.size == (icon.size, icon.size)
            assert decoded.mode == "RGB"

    @pytest.mark.asyncio
    async def test_filenames(self, striped_png):
        icon_set = await generate_icons(striped_png)
        assert icon_set.get(16).filename == "favicon-16x16.png"
        assert icon_set.get(32).filename == "favicon-32x32.png"
        assert icon_set.get(180).filename == "apple-touch-icon.png"
        assert icon_set.get(180).rel == "apple-touch-icon"
        assert icon_set.get(64) is None

    @pytest.mark.asyncio
    async def test_center_crop(self, striped_png):
        """Only the centered square (the blue third) is kept."""
        icon_set = await generate_icons(striped_png)
        image = Image.open(io.BytesIO(icon_set.get(180).data)).convert("RGB")

        for point in [(0, 0), (90, 90), (179, 179)]:
            red, green, blue = image.getpixel(point)
            assert red <= 2
            assert green <= 2
            assert blue >= 253

    @pytest.mark.asyncio
    async def test_transparency_on_white(self, transparent_png):
        icon_set = await generate_icons(transparent_png)
        image = Image.open(io.BytesIO(icon_set.get(32).data)).convert("RGB")
        assert image.getpixel((16, 16)) == (255, 255, 255)

    @pytest.mark.asyncio
    async def test_snippet_order(self, striped_png):
        icon_set = await generate_icons(striped_png)
        assert icon_set.snippet == [
            '<link rel="icon" type="image/png" sizes="32x32" href="/favicon-32x32.png">',
            '<link rel="icon" type="image/png" sizes="16x16" href="/favicon-16x16.png">',
            '<link rel="apple-touch-icon" sizes="180x180" href="/apple-touch-icon.png">',
            '<meta name="theme-color" content="#ffffff">',
        ]

    @pytest.mark.asyncio
    async def test_snippet_only_lists_produced_icons(self, striped_png):
        icon_set = await generate_icons(striped_png, sizes=[16])
        assert len(icon_set.snippet) == 2
        assert 'sizes="16x16"' in icon_set.snippet[0]
        assert icon_set.snippet[1].startswith('<meta name="theme-color"')

    @pytest.mark.asyncio
    async def test_custom_theme_color(self, striped_png):
        icon_set = await generate_icons(striped_png, theme_color="#112233")
        assert icon_set.snippet[-1] == '<meta name="theme-color" content="#112233">'

    @pytest.mark.asyncio
    async def test_file_sources(self, striped_png, tmp_path):
        path = tmp_path / "logo.png"
        path.write_bytes(striped_png)

        from_path = await generate_icons(path)
        from_file = await generate_icons(io.BytesIO(striped_png))
        assert len(from_path.icons) == 3
        assert len(from_file.icons) == 3

    @pytest.mark.asyncio
    async def test_undecodable_input(self):
        with pytest.raises(ImageDecodeError):
            await generate_icons(b"definitely not an image")

    @pytest.mark.asyncio
    async def test_svg_is_rasterized(self, svg_renderer):
        """Vector input is rendered and center-cropped like a raster image."""
        svg = (
            b'<?xml version="1.0" encoding="UTF-8"?>\n'
            b'<svg xmlns="http://www.w3.org/2000/svg" width="40" height="20">'
            b'<rect x="0" y="0" width="40" height="20" fill="#ff0000"/>'
            b'</svg>'
        )
        icon_set = await generate_icons(svg)

        assert [icon.size for icon in icon_set.icons] == [16, 32, 180]
        image = Image.open(io.BytesIO(icon_set.get(180).data)).convert("RGB")
        red, green, blue = image.getpixel((90, 90))
        assert red >= 253
        assert green <= 2
        assert blue <= 2

    @pytest.mark.asyncio
    async def test_malformed_svg(self):
        with pytest.raises(ImageDecodeError):
            await generate_icons(b'<svg xmlns="http://www.w3.org/2000/svg"><rect></svg>')

    @pytest.mark.asyncio
    async def test_oversized_image(self, monkeypatch):
        """Images past Pillow's decompression bomb limit fail as decode errors."""
        source = png_bytes(Image.new("RGB", (300, 300), (0, 0, 0)))
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
        with pytest.raises(ImageDecodeError):
            await generate_icons(source)

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(ImageDecodeError):
            await generate_icons(tmp_path / "missing.png")

    @pytest.mark.asyncio
    async def test_save(self, striped_png, tmp_path):
        icon_set = await generate_icons(striped_png)
        written = icon_set.save(tmp_path / "out")
        assert sorted(p.name for p in written) == [
            "apple-touch-icon.png",
            "favicon-16x16.png",
            "favicon-32x32.png",
        ]
        assert all(p.exists() for p in written)


class TestHelpers:
    """Test suite for the synchronous helpers."""

    def test_center_square_box(self):
        assert center_square_box(400, 200) == (100, 0, 300, 200)
        assert center_square_box(200, 400) == (0, 100, 200, 300)
        assert center_square_box(50, 50) == (0, 0, 50, 50)

    def test_render_icon_unknown_size(self, striped_png):
        icon = render_icon(decode_image(striped_png), 48)
        assert icon.filename == "icon-48x48.png"
        assert icon.sizes == "48x48"

    def test_decode_image_mode(self, striped_png):
        assert decode_image(striped_png).mode == "RGBA"

    def test_is_svg(self, striped_png):
        assert is_svg(b'\xef\xbb\xbf  <svg xmlns="http://www.w3.org/2000/svg"></svg>')
        assert is_svg(b'<?xml version="1.0"?>\n<!-- logo -->\n<svg></svg>')
        assert not is_svg(striped_png)
        assert not is_svg(b"plain text mentioning <svg")
