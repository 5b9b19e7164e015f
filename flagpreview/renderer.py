"""Thumbnail renderer: SVG rasterization plus a label drawn beneath it."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from xml.etree.ElementTree import ParseError

import cairosvg
from cairocffi import CairoError
from defusedxml import DefusedXmlException
from PIL import Image, ImageDraw, ImageFont

from flagpreview.errors import DecodeError, FontLoadError
from flagpreview.layout import text_height
from flagpreview.models import ImagePath

logger = logging.getLogger(__name__)

# What reading, parsing and rasterizing a bad SVG raises. OSError covers
# unreadable files and Pillow's UnidentifiedImageError; ValueError covers
# undefined sizes and bad attribute values.
_DECODE_ERRORS = (OSError, ParseError, DefusedXmlException, CairoError, ValueError)

# Label baseline is at size + font_size - _BASELINE_RAISE
_BASELINE_RAISE = 10

# Faux bold: the label is stroked in its own color
_BOLD_STROKE = 1


@dataclass(frozen=True)
class FontResource:
    """Raw font file bytes, shared read-only across render threads.

    FreeType faces are not safe to share between threads, so each render
    builds its own face from these bytes.
    """

    path: Path
    data: bytes

    def face(self, size: int) -> ImageFont.FreeTypeFont:
        try:
            return ImageFont.truetype(io.BytesIO(self.data), size)
        except OSError as e:
            raise FontLoadError(f"Cannot load font {self.path}: {e}") from e


def load_font(path: Path | str) -> FontResource:
    """Read a TrueType/OpenType font file and check that it parses."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FontLoadError(f"Cannot read font {path}: {e}") from e

    font = FontResource(path=path, data=data)
    font.face(12)
    logger.debug("Loaded font %s (%d bytes)", path, len(data))
    return font


def rasterize(path: Path | str, size: int) -> Image.Image:
    """Rasterize an SVG into a transparent ``size`` x ``size`` square.

    cairosvg fits the drawing into the requested viewport with the root
    element's preserveAspectRatio (``xMidYMid meet`` unless the file says
    otherwise), so the drawing keeps its aspect ratio and is centered on the
    short axis. It is drawn straight at the target size, never at the
    document's own size.
    """
    path = Path(path)
    try:
        svg_bytes = path.read_bytes()
        png_bytes = cairosvg.svg2png(bytestring=svg_bytes, output_width=size, output_height=size)
        img = Image.open(io.BytesIO(png_bytes)).convert("RGBA")
    except _DECODE_ERRORS as e:
        raise DecodeError(f"Cannot decode {path}: {e}") from e

    if img.size != (size, size):
        raise DecodeError(f"Cannot decode {path}: rendered {img.width}x{img.height}, expected {size}x{size}")
    return img


def render_label(
    canvas: Image.Image,
    text: str,
    font: ImageFont.FreeTypeFont,
    baseline: int,
    color: str,
) -> Image.Image:
    """Composite ``text`` centered horizontally with its baseline at ``baseline``."""
    txt_layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(txt_layer)
    draw.text(
        (canvas.width / 2, baseline),
        text,
        font=font,
        fill=color,
        anchor="ms",
        stroke_width=_BOLD_STROKE,
        stroke_fill=color,
    )
    return Image.alpha_composite(canvas, txt_layer)


def render_thumbnail(
    image: ImagePath,
    size: int,
    font: FontResource,
    font_size: int,
    text_color: str,
) -> Image.Image:
    """Render one grid cell: the image in a ``size`` square with its label below."""
    canvas = Image.new("RGBA", (size, size + text_height(font_size)), (0, 0, 0, 0))
    canvas.paste(rasterize(image.path, size), (0, 0))

    face = font.face(font_size)
    baseline = size + font_size - _BASELINE_RAISE
    thumb = render_label(canvas, image.label, face, baseline, text_color)
    logger.debug("Rendered %s (%dx%d)", image.label, thumb.width, thumb.height)
    return thumb
