"""
Host font services: metrics oracle, glyph painter and the raster buffer.

The generator only talks to the two small interfaces below, so tests can
drive it with hand-drawn pixel matrices instead of a real font.
"""

from collections import namedtuple
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from font_errors import OracleError, PaintError

RASTER_SIZE = 100

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

GlyphRect = namedtuple("GlyphRect", "x y width height")


class MetricsOracle(Protocol):
    def height(self, font) -> int: ...

    def bounding_rect(self, font, ch: str) -> GlyphRect: ...

    def advance(self, font, ch: str) -> int: ...


class GlyphPainter(Protocol):
    def paint(self, ch: str, font, buffer: "RasterBuffer", pen, bg) -> None: ...


class RasterBuffer:
    """Fixed-size RGB surface reused for every glyph of a run."""

    def __init__(self, width=RASTER_SIZE, height=RASTER_SIZE, background=WHITE):
        self.width = width
        self.height = height
        self.background = background
        self.image = Image.new("RGB", (width, height), background)
        self._pixels = self.image.load()

    def clear(self, color=None):
        self.image.paste(color or self.background, (0, 0, self.width, self.height))

    def pixel(self, x, y):
        return self._pixels[x, y]

    def set_pixel(self, x, y, color):
        self._pixels[x, y] = color


def load_font(name, size, index=0):
    """Open a font file, or an installed font by file name, at a pixel size."""
    try:
        return ImageFont.truetype(name, size, index=index,
                                  layout_engine=ImageFont.Layout.BASIC)
    except OSError as e:
        raise OracleError(f"cannot open font {name!r}: {e}") from e


def bearing_shift(font, ch):
    """Columns a glyph is moved right so a negative left bearing stays on the raster."""
    x0 = font.getbbox(ch, mode="1")[0]
    return -min(0, x0)


class PillowMetrics:
    """
    Metrics of a FreeType font, measured from the top-left of the line.

    Glyphs with a negative left bearing are reported shifted right by the
    same amount PillowPainter moves them, so the rect always starts at
    column 0 or later.
    """

    def height(self, font):
        ascent, descent = font.getmetrics()
        return ascent + descent

    def bounding_rect(self, font, ch):
        try:
            x0, y0, x1, y1 = font.getbbox(ch, mode="1")
        except (OSError, ValueError) as e:
            raise OracleError(f"no bounding box: {e}", ch) from e
        shift = -min(0, x0)
        return GlyphRect(x0 + shift, y0, max(0, x1 - x0), max(0, y1 - y0))

    def advance(self, font, ch):
        try:
            return int(round(font.getlength(ch, mode="1")))
        except (OSError, ValueError) as e:
            raise OracleError(f"no advance: {e}", ch) from e


class PillowPainter:
    """Draws one character with anti-aliasing disabled, at the origin PillowMetrics measures."""

    def paint(self, ch, font, buffer, pen, bg):
        draw = ImageDraw.Draw(buffer.image)
        draw.fontmode = "1"
        try:
            draw.text((bearing_shift(font, ch), 0), ch, font=font, fill=pen)
        except (OSError, ValueError) as e:
            raise PaintError(f"cannot draw: {e}", ch) from e
