"""
Binarize a painted glyph and pack it into 1bpp bytes.

Each row of the glyph is cut into groups of 8 columns. A full group is
packed MSB = leftmost pixel. A trailing partial group of k columns goes
into the low k bits of its byte (bit k-1 = leftmost pixel), which is what
the firmware's draw_bits() expects.
"""

from font_errors import RasterOverflowError

THRESHOLD = 128
MAX_FIELD = 255


def is_black(pixel):
    """Threshold on the blue channel only; the painter draws pure black on white."""
    return pixel[2] < THRESHOLD


def row_bytes(width):
    return (width + 7) // 8


def packed_size(width, height):
    if width <= 0:
        return 0
    return height * row_bytes(width)


def check_height(height, buffer):
    if height < 0 or height > buffer.height:
        raise RasterOverflowError(
            f"line height {height} does not fit a {buffer.width}x{buffer.height} raster")


def check_fit(rect, buffer, ch=None):
    """Raise RasterOverflowError when the column scan would leave the raster buffer."""
    if rect.width == 0 or rect.height == 0:
        return
    if (rect.x < 0 or rect.x + rect.width > buffer.width
            or rect.height > buffer.height):
        raise RasterOverflowError(
            f"bounding rect {tuple(rect)} exceeds the {buffer.width}x{buffer.height} raster",
            ch, rect)


def pack_glyph(buffer, rect, height):
    """Pack rows [0, height) of columns [rect.x, rect.x + rect.width)."""
    if rect.width == 0 or rect.height == 0:
        return b""

    data = bytearray()
    right = rect.x + rect.width
    for y in range(height):
        for x_byte in range(rect.x, right, 8):
            left = min(8, right - x_byte)
            value = 0
            for x in range(left):
                if is_black(buffer.pixel(x_byte + x, y)):
                    value |= 1 << ((left - 1) - x)
            data.append(value)
    return bytes(data)


def unpack_glyph(data, width, height):
    """Inverse of pack_glyph: rows of booleans, True = black."""
    if width <= 0:
        return [[] for _ in range(height)]
    if len(data) != packed_size(width, height):
        raise ValueError(f"expected {packed_size(width, height)} bytes for a "
                         f"{width}x{height} glyph, got {len(data)}")

    rows = []
    offset = 0
    for _ in range(height):
        row = []
        remain = width
        while remain > 0:
            left = min(8, remain)
            value = data[offset]
            offset += 1
            for x in range(left):
                row.append(bool(value & (1 << ((left - 1) - x))))
            remain -= left
        rows.append(row)
    return rows
