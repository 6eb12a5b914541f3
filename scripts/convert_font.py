#!/usr/bin/env python3
"""
TTF-to-bitmap font table converter for the calculator firmware.
Renders every repertoire character without anti-aliasing and emits a
Rust `Font` constant with packed 1bpp glyphs, widths and advances.
"""

import argparse
import sys

from font_emitter import DEFAULT_NAME, DEFAULT_TYPE, FontTable, GlyphRecord, format_font, write_font
from font_errors import FontError, OracleError, RasterOverflowError
from font_metrics import BLACK, WHITE, PillowMetrics, PillowPainter, RasterBuffer, load_font
from font_repertoire import CHARS
from glyph_packer import MAX_FIELD, check_fit, check_height, pack_glyph

DEFAULT_SIZE = 16


def render_glyph(ch, font, metrics, painter, buffer, height):
    """Paint ch into the shared buffer and return its GlyphRecord."""
    rect = metrics.bounding_rect(font, ch)
    advance = metrics.advance(font, ch)
    if advance < 0:
        raise OracleError(f"negative advance {advance}", ch)
    if advance > MAX_FIELD:
        raise RasterOverflowError(f"advance {advance} does not fit in a byte", ch, rect)
    check_fit(rect, buffer, ch)

    buffer.clear(WHITE)
    painter.paint(ch, font, buffer, BLACK, WHITE)

    if rect.width == 0 or rect.height == 0:
        return GlyphRecord(b"", 0, advance)
    return GlyphRecord(pack_glyph(buffer, rect, height), rect.width, advance)


def generate_font(font, metrics=None, painter=None, chars=None):
    """Render every character of the repertoire in order into a FontTable."""
    metrics = metrics or PillowMetrics()
    painter = painter or PillowPainter()
    chars = CHARS if chars is None else chars
    buffer = RasterBuffer()

    height = metrics.height(font)
    check_height(height, buffer)

    table = FontTable(height)
    for i, ch in enumerate(chars):
        try:
            table.glyphs.append(render_glyph(ch, font, metrics, painter, buffer, height))
        except FontError as e:
            e.index = i
            e.char = ch
            raise
    return table


def convert_font(font_name, output_path, size=DEFAULT_SIZE, index=0,
                 name=DEFAULT_NAME, type_path=DEFAULT_TYPE):
    """Generate the table for a font and write it; nothing is written on failure."""
    font = load_font(font_name, size, index)
    table = generate_font(font)
    write_font(format_font(table, name, type_path), output_path)
    return table


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert a TrueType/OpenType font into a 1bpp Rust font table.")
    parser.add_argument("font", help="font file, or the file name of an installed font")
    parser.add_argument("output", help="output .rs file")
    parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE,
                        help=f"pixel size (default: {DEFAULT_SIZE})")
    parser.add_argument("-i", "--index", type=int, default=0,
                        help="face index inside a font collection (default: 0)")
    parser.add_argument("--name", default=DEFAULT_NAME,
                        help=f"name of the generated constant (default: {DEFAULT_NAME})")
    parser.add_argument("--type", dest="type_path", default=DEFAULT_TYPE,
                        help=f"Rust type of the constant (default: {DEFAULT_TYPE})")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.size <= 0:
        print(f"Error: invalid size {args.size}", file=sys.stderr)
        sys.exit(1)

    try:
        table = convert_font(args.font, args.output, args.size, args.index,
                             args.name, args.type_path)
    except FontError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Font table complete: {args.output} "
          f"({len(table.glyphs)} glyphs, height {table.height}, "
          f"{sum(len(g.packed) for g in table.glyphs)} bytes)")


if __name__ == "__main__":
    main()
