#!/usr/bin/env python3
"""
Read a generated font table back and print its glyphs as text.

Usage: python font_table_reader.py <font.rs> [chars]
"""

import re
import sys

from font_emitter import FontTable, GlyphRecord
from font_errors import FontError
from font_repertoire import CHARS, char_index
from glyph_packer import packed_size, unpack_glyph

HEIGHT_RE = re.compile(r"height:\s*(\d+),$")
SECTIONS = {"chars: &[": "chars", "width: &[": "width", "advance: &[": "advance"}


class TableFormatError(FontError):
    pass


def parse_font_table(text):
    """Parse the text written by font_emitter.format_font into a FontTable."""
    height = None
    values = {"chars": [], "width": [], "advance": []}
    section = None

    for line in text.splitlines():
        line = line.strip()
        m = HEIGHT_RE.match(line)
        if m:
            height = int(m.group(1))
            continue
        if line in SECTIONS:
            section = SECTIONS[line]
            continue
        if line == "],":
            section = None
            continue
        if section == "chars":
            if not (line.startswith("&[") and line.endswith("],")):
                raise TableFormatError(f"malformed glyph line: {line!r}")
            values["chars"].append(bytes(int(v, 16) for v in line[2:-2].split(",") if v))
        elif section is not None:
            values[section].extend(int(v) for v in line.split(",") if v)

    if height is None:
        raise TableFormatError("no height field")
    chars, width, advance = values["chars"], values["width"], values["advance"]
    if not len(chars) == len(width) == len(advance):
        raise TableFormatError(f"field lengths differ: chars={len(chars)} "
                               f"width={len(width)} advance={len(advance)}")

    table = FontTable(height)
    for i, (packed, w, a) in enumerate(zip(chars, width, advance)):
        if len(packed) != packed_size(w, height):
            raise TableFormatError(f"{len(packed)} bytes for width {w}, "
                                   f"expected {packed_size(w, height)}", index=i)
        table.glyphs.append(GlyphRecord(packed, w, a))
    return table


def read_font_table(path):
    with open(path, encoding="utf-8") as f:
        return parse_font_table(f.read())


def glyph_lines(table, index, on="#", off="."):
    glyph = table.glyphs[index]
    rows = unpack_glyph(glyph.packed, glyph.width, table.height)
    return ["".join(on if bit else off for bit in row) for row in rows]


def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: python font_table_reader.py <font.rs> [chars]")
        sys.exit(1)

    try:
        table = read_font_table(sys.argv[1])
    except (OSError, FontError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Found {len(table.glyphs)} glyphs, height {table.height}")
    if len(table.glyphs) != len(CHARS):
        print(f"Warning: repertoire has {len(CHARS)} characters")

    wanted = sys.argv[2] if len(sys.argv) == 3 else "".join(CHARS[:len(table.glyphs)])
    for ch in wanted:
        i = char_index(ch)
        if i is None or i >= len(table.glyphs):
            print(f"'{ch}': not in table")
            continue
        glyph = table.glyphs[i]
        print(f"'{ch}' #{i} width={glyph.width} advance={glyph.advance}")
        for line in glyph_lines(table, i):
            print("    " + line)


if __name__ == "__main__":
    main()
