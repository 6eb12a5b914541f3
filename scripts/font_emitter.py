"""Serialize a generated font table as a Rust constant."""

import contextlib
import os
from collections import namedtuple
from dataclasses import dataclass, field

from font_errors import OutputError

DEFAULT_NAME = "FONT"
DEFAULT_TYPE = "crate::screen::Font"
WRAP = 32
INDENT = " " * 8

GlyphRecord = namedtuple("GlyphRecord", "packed width advance")


@dataclass
class FontTable:
    height: int
    glyphs: list = field(default_factory=list)

    @property
    def chars(self):
        return [g.packed for g in self.glyphs]

    @property
    def width(self):
        return [g.width for g in self.glyphs]

    @property
    def advance(self):
        return [g.advance for g in self.glyphs]


def format_bytes(data):
    return "&[" + "".join(f"0x{b:x}," for b in data) + "],"


def format_numbers(values, per_line=WRAP):
    lines = []
    for i in range(0, max(len(values), 1), per_line):
        lines.append(INDENT + "".join(f"{v}," for v in values[i:i + per_line]))
    return lines


def format_font(table, name=DEFAULT_NAME, type_path=DEFAULT_TYPE):
    """Return the complete source text for one font table."""
    lines = [
        "#[allow(dead_code)]",
        f"pub const {name}: {type_path} = {type_path} {{",
        f"    height: {table.height},",
        "    chars: &[",
    ]
    for packed in table.chars:
        lines.append(INDENT + format_bytes(packed))
    lines.append("    ],")

    lines.append("    width: &[")
    lines.extend(format_numbers(table.width))
    lines.append("    ],")

    lines.append("    advance: &[")
    lines.extend(format_numbers(table.advance))
    lines.append("    ],")

    lines.append("};")
    return "\n".join(lines) + "\n"


def write_font(text, output_path):
    """Write the artifact; a partially written file is removed on failure."""
    try:
        f = open(output_path, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputError(f"cannot open {output_path}: {e}") from e

    try:
        with f:
            f.write(text)
    except (OSError, UnicodeError) as e:
        with contextlib.suppress(OSError):
            os.remove(output_path)
        raise OutputError(f"cannot write {output_path}: {e}") from e
