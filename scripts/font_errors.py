"""Errors raised while generating a bitmap font table."""


class FontError(Exception):
    """Base class. index/char are filled in by the generator when known."""

    def __init__(self, message, char=None, index=None):
        super().__init__(message)
        self.message = message
        self.char = char
        self.index = index

    def __str__(self):
        if self.index is None and self.char is None:
            return self.message
        where = f"glyph {self.index}" if self.index is not None else "glyph"
        if self.char is not None:
            where += f" ({self.char!r}, U+{ord(self.char[0]):04X})"
        return f"{where}: {self.message}"


class RasterOverflowError(FontError, OverflowError):
    """Glyph metrics do not fit the raster buffer or the table's byte fields."""

    def __init__(self, message, char=None, rect=None, index=None):
        super().__init__(message, char, index)
        self.rect = rect


class OracleError(FontError):
    pass


class PaintError(FontError):
    pass


class OutputError(FontError):
    pass
