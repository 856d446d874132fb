"""
Exceptions raised by glyphweight.

Everything inherits from GlyphweightError so callers can catch the whole
family at once. Validation errors also inherit from ValueError.
"""


class GlyphweightError(Exception):
    """Base class for all glyphweight errors."""

    pass


class InvalidIntrinsicStateError(GlyphweightError, ValueError):
    """Raised when a glyph or its formatting is not well-formed."""

    pass


class InvalidPositionError(GlyphweightError, ValueError):
    """Raised when a position coordinate is not a real number."""

    pass
