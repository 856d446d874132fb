"""
Intrinsic and Extrinsic State
=============================

Value types describing a character occurrence in a text layout.

- CharacterFormatting: font styling shared by many characters
- Glyph: a character plus its formatting (the intrinsic, shareable state)
- Position: where one occurrence sits on the page (the extrinsic state)

Glyphs are frozen and compare by value. Two glyphs with equal fields
produce the same canonical key, and the key is what the flyweight
factory pools on.

Canonical key format (fixed field order):

    char-font_family-font_size-is_bold-is_italic-is_underline-color

Flags encode as 1/0, integral floats encode like ints (12.0 -> "12"),
strings are included verbatim and None encodes as NULL_TOKEN (a NUL
character, which string attributes may not contain). Font sizes are
restricted to int and float so equal sizes always print the same.
Fields are joined with KEY_SEPARATOR without escaping, so a separator
inside a string attribute can make two different glyphs collide. That
risk is accepted and left untreated.
"""

import numbers
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .exceptions import InvalidIntrinsicStateError, InvalidPositionError

# ==============================================================================================
# Constants
# ==============================================================================================

KEY_SEPARATOR = "-"
NULL_TOKEN = "\x00"


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_int_or_float(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: Any) -> str:
    """Render a number the way keys and descriptions print it (12.0 -> "12")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _encode(value: Any) -> str:
    if value is None:
        return NULL_TOKEN
    # bool before numbers: bool is an int subclass
    if isinstance(value, bool):
        return "1" if value else "0"
    if _is_real(value):
        return format_number(value)
    return str(value)


# ==============================================================================================
# Intrinsic State
# ==============================================================================================


@dataclass(frozen=True)
class CharacterFormatting:
    """
    Text formatting options.

    Every attribute may be None, meaning "unset". An unset attribute is a
    distinct value: it never shares a flyweight with an explicit default.
    """

    font_family: Optional[str] = "Arial"
    font_size: Optional[float] = 12
    is_bold: Optional[bool] = False
    is_italic: Optional[bool] = False
    is_underline: Optional[bool] = False
    color: Optional[str] = "black"

    def __post_init__(self):
        for name in ("font_family", "color"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidIntrinsicStateError(
                    f"{name} must be a string, got {type(value).__name__}"
                )
            if value is not None and NULL_TOKEN in value:
                raise InvalidIntrinsicStateError(
                    f"{name} must not contain a NUL character"
                )
        for name in ("is_bold", "is_italic", "is_underline"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, bool):
                raise InvalidIntrinsicStateError(
                    f"{name} must be a bool, got {type(value).__name__}"
                )
        if self.font_size is not None:
            if not _is_int_or_float(self.font_size):
                raise InvalidIntrinsicStateError(
                    f"font_size must be an int or float, got {type(self.font_size).__name__}"
                )
            if not self.font_size > 0:
                raise InvalidIntrinsicStateError(
                    f"font_size must be positive, got {self.font_size!r}"
                )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "CharacterFormatting":
        """Build formatting from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise InvalidIntrinsicStateError(
                f"Unknown formatting attributes: {', '.join(sorted(unknown))}"
            )
        return cls(**values)

    def style_description(self) -> str:
        """Short human-readable summary, e.g. "Arial 12px bold"."""
        description = f"{self.font_family} {_encode(self.font_size)}px"
        if self.is_bold:
            description += " bold"
        if self.is_italic:
            description += " italic"
        if self.is_underline:
            description += " underline"
        return description


DEFAULT_FORMATTING = CharacterFormatting()


@dataclass(frozen=True)
class Glyph:
    """A character together with its formatting: the shareable state."""

    char: str
    formatting: CharacterFormatting = DEFAULT_FORMATTING

    def __post_init__(self):
        if not isinstance(self.char, str) or not self.char:
            raise InvalidIntrinsicStateError(
                f"char must be a non-empty string, got {self.char!r}"
            )
        if not isinstance(self.formatting, CharacterFormatting):
            raise InvalidIntrinsicStateError(
                "formatting must be a CharacterFormatting, "
                f"got {type(self.formatting).__name__}"
            )


def as_formatting(value: Any) -> CharacterFormatting:
    """Accept either a CharacterFormatting or a mapping of its attributes."""
    if isinstance(value, CharacterFormatting):
        return value
    if isinstance(value, Mapping):
        return CharacterFormatting.from_mapping(value)
    raise InvalidIntrinsicStateError(
        f"formatting must be a CharacterFormatting or a mapping, got {type(value).__name__}"
    )


def canonical_key(glyph: Glyph) -> str:
    """Serialize every intrinsic attribute in the documented field order."""
    formatting = glyph.formatting
    parts = (
        glyph.char,
        formatting.font_family,
        formatting.font_size,
        formatting.is_bold,
        formatting.is_italic,
        formatting.is_underline,
        formatting.color,
    )
    return KEY_SEPARATOR.join(_encode(part) for part in parts)


# ==============================================================================================
# Extrinsic State
# ==============================================================================================


@dataclass
class Position:
    """
    Per-occurrence coordinates. Mutable, owned by a single context.

    Coordinates are validated on every assignment, including in-place
    updates after construction.
    """

    x: float
    y: float

    def __setattr__(self, name, value):
        if name in ("x", "y") and not _is_real(value):
            raise InvalidPositionError(f"{name} must be a number, got {value!r}")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return f"({format_number(self.x)},{format_number(self.y)})"
