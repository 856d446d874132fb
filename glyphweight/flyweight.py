"""
Character Flyweight
===================

A CharacterFlyweight holds only intrinsic state (a Glyph) and is shared by
every occurrence of that glyph. Position is supplied by the caller on each
render, so one instance can draw the same glyph anywhere.

Flyweights are created by CharacterFlyweightFactory, which guarantees a
single instance per canonical key. Nothing here mutates after construction.
"""

import logging
from typing import Callable, Optional

from .state import CharacterFormatting, Glyph, Position, canonical_key

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]

# ==============================================================================================
# Footprint Constants (simulated bytes)
# ==============================================================================================

CHAR_SIZE = 2  # UTF-16 code unit
BOOL_SIZE = 4
NUMBER_SIZE = 8
STRING_OVERHEAD = 16
STRING_CHAR_SIZE = 2


def _string_content_size(value: Optional[str]) -> int:
    return len(value or "") * STRING_CHAR_SIZE


class CharacterFlyweight:
    """
    Shared, immutable glyph.

    Attribute assignment after construction raises AttributeError.
    """

    __slots__ = ("_glyph", "_key", "_footprint")

    def __init__(self, glyph: Glyph):
        object.__setattr__(self, "_glyph", glyph)
        object.__setattr__(self, "_key", canonical_key(glyph))
        object.__setattr__(self, "_footprint", self._compute_footprint(glyph))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"CharacterFlyweight({self._key!r})"

    @property
    def intrinsic(self) -> Glyph:
        return self._glyph

    @property
    def char(self) -> str:
        return self._glyph.char

    @property
    def formatting(self) -> CharacterFormatting:
        return self._glyph.formatting

    @property
    def key(self) -> str:
        """Canonical pool key of the wrapped glyph."""
        return self._key

    def describe(self, position: Position) -> str:
        """Describe this glyph drawn at ``position``. Pure."""
        return (
            f"Character '{self.char}' at position {position} "
            f"with style: {self.formatting.style_description()}, "
            f"color: {self.formatting.color}"
        )

    def render(self, position: Position, sink: Optional[Sink] = None) -> str:
        """
        Emit the description of this glyph at ``position``.

        The description goes to ``sink`` when given, otherwise it is logged
        at INFO. Neither the flyweight nor the position is modified.

        Returns:
            The emitted description.
        """
        description = self.describe(position)
        if sink is None:
            logger.info(description)
        else:
            sink(description)
        return description

    def estimate_footprint(self) -> int:
        """Simulated memory cost of the intrinsic state, in bytes."""
        return self._footprint

    @staticmethod
    def _compute_footprint(glyph: Glyph) -> int:
        formatting = glyph.formatting
        return (
            CHAR_SIZE * len(glyph.char)
            + STRING_OVERHEAD
            + _string_content_size(formatting.font_family)
            + NUMBER_SIZE  # font_size
            + BOOL_SIZE * 3  # is_bold, is_italic, is_underline
            + STRING_OVERHEAD
            + _string_content_size(formatting.color)
        )
