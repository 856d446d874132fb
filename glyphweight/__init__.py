"""
glyphweight - Flyweight pattern for formatted text

Shares the intrinsic state of characters (glyph plus formatting) between
every occurrence through a keyed factory pool, while each occurrence keeps
its own position.
"""

from .context import CharacterContext
from .editor import TextEditor, create_sample_text
from .exceptions import (
    GlyphweightError,
    InvalidIntrinsicStateError,
    InvalidPositionError,
)
from .factory import CharacterFlyweightFactory, FlyweightStats
from .flyweight import CharacterFlyweight
from .state import (
    DEFAULT_FORMATTING,
    CharacterFormatting,
    Glyph,
    Position,
    canonical_key,
)

__all__ = [
    # State
    "CharacterFormatting",
    "DEFAULT_FORMATTING",
    "Glyph",
    "Position",
    "canonical_key",
    # Pattern participants
    "CharacterFlyweight",
    "CharacterFlyweightFactory",
    "FlyweightStats",
    "CharacterContext",
    "TextEditor",
    "create_sample_text",
    # Exceptions
    "GlyphweightError",
    "InvalidIntrinsicStateError",
    "InvalidPositionError",
]
