"""
Text Editor
===========

Client aggregate of the flyweight pool. A TextEditor keeps an ordered list
of character contexts and asks its factory for the shared flyweight of
each character it adds. Elements are never removed.

Example:
    editor = TextEditor()
    editor.add_character("l", {"is_bold": True}, 20, 0)
    editor.find_characters_at(20, 0)[0].render()
"""

import logging
from typing import Any, Callable, Iterator, List, Optional

from .context import CharacterContext
from .factory import CharacterFlyweightFactory, FlyweightStats
from .flyweight import Sink
from .state import CharacterFormatting, Glyph, Position, as_formatting

logger = logging.getLogger(__name__)


class TextEditor:
    """Ordered sequence of character occurrences backed by one factory."""

    def __init__(
        self,
        factory: Optional[CharacterFlyweightFactory] = None,
        sink: Optional[Sink] = None,
    ):
        """
        Args:
            factory: Flyweight pool to draw from; a fresh one when omitted
            sink: Where render_text sends descriptions; logging when omitted
        """
        self._factory = factory if factory is not None else CharacterFlyweightFactory()
        self._sink = sink
        self._characters: List[CharacterContext] = []

    @property
    def factory(self) -> CharacterFlyweightFactory:
        return self._factory

    def add_element(self, intrinsic: Glyph, extrinsic: Position) -> CharacterContext:
        """Place ``intrinsic`` at ``extrinsic`` and return the new context."""
        flyweight = self._factory.get_flyweight(intrinsic)
        context = CharacterContext(flyweight, extrinsic)
        self._characters.append(context)
        return context

    def add_character(
        self, char: str, formatting: Any, position_x: float, position_y: float
    ) -> CharacterContext:
        """
        Convenience form of add_element.

        ``formatting`` may be a CharacterFormatting or a dict of its attributes.
        """
        glyph = Glyph(char, as_formatting(formatting))
        return self.add_element(glyph, Position(position_x, position_y))

    def find_at(self, predicate: Callable[[Position], bool]) -> List[CharacterContext]:
        """Every context whose current position satisfies ``predicate``, in order."""
        return [context for context in self._characters if predicate(context.position)]

    def find_characters_at(self, pos_x: float, pos_y: float) -> List[CharacterContext]:
        return self.find_at(lambda position: position.x == pos_x and position.y == pos_y)

    def render_text(self, sink: Optional[Sink] = None) -> List[str]:
        """Render every character in insertion order and return the descriptions."""
        sink = sink if sink is not None else self._sink
        logger.info("Rendering %d characters", len(self._characters))
        return [context.render(sink) for context in self._characters]

    def count(self) -> int:
        return len(self._characters)

    def get_stats(self) -> FlyweightStats:
        return self._factory.get_stats()

    def unshared_memory(self) -> int:
        """
        Bytes the same content would need if every occurrence stored its
        own copy of the intrinsic state.
        """
        return sum(context.flyweight.estimate_footprint() for context in self._characters)

    def __len__(self) -> int:
        return len(self._characters)

    def __iter__(self) -> Iterator[CharacterContext]:
        return iter(self._characters)


# ==============================================================================================
# Sample Text
# ==============================================================================================

BASIC_FORMATTING = CharacterFormatting()
BOLD_FORMATTING = CharacterFormatting(is_bold=True)


def create_sample_text(
    factory: Optional[CharacterFlyweightFactory] = None, sink: Optional[Sink] = None
) -> TextEditor:
    """
    Build "Hello" in plain Arial on the first line and "World" in bold below.

    Ten characters share nine flyweights: the two plain 'l's reuse one.
    """
    editor = TextEditor(factory, sink)

    for index, char in enumerate("Hello"):
        editor.add_character(char, BASIC_FORMATTING, index * 10, 0)

    for index, char in enumerate("World"):
        editor.add_character(char, BOLD_FORMATTING, index * 10, 20)

    stats = editor.get_stats()
    logger.info(
        "Created %d characters using %d flyweights (created %d, reused %d) using %d bytes",
        editor.count(),
        stats.unique_count,
        stats.created_count,
        stats.reuse_count,
        stats.total_memory,
    )
    return editor
