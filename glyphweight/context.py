"""Per-occurrence wrapper pairing a position with a shared flyweight."""

from dataclasses import replace
from typing import Optional

from .flyweight import CharacterFlyweight, Sink
from .state import Position


class CharacterContext:
    """
    One character occurrence.

    The context owns a private copy of its Position and only references its
    flyweight, which belongs to the factory pool. Moving a context never
    touches the flyweight or any other context sharing it.
    """

    __slots__ = ("_flyweight", "_position")

    def __init__(self, flyweight: CharacterFlyweight, position: Position):
        self._flyweight = flyweight
        self._position = replace(position)

    def __repr__(self) -> str:
        return f"CharacterContext({self._flyweight.char!r} at {self._position})"

    @property
    def flyweight(self) -> CharacterFlyweight:
        return self._flyweight

    @property
    def position(self) -> Position:
        return self._position

    def render(self, sink: Optional[Sink] = None) -> str:
        return self._flyweight.render(self._position, sink)

    def move(self, position: Position) -> None:
        """Replace the stored position."""
        self._position = replace(position)

    def move_to(self, x: float, y: float) -> None:
        self.move(Position(x, y))
