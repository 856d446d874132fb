"""
Flyweight Factory
=================

Pool of CharacterFlyweight instances keyed by the canonical key of their
glyph. For any two equal glyphs the factory hands back the very same
instance, so callers can compare flyweights with ``is``.

The pool only grows: flyweights are created lazily, at most once per key,
and live as long as the factory.

Usage:
    factory = CharacterFlyweightFactory()
    a = factory.get_flyweight(Glyph("l"))
    b = factory.get_flyweight(Glyph("l"))
    assert a is b
    factory.get_stats()  # FlyweightStats(unique_count=1, ..., reuse_count=1)
"""

import logging
import threading
from contextlib import nullcontext
from dataclasses import dataclass, replace
from typing import Dict, List

from .flyweight import CharacterFlyweight
from .state import Glyph, canonical_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlyweightStats:
    """Snapshot of the factory counters."""

    unique_count: int
    total_memory: int
    reuse_count: int
    created_count: int


class CharacterFlyweightFactory:
    """
    Keyed cache of shared glyph flyweights.

    Features:
    - One instance per canonical key (identity, not just equality)
    - Creation, reuse and memory counters
    - Optional locking around the check-then-insert in get_flyweight, so a
      factory shared between threads never builds two flyweights for one key
    """

    def __init__(self, thread_safe: bool = True):
        """
        Initialize an empty pool.

        Args:
            thread_safe: Serialize get_flyweight with a reentrant lock (default: True)
        """
        self._flyweights: Dict[str, CharacterFlyweight] = {}
        self._lock = threading.RLock() if thread_safe else nullcontext()

        # Statistics
        self._memory_used = 0
        self._reused_count = 0
        self._created_count = 0

    def get_flyweight(self, intrinsic: Glyph) -> CharacterFlyweight:
        """Return the pooled flyweight for ``intrinsic``, creating it if absent."""
        key = canonical_key(intrinsic)
        with self._lock:
            flyweight = self._flyweights.get(key)
            if flyweight is not None:
                self._reused_count += 1
                logger.debug("Reusing flyweight %r", key)
                return flyweight

            flyweight = CharacterFlyweight(replace(intrinsic))
            self._flyweights[key] = flyweight
            self._memory_used += flyweight.estimate_footprint()
            self._created_count += 1
            logger.debug(
                "Created flyweight %r (%d bytes)", key, flyweight.estimate_footprint()
            )
            return flyweight

    def get_stats(self) -> FlyweightStats:
        return FlyweightStats(
            unique_count=len(self._flyweights),
            total_memory=self._memory_used,
            reuse_count=self._reused_count,
            created_count=self._created_count,
        )

    def get_all_flyweights(self) -> List[CharacterFlyweight]:
        """All pooled flyweights, in creation order."""
        return list(self._flyweights.values())

    def __len__(self) -> int:
        return len(self._flyweights)

    def __contains__(self, intrinsic: object) -> bool:
        if not isinstance(intrinsic, Glyph):
            return False
        return canonical_key(intrinsic) in self._flyweights
