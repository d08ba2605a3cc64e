"""
Dudo - Random Sources

All randomness in a match (initial seating shuffle and dice rolls) goes
through a RandomSource so that matches can be replayed exactly. A match
calls `shuffled` once at creation and `d6(n)` once per roll, with `n` the
number of dice the rolling player has left.
"""

import random
from collections import deque
from typing import Protocol, Sequence

from dudo.engine.base import MAX_FACE, MIN_FACE
from dudo.engine.validators import validate_dice_values


class RandomSource(Protocol):
    """Randomness used by the engine."""

    def shuffled(self, items: Sequence[str]) -> list[str]:
        """Return a shuffled copy of `items`."""
        ...

    def d6(self, count: int) -> list[int]:
        """Roll `count` independent D6."""
        ...


class DefaultRandomSource:
    """RandomSource backed by `random.Random`, optionally seeded."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def shuffled(self, items: Sequence[str]) -> list[str]:
        result = list(items)
        self._rng.shuffle(result)
        return result

    def d6(self, count: int) -> list[int]:
        return [self._rng.randint(MIN_FACE, MAX_FACE) for _ in range(count)]


class ScriptedRandomSource:
    """
    Deterministic RandomSource for tests and replays.

    Outcomes queued with `next()` are consumed in order by the following
    calls to `shuffled` or `d6`. With an empty queue, `shuffled` keeps the
    given order and `d6` falls back to a seeded generator.

    Example:
        source = ScriptedRandomSource()
        source.next(["bob", "alice"])   # seating order
        source.next([1, 1, 3])          # bob's first dice
    """

    def __init__(self, seed: int = 0) -> None:
        self._queue: deque[list] = deque()
        self._fallback = random.Random(seed)

    def next(self, outcome: Sequence) -> None:
        """Queue the outcome of the next call."""
        self._queue.append(list(outcome))

    @property
    def pending(self) -> int:
        """Number of queued outcomes not consumed yet."""
        return len(self._queue)

    def shuffled(self, items: Sequence[str]) -> list[str]:
        if not self._queue:
            return list(items)

        scripted = self._queue.popleft()
        if sorted(scripted) != sorted(items):
            raise ValueError(f"Scripted order {scripted} is not a permutation of {list(items)}.")
        return scripted

    def d6(self, count: int) -> list[int]:
        if not self._queue:
            return [self._fallback.randint(MIN_FACE, MAX_FACE) for _ in range(count)]

        return validate_dice_values(self._queue.popleft(), count)
