"""Random sources for the dice roller.

A provider hands out a locked source for the duration of one roll, so a
single pseudo-random generator shared by concurrent callers never sees
interleaved draws.
"""

from __future__ import annotations

import random
import threading
from contextlib import contextmanager
from typing import ContextManager, Iterator, Protocol

from reverie_dice.errors import RandomSourceError


class RandomSource(Protocol):
    def next(self, bound: int) -> int:
        """Return a uniformly distributed integer in ``[0, bound)``."""
        ...


class RandomProvider(Protocol):
    def lock(self) -> ContextManager[RandomSource]:
        """Acquire exclusive access to a source; released on context exit."""
        ...


class LockedRandom:
    """Handle to a ``random.Random`` valid only while its lock is held."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._active = True

    def next(self, bound: int) -> int:
        if not self._active:
            raise RandomSourceError("Random source used after its lock was released")
        if bound <= 0:
            raise RandomSourceError(f"Bound must be positive, got {bound}")
        return self._rng.randrange(bound)

    def release(self) -> None:
        self._active = False


class SystemRandomProvider:
    """Thread-safe provider over a single seeded ``random.Random``."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._mutex = threading.Lock()

    def reseed(self, seed: int | None) -> None:
        with self._mutex:
            self._rng.seed(seed)

    @contextmanager
    def lock(self) -> Iterator[LockedRandom]:
        with self._mutex:
            handle = LockedRandom(self._rng)
            try:
                yield handle
            finally:
                handle.release()
