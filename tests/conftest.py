"""Shared test fixtures."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import pytest

from reverie_dice.errors import RandomSourceError


class ScriptedRandom:
    """Returns pre-recorded draws in order."""

    def __init__(self, provider: ScriptedRandomProvider) -> None:
        self._provider = provider

    def next(self, bound: int) -> int:
        provider = self._provider
        if not provider.draws:
            raise RandomSourceError("Scripted random source ran out of draws")
        value = provider.draws.pop(0)
        if not 0 <= value < bound:
            raise RandomSourceError(f"Scripted draw {value} outside [0, {bound})")
        provider.bounds.append(bound)
        return value


class ScriptedRandomProvider:
    def __init__(self, draws: list[int] | None = None) -> None:
        self.draws = list(draws or [])
        self.bounds: list[int] = []
        self.locked = False
        self.lock_count = 0

    @contextmanager
    def lock(self) -> Iterator[ScriptedRandom]:
        assert not self.locked, "random source locked twice"
        self.locked = True
        self.lock_count += 1
        try:
            yield ScriptedRandom(self)
        finally:
            self.locked = False


@pytest.fixture
def scripted():
    """Factory: scripted(draws) -> ScriptedRandomProvider."""
    return ScriptedRandomProvider
