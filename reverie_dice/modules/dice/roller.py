"""Dice roller with discards, rerolls of ones and bursts of max faces."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable

from reverie_dice.errors import ConstructionError
from reverie_dice.infra.config import settings
from reverie_dice.infra.random_source import RandomProvider, SystemRandomProvider
from reverie_dice.models.result import RollResult
from reverie_dice.modules.dice.parameters import (
    Budget,
    RollParameters,
    validate_parameters,
)

logger = logging.getLogger("reverie-dice.roller")


@dataclass
class DieRecord:
    """Working state of one die while a roll is being resolved."""

    values: list[int] = field(default_factory=list)
    removed: bool = False
    burst_made: bool = False
    is_burst: bool = False

    @property
    def value(self) -> int:
        return self.values[-1]


class DiceRoller:
    def __init__(
        self,
        random_provider: RandomProvider,
        default_parameters: RollParameters | None = None,
    ) -> None:
        if random_provider is None:
            raise ConstructionError("random_provider is required")

        self._random_provider = random_provider
        if default_parameters is None:
            default_parameters = RollParameters.from_settings(settings)
        validate_parameters(default_parameters)
        self.default_parameters = default_parameters

    def roll(self, parameters: RollParameters | None = None) -> RollResult:
        """Roll, discard, reroll and burst according to ``parameters``.

        Falls back to the roller's default parameters. The random source
        stays locked for the whole resolution.

        Raises:
            ConfigurationError: If the parameters are out of range.
            RandomSourceError: If the random source rejects a draw.
        """
        if parameters is None:
            parameters = self.default_parameters
        validate_parameters(parameters)

        records: list[DieRecord] = []
        with self._random_provider.lock() as source:

            def make_roll() -> int:
                return source.next(parameters.faces_count) + 1

            for _ in range(parameters.dices_count + parameters.additional_dices_count):
                records.append(DieRecord([make_roll()]))

            _mark_removed(records, parameters)
            _resolve_rerolls_and_bursts(records, parameters, make_roll)

        result = RollResult.from_records(records, parameters)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Rolled %dd%d+%d: %s = %d",
                parameters.dices_count,
                parameters.faces_count,
                parameters.bonus,
                " ".join(str(d) for d in result),
                result.total,
            )
        return result


def _leading_count(records: list[DieRecord], predicate: Callable[[DieRecord], bool]) -> int:
    count = 0
    for record in records:
        if not predicate(record):
            break
        count += 1
    return count


def _mark_removed(records: list[DieRecord], parameters: RollParameters) -> None:
    """Discard the ``additional_dices_count`` worst dice.

    Ones that the reroll budget can still salvage are kept out of the
    discard pool as long as enough other weak dice remain to be discarded.
    """
    to_remove = parameters.additional_dices_count
    if to_remove == 0:
        return

    boundary = parameters.faces_count // 2 + (1 if parameters.has_infinite_rerolls else 0)

    ordered = sorted(records, key=lambda d: d.value)
    may_be_removed = max(to_remove, _leading_count(ordered, lambda d: d.value < boundary))
    rerollable = _leading_count(ordered, lambda d: d.value == 1)
    reroll_budget = rerollable if parameters.has_infinite_rerolls else parameters.rerolls_count
    skip_to_reroll = min(may_be_removed - to_remove, rerollable, reroll_budget)
    take_first_rerollable = rerollable - skip_to_reroll

    candidates = [
        d for i, d in enumerate(ordered) if i < take_first_rerollable or i >= rerollable
    ]
    for record in candidates[:to_remove]:
        record.removed = True


def _resolve_rerolls_and_bursts(
    records: list[DieRecord],
    parameters: RollParameters,
    make_roll: Callable[[], int],
) -> None:
    """Reroll ones and burst max faces until nothing changes."""
    rerolls = Budget.from_count(parameters.rerolls_count)
    bursts = Budget.from_count(parameters.bursts_count)

    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1

        if not rerolls.exhausted:
            to_reroll = rerolls.take([d for d in records if not d.removed and d.value == 1])
            for record in to_reroll:
                record.values.append(make_roll())
            rerolls.spend(len(to_reroll))
            changed = changed or bool(to_reroll)

        if not bursts.exhausted:
            to_burst = bursts.take(
                [
                    d
                    for d in records
                    if not d.removed and not d.burst_made and d.value == parameters.faces_count
                ]
            )
            new_records: list[DieRecord] = []
            for record in to_burst:
                record.burst_made = True
                new_records.append(DieRecord([make_roll()], is_burst=True))
            bursts.spend(len(to_burst))
            records.extend(new_records)
            changed = changed or bool(to_burst)

    logger.debug("Resolved rerolls and bursts in %d passes", passes)


_default_roller: DiceRoller | None = None
_default_roller_lock = threading.Lock()


def get_default_roller() -> DiceRoller:
    """Shared roller over the system random source, created once."""
    global _default_roller
    with _default_roller_lock:
        if _default_roller is None:
            _default_roller = DiceRoller(SystemRandomProvider(settings.random_seed))
        return _default_roller


def reset_default_roller() -> None:
    """Drop the shared roller so the next call picks up current settings."""
    global _default_roller
    with _default_roller_lock:
        _default_roller = None


def roll(parameters: RollParameters | None = None) -> RollResult:
    """Convenience: roll with the shared default roller."""
    return get_default_roller().roll(parameters)
