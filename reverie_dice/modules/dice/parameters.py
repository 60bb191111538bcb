"""Roll parameters and reroll/burst budgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence, TypeVar

from reverie_dice.errors import ConfigurationError

if TYPE_CHECKING:
    from reverie_dice.infra.config import Settings

DEFAULT_FACES_COUNT = 6

# Usable for rerolls & bursts.
INFINITE = -1

T = TypeVar("T")


@dataclass(frozen=True)
class RollParameters:
    """One roll request: ``dices_count``d``faces_count`` + ``bonus``."""

    faces_count: int = DEFAULT_FACES_COUNT
    dices_count: int = 1
    additional_dices_count: int = 0
    rerolls_count: int = 0
    bursts_count: int = 0
    bonus: int = 0

    @property
    def has_infinite_rerolls(self) -> bool:
        return self.rerolls_count < 0

    @property
    def has_infinite_bursts(self) -> bool:
        return self.bursts_count < 0

    @classmethod
    def from_settings(cls, settings: Settings) -> RollParameters:
        return cls(
            faces_count=settings.default_dice_type,
            dices_count=settings.default_dices_count,
            additional_dices_count=settings.default_additional_dices_count,
            rerolls_count=settings.default_rerolls_count,
            bursts_count=settings.default_bursts_count,
            bonus=settings.default_bonus,
        )


def validate_parameters(parameters: RollParameters) -> None:
    """Raise ConfigurationError naming every field out of range."""
    problems: list[str] = []
    if parameters.faces_count < 1:
        problems.append(f"faces_count must be >= 1, got {parameters.faces_count}")
    if parameters.dices_count < 0:
        problems.append(f"dices_count must be >= 0, got {parameters.dices_count}")
    if parameters.additional_dices_count < 0:
        problems.append(
            "additional_dices_count must be >= 0, "
            f"got {parameters.additional_dices_count}"
        )
    if problems:
        raise ConfigurationError("Invalid roll parameters: " + "; ".join(problems))


@dataclass
class Budget:
    """Remaining rerolls or bursts; ``remaining is None`` means unlimited."""

    remaining: int | None

    @classmethod
    def from_count(cls, count: int) -> Budget:
        return cls(None if count < 0 else count)

    @property
    def unlimited(self) -> bool:
        return self.remaining is None

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def take(self, candidates: Sequence[T]) -> list[T]:
        if self.remaining is None:
            return list(candidates)
        return list(candidates[: self.remaining])

    def spend(self, count: int) -> None:
        if self.remaining is not None:
            self.remaining -= count
