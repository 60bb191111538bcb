"""Roll result schemas — read-only output of the dice roller."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field

if TYPE_CHECKING:
    from reverie_dice.modules.dice.parameters import RollParameters
    from reverie_dice.modules.dice.roller import DieRecord


class Die(BaseModel):
    """Snapshot of one die; iterating yields every value it has shown."""

    model_config = ConfigDict(frozen=True)

    values: tuple[int, ...] = Field(min_length=1)
    was_removed: bool = False
    is_burst: bool = False

    @property
    def value(self) -> int:
        return self.values[-1]

    @property
    def rolls_count(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.values)

    def __str__(self) -> str:
        return f"{'-' if self.was_removed else ''}{'*' if self.is_burst else ''}{self.value}"

    @classmethod
    def from_record(cls, record: DieRecord) -> Die:
        return cls(
            values=tuple(record.values),
            was_removed=record.removed,
            is_burst=record.is_burst,
        )


class RollResult(BaseModel):
    """Every die of a resolved roll, the total, and the originating parameters."""

    model_config = ConfigDict(frozen=True)

    dice: tuple[Die, ...]
    bonus: int
    dice_faces_count: int
    base_dices_count: int
    removed_dices_count: int
    initial_rerolls_count: int
    initial_bursts_count: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return sum(d.value for d in self.dice if not d.was_removed) + self.bonus

    @property
    def has_infinite_rerolls(self) -> bool:
        return self.initial_rerolls_count < 0

    @property
    def has_infinite_bursts(self) -> bool:
        return self.initial_bursts_count < 0

    @property
    def bursts_made(self) -> int:
        return sum(1 for d in self.dice if d.is_burst)

    @property
    def values(self) -> list[int]:
        return [d.value for d in self.dice]

    def __len__(self) -> int:
        return len(self.dice)

    def __getitem__(self, index: int) -> Die:
        return self.dice[index]

    def __iter__(self) -> Iterator[Die]:  # type: ignore[override]
        return iter(self.dice)

    @classmethod
    def from_records(
        cls, records: Sequence[DieRecord], parameters: RollParameters
    ) -> RollResult:
        return cls(
            dice=tuple(Die.from_record(r) for r in records),
            bonus=parameters.bonus,
            dice_faces_count=parameters.faces_count,
            base_dices_count=parameters.dices_count,
            removed_dices_count=parameters.additional_dices_count,
            initial_rerolls_count=parameters.rerolls_count,
            initial_bursts_count=parameters.bursts_count,
        )
