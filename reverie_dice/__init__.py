"""reverie-dice — tabletop dice roller with discards, rerolls and bursts."""

from reverie_dice.errors import (
    ConfigurationError,
    ConstructionError,
    DiceError,
    RandomSourceError,
)
from reverie_dice.infra.random_source import SystemRandomProvider
from reverie_dice.models.result import Die, RollResult
from reverie_dice.modules.dice.parameters import DEFAULT_FACES_COUNT, INFINITE, RollParameters
from reverie_dice.modules.dice.roller import DiceRoller

__all__ = [
    "ConfigurationError",
    "ConstructionError",
    "DEFAULT_FACES_COUNT",
    "DiceError",
    "DiceRoller",
    "Die",
    "INFINITE",
    "RandomSourceError",
    "RollParameters",
    "RollResult",
    "SystemRandomProvider",
]
