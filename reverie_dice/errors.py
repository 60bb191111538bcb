"""reverie-dice exception hierarchy.

Kept dependency-free: it is imported by every other module and by tests.
"""


class DiceError(Exception):
    """Base exception for all reverie-dice errors."""


class ConstructionError(DiceError, TypeError):
    """Raised when a roller is built without a random provider."""


class ConfigurationError(DiceError, ValueError):
    """Raised for roll parameters that violate their invariants."""


class RandomSourceError(DiceError, ValueError):
    """Raised by a random source that cannot produce the requested draw."""
