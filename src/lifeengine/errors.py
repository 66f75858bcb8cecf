"""Exception hierarchy for the life engine."""


class LifeEngineError(Exception):
    """Base class for every error raised by lifeengine."""


class GridDimensionError(LifeEngineError, ValueError):
    """Grid dimensions are not positive integers."""


class RegistrationError(LifeEngineError):
    """A node could not be placed into the grid."""

    def __init__(self, message: str, row: int, col: int):
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfBoundsError(RegistrationError):
    """The node's truncated position lies outside the grid."""


class CellOccupiedError(RegistrationError):
    """Another node is already registered at the same cell."""


class ConfigError(LifeEngineError, ValueError):
    """Configuration file or mapping is malformed."""
