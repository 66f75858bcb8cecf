"""Conway's Game of Life on a toroidal grid of event-registered cells."""

from .core import (
    EventBus,
    LivingNode,
    LivingSystem,
    NodeAddedPayload,
    NodeClass,
    RegistrationResult,
    World,
    make_cell,
    new_living_system,
)
from .config import SimulationConfig, load_config
from .errors import (
    LifeEngineError,
    GridDimensionError,
    RegistrationError,
    OutOfBoundsError,
    CellOccupiedError,
    ConfigError,
)
from .logging_config import setup_logging

__version__ = "0.1.0"
