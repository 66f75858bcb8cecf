"""Array helpers and pattern catalogue for Game of Life simulation"""

from .game_of_life import GameOfLife, count_neighbors, next_state, place_pattern
from .patterns import (
    get_pattern,
    available_patterns,
    pattern_cells,
    PATTERN_CATEGORIES,
)

__all__ = [
    'GameOfLife',
    'count_neighbors',
    'next_state',
    'place_pattern',
    'get_pattern',
    'available_patterns',
    'pattern_cells',
    'PATTERN_CATEGORIES',
]
