"""Catalogue of well-known Game of Life patterns."""
import numpy as np
from typing import Iterator, Tuple


# Still lifes
BLOCK = np.array([
    [1, 1],
    [1, 1]
], dtype=np.uint8)

BEEHIVE = np.array([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 1, 0]
], dtype=np.uint8)

BOAT = np.array([
    [1, 1, 0],
    [1, 0, 1],
    [0, 1, 0]
], dtype=np.uint8)

LOAF = np.array([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 0, 1],
    [0, 0, 1, 0]
], dtype=np.uint8)


# Period 2 oscillators
BLINKER = np.array([
    [1, 1, 1]
], dtype=np.uint8)

TOAD = np.array([
    [0, 1, 1, 1],
    [1, 1, 1, 0]
], dtype=np.uint8)

BEACON = np.array([
    [1, 1, 0, 0],
    [1, 1, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 1, 1]
], dtype=np.uint8)


# Spaceships (period 4)
# Moves one cell down and one cell right every 4 generations
GLIDER = np.array([
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1]
], dtype=np.uint8)

LWSS = np.array([
    [0, 1, 0, 0, 1],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 0]
], dtype=np.uint8)


PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS
    }
}


def available_patterns():
    """Return every pattern name in catalogue order."""
    return [name for category in PATTERN_CATEGORIES.values() for name in category]


def get_pattern(name: str) -> np.ndarray:
    """Return a copy of the requested pattern array by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available_patterns()}")


def pattern_cells(pattern: np.ndarray,
                  offset: Tuple[int, int] = (0, 0)) -> Iterator[Tuple[int, int]]:
    """Yield (row, col) of every live cell, shifted by ``offset``."""
    dr, dc = offset
    for r, c in zip(*np.nonzero(pattern)):
        yield int(r) + dr, int(c) + dc
