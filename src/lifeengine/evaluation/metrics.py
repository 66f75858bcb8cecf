"""Measurements over Game of Life generations."""
import numpy as np
from typing import Optional, Tuple


def population(state: np.ndarray) -> int:
    """Return the number of live cells."""
    return int(np.count_nonzero(state))


def hamming_distance(a: np.ndarray, b: np.ndarray) -> int:
    """Return the number of cells that differ between two states."""
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    return int(np.sum(a != b))


def find_period(trajectory: np.ndarray, max_period: Optional[int] = None) -> int:
    """Return the smallest period p such that the last state equals the
    state p generations earlier, or -1 if none is found.

    A still life has period 1.
    """
    num_states = len(trajectory)
    if max_period is None:
        max_period = num_states - 1
    last = trajectory[-1]
    for p in range(1, min(max_period, num_states - 1) + 1):
        if np.array_equal(trajectory[-1 - p], last):
            return p
    return -1


def find_translation(before: np.ndarray, after: np.ndarray) -> Optional[Tuple[int, int]]:
    """Return the toroidal shift (rows, cols) that maps ``before`` onto ``after``.

    The smallest shift is preferred, so an unchanged state yields (0, 0).
    Returns None when no shift matches or either state is empty.
    """
    if before.shape != after.shape:
        raise ValueError(f"Shape mismatch: {before.shape} vs {after.shape}")
    if population(before) == 0 or population(before) != population(after):
        return None

    h, w = before.shape
    shifts = sorted(
        ((dr, dc) for dr in range(h) for dc in range(w)),
        key=lambda s: (min(s[0], h - s[0]) + min(s[1], w - s[1]), s),
    )
    for dr, dc in shifts:
        if np.array_equal(np.roll(np.roll(before, dr, axis=0), dc, axis=1), after):
            return dr, dc
    return None
