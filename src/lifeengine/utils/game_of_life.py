"""Whole-grid Game of Life stepping on numpy arrays."""
import numpy as np
from typing import Tuple, Optional


def next_state(alive: bool, live_count: int) -> bool:
    """Apply Conway's rules to one cell given its live-neighbour count."""
    if alive:
        # Underpopulation below 2, overpopulation above 3
        return live_count == 2 or live_count == 3
    # Reproduction
    return live_count == 3


def count_neighbors(state: np.ndarray) -> np.ndarray:
    """Count live neighbors for each cell using periodic boundaries."""
    state = np.asarray(state).astype(np.int16)
    neighbors = np.zeros_like(state, dtype=int)
    for di in [-1, 0, 1]:
        for dj in [-1, 0, 1]:
            if di == 0 and dj == 0:
                continue
            shifted = np.roll(np.roll(state, di, axis=0), dj, axis=1)
            neighbors += shifted
    return neighbors


class GameOfLife:
    """Array-based simulator with periodic boundary conditions.

    Serves as the reference the node-based ``LivingSystem`` is checked
    against, and as a fast way to precompute trajectories.
    """

    def __init__(self, grid_size: Tuple[int, int] = (32, 32)):
        self.height, self.width = grid_size

    def step(self, state: np.ndarray) -> np.ndarray:
        """Compute the next state for the provided grid."""
        state = np.asarray(state)
        neighbors = count_neighbors(state)
        next_grid = ((state == 1) & ((neighbors == 2) | (neighbors == 3))) | \
                    ((state == 0) & (neighbors == 3))
        return next_grid.astype(np.uint8)

    def simulate(self, initial_state: np.ndarray, num_steps: int) -> np.ndarray:
        """Simulate evolution for multiple steps and return the full trajectory."""
        if initial_state.shape != (self.height, self.width):
            raise ValueError(
                f"State shape {initial_state.shape} doesn't match grid size "
                f"{(self.height, self.width)}"
            )
        trajectory = np.zeros((num_steps + 1, self.height, self.width), dtype=np.uint8)
        trajectory[0] = initial_state
        current = initial_state.astype(np.uint8)
        for t in range(1, num_steps + 1):
            current = self.step(current)
            trajectory[t] = current
        return trajectory


def place_pattern(grid_size: Tuple[int, int],
                  pattern: np.ndarray,
                  position: Optional[Tuple[int, int]] = None) -> np.ndarray:
    """Place a pattern on an empty grid, centered by default or at a given corner.

    Cells that fall past the bottom or right edge are clipped.
    """
    grid = np.zeros(grid_size, dtype=np.uint8)
    ph, pw = pattern.shape
    h, w = grid_size
    if position is None:
        start_h = max((h - ph) // 2, 0)
        start_w = max((w - pw) // 2, 0)
    else:
        start_h, start_w = position
        if start_h < 0 or start_w < 0:
            raise ValueError(f"Pattern position must be non-negative, got {position}")

    end_h = min(start_h + ph, h)
    end_w = min(start_w + pw, w)
    if end_h <= start_h or end_w <= start_w:
        return grid

    grid[start_h:end_h, start_w:end_w] = pattern[:end_h - start_h, :end_w - start_w]
    return grid
