"""The living system: a toroidal grid of cells advanced one generation per update."""

import logging
from enum import Enum
from typing import Iterator, List, Optional

import numpy as np

from ..errors import CellOccupiedError, GridDimensionError, OutOfBoundsError
from ..utils.game_of_life import count_neighbors, next_state
from .events import NodeAddedPayload, NodeClass
from .nodes import LivingNode

logger = logging.getLogger(__name__)

# Row/column offsets of the 8-neighborhood
NEIGHBOR_OFFSETS = [
    (-1, 0), (1, 0), (0, 1), (0, -1),
    (-1, 1), (1, 1), (-1, -1), (1, -1),
]


class RegistrationResult(Enum):
    ACCEPTED = "accepted"
    IGNORED = "ignored"  # payload meant for another system
    OUT_OF_BOUNDS = "out_of_bounds"
    OCCUPIED = "occupied"


class LivingSystem:
    """Owns the grid of living nodes and applies Conway's rules to it.

    Cells live in a flat list of ``rows * cols`` slots addressed by
    ``row * cols + col``; a slot with no registered node reads as dead.

    Each update runs in two phases. First every node promotes
    ``alive_next`` into ``alive``. Then the promoted ``alive`` values are
    snapshotted and every node's ``alive_next`` is written from that
    snapshot, so the result does not depend on iteration order.
    """

    def __init__(self, rows: int, cols: int, strict: bool = False):
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise GridDimensionError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise GridDimensionError(f"{name} must be positive, got {value}")

        self.rows = int(rows)
        self.cols = int(cols)
        self.strict = strict
        self.generation = 0
        self.elapsed = 0.0
        self._cells: List[Optional[LivingNode]] = [None] * (self.rows * self.cols)

    def _index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node_added_handler(self, payload: NodeAddedPayload) -> RegistrationResult:
        """Register the payload's node if it is classified as living."""
        if payload.node_class is not NodeClass.LIVING:
            return RegistrationResult.IGNORED
        return self.register(payload.living_node)

    def register(self, node: LivingNode) -> RegistrationResult:
        """Place ``node`` at its truncated position.

        Out-of-bounds nodes and nodes for an already occupied cell are
        dropped with a warning, or raise when the system is strict.
        """
        row, col = node.position.cell()

        if not self.in_bounds(row, col):
            message = (f"Node at ({row}, {col}) is outside the "
                       f"{self.rows}x{self.cols} grid")
            if self.strict:
                raise OutOfBoundsError(message, row, col)
            logger.warning("%s; dropped", message)
            return RegistrationResult.OUT_OF_BOUNDS

        index = self._index(row, col)
        if self._cells[index] is not None:
            message = f"Cell ({row}, {col}) already has a node"
            if self.strict:
                raise CellOccupiedError(message, row, col)
            logger.warning("%s; dropped", message)
            return RegistrationResult.OCCUPIED

        self._cells[index] = node
        return RegistrationResult.ACCEPTED

    def update(self, time: float = 0.0) -> None:
        """Advance every registered node by exactly one generation.

        ``time`` is the elapsed tick duration; the rules ignore it.
        """
        for node in self.nodes():
            node.living.alive = node.living.alive_next

        counts = count_neighbors(self.alive_array())
        for node in self.nodes():
            row, col = node.position.cell()
            node.living.alive_next = next_state(node.living.alive, int(counts[row, col]))

        self.generation += 1
        self.elapsed += time
        logger.debug("Generation %d: %d alive", self.generation, self.population())

    def live_neighbors(self, node: LivingNode) -> int:
        """Count alive cells among the 8 neighbors, wrapping at the edges.

        On grids narrower than 3 cells the wrapped coordinates of different
        directions can land on the same cell, or on the node itself; each
        direction is counted separately.
        """
        row, col = node.position.cell()
        live_count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            neighbor = self.node_at((row + dr) % self.rows, (col + dc) % self.cols)
            if neighbor is not None and neighbor.living.alive:
                live_count += 1
        return live_count

    def node_at(self, row: int, col: int) -> Optional[LivingNode]:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside the {self.rows}x{self.cols} grid")
        return self._cells[self._index(row, col)]

    def nodes(self) -> Iterator[LivingNode]:
        """Registered nodes in row-major order."""
        return (node for node in self._cells if node is not None)

    def __len__(self):
        return sum(1 for _ in self.nodes())

    def alive_array(self) -> np.ndarray:
        """The readable ``alive`` state as a (rows, cols) uint8 array."""
        return self._to_array(lambda node: node.living.alive)

    def next_array(self) -> np.ndarray:
        """The pending ``alive_next`` state as a (rows, cols) uint8 array."""
        return self._to_array(lambda node: node.living.alive_next)

    def _to_array(self, read) -> np.ndarray:
        grid = np.zeros((self.rows, self.cols), dtype=np.uint8)
        for index, node in enumerate(self._cells):
            if node is not None and read(node):
                grid[divmod(index, self.cols)] = 1
        return grid

    def population(self) -> int:
        return sum(1 for node in self.nodes() if node.living.alive)


def new_living_system(rows: int, cols: int) -> LivingSystem:
    """Create an empty, non-strict living system."""
    return LivingSystem(rows, cols)
