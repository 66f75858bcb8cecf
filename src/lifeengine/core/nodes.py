"""Entity records shared by the simulation and its render collaborators."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class Position:
    x: float = 0.0  # grid row once truncated
    y: float = 0.0  # grid column once truncated
    rotation: float = 0.0  # only meaningful to rendering

    def cell(self) -> Tuple[int, int]:
        """Grid coordinates as truncated integers."""
        return int(self.x), int(self.y)


@dataclass
class Living:
    alive: bool = False
    alive_next: bool = False


@dataclass
class Display:
    points: List[float] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0


@dataclass
class LivingNode:
    position: Position = field(default_factory=Position)
    living: Living = field(default_factory=Living)


@dataclass
class RenderNode:
    position: Position = field(default_factory=Position)
    living: Living = field(default_factory=Living)
    display: Display = field(default_factory=Display)


# Unit square as two triangles, x/y/z per vertex
SQUARE_POINTS = [
    0.0, 0.0, 0.0,
    1.0, 0.0, 0.0,
    1.0, 1.0, 0.0,
    0.0, 0.0, 0.0,
    1.0, 1.0, 0.0,
    0.0, 1.0, 0.0,
]


def make_cell(row: int, col: int, alive: bool = False) -> Tuple[LivingNode, RenderNode]:
    """Build a living node and a render node for one cell.

    Both nodes hold the same ``Position`` and ``Living`` objects, so a
    render collaborator always sees the state the simulation last wrote.
    The initial state goes into both buffers; the first update promotes
    it into ``alive`` unchanged.
    """
    position = Position(float(row), float(col))
    living = Living(alive=alive, alive_next=alive)
    display = Display(points=list(SQUARE_POINTS), x=position.x, y=position.y)
    return LivingNode(position, living), RenderNode(position, living, display)
