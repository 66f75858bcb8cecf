"""Wires the event bus and systems together and drives the tick loop."""

import logging
from typing import List, Optional, Protocol, Tuple

import numpy as np

from ..config import SimulationConfig
from ..utils.game_of_life import place_pattern
from ..utils.patterns import get_pattern
from .events import EventBus, NodeAddedPayload
from .living_system import LivingSystem, RegistrationResult
from .nodes import RenderNode, make_cell

logger = logging.getLogger(__name__)


class System(Protocol):
    def node_added_handler(self, payload: NodeAddedPayload): ...

    def update(self, time: float) -> None: ...


class World:
    """A living system plus any other subscribed systems.

    ``spawn`` publishes a LIVING payload and a RENDER payload for every
    cell; systems that do not care about a classification ignore it.
    """

    def __init__(self, rows: int, cols: int, strict: bool = False):
        self.bus = EventBus()
        self.living = LivingSystem(rows, cols, strict=strict)
        self.systems: List[System] = []
        self.render_nodes: List[RenderNode] = []
        self.add_system(self.living)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> 'World':
        """Build a world and seed it as described by ``config``."""
        world = cls(*config.grid.to_tuple(), strict=config.grid.strict)
        if config.seed.pattern == "random":
            world.seed_random(config.seed.density, config.seed.seed)
        else:
            world.seed_pattern(get_pattern(config.seed.pattern), config.seed.position)
        return world

    @property
    def shape(self) -> Tuple[int, int]:
        return self.living.rows, self.living.cols

    def add_system(self, system: System) -> None:
        if system in self.systems:
            return
        self.systems.append(system)
        self.bus.subscribe(system.node_added_handler)

    def spawn(self, row: int, col: int, alive: bool = False):
        """Create one cell and announce it to every system.

        The render node is only published once the living system has
        accepted the cell, so renderers never hold cells nobody updates.
        """
        living_node, render_node = make_cell(row, col, alive)
        results = self.bus.publish(NodeAddedPayload.living(living_node))
        if RegistrationResult.ACCEPTED not in results:
            return results
        self.render_nodes.append(render_node)
        self.bus.publish(NodeAddedPayload.render(render_node))
        return results

    def seed_state(self, state: np.ndarray) -> None:
        """Spawn a cell for every grid coordinate, alive where ``state`` is set."""
        if state.shape != self.shape:
            raise ValueError(f"State shape {state.shape} doesn't match grid size {self.shape}")
        for row in range(self.shape[0]):
            for col in range(self.shape[1]):
                self.spawn(row, col, bool(state[row, col]))
        logger.info("Seeded %dx%d grid with %d live cells",
                    self.shape[0], self.shape[1], int(np.count_nonzero(state)))

    def seed_pattern(self, pattern: np.ndarray,
                     position: Optional[Tuple[int, int]] = None) -> None:
        self.seed_state(place_pattern(self.shape, pattern, position))

    def seed_random(self, density: float = 0.3, seed: Optional[int] = None) -> None:
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be within [0, 1], got {density}")
        rng = np.random.default_rng(seed)
        self.seed_state((rng.random(self.shape) < density).astype(np.uint8))

    def tick(self, time: float = 0.0) -> None:
        for system in self.systems:
            system.update(time)

    def run(self, generations: int, time_step: float = 0.0) -> np.ndarray:
        """Tick ``generations`` times and return each computed generation.

        Row 0 of the result is the seeded state; row t is the generation
        computed by the t-th tick (held in ``alive_next`` until the next
        tick promotes it).
        """
        trajectory = np.zeros((generations + 1,) + self.shape, dtype=np.uint8)
        trajectory[0] = self.living.next_array()
        for t in range(1, generations + 1):
            self.tick(time_step)
            trajectory[t] = self.living.next_array()
        return trajectory
