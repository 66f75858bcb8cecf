import numpy as np
import pytest

from lifeengine.config import SimulationConfig
from lifeengine.core import (
    EventBus,
    NodeAddedPayload,
    NodeClass,
    RegistrationResult,
    World,
    make_cell,
)
from lifeengine.errors import GridDimensionError, OutOfBoundsError
from lifeengine.evaluation import find_translation
from lifeengine.utils import GameOfLife, place_pattern
from lifeengine.utils.patterns import BLINKER, GLIDER


class RecordingSystem:
    """Stands in for the render system: keeps RENDER nodes, counts updates."""

    def __init__(self):
        self.targets = []
        self.updates = 0

    def node_added_handler(self, payload):
        if payload.node_class is NodeClass.RENDER:
            self.targets.append(payload.render_node)

    def update(self, time):
        self.updates += 1

    def visible(self):
        return {node.position.cell() for node in self.targets if node.living.alive}


# -- events -----------------------------------------------------------------

def test_payload_requires_matching_node():
    living, render = make_cell(0, 0)
    with pytest.raises(ValueError):
        NodeAddedPayload(NodeClass.LIVING, render_node=render)
    with pytest.raises(ValueError):
        NodeAddedPayload(NodeClass.RENDER, living_node=living)


def test_bus_dispatches_in_subscription_order():
    bus = EventBus()
    seen = []
    bus.subscribe(lambda p: seen.append("first") or 1)
    bus.subscribe(lambda p: seen.append("second") or 2)
    living, _ = make_cell(0, 0)
    assert bus.publish(NodeAddedPayload.living(living)) == [1, 2]
    assert seen == ["first", "second"]


def test_bus_subscribe_twice_and_unsubscribe():
    bus = EventBus()
    calls = []

    def handler(payload):
        calls.append(payload.node_class)

    bus.subscribe(handler)
    bus.subscribe(handler)
    assert len(bus) == 1

    _, render = make_cell(0, 0)
    bus.publish(NodeAddedPayload.render(render))
    bus.unsubscribe(handler)
    bus.publish(NodeAddedPayload.render(render))
    assert calls == [NodeClass.RENDER]


def test_make_cell_shares_state():
    living, render = make_cell(2, 3, alive=True)
    assert living.living is render.living
    assert living.position is render.position
    assert living.living.alive and living.living.alive_next
    assert len(render.display.points) % 3 == 0


# -- world ------------------------------------------------------------------

def test_world_rejects_bad_dimensions():
    with pytest.raises(GridDimensionError):
        World(0, 5)


def test_spawn_reaches_each_system_by_class():
    world = World(4, 4)
    recorder = RecordingSystem()
    world.add_system(recorder)

    results = world.spawn(1, 2, alive=True)
    assert results == [RegistrationResult.ACCEPTED, None]
    assert len(world.living) == 1
    assert len(recorder.targets) == 1
    assert recorder.targets[0].living is world.living.node_at(1, 2).living


def test_spawn_outside_grid_is_dropped():
    world = World(3, 3)
    recorder = RecordingSystem()
    world.add_system(recorder)
    results = world.spawn(3, 0, alive=True)
    assert results == [RegistrationResult.OUT_OF_BOUNDS, None]
    assert len(world.living) == 0
    assert world.render_nodes == []
    assert recorder.targets == []


def test_spawn_into_occupied_cell_not_rendered():
    world = World(3, 3)
    recorder = RecordingSystem()
    world.add_system(recorder)
    world.spawn(1, 1, alive=False)
    results = world.spawn(1, 1, alive=True)
    assert results[0] is RegistrationResult.OCCUPIED
    assert len(world.render_nodes) == 1
    assert len(recorder.targets) == 1
    assert recorder.visible() == set()


def test_strict_spawn_outside_grid_leaves_no_render_node():
    world = World(3, 3, strict=True)
    recorder = RecordingSystem()
    world.add_system(recorder)
    with pytest.raises(OutOfBoundsError):
        world.spawn(3, 0, alive=True)
    assert world.render_nodes == []
    assert recorder.targets == []


def test_adding_system_twice_updates_once_per_tick():
    world = World(5, 5)
    world.seed_pattern(BLINKER, (2, 1))
    recorder = RecordingSystem()
    world.add_system(recorder)
    world.add_system(recorder)
    world.add_system(world.living)
    assert len(world.systems) == 2

    world.tick()
    assert world.living.generation == 1
    assert recorder.updates == 1
    assert np.array_equal(world.living.next_array(), place_pattern((5, 5), BLINKER.T, (1, 2)))


def test_render_collaborator_sees_simulation_writes():
    world = World(5, 5)
    recorder = RecordingSystem()
    world.add_system(recorder)
    world.seed_pattern(BLINKER, (2, 1))
    assert recorder.visible() == {(2, 1), (2, 2), (2, 3)}

    world.tick()
    world.tick()
    assert recorder.updates == 2
    # Second tick promotes the vertical phase into alive
    assert recorder.visible() == {(1, 2), (2, 2), (3, 2)}


def test_seed_state_shape_mismatch():
    world = World(4, 4)
    with pytest.raises(ValueError):
        world.seed_state(np.zeros((3, 4), dtype=np.uint8))


def test_seed_random_is_reproducible():
    a = World(8, 8)
    b = World(8, 8)
    a.seed_random(0.4, seed=7)
    b.seed_random(0.4, seed=7)
    assert np.array_equal(a.living.next_array(), b.living.next_array())
    assert len(a.living) == 64


def test_seed_random_rejects_bad_density():
    with pytest.raises(ValueError):
        World(4, 4).seed_random(1.5)


def test_run_matches_reference_trajectory():
    rng = np.random.default_rng(0)
    state = (rng.random((10, 10)) < 0.3).astype(np.uint8)
    world = World(10, 10)
    world.seed_state(state)
    trajectory = world.run(12, time_step=0.1)
    assert np.array_equal(trajectory, GameOfLife((10, 10)).simulate(state, 12))
    assert world.living.generation == 12


def test_glider_end_to_end():
    world = World(5, 5)
    world.seed_pattern(GLIDER, (0, 0))
    trajectory = world.run(4)
    assert trajectory[4].sum() == 5
    assert find_translation(trajectory[0], trajectory[4]) == (1, 1)


def test_from_config_pattern_and_random():
    config = SimulationConfig()
    config.grid.rows, config.grid.cols = 6, 6
    config.seed.pattern = "glider"
    config.seed.position = (1, 1)
    world = World.from_config(config)
    assert np.array_equal(world.living.next_array(), place_pattern((6, 6), GLIDER, (1, 1)))

    config.seed.pattern = "random"
    config.seed.density = 0.0
    world = World.from_config(config)
    assert world.living.next_array().sum() == 0
    assert len(world.living) == 36
