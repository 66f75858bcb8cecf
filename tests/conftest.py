import logging

import numpy as np
import pytest

from lifeengine.core import LivingNode, LivingSystem
from lifeengine.core.nodes import Living, Position


def build_system(state, strict=False):
    """Register one node per cell of ``state`` with both buffers set."""
    state = np.asarray(state)
    system = LivingSystem(*state.shape, strict=strict)
    for (row, col), value in np.ndenumerate(state):
        alive = bool(value)
        system.register(LivingNode(Position(row, col), Living(alive, alive)))
    return system


@pytest.fixture
def make_system():
    return build_system


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("lifeengine")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
