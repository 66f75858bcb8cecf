"""Entities, registration events and the living system."""

from .nodes import Position, Living, Display, LivingNode, RenderNode, make_cell
from .events import NodeClass, NodeAddedPayload, EventBus
from .living_system import LivingSystem, RegistrationResult, new_living_system
from .world import World

__all__ = [
    'Position',
    'Living',
    'Display',
    'LivingNode',
    'RenderNode',
    'make_cell',
    'NodeClass',
    'NodeAddedPayload',
    'EventBus',
    'LivingSystem',
    'RegistrationResult',
    'new_living_system',
    'World',
]
