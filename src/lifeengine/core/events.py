"""Node registration events and their synchronous dispatcher."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional

from .nodes import LivingNode, RenderNode

logger = logging.getLogger(__name__)


class NodeClass(Enum):
    LIVING = "living"
    RENDER = "render"


@dataclass
class NodeAddedPayload:
    """Announces a newly created node to every subscribed system.

    Exactly one of ``living_node`` / ``render_node`` is set, matching
    ``node_class``.
    """
    node_class: NodeClass
    living_node: Optional[LivingNode] = None
    render_node: Optional[RenderNode] = None

    def __post_init__(self):
        if self.node_class is NodeClass.LIVING and self.living_node is None:
            raise ValueError("LIVING payload requires a living_node")
        if self.node_class is NodeClass.RENDER and self.render_node is None:
            raise ValueError("RENDER payload requires a render_node")

    @classmethod
    def living(cls, node: LivingNode) -> 'NodeAddedPayload':
        return cls(NodeClass.LIVING, living_node=node)

    @classmethod
    def render(cls, node: RenderNode) -> 'NodeAddedPayload':
        return cls(NodeClass.RENDER, render_node=node)


Handler = Callable[[NodeAddedPayload], Any]


class EventBus:
    """Delivers each payload to every handler, in subscription order.

    Delivery happens inside ``publish``; nothing is queued.
    """

    def __init__(self):
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            return
        self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        self._handlers.remove(handler)

    def publish(self, payload: NodeAddedPayload) -> List[Any]:
        """Call every handler with ``payload`` and collect their return values."""
        logger.debug("Publishing %s node to %d handler(s)",
                     payload.node_class.value, len(self._handlers))
        return [handler(payload) for handler in list(self._handlers)]

    def __len__(self):
        return len(self._handlers)
