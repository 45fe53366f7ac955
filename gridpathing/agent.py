"""An agent that walks along A* paths across a node map."""

from __future__ import annotations

import math

from .graph import Node
from .nodemap import NodeMap


def _unit(dx: float, dy: float) -> tuple[float, float]:
    """Return the unit vector of ``(dx, dy)``, or zero for a zero vector."""
    length = math.hypot(dx, dy)
    if length == 0:
        return 0.0, 0.0
    return dx / length, dy / length


class PathAgent:
    """Moves through world space, following the nodes of its current path.

    ``path`` is the list of nodes still being followed; it is emptied when the
    last node is reached.
    """

    def __init__(self, speed: float = 0.0) -> None:
        self.position: tuple[float, float] = (0.0, 0.0)
        self.speed = float(speed)
        self.path: list[Node] = []
        self._current_index = 0
        self._current_node: Node | None = None
        self._target_node: Node | None = None

    @property
    def current_node(self) -> Node | None:
        """The node the agent is considered to be standing on."""
        return self._current_node

    def set_node(self, node: Node) -> None:
        """Place the agent on ``node``."""
        if node is None:
            raise ValueError("cannot place the agent on a missing node")
        self._current_node = node
        self.position = node.position

    def update(self, delta_time: float) -> None:
        """Advance along the path by ``speed * delta_time``."""
        if not self.path:
            return

        next_node = self.path[self._current_index]
        x, y = self.position
        dx = next_node.x - x
        dy = next_node.y - y
        distance = math.hypot(dx, dy)
        ux, uy = _unit(dx, dy)
        step = self.speed * delta_time
        distance -= step

        if distance > step:
            self.position = (x + ux * step, y + uy * step)
            return

        self.position = next_node.position
        self._current_index += 1

        if self._current_index >= len(self.path):
            if self._target_node is not None:
                self._current_node = self._target_node
                self._target_node = None
            self.path = []
            return

        new_next = self.path[self._current_index]
        overshoot = -distance
        nx, ny = _unit(new_next.x - next_node.x, new_next.y - next_node.y)
        self.position = (next_node.x + nx * overshoot, next_node.y + ny * overshoot)

    def go_to_node(
        self,
        node: Node,
        node_map: NodeMap,
        set_end_node_as_current: bool = False,
    ) -> None:
        """Plan a path from the current node to ``node`` and start following it.

        With ``set_end_node_as_current`` the destination becomes the current
        node once it is reached.
        """
        if node is None:
            raise ValueError("destination node is missing")
        if self._current_node is None:
            raise ValueError("agent has no current node to start from")

        self.path = node_map.a_star_search(self._current_node, node)
        self._current_index = 0
        self._target_node = node if set_end_node_as_current else None