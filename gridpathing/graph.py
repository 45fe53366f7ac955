"""Graph primitives: walkable nodes and the weighted edges between them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(eq=False)
class Edge:
    """A one-way connection to ``target`` that costs ``cost`` to travel."""

    target: Node
    cost: float


@dataclass(eq=False)
class Node:
    """A walkable location in world space, with the bookkeeping A* needs.

    Nodes compare and hash by identity, so they can live in sets and dicts.
    Scores start at infinity, meaning "not visited yet".
    """

    x: float
    y: float
    connections: list[Edge] = field(default_factory=list, repr=False)
    g_score: float = math.inf
    h_score: float = math.inf
    f_score: float = math.inf
    previous: Node | None = field(default=None, repr=False)

    @property
    def position(self) -> tuple[float, float]:
        """The node's world-space position as an ``(x, y)`` pair."""
        return (self.x, self.y)

    def connect_to(self, other: Node, cost: float) -> Edge:
        """Add a one-way edge from this node to ``other`` and return it."""
        edge = Edge(other, float(cost))
        self.connections.append(edge)
        return edge

    def reset_scores(self) -> None:
        """Forget any search state left on this node."""
        self.g_score = math.inf
        self.h_score = math.inf
        self.f_score = math.inf
        self.previous = None