"""A grid of walkable nodes built from an ASCII layout, searched with A*."""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Iterator, Sequence

from .graph import Node

log = logging.getLogger(__name__)

EMPTY_SQUARE = "0"


def _heuristic(a: Node, b: Node) -> float:
    """Squared Euclidean distance between two nodes."""
    dx = b.x - a.x
    dy = b.y - a.y
    return dx * dx + dy * dy


class NodeMap:
    """A rectangular grid of cells, each holding a node or nothing."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self.cell_size = 0.0
        self._nodes: list[Node | None] = []
        self._search_lock = threading.Lock()

    def initialise(self, ascii_map: Sequence[str], cell_size: float) -> None:
        """Build the grid from rows of characters; ``'0'`` marks a wall.

        The first row fixes the width. Shorter rows are padded with walls and
        longer rows are cut, with a warning logged for each mismatched row.
        Neighbouring nodes are joined both ways with a cost of 1.
        """
        if not ascii_map or not ascii_map[0]:
            raise ValueError("ASCII map must have at least one non-empty row")

        self.cell_size = float(cell_size)
        self.height = len(ascii_map)
        self.width = len(ascii_map[0])
        self._nodes = []

        for y, line in enumerate(ascii_map):
            if len(line) != self.width:
                log.warning(
                    "Mismatched line #%d in ASCII map (%d instead of %d)",
                    y, len(line), self.width,
                )
            row = line[: self.width].ljust(self.width, EMPTY_SQUARE)
            self._nodes.extend(
                None if tile == EMPTY_SQUARE
                else Node((x + 0.5) * self.cell_size, (y + 0.5) * self.cell_size)
                for x, tile in enumerate(row)
            )

        for x, y, node in self.cells():
            if node is None:
                continue
            for neighbour in (self.get_node(x - 1, y), self.get_node(x, y - 1)):
                if neighbour is not None:
                    node.connect_to(neighbour, 1)
                    neighbour.connect_to(node, 1)

    def get_node(self, x: int, y: int) -> Node | None:
        """Return the node at grid cell ``(x, y)``, or None for walls and out of bounds."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self._nodes[x + self.width * y]

    def cells(self) -> Iterator[tuple[int, int, Node | None]]:
        """Yield ``(x, y, node)`` for every cell, row by row."""
        for index, node in enumerate(self._nodes):
            y, x = divmod(index, self.width)
            yield x, y, node

    def a_star_search(self, start_node: Node | None, end_node: Node | None) -> list[Node]:
        """Find a path from ``start_node`` to ``end_node``, both included.

        Uses squared Euclidean distance as the heuristic. If the end cannot be
        reached, the result holds only the end node.
        """
        if start_node is None or end_node is None:
            raise ValueError("start or end node is None")

        with self._search_lock:
            end_node.previous = None
            start_node.g_score = 0.0
            start_node.h_score = _heuristic(start_node, end_node)
            start_node.f_score = start_node.g_score + start_node.h_score
            start_node.previous = None

            open_list: list[Node] = [start_node]
            closed: set[Node] = set()

            while open_list:
                open_list.sort(key=lambda n: n.f_score)
                current = open_list[0]
                if current is end_node:
                    break
                open_list.pop(0)
                closed.add(current)

                for edge in current.connections:
                    target = edge.target
                    if target in closed:
                        continue
                    g = current.g_score + edge.cost
                    h = _heuristic(target, end_node)
                    f = g + h
                    if target not in open_list:
                        open_list.append(target)
                    elif f >= target.f_score:
                        continue
                    target.g_score = g
                    target.h_score = h
                    target.f_score = f
                    target.previous = current

            path: list[Node] = []
            node: Node | None = end_node
            while node is not None:
                path.append(node)
                node = node.previous
            path.reverse()
            return path

    def get_closest_node(self, world_pos: tuple[float, float]) -> Node | None:
        """Return the node in the cell containing ``world_pos``, or None."""
        i = int(world_pos[0] / self.cell_size)
        j = int(world_pos[1] / self.cell_size)
        if not (0 <= i < self.width and 0 <= j < self.height):
            log.warning("Position %r is out of bounds", world_pos)
            return None
        node = self.get_node(i, j)
        if node is None:
            log.warning("No walkable node at position %r", world_pos)
        return node


def get_random_valid_node(
    node_map: NodeMap,
    width: int,
    height: int,
    rng: random.Random | None = None,
) -> Node:
    """Pick a random walkable node whose cell lies within ``width`` x ``height``."""
    candidates = [
        node
        for x, y, node in node_map.cells()
        if node is not None and x < width and y < height
    ]
    if not candidates:
        raise ValueError(f"no walkable node within the first {width}x{height} cells")
    return (rng or random).choice(candidates)