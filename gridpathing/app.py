"""Interactive demo: a player agent and a wandering agent on a grid map."""

from __future__ import annotations

import argparse
import logging
import random
import threading
from collections.abc import Sequence

import pygame

from .agent import PathAgent
from .graph import Node
from .nodemap import NodeMap, get_random_valid_node

log = logging.getLogger(__name__)

SCREEN_SIZE = (1200, 850)
TARGET_FPS = 120
CELL_SIZE = 50
AGENT_SPEED = 64
AGENT_RADIUS = 8
WANDER_AREA = (12, 8)

WALL_COLOR = (255, 0, 0)
EDGE_COLOR = (128, 128, 128)
BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 228, 48)
BLUE = (0, 121, 241)

# '0' is a wall, anything else is walkable.
ASCII_MAP = [
    "000000000000000000000000",
    "011111101111111011111110",
    "010001001000001010000010",
    "011101111011101011101110",
    "010100000010001010100010",
    "011101111111101011101110",
    "010000100000001010000010",
    "011110101111111011111110",
    "010000101000000010000010",
    "011111101011111111101110",
    "010000001000000000001010",
    "011111111111111111111110",
    "010000100000001000000010",
    "011101101111101011101110",
    "010001001000001010000010",
    "011111111011111011111110",
    "000000000000000000000000",
]


class PathJob:
    """Runs one A* search at a time on a background thread."""

    def __init__(self) -> None:
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._result: list[Node] | None = None
        self._error: Exception | None = None
        self._ready = False

    @property
    def busy(self) -> bool:
        """True while a search is still running."""
        return self._thread is not None and self._thread.is_alive()

    def start(self, node_map: NodeMap, start: Node, end: Node) -> None:
        """Begin searching from ``start`` to ``end``, after any previous search ends."""
        self.join()
        with self._lock:
            self._result = None
            self._error = None
            self._ready = False

        def run() -> None:
            log.info("A* search started in thread %s", threading.get_ident())
            try:
                path = node_map.a_star_search(start, end)
            except Exception as exc:  # handed back to the caller in take_result
                with self._lock:
                    self._error = exc
                    self._ready = True
                return
            with self._lock:
                self._result = path
                self._ready = True

        self._thread = threading.Thread(target=run, daemon=True)
        self._thread.start()

    def take_result(self) -> list[Node] | None:
        """Return the finished path once, or None if nothing is ready.

        Re-raises any error the search ran into.
        """
        with self._lock:
            if not self._ready:
                return None
            result, error = self._result, self._error
            self._result = None
            self._error = None
            self._ready = False
        self.join()
        if error is not None:
            raise error
        return result

    def join(self) -> None:
        """Wait for a running search to finish."""
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()


def draw_map(surface: pygame.Surface, node_map: NodeMap) -> None:
    """Draw walls as squares and walkable nodes as lines to their neighbours."""
    size = node_map.cell_size
    for x, y, node in node_map.cells():
        if node is None:
            rect = pygame.Rect(int(x * size), int(y * size), int(size - 1), int(size - 1))
            pygame.draw.rect(surface, WALL_COLOR, rect)
            continue
        for edge in node.connections:
            pygame.draw.line(
                surface,
                EDGE_COLOR,
                (int(node.x), int(node.y)),
                (int(edge.target.x), int(edge.target.y)),
            )


def draw_path(surface: pygame.Surface, path: Sequence[Node], color) -> None:
    """Draw the path as a chain of lines."""
    for a, b in zip(path, path[1:]):
        if a is None or b is None:
            continue
        pygame.draw.line(surface, color, (int(a.x), int(a.y)), (int(b.x), int(b.y)))


def draw_agent(surface: pygame.Surface, agent: PathAgent, color) -> None:
    """Draw the agent as a filled circle."""
    x, y = agent.position
    pygame.draw.circle(surface, color, (int(x), int(y)), AGENT_RADIUS)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the demo window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="gridpathing",
        description="A* pathfinding demo. Left click sets the start, right click "
        "the goal, W toggles the wandering agent.",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed for the wanderer")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    rng = random.Random(args.seed)

    node_map = NodeMap()
    node_map.initialise(ASCII_MAP, CELL_SIZE)

    start_node = node_map.get_node(1, 1)
    end_node = node_map.get_node(10, 2)

    agent = PathAgent(speed=AGENT_SPEED)
    agent.set_node(start_node)
    display_path = node_map.a_star_search(start_node, end_node)
    agent.go_to_node(end_node, node_map, False)

    wanderer = PathAgent(speed=AGENT_SPEED)
    wandering = False
    wanderer_calculating = False

    player_job = PathJob()
    wanderer_job = PathJob()

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("A* Pathfinding")
        clock = pygame.time.Clock()
        log.info("[SYSTEM] Game started. Window initialised.")

        running = True
        while running:
            delta_time = clock.tick(TARGET_FPS) / 1000.0
            agent.update(delta_time)
            wanderer.update(delta_time)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_w:
                    wandering = not wandering
                    log.info("[WANDERER] Wandering %s.", "started" if wandering else "stopped")
                    if not wandering:
                        wanderer_job.join()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if player_job.busy:
                        continue
                    selected = node_map.get_closest_node(event.pos)
                    if selected is not None:
                        start_node = selected
                        agent.set_node(start_node)
                        log.info("[INPUT] Start node set. Launching pathfinding thread.")
                        player_job.start(node_map, start_node, end_node)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                    selected = node_map.get_closest_node(event.pos)
                    if selected is not None:
                        end_node = selected
                        log.info("[INPUT] End node set. Launching pathfinding thread.")
                        if not player_job.busy and start_node is not None:
                            player_job.start(node_map, start_node, end_node)

            if wandering and not wanderer.path and not wanderer_calculating:
                wanderer_calculating = True
                start = wanderer.current_node
                if start is None:
                    start = get_random_valid_node(node_map, *WANDER_AREA, rng)
                    wanderer.set_node(start)
                end = get_random_valid_node(node_map, *WANDER_AREA, rng)
                log.info(
                    "[WANDERER] Searching path from %s,%s to %s,%s",
                    start.x, start.y, end.x, end.y,
                )
                wanderer_job.start(node_map, start, end)

            wanderer_path = wanderer_job.take_result()
            if wanderer_path is not None:
                wanderer.go_to_node(wanderer_path[-1], node_map, True)
                wanderer.path = wanderer_path
                wanderer_calculating = False

            player_path = player_job.take_result()
            if player_path is not None:
                log.info("[MAIN] Applying computed path to agent.")
                display_path = player_path
                agent.go_to_node(end_node, node_map, False)

            screen.fill(BACKGROUND)
            draw_map(screen, node_map)
            draw_path(screen, display_path, WHITE)
            draw_agent(screen, agent, GREEN)
            draw_agent(screen, wanderer, BLUE)
            pygame.display.flip()
    finally:
        player_job.join()
        wanderer_job.join()
        log.info("[SYSTEM] Game shutting down.")
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())