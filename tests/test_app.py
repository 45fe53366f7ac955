import pygame
import pytest

from gridpathing.agent import PathAgent
from gridpathing.app import (
    BACKGROUND,
    EDGE_COLOR,
    GREEN,
    WALL_COLOR,
    WHITE,
    PathJob,
    draw_agent,
    draw_map,
    draw_path,
)
from gridpathing.graph import Node
from gridpathing.nodemap import NodeMap


def _small_map():
    node_map = NodeMap()
    node_map.initialise(["01", "11"], 20)
    return node_map


def test_take_result_before_start_is_none():
    job = PathJob()
    assert job.take_result() is None


def test_job_computes_path_between_nodes():
    node_map = _small_map()
    start, end = node_map.get_node(0, 1), node_map.get_node(1, 0)
    job = PathJob()
    job.start(node_map, start, end)
    job.join()
    assert job.busy is False
    path = job.take_result()
    assert path[0] is start
    assert path[-1] is end
    assert len(path) == 3
    assert job.take_result() is None


def test_job_reraises_search_error():
    node_map = _small_map()
    job = PathJob()
    job.start(node_map, None, node_map.get_node(1, 0))
    job.join()
    with pytest.raises(ValueError):
        job.take_result()
    assert job.take_result() is None


def test_job_restart_replaces_result():
    node_map = _small_map()
    a, b, c = node_map.get_node(0, 1), node_map.get_node(1, 1), node_map.get_node(1, 0)
    job = PathJob()
    job.start(node_map, a, b)
    job.start(node_map, a, c)
    job.join()
    assert job.take_result()[-1] is c


def test_draw_map_walls_and_connections():
    node_map = _small_map()
    surface = pygame.Surface((40, 40))
    draw_map(surface, node_map)
    assert surface.get_at((5, 5)) == pygame.Color(*WALL_COLOR)
    top_right, bottom_right = node_map.get_node(1, 0), node_map.get_node(1, 1)
    mid = (int(top_right.x), int((top_right.y + bottom_right.y) / 2))
    assert surface.get_at(mid) == pygame.Color(*EDGE_COLOR)


def test_draw_path_draws_line_and_ignores_empty():
    surface = pygame.Surface((100, 20))
    draw_path(surface, [], WHITE)
    assert surface.get_at((50, 10)) == pygame.Color(*BACKGROUND)
    draw_path(surface, [Node(5, 10), Node(95, 10)], WHITE)
    assert surface.get_at((50, 10)) == pygame.Color(*WHITE)
    assert surface.get_at((50, 2)) == pygame.Color(*BACKGROUND)


def test_draw_agent_at_its_position():
    surface = pygame.Surface((60, 60))
    agent = PathAgent()
    agent.set_node(Node(10, 10))
    draw_agent(surface, agent, GREEN)
    assert surface.get_at((10, 10)) == pygame.Color(*GREEN)
    assert surface.get_at((50, 50)) == pygame.Color(*BACKGROUND)