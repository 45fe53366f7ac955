import math

from gridpathing.graph import Edge, Node


def test_new_node_scores_are_unvisited():
    node = Node(3.0, 4.0)
    assert node.position == (3.0, 4.0)
    assert node.g_score == math.inf
    assert node.h_score == math.inf
    assert node.f_score == math.inf
    assert node.previous is None
    assert node.connections == []


def test_connect_to_appends_one_way_edge():
    a = Node(0.0, 0.0)
    b = Node(1.0, 0.0)
    edge = a.connect_to(b, 2.5)
    assert isinstance(edge, Edge)
    assert a.connections == [edge]
    assert edge.target is b
    assert edge.cost == 2.5
    assert b.connections == []


def test_connect_to_keeps_order():
    a, b, c = Node(0, 0), Node(1, 0), Node(2, 0)
    a.connect_to(b, 1)
    a.connect_to(c, 3)
    assert [e.target for e in a.connections] == [b, c]
    assert [e.cost for e in a.connections] == [1.0, 3.0]


def test_reset_scores_clears_search_state():
    a, b = Node(0, 0), Node(1, 0)
    b.g_score, b.h_score, b.f_score, b.previous = 1.0, 2.0, 3.0, a
    b.reset_scores()
    assert (b.g_score, b.h_score, b.f_score) == (math.inf, math.inf, math.inf)
    assert b.previous is None


def test_nodes_hash_by_identity():
    a, b = Node(1.0, 1.0), Node(1.0, 1.0)
    assert a != b
    assert len({a, b}) == 2