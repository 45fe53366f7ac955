"""A* pathfinding over ASCII grid maps, with path-following agents and a pygame demo."""

__version__ = "0.1.0"

__all__ = ["agent", "app", "graph", "nodemap"]