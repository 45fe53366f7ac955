# gridpathing

A* pathfinding over grid maps described as ASCII text, with agents that
walk the paths it finds, and an interactive pygame demo.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Building a map

Each string in the map is one row. The character `0` is a wall, and any other
character is a walkable cell. The first row sets the width of the map. Shorter
rows are padded with walls and longer rows are cut, and a warning is logged
for each such row. Each walkable cell becomes a `Node` (from
`gridpathing.graph`) at the centre of its cell. It is joined both ways to its
walkable neighbours to the north, south, east and west, with a cost of 1.
An empty map raises `ValueError`.

```python
from gridpathing.nodemap import NodeMap

node_map = NodeMap()
node_map.initialise(
    [
        "00000",
        "01110",
        "01010",
        "01110",
        "00000",
    ],
    50,
)

start = node_map.get_node(1, 1)
end = node_map.get_node(3, 3)
path = node_map.a_star_search(start, end)
print([node.position for node in path])
```

- `get_node(x, y)` returns `None` for walls and for cells outside the map.
- `cells()` yields `(x, y, node)` for every cell, row by row.
- `a_star_search(start, end)` returns the path with both ends included. It
  uses squared Euclidean distance as its heuristic. If the end cannot be
  reached, the path holds only the end node. Passing `None` for either end
  raises `ValueError`.
- `get_closest_node((x, y))` returns the node in the cell under a position in
  world (pixel) coordinates. It returns `None`, and logs a warning, for walls
  and for positions outside the map.
- `get_random_valid_node(node_map, width, height, rng=None)` picks a random
  walkable node among the first `width` x `height` cells. `rng` can be a
  `random.Random` instance. It raises `ValueError` if there is no walkable
  node in that area.

`Node.connect_to(other, cost)` adds a one-way `Edge`, and
`Node.reset_scores()` clears the search state left on a node.

## Moving an agent

```python
from gridpathing.agent import PathAgent

agent = PathAgent(speed=64)
agent.set_node(start)
agent.go_to_node(end, node_map, False)

while agent.path:
    agent.update(1 / 60)
```

- `update(delta_time)` moves the agent along `path` at `speed` pixels per
  second. Any distance left over at a node carries on towards the next node.
- `path` is emptied when the last node is reached.
- When `go_to_node` is called with `set_end_node_as_current=True`, the
  destination becomes `current_node` once the agent arrives.
- `set_node(None)` raises `ValueError`. So does `go_to_node` if the agent has
  not been placed on a node yet.

## The demo

```
gridpathing [--seed N]
```

This opens a window showing a maze. The green agent is yours:

- a left click sets its start node,
- a right click sets its destination,
- `W` starts or stops the blue wanderer, which walks to random destinations in
  the top-left 12 x 8 cells.

`--seed` fixes the random choices the wanderer makes. Paths are searched on
background threads (`PathJob`) so that the window stays responsive. Progress
messages are logged to standard error.