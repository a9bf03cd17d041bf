# proclab

A small toolkit for procedural content generation, in three parts:

- **`proclab.voronoi`**: Voronoi diagrams built with Fortune's sweep-line
  algorithm, clipped to and closed against the box from `(0, 0)` to
  `(x_bound, y_bound)`.
- **`proclab.maze`**: a square grid of cells with walls, maze generators that
  carve it one step at a time, and a command that prints a finished maze.
- **`proclab.scenario`**: sorting of terrain heights into biomes.

It uses only the Python standard library and needs Python 3.10 or later.

## Voronoi diagrams

`proclab.voronoi.builder.build(sites, x_bound, y_bound)` returns a
`proclab.voronoi.graph.Graph`. Sites may be `Vertex`/`Site` objects or
`(x, y)` pairs; the objects passed in are not modified.

```python
from proclab.voronoi.builder import build

graph = build([(10.0, 20.0), (70.0, 30.0), (40.0, 80.0)], 100.0, 100.0)

for cell in graph.cells:
    for half_edge in cell.half_edges:
        start = graph.half_edge_startpoint(half_edge)
        end = graph.half_edge_endpoint(half_edge)
        print(graph.sites[cell.site], start, end)
```

- A site equal to the one just before it in the input is ignored.
- `graph.sites`, `graph.edges` and `graph.cells` are plain lists; half edges
  and cells refer to edges and sites by index.
- Edges that fall outside the box, or shrink to a point, stay in
  `graph.edges` with undefined end points (`Vertex.is_defined()` is false);
  no half edge refers to them once cells are closed.
- Each cell's half edges are sorted by descending angle, and border edges
  are added where a cell meets the box.

The building blocks are public too: `proclab.voronoi.geometry` (`Vertex`,
`Site`, `Edge`, `HalfEdge`, `Cell`), `proclab.voronoi.fortune` (`Fortune`,
`BeachArc`, `CircleEvent`) and `proclab.voronoi.rbtree` (`RBTree`, `RBNode`,
a red-black tree ordered by insertion position whose nodes also link to their
in-order neighbours).

## Mazes

`proclab.maze.world.MazeWorld(size)` holds cells at coordinates
`-size // 2 .. size // 2` on both axes (`Point(x, y)`, with y growing
southwards). Every cell starts with all four walls and the colour
`NodeColor.DARK_GRAY`. Walls are shared between neighbouring cells:

```python
from proclab.maze.world import Direction, MazeWorld, Point

world = MazeWorld(5)
world.set_wall(Point(0, 0), Direction.EAST, False)
assert not world.has_wall(Point(1, 0), Direction.WEST)
```

Methods that take a point raise `ValueError` for points outside the grid.
`reset()` restores the initial state and `render()` returns the walls as
ASCII art.

The generators in `proclab.maze.generators` are `RecursiveBacktracker`,
`HuntAndKillExample`, `HuntAndKill` and `Prim`. Each takes an optional
`random.Random`; with a seeded one its mazes can be reproduced. `step(world)`
makes one move and returns `False` once there is nothing left to do;
`clear(world)` forgets progress; `run(world)` clears, steps until finished and
returns the number of steps that did work. While working, the generators
paint cells with `NodeColor` values.

```python
import random

from proclab.maze.generators import RecursiveBacktracker
from proclab.maze.world import MazeWorld

world = MazeWorld(21)
RecursiveBacktracker(random.Random(42)).run(world)
print(world.render())
```

### Command

```
proclab-maze --size 15 --generator Prim --seed 7
```

Options:

- `--size N`: cells along one side (default 21).
- `--generator NAME`: one of `Recursive Back-Tracker` (default),
  `HuntAndKill`, `Hunt & Kill`, `Prim`.
- `--seed N`: seed for the random number generator.

The command runs the generator to completion and prints the maze.

## Biomes

```python
from proclab.scenario.biomes import Biome, BiomeClassifier, height_filtering

classifier = BiomeClassifier()          # water_level=90, beach_level=91
assert classifier.classify(0.0, 40.0, 100.0) is Biome.GRASSLAND
```

`classify(x, y, avg)` looks at the height `avg` and the second value `y`
(`x` is unused): below the water level is `OCEAN`, below the beach level
`BEACH`, above 120 `MOUNTAIN`; otherwise `y` below 20 gives `DESERT`, below 60
`GRASSLAND`, below 100 `FOREST`, and anything else `GRASSLAND`.
`altitude_filter(heights)` makes a three-band split into `OCEAN`, `BEACH` and
`GRASSLAND`. `height_filtering(noise, x, y, side_size)` blends a noise value
with a falloff based on the cell's position on the map, using integer
division of the coordinates.

## What it does not do

- It opens no window and draws no images: mazes are shown only as text, and
  Voronoi graphs and biomes are returned as data.
- It generates no noise maps; the biome classifier works on height values you
  supply.