"""A square grid of maze cells centred on the origin, with walls and colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterator, Set


@dataclass(frozen=True)
class Point:
    """An integer grid position; y grows southwards."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


class Direction(Enum):
    """The four sides of a cell, valued by their grid offset."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def delta(self) -> Point:
        return Point(*self.value)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def towards(cls, delta: Point) -> Direction:
        """Return the direction of a unit step ``delta``."""
        if delta.y == -1:
            return cls.NORTH
        if delta.x == 1:
            return cls.EAST
        if delta.y == 1:
            return cls.SOUTH
        if delta.x == -1:
            return cls.WEST
        raise ValueError(f"{delta} is not a step to a neighbouring cell")


class NodeColor(Enum):
    """Colours a generator paints cells with while it works."""

    DARK_GRAY = "dark_gray"
    BLACK = "black"
    GREEN = "green"
    DARK_RED = "dark_red"
    DEEP_RED = "deep_red"


CLEAR_COLOR = NodeColor.DARK_GRAY


class MazeWorld:
    """Cells at coordinates -size//2 .. size//2 on both axes.

    Every cell starts with all four walls and the clear colour. A wall is
    shared by the two cells on either side of it.
    """

    def __init__(self, size: int = 21) -> None:
        if size < 1:
            raise ValueError("maze size must be at least 1")
        self.size = size
        self.half = size // 2
        self._open: Set[FrozenSet[Point]] = set()
        self._colors: Dict[Point, NodeColor] = {}

    @property
    def side(self) -> int:
        """Number of cells along one side."""
        return 2 * self.half + 1

    def points(self) -> Iterator[Point]:
        """All cells, row by row from the north-west corner."""
        for y in range(-self.half, self.half + 1):
            for x in range(-self.half, self.half + 1):
                yield Point(x, y)

    def contains(self, point: Point) -> bool:
        return abs(point.x) <= self.half and abs(point.y) <= self.half

    def _require(self, point: Point) -> None:
        if not self.contains(point):
            raise ValueError(f"{point} lies outside the maze")

    @staticmethod
    def _wall(point: Point, direction: Direction) -> FrozenSet[Point]:
        return frozenset((point, point + direction.delta))

    def has_wall(self, point: Point, direction: Direction) -> bool:
        self._require(point)
        return self._wall(point, direction) not in self._open

    def set_wall(self, point: Point, direction: Direction, present: bool) -> None:
        self._require(point)
        wall = self._wall(point, direction)
        if present:
            self._open.discard(wall)
        else:
            self._open.add(wall)

    def node_color(self, point: Point) -> NodeColor:
        self._require(point)
        return self._colors.get(point, CLEAR_COLOR)

    def set_node_color(self, point: Point, color: NodeColor) -> None:
        self._require(point)
        self._colors[point] = color

    def reset(self) -> None:
        """Restore every wall and the clear colour on every cell."""
        self._open.clear()
        self._colors.clear()

    def render(self) -> str:
        """Draw the walls as ASCII art."""
        rows = range(-self.half, self.half + 1)
        lines = []
        for y in rows:
            top = "+" + "".join(
                ("-" if self.has_wall(Point(x, y), Direction.NORTH) else " ") + "+"
                for x in rows
            )
            middle = "".join(
                ("|" if self.has_wall(Point(x, y), Direction.WEST) else " ") + " "
                for x in rows
            )
            middle += "|" if self.has_wall(Point(self.half, y), Direction.EAST) else " "
            lines.extend((top, middle))
        lines.append("+" + "".join(
            ("-" if self.has_wall(Point(x, self.half), Direction.SOUTH) else " ") + "+"
            for x in rows
        ))
        return "\n".join(lines)