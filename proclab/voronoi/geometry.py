"""Basic geometric records of a Voronoi diagram."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List


@dataclass(eq=False)
class Vertex:
    """A 2D point; a vertex with a NaN coordinate is undefined."""

    x: float = math.nan
    y: float = math.nan

    def is_defined(self) -> bool:
        return not math.isnan(self.x) and not math.isnan(self.y)

    def __bool__(self) -> bool:
        return self.is_defined()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.x == other.x and self.y == other.y


@dataclass(eq=False)
class Site(Vertex):
    """An input point of the diagram, linked to the index of its cell."""

    cell: int = -1


@dataclass
class Edge:
    """An edge between two sites; end points are undefined until set."""

    left_site: int = -1
    right_site: int = -1
    p0: Vertex = field(default_factory=Vertex)
    p1: Vertex = field(default_factory=Vertex)

    def set_startpoint(self, left_site: int, right_site: int, vertex: Vertex) -> None:
        """Set the start point as seen from ``left_site``."""
        if not self.p0.is_defined() and not self.p1.is_defined():
            self.p0 = vertex
            self.left_site = left_site
            self.right_site = right_site
        elif self.left_site == right_site:
            self.p1 = vertex
        else:
            self.p0 = vertex

    def set_endpoint(self, left_site: int, right_site: int, vertex: Vertex) -> None:
        """Set the end point as seen from ``left_site``."""
        self.set_startpoint(right_site, left_site, vertex)


@dataclass
class HalfEdge:
    """An edge as it relates to a single site."""

    site: int
    edge: int
    angle: float = 0.0


@dataclass
class Cell:
    """The region around a site, bounded by half edges."""

    site: int
    half_edges: List[HalfEdge] = field(default_factory=list)
    close_me: bool = False