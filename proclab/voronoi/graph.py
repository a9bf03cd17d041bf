"""Voronoi cell graph: edges, half edges and closing cells against a box."""

from __future__ import annotations

import math
from typing import Callable, Iterable, List, Optional, Tuple

from proclab.voronoi.geometry import Cell, Edge, HalfEdge, Site, Vertex

EPSILON = 1e-4


def _snap_to_origin(x: float, y: float) -> Vertex:
    """Build a vertex whose coordinates below EPSILON are flushed to zero."""
    return Vertex(0.0 if x < EPSILON else x, 0.0 if y < EPSILON else y)


class Graph:
    """A Voronoi cell graph over sites inside the box [0, x_bound] x [0, y_bound].

    Edges are never removed once created, since half edges refer to them by
    index; edges that fall outside the box are marked with undefined end
    points instead.
    """

    def __init__(self, x_bound: float = 0.0, y_bound: float = 0.0,
                 sites: Iterable[Site] = ()) -> None:
        self.x_bound = float(x_bound)
        self.y_bound = float(y_bound)
        self.sites: List[Site] = list(sites)
        self.edges: List[Edge] = []
        self.cells: List[Cell] = []

    def create_edge(self, left: int, right: int,
                    va: Optional[Vertex] = None,
                    vb: Optional[Vertex] = None) -> int:
        """Create an edge between two sites and register its half edges."""
        edge = Edge(left, right)
        self.edges.append(edge)
        index = len(self.edges) - 1

        if va is not None and va.is_defined():
            edge.set_startpoint(left, right, va)
        if vb is not None and vb.is_defined():
            edge.set_endpoint(left, right, vb)

        left_cell = self.sites[left].cell
        right_cell = self.sites[right].cell
        self.cells[left_cell].half_edges.append(self.create_half_edge(index, left, right))
        self.cells[right_cell].half_edges.append(self.create_half_edge(index, right, left))
        return index

    def create_border_edge(self, site: int, va: Vertex, vb: Vertex) -> int:
        """Create an edge lying on the bounding box, owned by a single site."""
        self.edges.append(Edge(site, -1, va, vb))
        return len(self.edges) - 1

    def create_half_edge(self, edge: int, left_site: int, right_site: int) -> HalfEdge:
        """Build the half edge of ``edge`` seen from ``left_site``."""
        lsite = self.sites[left_site]
        if right_site >= 0:
            rsite = self.sites[right_site]
            angle = math.atan2(rsite.y - lsite.y, rsite.x - lsite.x)
        else:
            ref = self.edges[edge]
            if ref.left_site == left_site:
                angle = math.atan2(ref.p1.x - ref.p0.x, ref.p0.y - ref.p1.y)
            else:
                angle = math.atan2(ref.p0.x - ref.p1.x, ref.p1.y - ref.p0.y)
        return HalfEdge(site=left_site, edge=edge, angle=angle)

    def connect_edge(self, edge_index: int) -> bool:
        """Connect a dangling edge to the bounding box.

        Returns False when the edge does not reach into the box.
        """
        edge = self.edges[edge_index]
        if edge.p1.is_defined():
            return True

        xl, xr, yt, yb = 0.0, self.x_bound, 0.0, self.y_bound
        lsite = self.sites[edge.left_site]
        rsite = self.sites[edge.right_site]
        lx, ly, rx, ry = lsite.x, lsite.y, rsite.x, rsite.y
        fx = (lx + rx) / 2
        fy = (ly + ry) / 2

        self.cells[lsite.cell].close_me = True
        self.cells[rsite.cell].close_me = True

        p0 = edge.p0
        defined = p0.is_defined()

        if ry == ly:
            # vertical bisector
            if fx < xl or fx >= xr:
                return False
            if lx > rx:
                if not defined or p0.x < yt:
                    p0 = Vertex(fx, yt)
                elif p0.y >= yb:
                    return False
                p1 = Vertex(fx, yb)
            else:
                if not defined or p0.y > yb:
                    p0 = Vertex(fx, yb)
                elif p0.y < yt:
                    return False
                p1 = Vertex(fx, yt)
        else:
            fm = (lx - rx) / (ry - ly)
            fb = fy - fm * fx
            if fm < -1.0 or fm > 1.0:
                # closer to vertical: use top and bottom sides
                if lx > rx:
                    if not defined or p0.y < yt:
                        p0 = Vertex((yt - fb) / fm, yt)
                    elif p0.y >= yb:
                        return False
                    p1 = Vertex((yb - fb) / fm, yb)
                else:
                    if not defined or p0.y > yb:
                        p0 = Vertex((yb - fb) / fm, yb)
                    elif p0.y < yt:
                        return False
                    p1 = Vertex((yt - fb) / fm, yt)
            else:
                # closer to horizontal: use left and right sides
                if ly < ry:
                    if not defined or p0.x < xl:
                        p0 = Vertex(xl, fm * xl + fb)
                    elif p0.x >= xr:
                        return False
                    p1 = Vertex(xr, fm * xr + fb)
                else:
                    if not defined or p0.x > xr:
                        p0 = Vertex(xr, fm * xr + fb)
                    elif p0.x < xl:
                        return False
                    p1 = Vertex(xl, fm * xl + fb)

        edge.p0 = p0
        edge.p1 = p1
        return True

    def clip_edge(self, edge_index: int) -> bool:
        """Clip an edge to the bounding box (Liang-Barsky).

        Returns False when the edge lies wholly outside the box.
        """
        edge = self.edges[edge_index]
        ax, ay = edge.p0.x, edge.p0.y
        bx, by = edge.p1.x, edge.p1.y
        dx = bx - ax
        dy = by - ay
        t0, t1 = 0.0, 1.0

        for p, q in ((-dx, ax), (dx, self.x_bound - ax),
                     (-dy, ay), (dy, self.y_bound - ay)):
            if p == 0.0:
                if q < 0:
                    return False
                continue
            r = q / p
            if p < 0.0:
                if r > t1:
                    return False
                if r > t0:
                    t0 = r
            else:
                if r < t0:
                    return False
                if r < t1:
                    t1 = r

        # New vertices are created since the old ones may be shared.
        if t0 > 0.0:
            edge.p0 = _snap_to_origin(ax + t0 * dx, ay + t0 * dy)
        if t1 < 1.0:
            edge.p1 = _snap_to_origin(ax + t1 * dx, ay + t1 * dy)

        if t0 > 0.0 or t1 < 1.0:
            self.cells[self.sites[edge.left_site].cell].close_me = True
            self.cells[self.sites[edge.right_site].cell].close_me = True
        return True

    def clip_edges(self) -> None:
        """Connect dangling edges to the box and discard unusable ones."""
        for index, edge in enumerate(list(self.edges)):
            if (not self.connect_edge(index)
                    or not self.clip_edge(index)
                    or (abs(edge.p0.x - edge.p1.x) < EPSILON
                        and abs(edge.p0.y - edge.p1.y) < EPSILON)):
                edge.p0 = Vertex()
                edge.p1 = Vertex()

    def half_edge_startpoint(self, half_edge: HalfEdge) -> Vertex:
        edge = self.edges[half_edge.edge]
        return edge.p0 if edge.left_site == half_edge.site else edge.p1

    def half_edge_endpoint(self, half_edge: HalfEdge) -> Vertex:
        edge = self.edges[half_edge.edge]
        return edge.p1 if edge.left_site == half_edge.site else edge.p0

    def prepare_half_edges_for_cell(self, cell: int) -> bool:
        """Drop half edges of discarded edges and sort by descending angle.

        Returns whether the cell still has any half edge.
        """
        if cell >= len(self.cells):
            return False
        target = self.cells[cell]
        kept = [
            he for he in target.half_edges
            if self.edges[he.edge].p0.is_defined() and self.edges[he.edge].p1.is_defined()
        ]
        kept.sort(key=lambda he: he.angle, reverse=True)
        target.half_edges = kept
        return bool(kept)

    def _border_walks(self) -> List[Tuple[bool, Callable[[Vertex], bool],
                                          Callable[[Vertex], bool],
                                          Callable[[Vertex, bool], Vertex]]]:
        """The walks along the box sides used to close a cell, in order.

        Each entry holds whether the walk is conditional, the condition on the
        current point, the test for reaching the target, and the next point.
        """
        xl, xr, yt, yb = 0.0, self.x_bound, 0.0, self.y_bound

        left = (
            lambda va: abs(va.x - xl) < EPSILON and (yb - va.y) > EPSILON,
            lambda vz: abs(vz.x - xl) < EPSILON,
            lambda vz, last: Vertex(xl, vz.y if last else yb),
        )
        bottom = (
            lambda va: abs(va.y - yb) < EPSILON and (xr - va.x) > EPSILON,
            lambda vz: abs(vz.y - yb) < EPSILON,
            lambda vz, last: Vertex(vz.x if last else xr, yb),
        )
        right = (
            lambda va: abs(va.x - xr) < EPSILON and (va.y - yt) > EPSILON,
            lambda vz: abs(vz.x - xr) < EPSILON,
            lambda vz, last: Vertex(xr, vz.y if last else yt),
        )
        top = (
            lambda va: abs(va.y - yt) < EPSILON and (va.x - xl) > EPSILON,
            lambda vz: abs(vz.y - yt) < EPSILON,
            lambda vz, last: Vertex(vz.x if last else xl, yt),
        )
        conditional = [(True, *side) for side in (left, bottom, right, top)]
        unconditional = [(False, *side) for side in (left, bottom, right)]
        return conditional + unconditional

    def close_cells(self) -> None:
        """Add border half edges so that every cell is a closed polygon."""
        walks = self._border_walks()

        for index in reversed(range(len(self.cells))):
            cell = self.cells[index]
            if not self.prepare_half_edges_for_cell(index):
                continue
            if not cell.close_me:
                continue

            half_edges = cell.half_edges
            i_left = 0
            while i_left < len(half_edges):
                va = self.half_edge_endpoint(half_edges[i_left])
                vz = self.half_edge_startpoint(half_edges[(i_left + 1) % len(half_edges)])
                if abs(va.x - vz.x) >= EPSILON or abs(va.y - vz.y) >= EPSILON:
                    # Holes are not necessarily adjacent; walk the border
                    # until the next start point is reached.
                    last = False
                    for guarded, condition, reaches, next_point in walks:
                        if last or (guarded and not condition(va)):
                            continue
                        last = reaches(vz)
                        vb = next_point(vz, last)
                        edge_index = self.create_border_edge(cell.site, va, vb)
                        i_left += 1
                        half_edges.insert(i_left,
                                          self.create_half_edge(edge_index, cell.site, -1))
                        if not last:
                            va = vb
                i_left += 1
            cell.close_me = False