"""Sweep-line state for Fortune's algorithm: the beachline and circle events."""

from __future__ import annotations

import math
from itertools import pairwise
from typing import List, Optional

from proclab.voronoi.geometry import Vertex
from proclab.voronoi.graph import EPSILON, Graph
from proclab.voronoi.rbtree import RBNode, RBTree


class CircleEvent(RBNode):
    """The point where a beach arc collapses into a Voronoi vertex."""

    def __init__(self, arc: "BeachArc", site: int = -1, x: float = 0.0,
                 y: float = 0.0, y_center: float = 0.0) -> None:
        super().__init__()
        self.arc = arc
        self.site = site
        self.x = x
        self.y = y
        self.y_center = y_center


class BeachArc(RBNode):
    """A parabolic section of the beachline belonging to one site."""

    def __init__(self, site: int) -> None:
        super().__init__()
        self.site = site
        self.edge = -1
        self.circle_event: Optional[CircleEvent] = None


class Fortune:
    """Beachline and circle-event queue operating on a :class:`Graph`."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.beachline: RBTree[BeachArc] = RBTree()
        self.circle_events: RBTree[CircleEvent] = RBTree()
        self._top_circle_event: Optional[CircleEvent] = None

    def top_circle_event(self) -> Optional[CircleEvent]:
        """Return the earliest pending circle event, if any."""
        return self._top_circle_event

    def _left_break_point(self, arc: BeachArc, directrix: float) -> float:
        site = self.graph.sites[arc.site]
        rfocx, rfocy = site.x, site.y
        pby2 = rfocy - directrix
        # degenerate parabola: focus lies on the directrix
        if pby2 == 0.0:
            return rfocx
        left_arc = arc.previous
        if left_arc is None:
            return -math.inf
        left_site = self.graph.sites[left_arc.site]
        lfocx, lfocy = left_site.x, left_site.y
        plby2 = lfocy - directrix
        if plby2 == 0.0:
            return lfocx
        hl = lfocx - rfocx
        aby2 = 1 / pby2 - 1 / plby2
        b = hl / plby2
        if aby2 != 0.0:
            disc = b * b - 2 * aby2 * (hl * hl / (-2 * plby2) - lfocy
                                       + plby2 / 2 + rfocy - pby2 / 2)
            dist = math.sqrt(disc) if disc >= 0 else math.nan
            return (-b + dist) / aby2 + rfocx
        # both parabolas are equally far from the directrix
        return (rfocx + lfocx) / 2

    def _right_break_point(self, arc: BeachArc, directrix: float) -> float:
        right_arc = arc.next
        if right_arc is not None:
            return self._left_break_point(right_arc, directrix)
        site = self.graph.sites[arc.site]
        return site.x if site.y == directrix else math.inf

    def _attach_circle_event(self, arc: BeachArc) -> None:
        left_arc = arc.previous
        right_arc = arc.next
        if left_arc is None or right_arc is None:
            return
        if left_arc.site == right_arc.site:
            return

        sites = self.graph.sites
        left_site = sites[left_arc.site]
        center_site = sites[arc.site]
        right_site = sites[right_arc.site]

        bx, by = center_site.x, center_site.y
        ax, ay = left_site.x - bx, left_site.y - by
        cx, cy = right_site.x - bx, right_site.y - by

        # clockwise triplets never converge
        d = 2 * (ax * cy - ay * cx)
        if d >= -2e-9:
            return

        ha = ax * ax + ay * ay
        hc = cx * cx + cy * cy
        x = (cy * ha - ay * hc) / d
        y = (ax * hc - cx * ha) / d
        y_center = y + by

        event = CircleEvent(arc, site=arc.site, x=x + bx,
                            y=y_center + math.sqrt(x * x + y * y),
                            y_center=y_center)
        arc.circle_event = event

        predecessor: Optional[CircleEvent] = None
        node = self.circle_events.root
        while node is not None:
            if event.y < node.y or (event.y == node.y and event.x <= node.x):
                if node.left is not None:
                    node = node.left
                else:
                    predecessor = node.previous
                    break
            else:
                if node.right is not None:
                    node = node.right
                else:
                    predecessor = node
                    break
        self.circle_events.insert(predecessor, event)
        if predecessor is None:
            self._top_circle_event = event

    def _detach_circle_event(self, arc: BeachArc) -> None:
        event = arc.circle_event
        if event is None:
            return
        if event.previous is None:
            self._top_circle_event = event.next
        self.circle_events.remove(event)
        arc.circle_event = None

    def _detach_beach_section(self, arc: BeachArc) -> None:
        self._detach_circle_event(arc)
        self.beachline.remove(arc)

    def add_beach_section(self, site: int) -> None:
        """Insert the parabola of a newly swept site into the beachline."""
        graph = self.graph
        point = graph.sites[site]
        x, directrix = point.x, point.y

        left_arc: Optional[BeachArc] = None
        right_arc: Optional[BeachArc] = None
        node = self.beachline.root
        while node is not None:
            dxl = self._left_break_point(node, directrix) - x
            if dxl > EPSILON:
                node = node.left
                continue
            dxr = x - self._right_break_point(node, directrix)
            if dxr > EPSILON:
                if node.right is None:
                    left_arc = node
                    break
                node = node.right
                continue
            if dxl > -EPSILON:
                left_arc = node.previous
                right_arc = node
            elif dxr > -EPSILON:
                left_arc = node
                right_arc = node.next
            else:
                left_arc = right_arc = node
            break

        new_arc = BeachArc(site)
        self.beachline.insert(left_arc, new_arc)

        if left_arc is None and right_arc is None:
            return

        if left_arc is right_arc:
            # the new arc splits an existing one
            self._detach_circle_event(left_arc)
            right_arc = BeachArc(left_arc.site)
            self.beachline.insert(new_arc, right_arc)
            new_arc.edge = right_arc.edge = graph.create_edge(left_arc.site, new_arc.site)
            self._attach_circle_event(left_arc)
            self._attach_circle_event(right_arc)
            return

        if left_arc is not None and right_arc is None:
            # new arc is the last one on the beachline
            new_arc.edge = graph.create_edge(left_arc.site, new_arc.site)
            return

        # the new arc falls exactly between two existing arcs
        self._detach_circle_event(left_arc)
        self._detach_circle_event(right_arc)

        left_site = graph.sites[left_arc.site]
        ax, ay = left_site.x, left_site.y
        bx, by = point.x - ax, point.y - ay
        right_site = graph.sites[right_arc.site]
        cx, cy = right_site.x - ax, right_site.y - ay
        d = 2 * (bx * cy - by * cx)
        hb = bx * bx + by * by
        hc = cx * cx + cy * cy
        vertex = Vertex(ax + (cy * hb - by * hc) / d, ay + (bx * hc - cx * hb) / d)

        graph.edges[right_arc.edge].set_startpoint(left_arc.site, right_arc.site, vertex)
        new_arc.edge = graph.create_edge(left_arc.site, site, None, vertex)
        right_arc.edge = graph.create_edge(site, right_arc.site, None, vertex)

        self._attach_circle_event(left_arc)
        self._attach_circle_event(right_arc)

    def remove_beach_section(self, arc: BeachArc) -> None:
        """Collapse ``arc`` at its circle event, creating a Voronoi vertex."""
        event = arc.circle_event
        x, y = event.x, event.y_center
        vertex = Vertex(x, y)

        previous = arc.previous
        following = arc.next

        detached: List[BeachArc] = [arc]
        self._detach_beach_section(arc)

        def collapses_here(candidate: BeachArc) -> bool:
            ce = candidate.circle_event
            return (ce is not None and abs(x - ce.x) < EPSILON
                    and abs(y - ce.y_center) < EPSILON)

        left_arc = previous
        while collapses_here(left_arc):
            previous = left_arc.previous
            detached.insert(0, left_arc)
            self._detach_beach_section(left_arc)
            left_arc = previous
        detached.insert(0, left_arc)
        self._detach_circle_event(left_arc)

        right_arc = following
        while collapses_here(right_arc):
            following = right_arc.next
            detached.append(right_arc)
            self._detach_beach_section(right_arc)
            right_arc = following
        detached.append(right_arc)
        self._detach_circle_event(right_arc)

        edges = self.graph.edges
        for left, right in pairwise(detached):
            edges[right.edge].set_startpoint(left.site, right.site, vertex)

        left_arc = detached[0]
        right_arc = detached[-1]
        right_arc.edge = self.graph.create_edge(left_arc.site, right_arc.site, None, vertex)

        self._attach_circle_event(left_arc)
        self._attach_circle_event(right_arc)