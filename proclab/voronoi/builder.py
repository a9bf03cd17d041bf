"""Construction of a Voronoi graph from a collection of sites."""

from __future__ import annotations

from typing import Iterable, List, Tuple, Union

from proclab.voronoi.fortune import Fortune
from proclab.voronoi.geometry import Cell, Site, Vertex
from proclab.voronoi.graph import Graph

SiteLike = Union[Vertex, Tuple[float, float]]


def _as_site(item: SiteLike) -> Site:
    if isinstance(item, Vertex):
        return Site(item.x, item.y)
    x, y = item
    return Site(float(x), float(y))


def build(sites: Iterable[SiteLike], x_bound: float, y_bound: float) -> Graph:
    """Build the Voronoi graph of ``sites`` inside [0, x_bound] x [0, y_bound].

    Sites may be vertices or (x, y) pairs; the caller's objects are not
    modified. Consecutive duplicates are ignored.
    """
    graph = Graph(x_bound, y_bound, [_as_site(item) for item in sites])
    graph_sites = graph.sites

    site_events: List[int] = [
        index for index, site in enumerate(graph_sites)
        if index == 0 or graph_sites[index - 1] != site
    ]
    site_events.sort(key=lambda index: (graph_sites[index].y, graph_sites[index].x))

    fortune = Fortune(graph)
    pending = iter(site_events)
    site_index = next(pending, None)

    while True:
        circle = fortune.top_circle_event()
        site = graph_sites[site_index] if site_index is not None else None
        if site is not None and (circle is None or site.y < circle.y
                                 or (site.y == circle.y and site.x < circle.x)):
            graph.cells.append(Cell(site_index))
            site.cell = len(graph.cells) - 1
            fortune.add_beach_section(site_index)
            site_index = next(pending, None)
        elif circle is not None:
            fortune.remove_beach_section(circle.arc)
        else:
            break

    graph.clip_edges()
    graph.close_cells()
    return graph