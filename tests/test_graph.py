import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from proclab.voronoi.geometry import Cell, Site, Vertex
from proclab.voronoi.graph import EPSILON, Graph


def make_graph(points, bound=100.0):
    sites = [Site(x, y, cell=i) for i, (x, y) in enumerate(points)]
    graph = Graph(bound, bound, sites)
    graph.cells = [Cell(i) for i in range(len(points))]
    return graph


def polygon(graph, cell):
    return [graph.half_edge_startpoint(he) for he in cell.half_edges]


def area(points):
    total = 0.0
    for a, b in zip(points, points[1:] + points[:1]):
        total += a.x * b.y - b.x * a.y
    return abs(total) / 2


def assert_closed(graph, cell):
    hes = cell.half_edges
    for current, following in zip(hes, hes[1:] + hes[:1]):
        end = graph.half_edge_endpoint(current)
        start = graph.half_edge_startpoint(following)
        assert end.x == pytest.approx(start.x, abs=EPSILON)
        assert end.y == pytest.approx(start.y, abs=EPSILON)


def test_create_edge_registers_half_edges():
    graph = make_graph([(0, 0), (1, 0)])
    index = graph.create_edge(0, 1)
    assert index == 0
    assert graph.edges[0].left_site == 0
    assert graph.edges[0].right_site == 1
    assert not graph.edges[0].p0.is_defined()
    assert [he.edge for he in graph.cells[0].half_edges] == [0]
    assert graph.cells[0].half_edges[0].angle == pytest.approx(0.0)
    assert graph.cells[1].half_edges[0].angle == pytest.approx(math.pi)


def test_create_edge_with_vertices():
    graph = make_graph([(0, 0), (10, 0)])
    va = Vertex(5, -5)
    vb = Vertex(5, 5)
    graph.create_edge(0, 1, va, vb)
    edge = graph.edges[0]
    assert edge.p0 == va
    assert edge.p1 == vb


def test_create_edge_with_end_vertex_only():
    graph = make_graph([(0, 0), (10, 0)])
    vb = Vertex(5, 5)
    graph.create_edge(0, 1, None, vb)
    edge = graph.edges[0]
    assert edge.p0 == vb
    assert edge.left_site == 1
    assert edge.right_site == 0


def test_create_border_edge():
    graph = make_graph([(10, 10)])
    index = graph.create_border_edge(0, Vertex(0, 0), Vertex(0, 100))
    edge = graph.edges[index]
    assert edge.left_site == 0
    assert edge.right_site == -1
    assert edge.p0 == Vertex(0, 0)
    assert edge.p1 == Vertex(0, 100)


def test_connect_edge_vertical_bisector():
    graph = make_graph([(25, 50), (75, 50)])
    graph.create_edge(0, 1)
    assert graph.connect_edge(0) is True
    edge = graph.edges[0]
    assert edge.p0 == Vertex(50, 100)
    assert edge.p1 == Vertex(50, 0)
    assert graph.cells[0].close_me and graph.cells[1].close_me


def test_connect_edge_horizontal_bisector():
    graph = make_graph([(50, 25), (50, 75)])
    graph.create_edge(0, 1)
    assert graph.connect_edge(0) is True
    edge = graph.edges[0]
    assert edge.p0 == Vertex(0, 50)
    assert edge.p1 == Vertex(100, 50)


def test_connect_edge_outside_box():
    graph = make_graph([(140, 50), (160, 50)])
    graph.create_edge(0, 1)
    assert graph.connect_edge(0) is False


def test_connect_edge_already_connected():
    graph = make_graph([(25, 50), (75, 50)])
    graph.create_edge(0, 1, Vertex(50, 10), Vertex(50, 20))
    assert graph.connect_edge(0) is True
    assert graph.edges[0].p1 == Vertex(50, 20)
    assert not graph.cells[0].close_me


def test_clip_edge_crossing_box():
    graph = make_graph([(50, 25), (50, 75)])
    graph.create_edge(0, 1, Vertex(-50, 50), Vertex(150, 50))
    assert graph.clip_edge(0) is True
    edge = graph.edges[0]
    assert edge.p0.x == pytest.approx(0.0)
    assert edge.p0.y == pytest.approx(50.0)
    assert edge.p1.x == pytest.approx(100.0)
    assert edge.p1.y == pytest.approx(50.0)
    assert graph.cells[0].close_me and graph.cells[1].close_me


def test_clip_edge_inside_box_unchanged():
    graph = make_graph([(50, 25), (50, 75)])
    graph.create_edge(0, 1, Vertex(10, 50), Vertex(90, 50))
    assert graph.clip_edge(0) is True
    assert graph.edges[0].p0 == Vertex(10, 50)
    assert graph.edges[0].p1 == Vertex(90, 50)
    assert not graph.cells[0].close_me


def test_clip_edge_outside_box():
    graph = make_graph([(50, 25), (50, 75)])
    graph.create_edge(0, 1, Vertex(-50, -10), Vertex(150, -10))
    assert graph.clip_edge(0) is False


def test_clip_edges_discards_point_like_edges():
    graph = make_graph([(50, 25), (50, 75)])
    graph.create_edge(0, 1, Vertex(50, 50), Vertex(50, 50))
    graph.clip_edges()
    assert not graph.edges[0].p0.is_defined()
    assert not graph.edges[0].p1.is_defined()


def test_half_edge_start_and_end_points():
    graph = make_graph([(50, 25), (50, 75)])
    va, vb = Vertex(0, 50), Vertex(100, 50)
    graph.create_edge(0, 1, va, vb)
    left_half = graph.cells[0].half_edges[0]
    right_half = graph.cells[1].half_edges[0]
    assert graph.half_edge_startpoint(left_half) == va
    assert graph.half_edge_endpoint(left_half) == vb
    assert graph.half_edge_startpoint(right_half) == vb
    assert graph.half_edge_endpoint(right_half) == va


def test_prepare_half_edges_prunes_and_sorts():
    graph = make_graph([(50, 50), (80, 50), (50, 20), (20, 50), (50, 80)])
    graph.create_edge(0, 1, Vertex(65, 0), Vertex(65, 100))
    graph.create_edge(0, 2, Vertex(0, 35), Vertex(100, 35))
    graph.create_edge(0, 3, Vertex(35, 0), Vertex(35, 100))
    graph.create_edge(0, 4)
    assert graph.prepare_half_edges_for_cell(0) is True
    hes = graph.cells[0].half_edges
    assert [he.edge for he in hes] == [2, 0, 1]
    angles = [he.angle for he in hes]
    assert angles == sorted(angles, reverse=True)


def test_prepare_half_edges_out_of_range_and_empty():
    graph = make_graph([(50, 25), (50, 75)])
    assert graph.prepare_half_edges_for_cell(5) is False
    graph.create_edge(0, 1)
    assert graph.prepare_half_edges_for_cell(0) is False
    assert graph.cells[0].half_edges == []


@pytest.mark.parametrize("points", [
    [(50, 25), (50, 75)],
    [(25, 50), (75, 50)],
    [(10, 30), (30, 10)],
])
def test_close_cells_two_sites(points):
    graph = make_graph(points)
    graph.create_edge(0, 1)
    graph.clip_edges()
    graph.close_cells()
    for cell in graph.cells:
        assert not cell.close_me
        assert_closed(graph, cell)
        assert area(polygon(graph, cell)) == pytest.approx(5000.0, rel=1e-6)


coordinate = st.integers(min_value=1, max_value=99)


@given(coordinate, coordinate, coordinate, coordinate)
def test_close_cells_partitions_box(x0, y0, x1, y1):
    assume((x0, y0) != (x1, y1))
    graph = make_graph([(x0, y0), (x1, y1)])
    graph.create_edge(0, 1)
    graph.clip_edges()
    graph.close_cells()
    total = 0.0
    for cell in graph.cells:
        assert_closed(graph, cell)
        total += area(polygon(graph, cell))
    assert total == pytest.approx(100.0 * 100.0, rel=1e-4)