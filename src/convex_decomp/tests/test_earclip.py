"""Tests for ear-clipping triangulation."""

import pytest

from convex_decomp import InsufficientVertices, NoEarFound, Polygon, triangulate

SQUARE = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
L_SHAPE = [(0.0, 0.0), (4.0, 0.0), (4.0, 1.0), (1.0, 1.0), (1.0, 4.0), (0.0, 4.0)]


class TestTriangulate:
    """Tests for triangulate."""

    def test_square(self):
        triangles = triangulate(Polygon.from_points(SQUARE))

        assert [t.coords() for t in triangles] == [
            [(0.0, 4.0), (0.0, 0.0), (4.0, 0.0), (0.0, 4.0)],
            [(4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (4.0, 0.0)],
        ]

    def test_triangle_count(self):
        """An n-vertex polygon gives n - 2 triangles."""
        triangles = triangulate(Polygon.from_points(L_SHAPE))
        assert len(triangles) == len(L_SHAPE) - 2

    def test_area_conserved(self):
        polygon = Polygon.from_points(L_SHAPE)
        triangles = triangulate(polygon)
        assert sum(t.area for t in triangles) == pytest.approx(polygon.area)

    def test_triangles_are_closed_rings(self):
        for t in triangulate(Polygon.from_points(L_SHAPE)):
            coords = t.coords()
            assert len(coords) == 4
            assert coords[0] == coords[-1]
            assert t.is_ccw

    def test_open_ring_input(self):
        """A ring without its closing point triangulates the same way."""
        closed = triangulate(Polygon.from_points(SQUARE))
        opened = triangulate(Polygon.from_points(SQUARE, close=False))
        assert [t.coords() for t in opened] == [t.coords() for t in closed]

    def test_single_triangle(self):
        triangles = triangulate(Polygon.from_points([(0.0, 0.0), (4.0, 0.0), (2.0, 4.0)]))
        assert len(triangles) == 1
        assert triangles[0].coords() == [(0.0, 0.0), (4.0, 0.0), (2.0, 4.0), (0.0, 0.0)]

    def test_reflex_vertex_never_clipped(self):
        """The reflex vertex (2, 2) is never the middle vertex of an ear."""
        polygon = Polygon.from_points([(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (2.0, 2.0), (0.0, 4.0)])
        triangles = triangulate(polygon)
        assert len(triangles) == 3
        assert triangles[0].coords() == [(4.0, 0.0), (4.0, 4.0), (2.0, 2.0), (4.0, 0.0)]


class TestTriangulateErrors:
    """Tests for malformed triangulation input."""

    @pytest.mark.parametrize(
        "points",
        [
            [(0.0, 0.0)],
            [(0.0, 0.0), (1.0, 1.0)],
            [(0.0, 0.0), (1.0, 1.0), (0.0, 0.0)],
        ],
    )
    def test_too_few_points(self, points):
        with pytest.raises(InsufficientVertices):
            triangulate(Polygon.from_points(points))

    def test_repeated_vertices(self):
        """Four stored coordinates with only two distinct vertices are rejected."""
        polygon = Polygon.from_points([(0.0, 0.0), (1.0, 0.0), (1.0, 0.0), (0.0, 0.0)])
        with pytest.raises(InsufficientVertices, match="distinct"):
            triangulate(polygon)

    def test_repeated_vertices_collapsed(self):
        points = [(0.0, 0.0), (4.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (0.0, 4.0)]
        triangles = triangulate(Polygon.from_points(points))

        assert len(triangles) == 2
        assert all(t.area > 0 for t in triangles)

    def test_empty(self):
        with pytest.raises(InsufficientVertices):
            triangulate(Polygon.from_points([]))

    def test_clockwise_ring_has_no_ear(self):
        """Every vertex of a clockwise ring is reflex."""
        with pytest.raises(NoEarFound):
            triangulate(Polygon.from_points(SQUARE[::-1]))
