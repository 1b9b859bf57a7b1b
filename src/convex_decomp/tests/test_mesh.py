"""Tests for mesh export."""

import pytest
import trimesh

from convex_decomp import Polygon, decompose
from convex_decomp.mesh import export_pieces, to_trimesh

CONCAVE = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (2.0, 2.0), (0.0, 4.0)]


class TestToTrimesh:
    """Tests for to_trimesh."""

    def test_square(self):
        pieces = decompose(Polygon.from_points([(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]))
        mesh = to_trimesh(pieces)

        assert len(mesh.vertices) == 4
        assert len(mesh.faces) == 2
        assert mesh.area == pytest.approx(16.0)

    def test_concave_area(self):
        polygon = Polygon.from_points(CONCAVE)
        mesh = to_trimesh(decompose(polygon))
        assert mesh.area == pytest.approx(polygon.area)

    def test_height(self):
        pieces = decompose(Polygon.from_points(CONCAVE))
        mesh = to_trimesh(pieces, z=2.5)
        assert (mesh.vertices[:, 2] == 2.5).all()

    def test_faces_point_up(self):
        mesh = to_trimesh(decompose(Polygon.from_points(CONCAVE)))
        assert (mesh.face_normals[mesh.area_faces > 0][:, 2] > 0).all()


class TestExportPieces:
    """Tests for export_pieces."""

    @pytest.mark.parametrize("suffix", ["stl", "ply", "obj"])
    def test_round_trip_area(self, tmp_path, suffix):
        polygon = Polygon.from_points(CONCAVE)
        output = tmp_path / f"pieces.{suffix}"
        export_pieces(decompose(polygon), output)

        assert output.exists()
        loaded = trimesh.load(str(output), force="mesh")
        assert loaded.area == pytest.approx(polygon.area)
