"""Export of convex decompositions as planar triangle meshes.

Each convex piece is fanned from its first vertex, so the mesh keeps the
piece boundaries as edges and can be written with any format trimesh knows.
"""

from pathlib import Path

import numpy as np
from trimesh import Trimesh

from convex_decomp.types import Polygon


def _fan(start: int, count: int) -> np.ndarray:
    idx = np.arange(1, count - 1)
    return np.column_stack([np.full(len(idx), start), start + idx, start + idx + 1])


def to_trimesh(pieces: list[Polygon], z: float = 0.0) -> Trimesh:
    vertices = []
    faces = []
    offset = 0
    for piece in pieces:
        ring = np.asarray(piece.ring(), dtype=np.float64)
        vertices.append(np.column_stack([ring, np.full(len(ring), z)]))
        faces.append(_fan(offset, len(ring)))
        offset += len(ring)

    if not vertices:
        return Trimesh(vertices=np.zeros((0, 3)), faces=np.zeros((0, 3), dtype=np.int64), process=False)

    # process=False keeps collinear boundary points and per-piece vertices
    return Trimesh(vertices=np.vstack(vertices), faces=np.vstack(faces).astype(np.int64), process=False)


def export_pieces(pieces: list[Polygon], output: Path, z: float = 0.0) -> None:
    mesh = to_trimesh(pieces, z=z)
    mesh.export(str(output))
