import math
from typing import Optional

import numpy as np


# Newell normal of a 3D ring, None when the ring is degenerate
def ring_normal(ring: np.ndarray) -> Optional[np.ndarray]:
    shifted = np.roll(ring, -1, axis=0)
    n = np.sum(np.cross(ring, shifted), axis=0)
    d = np.linalg.norm(n)
    if d < 1e-7:
        return None
    return n / d


# rotation about the horizontal axis perpendicular to `normal`; `ring @ R` turns the normal onto +z
def _rotation_to_z(normal: np.ndarray) -> np.ndarray:
    nx, ny, nz = normal
    dd = math.hypot(nx, ny)
    if dd < 1e-8:
        # already vertical; a downward normal is turned half a revolution about x
        return np.diag([1.0, 1.0, 1.0]) if nz > 0 else np.diag([1.0, -1.0, -1.0])

    ax = -ny / dd
    ay = nx / dd
    theta = math.acos(max(-1.0, min(1.0, nz)))
    sint = math.sin(theta)
    cost = math.cos(theta)
    s = ax * ay * (1 - cost)
    return np.array(
        [
            [ax * ax * (1 - cost) + cost, s, ay * sint],
            [s, ay * ay * (1 - cost) + cost, -ax * sint],
            [-ay * sint, ax * sint, cost],
        ]
    )


def project_to_plane(ring: np.ndarray) -> Optional[np.ndarray]:
    """
    Flatten a planar 3D ring to 2D.

    The ring is rotated so its normal points along +z and the z component is
    dropped, which keeps the winding seen from the normal's side.
    Returns ``None`` for degenerate (zero area) rings.
    """
    ring = np.asarray(ring, dtype=np.float64).reshape(-1, 3)
    normal = ring_normal(ring)
    if normal is None:
        return None
    centered = ring - ring.mean(axis=0)
    rotated = centered @ _rotation_to_z(normal)
    return rotated[:, :2]
