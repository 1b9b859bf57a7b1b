import logging
from pathlib import Path

import lxml.etree as et
import numpy as np
import pyproj

from convex_decomp.earclip.utils_3d import project_to_plane
from convex_decomp.types import Polygon

logger = logging.getLogger(__name__)

_NS = {
    "gml": "http://www.opengis.net/gml",
}

DEFAULT_TARGET_CRS = "epsg:3857"


def _read_pos_list(pos_list, default_dim: int) -> np.ndarray:
    dim = int(pos_list.get("srsDimension") or default_dim)
    vertices = np.fromstring(pos_list.text or "", dtype=np.float64, sep=" ")
    assert len(vertices) % dim == 0, f"posList length {len(vertices)} is not a multiple of {dim}"
    ring = vertices.reshape(-1, dim)
    # drop the closing point
    if len(ring) > 1 and np.all(ring[0] == ring[-1]):
        ring = ring[:-1]
    return ring


def _reproject(ring: np.ndarray, transformer: pyproj.Transformer) -> np.ndarray:
    ring = ring.copy()
    # geographic GML coordinates are latitude first
    xx, yy = transformer.transform(ring[:, 1], ring[:, 0])
    ring[:, 0] = np.asarray(xx)
    ring[:, 1] = np.asarray(yy)
    return ring


def _to_polygon(ring: np.ndarray) -> Polygon | None:
    if ring.shape[1] >= 3:
        flat = project_to_plane(ring[:, :3])
        if flat is None:
            return None
    else:
        flat = ring[:, :2]
    return Polygon.from_points(flat).oriented_ccw()


def load_polygons(
    file_path: Path,
    source_crs: str | None = None,
    target_crs: str = DEFAULT_TARGET_CRS,
    dim: int = 2,
) -> list[Polygon]:
    """
    Read the exterior ring of every ``gml:Polygon`` in a GML document.

    Parameters
    ----------
    file_path
        GML document
    source_crs
        CRS of geographic input coordinates; when set, rings are reprojected
        to ``target_crs`` before flattening
    target_crs
        Planar CRS used with ``source_crs``
    dim
        Coordinate dimension when a ``posList`` has no ``srsDimension``

    Returns
    -------
    List[:class:`Polygon`]
        Closed counter-clockwise 2D polygons; 3D rings are flattened onto
        their own plane
    """
    doc = et.parse(str(file_path), None)

    transformer = None
    if source_crs is not None:
        transformer = pyproj.Transformer.from_crs(source_crs, target_crs, always_xy=True)

    polygons = []
    for polygon in doc.iterfind(".//gml:Polygon", _NS):
        pos_list = polygon.find("./gml:exterior//gml:posList", _NS)
        if pos_list is None:
            logger.warning(f"Polygon without exterior posList skipped (line {polygon.sourceline})")
            continue

        if polygon.find("./gml:interior", _NS) is not None:
            logger.warning(f"Interior rings ignored (line {polygon.sourceline})")

        ring = _read_pos_list(pos_list, dim)
        if len(ring) < 3:
            logger.warning(f"Ring with {len(ring)} points skipped (line {polygon.sourceline})")
            continue

        if transformer is not None:
            ring = _reproject(ring, transformer)

        result = _to_polygon(ring)
        if result is None:
            logger.warning(f"Degenerate ring skipped (line {polygon.sourceline})")
            continue
        polygons.append(result)

    logger.info(f"Loaded {len(polygons)} polygons from {file_path}")
    return polygons
