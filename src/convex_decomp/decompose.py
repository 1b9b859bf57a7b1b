import logging
from dataclasses import dataclass

from convex_decomp.earclip import triangulate
from convex_decomp.merge import is_polygon_convex, merge_polygons
from convex_decomp.shared_edges import find_shared_edges
from convex_decomp.types import Polygon

logger = logging.getLogger(__name__)


@dataclass
class PieceRecord:
    polygon: Polygon
    retired: bool = False


def hertel_mehlhorn(polygon: Polygon) -> list[Polygon]:
    """
    Convex decomposition of a simple counter-clockwise polygon.

    Triangulates by ear clipping, then walks the internal diagonals once and
    fuses the two triangles on either side whenever the union stays convex.
    A triangle takes part in at most one merge and merged polygons are not
    merged again.

    Raises
    ------
    InsufficientVertices, NoEarFound
        If the polygon cannot be triangulated
    EdgeNotFound
        If a diagonal cannot be located while splicing
    """
    triangles = triangulate(polygon)
    logger.debug(f"Triangulated into {len(triangles)} triangles")
    for i, triangle in enumerate(triangles):
        logger.debug(f"  Triangle {i}: {triangle.coords()}")

    shared_edges = find_shared_edges(triangles)
    for edge, (t1, t2) in shared_edges:
        logger.debug(f"  Edge {edge} shared by triangles {t1} and {t2}")

    arena = [PieceRecord(triangle) for triangle in triangles]

    for edge, (t1, t2) in shared_edges:
        if arena[t1].retired or arena[t2].retired:
            continue

        merged = merge_polygons(arena[t1].polygon, arena[t2].polygon, edge)

        if is_polygon_convex(merged):
            logger.debug(f"Merging triangles {t1} and {t2} into piece {len(arena)}")
            arena.append(PieceRecord(merged))
            arena[t1].retired = True
            arena[t2].retired = True
        else:
            logger.debug(f"Triangles {t1} and {t2} cannot be merged into a convex polygon")

    pieces = [record.polygon for record in arena if not record.retired]
    logger.debug(f"{len(pieces)} convex pieces")

    return pieces


def decompose(polygon: Polygon, precision: int | None = None) -> list[Polygon]:
    # quantizing makes nearly coincident input points compare equal
    if precision is not None:
        polygon = polygon.quantized(precision)
    return hertel_mehlhorn(polygon)


# relative difference between the polygon area and the summed area of its pieces
# used to verify that a decomposition tiles its input
def deviation(polygon: Polygon, pieces: list[Polygon]) -> float:
    polygon_area = polygon.area
    pieces_area = sum(piece.area for piece in pieces)

    if polygon_area == 0 and pieces_area == 0:
        return 0
    return abs((pieces_area - polygon_area) / polygon_area)
