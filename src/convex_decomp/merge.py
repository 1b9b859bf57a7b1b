import logging

from convex_decomp.errors import EdgeNotFound
from convex_decomp.predicates import is_convex_vertex
from convex_decomp.types import Edge, Point, Polygon

logger = logging.getLogger(__name__)


def merge_polygons(p1: Polygon, p2: Polygon, shared_edge: Edge) -> Polygon:
    """
    Splice two counter-clockwise polygons together along their shared edge.

    The shared edge disappears from the result, the winding is kept and
    consecutive duplicate points are collapsed.

    Raises
    ------
    EdgeNotFound
        If ``shared_edge`` is not a boundary edge of both polygons
    """
    coords1 = _closed(p1.coords())
    coords2 = _closed(p2.coords())
    shared_start, shared_end = shared_edge

    shared_idx1 = _find_shared_edge(coords1, shared_start, shared_end)
    shared_idx2 = _find_shared_edge(coords2, shared_start, shared_end)

    merged = _reorder(coords1, shared_idx1)
    merged.extend(c for c in _reorder(coords2, shared_idx2) if c != shared_start and c != shared_end)

    merged.append(merged[0])

    return Polygon.from_points(_dedup(merged), close=False)


def is_polygon_convex(polygon: Polygon) -> bool:
    coords = polygon.ring()
    n = len(coords)

    for i in range(n):
        prev = coords[(i + n - 1) % n]
        curr = coords[i]
        next = coords[(i + 1) % n]
        if not is_convex_vertex(prev, curr, next):
            logger.debug(f"Polygon is not convex: vertex ({prev}, {curr}, {next}) forms a concave angle")
            return False

    return True


# index of the first stored coordinate of the shared edge, matching either direction
def _find_shared_edge(coords: list[Point], shared_start: Point, shared_end: Point) -> int:
    for i in range(len(coords) - 1):
        a, b = coords[i], coords[i + 1]
        if (a == shared_start and b == shared_end) or (a == shared_end and b == shared_start):
            return i
    raise EdgeNotFound(f"Shared edge {shared_start} - {shared_end} not found in polygon {coords}")


# rotate the stored coordinates to start right after the edge's first point
def _reorder(coords: list[Point], shared_idx: int) -> list[Point]:
    return coords[shared_idx + 1 :] + coords[: shared_idx + 1]


def _dedup(coords: list[Point]) -> list[Point]:
    result = []
    for c in coords:
        if not result or result[-1] != c:
            result.append(c)
    return result


def _closed(coords: list[Point]) -> list[Point]:
    if coords and coords[0] != coords[-1]:
        coords.append(coords[0])
    return coords
