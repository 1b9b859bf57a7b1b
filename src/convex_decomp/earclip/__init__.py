import logging

from convex_decomp.errors import InsufficientVertices, NoEarFound
from convex_decomp.predicates import is_convex_vertex, point_in_triangle
from convex_decomp.types import Point, Polygon, filter_points

logger = logging.getLogger(__name__)


def triangulate(polygon: Polygon) -> list[Polygon]:
    coords = polygon.coords()

    # a triangle needs 3 vertices plus the closing point
    if len(coords) < 4:
        raise InsufficientVertices(f"Polygon must have at least 4 coordinates for triangulation, got {len(coords)}")

    coords = filter_points(coords)

    if len(coords) < 3:
        raise InsufficientVertices(f"Polygon must have at least 3 distinct vertices, got {len(coords)}")

    triangles = []

    # clip the first ear found, then rescan from the start
    while len(coords) > 3:
        ear = findEar(coords)
        if ear is None:
            raise NoEarFound(f"No ears found among {len(coords)} vertices; the polygon might be invalid or self-intersecting")

        prev, curr, next = neighbours(coords, ear)
        logger.debug(f"Clip ear at vertex {ear}: {prev}, {curr}, {next}")
        triangles.append(Polygon.from_points([prev, curr, next]))
        del coords[ear]

    triangles.append(Polygon.from_points(coords))

    return triangles


# index of the first vertex forming an ear with its neighbours, or None
def findEar(coords: list[Point]) -> int | None:
    n = len(coords)
    for i in range(n):
        prev, curr, next = neighbours(coords, i)
        if is_convex_vertex(prev, curr, next) and isEar(coords, (i + n - 1) % n, i, (i + 1) % n):
            return i
    return None


def neighbours(coords: list[Point], i: int) -> tuple[Point, Point, Point]:
    n = len(coords)
    return coords[(i + n - 1) % n], coords[i], coords[(i + 1) % n]


# check whether no other vertex lies inside the triangle of the three given vertices
def isEar(coords: list[Point], prev: int, curr: int, next: int) -> bool:
    a = coords[prev]
    b = coords[curr]
    c = coords[next]

    for i, p in enumerate(coords):
        if i in (prev, curr, next):
            continue
        if point_in_triangle(p, a, b, c):
            return False

    return True
