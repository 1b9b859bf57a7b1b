import logging

from convex_decomp.types import Edge, Point, Polygon

logger = logging.getLogger(__name__)


def canonical_edge(a: Point, b: Point) -> Edge:
    return (a, b) if a < b else (b, a)


def triangle_edges(triangle: Polygon) -> list[Edge]:
    coords = triangle.ring()
    return [canonical_edge(coords[j], coords[(j + 1) % 3]) for j in range(3)]


def find_shared_edges(triangles: list[Polygon]) -> list[tuple[Edge, tuple[int, int]]]:
    """
    Find the edges bordered by exactly two triangles.

    Parameters
    ----------
    triangles: List[:class:`Polygon`]
        Triangles as closed 4-point rings

    Returns
    -------
    List[Tuple[Edge, Tuple[int, int]]]
        Each internal diagonal with the indices of its two triangles, ordered
        by the edge's first appearance in ``triangles``
    """
    # dicts keep insertion order, so the merge order is reproducible
    edge_map: dict[Edge, list[int]] = {}

    for i, triangle in enumerate(triangles):
        for edge in triangle_edges(triangle):
            edge_map.setdefault(edge, []).append(i)

    shared_edges = []
    for edge, indices in edge_map.items():
        if len(indices) == 2:
            shared_edges.append((edge, (indices[0], indices[1])))
        elif len(indices) > 2:
            logger.warning(f"Edge {edge} is shared by {len(indices)} triangles {indices}; skipped")

    return shared_edges
