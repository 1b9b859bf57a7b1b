class DecompositionError(Exception):
    """Base class for malformed or degenerate polygon input"""


class InsufficientVertices(DecompositionError):
    """Fewer than 3 distinct vertices were given to the triangulator"""


class NoEarFound(DecompositionError):
    """A triangulation pass found no ear; the polygon is not simple"""


class EdgeNotFound(DecompositionError):
    """A shared edge is missing from one of the polygons it was recorded for"""
