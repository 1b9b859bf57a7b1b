from .types import Edge, Point, Polygon
from .errors import DecompositionError, EdgeNotFound, InsufficientVertices, NoEarFound
from .predicates import is_convex_vertex, orientation, point_in_triangle
from .earclip import triangulate
from .shared_edges import canonical_edge, find_shared_edges
from .merge import is_polygon_convex, merge_polygons
from .decompose import decompose, deviation, hertel_mehlhorn

__version__ = "0.1.0"
