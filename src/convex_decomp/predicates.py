from convex_decomp.types import Point


# cross product of (p2 - p1) and (p3 - p2); >= 0 is a left turn or collinear
def orientation(p1: Point, p2: Point, p3: Point) -> float:
    return (p2[0] - p1[0]) * (p3[1] - p2[1]) - (p2[1] - p1[1]) * (p3[0] - p2[0])


# collinear vertices count as convex
def is_convex_vertex(prev: Point, curr: Point, next: Point) -> bool:
    return orientation(prev, curr, next) >= 0


# check if a point lies within a triangle, boundary included
def point_in_triangle(pt: Point, v1: Point, v2: Point, v3: Point) -> bool:
    d1 = orientation(v1, v2, pt)
    d2 = orientation(v2, v3, pt)
    d3 = orientation(v3, v1, pt)
    return (d1 >= 0 and d2 >= 0 and d3 >= 0) or (d1 <= 0 and d2 <= 0 and d3 <= 0)

