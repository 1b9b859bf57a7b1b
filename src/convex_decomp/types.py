from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

Point = tuple[float, float]
Edge = tuple[Point, Point]


@dataclass(eq=False)
class Polygon:
    """
    Planar polygon boundary.

    Attributes
    ----------
    exterior: :class:`np.ndarray`
        ``(k, 2)`` float64 coordinates, as a closed or an open ring
    """

    exterior: np.ndarray

    def __post_init__(self):
        self.exterior = np.asarray(self.exterior, dtype=np.float64).reshape(-1, 2)

    @classmethod
    def from_points(cls, points: Iterable[Iterable[float]], close: bool = True) -> "Polygon":
        coords = [(float(x), float(y)) for x, y in points]
        if close and coords and coords[0] != coords[-1]:
            coords.append(coords[0])
        return cls(np.array(coords, dtype=np.float64).reshape(-1, 2))

    def __len__(self) -> int:
        return len(self.ring())

    def __iter__(self) -> Iterator[Point]:
        return iter(self.coords())

    def __repr__(self) -> str:
        return f"Polygon({self.coords()})"

    def coords(self) -> list[Point]:
        return [(float(x), float(y)) for x, y in self.exterior]

    def ring(self) -> list[Point]:
        coords = self.coords()
        if len(coords) > 1 and coords[0] == coords[-1]:
            coords.pop()
        return coords

    @property
    def is_closed(self) -> bool:
        return len(self.exterior) > 1 and bool(np.all(self.exterior[0] == self.exterior[-1]))

    @property
    def signed_area(self) -> float:
        x = self.exterior[:, 0]
        y = self.exterior[:, 1]
        return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2.0

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def is_ccw(self) -> bool:
        return self.signed_area > 0

    def oriented_ccw(self) -> "Polygon":
        if self.signed_area < 0:
            return Polygon(self.exterior[::-1].copy())
        return self

    def filtered(self) -> "Polygon":
        return Polygon.from_points(filter_points(self.coords()))

    def quantized(self, precision: int) -> "Polygon":
        # np.round keeps -0.0, which compares equal to 0.0 in tuples
        return Polygon(np.round(self.exterior, precision)).filtered()


# eliminate consecutive duplicate points, the pair across the closing point included; returns an open ring
def filter_points(coords: list[Point]) -> list[Point]:
    result = []
    for c in coords:
        if not result or result[-1] != c:
            result.append(c)
    while len(result) > 1 and result[0] == result[-1]:
        result.pop()
    return result
