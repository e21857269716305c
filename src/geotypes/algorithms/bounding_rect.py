from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Union

from ..coordinate import Coordinate, CoordLike, coord
from ..line import Line
from ..numeric import T


@dataclass(frozen=True, slots=True)
class Rect(Generic[T]):
    xmin: T
    ymin: T
    xmax: T
    ymax: T

    def min(self) -> Coordinate[T]:
        return Coordinate(self.xmin, self.ymin)

    def max(self) -> Coordinate[T]:
        return Coordinate(self.xmax, self.ymax)

    def width(self) -> T:
        return self.xmax - self.xmin

    def height(self) -> T:
        return self.ymax - self.ymin


def bounding_rect(geom: Union[Line, Iterable[CoordLike]]) -> Rect:
    """Axis-aligned bounding box of a line or of a collection of coordinates."""
    pts = geom.points() if isinstance(geom, Line) else geom
    it = iter(pts)
    try:
        first = coord(next(it))
    except StopIteration:
        raise ValueError("cannot compute the bounding box of an empty geometry") from None
    xmin = xmax = first.x
    ymin = ymax = first.y
    for pt in map(coord, it):
        if pt.x < xmin:
            xmin = pt.x
        if pt.y < ymin:
            ymin = pt.y
        if pt.x > xmax:
            xmax = pt.x
        if pt.y > ymax:
            ymax = pt.y
    return Rect(xmin, ymin, xmax, ymax)
