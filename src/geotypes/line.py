from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from .coordinate import Coordinate, CoordLike, coord
from .numeric import T


@dataclass(frozen=True, slots=True)
class Line(Generic[T]):
    """
    A line segment made up of exactly two coordinates.

    The segment is directed (``start`` to ``end``). Nothing is validated or
    normalized: ``start == end`` is a valid, zero-length line.
    """
    start: Coordinate[T]
    end: Coordinate[T]

    @classmethod
    def new(cls, start: Coordinate[T], end: Coordinate[T]) -> "Line[T]":
        return cls(start, end)

    @classmethod
    def from_points(cls, start: CoordLike, end: CoordLike) -> "Line":
        return cls(coord(start), coord(end))

    def points(self) -> tuple[Coordinate[T], Coordinate[T]]:
        return (self.start, self.end)

    def dx(self) -> T:
        return self.end.x - self.start.x

    def dy(self) -> T:
        return self.end.y - self.start.y

    def delta(self) -> Coordinate[T]:
        return self.end - self.start

    def determinant(self) -> T:
        # twice the signed area of the triangle (origin, start, end)
        return self.start.x * self.end.y - self.start.y * self.end.x
