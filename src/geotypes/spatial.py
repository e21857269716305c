"""
Spatial-index adapter for Line.

Opt-in: nothing in the core imports this module. It exposes the two queries
a spatial index needs from a stored object (its minimum bounding rectangle
and its squared distance to a query point) and a helper producing
``(id, bounds, obj)`` entries in the shape R-tree style indexes bulk load.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, runtime_checkable

from .algorithms import bounding_rect, euclidean_distance
from .coordinate import Coordinate
from .line import Line

logger = logging.getLogger(__name__)

Bounds = tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class BoundingRect:
    lower: Coordinate
    upper: Coordinate

    @classmethod
    def from_corners(cls, corner1: Coordinate, corner2: Coordinate) -> "BoundingRect":
        return cls(
            Coordinate(min(corner1.x, corner2.x), min(corner1.y, corner2.y)),
            Coordinate(max(corner1.x, corner2.x), max(corner1.y, corner2.y)),
        )

    def bounds(self) -> Bounds:
        return (self.lower.x, self.lower.y, self.upper.x, self.upper.y)

    def contains_point(self, point: Coordinate) -> bool:
        return self.lower.x <= point.x <= self.upper.x and self.lower.y <= point.y <= self.upper.y


@runtime_checkable
class SpatialObject(Protocol):
    def mbr(self) -> BoundingRect: ...

    def distance2(self, point: Coordinate) -> float: ...


@dataclass(frozen=True, slots=True)
class LineSpatialObject:
    line: Line

    def mbr(self) -> BoundingRect:
        bbox = bounding_rect(self.line)
        return BoundingRect.from_corners(bbox.min(), bbox.max())

    def distance2(self, point: Coordinate) -> float:
        d = euclidean_distance(self.line, point)
        # an exact zero is passed through rather than squared
        if d == 0:
            return d
        return d ** 2


def index_entries(lines: Iterable[Line]) -> Iterator[tuple[int, Bounds, LineSpatialObject]]:
    n = 0
    for n, line in enumerate(lines, start=1):
        obj = LineSpatialObject(line)
        yield (n - 1, obj.mbr().bounds(), obj)
    logger.debug("Produced %d spatial index entries", n)
