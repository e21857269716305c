from __future__ import annotations

from math import hypot, sqrt

from ..coordinate import Coordinate
from ..line import Line


def point_distance(a: Coordinate, b: Coordinate) -> float:
    return hypot(b.x - a.x, b.y - a.y)


def euclidean_distance(line: Line, point: Coordinate) -> float:
    """
    Distance from ``point`` to the closest point of the segment ``line``.

    Points whose projection falls beyond either end measure to that
    endpoint. Otherwise the perpendicular distance is taken from the cross
    product, so a point exactly on the segment gives exactly 0.0. A
    degenerate line measures to its only point.
    """
    start = line.start
    d = line.delta()
    length2 = d.dot(d)
    if length2 == 0:
        return point_distance(start, point)
    t = (point - start).dot(d) / length2
    if t <= 0:
        return point_distance(start, point)
    if t >= 1:
        return point_distance(line.end, point)
    return abs(start.cross_prod(line.end, point)) / sqrt(length2)
