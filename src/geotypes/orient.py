"""
Robust winding order of coordinate triplets.

``Coordinate.cross_prod`` evaluates the orientation determinant in the
coordinates' own arithmetic, which for floats can get the sign wrong on
nearly collinear input. ``orientation`` uses the adaptive-precision
``orient2d`` predicate instead. Requires the ``predicates`` package
(``pip install geotypes[robust]``).
"""
from __future__ import annotations

from enum import Enum

from predicates import orient2d

from .coordinate import CoordLike, coord


class Orientation(Enum):
    COUNTER_CLOCKWISE = 1
    CLOCKWISE = -1
    COLLINEAR = 0


def orientation(a: CoordLike, b: CoordLike, c: CoordLike) -> Orientation:
    det = orient2d(
        tuple(map(float, coord(a))),
        tuple(map(float, coord(b))),
        tuple(map(float, coord(c))),
    )
    if det > 0:
        return Orientation.COUNTER_CLOCKWISE
    if det < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR
