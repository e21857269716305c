from .coordinate import Coordinate, coord
from .line import Line
from .numeric import CoordinateType

__all__ = [
    "Coordinate",
    "CoordinateType",
    "Line",
    "coord",
]
