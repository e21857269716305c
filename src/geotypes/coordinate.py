from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, Union

from .numeric import T
from .tolerances import ABS_TOL, REL_TOL, is_close


@dataclass(frozen=True, slots=True)
class Coordinate(Generic[T]):
    """
    A primitive holding ``x`` and ``y`` position information.

    Value type: equality is componentwise, and every operation returns a new
    ``Coordinate``. Components are stored as given, so ``Coordinate(1, 2)``
    stays integral and ``Coordinate(1.0, 2.0)`` stays float.
    """
    x: T
    y: T

    @classmethod
    def from_tuple(cls, coords: tuple[T, T]) -> "Coordinate[T]":
        return cls.from_array(coords)

    @classmethod
    def from_array(cls, coords: Sequence[T]) -> "Coordinate[T]":
        if isinstance(coords, (str, bytes, bytearray)):
            raise ValueError(f"expected a sequence of 2 numbers, got {type(coords).__name__}")
        if len(coords) != 2:
            raise ValueError(f"expected 2 coordinate values, got {len(coords)}")
        return cls(coords[0], coords[1])

    @classmethod
    def zero(cls) -> "Coordinate[int]":
        return cls(0, 0)

    def x_y(self) -> tuple[T, T]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def dot(self, other: "Coordinate[T]") -> T:
        """
        Dot product of the two points: ``x1 * x2 + y1 * y2``.

        >>> Coordinate(1.5, 0.5).dot(Coordinate(2.0, 4.5))
        5.25
        """
        return self.x * other.x + self.y * other.y

    def cross_prod(self, point_b: "Coordinate[T]", point_c: "Coordinate[T]") -> T:
        """
        Cross product of 3 points.

        A positive value implies ``self`` -> ``point_b`` -> ``point_c`` is
        counter-clockwise, a negative value clockwise, zero collinear.

        >>> Coordinate(1.0, 2.0).cross_prod(Coordinate(3.0, 5.0), Coordinate(7.0, 12.0))
        2.0
        """
        return (point_b.x - self.x) * (point_c.y - self.y) - (point_b.y - self.y) * (point_c.x - self.x)

    def is_close(
        self,
        other: "Coordinate[T]",
        rel_tol: float = REL_TOL,
        abs_tol: float = ABS_TOL,
    ) -> bool:
        return is_close(self.x, other.x, rel_tol, abs_tol) and is_close(self.y, other.y, rel_tol, abs_tol)

    def __add__(self, other: "Coordinate[T]") -> "Coordinate[T]":
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coordinate[T]") -> "Coordinate[T]":
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Coordinate[T]":
        return Coordinate(-self.x, -self.y)

    def __mul__(self, scalar: T) -> "Coordinate[T]":
        if isinstance(scalar, Coordinate):
            return NotImplemented
        return Coordinate(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: T) -> "Coordinate[T]":
        if isinstance(scalar, Coordinate):
            return NotImplemented
        return Coordinate(self.x / scalar, self.y / scalar)


CoordLike = Union[Coordinate, tuple, list, Sequence]


def coord(value: CoordLike) -> Coordinate:
    """Coerce a Coordinate, 2-tuple or 2-element sequence to a Coordinate."""
    if isinstance(value, Coordinate):
        return value
    return Coordinate.from_array(value)
