from __future__ import annotations

from typing import Any, Protocol, TypeVar


class CoordinateType(Protocol):
    """
    Numeric capability required of a coordinate component.

    Anything with ordered-field style arithmetic qualifies: int, float,
    fractions.Fraction, decimal.Decimal. A zero value is obtained by
    calling the type with 0.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=CoordinateType)
