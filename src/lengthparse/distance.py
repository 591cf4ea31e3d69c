"""Distance value type stored as a float count of nanometers.

A :class:`Distance` behaves like a ``float`` but keeps its dimension through
the arithmetic that preserves it. The named constants are scale factors:

    >>> from lengthparse.distance import Meter, Millimeter
    >>> Meter / Millimeter  # count of millimeters in a meter
    1000.0
    >>> 10 * Meter  # ten meters
    Distance(10000000000.0)

The largest finite value is about 1.9e283 light-years.
"""
from __future__ import annotations

__all__ = [
    "Distance",
    "Nanometer",
    "Micrometer",
    "Millimeter",
    "Centimeter",
    "Meter",
    "Kilometer",
    "Inch",
    "Feet",
    "Yard",
    "Mile",
    "Lightyear",
]

Number = int | float


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, Distance)


class Distance(float):
    """Signed physical distance measured in nanometers."""

    __slots__ = ()

    def __new__(cls, nanometers: Number = 0.0) -> Distance:
        return float.__new__(cls, nanometers)

    def to(self, unit: Distance) -> float:
        """Return how many ``unit`` fit in this distance."""

        return float(self) / float(unit)

    # ----------------------------------------------------------------- arithmetic
    def __add__(self, other: Number) -> Distance:
        if isinstance(other, (int, float)):
            return Distance(float(self) + float(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Number) -> Distance:
        if isinstance(other, (int, float)):
            return Distance(float(self) - float(other))
        return NotImplemented

    def __rsub__(self, other: Number) -> Distance:
        if isinstance(other, (int, float)):
            return Distance(float(other) - float(self))
        return NotImplemented

    def __mul__(self, k: Number) -> Distance | float:
        if isinstance(k, Distance):
            return float(self) * float(k)
        if _is_scalar(k):
            return Distance(float(self) * float(k))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Number) -> Distance | float:
        # Distance / Distance is a ratio, Distance / number stays a distance.
        if isinstance(other, Distance):
            return float(self) / float(other)
        if _is_scalar(other):
            return Distance(float(self) / float(other))
        return NotImplemented

    def __neg__(self) -> Distance:
        return Distance(-float(self))

    def __pos__(self) -> Distance:
        return self

    def __abs__(self) -> Distance:
        return Distance(abs(float(self)))

    # ------------------------------------------------------------ representation
    def __str__(self) -> str:
        from .formatter import format_distance

        return format_distance(self)

    def __repr__(self) -> str:
        return f"Distance({float(self)!r})"


# Each constant is an exact float up to Mile; Lightyear is the nearest float.
Nanometer = Distance(1)
Micrometer = 1e3 * Nanometer
Millimeter = 1e3 * Micrometer
Centimeter = 10 * Millimeter
Meter = 1e3 * Millimeter
Kilometer = 1e3 * Meter
Inch = 2.54 * Centimeter
Feet = 304.8 * Millimeter
Yard = 3 * Feet
Mile = 5280 * Feet
Lightyear = 9.461e12 * Kilometer
