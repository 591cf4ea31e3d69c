"""Unit suffixes shared by the distance parser and formatter."""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .distance import (
    Centimeter,
    Distance,
    Feet,
    Inch,
    Kilometer,
    Lightyear,
    Meter,
    Micrometer,
    Mile,
    Millimeter,
    Nanometer,
    Yard,
)

__all__ = [
    "GREEK_MU",
    "MICRO_SIGN",
    "UNIT_SCALES",
    "UnitSystem",
    "lookup_unit",
    "unit_suffixes",
    "unit_symbol",
]

MICRO_SIGN = "µ"
GREEK_MU = "μ"


class UnitSystem(str, Enum):
    """Display mode used when rendering distances."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> "UnitSystem":
        if self is UnitSystem.METRIC:
            return UnitSystem.IMPERIAL
        return UnitSystem.METRIC


UNIT_SCALES: Mapping[str, Distance] = MappingProxyType(
    {
        "nm": Nanometer,
        "um": Micrometer,
        f"{MICRO_SIGN}m": Micrometer,
        f"{GREEK_MU}m": Micrometer,
        "mm": Millimeter,
        "cm": Centimeter,
        "m": Meter,
        "km": Kilometer,
        "in": Inch,
        "ft": Feet,
        "yd": Yard,
        "mi": Mile,
        "ly": Lightyear,
    }
)

# Canonical display suffix per constant; micrometers use the micro sign.
_SYMBOLS: Mapping[float, str] = MappingProxyType(
    {
        float(Nanometer): "nm",
        float(Micrometer): f"{MICRO_SIGN}m",
        float(Millimeter): "mm",
        float(Centimeter): "cm",
        float(Meter): "m",
        float(Kilometer): "km",
        float(Inch): "in",
        float(Feet): "ft",
        float(Yard): "yd",
        float(Mile): "mi",
        float(Lightyear): "ly",
    }
)

_SUFFIXES_LONGEST_FIRST: Tuple[str, ...] = tuple(sorted(UNIT_SCALES, key=lambda s: (-len(s), s)))


def lookup_unit(suffix: str) -> Optional[Distance]:
    """Return the scale of ``suffix`` (exact, case-sensitive match) or ``None``."""

    return UNIT_SCALES.get(suffix)


def unit_suffixes() -> Tuple[str, ...]:
    """All accepted suffixes, longest first so ``mm`` wins over ``m``."""

    return _SUFFIXES_LONGEST_FIRST


def unit_symbol(unit: Distance) -> str:
    """Return the display suffix of a named unit constant."""

    try:
        return _SYMBOLS[float(unit)]
    except KeyError:
        raise ValueError(f"{unit!r} is not a named distance unit") from None
