"""Human readable rendering of distances in metric or imperial units.

The unit is picked from the magnitude of the value, largest first, so the
leading digit is never zero except for the exact zero distance::

    >>> DistanceFormatter(UnitSystem.METRIC).format(2 * Kilometer)
    '2000.000000m'
    >>> DistanceFormatter(UnitSystem.IMPERIAL).format(2 * Inch)
    '2.000000in'
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .config import get_settings
from .distance import (
    Centimeter,
    Distance,
    Feet,
    Inch,
    Meter,
    Micrometer,
    Millimeter,
    Nanometer,
    Yard,
)
from .units import UnitSystem, unit_symbol

__all__ = [
    "DistanceFormatter",
    "default_formatter",
    "format_distance",
    "get_unit_system",
    "reset_default_formatter",
    "set_imperial",
    "set_metric",
    "toggle_units",
]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _UnitLadder:
    steps: Tuple[Distance, ...]
    zero_unit: Distance
    fallback: Distance


_LADDERS: Mapping[UnitSystem, _UnitLadder] = {
    UnitSystem.METRIC: _UnitLadder(
        steps=(Meter, Centimeter, Millimeter, Micrometer),
        zero_unit=Meter,
        fallback=Nanometer,
    ),
    UnitSystem.IMPERIAL: _UnitLadder(
        steps=(Yard, Feet),
        zero_unit=Yard,
        fallback=Inch,
    ),
}


def _render(value: float, unit: Distance) -> str:
    return f"{value / float(unit):f}{unit_symbol(unit)}"


class DistanceFormatter:
    """Formats distances under a mutable metric/imperial display mode."""

    def __init__(self, system: UnitSystem | str = UnitSystem.METRIC) -> None:
        self.system = UnitSystem(system)

    def __repr__(self) -> str:
        return f"DistanceFormatter(system={self.system.value!r})"

    def format(self, distance: float, system: UnitSystem | str | None = None) -> str:
        """Render ``distance``, using ``system`` instead of the current mode when given."""

        ladder = _LADDERS[UnitSystem(system) if system is not None else self.system]
        value = float(distance)
        if math.isnan(value):
            return "NaN"
        magnitude = abs(value)
        for unit in ladder.steps:
            if magnitude >= unit:
                return _render(value, unit)
        if value == 0:
            return f"0{unit_symbol(ladder.zero_unit)}"
        return _render(value, ladder.fallback)

    def _switch(self, system: UnitSystem) -> UnitSystem:
        if system is not self.system:
            LOGGER.debug(
                "unit_system_changed",
                extra={"extra_fields": {"from": self.system.value, "to": system.value}},
            )
        self.system = system
        return system

    def set_metric(self) -> UnitSystem:
        return self._switch(UnitSystem.METRIC)

    def set_imperial(self) -> UnitSystem:
        return self._switch(UnitSystem.IMPERIAL)

    def toggle_units(self) -> UnitSystem:
        """Flip between metric and imperial and return the new mode."""

        return self._switch(self.system.toggled())


_DEFAULT_FORMATTER: Optional[DistanceFormatter] = None


def default_formatter() -> DistanceFormatter:
    """Return the process-wide formatter, created from the settings on first use."""

    global _DEFAULT_FORMATTER
    if _DEFAULT_FORMATTER is None:
        _DEFAULT_FORMATTER = DistanceFormatter(get_settings().unit_system)
    return _DEFAULT_FORMATTER


def reset_default_formatter() -> None:
    """Drop the process-wide formatter (mainly useful for tests)."""

    global _DEFAULT_FORMATTER
    _DEFAULT_FORMATTER = None


def format_distance(distance: float, system: UnitSystem | str | None = None) -> str:
    return default_formatter().format(distance, system)


def get_unit_system() -> UnitSystem:
    return default_formatter().system


def set_metric() -> UnitSystem:
    return default_formatter().set_metric()


def set_imperial() -> UnitSystem:
    return default_formatter().set_imperial()


def toggle_units() -> UnitSystem:
    return default_formatter().toggle_units()
