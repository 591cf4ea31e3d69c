"""lengthparse – physical distances with a compact metric/imperial string syntax."""

from ._version import __version__
from .config import Settings, get_settings, reset_settings
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
from .formatter import (
    DistanceFormatter,
    default_formatter,
    format_distance,
    get_unit_system,
    reset_default_formatter,
    set_imperial,
    set_metric,
    toggle_units,
)
from .parser import (
    DistanceParseError,
    DistanceSpan,
    DistanceTerm,
    ParseErrorKind,
    extract_distances,
    iter_terms,
    parse_distance,
)
from .schemas import DistanceField
from .units import UNIT_SCALES, UnitSystem, lookup_unit

__all__ = [
    "__version__",
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
    "UNIT_SCALES",
    "UnitSystem",
    "lookup_unit",
    "DistanceParseError",
    "DistanceSpan",
    "DistanceTerm",
    "ParseErrorKind",
    "extract_distances",
    "iter_terms",
    "parse_distance",
    "DistanceFormatter",
    "default_formatter",
    "format_distance",
    "get_unit_system",
    "reset_default_formatter",
    "set_imperial",
    "set_metric",
    "toggle_units",
    "DistanceField",
    "Settings",
    "get_settings",
    "reset_settings",
]
