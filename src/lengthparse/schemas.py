"""Pydantic field type for distances written as strings."""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer

from .distance import Distance
from .formatter import format_distance
from .parser import parse_distance

__all__ = ["DistanceField"]


def _coerce_distance(value: Any) -> Any:
    if isinstance(value, Distance):
        return value
    if isinstance(value, str):
        # DistanceParseError is a ValueError, pydantic reports it as a validation error.
        return parse_distance(value.strip())
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Expected a distance string or a number of nanometers, got {type(value).__name__}")
    return value


def _serialize_distance(value: float) -> str:
    return format_distance(value)


DistanceField = Annotated[
    float,
    BeforeValidator(_coerce_distance),
    AfterValidator(Distance),
    PlainSerializer(_serialize_distance, return_type=str, when_used="json"),
]
