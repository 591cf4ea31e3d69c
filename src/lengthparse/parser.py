"""Strict parser for compound distance strings such as ``5ft11in`` or ``-1.5ly``.

Grammar::

    Distance := Sign? Term+
    Term     := (Digits ('.' Digits?)? | '.' Digits) Unit
    Sign     := '-' | '+'

Terms are summed left to right and the sign applies once to the total. The
literal ``"0"`` is the only input accepted without a unit.
"""
from __future__ import annotations

import logging
import math
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from .distance import Distance
from .units import lookup_unit, unit_suffixes
from .utils.logging import log_event

__all__ = [
    "DistanceParseError",
    "DistanceSpan",
    "DistanceTerm",
    "ParseErrorKind",
    "extract_distances",
    "iter_terms",
    "parse_distance",
]

LOGGER = logging.getLogger(__name__)

# Integer and fractional digits are accumulated in 63 bits.
_INT_LIMIT = 1 << 63
_FLOAT_LIMIT = sys.float_info.max


class ParseErrorKind(str, Enum):
    INVALID_SYNTAX = "invalid_syntax"
    MISSING_UNIT = "missing_unit"
    UNKNOWN_UNIT = "unknown_unit"
    OVERFLOW = "overflow"


def _describe(kind: ParseErrorKind, text: str, fragment: str) -> str:
    if kind is ParseErrorKind.MISSING_UNIT:
        return f"missing unit in distance {text!r}"
    if kind is ParseErrorKind.UNKNOWN_UNIT:
        return f"unknown unit {fragment!r} in distance {text!r}"
    return f"invalid distance {text!r}"


class DistanceParseError(ValueError):
    """Raised when a string is not a valid distance.

    ``kind`` tells the failure apart, ``fragment`` holds the offending unit
    (empty when there is none) and ``text`` the complete original input.
    """

    def __init__(self, kind: ParseErrorKind, text: str, fragment: str = ""):
        self.kind = kind
        self.text = text
        self.fragment = fragment
        super().__init__(_describe(kind, text, fragment))


@dataclass(frozen=True)
class DistanceTerm:
    """A single ``<number><unit>`` chunk of a distance string."""

    value: float
    unit: str
    raw: str
    span: Tuple[int, int]


@dataclass(frozen=True)
class DistanceSpan:
    """Distance located inside free text."""

    value: Distance
    raw: str
    start: int
    end: int


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _leading_int(body: str, pos: int, source: str) -> Tuple[int, int]:
    value = 0
    while pos < len(body) and _is_digit(body[pos]):
        if value > _INT_LIMIT // 10:
            raise DistanceParseError(ParseErrorKind.OVERFLOW, source)
        value = value * 10 + (ord(body[pos]) - ord("0"))
        if value > _INT_LIMIT:
            raise DistanceParseError(ParseErrorKind.OVERFLOW, source)
        pos += 1
    return value, pos


def _leading_fraction(body: str, pos: int) -> Tuple[int, float, int]:
    """Consume fractional digits, silently dropping those that do not fit."""

    numerator = 0
    scale = 1.0
    saturated = False
    while pos < len(body) and _is_digit(body[pos]):
        if not saturated:
            candidate = numerator * 10 + (ord(body[pos]) - ord("0"))
            if numerator > _INT_LIMIT // 10 or candidate > _INT_LIMIT:
                saturated = True
            else:
                numerator = candidate
                scale *= 10
        pos += 1
    return numerator, scale, pos


def _term_value(whole: int, numerator: int, scale: float, unit: Distance, source: str) -> float:
    factor = float(unit)
    if whole > _FLOAT_LIMIT / factor:
        raise DistanceParseError(ParseErrorKind.OVERFLOW, source)
    value = whole * factor
    if numerator > 0:
        value += numerator * (factor / scale)
        if not math.isfinite(value) or value > _FLOAT_LIMIT:
            raise DistanceParseError(ParseErrorKind.OVERFLOW, source)
    return value


def iter_terms(body: str, *, source: Optional[str] = None, offset: int = 0) -> Iterator[DistanceTerm]:
    """Yield the unsigned terms of ``body`` one at a time.

    ``source`` is the text reported in errors (defaults to ``body``) and
    ``offset`` shifts the reported spans, so callers that strip a sign can
    keep positions relative to the original input.
    """

    source = body if source is None else source
    pos = 0
    while pos < len(body):
        start = pos
        if not (body[pos] == "." or _is_digit(body[pos])):
            raise DistanceParseError(ParseErrorKind.INVALID_SYNTAX, source)

        whole, pos = _leading_int(body, pos, source)
        pre = pos != start

        numerator, scale, post = 0, 1.0, False
        if pos < len(body) and body[pos] == ".":
            pos += 1
            fraction_start = pos
            numerator, scale, pos = _leading_fraction(body, pos)
            post = pos != fraction_start

        if not pre and not post:
            raise DistanceParseError(ParseErrorKind.INVALID_SYNTAX, source)

        unit_start = pos
        while pos < len(body) and body[pos] != "." and not _is_digit(body[pos]):
            pos += 1
        if pos == unit_start:
            raise DistanceParseError(ParseErrorKind.MISSING_UNIT, source)
        suffix = body[unit_start:pos]
        unit = lookup_unit(suffix)
        if unit is None:
            raise DistanceParseError(ParseErrorKind.UNKNOWN_UNIT, source, suffix)

        yield DistanceTerm(
            value=_term_value(whole, numerator, scale, unit, source),
            unit=suffix,
            raw=body[start:pos],
            span=(start + offset, pos + offset),
        )


def _parse(text: str) -> Distance:
    if text == "0":
        return Distance(0)

    body = text
    negative = False
    if body and body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if not body:
        raise DistanceParseError(ParseErrorKind.INVALID_SYNTAX, text)

    total = 0.0
    for term in iter_terms(body, source=text, offset=len(text) - len(body)):
        total += term.value
        if not math.isfinite(total) or total > _FLOAT_LIMIT:
            raise DistanceParseError(ParseErrorKind.OVERFLOW, text)

    if negative:
        total = -total
    return Distance(total)


def parse_distance(text: str) -> Distance:
    """Parse a distance string such as ``"300m"``, ``"-1.5ly"`` or ``"5ft11in"``.

    Raises :class:`DistanceParseError` when the input is malformed, lacks a
    unit, uses an unknown unit or overflows.
    """

    if not isinstance(text, str):
        raise TypeError(f"distance must be a string, got {type(text).__name__}")
    try:
        return _parse(text)
    except DistanceParseError as exc:
        if LOGGER.isEnabledFor(logging.DEBUG):
            log_event(
                LOGGER,
                "distance.parse_failed",
                level=logging.DEBUG,
                text=text,
                kind=exc.kind.value,
                fragment=exc.fragment,
            )
        raise


_NUMBER = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_UNIT = "|".join(re.escape(suffix) for suffix in unit_suffixes())
_DISTANCE_PATTERN = re.compile(
    rf"(?:(?<![\w.])[+-]|(?<![\w.+-]))(?:{_NUMBER}(?:{_UNIT}))+(?![^\W\d_])",
)


def _iter_distance_matches(text: str) -> Iterator[re.Match[str]]:
    for match in _DISTANCE_PATTERN.finditer(text):
        yield match


def extract_distances(text: str) -> Iterable[DistanceSpan]:
    """Locate and parse compound distances embedded in ``text``."""

    for match in _iter_distance_matches(text):
        raw = match.group(0)
        try:
            value = parse_distance(raw)
        except DistanceParseError:
            continue
        yield DistanceSpan(value=value, raw=raw, start=match.start(), end=match.end())
