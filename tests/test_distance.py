import pytest

from lengthparse.distance import (
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


@pytest.mark.parametrize(
    "unit, nanometers",
    [
        (Nanometer, 1),
        (Micrometer, 1_000),
        (Millimeter, 1_000_000),
        (Centimeter, 10_000_000),
        (Meter, 1_000_000_000),
        (Kilometer, 1_000_000_000_000),
        (Inch, 25_400_000),
        (Feet, 304_800_000),
        (Yard, 914_400_000),
        (Mile, 1_609_344_000_000),
    ],
)
def test_unit_constants_are_exact(unit: Distance, nanometers: int) -> None:
    assert isinstance(unit, Distance)
    assert float(unit) == nanometers


def test_lightyear_scale() -> None:
    assert Lightyear == pytest.approx(9.461e24)
    assert Lightyear / Kilometer == pytest.approx(9.461e12)


def test_ratio_between_units_is_plain_float() -> None:
    ratio = Meter / Millimeter
    assert type(ratio) is float
    assert ratio == 1000.0
    assert Mile / Feet == 5280.0
    assert Yard.to(Feet) == 3.0


def test_arithmetic_keeps_distance_type() -> None:
    total = 5 * Feet + 11 * Inch
    assert isinstance(total, Distance)
    assert total == 5 * 304_800_000 + 11 * 25_400_000
    assert isinstance(Meter - Centimeter, Distance)
    assert isinstance(-Meter, Distance)
    assert isinstance(abs(-Meter), Distance)
    assert isinstance(Kilometer / 4, Distance)
    assert Kilometer / 4 == 250 * Meter
    assert isinstance(sum([Meter, Meter, Meter]), Distance)


def test_distance_times_distance_drops_the_type() -> None:
    area = Meter * Meter
    assert type(area) is float


def test_comparisons_and_hashing_follow_float() -> None:
    assert Millimeter < Centimeter < Meter
    assert Distance(0) == 0
    assert {Meter: "m"}[Distance(1e9)] == "m"


def test_repr_shows_nanometers() -> None:
    assert repr(2 * Meter) == "Distance(2000000000.0)"
