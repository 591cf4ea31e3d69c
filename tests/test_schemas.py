import pytest
from pydantic import BaseModel, ValidationError

from lengthparse.distance import Distance, Feet, Inch, Meter, Micrometer
from lengthparse.formatter import set_imperial
from lengthparse.schemas import DistanceField


class Route(BaseModel):
    name: str
    length: DistanceField


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("5ft11in", 5 * Feet + 11 * Inch),
        (" 2m ", 2 * Meter),
        ("0", Distance(0)),
        (1000, Micrometer),
        (2.5e9, 2.5 * Meter),
        (Meter, Meter),
    ],
)
def test_distance_field_accepts_strings_and_numbers(raw, expected: Distance) -> None:
    route = Route(name="r", length=raw)
    assert isinstance(route.length, Distance)
    assert route.length == expected


@pytest.mark.parametrize("raw", ["12", "0ms", "", True, None, [1]])
def test_distance_field_rejects_invalid_values(raw) -> None:
    with pytest.raises(ValidationError):
        Route(name="r", length=raw)


def test_distance_field_serializes_to_formatted_string() -> None:
    route = Route(name="r", length="2m")
    assert route.model_dump(mode="json") == {"name": "r", "length": "2.000000m"}
    assert isinstance(route.model_dump()["length"], Distance)

    set_imperial()
    assert route.model_dump_json() == '{"name":"r","length":"2.187227yd"}'
