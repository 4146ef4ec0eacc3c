from __future__ import annotations

import dataclasses
import math
from types import SimpleNamespace

import pytest

from ..errors import OutOfRangeError
from .angle import DecomposedAngle
from .coordinate import Coordinate, as_coordinate


@pytest.mark.parametrize(
    "latitude, longitude",
    [(90.5, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_coordinate_out_of_range(latitude: float, longitude: float) -> None:
    with pytest.raises(OutOfRangeError):
        Coordinate(latitude, longitude)


def test_out_of_range_is_value_error() -> None:
    with pytest.raises(ValueError):
        Coordinate(100.0, 0.0)


def test_coordinate_bounds_inclusive() -> None:
    assert Coordinate(90.0, 180.0).latitude == 90.0
    assert Coordinate(-90.0, -180.0).longitude == -180.0


def test_coordinate_is_immutable() -> None:
    coordinate = Coordinate(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        coordinate.latitude = 3.0


def test_from_pair() -> None:
    assert Coordinate.from_pair((1, 2)) == Coordinate(1.0, 2.0)
    with pytest.raises(ValueError):
        Coordinate.from_pair((1.0, 2.0, 3.0))


def test_as_coordinate_shapes() -> None:
    coordinate = Coordinate(1.0, 2.0)
    assert as_coordinate(coordinate) is coordinate
    assert as_coordinate([1.0, 2.0]) == coordinate
    assert as_coordinate(SimpleNamespace(latitude=1.0, longitude=2.0)) == coordinate


def test_as_coordinate_rejects_unknown_shape() -> None:
    with pytest.raises(TypeError):
        as_coordinate("1.0, 2.0")


def test_decomposed_angle_to_decimal() -> None:
    angle = DecomposedAngle(positive=False, degrees=1, minutes=30, seconds=36, decimal_minutes='30.6')
    assert angle.to_decimal() == pytest.approx(-1.51)
    assert angle.sign == '-'
