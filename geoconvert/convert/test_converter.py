from __future__ import annotations

import dataclasses
from types import SimpleNamespace

import pytest

from ..config import DEFAULT_CONFIG
from ..errors import OutOfRangeError
from ..models.coordinate import Coordinate
from .converter import Converter, to_dm, to_dms, to_utm

PITTSBURGH = Coordinate(40.446195, -79.948862)


def test_to_dms_default_template() -> None:
    assert Converter(PITTSBURGH).to_dms() == '40°26′46″N, 79°56′56″W'


def test_to_dm_default_template() -> None:
    assert Converter(PITTSBURGH).to_dm() == '40 26.7717N, -79 56.93172W'


def test_long_names_match_aliases() -> None:
    converter = Converter(PITTSBURGH)
    assert converter.to_degrees_minutes_seconds() == converter.to_dms()
    assert converter.to_decimal_minutes() == converter.to_dm()
    assert converter.to_universal_transverse_mercator() == converter.to_utm()


def test_custom_templates() -> None:
    converter = Converter(PITTSBURGH)
    assert converter.to_dms('%P%D:%M:%S, %p%d:%m:%s') == '40:26:46, -79:56:56'
    assert converter.to_dm('%L %D° %N′') == 'N 40° 26.7717′'


def test_southern_eastern_hemisphere_letters() -> None:
    dms = Converter((-33.85, 151.2)).to_dms()
    assert dms.startswith('33°')
    assert dms.endswith('E')
    assert 'S, ' in dms


def test_config_templates_and_precision() -> None:
    config = dataclasses.replace(
        DEFAULT_CONFIG,
        dm_format='%D %N',
        decimal_minutes_precision=2,
    )
    assert Converter(PITTSBURGH, config).to_dm() == '40 26.77'


def test_accepts_objects_with_latitude_and_longitude() -> None:
    point = SimpleNamespace(latitude=40.446195, longitude=-79.948862)
    assert Converter(point).to_dms() == Converter(PITTSBURGH).to_dms()


@pytest.mark.parametrize(
    "coordinate, expected",
    [
        ((0.0, 3.0), '31N 500000 0'),
        ((0.0, 0.0), '31N 166021 0'),
    ],
)
def test_to_utm_reference_points(coordinate, expected: str) -> None:
    assert Converter(coordinate).to_utm() == expected


def test_utm_structured_result() -> None:
    result = Converter((0.0, 3.0)).utm()
    assert (result.zone, result.band) == (31, 'N')
    assert result.easting == 500000.0
    assert result.northing == 0.0


def test_to_utm_at_pole_raises() -> None:
    with pytest.raises(OutOfRangeError):
        Converter((90.0, 0.0)).to_utm()


def test_invalid_coordinate_rejected() -> None:
    with pytest.raises(OutOfRangeError):
        Converter((91.0, 0.0))


def test_module_level_helpers() -> None:
    assert to_dms(PITTSBURGH) == '40°26′46″N, 79°56′56″W'
    assert to_dm(PITTSBURGH, '%D %N') == '40 26.7717'
    assert to_utm((0.0, 3.0)) == '31N 500000 0'


def test_to_dm_at_highest_precision() -> None:
    config = dataclasses.replace(DEFAULT_CONFIG, decimal_minutes_precision=15)
    assert Converter((0.0, 179.5), config).to_dm('%d %n') == '179 30'


def test_precision_beyond_float_digits_rejected() -> None:
    with pytest.raises(ValueError):
        dataclasses.replace(DEFAULT_CONFIG, decimal_minutes_precision=27)
