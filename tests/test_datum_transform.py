"""Tests for the geodetic to UTM projection."""

import numpy as np
import pytest

from datum_transform import (
    LATITUDE_BANDS,
    UTMParseError,
    band_minimum_latitude,
    central_meridian,
    convert_geodetic_to_utm,
    convert_ll_to_mgrs,
    convert_mgrs_to_ll,
    convert_utm_to_ll,
    geodetic_to_utm,
    latitude_band,
    longitude_zone,
    normalize_longitude,
    parse_utm,
)
from formatting import format_utm
from geometry_types import UtmCoordinate

# (lat, lon) -> (zone, band, easting, northing), from the reference table
# published alongside the original converter
REFERENCE_POINTS = [
    ((0.0000, 0.0000), (31, "N", 166021, 0)),
    ((0.1300, -0.2324), (30, "N", 808084, 14385)),
    ((-45.6456, 23.3545), (34, "G", 683473, 4942631)),
    ((-80.5434, -170.6540), (2, "C", 506346, 1057742)),
    ((90.0000, 177.0000), (60, "Z", 500000, 9997964)),
    ((-90.0000, -177.0000), (1, "A", 500000, 2035)),
    ((90.0000, 3.0000), (31, "Z", 500000, 9997964)),
    ((23.4578, -135.4545), (8, "Q", 453580, 2594272)),
    ((77.3450, 156.9876), (57, "X", 450793, 8586116)),
    ((-89.3454, -48.9306), (22, "A", 502639, 75072)),
]


@pytest.mark.parametrize("lat, lon, expected", [
    (0.0, 0.0, "31 N 166021 0000000"),
    (-45.6456, 23.3545, "34 G 683473 4942631"),
    (90.0, 3.0, "31 Z 500000 9997964"),
])
def test_convert_geodetic_to_utm(lat, lon, expected):
    assert convert_geodetic_to_utm(lat, lon) == expected


@pytest.mark.parametrize("position, expected", REFERENCE_POINTS)
def test_reference_table(position, expected):
    assert convert_geodetic_to_utm(*position) == format_utm(*expected)


def test_reference_point_within_a_meter():
    # the published northing is 8588690; the series gives 8588691.0077,
    # about a meter north of it
    coord = geodetic_to_utm(-12.7650, -33.8765)
    assert (coord.zone, coord.band) == (25, "L")
    assert coord.easting == pytest.approx(404859, rel=0, abs=1.0)
    assert coord.northing == pytest.approx(8588691.0, rel=0, abs=0.05)
    assert coord.northing == pytest.approx(8588690, rel=0, abs=1.5)


def test_origin_is_three_degrees_west_of_central_meridian():
    coord = geodetic_to_utm(0.0, 0.0)
    assert isinstance(coord, UtmCoordinate)
    assert coord.easting == pytest.approx(166021.44, abs=0.01)
    assert coord.northing == 0.0


def test_central_meridian_has_false_easting():
    coord = geodetic_to_utm(47.0, 9.0)
    assert coord.zone == 32
    assert coord.easting == pytest.approx(500000.0)


def test_southern_hemisphere_gets_false_northing():
    coord = geodetic_to_utm(-0.0001, 3.0)
    assert coord.northing == pytest.approx(10000000.0 - 11.05, abs=0.1)
    assert coord.band == "M"


@pytest.mark.parametrize("lon", np.arange(-180.0, 360.0, 0.5))
def test_zone_always_in_range(lon):
    assert 1 <= longitude_zone(lon) <= 60


@pytest.mark.parametrize("lon, zone", [
    (0.0, 31),
    (5.999, 31),
    (6.0, 32),
    (179.9, 60),
    (180.0, 1),
    (-180.0, 1),
    (-179.9, 1),
    (-0.0001, 30),
    (359.9, 30),
    (540.0, 1),
])
def test_longitude_zone(lon, zone):
    assert longitude_zone(lon) == zone


def test_normalize_longitude():
    assert normalize_longitude(-0.2324) == pytest.approx(359.7676)
    assert normalize_longitude(370.0) == pytest.approx(10.0)
    assert 0.0 <= normalize_longitude(-1e-18) < 360.0


@pytest.mark.parametrize("zone, meridian", [(31, 3.0), (60, 177.0), (1, 183.0), (30, 357.0)])
def test_central_meridian(zone, meridian):
    assert central_meridian(zone) == meridian


@pytest.mark.parametrize("lat", np.arange(-95.0, 95.0, 0.25))
def test_band_never_i_or_o(lat):
    band = latitude_band(lat)
    assert band not in ("I", "O")
    assert band in LATITUDE_BANDS


@pytest.mark.parametrize("lat, band", [
    (-91.0, "A"),
    (-90.0, "A"),
    (-84.0, "C"),
    (-40.5, "G"),
    (-8.5, "L"),
    (-8.0, "M"),
    (-0.5, "M"),
    (0.0, "N"),
    (7.99, "N"),
    (8.0, "P"),
    (71.9, "W"),
    (72.0, "X"),
    (83.9, "X"),
    (84.0, "Z"),
    (90.0, "Z"),
])
def test_latitude_band(lat, band):
    assert latitude_band(lat) == band


def test_bands_are_ordered_south_to_north():
    minimums = list(LATITUDE_BANDS.values())
    assert minimums == sorted(minimums)
    assert len(LATITUDE_BANDS) == 22


def test_band_minimum_latitude():
    assert band_minimum_latitude("X") == 72
    assert band_minimum_latitude("g") == -48
    with pytest.raises(ValueError):
        band_minimum_latitude("I")


@pytest.mark.parametrize("lat, lon", [(90.5, 0.0), (-91.0, 10.0), (float("nan"), 0.0), (0.0, float("inf"))])
def test_invalid_input_rejected(lat, lon):
    with pytest.raises(ValueError):
        geodetic_to_utm(lat, lon)


def test_parse_utm():
    coord = parse_utm(" 34 G 683473 4942631 ")
    assert coord == UtmCoordinate(34, "G", 683473.0, 4942631.0)


def test_parse_utm_reads_formatted_output():
    text = convert_geodetic_to_utm(23.4578, -135.4545)
    coord = parse_utm(text)
    assert str(coord) == text


@pytest.mark.parametrize("text, fragment", [
    ("garbage", "garbage"),
    ("61 N 500000 0", "61"),
    ("00 N 500000 0", "00"),
    ("31 I 166021 0", "I"),
    ("31 N 16a021 0", "16a021"),
    ("31 N 166021 -5", "-5"),
    ("31 N \u00b266021 0", "\u00b266021"),
    ("\u00b31 N 166021 0", "\u00b31"),
    ("31 N 166021 1\u00b9", "1\u00b9"),
])
def test_parse_utm_reports_offending_fragment(text, fragment):
    with pytest.raises(UTMParseError) as excinfo:
        parse_utm(text)
    assert excinfo.value.fragment == fragment
    assert isinstance(excinfo.value, ValueError)


def test_reverse_conversion_not_implemented():
    with pytest.raises(NotImplementedError):
        convert_utm_to_ll("31 N 166021 0000000")


def test_reverse_conversion_still_validates_input():
    with pytest.raises(UTMParseError):
        convert_utm_to_ll("31 N")


def test_mgrs_not_implemented():
    with pytest.raises(NotImplementedError):
        convert_ll_to_mgrs(47.0, 8.0)
    with pytest.raises(NotImplementedError):
        convert_mgrs_to_ll("32TMT0000000000")
