"""
datum_transform.py

Geodetic latitude/longitude to Universal Transverse Mercator (UTM).

The forward projection follows the Army Corps of Engineers handbook
(EM 1110-1-1004, chapter 7): the zone and central meridian come from
eqs. 7.22/7.23 and the Transverse Mercator x/y from the series of eq. 7.8,
after which the UTM scale factor and false origins are applied.

The reverse projection and the MGRS conversions are part of the public
surface but not implemented yet; they raise NotImplementedError.
"""

import logging
import re

import numpy as np

import constants as c
from coordinate_conversions import MeridionalArc, PrimeVerticalRadius
from geometry_types import UtmCoordinate

logger = logging.getLogger(__name__)

# Latitude band letter -> southern edge of the band (degrees), south to north.
# I and O are skipped so they cannot be mistaken for 1 and 0.
LATITUDE_BANDS = {
    "A": -90, "C": -84, "D": -72, "E": -64, "F": -56, "G": -48,
    "H": -40, "J": -32, "K": -24, "L": -16, "M": -8,
    "N": 0, "P": 8, "Q": 16, "R": 24, "S": 32, "T": 40,
    "U": 48, "V": 56, "W": 64, "X": 72, "Z": 84,
}

_UTM_PATTERN = re.compile(r"^\s*(\S+)\s+(\S+)\s+(\S+)\s+(\S+)\s*$")
_DIGITS = re.compile(r"[0-9]+")


class UTMParseError(ValueError):
    """A UTM string could not be parsed."""

    def __init__(self, message, fragment):
        super().__init__("{}: {!r}".format(message, fragment))
        self.fragment = fragment


def normalize_longitude(longitude):
    """Map a longitude in degrees onto [0, 360)."""
    lon = longitude % 360.0
    # tiny negative inputs round up to exactly 360
    if lon >= 360.0:
        lon = 0.0
    return lon


def longitude_zone(longitude):
    """
    UTM longitude zone (1..60) for a longitude in degrees.

    Longitudes in [0, 180] map to zones 31..60 and (180, 360) to 1..30.
    180° itself falls on the antimeridian and is reported as zone 1.
    """
    lon = normalize_longitude(longitude)
    if lon <= 180.0:
        zone = int(np.floor(31.0 + lon / c.zoneWidth))
    else:
        zone = int(np.floor(lon / c.zoneWidth - 29.0))
    if zone > c.numZones:
        zone -= c.numZones
    return zone


def central_meridian(zone):
    """Central meridian of a zone, in degrees (0..360 convention)."""
    if zone >= 31:
        return 6.0 * zone - 183.0
    return 6.0 * zone + 177.0


def latitude_band(latitude):
    """
    Latitude band letter for a latitude in degrees.

    Each band includes its southern edge. Latitudes below -90 fall in the
    first band and anything from 84 north is Z.
    """
    letter = "A"
    for band, minimum in LATITUDE_BANDS.items():
        if latitude < minimum:
            break
        letter = band
    return letter


def band_minimum_latitude(letter):
    """Southern edge (degrees) of a latitude band letter."""
    try:
        return LATITUDE_BANDS[letter.upper()]
    except (KeyError, AttributeError):
        raise ValueError("unknown latitude band {!r}".format(letter)) from None


def geodetic_to_utm(latitude, longitude, ellipsoid=c.WGS84):
    """
    Project a geodetic position (degrees) onto the UTM grid.

    Parameters:
        latitude : float
            Geodetic latitude in [-90, 90] (degrees).
        longitude : float
            Longitude (degrees), either -180..180 or 0..360.
        ellipsoid : EllipsoidModel
            Reference ellipsoid, WGS84 by default.

    Returns:
        UtmCoordinate

    Raises:
        ValueError: for non-finite input or a latitude outside [-90, 90].
    """
    if not (np.isfinite(latitude) and np.isfinite(longitude)):
        raise ValueError("latitude and longitude must be finite, got ({}, {})".format(latitude, longitude))
    if not -90.0 <= latitude <= 90.0:
        raise ValueError("latitude {} is outside [-90, 90]".format(latitude))

    lon_deg = normalize_longitude(longitude)
    lat = np.radians(latitude)
    lon = np.radians(lon_deg)

    zone = longitude_zone(lon_deg)
    lam = lon - np.radians(central_meridian(zone))

    # auxiliary terms of eq. 7.9
    nu = PrimeVerticalRadius(lat, ellipsoid)
    t = np.tan(lat)
    t2 = t * t
    eta = np.sqrt(ellipsoid.second_eccentricity_sq) * np.cos(lat)
    eta2 = eta * eta
    sinlat = np.sin(lat)
    coslat = np.cos(lat)

    # Transverse Mercator x and y, eq. 7.8
    xTM = (nu * lam * coslat
           + (nu * lam ** 3 * coslat ** 3 / 6.0) * (1.0 - t2 + eta2)
           + (nu * lam ** 5 * coslat ** 5 / 120.0)
           * (5.0 - 18.0 * t2 + t2 * t2 + 14.0 * eta2 - 58.0 * t2 * eta2))

    yTM = (MeridionalArc(lat, ellipsoid)
           + (nu * lam ** 2 / 2.0) * (sinlat * coslat)
           + (nu * lam ** 4 / 24.0) * (sinlat * coslat ** 3)
           * (5.0 - t2 + 9.0 * eta2 + 4.0 * eta2 * eta2)
           + (nu * lam ** 6 / 720.0) * (sinlat * coslat ** 5)
           * (61.0 - 58.0 * t2 + t2 * t2 + 270.0 * eta2 - 330.0 * t2 * eta2))

    easting = c.k0 * xTM + c.falseEasting
    northing = c.k0 * yTM
    if lat < 0:
        northing += c.falseNorthingSouth

    coord = UtmCoordinate(
        zone=zone,
        band=latitude_band(latitude),
        easting=float(easting),
        northing=float(northing) + 0.0,
    )
    logger.debug("(%.6f, %.6f) -> %s", latitude, longitude, coord)
    return coord


def convert_geodetic_to_utm(latitude, longitude):
    """Geodetic position (degrees) as a "ZZ B EEEEEE NNNNNNN" UTM string."""
    return str(geodetic_to_utm(latitude, longitude))


def parse_utm(text):
    """
    Parse a "ZZ B EEEEEE NNNNNNN" string into a UtmCoordinate.

    Raises:
        UTMParseError: naming the part of the string that is malformed.
    """
    if not isinstance(text, str):
        raise UTMParseError("UTM coordinate must be a string", text)
    match = _UTM_PATTERN.match(text)
    if match is None:
        raise UTMParseError("expected 'zone band easting northing'", text)
    zone_text, band, easting_text, northing_text = match.groups()

    if not _DIGITS.fullmatch(zone_text) or not 1 <= int(zone_text) <= c.numZones:
        raise UTMParseError("invalid longitude zone", zone_text)
    if band.upper() not in LATITUDE_BANDS:
        raise UTMParseError("invalid latitude band", band)
    if not _DIGITS.fullmatch(easting_text):
        raise UTMParseError("invalid easting", easting_text)
    if not _DIGITS.fullmatch(northing_text):
        raise UTMParseError("invalid northing", northing_text)

    return UtmCoordinate(
        zone=int(zone_text),
        band=band.upper(),
        easting=float(easting_text),
        northing=float(northing_text),
    )


def convert_utm_to_ll(text):
    """UTM string to GeoPosition. The input is validated; the inverse is not implemented."""
    parse_utm(text)
    raise NotImplementedError("UTM to latitude/longitude conversion is not implemented")


def convert_ll_to_mgrs(latitude, longitude):
    """Latitude/longitude to an MGRS grid reference (not implemented)."""
    raise NotImplementedError("latitude/longitude to MGRS conversion is not implemented")


def convert_mgrs_to_ll(text):
    """MGRS grid reference to GeoPosition (not implemented)."""
    raise NotImplementedError("MGRS to latitude/longitude conversion is not implemented")
