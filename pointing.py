"""
pointing.py

Look angles from a fixed antenna site to a geostationary satellite.

Two methods are provided and deliberately kept apart because they are not
numerically identical:
    • the rigorous ellipsoidal method (Soler et al., 1995, "Determination of
      Look Angles to Geostationary Communication Satellites"), which works in
      ECEF and rotates the line of sight into the site's ENU frame;
    • the older spherical approximation, which works directly on the latitude
      and longitude difference.

The skew of the LNB, the magnetic azimuth and a bundled PointingSolution are
built on top of them. Declination and satellite longitude come from
caller-supplied providers.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

import numpy as np
import pytz

import constants as c
from constants import EllipsoidModel
from coordinate_conversions import (
    ConvertECEFToENU,
    ConvertGeodeticToECEF,
    ConvertGeostationaryToECEF,
)
from geometry_types import GeoPosition, LookAngleResult, PointingSolution

logger = logging.getLogger(__name__)

# (latitude, longitude, altitude, timestamp) -> declination in degrees, east positive
DeclinationProvider = Callable[[float, float, float, datetime], float]

METHODS = ("ellipsoidal", "spherical")


class DomainError(ArithmeticError):
    """A pointing quantity is undefined at the given site."""


def look_angle_ellipsoidal(site: GeoPosition, satellite_longitude: float,
                           ellipsoid: EllipsoidModel = c.WGS84) -> LookAngleResult:
    """
    Azimuth/elevation to a geostationary satellite on the ellipsoid.

    The azimuth quadrant is resolved the way the published method does it:
    a negative atan result is moved up by 360° for sites at or south of the
    equator, and every northern site gets 180° added unconditionally.
    Division follows IEEE rules, so a site exactly under the satellite yields
    a NaN azimuth instead of an exception.
    """
    lat = np.radians(site.latitude)
    lon = np.radians(site.longitude)
    sat_lon = np.radians(satellite_longitude)

    xp, yp, zp = ConvertGeodeticToECEF(lat, lon, site.altitude, ellipsoid)
    xs, ys, zs = ConvertGeostationaryToECEF(sat_lon)
    e, n, u = ConvertECEFToENU(xs - xp, ys - yp, zs - zp, lat, lon)

    with np.errstate(divide="ignore", invalid="ignore"):
        alpha = np.arctan(np.divide(e, n))
        nu = np.arctan(np.divide(u, np.sqrt(e * e + n * n)))

    if alpha < 0 and lat <= 0:
        alpha = alpha + c.twoPi
    if lat > 0:
        alpha = alpha + np.pi

    logger.debug("ENU to satellite at %.3f: e=%.1f n=%.1f u=%.1f", satellite_longitude, e, n, u)
    return LookAngleResult(
        azimuth=float(np.degrees(alpha) % 360.0),
        elevation=float(np.degrees(nu)),
    )


def azimuth_ellipsoidal(site: GeoPosition, satellite_longitude: float,
                        ellipsoid: EllipsoidModel = c.WGS84) -> float:
    """True azimuth (deg) from the ellipsoidal method."""
    return look_angle_ellipsoidal(site, satellite_longitude, ellipsoid).azimuth


def azimuth_spherical(site: GeoPosition, satellite_longitude: float) -> float:
    """True azimuth (deg) from the spherical approximation."""
    site_lat = np.radians(site.latitude)
    delta = np.radians(satellite_longitude) - np.radians(site.longitude)

    # right spherical triangle from the antenna to the sub-satellite point
    with np.errstate(divide="ignore", invalid="ignore"):
        beta = np.divide(np.tan(delta), np.sin(site_lat))

    if np.abs(beta) < np.pi:
        azimuth = np.pi - np.arctan(beta)
    else:
        azimuth = np.pi + np.arctan(beta)

    if site.latitude < 0.0:
        azimuth = azimuth - np.pi
    if azimuth < 0.0:
        azimuth = azimuth + c.twoPi

    return float(np.degrees(azimuth) % 360.0)


def elevation_spherical(site: GeoPosition, satellite_longitude: float) -> float:
    """Elevation (deg) from the spherical approximation, using c.k_spherical."""
    site_lat = np.radians(site.latitude)
    delta = np.radians(satellite_longitude) - np.radians(site.longitude)
    cos_gamma = np.cos(delta) * np.cos(site_lat)

    with np.errstate(divide="ignore", invalid="ignore"):
        elev = np.arctan(np.divide(cos_gamma - c.k_spherical,
                                   np.sqrt(1.0 - cos_gamma * cos_gamma)))
    return float(np.degrees(elev))


def look_angle_spherical(site: GeoPosition, satellite_longitude: float) -> tuple[float, float]:
    """(azimuth, elevation) in degrees from the spherical approximation."""
    return (azimuth_spherical(site, satellite_longitude),
            elevation_spherical(site, satellite_longitude))


def skew_angle(site: GeoPosition, satellite_longitude: float) -> float:
    """
    LNB skew in degrees; positive is clockwise, negative counter-clockwise.

    Raises:
        DomainError: at the equator, where tan(latitude) is 0 and the skew
        is undefined.
    """
    longdiff = np.radians(site.longitude - satellite_longitude)
    lat = np.radians(site.latitude)

    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.divide(np.sin(longdiff), np.tan(lat))

    if not np.isfinite(ratio):
        raise DomainError(
            "skew is undefined at latitude {} (sin(dlon)/tan(lat) = {})".format(site.latitude, ratio)
        )
    return float(np.degrees(np.arctan(ratio)))


def magnetic_azimuth(true_azimuth: float, declination: float) -> float:
    """Convert a true azimuth to a magnetic one, east declination positive."""
    return float((true_azimuth - declination) % 360.0)


def utc_timestamp(timestamp: Optional[datetime] = None) -> datetime:
    """Timezone-aware UTC datetime; naive inputs are taken to be UTC already."""
    if timestamp is None:
        return datetime.now(pytz.utc)
    if timestamp.tzinfo is None:
        return pytz.utc.localize(timestamp)
    return timestamp.astimezone(pytz.utc)


def antenna_pointing(site: GeoPosition, satellite_longitude: float,
                     declination_provider: Optional[DeclinationProvider] = None,
                     timestamp: Optional[datetime] = None,
                     method: str = "ellipsoidal") -> PointingSolution:
    """
    Compute everything needed to aim a dish at one geostationary satellite.

    Parameters:
        site : GeoPosition
            The antenna location.
        satellite_longitude : float
            Sub-satellite longitude (degrees, east positive).
        declination_provider : callable, optional
            Magnetic declination service. Without one, no magnetic azimuth is
            produced.
        timestamp : datetime, optional
            Instant passed to the declination provider; defaults to now (UTC).
        method : str
            "ellipsoidal" (default) or "spherical".

    Returns:
        PointingSolution

    The skew is None for a site on the equator, where it is undefined; the
    look angles are still returned.

    Raises:
        ValueError: for an unknown method.
    """
    if method == "ellipsoidal":
        look = look_angle_ellipsoidal(site, satellite_longitude)
        azimuth, elevation = look.azimuth, look.elevation
    elif method == "spherical":
        azimuth, elevation = look_angle_spherical(site, satellite_longitude)
    else:
        raise ValueError("unknown look angle method {!r}, expected one of {}".format(method, METHODS))

    try:
        skew = skew_angle(site, satellite_longitude)
    except DomainError as err:
        logger.warning("No skew for site (%.4f, %.4f): %s", site.latitude, site.longitude, err)
        skew = None

    declination = None
    magnetic = None
    if declination_provider is not None:
        when = utc_timestamp(timestamp)
        declination = float(declination_provider(site.latitude, site.longitude, site.altitude, when))
        magnetic = magnetic_azimuth(azimuth, declination)

    solution = PointingSolution(
        true_azimuth=azimuth,
        magnetic_azimuth=magnetic,
        elevation=elevation,
        skew=skew,
        declination=declination,
        method=method,
    )
    if not solution.visible:
        logger.warning(
            "Satellite at %.2f is below the horizon from (%.4f, %.4f): elevation %.2f",
            satellite_longitude, site.latitude, site.longitude, elevation,
        )
    return solution


def point_at_satellite(site: GeoPosition, satellite_id,
                       fetch_satellite_longitude: Callable[[object], float],
                       **kwargs) -> PointingSolution:
    """Look up a satellite's longitude by id and compute its PointingSolution."""
    satellite_longitude = float(fetch_satellite_longitude(satellite_id))
    logger.debug("Satellite %r is at longitude %.3f", satellite_id, satellite_longitude)
    return antenna_pointing(site, satellite_longitude, **kwargs)
