"""
coordinate_conversions.py

This module holds the Cartesian building blocks shared by the look-angle
engine and the UTM projection. It includes:
    • Conversion of a geodetic (curvilinear) site to Earth-Centered Earth-Fixed
      (ECEF) coordinates using the radius of curvature in the prime vertical.
    • Placement of a geostationary satellite in ECEF from its sub-satellite
      longitude.
    • Rotation of an ECEF line-of-sight vector into the local East-North-Up
      (ENU) frame of the site.
    • Computation of the meridional arc length from the equator.

All angles are in radians and all distances in meters. The ellipsoid is passed
explicitly and defaults to WGS84.
"""

import numpy as np

import constants as c


def PrimeVerticalRadius(lat, ellipsoid=c.WGS84):
    """
    Radius of curvature in the prime vertical.

    Parameters:
        lat : float or ndarray
            Geodetic latitude (radians).
        ellipsoid : EllipsoidModel
            Reference ellipsoid.

    Returns:
        N : float or ndarray
            N(lat) = a / sqrt(1 - (e * sin(lat))^2), in meters.
    """
    esinlat = ellipsoid.eccentricity * np.sin(lat)
    return ellipsoid.semi_major_axis / np.sqrt(1.0 - esinlat * esinlat)


def ConvertGeodeticToECEF(lat, lon, h, ellipsoid=c.WGS84):
    """
    Convert geodetic curvilinear coordinates to ECEF Cartesian coordinates.

    Parameters:
        lat, lon : float or ndarray
            Geodetic latitude and longitude (radians).
        h : float or ndarray
            Height above the ellipsoid (m).

    Returns:
        X_ecef, Y_ecef, Z_ecef : float or ndarray
            ECEF position (m):

                X = (N + h) cos(lon) cos(lat)
                Y = (N + h) sin(lon) cos(lat)
                Z = (N (1 - e^2) + h) sin(lat)
    """
    N = PrimeVerticalRadius(lat, ellipsoid)
    coslat = np.cos(lat)
    X_ecef = (N + h) * np.cos(lon) * coslat
    Y_ecef = (N + h) * np.sin(lon) * coslat
    Z_ecef = (N * (1.0 - ellipsoid.eccentricity_sq) + h) * np.sin(lat)
    return X_ecef, Y_ecef, Z_ecef


def ConvertGeostationaryToECEF(sat_lon, radius=c.r_geo):
    """
    ECEF position of a geostationary satellite.

    The satellite lies in the equatorial plane on a circle of fixed radius, so
    only its longitude (radians) is needed and Z is always 0.
    """
    return radius * np.cos(sat_lon), radius * np.sin(sat_lon), 0.0


def ConvertECEFToENU(dx, dy, dz, lat, lon):
    """
    Rotate an ECEF difference vector into the local ENU frame at (lat, lon).

    Parameters:
        dx, dy, dz : float or ndarray
            Components of (target - site) in ECEF (m).
        lat, lon : float or ndarray
            Geodetic latitude and longitude of the site (radians).

    Returns:
        e, n, u : float or ndarray
            East, North and Up components (m).

    Explanation:
        [e n u]^T = R1(pi/2 - lat) * R3(lon + pi/2) * [dx dy dz]^T
    """
    sinlat = np.sin(lat)
    coslat = np.cos(lat)
    sinlon = np.sin(lon)
    coslon = np.cos(lon)
    e = -sinlon * dx + coslon * dy
    n = -sinlat * coslon * dx - sinlat * sinlon * dy + coslat * dz
    u = coslat * coslon * dx + coslat * sinlon * dy + sinlat * dz
    return e, n, u


def MeridionalArc(lat, ellipsoid=c.WGS84):
    """
    Length of the meridian arc from the equator to `lat` (radians), in meters.

    Uses the truncated series with the precomputed A0..A8 coefficients of the
    ellipsoid.
    """
    return ellipsoid.semi_major_axis * (
        ellipsoid.a0 * lat
        - ellipsoid.a2 * np.sin(2.0 * lat)
        + ellipsoid.a4 * np.sin(4.0 * lat)
        - ellipsoid.a6 * np.sin(6.0 * lat)
        + ellipsoid.a8 * np.sin(8.0 * lat)
    )
