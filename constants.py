"""
constants.py

This module defines the physical and mathematical constants required for
pointing a fixed ground antenna at a geostationary satellite and for
projecting geodetic coordinates onto the Universal Transverse Mercator grid.

Constants include:
- The WGS84 reference ellipsoid (semi-major and semi-minor axes) and the
  quantities derived from it (first and second eccentricity, meridional arc
  series coefficients A0..A8)
- The geostationary orbit radius used by the look-angle computations
- The empirical ratio used by the spherical elevation formula
- UTM point scale factor and false origins
- A full circle in radians

All constants are defined using SI units unless otherwise noted. Everything
in here is computed once at import and never mutated afterwards.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class EllipsoidModel:
    """
    Reference ellipsoid together with its derived quantities.

    Attributes:
        semi_major_axis : float
            Equatorial radius a (m).
        semi_minor_axis : float
            Polar radius b (m).
        eccentricity : float
            First eccentricity, sqrt((a^2 - b^2) / a^2).
        eccentricity_sq : float
            Square of the first eccentricity.
        second_eccentricity_sq : float
            e^2 / (1 - e^2), used for the eta term of the Transverse Mercator series.
        a0, a2, a4, a6, a8 : float
            Coefficients of the truncated meridional arc series

                M(phi) = a * (A0*phi - A2*sin(2 phi) + A4*sin(4 phi)
                              - A6*sin(6 phi) + A8*sin(8 phi))

    Use EllipsoidModel.from_axes() rather than the constructor so that the
    derived terms always agree with the axes.
    """

    semi_major_axis: float
    semi_minor_axis: float
    eccentricity: float
    eccentricity_sq: float
    second_eccentricity_sq: float
    a0: float
    a2: float
    a4: float
    a6: float
    a8: float

    @classmethod
    def from_axes(cls, a, b):
        """Build the model from the two axis lengths (m)."""
        e2 = (a * a - b * b) / (a * a)
        e4 = e2 * e2
        e6 = e4 * e2
        e8 = e6 * e2
        return cls(
            semi_major_axis=float(a),
            semi_minor_axis=float(b),
            eccentricity=float(np.sqrt(e2)),
            eccentricity_sq=e2,
            second_eccentricity_sq=e2 / (1.0 - e2),
            a0=1.0 - e2 / 4.0 - 3.0 * e4 / 64.0 - 5.0 * e6 / 256.0 - 175.0 * e8 / 16384.0,
            a2=3.0 * (e2 + e4 / 4.0 + 15.0 * e6 / 128.0 - 455.0 * e8 / 4096.0) / 8.0,
            a4=15.0 * (e4 + 3.0 * e6 / 4.0 - 77.0 * e8 / 128.0) / 256.0,
            a6=35.0 * (e6 - 41.0 * e8 / 32.0) / 3072.0,
            a8=-315.0 * e8 / 131072.0,
        )


# Earth's equatorial and polar radius in meters (WGS84).
earthEquatorialRadius = 6378137.0
earthPolarRadius = 6356752.3142

# The WGS84 ellipsoid shared by both engines.
WGS84 = EllipsoidModel.from_axes(earthEquatorialRadius, earthPolarRadius)

# Full circle in radians
twoPi = 2.0 * np.pi

# Distance of a geostationary satellite from the Earth's center (m).
# The satellite sits in the equatorial plane, so its z component is 0.
r_geo = 42200000.0

# Empirical ratio subtracted in the spherical elevation formula.
# Close to earthEquatorialRadius / geostationary radius (6378 / 42164 ~ 0.1513)
# but its provenance is unconfirmed, so the value is kept as published.
k_spherical = 0.1512

# UTM point scale factor on the central meridian (k0).
k0 = 0.9996

# UTM false easting (m) and the false northing applied south of the equator (m).
falseEasting = 500000.0
falseNorthingSouth = 10000000.0

# Width of a UTM longitude zone (degrees) and the number of zones.
zoneWidth = 6.0
numZones = 60
