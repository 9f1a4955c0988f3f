"""Value types passed between callers and the two engines. All immutable."""

from dataclasses import dataclass
from typing import Optional

from formatting import format_utm


@dataclass(frozen=True)
class GeoPosition:
    """A point on or above the WGS84 ellipsoid."""

    latitude: float  # Geodetic latitude (decimal degrees, north positive)
    longitude: float  # Longitude (decimal degrees, east positive)
    altitude: float = 0.0  # Height above the ellipsoid (m)
    accuracy: Optional[float] = None  # Horizontal accuracy (m), if known


@dataclass(frozen=True)
class LookAngleResult:
    """Pointing angles from an antenna site to a satellite."""

    azimuth: float  # True azimuth (degrees, clockwise from north, [0, 360))
    elevation: float  # Elevation above the local horizon (degrees)


@dataclass(frozen=True)
class UtmCoordinate:
    """A position on the UTM grid."""

    zone: int  # Longitude zone, 1..60
    band: str  # Latitude band letter (never I or O)
    easting: float  # Meters, includes the 500000 m false easting
    northing: float  # Meters, includes the 10000000 m false northing in the south

    def __str__(self):
        return format_utm(self.zone, self.band, self.easting, self.northing)


@dataclass(frozen=True)
class PointingSolution:
    """Everything an installer needs to aim a dish at one satellite."""

    true_azimuth: float  # Degrees from true north
    magnetic_azimuth: Optional[float]  # Degrees from magnetic north, None without a declination
    elevation: float  # Degrees above the horizon
    skew: Optional[float]  # LNB rotation (degrees, positive clockwise), None on the equator
    declination: Optional[float]  # Magnetic declination used (degrees, east positive)
    method: str  # "ellipsoidal" or "spherical"

    @property
    def visible(self) -> bool:
        """True when the satellite is above the local horizon."""
        return self.elevation > 0.0
