"""Geodesy Bounded Context - Domain Services.

Geodetic (LLA) to local tangent plane (ENU) conversion and the planar
accessors used by the regions context.

Conversion path: LLA -> ECEF on the datum ellipsoid -> rotation into the
East/North/Up frame tangent to the reference point.
"""

from __future__ import annotations

from typing import TypeVar, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pyproj import Geod

from domain.geodesy.value_objects import ENU, LLA

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Default datum (same ellipsoid as GPS, EPSG:4326)
WGS84 = Geod(ellps="WGS84")

Point = TypeVar("Point", LLA, ENU)


# ---------------------------------------------------------------------------
# Geodetic -> Geocentric
# ---------------------------------------------------------------------------
def geodetic_to_ecef(
    latitude: ArrayLike,
    longitude: ArrayLike,
    altitude: ArrayLike,
    datum: Geod = WGS84,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Convert geodetic coordinates (degrees, meters) to ECEF meters.

    Accepts scalars or arrays; inputs are broadcast against each other.
    """
    lat = np.radians(np.asarray(latitude, dtype=np.float64))
    lon = np.radians(np.asarray(longitude, dtype=np.float64))
    alt = np.asarray(altitude, dtype=np.float64)

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    # Prime vertical radius of curvature
    n = datum.a / np.sqrt(1.0 - datum.es * sin_lat * sin_lat)

    x = (n + alt) * cos_lat * np.cos(lon)
    y = (n + alt) * cos_lat * np.sin(lon)
    z = (n * (1.0 - datum.es) + alt) * sin_lat
    return x, y, z


# ---------------------------------------------------------------------------
# Geodetic -> Local Tangent Plane
# ---------------------------------------------------------------------------
def geodetic_to_enu(
    latitude: ArrayLike,
    longitude: ArrayLike,
    altitude: ArrayLike,
    reference: LLA,
    datum: Geod = WGS84,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Vectorised LLA -> ENU relative to `reference`.

    Args:
        latitude: Degrees, scalar or array
        longitude: Degrees, scalar or array
        altitude: Meters above the ellipsoid, scalar or array
        reference: Origin of the tangent plane
        datum: Ellipsoid (pyproj.Geod) shared by points and reference

    Returns:
        Tuple of (east, north, up) arrays in meters
    """
    x, y, z = geodetic_to_ecef(latitude, longitude, altitude, datum)
    x0, y0, z0 = geodetic_to_ecef(
        reference.latitude, reference.longitude, reference.altitude, datum
    )
    dx, dy, dz = x - x0, y - y0, z - z0

    lat0 = np.radians(reference.latitude)
    lon0 = np.radians(reference.longitude)
    sin_lat0, cos_lat0 = np.sin(lat0), np.cos(lat0)
    sin_lon0, cos_lon0 = np.sin(lon0), np.cos(lon0)

    east = -sin_lon0 * dx + cos_lon0 * dy
    north = -sin_lat0 * cos_lon0 * dx - sin_lat0 * sin_lon0 * dy + cos_lat0 * dz
    up = cos_lat0 * cos_lon0 * dx + cos_lat0 * sin_lon0 * dy + sin_lat0 * dz
    return east, north, up


def to_enu(point: LLA, reference: LLA, datum: Geod = WGS84) -> ENU:
    """Convert a single LLA point into the ENU frame tangent at `reference`.

    Example:
        >>> ref = LLA(latitude=45.0, longitude=7.0)
        >>> to_enu(ref, ref)
        ENU(east=0.0, north=0.0, up=0.0)
    """
    east, north, up = geodetic_to_enu(
        point.latitude, point.longitude, point.altitude, reference, datum
    )
    return ENU(east=float(east), north=float(north), up=float(up))


# ---------------------------------------------------------------------------
# Planar Accessors
# ---------------------------------------------------------------------------
def get_x(point: LLA | ENU) -> float:
    """Return the horizontal x component (longitude or east)."""
    if isinstance(point, LLA):
        return point.longitude
    return point.east


def get_y(point: LLA | ENU) -> float:
    """Return the horizontal y component (latitude or north)."""
    if isinstance(point, LLA):
        return point.latitude
    return point.north


@overload
def from_xy(point_type: type[LLA], x: float, y: float) -> LLA: ...


@overload
def from_xy(point_type: type[ENU], x: float, y: float) -> ENU: ...


def from_xy(point_type: type[Point], x: float, y: float) -> Point:
    """Build a point of `point_type` from a planar (x, y) pair.

    Raises:
        TypeError: If point_type is neither LLA nor ENU
        ValueError: If the pair is outside the point type's valid range
    """
    if point_type is LLA:
        return LLA(latitude=y, longitude=x)
    if point_type is ENU:
        return ENU(east=x, north=y)
    raise TypeError(f"Unsupported point type: {point_type!r}")
