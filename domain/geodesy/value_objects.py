"""Geodesy Bounded Context - Value Objects.

Immutable point representations. All validation occurs at construction time
via Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Coordinate Limits
# ---------------------------------------------------------------------------
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class LLA(BaseModel):
    """Geodetic coordinate: latitude, longitude, altitude (Value Object).

    Invariants:
        latitude in [-90, 90]
        longitude in [-180, 180]

    Altitude is in meters above the ellipsoid and defaults to 0. Planar
    operations (bounds, containment) ignore it.
    """

    latitude: float = Field(ge=MIN_LATITUDE, le=MAX_LATITUDE)
    longitude: float = Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE)
    altitude: float = 0.0

    model_config = ConfigDict(frozen=True)


class ENU(BaseModel):
    """Local tangent plane coordinate in meters (Value Object).

    East/North/Up relative to a reference point that is not stored here; the
    caller owns the frame.
    """

    east: float = Field(allow_inf_nan=False)
    north: float = Field(allow_inf_nan=False)
    up: float = Field(default=0.0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)
