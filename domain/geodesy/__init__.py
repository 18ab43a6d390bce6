"""Geodesy Bounded Context.

Responsible for point representations and conversions between them:
- Value Objects: LLA, ENU
- Services: to_enu, geodetic_to_enu, get_x, get_y, from_xy
"""

from domain.geodesy.services import (
    WGS84,
    from_xy,
    geodetic_to_enu,
    get_x,
    get_y,
    to_enu,
)
from domain.geodesy.value_objects import ENU, LLA

__all__ = [
    "ENU",
    "LLA",
    "WGS84",
    "from_xy",
    "geodetic_to_enu",
    "get_x",
    "get_y",
    "to_enu",
]
