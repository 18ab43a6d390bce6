"""Domain Port(s) for point conversion.

Defines the interface the projection service consumes to turn geodetic points
into local tangent plane points. The default implementation is
`domain.geodesy.to_enu`.
"""

from __future__ import annotations

from typing import Protocol

from pyproj import Geod

from domain.geodesy.value_objects import ENU, LLA


class PointConverter(Protocol):
    """Port for converting an LLA point into an ENU frame."""

    def __call__(self, point: LLA, reference: LLA, datum: Geod) -> ENU:
        """Return `point` expressed in the ENU frame tangent at `reference`."""
        ...
