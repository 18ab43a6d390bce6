"""Regions Bounded Context - Value Objects.

Axis-aligned bounds in either coordinate system. All validation occurs at
construction time via Pydantic.

x is the horizontal axis (longitude or east), y the vertical one (latitude or
north). Field names are shared so services can treat both systems alike.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.geodesy.services import from_xy
from domain.geodesy.value_objects import (
    ENU,
    LLA,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)


class BoundsKind(str, Enum):
    """Shape of a bounds box along x."""

    NORMAL = "normal"
    WRAPS_SEAM = "wraps_seam"  # crosses the +/-180 longitude seam


class Bounds(BaseModel):
    """Common fields of an axis-aligned box.

    Not instantiated directly; use LLABounds or ENUBounds.
    """

    point_type: ClassVar[type[LLA] | type[ENU]]

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> BoundsKind:
        return BoundsKind.NORMAL

    @property
    def wraps_seam(self) -> bool:
        return self.kind is BoundsKind.WRAPS_SEAM

    def corners(self) -> tuple[LLA | ENU, ...]:
        """Return the four corners (SW, SE, NE, NW) as points."""
        return tuple(
            from_xy(self.point_type, x, y)
            for x, y in (
                (self.min_x, self.min_y),
                (self.max_x, self.min_y),
                (self.max_x, self.max_y),
                (self.min_x, self.max_y),
            )
        )


class ENUBounds(Bounds):
    """Box in a local tangent plane, meters (Value Object).

    Invariants:
        min_x <= max_x (east)
        min_y <= max_y (north)
    """

    point_type: ClassVar[type[ENU]] = ENU

    min_x: float = Field(allow_inf_nan=False)
    max_x: float = Field(allow_inf_nan=False)
    min_y: float = Field(allow_inf_nan=False)
    max_y: float = Field(allow_inf_nan=False)

    @model_validator(mode="after")
    def validate_bounds(self) -> "ENUBounds":
        if self.min_x > self.max_x:
            raise ValueError(
                f"Invalid x ordering: min_x={self.min_x} > max_x={self.max_x}"
            )
        if self.min_y > self.max_y:
            raise ValueError(
                f"Invalid y ordering: min_y={self.min_y} > max_y={self.max_y}"
            )
        return self


class LLABounds(Bounds):
    """Geographic box in degrees (Value Object).

    Invariants:
        min_x, max_x in [-180, 180] (longitude)
        min_y, max_y in [-90, 90] (latitude)
        min_y <= max_y

    min_x > max_x is legal: the box runs east from min_x through the
    anti-meridian to max_x. For example min_x=170, max_x=-170 is the 20 degree
    slice centered on 180.
    """

    point_type: ClassVar[type[LLA]] = LLA

    min_x: float = Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE)
    max_x: float = Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE)
    min_y: float = Field(ge=MIN_LATITUDE, le=MAX_LATITUDE)
    max_y: float = Field(ge=MIN_LATITUDE, le=MAX_LATITUDE)

    @model_validator(mode="after")
    def validate_bounds(self) -> "LLABounds":
        # No pole wrap
        if self.min_y > self.max_y:
            raise ValueError(
                f"Invalid y ordering: min_y={self.min_y} > max_y={self.max_y}"
            )
        return self

    @property
    def kind(self) -> BoundsKind:
        if self.min_x > self.max_x:
            return BoundsKind.WRAPS_SEAM
        return BoundsKind.NORMAL
