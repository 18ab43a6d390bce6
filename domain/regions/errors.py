"""Regions Bounded Context - Error Hierarchy.

Custom exceptions for bounds operations. Invalid bounds are rejected at
construction time by the value objects (ValueError); the errors below cover
failures of the operations themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.geodesy.value_objects import ENU, LLA
    from domain.regions.value_objects import Bounds


class RegionError(Exception):
    """Base error for bounds operations."""


class CoordinateSystemMismatchError(RegionError):
    """Point and bounds belong to different coordinate systems."""

    def __init__(self, point: "LLA | ENU", bounds: "Bounds") -> None:
        self.point = point
        self.bounds = bounds
        super().__init__(
            f"{type(point).__name__} point cannot be tested against "
            f"{type(bounds).__name__} (expected {bounds.point_type.__name__})"
        )


class BoundaryNotFoundError(RegionError):
    """No boundary point was found on the segment p1 -> p2.

    Raised when every crossing candidate falls outside the bounds: the
    segment does not cross the boundary (both ends inside or both outside),
    is degenerate (p1 == p2), or hits a floating-point corner case.

    Attributes:
        p1: Segment start
        p2: Segment end
        bounds: The bounds that were searched
    """

    def __init__(
        self, p1: "LLA | ENU", p2: "LLA | ENU", bounds: "Bounds"
    ) -> None:
        self.p1 = p1
        self.p2 = p2
        self.bounds = bounds
        super().__init__(
            f"Failed to find boundary point between {p1!r} and {p2!r} "
            f"[x: {bounds.min_x:.6f} to {bounds.max_x:.6f}, "
            f"y: {bounds.min_y:.6f} to {bounds.max_y:.6f}]"
        )
