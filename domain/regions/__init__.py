"""Regions Bounded Context.

Responsible for axis-aligned bounds in geodetic and local coordinates:
- Value Objects: LLABounds, ENUBounds, BoundsKind
- Services: contains, is_on_boundary, center, project_to_local,
  find_boundary_crossing, clip_path
"""

from domain.regions.errors import (
    BoundaryNotFoundError,
    CoordinateSystemMismatchError,
    RegionError,
)
from domain.regions.services import (
    center,
    clip_path,
    contains,
    find_boundary_crossing,
    is_on_boundary,
    project_to_local,
)
from domain.regions.value_objects import Bounds, BoundsKind, ENUBounds, LLABounds

__all__ = [
    "BoundaryNotFoundError",
    "Bounds",
    "BoundsKind",
    "CoordinateSystemMismatchError",
    "ENUBounds",
    "LLABounds",
    "RegionError",
    "center",
    "clip_path",
    "contains",
    "find_boundary_crossing",
    "is_on_boundary",
    "project_to_local",
]
