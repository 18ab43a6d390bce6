"""Geobounds Domain Layer.

This package contains the core logic organized by bounded contexts:
- geodesy: LLA/ENU point types and the geodetic to local tangent plane conversion
- regions: Axis-aligned bounds, containment, projection, boundary crossings
"""

# Imports alphabetized per project style (isort)
from domain import geodesy, regions

__all__ = ["geodesy", "regions"]
