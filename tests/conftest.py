"""Root pytest configuration for all tests.

Shared bounds fixtures used across the geodesy and regions test packages.
Bounds are built directly from value objects; no I/O is involved.
"""

import pytest

from domain.regions.value_objects import ENUBounds, LLABounds


@pytest.fixture
def enu_box() -> ENUBounds:
    """20 m x 20 m box centered on the tangent point."""
    return ENUBounds(min_x=-10.0, max_x=10.0, min_y=-10.0, max_y=10.0)


@pytest.fixture
def lla_box() -> LLABounds:
    """Ordinary box in the southern hemisphere: lat [-25, -15], lon [-50, -40]."""
    return LLABounds(min_x=-50.0, max_x=-40.0, min_y=-25.0, max_y=-15.0)


@pytest.fixture
def seam_box() -> LLABounds:
    """20 degree wide box crossing the anti-meridian: lon [170, -170], lat [-10, 10]."""
    return LLABounds(min_x=170.0, max_x=-170.0, min_y=-10.0, max_y=10.0)
