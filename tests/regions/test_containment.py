"""Tests for contains / is_on_boundary.

Bounds Reference:
- enu_box: east [-10, 10], north [-10, 10]
- lla_box: lat [-25, -15], lon [-50, -40]
- seam_box: lat [-10, 10], lon [170, -170] (crosses the anti-meridian)
"""

from __future__ import annotations

import pytest

from domain.geodesy.value_objects import ENU, LLA
from domain.regions.errors import CoordinateSystemMismatchError
from domain.regions.services import contains, is_on_boundary
from domain.regions.value_objects import ENUBounds, LLABounds


# ===========================================================================
# ENU
# ===========================================================================
def test_enu_interior_point(enu_box):
    assert contains(ENU(east=1.0, north=-2.0), enu_box)


@pytest.mark.parametrize(
    "east,north", [(10.5, 0.0), (-10.5, 0.0), (0.0, 10.5), (0.0, -10.5)]
)
def test_enu_outside_on_one_axis(enu_box, east, north):
    assert not contains(ENU(east=east, north=north), enu_box)


def test_up_is_ignored(enu_box):
    assert contains(ENU(east=0.0, north=0.0, up=1e6), enu_box)


# ===========================================================================
# Corner inclusivity
# ===========================================================================
@pytest.mark.parametrize("box_name", ["enu_box", "lla_box", "seam_box"])
def test_corners_are_contained(request, box_name):
    box = request.getfixturevalue(box_name)
    for corner in box.corners():
        assert contains(corner, box)
        assert is_on_boundary(corner, box)


# ===========================================================================
# Monotonicity: moving one coordinate outside makes the point outside
# ===========================================================================
@pytest.mark.parametrize("box_name", ["enu_box", "lla_box"])
def test_moving_outside_one_axis_excludes(request, box_name):
    box = request.getfixturevalue(box_name)
    point_type = box.point_type
    mid_x = (box.min_x + box.max_x) / 2
    mid_y = (box.min_y + box.max_y) / 2

    def make(x, y):
        if point_type is LLA:
            return LLA(latitude=y, longitude=x)
        return ENU(east=x, north=y)

    assert contains(make(mid_x, mid_y), box)
    assert not contains(make(box.min_x - 0.1, mid_y), box)
    assert not contains(make(box.max_x + 0.1, mid_y), box)
    assert not contains(make(mid_x, box.min_y - 0.1), box)
    assert not contains(make(mid_x, box.max_y + 0.1), box)


# ===========================================================================
# LLA wraparound
# ===========================================================================
@pytest.mark.parametrize("longitude", [170.0, 175.0, 180.0, -180.0, -175.0, -170.0])
def test_seam_box_contains_longitudes_across_seam(seam_box, longitude):
    assert contains(LLA(latitude=0.0, longitude=longitude), seam_box)


@pytest.mark.parametrize("longitude", [0.0, 169.9, -169.9, 90.0, -90.0])
def test_seam_box_excludes_far_side(seam_box, longitude):
    assert not contains(LLA(latitude=0.0, longitude=longitude), seam_box)


def test_seam_box_latitude_is_not_wrapped(seam_box):
    assert not contains(LLA(latitude=10.5, longitude=180.0), seam_box)
    assert not contains(LLA(latitude=-10.5, longitude=175.0), seam_box)


def test_normal_lla_box(lla_box):
    assert contains(LLA(latitude=-20.0, longitude=-45.0), lla_box)
    assert not contains(LLA(latitude=-20.0, longitude=175.0), lla_box)


def test_full_world_box_contains_everything():
    world = LLABounds(min_x=-180.0, max_x=180.0, min_y=-90.0, max_y=90.0)
    assert contains(LLA(latitude=89.0, longitude=179.0), world)
    assert contains(LLA(latitude=-90.0, longitude=-180.0), world)


# ===========================================================================
# is_on_boundary
# ===========================================================================
def test_interior_point_is_not_on_boundary(enu_box):
    assert not is_on_boundary(ENU(east=0.0, north=0.0), enu_box)


@pytest.mark.parametrize(
    "east,north", [(-10.0, 0.0), (10.0, 3.0), (2.0, -10.0), (-4.0, 10.0)]
)
def test_edge_points_are_on_boundary(enu_box, east, north):
    pt = ENU(east=east, north=north)
    assert contains(pt, enu_box)
    assert is_on_boundary(pt, enu_box)


def test_on_boundary_uses_exact_equality(enu_box):
    assert not is_on_boundary(ENU(east=10.0 - 1e-12, north=0.0), enu_box)


def test_seam_box_edges(seam_box):
    assert is_on_boundary(LLA(latitude=0.0, longitude=170.0), seam_box)
    assert is_on_boundary(LLA(latitude=0.0, longitude=-170.0), seam_box)
    assert not is_on_boundary(LLA(latitude=0.0, longitude=180.0), seam_box)


# ===========================================================================
# Coordinate system mismatch
# ===========================================================================
def test_mismatched_point_type_raises(enu_box, lla_box):
    with pytest.raises(CoordinateSystemMismatchError, match="expected ENU"):
        contains(LLA(latitude=0.0, longitude=0.0), enu_box)
    with pytest.raises(CoordinateSystemMismatchError, match="expected LLA"):
        contains(ENU(east=0.0, north=0.0), lla_box)


def test_on_boundary_mismatched_point_type_raises(lla_box):
    with pytest.raises(CoordinateSystemMismatchError):
        is_on_boundary(ENU(east=-50.0, north=-20.0), lla_box)


def test_enu_box_never_wraps():
    box = ENUBounds(min_x=-1.0, max_x=1.0, min_y=-1.0, max_y=1.0)
    assert not contains(ENU(east=5.0, north=0.0), box)
