"""Regions Bounded Context - Domain Services.

Pure functions over bounds and points. NO I/O operations.

Longitude wraparound: an LLABounds with min_x > max_x crosses the +/-180
seam. Containment, center and projection treat it as a single box; the
boundary solver checks the seam before the ordinary edges.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from itertools import product
from typing import overload

from pyproj import Geod

from domain.geodesy.services import WGS84, Point, from_xy, get_x, get_y, to_enu
from domain.geodesy.value_objects import ENU, LLA
from domain.regions.errors import (
    BoundaryNotFoundError,
    CoordinateSystemMismatchError,
)
from domain.regions.ports import PointConverter
from domain.regions.value_objects import Bounds, BoundsKind, ENUBounds, LLABounds

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
SEAM_SHIFT_DEG = 180.0  # Center correction for boxes crossing the seam
EQUATOR_LAT = 0.0


def _check_system(point: LLA | ENU, bounds: Bounds) -> None:
    if not isinstance(point, bounds.point_type):
        raise CoordinateSystemMismatchError(point, bounds)


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------
def contains(point: LLA | ENU, bounds: Bounds) -> bool:
    """Check whether `point` lies within `bounds` (inclusive).

    For LLABounds crossing the seam (min_x > max_x) a longitude is inside
    unless it lies strictly between max_x and min_x.

    Raises:
        CoordinateSystemMismatchError: If point and bounds use different systems
    """
    _check_system(point, bounds)
    return _contains_xy(get_x(point), get_y(point), bounds)


def _contains_xy(x: float, y: float, bounds: Bounds) -> bool:
    if not bounds.min_y <= y <= bounds.max_y:
        return False
    if bounds.kind is BoundsKind.WRAPS_SEAM:
        return x <= bounds.max_x or x >= bounds.min_x
    return bounds.min_x <= x <= bounds.max_x


def is_on_boundary(point: LLA | ENU, bounds: Bounds) -> bool:
    """Check whether a contained `point` touches an edge of `bounds`.

    Exact equality with any of the four bound values. Only meaningful for
    points that already pass `contains`; the result is not reliable otherwise.
    """
    _check_system(point, bounds)
    x, y = get_x(point), get_y(point)
    return (
        x == bounds.min_x
        or x == bounds.max_x
        or y == bounds.min_y
        or y == bounds.max_y
    )


# ---------------------------------------------------------------------------
# Center
# ---------------------------------------------------------------------------
@overload
def center(bounds: LLABounds) -> LLA: ...


@overload
def center(bounds: ENUBounds) -> ENU: ...


def center(bounds: LLABounds | ENUBounds) -> LLA | ENU:
    """Return the center point of `bounds`.

    For LLA boxes crossing the seam the arithmetic mean of min_x and max_x
    lands on the opposite side of the globe, so it is shifted by 180 degrees.
    Latitude is never corrected.
    """
    x_mid = (bounds.min_x + bounds.max_x) / 2
    y_mid = (bounds.min_y + bounds.max_y) / 2

    if isinstance(bounds, LLABounds):
        if bounds.kind is BoundsKind.WRAPS_SEAM:
            x_mid = x_mid - SEAM_SHIFT_DEG if x_mid > 0 else x_mid + SEAM_SHIFT_DEG
        return LLA(latitude=y_mid, longitude=x_mid)
    return ENU(east=x_mid, north=y_mid)


# ---------------------------------------------------------------------------
# Projection: LLA bounds -> enclosing ENU bounds
# ---------------------------------------------------------------------------
def _candidate_longitudes(bounds: LLABounds, reference: LLA) -> list[float]:
    xs = [bounds.min_x, bounds.max_x]
    ref_x = reference.longitude
    # Reference meridian strictly inside the (possibly wrapping) x range
    if bounds.min_x < ref_x < bounds.max_x or (
        bounds.kind is BoundsKind.WRAPS_SEAM
        and not bounds.min_x >= ref_x >= bounds.max_x
    ):
        xs.append(ref_x)
    return xs


def _candidate_latitudes(bounds: LLABounds) -> list[float]:
    ys = [bounds.min_y, bounds.max_y]
    if bounds.min_y < EQUATOR_LAT < bounds.max_y:
        ys.append(EQUATOR_LAT)
    return ys


def project_to_local(
    bounds: LLABounds,
    reference: LLA | None = None,
    datum: Geod = WGS84,
    converter: PointConverter = to_enu,
) -> ENUBounds:
    """Return the smallest ENU box containing every point of `bounds`.

    The ENU image of an LLA box is not itself a box: meridians converge and
    parallels curve in the tangent plane. Extremes of east/north occur at the
    corners, on the equator, or on the reference meridian, so the projection
    samples the cross product of those candidate coordinates.

    Args:
        bounds: Geographic box, may cross the seam
        reference: Tangent point of the ENU frame. Defaults to center(bounds)
        datum: Ellipsoid passed through to `converter`
        converter: LLA -> ENU point conversion

    Returns:
        ENUBounds enclosing the projected box

    Example:
        >>> box = LLABounds(min_x=-1.0, max_x=1.0, min_y=-1.0, max_y=1.0)
        >>> local = project_to_local(box)
        >>> local.min_x < 0 < local.max_x
        True
    """
    if reference is None:
        reference = center(bounds)

    xs = _candidate_longitudes(bounds, reference)
    ys = _candidate_latitudes(bounds)

    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")

    for x_lla, y_lla in product(xs, ys):
        pt = converter(LLA(latitude=y_lla, longitude=x_lla), reference, datum)
        x, y = get_x(pt), get_y(pt)

        min_x, max_x = min(x, min_x), max(x, max_x)
        min_y, max_y = min(y, min_y), max(y, max_y)

    logger.debug(
        "Projected %d candidate points (%d lon x %d lat)",
        len(xs) * len(ys),
        len(xs),
        len(ys),
    )
    return ENUBounds(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


# ---------------------------------------------------------------------------
# Boundary Point Solver
# ---------------------------------------------------------------------------
def _straddles(a: float, bound: float, b: float) -> bool:
    """True if `bound` lies strictly between a and b (either order)."""
    return a < bound < b or a > bound > b


def _crossing_candidates(
    p1: Point, p2: Point, bounds: Bounds
) -> Iterator[tuple[str, float, float]]:
    """Yield (label, x, y) boundary candidates in priority order.

    Order: seam, min_x, max_x, min_y, max_y. Callers rely on it when a
    segment leaves through a corner.
    """
    x1, y1 = get_x(p1), get_y(p1)
    x2, y2 = get_x(p2), get_y(p2)

    def y_at(x: float) -> float:
        return y1 + (y2 - y1) * (x - x1) / (x2 - x1)

    def x_at(y: float) -> float:
        return x1 + (x2 - x1) * (y - y1) / (y2 - y1)

    # Segment with ends on opposite sides of the seam; min_x/max_x edges
    # below assume an unwrapped range and cannot handle it.
    if bounds.kind is BoundsKind.WRAPS_SEAM and x1 * x2 < 0:
        if (x1 < bounds.min_x and x2 < bounds.max_x) or (
            x2 < bounds.min_x and x1 < bounds.max_x
        ):
            yield "seam", bounds.min_x, y_at(bounds.min_x)
        elif (x1 > bounds.max_x and x2 > bounds.min_x) or (
            x2 > bounds.max_x and x1 > bounds.min_x
        ):
            yield "seam", bounds.max_x, y_at(bounds.max_x)

    if _straddles(x1, bounds.min_x, x2):
        yield "min_x", bounds.min_x, y_at(bounds.min_x)
    if _straddles(x1, bounds.max_x, x2):
        yield "max_x", bounds.max_x, y_at(bounds.max_x)
    if _straddles(y1, bounds.min_y, y2):
        yield "min_y", x_at(bounds.min_y), bounds.min_y
    if _straddles(y1, bounds.max_y, y2):
        yield "max_y", x_at(bounds.max_y), bounds.max_y


def find_boundary_crossing(p1: Point, p2: Point, bounds: Bounds) -> Point:
    """Find the point where segment p1 -> p2 meets the edge of `bounds`.

    Works only for points where contains(p1) != contains(p2). Each edge the
    segment strictly crosses gives a linearly interpolated candidate; the
    first candidate that passes `contains` is returned.

    Args:
        p1: Segment start
        p2: Segment end, same coordinate system as p1
        bounds: Box in the same coordinate system

    Returns:
        Point on the boundary, of the same type as p1

    Raises:
        BoundaryNotFoundError: If no candidate lies within bounds
        CoordinateSystemMismatchError: If the points do not match bounds

    Example:
        >>> box = ENUBounds(min_x=-10, max_x=10, min_y=-10, max_y=10)
        >>> find_boundary_crossing(ENU(east=0, north=0), ENU(east=20, north=5), box)
        ENU(east=10.0, north=2.5, up=0.0)
    """
    _check_system(p1, bounds)
    _check_system(p2, bounds)

    for label, x, y in _crossing_candidates(p1, p2, bounds):
        # Test raw coordinates: rejected candidates may be out of range
        if _contains_xy(x, y, bounds):
            logger.debug("Boundary crossing found on %s edge", label)
            return from_xy(bounds.point_type, x, y)

    logger.debug("No boundary crossing between %r and %r", p1, p2)
    raise BoundaryNotFoundError(p1, p2, bounds)


# ---------------------------------------------------------------------------
# Path Clipping
# ---------------------------------------------------------------------------
def clip_path(points: Iterable[Point], bounds: Bounds) -> list[list[Point]]:
    """Split a polyline into the runs that lie within `bounds`.

    Each run starts and ends on the boundary when the path enters or leaves
    the box between two vertices. Containment is evaluated per vertex, so a
    segment with both ends outside is dropped even if it cuts a corner.

    Args:
        points: Ordered path vertices
        bounds: Box in the same coordinate system

    Returns:
        List of runs, each a list of contained points in path order
    """
    runs: list[list[Point]] = []
    current: list[Point] = []
    prev: Point | None = None
    prev_inside = False

    for pt in points:
        inside = contains(pt, bounds)
        if prev is not None and inside != prev_inside:
            if inside and not is_on_boundary(pt, bounds):
                # Entering
                current = [find_boundary_crossing(prev, pt, bounds)]
            elif not inside:
                # Leaving
                if not is_on_boundary(prev, bounds):
                    current.append(find_boundary_crossing(prev, pt, bounds))
                runs.append(current)
                current = []
        if inside:
            current.append(pt)
        prev, prev_inside = pt, inside

    if current:
        runs.append(current)
    return runs
