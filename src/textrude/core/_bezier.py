"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for the tessellator.
Not intended for public use.
"""

import math

from textrude.domain import Point

# Recursion stops here even if the tolerance is not reached
MAX_DEPTH = 16


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2 = points

    # Curve point at t=0.5 against the chord midpoint
    curve_mid_x = 0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x
    curve_mid_y = 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y
    chord_mid_x = (p0.x + p2.x) / 2
    chord_mid_y = (p0.y + p2.y) / 2

    distance = math.hypot(curve_mid_x - chord_mid_x, curve_mid_y - chord_mid_y)

    if distance <= tolerance or depth >= MAX_DEPTH:
        return [p0, p2]

    # Subdivide at t=0.5
    mid = Point(curve_mid_x, curve_mid_y)
    left = flatten_quadratic([p0, _midpoint(p0, p1), mid], tolerance, depth + 1)
    right = flatten_quadratic([mid, _midpoint(p1, p2), p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2, p3 = points

    # Calculate curve midpoint (at t=0.5)
    curve_mid_x = 0.125 * (p0.x + 3 * p1.x + 3 * p2.x + p3.x)
    curve_mid_y = 0.125 * (p0.y + 3 * p1.y + 3 * p2.y + p3.y)

    # Approximate with line segment midpoint
    line_mid_x = (p0.x + p3.x) / 2
    line_mid_y = (p0.y + p3.y) / 2

    distance = math.hypot(curve_mid_x - line_mid_x, curve_mid_y - line_mid_y)

    # An S-shaped curve can pass through its chord midpoint, so the control
    # points must also lie close to the chord before stopping.
    control_spread = max(
        math.hypot(p1.x - (2 * p0.x + p3.x) / 3, p1.y - (2 * p0.y + p3.y) / 3),
        math.hypot(p2.x - (p0.x + 2 * p3.x) / 3, p2.y - (p0.y + 2 * p3.y) / 3),
    )

    if (distance <= tolerance and control_spread <= tolerance) or depth >= MAX_DEPTH:
        return [p0, p3]

    # Subdivide at t=0.5 using De Casteljau's algorithm
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
