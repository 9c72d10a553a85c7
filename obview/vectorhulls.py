"""Plane geometry for part outlines: rotation, convex hulls and bounding boxes."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0


def rotate(v, theta, origin=None) -> Vec2:
    """Rotate ``v`` by ``theta`` radians about ``origin`` (the zero point by default)."""
    ox, oy = (origin.x, origin.y) if origin is not None else (0.0, 0.0)
    tx = v.x - ox
    ty = v.y - oy
    c = math.cos(theta)
    s = math.sin(theta)
    return Vec2(tx * c - ty * s + ox, tx * s + ty * c + oy)


def angle_to_x(a, b) -> float:
    """Angle between the segment ``a``-``b`` and the x axis."""
    return math.atan2(b.y - a.y, b.x - a.x)


def mbb_calculate(hull, psz):
    """Minimum-area bounding box of ``hull``, grown by ``psz`` on each side.

    Returns the four corners of the box.
    """
    points = list(hull)
    if not points:
        raise ValueError("cannot bound an empty hull")

    origin = Vec2(min(p.x for p in points), min(p.y for p in points))
    points = [Vec2(p.x - origin.x, p.y - origin.y) for p in points]

    mb_angle = 0.0
    cumulative_angle = 0.0
    mb_area = sys.float_info.max
    mba = Vec2()
    mbb = Vec2()

    for i in range(len(points)):
        current = points[i]
        following = points[(i + 1) % len(points)]
        angle = angle_to_x(current, following)
        cumulative_angle += angle

        points = [rotate(p, -angle) for p in points]
        top = max(sys.float_info.min, *(p.y for p in points))
        right = max(sys.float_info.min, *(p.x for p in points))
        bot = min(sys.float_info.max, *(p.y for p in points))
        left = min(sys.float_info.max, *(p.x for p in points))
        area = (right - left) * (top - bot)

        if area < mb_area:
            mb_area = area
            mb_angle = cumulative_angle
            mba = Vec2(left, bot)
            mbb = Vec2(right, top)

    mba = Vec2(mba.x - psz, mba.y - psz)
    mbb = Vec2(mbb.x + psz, mbb.y + psz)

    corners = (mba, Vec2(mbb.x, mba.y), mbb, Vec2(mba.x, mbb.y))
    rotated = (rotate(c, mb_angle) for c in corners)
    return tuple(Vec2(c.x + origin.x, c.y + origin.y) for c in rotated)


def convex_hull_orientation(p, q, r) -> int:
    """0 when collinear, 1 when clockwise, 2 when counterclockwise."""
    val = math.trunc((q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y))
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def convex_hull(points) -> list[Vec2]:
    """Gift-wrapping convex hull; fewer than three points give an empty hull."""
    points = list(points)
    if len(points) < 3:
        return []

    leftmost = min(range(len(points)), key=lambda i: points[i].x)
    hull: list[Vec2] = []
    p = leftmost
    while True:
        hull.append(Vec2(points[p].x, points[p].y))
        q = (p + 1) % len(points)
        for i, candidate in enumerate(points):
            if convex_hull_orientation(points[p], candidate, points[q]) == 2:
                q = i
        p = q
        if p == leftmost or len(hull) >= len(points):
            break
    return hull


def tighten_hull(hull, threshold) -> list[Vec2]:
    """Drop hull points whose neighbouring segments turn by less than ``threshold``."""
    points = list(hull)
    n = len(points)
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        c = points[(i + 2) % n]
        if abs(angle_to_x(a, b) - angle_to_x(b, c)) < threshold:
            points[(i + 1) % n] = a
    return [pt for i, pt in enumerate(points) if pt != points[(i + 1) % n]]


def get_intersection(p0, p1, p2, p3):
    """Crossing point of segments ``p0``-``p1`` and ``p2``-``p3``, or None."""
    s1x = p1.x - p0.x
    s1y = p1.y - p0.y
    s2x = p3.x - p2.x
    s2y = p3.y - p2.y

    denom = -s2x * s1y + s1x * s2y
    if denom == 0:
        return None
    s = (-s1y * (p0.x - p2.x) + s1x * (p0.y - p2.y)) / denom
    t = (s2x * (p0.y - p2.y) - s2y * (p0.x - p2.x)) / denom

    if 0 <= s <= 1 and 0 <= t <= 1:
        return Vec2(p0.x + t * s1x, p0.y + t * s1y)
    return None