"""Geometry helpers shared by the dial engine, the controller and the widget."""

import math

from ..codec import MAX_ANGLE, QUARTER_TURN, time_to_angle
from ..models import Point


def point_from_angle(center: Point, radius: float, angle: float) -> Point:
    """Return the point at ``angle`` degrees on the circle (0 points up)."""
    theta = math.radians(angle) - math.radians(QUARTER_TURN)
    return Point(
        x=center.x + radius * math.cos(theta),
        y=center.y + radius * math.sin(theta),
    )


def point_from_time(center: Point, radius: float, hour: int, minute: int) -> Point:
    return point_from_angle(center, radius, time_to_angle(hour, minute))


def angle_from_point(point: Point, center: Point) -> float:
    """Raw angle of ``point`` around ``center`` in ``(-180, 180]`` (0 points right)."""
    return math.degrees(math.atan2(point.y - center.y, point.x - center.x))


def to_canonical_angle(raw: float) -> float:
    """Rotate a raw ``atan2`` angle so 0 is midnight and wrap into ``[0, 360)``."""
    angle = raw + QUARTER_TURN
    if angle < 0.0:
        angle += MAX_ANGLE
    if angle >= MAX_ANGLE:
        angle -= MAX_ANGLE
    return angle


def angle_from_drag_point(point: Point, center: Point, canonical: bool = True) -> float:
    """Angle of a drag sample around the dial center.

    With ``canonical=False`` the raw ``atan2`` angle is returned unchanged.
    """
    raw = angle_from_point(point, center)
    return to_canonical_angle(raw) if canonical else raw


def is_within_hit_radius(point: Point, target: Point, radius: float) -> bool:
    """Square hit-test: both axes within ``radius`` of ``target`` (inclusive)."""
    return (target.x - radius <= point.x <= target.x + radius) and (
        target.y - radius <= point.y <= target.y + radius
    )


def sweep_angle(start: float, end: float) -> float:
    """Forward arc length from ``start`` to ``end``, wrapping past midnight."""
    sweep = end - start
    if end < start:
        sweep += MAX_ANGLE
    return sweep


__all__ = [
    "point_from_angle",
    "point_from_time",
    "angle_from_point",
    "to_canonical_angle",
    "angle_from_drag_point",
    "is_within_hit_radius",
    "sweep_angle",
]
