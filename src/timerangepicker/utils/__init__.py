"""Shared helpers for timerangepicker."""

from .geometry import (
    angle_from_drag_point,
    angle_from_point,
    is_within_hit_radius,
    point_from_angle,
    point_from_time,
    sweep_angle,
    to_canonical_angle,
)

__all__ = [
    "angle_from_drag_point",
    "angle_from_point",
    "is_within_hit_radius",
    "point_from_angle",
    "point_from_time",
    "sweep_angle",
    "to_canonical_angle",
]
