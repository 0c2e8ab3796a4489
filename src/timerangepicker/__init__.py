"""timerangepicker: geometry and snapping engine for a 24-hour range dial."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._version import get_version
from .codec import angle_to_time, format_time, time_to_angle
from .controller import Handle, TimeRangeController
from .dial import build_tick_table, nearest_tick
from .models import (
    DialState,
    DialStyle,
    PickerConfig,
    Point,
    Tick,
    TickKind,
    TickTable,
    TimeOfDay,
)
from .utils.geometry import (
    angle_from_drag_point,
    angle_from_point,
    is_within_hit_radius,
    point_from_angle,
    point_from_time,
    sweep_angle,
    to_canonical_angle,
)

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .app import main as _main_type  # noqa: F401


def main() -> None:
    """Entry point for ``python -m timerangepicker`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "angle_to_time",
    "format_time",
    "time_to_angle",
    "Handle",
    "TimeRangeController",
    "build_tick_table",
    "nearest_tick",
    "DialState",
    "DialStyle",
    "PickerConfig",
    "Point",
    "Tick",
    "TickKind",
    "TickTable",
    "TimeOfDay",
    "angle_from_drag_point",
    "angle_from_point",
    "is_within_hit_radius",
    "point_from_angle",
    "point_from_time",
    "sweep_angle",
    "to_canonical_angle",
]
