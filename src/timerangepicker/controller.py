"""Toolkit-independent drag handling for the time-range dial.

The controller owns the dial geometry (center, radii, tick table) and the
two handles. A UI layer feeds it resize events and pointer samples; the
controller snaps each sample to the nearest tick and reports committed
``(start, end)`` changes through a single callback.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

import logging

from .codec import time_to_angle
from .dial import build_tick_table, nearest_tick
from .models import DialState, PickerConfig, Point, TickTable, TimeOfDay
from .utils.geometry import (
    angle_from_drag_point,
    is_within_hit_radius,
    point_from_angle,
    sweep_angle,
)

logger = logging.getLogger(__name__)

RangeCallback = Callable[[int, int, int, int], None]


class Handle(Enum):
    START = "start"
    END = "end"


class TimeRangeController:
    def __init__(
        self,
        start: Optional[TimeOfDay] = None,
        end: Optional[TimeOfDay] = None,
        on_changed: Optional[RangeCallback] = None,
        config: Optional[PickerConfig] = None,
    ) -> None:
        self.config = config or PickerConfig()
        self._on_changed = on_changed
        if start is None:
            start = TimeOfDay(*self.config.initial_start)
        if end is None:
            end = TimeOfDay(*self.config.initial_end)
        self._start = start
        self._end = end
        self._start_angle = time_to_angle(start.hour, start.minute)
        self._end_angle = time_to_angle(end.hour, end.minute)
        self._active: Optional[Handle] = None

        self._center = Point(0.0, 0.0)
        self._tick_radius = 0.0
        self._track_radius = 0.0
        self._table: TickTable = build_tick_table(self._center, self._tick_radius)

    # ----------------------------- Properties ---------------------------------

    @property
    def start(self) -> TimeOfDay:
        return self._start

    @property
    def end(self) -> TimeOfDay:
        return self._end

    @property
    def start_angle(self) -> float:
        return self._start_angle

    @property
    def end_angle(self) -> float:
        return self._end_angle

    @property
    def sweep(self) -> float:
        return sweep_angle(self._start_angle, self._end_angle)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def tick_radius(self) -> float:
        return self._tick_radius

    @property
    def track_radius(self) -> float:
        return self._track_radius

    @property
    def table(self) -> TickTable:
        return self._table

    @property
    def active_handle(self) -> Optional[Handle]:
        return self._active

    @property
    def start_handle(self) -> Point:
        return point_from_angle(self._center, self._track_radius, self._start_angle)

    @property
    def end_handle(self) -> Point:
        return point_from_angle(self._center, self._track_radius, self._end_angle)

    @property
    def dial_state(self) -> DialState:
        return DialState(
            center=self._center,
            radius=self._track_radius,
            start_angle=self._start_angle,
            end_angle=self._end_angle,
        )

    def set_callback(self, on_changed: Optional[RangeCallback]) -> None:
        self._on_changed = on_changed

    # ----------------------------- Geometry -----------------------------------

    def resize(self, width: float, height: float) -> None:
        """Recenter the dial for a ``width`` x ``height`` canvas and rebuild ticks.

        Radii are taken from the shorter side so a non-square canvas still
        fits the whole dial.
        """
        half = min(width, height) / 2.0
        self._center = Point(width / 2.0, height / 2.0)
        self._tick_radius = half * self.config.tick_ratio
        self._track_radius = half * self.config.track_ratio
        self._table = build_tick_table(self._center, self._tick_radius)
        logger.debug(
            "Dial resized to %.1fx%.1f (tick radius %.1f, track radius %.1f)",
            width,
            height,
            self._tick_radius,
            self._track_radius,
        )

    # ----------------------------- Interaction --------------------------------

    def press(self, point: Point) -> Optional[Handle]:
        """Pick the handle under ``point``; the start handle wins an overlap."""
        radius = self.config.handle_hit_radius
        if is_within_hit_radius(point, self.start_handle, radius):
            self._active = Handle.START
        elif is_within_hit_radius(point, self.end_handle, radius):
            self._active = Handle.END
        else:
            self._active = None
        return self._active

    def move(self, point: Point) -> bool:
        """Snap the active handle to the tick nearest ``point``.

        Returns True when the selected range changed.
        """
        if self._active is None:
            return False
        angle = angle_from_drag_point(point, self._center)
        tick = nearest_tick(self._table, angle)
        if self._active is Handle.START:
            return self._apply(tick.time, self._end, tick.angle, self._end_angle)
        return self._apply(self._start, tick.time, self._start_angle, tick.angle)

    def release(self) -> None:
        self._active = None

    def set_range(self, start: TimeOfDay, end: TimeOfDay) -> bool:
        """Set the range programmatically; notifies when it differs."""
        return self._apply(
            start,
            end,
            time_to_angle(start.hour, start.minute),
            time_to_angle(end.hour, end.minute),
        )

    def _apply(
        self, start: TimeOfDay, end: TimeOfDay, start_angle: float, end_angle: float
    ) -> bool:
        changed = (start, end) != (self._start, self._end)
        self._start, self._end = start, end
        self._start_angle, self._end_angle = start_angle, end_angle
        if changed:
            logger.debug("Range changed to %s-%s", start, end)
            if self._on_changed is not None:
                self._on_changed(start.hour, start.minute, end.hour, end.minute)
        return changed


__all__ = ["TimeRangeController", "Handle", "RangeCallback"]
