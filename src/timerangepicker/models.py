"""Dataclasses describing dial geometry, ticks and configuration for timerangepicker."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, Iterator, Sequence, Tuple

import json

import numpy as np


@dataclass(frozen=True)
class Point:
    """A canvas coordinate or a circle center."""

    x: float
    y: float


@dataclass(frozen=True)
class TimeOfDay:
    """Hour/minute pair on the 24-hour dial (``24:00`` is a valid boundary)."""

    hour: int
    minute: int

    @property
    def format_text(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.format_text


class TickKind(Enum):
    HOUR = "hour"
    MINUTE = "minute"


@dataclass(frozen=True)
class Tick:
    """One snap position on the dial."""

    position: Point
    angle: float  # canonical degrees, 0 = midnight
    kind: TickKind
    time: TimeOfDay


class TickTable(Sequence[Tick]):
    """Immutable angle-sorted collection of ticks.

    The angles are mirrored into a read-only ``numpy`` array so the
    nearest-tick search can binary-search them directly.
    """

    __slots__ = ("_ticks", "_angles")

    def __init__(self, ticks: Sequence[Tick]) -> None:
        self._ticks: Tuple[Tick, ...] = tuple(ticks)
        angles = np.fromiter(
            (t.angle for t in self._ticks), dtype=np.float64, count=len(self._ticks)
        )
        angles.setflags(write=False)
        self._angles = angles

    @property
    def angles(self) -> np.ndarray:
        return self._angles

    def __len__(self) -> int:
        return len(self._ticks)

    def __getitem__(self, index):  # type: ignore[override]
        return self._ticks[index]

    def __iter__(self) -> Iterator[Tick]:
        return iter(self._ticks)

    def __repr__(self) -> str:
        return f"TickTable({len(self._ticks)} ticks)"


@dataclass(frozen=True)
class DialState:
    """Snapshot of the dial consumed by renderers."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float


@dataclass
class DialStyle:
    """Colors and stroke widths used when painting the dial."""

    track_color: str = "#D3D3D3"
    range_color: str = "#2196F3"
    bar_width: float = 24.0
    hour_tick_color: str = "#000000"
    minute_tick_color: str = "#808080"
    text_color: str = "#000000"
    label_font_pt: int = 12
    time_font_pt: int = 24
    hour_font_pt: int = 10


@dataclass
class PickerConfig:
    """Persisted presentation settings for the picker."""

    hour_span: int = 6
    tick_ratio: float = 0.8
    track_ratio: float = 0.9
    handle_hit_radius: float = 100.0
    start_label: str = "Start"
    end_label: str = "End"
    initial_start: Tuple[int, int] = (0, 0)
    initial_end: Tuple[int, int] = (12, 0)
    style: DialStyle = field(default_factory=DialStyle)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "PickerConfig":
        data: Dict = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("config must be a JSON object")
        s = data.get("style", {})
        if not isinstance(s, dict):
            raise ValueError("config 'style' must be a JSON object")
        start = data.get("initial_start", (0, 0))
        end = data.get("initial_end", (12, 0))
        return PickerConfig(
            hour_span=int(data.get("hour_span", 6)),
            tick_ratio=float(data.get("tick_ratio", 0.8)),
            track_ratio=float(data.get("track_ratio", 0.9)),
            handle_hit_radius=float(data.get("handle_hit_radius", 100.0)),
            start_label=str(data.get("start_label", "Start")),
            end_label=str(data.get("end_label", "End")),
            initial_start=(int(start[0]), int(start[1])),
            initial_end=(int(end[0]), int(end[1])),
            style=DialStyle(
                track_color=str(s.get("track_color", "#D3D3D3")),
                range_color=str(s.get("range_color", "#2196F3")),
                bar_width=float(s.get("bar_width", 24.0)),
                hour_tick_color=str(s.get("hour_tick_color", "#000000")),
                minute_tick_color=str(s.get("minute_tick_color", "#808080")),
                text_color=str(s.get("text_color", "#000000")),
                label_font_pt=int(s.get("label_font_pt", 12)),
                time_font_pt=int(s.get("time_font_pt", 24)),
                hour_font_pt=int(s.get("hour_font_pt", 10)),
            ),
        )


__all__ = [
    "Point",
    "TimeOfDay",
    "TickKind",
    "Tick",
    "TickTable",
    "DialState",
    "DialStyle",
    "PickerConfig",
]
