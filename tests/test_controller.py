"""Tests for the toolkit-independent drag controller."""

from typing import List, Tuple

import pytest

from timerangepicker.controller import Handle, TimeRangeController
from timerangepicker.models import PickerConfig, Point, TimeOfDay
from timerangepicker.utils import point_from_angle

Call = Tuple[int, int, int, int]


@pytest.fixture
def calls() -> List[Call]:
    return []


@pytest.fixture
def ctrl(calls: List[Call]) -> TimeRangeController:
    c = TimeRangeController(on_changed=lambda *args: calls.append(args))
    c.resize(400.0, 400.0)
    return c


def _at(ctrl: TimeRangeController, angle: float, radius: float = 150.0) -> Point:
    return point_from_angle(ctrl.center, radius, angle)


def test_defaults(ctrl: TimeRangeController, calls: List[Call]) -> None:
    assert ctrl.start == TimeOfDay(0, 0)
    assert ctrl.end == TimeOfDay(12, 0)
    assert ctrl.start_angle == 0.0
    assert ctrl.end_angle == 180.0
    assert ctrl.sweep == 180.0
    assert ctrl.active_handle is None
    assert calls == []


def test_resize_rebuilds_geometry(ctrl: TimeRangeController) -> None:
    assert ctrl.center == Point(200.0, 200.0)
    assert ctrl.tick_radius == pytest.approx(160.0)
    assert ctrl.track_radius == pytest.approx(180.0)
    assert len(ctrl.table) == 144
    assert ctrl.table[0].position.y == pytest.approx(40.0)
    assert ctrl.start_handle.x == pytest.approx(200.0)
    assert ctrl.start_handle.y == pytest.approx(20.0)
    assert ctrl.end_handle.y == pytest.approx(380.0)

    old_table = ctrl.table
    ctrl.resize(600.0, 400.0)
    assert ctrl.table is not old_table
    assert ctrl.center == Point(300.0, 200.0)
    assert ctrl.track_radius == pytest.approx(180.0)  # shorter side wins


def test_resize_does_not_notify(ctrl: TimeRangeController, calls: List[Call]) -> None:
    ctrl.resize(800.0, 800.0)
    assert calls == []
    assert ctrl.start == TimeOfDay(0, 0)


def test_press_selects_handle_under_pointer(ctrl: TimeRangeController) -> None:
    assert ctrl.press(Point(210.0, 30.0)) is Handle.START
    assert ctrl.active_handle is Handle.START
    assert ctrl.press(Point(190.0, 370.0)) is Handle.END
    assert ctrl.press(Point(200.0, 200.0)) is None
    assert ctrl.active_handle is None


def test_press_prefers_start_when_both_hit() -> None:
    c = TimeRangeController()
    c.resize(100.0, 100.0)
    assert c.press(Point(50.0, 50.0)) is Handle.START


def test_drag_snaps_and_notifies_once_per_change(
    ctrl: TimeRangeController, calls: List[Call]
) -> None:
    ctrl.press(ctrl.start_handle)

    assert ctrl.move(_at(ctrl, 45.4))
    assert ctrl.start == TimeOfDay(3, 0)
    assert ctrl.start_angle == pytest.approx(45.0)
    assert calls == [(3, 0, 12, 0)]

    # Another sample on the same tick is not a change.
    assert not ctrl.move(_at(ctrl, 44.6))
    assert calls == [(3, 0, 12, 0)]

    assert ctrl.move(_at(ctrl, 46.5))
    assert ctrl.start == TimeOfDay(3, 10)
    assert calls[-1] == (3, 10, 12, 0)
    assert len(calls) == 2

    ctrl.release()
    assert ctrl.active_handle is None


def test_handle_follows_snapped_tick(ctrl: TimeRangeController) -> None:
    ctrl.press(ctrl.start_handle)
    ctrl.move(_at(ctrl, 91.0, radius=60.0))
    expected = point_from_angle(ctrl.center, ctrl.track_radius, 90.0)
    assert ctrl.start_handle.x == pytest.approx(expected.x)
    assert ctrl.start_handle.y == pytest.approx(expected.y)


def test_end_handle_can_wrap_past_midnight(
    ctrl: TimeRangeController, calls: List[Call]
) -> None:
    ctrl.press(ctrl.start_handle)
    ctrl.move(_at(ctrl, 300.0))
    ctrl.release()
    ctrl.press(ctrl.end_handle)
    ctrl.move(_at(ctrl, 30.0))
    ctrl.release()

    assert ctrl.start == TimeOfDay(20, 0)
    assert ctrl.end == TimeOfDay(2, 0)
    assert ctrl.sweep == pytest.approx(90.0)
    assert calls == [(20, 0, 12, 0), (20, 0, 2, 0)]


def test_move_without_press_is_ignored(
    ctrl: TimeRangeController, calls: List[Call]
) -> None:
    assert not ctrl.move(_at(ctrl, 90.0))
    assert calls == []


def test_drag_does_not_wrap_below_midnight(ctrl: TimeRangeController) -> None:
    ctrl.press(ctrl.start_handle)
    ctrl.move(_at(ctrl, 359.5))
    assert ctrl.start == TimeOfDay(23, 50)


def test_set_range(ctrl: TimeRangeController, calls: List[Call]) -> None:
    assert ctrl.set_range(TimeOfDay(8, 30), TimeOfDay(17, 0))
    assert ctrl.start_angle == pytest.approx(127.5)
    assert ctrl.end_angle == pytest.approx(255.0)
    assert not ctrl.set_range(TimeOfDay(8, 30), TimeOfDay(17, 0))
    assert calls == [(8, 30, 17, 0)]


def test_dial_state_snapshot(ctrl: TimeRangeController) -> None:
    state = ctrl.dial_state
    assert state.center == Point(200.0, 200.0)
    assert state.radius == pytest.approx(180.0)
    assert (state.start_angle, state.end_angle) == (0.0, 180.0)


def test_without_callback() -> None:
    c = TimeRangeController(start=TimeOfDay(6, 0), end=TimeOfDay(9, 0))
    c.resize(300.0, 300.0)
    c.press(c.start_handle)
    assert c.move(point_from_angle(c.center, 100.0, 180.0))
    assert c.start == TimeOfDay(12, 0)


def test_custom_hit_radius() -> None:
    cfg = PickerConfig(handle_hit_radius=5.0)
    c = TimeRangeController(config=cfg)
    c.resize(400.0, 400.0)
    assert c.press(Point(210.0, 20.0)) is None
    assert c.press(Point(204.0, 24.0)) is Handle.START


def test_initial_range_from_config() -> None:
    cfg = PickerConfig(initial_start=(22, 0), initial_end=(6, 30))
    c = TimeRangeController(config=cfg)
    assert c.start == TimeOfDay(22, 0)
    assert c.end == TimeOfDay(6, 30)
    assert c.start_angle == 330.0
    assert c.end_angle == 97.5


def test_explicit_range_overrides_config() -> None:
    cfg = PickerConfig(initial_start=(22, 0), initial_end=(6, 30))
    c = TimeRangeController(TimeOfDay(3, 0), TimeOfDay(9, 0), config=cfg)
    assert c.start == TimeOfDay(3, 0)
    assert c.end == TimeOfDay(9, 0)
