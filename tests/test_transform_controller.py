"""
Tests for the gesture state machine.

Covers:
- Scale clamping (range, idempotence, monotonicity)
- Mouse drag mapped through the displayed width, including resize mid-drag
- Touch drag / pinch transitions and contact-count changes
- Pinch baseline of zero
- Wheel zoom leaves offset and gesture state alone
- Reset
"""
import pytest

from constants import SCALE_MIN, SCALE_MAX
from models.transform import TransformState, Vec2, clamp_scale
from components.transform_widgets import (
    TransformController, GestureState,
    PointerDown, PointerMove, PointerUp,
    TouchStart, TouchMove, TouchEnd, Wheel,
)


def touch(*coords):
    return tuple(Vec2(x, y) for x, y in coords)


@pytest.fixture
def controller():
    return TransformController()


# ══════════════════════════════════════════════════════════════════════════
# Clamp
# ══════════════════════════════════════════════════════════════════════════

class TestClampScale:

    @pytest.mark.parametrize("value", [-3.0, 0.0, 0.01, 0.05, 1.0, 7.5, 20.0, 500.0])
    def test_idempotent(self, value):
        assert clamp_scale(clamp_scale(value)) == clamp_scale(value)

    def test_in_range_untouched(self):
        assert clamp_scale(3.25) == 3.25

    def test_bounds(self):
        assert clamp_scale(0.001) == SCALE_MIN
        assert clamp_scale(1000) == SCALE_MAX

    def test_monotonic(self):
        values = [-1, 0, 0.04, 0.05, 0.5, 1, 19, 20, 21, 100]
        clamped = [clamp_scale(v) for v in values]
        assert clamped == sorted(clamped)

    def test_transform_state_clamps_on_construction(self):
        assert TransformState(scale=99).scale == SCALE_MAX


# ══════════════════════════════════════════════════════════════════════════
# Mouse drag
# ══════════════════════════════════════════════════════════════════════════

class TestPointerDrag:

    def test_initial_state(self, controller):
        assert controller.state is GestureState.IDLE
        assert controller.transform == TransformState(1.0, 0.0, 0.0)

    def test_drag_maps_display_to_output(self, controller):
        controller.handle(PointerDown(100, 100), 360)
        assert controller.state is GestureState.DRAGGING

        changed = controller.handle(PointerMove(110, 95), 360)

        assert changed
        assert controller.transform.offset_x == pytest.approx(30.0)
        assert controller.transform.offset_y == pytest.approx(-15.0)

    def test_drag_is_incremental(self, controller):
        controller.handle(PointerDown(0, 0), 1080)
        controller.handle(PointerMove(5, 5), 1080)
        controller.handle(PointerMove(12, 2), 1080)
        assert controller.transform.offset == Vec2(12.0, 2.0)

    def test_resize_mid_drag_uses_new_width(self, controller):
        controller.handle(PointerDown(0, 0), 360)
        controller.handle(PointerMove(10, 0), 360)    # x3 -> 30
        controller.handle(PointerMove(20, 0), 540)    # x2 -> 20 more
        assert controller.transform.offset_x == pytest.approx(50.0)

    def test_move_without_press_is_ignored(self, controller):
        assert not controller.handle(PointerMove(50, 50), 360)
        assert controller.transform == TransformState.identity()

    def test_release_returns_to_idle(self, controller):
        controller.handle(PointerDown(0, 0), 360)
        controller.handle(PointerUp(), 360)
        assert controller.state is GestureState.IDLE
        assert controller.session.last_point is None

        controller.handle(PointerMove(40, 40), 360)
        assert controller.transform.offset == Vec2(0.0, 0.0)

    def test_drag_does_not_change_scale(self, controller):
        controller.handle(Wheel(1), 360)
        scale = controller.transform.scale
        controller.handle(PointerDown(0, 0), 360)
        controller.handle(PointerMove(30, 30), 360)
        assert controller.transform.scale == scale


# ══════════════════════════════════════════════════════════════════════════
# Touch
# ══════════════════════════════════════════════════════════════════════════

class TestTouch:

    def test_single_finger_drags(self, controller):
        controller.handle(TouchStart(touch((10, 10))), 360)
        assert controller.state is GestureState.DRAGGING

        controller.handle(TouchMove(touch((20, 10))), 360)
        assert controller.transform.offset_x == pytest.approx(30.0)

    def test_two_fingers_pinch(self, controller):
        controller.handle(TouchStart(touch((0, 0), (100, 0))), 360)
        assert controller.state is GestureState.PINCHING
        assert controller.session.pinch_baseline == pytest.approx(100.0)

        controller.handle(TouchMove(touch((0, 0), (150, 0))), 360)
        assert controller.transform.scale == pytest.approx(1.5)

    def test_pinch_rebases_each_sample(self, controller):
        controller.handle(TouchStart(touch((0, 0), (100, 0))), 360)
        controller.handle(TouchMove(touch((0, 0), (200, 0))), 360)   # x2
        controller.handle(TouchMove(touch((0, 0), (300, 0))), 360)   # x1.5
        assert controller.transform.scale == pytest.approx(3.0)
        assert controller.session.pinch_baseline == pytest.approx(300.0)

    def test_pinch_does_not_move_offset(self, controller):
        controller.handle(TouchStart(touch((0, 0), (100, 0))), 360)
        controller.handle(TouchMove(touch((50, 50), (250, 50))), 360)
        assert controller.transform.offset == Vec2(0.0, 0.0)

    def test_zero_baseline_first_sample_only_sets_baseline(self, controller):
        controller.handle(TouchStart(touch((50, 50), (50, 50))), 360)
        assert controller.session.pinch_baseline == 0

        changed = controller.handle(TouchMove(touch((0, 0), (100, 0))), 360)
        assert not changed
        assert controller.transform.scale == 1.0
        assert controller.session.pinch_baseline == pytest.approx(100.0)

        controller.handle(TouchMove(touch((0, 0), (120, 0))), 360)
        assert controller.transform.scale == pytest.approx(1.2)

    def test_pinch_clamps(self, controller):
        controller.handle(TouchStart(touch((0, 0), (1, 0))), 360)
        controller.handle(TouchMove(touch((0, 0), (1000, 0))), 360)
        assert controller.transform.scale == SCALE_MAX

    def test_stray_single_move_while_pinching_is_ignored(self, controller):
        controller.handle(TouchStart(touch((0, 0), (100, 0))), 360)
        changed = controller.handle(TouchMove(touch((300, 300))), 360)
        assert not changed
        assert controller.state is GestureState.PINCHING
        assert controller.transform == TransformState.identity()

    def test_lifting_one_finger_starts_clean_drag(self, controller):
        controller.handle(TouchStart(touch((0, 0), (100, 0))), 360)
        controller.handle(TouchEnd(touch((100, 0))), 360)
        assert controller.state is GestureState.DRAGGING
        assert controller.session.pinch_baseline is None

        controller.handle(TouchMove(touch((110, 0))), 360)
        assert controller.transform.offset_x == pytest.approx(30.0)

    def test_second_finger_switches_drag_to_pinch(self, controller):
        controller.handle(TouchStart(touch((0, 0))), 360)
        controller.handle(TouchStart(touch((0, 0), (80, 0))), 360)
        assert controller.state is GestureState.PINCHING
        assert controller.session.last_point is None

    def test_release_all_returns_to_idle(self, controller):
        controller.handle(TouchStart(touch((0, 0), (100, 0))), 360)
        controller.handle(TouchEnd(()), 360)
        assert controller.state is GestureState.IDLE
        assert controller.session.pinch_baseline is None
        assert controller.session.last_point is None

    def test_pointer_down_ignored_while_pinching(self, controller):
        controller.handle(TouchStart(touch((0, 0), (100, 0))), 360)
        controller.handle(PointerDown(5, 5), 360)
        assert controller.state is GestureState.PINCHING


# ══════════════════════════════════════════════════════════════════════════
# Wheel
# ══════════════════════════════════════════════════════════════════════════

class TestWheel:

    def test_zoom_in_and_out(self, controller):
        controller.handle(Wheel(1), 360)
        assert controller.transform.scale == pytest.approx(1.1)
        controller.handle(Wheel(-1), 360)
        assert controller.transform.scale == pytest.approx(0.99)

    def test_zero_direction_is_noop(self, controller):
        assert not controller.handle(Wheel(0), 360)

    def test_wheel_keeps_offset(self, controller):
        controller.handle(PointerDown(0, 0), 360)
        controller.handle(PointerMove(10, 20), 360)
        offset = controller.transform.offset
        controller.handle(Wheel(1), 360)
        assert controller.transform.offset == offset

    def test_wheel_does_not_touch_gesture_session(self, controller):
        controller.handle(PointerDown(3, 4), 360)
        session = controller.session
        controller.handle(Wheel(-1), 360)
        assert controller.session == session
        assert controller.state is GestureState.DRAGGING

    def test_wheel_clamps_at_minimum(self, controller):
        for _ in range(200):
            controller.handle(Wheel(-1), 360)
        assert controller.transform.scale == SCALE_MIN
        assert not controller.handle(Wheel(-1), 360)


# ══════════════════════════════════════════════════════════════════════════
# Reset / misc
# ══════════════════════════════════════════════════════════════════════════

class TestReset:

    def test_reset_restores_identity(self, controller):
        controller.handle(Wheel(1), 360)
        controller.handle(PointerDown(0, 0), 360)
        controller.handle(PointerMove(10, 10), 360)

        assert controller.reset()
        assert controller.transform == TransformState.identity()
        assert controller.state is GestureState.IDLE

    def test_reset_on_identity_reports_no_change(self, controller):
        assert not controller.reset()

    def test_unknown_input_is_ignored(self, controller):
        assert not controller.handle(object(), 360)

    def test_every_change_replaces_the_state_object(self, controller):
        before = controller.transform
        controller.handle(Wheel(1), 360)
        assert controller.transform is not before
        assert before == TransformState.identity()
