"""Tests for JointController (headless, no window)."""

from __future__ import annotations

import math

import numpy as np
import pytest

from armsim.config.arm_config import ControllerConfig
from armsim.control.joint_controller import JointController, validate_dt
from armsim.control.state import GripperState, JointState
from armsim.input.snapshot import InputSnapshot
from armsim.kinematics.transforms import angles_equivalent

DT = 1.0 / 60.0
IDLE = InputSnapshot.idle()
TOGGLE = InputSnapshot(gripper_toggle=True)


def _run(ctrl: JointController, snapshot: InputSnapshot, n: int, dt: float = DT) -> None:
    for _ in range(n):
        ctrl.tick(snapshot, dt)


# ---------------------------------------------------------------------------
# Rotation
# ---------------------------------------------------------------------------


class TestRotation:
    def test_initial_state(self) -> None:
        ctrl = JointController()
        assert ctrl.joints == JointState()
        assert ctrl.gripper == GripperState(is_open=False, current_angle=0.0)
        assert not ctrl.quit_requested

    @pytest.mark.parametrize(
        "signal, field, sign",
        [
            ("base_increase", "base", 1.0),
            ("base_decrease", "base", -1.0),
            ("shoulder_increase", "shoulder", 1.0),
            ("shoulder_decrease", "shoulder", -1.0),
            ("elbow_increase", "elbow", 1.0),
            ("elbow_decrease", "elbow", -1.0),
            ("wrist_roll_increase", "wrist_roll", 1.0),
            ("wrist_roll_decrease", "wrist_roll", -1.0),
        ],
    )
    def test_rate_is_60_deg_per_second(self, signal: str, field: str, sign: float) -> None:
        ctrl = JointController()
        ctrl.tick(InputSnapshot(**{signal: True}), 0.5)
        assert getattr(ctrl.joints, field) == pytest.approx(sign * 30.0)

    def test_frame_rate_independent(self) -> None:
        fast = JointController()
        slow = JointController()
        snap = InputSnapshot(base_increase=True)
        _run(fast, snap, 120, 1.0 / 120.0)
        _run(slow, snap, 30, 1.0 / 30.0)
        assert fast.joints.base == pytest.approx(60.0)
        assert slow.joints.base == pytest.approx(60.0)

    def test_opposing_signals_cancel(self) -> None:
        ctrl = JointController(JointState(base=10.0, shoulder=20.0, elbow=-5.0, wrist_roll=7.0))
        snap = InputSnapshot(
            base_increase=True,
            base_decrease=True,
            shoulder_increase=True,
            shoulder_decrease=True,
            elbow_increase=True,
            elbow_decrease=True,
            wrist_roll_increase=True,
            wrist_roll_decrease=True,
        )
        _run(ctrl, snap, 10)
        np.testing.assert_allclose(ctrl.joints.as_array(), [10.0, 20.0, -5.0, 7.0])

    def test_zero_input_leaves_joints_unchanged(self) -> None:
        joints = JointState(base=33.0, shoulder=-12.0, elbow=45.0, wrist_roll=400.0)
        ctrl = JointController(joints.copy())
        _run(ctrl, IDLE, 50)
        assert ctrl.joints == joints

    def test_state_is_mutated_in_place(self) -> None:
        joints = JointState()
        gripper = GripperState()
        ctrl = JointController(joints, gripper)
        ctrl.tick(InputSnapshot(elbow_increase=True, gripper_toggle=True), 0.1)
        assert joints.elbow == pytest.approx(6.0)
        assert gripper.is_open


# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------


class TestLimits:
    def test_shoulder_clamps_exactly_at_upper_limit(self) -> None:
        ctrl = JointController()
        snap = InputSnapshot(shoulder_increase=True)
        for _ in range(200):
            ctrl.tick(snap, DT)
            assert ctrl.joints.shoulder <= 90.0
        assert ctrl.joints.shoulder == 90.0

    def test_elbow_clamps_exactly_at_lower_limit(self) -> None:
        ctrl = JointController()
        _run(ctrl, InputSnapshot(elbow_decrease=True), 200)
        assert ctrl.joints.elbow == -90.0

    def test_single_large_step_is_clamped(self) -> None:
        ctrl = JointController()
        ctrl.tick(InputSnapshot(shoulder_increase=True, elbow_decrease=True), 10.0)
        assert ctrl.joints.shoulder == 90.0
        assert ctrl.joints.elbow == -90.0

    def test_back_off_from_limit_immediately(self) -> None:
        ctrl = JointController()
        _run(ctrl, InputSnapshot(shoulder_increase=True), 200)
        ctrl.tick(InputSnapshot(shoulder_decrease=True), 0.5)
        assert ctrl.joints.shoulder == pytest.approx(60.0)

    def test_base_and_wrist_roll_are_unbounded(self) -> None:
        ctrl = JointController()
        _run(ctrl, InputSnapshot(base_increase=True, wrist_roll_decrease=True), 10, 1.0)
        assert ctrl.joints.base == pytest.approx(600.0)
        assert ctrl.joints.wrist_roll == pytest.approx(-600.0)
        assert angles_equivalent(ctrl.joints.base, 240.0, atol=1e-6)
        assert angles_equivalent(ctrl.joints.wrist_roll, 120.0, atol=1e-6)

    def test_random_sequences_respect_limits(self) -> None:
        rng = np.random.default_rng(42)
        ctrl = JointController()
        names = InputSnapshot.signal_names()
        for _ in range(2000):
            held = {n: bool(v) for n, v in zip(names, rng.random(len(names)) < 0.3)}
            ctrl.tick(InputSnapshot(**held), float(rng.uniform(0.0, 0.1)))
            assert -90.0 <= ctrl.joints.shoulder <= 90.0
            assert -90.0 <= ctrl.joints.elbow <= 90.0
            assert 0.0 <= ctrl.gripper.current_angle <= 30.0

    def test_custom_limits(self) -> None:
        cfg = ControllerConfig(shoulder_limits_deg=(-45.0, 45.0))
        ctrl = JointController(config=cfg)
        _run(ctrl, InputSnapshot(shoulder_increase=True), 100)
        assert ctrl.joints.shoulder == 45.0

    def test_inverted_limits_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds upper bound"):
            ControllerConfig(elbow_limits_deg=(10.0, -10.0))


# ---------------------------------------------------------------------------
# Gripper
# ---------------------------------------------------------------------------


class TestGripperToggle:
    def test_held_toggle_flips_once(self) -> None:
        ctrl = JointController()
        _run(ctrl, TOGGLE, 25)
        assert ctrl.gripper.is_open

    def test_release_and_press_again(self) -> None:
        ctrl = JointController()
        ctrl.tick(TOGGLE, DT)
        ctrl.tick(IDLE, DT)
        ctrl.tick(TOGGLE, DT)
        assert not ctrl.gripper.is_open
        ctrl.tick(IDLE, DT)
        ctrl.tick(TOGGLE, DT)
        assert ctrl.gripper.is_open

    def test_toggle_does_not_jump_angle(self) -> None:
        ctrl = JointController()
        ctrl.tick(TOGGLE, DT)
        assert 0.0 < ctrl.gripper.current_angle < 30.0


class TestGripperAnimation:
    def test_exponential_step(self) -> None:
        ctrl = JointController()
        ctrl.tick(TOGGLE, 0.01)
        # 30 * 5 * 0.01
        assert ctrl.gripper.current_angle == pytest.approx(1.5)

    def test_opening_is_monotonic_and_bounded(self) -> None:
        ctrl = JointController()
        ctrl.tick(TOGGLE, DT)
        previous = ctrl.gripper.current_angle
        for _ in range(300):
            ctrl.tick(IDLE, DT)
            angle = ctrl.gripper.current_angle
            assert previous <= angle <= 30.0
            previous = angle
        assert 30.0 - previous < 1e-3

    def test_closing_is_monotonic_and_bounded(self) -> None:
        ctrl = JointController(gripper=GripperState(is_open=True, current_angle=30.0))
        ctrl.tick(TOGGLE, DT)
        assert not ctrl.gripper.is_open
        previous = ctrl.gripper.current_angle
        assert previous < 30.0
        for _ in range(300):
            ctrl.tick(IDLE, DT)
            angle = ctrl.gripper.current_angle
            assert 0.0 <= angle <= previous
            previous = angle
        assert previous < 1e-3

    def test_converges_without_snapping(self) -> None:
        ctrl = JointController()
        ctrl.tick(TOGGLE, DT)
        _run(ctrl, IDLE, 10)
        assert ctrl.gripper.current_angle < 30.0

    def test_keeps_converging_with_no_input(self) -> None:
        ctrl = JointController(gripper=GripperState(is_open=True, current_angle=10.0))
        ctrl.tick(IDLE, DT)
        assert ctrl.gripper.current_angle > 10.0

    def test_long_frame_does_not_overshoot(self) -> None:
        ctrl = JointController(gripper=GripperState(is_open=True, current_angle=0.0))
        ctrl.tick(IDLE, 5.0)
        assert ctrl.gripper.current_angle == pytest.approx(30.0)
        assert ctrl.gripper.current_angle <= 30.0

    def test_distance_to_target_shrinks_geometrically(self) -> None:
        ctrl = JointController(gripper=GripperState(is_open=True, current_angle=0.0))
        ctrl.tick(IDLE, DT)
        remaining = 30.0 - ctrl.gripper.current_angle
        assert remaining == pytest.approx(30.0 * (1.0 - 5.0 * DT))

    def test_target(self) -> None:
        ctrl = JointController()
        assert ctrl.gripper_target == 0.0
        ctrl.tick(TOGGLE, DT)
        assert ctrl.gripper_target == 30.0


# ---------------------------------------------------------------------------
# Quit and dt validation
# ---------------------------------------------------------------------------


class TestQuit:
    def test_quit_is_reported_not_acted_on(self) -> None:
        ctrl = JointController()
        ctrl.tick(InputSnapshot(quit=True, base_increase=True), 0.5)
        assert ctrl.quit_requested
        # the tick still ran
        assert ctrl.joints.base == pytest.approx(30.0)

    def test_quit_stays_requested(self) -> None:
        ctrl = JointController()
        ctrl.tick(InputSnapshot(quit=True), DT)
        ctrl.tick(IDLE, DT)
        assert ctrl.quit_requested

    def test_reset(self) -> None:
        ctrl = JointController()
        _run(ctrl, InputSnapshot(base_increase=True, shoulder_increase=True, quit=True), 10)
        ctrl.tick(TOGGLE, DT)
        ctrl.reset()
        assert ctrl.joints == JointState()
        assert ctrl.gripper == GripperState()
        assert not ctrl.quit_requested


class TestDtValidation:
    @pytest.mark.parametrize("dt", [-0.01, math.nan, math.inf, -math.inf])
    def test_rejects_bad_dt_without_touching_state(self, dt: float) -> None:
        joints = JointState(base=5.0, shoulder=10.0)
        gripper = GripperState(is_open=True, current_angle=12.0)
        ctrl = JointController(joints, gripper)
        with pytest.raises(ValueError, match="dt must be"):
            ctrl.tick(InputSnapshot(base_increase=True, gripper_toggle=True), dt)
        assert joints == JointState(base=5.0, shoulder=10.0)
        assert gripper == GripperState(is_open=True, current_angle=12.0)

    def test_zero_dt_is_a_no_op(self) -> None:
        ctrl = JointController(gripper=GripperState(is_open=True, current_angle=12.0))
        ctrl.tick(InputSnapshot(base_increase=True), 0.0)
        assert ctrl.joints.base == 0.0
        assert ctrl.gripper.current_angle == 12.0

    def test_validate_dt_returns_float(self) -> None:
        assert validate_dt(1) == 1.0
        assert isinstance(validate_dt(1), float)
