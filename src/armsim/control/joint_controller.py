"""Keyboard-driven joint controller for the 4-DOF arm."""

from __future__ import annotations

import logging
import math

import numpy as np

from armsim.config.arm_config import ControllerConfig
from armsim.input.snapshot import InputSnapshot

from .state import GripperState, JointState

logger = logging.getLogger(__name__)


def _direction(increase: bool, decrease: bool) -> float:
    """+1, -1 or 0 for a pair of opposing held signals."""
    return float(increase) - float(decrease)


def validate_dt(dt: float) -> float:
    """Reject elapsed times that would corrupt the state."""
    dt = float(dt)
    if not math.isfinite(dt):
        raise ValueError(f"dt must be finite, got {dt}")
    if dt < 0.0:
        raise ValueError(f"dt must be non-negative, got {dt}")
    return dt


class JointController:
    """Applies one tick of input to the joint and gripper state.

    Joint velocities are ``rotation_rate_deg_per_s`` while a key is held, so the
    motion does not depend on the frame rate.  Shoulder and elbow are clamped
    to their limits after every tick; base and wrist roll spin freely.  The
    gripper angle follows its target with a first-order lag.

    Args:
        joints: Joint state mutated in place. A fresh zero state by default.
        gripper: Gripper state mutated in place. Closed by default.
        config: Controller tuning. Defaults to :class:`ControllerConfig`.
    """

    def __init__(
        self,
        joints: JointState | None = None,
        gripper: GripperState | None = None,
        config: ControllerConfig | None = None,
    ) -> None:
        self._joints = joints if joints is not None else JointState()
        self._gripper = gripper if gripper is not None else GripperState()
        self._config = config or ControllerConfig()
        self._toggle_was_active = False
        self._quit_requested = False

    @property
    def joints(self) -> JointState:
        return self._joints

    @property
    def gripper(self) -> GripperState:
        return self._gripper

    @property
    def config(self) -> ControllerConfig:
        return self._config

    @property
    def quit_requested(self) -> bool:
        """True once a quit signal has been seen. The host decides what to do with it."""
        return self._quit_requested

    @property
    def gripper_target(self) -> float:
        return self._config.gripper_open_angle_deg if self._gripper.is_open else 0.0

    def tick(self, snapshot: InputSnapshot, dt: float) -> None:
        """Advance the joint and gripper state by *dt* seconds.

        Raises:
            ValueError: If *dt* is negative or not finite. No state is changed.
        """
        dt = validate_dt(dt)

        if snapshot.quit and not self._quit_requested:
            logger.info("Quit requested.")
            self._quit_requested = True

        self._rotate_joints(snapshot, dt)
        self._enforce_limits()
        self._handle_toggle(snapshot.gripper_toggle)
        self._animate_gripper(dt)

    def reset(self) -> None:
        """Return joints to zero and close the gripper."""
        j, g = self._joints, self._gripper
        j.base = j.shoulder = j.elbow = j.wrist_roll = 0.0
        g.is_open = False
        g.current_angle = 0.0
        self._toggle_was_active = False
        self._quit_requested = False

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _rotate_joints(self, s: InputSnapshot, dt: float) -> None:
        step = self._config.rotation_rate_deg_per_s * dt
        j = self._joints
        j.base += _direction(s.base_increase, s.base_decrease) * step
        j.shoulder += _direction(s.shoulder_increase, s.shoulder_decrease) * step
        j.elbow += _direction(s.elbow_increase, s.elbow_decrease) * step
        j.wrist_roll += _direction(s.wrist_roll_increase, s.wrist_roll_decrease) * step

    def _enforce_limits(self) -> None:
        cfg = self._config
        j = self._joints
        j.shoulder = float(np.clip(j.shoulder, *cfg.shoulder_limits_deg))
        j.elbow = float(np.clip(j.elbow, *cfg.elbow_limits_deg))

    def _handle_toggle(self, active: bool) -> None:
        # Flip on the rising edge only, so a level signal held across ticks
        # counts once. KeyboardInput already emits one isolated true per press.
        if active and not self._toggle_was_active:
            self._gripper.is_open = not self._gripper.is_open
            logger.debug("Gripper %s", self._gripper.label.lower())
        self._toggle_was_active = active

    def _animate_gripper(self, dt: float) -> None:
        g = self._gripper
        blend = min(1.0, self._config.gripper_lerp_rate * dt)
        g.current_angle += (self.gripper_target - g.current_angle) * blend
        g.current_angle = float(
            np.clip(g.current_angle, 0.0, self._config.gripper_open_angle_deg)
        )
