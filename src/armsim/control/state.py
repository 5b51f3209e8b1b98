"""Mutable joint and gripper state owned by the joint controller."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

JOINT_NAMES = ("base", "shoulder", "elbow", "wrist_roll")


@dataclass
class JointState:
    """Joint angles of the arm in degrees.

    Attributes:
        base: Rotation of the column about the vertical axis. Unbounded.
        shoulder: Shoulder pitch about the lateral axis, kept within its limits.
        elbow: Elbow pitch about the lateral axis, kept within its limits.
        wrist_roll: Roll of the gripper about the forearm axis. Unbounded.
    """

    base: float = 0.0
    shoulder: float = 0.0
    elbow: float = 0.0
    wrist_roll: float = 0.0

    def as_array(self) -> NDArray[np.float64]:
        """Return (4,) array [base, shoulder, elbow, wrist_roll] in degrees."""
        return np.array([self.base, self.shoulder, self.elbow, self.wrist_roll])

    def copy(self) -> "JointState":
        return JointState(self.base, self.shoulder, self.elbow, self.wrist_roll)


@dataclass
class GripperState:
    """Open/close intent and animated finger angle of the gripper.

    Attributes:
        is_open: Target the fingers are moving toward.
        current_angle: Finger angle in degrees, 0 when fully closed.
    """

    is_open: bool = False
    current_angle: float = 0.0

    @property
    def label(self) -> str:
        return "Open" if self.is_open else "Closed"

    def copy(self) -> "GripperState":
        return GripperState(self.is_open, self.current_angle)
