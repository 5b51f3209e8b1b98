"""Finger frames of the two-finger gripper."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from armsim.config.arm_config import GripperGeometry

from .transforms import rotation, translation


@dataclass(frozen=True)
class GripperFrames:
    """World transforms of the gripper parts.

    Finger and tip transforms sit at the centre of their box, with the box's
    long side along the local Y axis.
    """

    palm: NDArray[np.float64]
    left_finger: NDArray[np.float64]
    left_tip: NDArray[np.float64]
    right_finger: NDArray[np.float64]
    right_tip: NDArray[np.float64]

    def fingertip_gap(self) -> float:
        """Distance between the centres of the two fingertips."""
        return float(np.linalg.norm(self.left_tip[:3, 3] - self.right_tip[:3, 3]))


def _finger(
    palm_top: NDArray[np.float64], side: float, angle_deg: float, geometry: GripperGeometry
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    # side is -1 for the left finger and +1 for the right one.
    # Opening swings each finger away from the centre line about local Z.
    finger = (
        palm_top
        @ rotation("z", -side * angle_deg)
        @ translation(side * geometry.finger_offset, geometry.finger_length / 2.0, 0.0)
    )
    tip = (
        finger
        @ translation(0.0, geometry.finger_length / 2.0, 0.0)
        @ rotation("z", side * geometry.tip_bend_deg)
        @ translation(0.0, geometry.tip_length / 2.0, 0.0)
    )
    return finger, tip


def gripper_frames(
    end_effector: NDArray[np.float64],
    angle_deg: float,
    geometry: GripperGeometry | None = None,
) -> GripperFrames:
    """Place the palm and both fingers on the end-effector frame.

    Args:
        end_effector: 4x4 world transform of the end-effector.
        angle_deg: Current finger opening angle (0 = closed).
        geometry: Gripper dimensions. Defaults to :class:`GripperGeometry`.
    """
    geometry = geometry or GripperGeometry()
    palm_top = end_effector @ translation(0.0, geometry.palm_height, 0.0)
    left_finger, left_tip = _finger(palm_top, -1.0, angle_deg, geometry)
    right_finger, right_tip = _finger(palm_top, 1.0, angle_deg, geometry)
    return GripperFrames(
        palm=end_effector.copy(),
        left_finger=left_finger,
        left_tip=left_tip,
        right_finger=right_finger,
        right_tip=right_tip,
    )
