"""Kinematics module for armsim: forward kinematics of the 4-DOF arm."""

from .chain import ArmChain, RevoluteJoint, evaluate
from .gripper import GripperFrames, gripper_frames
from .pose import Anchor, Pose

__all__ = [
    "Anchor",
    "ArmChain",
    "GripperFrames",
    "Pose",
    "RevoluteJoint",
    "evaluate",
    "gripper_frames",
]
