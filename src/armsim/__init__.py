"""armsim: interactive forward kinematics of a 4-DOF robot arm.

The core is :class:`armsim.control.JointController` (input to joint angles) and
:func:`armsim.kinematics.evaluate` (joint angles to pose).
:class:`armsim.session.ArmSession` runs both once per tick.
"""

from .config import ArmSimConfig, LinkSpec
from .control import GripperState, JointController, JointState
from .input import InputSnapshot
from .kinematics import Pose, evaluate
from .session import ArmSession, Frame, format_status

__version__ = "0.1.0"

__all__ = [
    "ArmSession",
    "ArmSimConfig",
    "Frame",
    "GripperState",
    "InputSnapshot",
    "JointController",
    "JointState",
    "LinkSpec",
    "Pose",
    "evaluate",
    "format_status",
]
