from .camera import CameraRig
from .joint_controller import JointController
from .state import JOINT_NAMES, GripperState, JointState

__all__ = ["CameraRig", "GripperState", "JOINT_NAMES", "JointController", "JointState"]
