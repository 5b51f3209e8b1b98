from .arm_config import (
    ArmSimConfig,
    CameraConfig,
    ControllerConfig,
    GripperGeometry,
    LinkSpec,
    ViewerConfig,
)

__all__ = [
    "ArmSimConfig",
    "CameraConfig",
    "ControllerConfig",
    "GripperGeometry",
    "LinkSpec",
    "ViewerConfig",
]
