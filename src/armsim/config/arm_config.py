import math
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class LinkSpec:
    """Fixed link lengths of the arm.

    Attributes:
        l1: Base to shoulder length (vertical column).
        l2: Shoulder to elbow length (upper arm).
        l3: Elbow to wrist length (forearm).
    """

    l1: float = 2.0
    l2: float = 1.5
    l3: float = 1.0

    def __post_init__(self) -> None:
        for name in ("l1", "l2", "l3"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(f"{name} must be a positive finite length, got {value}")

    @property
    def total_length(self) -> float:
        return self.l1 + self.l2 + self.l3


@dataclass
class ControllerConfig:
    """Tuning parameters of the joint controller.

    Attributes:
        rotation_rate_deg_per_s: Angular velocity of a joint while its key is held.
        gripper_lerp_rate: Rate constant of the gripper's exponential approach (1/s).
        gripper_open_angle_deg: Finger angle when the gripper is fully open.
        shoulder_limits_deg: (lower, upper) bound of the shoulder joint.
        elbow_limits_deg: (lower, upper) bound of the elbow joint.
    """

    rotation_rate_deg_per_s: float = 60.0
    gripper_lerp_rate: float = 5.0
    gripper_open_angle_deg: float = 30.0
    shoulder_limits_deg: Tuple[float, float] = (-90.0, 90.0)
    elbow_limits_deg: Tuple[float, float] = (-90.0, 90.0)

    def __post_init__(self) -> None:
        for name in ("shoulder_limits_deg", "elbow_limits_deg"):
            lower, upper = getattr(self, name)
            if lower > upper:
                raise ValueError(f"{name} lower bound {lower} exceeds upper bound {upper}")


@dataclass
class CameraConfig:
    """Orbit camera parameters.

    Attributes:
        initial_elevation_deg: Tilt of the view above the ground plane.
        initial_azimuth_deg: Rotation of the view around the vertical axis.
        initial_distance: Distance from the camera to the look-at point.
        orbit_rate_deg_per_s: Orbit speed while an arrow key is held.
        zoom_rate_per_s: Distance change per second while a zoom key is held.
        min_distance: Closest allowed camera distance.
        max_distance: Farthest allowed camera distance.
    """

    initial_elevation_deg: float = 20.0
    initial_azimuth_deg: float = 45.0
    initial_distance: float = 10.0
    orbit_rate_deg_per_s: float = 30.0
    zoom_rate_per_s: float = 5.0
    min_distance: float = 5.0
    max_distance: float = 20.0


@dataclass(frozen=True)
class GripperGeometry:
    """Dimensions of the two-finger gripper mounted at the end-effector.

    Attributes:
        palm_height: Height of the palm cylinder above the wrist anchor.
        finger_offset: Lateral offset of each finger from the palm centre.
        finger_length: Length of the straight finger segment.
        tip_bend_deg: Inward bend of the fingertip segment.
        tip_length: Length of the fingertip segment.
    """

    palm_height: float = 0.2
    finger_offset: float = 0.1
    finger_length: float = 0.4
    tip_bend_deg: float = 30.0
    tip_length: float = 0.2


@dataclass
class ViewerConfig:
    """Window and scene settings of the interactive viewer."""

    fps: int = 60
    max_frame_time: float = 0.1
    grid_half_extent: int = 10
    axis_length: float = 2.0
    window_title: str = "4 DOF Robot Arm"
    figsize: Tuple[float, float] = (9.0, 8.0)


@dataclass
class ArmSimConfig:
    links: LinkSpec = field(default_factory=LinkSpec)
    controller: ControllerConfig = field(default_factory=ControllerConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    gripper: GripperGeometry = field(default_factory=GripperGeometry)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)
