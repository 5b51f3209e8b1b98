"""One simulation tick: input, joint control, pose derivation."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger

from armsim.config.arm_config import ArmSimConfig
from armsim.control.camera import CameraRig
from armsim.control.joint_controller import JointController
from armsim.control.state import GripperState, JointState
from armsim.input.snapshot import InputSnapshot
from armsim.kinematics.chain import ArmChain
from armsim.kinematics.gripper import GripperFrames, gripper_frames
from armsim.kinematics.pose import Pose

logger = getLogger(__name__)

CONTROL_LEGEND = (
    "Controls: Q/E(Base) W/S(Shoulder) A/D(Elbow) R/F(Wrist Roll) "
    "X(Gripper) Arrows(Camera) PgUp/PgDn(Zoom) Esc(Quit)"
)


@dataclass(frozen=True)
class Frame:
    """Everything the renderer and status line need for one tick.

    The joint and gripper values are copies, so a frame stays consistent even
    if the session keeps ticking while it is being drawn.
    """

    tick: int
    joints: JointState
    gripper: GripperState
    pose: Pose
    gripper_frames: GripperFrames
    camera_elevation: float
    camera_azimuth: float
    camera_distance: float
    quit_requested: bool


def format_status(frame: Frame) -> str:
    """Human-readable status line for the window title."""
    x, y, z = frame.pose.end_effector_position
    return (
        f"X: {x:.2f} Y: {y:.2f} Z: {z:.2f} | "
        f"Reach: {frame.pose.reach:.2f} | "
        f"Gripper: {frame.gripper.label} | "
        f"Wrist Roll: {frame.joints.wrist_roll:.1f}° | "
        f"{CONTROL_LEGEND}"
    )


class ArmSession:
    """Owns the arm state and advances it one tick at a time.

    ``step`` runs the controller, then derives the pose from the updated
    joints, and returns both as a single :class:`Frame`.
    """

    def __init__(self, config: ArmSimConfig | None = None) -> None:
        self._config = config or ArmSimConfig()
        self._controller = JointController(config=self._config.controller)
        self._camera = CameraRig.from_config(self._config.camera)
        self._chain = ArmChain(self._config.links)
        self._tick = 0
        self._frame = self._make_frame()

    @property
    def config(self) -> ArmSimConfig:
        return self._config

    @property
    def controller(self) -> JointController:
        return self._controller

    @property
    def camera(self) -> CameraRig:
        return self._camera

    @property
    def frame(self) -> Frame:
        """Frame produced by the latest step (or the initial pose)."""
        return self._frame

    @property
    def quit_requested(self) -> bool:
        return self._controller.quit_requested

    def step(self, snapshot: InputSnapshot, dt: float) -> Frame:
        """Apply *snapshot* for *dt* seconds and derive the new frame.

        Raises:
            ValueError: If *dt* is negative or not finite.
            ArithmeticError: If the derived pose is not finite.
        """
        self._controller.tick(snapshot, dt)
        self._camera.tick(snapshot, dt)
        self._tick += 1
        self._frame = self._make_frame()
        return self._frame

    def reset(self) -> Frame:
        self._controller.reset()
        self._camera.reset()
        self._tick = 0
        self._frame = self._make_frame()
        logger.info("Session reset.")
        return self._frame

    def _make_frame(self) -> Frame:
        joints = self._controller.joints.copy()
        gripper = self._controller.gripper.copy()
        pose = self._chain.evaluate(joints)
        if not pose.is_finite():
            raise ArithmeticError(
                f"Non-finite pose at tick {self._tick} for joints {joints.as_array()}"
            )
        return Frame(
            tick=self._tick,
            joints=joints,
            gripper=gripper,
            pose=pose,
            gripper_frames=gripper_frames(
                pose.end_effector_transform, gripper.current_angle, self._config.gripper
            ),
            camera_elevation=self._camera.elevation,
            camera_azimuth=self._camera.azimuth,
            camera_distance=self._camera.distance,
            quit_requested=self._controller.quit_requested,
        )
