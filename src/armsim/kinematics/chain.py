"""Serial chain of the 4-DOF arm and its forward kinematics."""

from dataclasses import dataclass
from typing import List

import numpy as np
from numpy.typing import NDArray

from armsim.config.arm_config import LinkSpec
from armsim.control.state import JointState

from .pose import Anchor, Pose
from .transforms import AXES, rotation, translation


@dataclass(frozen=True)
class RevoluteJoint:
    """A single revolute joint in the chain.

    Attributes:
        name: Joint name, one of ``armsim.control.state.JOINT_NAMES``.
        anchor: Name of the anchor marked before the joint rotates.
        offset: 4x4 static transform from the parent frame to this joint's
            rotation centre (the link leading into the joint).
        axis: Local rotation axis: "x" (lateral) or "y" (vertical).
    """

    name: str
    anchor: str
    offset: NDArray[np.float64]
    axis: str

    def __post_init__(self) -> None:
        if self.axis not in AXES:
            raise ValueError(f"axis must be 'x', 'y', or 'z', got '{self.axis}'")


class ArmChain:
    """Forward kinematics of the base / shoulder / elbow / wrist-roll arm.

    Every step post-multiplies the running frame, so each rotation acts about
    the local axis of the frame it is applied to and carries all later links
    with it::

        T = Ry(base) . Ty(l1) . Rx(shoulder) . Ty(l2) . Rx(elbow) . Ty(l3) . Ry(wrist_roll)

    The wrist roll turns about the forearm's own vertical axis, so it changes the
    gripper's orientation but never the end-effector position.
    """

    def __init__(self, links: LinkSpec) -> None:
        self._links = links
        self._joints = [
            RevoluteJoint("base", "base", np.eye(4), "y"),
            RevoluteJoint("shoulder", "shoulder", translation(0.0, links.l1, 0.0), "x"),
            RevoluteJoint("elbow", "elbow", translation(0.0, links.l2, 0.0), "x"),
            RevoluteJoint("wrist_roll", "wrist", translation(0.0, links.l3, 0.0), "y"),
        ]

    @property
    def links(self) -> LinkSpec:
        return self._links

    @property
    def n_joints(self) -> int:
        return len(self._joints)

    @property
    def joint_names(self) -> List[str]:
        return [j.name for j in self._joints]

    def anchors(self, joint_angles_deg: NDArray[np.float64]) -> List[Anchor]:
        """Compose the chain and return every anchor in order.

        Args:
            joint_angles_deg: (4,) array [base, shoulder, elbow, wrist_roll] in degrees.
        """
        if len(joint_angles_deg) != self.n_joints:
            raise ValueError(
                f"Expected {self.n_joints} joint angles, got {len(joint_angles_deg)}"
            )

        T = np.eye(4)
        anchors = []
        for joint, angle in zip(self._joints, joint_angles_deg):
            T = T @ joint.offset
            anchors.append(Anchor(joint.anchor, T.copy()))
            T = T @ rotation(joint.axis, float(angle))
        anchors.append(Anchor("end_effector", T.copy()))
        return anchors

    def forward_kinematics_matrix(
        self, joint_angles_deg: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        """4x4 world transform of the end-effector frame."""
        return self.anchors(joint_angles_deg)[-1].transform

    def evaluate(self, joints: JointState) -> Pose:
        return Pose.from_anchors(self.anchors(joints.as_array()))


def evaluate(joints: JointState, links: LinkSpec) -> Pose:
    """Derive the pose of the arm from its joint angles and link lengths.

    Pure function: reads *joints* without modifying it and allocates a new
    :class:`Pose` on every call.
    """
    return ArmChain(links).evaluate(joints)

