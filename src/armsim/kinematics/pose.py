"""Derived arm pose produced by the chain evaluator."""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from .transforms import position_of


@dataclass(frozen=True)
class Anchor:
    """A named frame along the chain.

    Attributes:
        name: Anchor name ("base", "shoulder", "elbow", "wrist", "end_effector").
        transform: 4x4 world transform of the frame at this point of the composition.
    """

    name: str
    transform: NDArray[np.float64]

    @property
    def position(self) -> NDArray[np.float64]:
        return position_of(self.transform)


@dataclass(frozen=True)
class Pose:
    """Pose of the arm for one tick.

    Attributes:
        anchors: Anchors in composition order, base first, end-effector last.
        end_effector_transform: 4x4 world transform of the end-effector frame.
        end_effector_position: (x, y, z) of the end-effector in world coordinates.
        reach: Euclidean distance of the end-effector from the world origin.
    """

    anchors: Tuple[Anchor, ...]
    end_effector_transform: NDArray[np.float64]
    end_effector_position: Tuple[float, float, float]
    reach: float

    @classmethod
    def from_anchors(cls, anchors: List[Anchor]) -> "Pose":
        if not anchors:
            raise ValueError("A pose needs at least one anchor")
        ee = anchors[-1].transform.copy()
        x, y, z = (float(v) for v in position_of(ee))
        return cls(
            anchors=tuple(anchors),
            end_effector_transform=ee,
            end_effector_position=(x, y, z),
            reach=float(np.sqrt(x * x + y * y + z * z)),
        )

    @property
    def anchor_names(self) -> List[str]:
        return [a.name for a in self.anchors]

    def anchor(self, name: str) -> Anchor:
        for a in self.anchors:
            if a.name == name:
                return a
        raise KeyError(f"No anchor named '{name}'")

    def joint_positions(self) -> NDArray[np.float64]:
        """(n_anchors, 3) array of anchor positions in composition order."""
        return np.array([a.transform[:3, 3] for a in self.anchors])

    def link_segments(self) -> List[Tuple[NDArray[np.float64], NDArray[np.float64]]]:
        """Start and end point of every link, skipping anchors that share a position."""
        segments = []
        points = self.joint_positions()
        for start, end in zip(points[:-1], points[1:]):
            if np.allclose(start, end):
                continue
            segments.append((start, end))
        return segments

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.end_effector_transform)) and np.isfinite(self.reach))
