"""Plain geometry for the viewer: grid, axes, link and gripper segments.

World coordinates are Y-up (the arm's vertical axis).  Matplotlib's 3D axes
are Z-up, so everything passes through :func:`to_plot_coords` before drawing.
"""

from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from armsim.config.arm_config import GripperGeometry
from armsim.kinematics.gripper import GripperFrames
from armsim.kinematics.transforms import transform_point

Segment = Tuple[NDArray[np.float64], NDArray[np.float64]]
Color = Tuple[float, float, float]

GRID_COLOR: Color = (0.3, 0.3, 0.3)
BASE_COLOR: Color = (0.5, 0.5, 0.5)
JOINT_COLOR: Color = (0.6, 0.6, 0.6)
LINK_COLORS: Tuple[Color, ...] = ((0.8, 0.2, 0.2), (0.2, 0.8, 0.2), (0.2, 0.2, 0.8))
GRIPPER_COLOR: Color = (0.9, 0.9, 0.1)
FINGER_COLOR: Color = (0.8, 0.8, 0.1)
BACKGROUND_COLOR: Color = (0.1, 0.1, 0.15)

# Look-at point of the orbit camera, in world coordinates.
LOOK_AT = np.array([0.0, 2.0, 0.0])


def to_plot_coords(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Rotate Y-up world points into matplotlib's Z-up frame: (x, y, z) -> (x, -z, y)."""
    p = np.asarray(points, dtype=np.float64)
    return np.stack([p[..., 0], -p[..., 2], p[..., 1]], axis=-1)


def ground_grid_segments(half_extent: int) -> List[Segment]:
    """Unit grid on the y=0 plane spanning [-half_extent, half_extent] on x and z."""
    n = float(half_extent)
    segments = []
    for i in range(-half_extent, half_extent + 1):
        segments.append((np.array([i, 0.0, -n]), np.array([i, 0.0, n])))
        segments.append((np.array([-n, 0.0, i]), np.array([n, 0.0, i])))
    return segments


def axis_segments(length: float) -> List[Tuple[NDArray[np.float64], NDArray[np.float64], Color]]:
    """World X (red), Y (green) and Z (blue) axes starting at the origin."""
    origin = np.zeros(3)
    return [
        (origin, np.array([length, 0.0, 0.0]), (1.0, 0.0, 0.0)),
        (origin, np.array([0.0, length, 0.0]), (0.0, 1.0, 0.0)),
        (origin, np.array([0.0, 0.0, length]), (0.0, 0.0, 1.0)),
    ]


def _along_y(T: NDArray[np.float64], length: float) -> Segment:
    half = length / 2.0
    return transform_point(T, (0.0, -half, 0.0)), transform_point(T, (0.0, half, 0.0))


def gripper_segments(
    frames: GripperFrames, geometry: GripperGeometry
) -> Tuple[Segment, List[Segment]]:
    """Palm segment and the four finger segments (left, left tip, right, right tip)."""
    palm = (
        transform_point(frames.palm, (0.0, 0.0, 0.0)),
        transform_point(frames.palm, (0.0, geometry.palm_height, 0.0)),
    )
    fingers = [
        _along_y(frames.left_finger, geometry.finger_length),
        _along_y(frames.left_tip, geometry.tip_length),
        _along_y(frames.right_finger, geometry.finger_length),
        _along_y(frames.right_tip, geometry.tip_length),
    ]
    return palm, fingers


def view_limits(distance: float) -> Tuple[Tuple[float, float], ...]:
    """Axis limits (plot x, plot y, plot z) of a cube around the look-at point.

    The cube grows with the camera distance, which zooms the view.
    """
    half = 0.45 * distance
    cx, cy, cz = to_plot_coords(LOOK_AT)
    return (cx - half, cx + half), (cy - half, cy + half), (cz - half, cz + half)
