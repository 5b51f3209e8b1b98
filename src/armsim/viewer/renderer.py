from typing import List

import numpy as np
from mpl_toolkits.mplot3d import Axes3D
from mpl_toolkits.mplot3d.art3d import Line3D

from armsim.config.arm_config import GripperGeometry, ViewerConfig
from armsim.session import Frame

from . import scene


class ArmRenderer:
    """Draws frames of the arm on a matplotlib 3D axes.

    Static scenery (grid, world axes) is drawn once in the constructor; the
    arm artists are created once and only have their data replaced by
    :meth:`draw`.
    """

    def __init__(
        self,
        ax: Axes3D,
        viewer_config: ViewerConfig | None = None,
        gripper_geometry: GripperGeometry | None = None,
    ) -> None:
        self._ax = ax
        self._cfg = viewer_config or ViewerConfig()
        self._geometry = gripper_geometry or GripperGeometry()

        self._setup_axes()
        self._draw_static()

        self._links: List[Line3D] = [
            ax.plot([], [], [], color=c, linewidth=6, solid_capstyle="round")[0]
            for c in scene.LINK_COLORS
        ]
        (self._joints,) = ax.plot(
            [], [], [], linestyle="", marker="o", markersize=10, color=scene.JOINT_COLOR
        )
        (self._palm,) = ax.plot([], [], [], color=scene.GRIPPER_COLOR, linewidth=8)
        self._fingers: List[Line3D] = [
            ax.plot([], [], [], color=scene.FINGER_COLOR, linewidth=4)[0] for _ in range(4)
        ]

    @property
    def ax(self) -> Axes3D:
        return self._ax

    def draw(self, frame: Frame) -> List[Line3D]:
        """Update the arm artists from *frame* and return them."""
        segments = frame.pose.link_segments()
        for line, segment in zip(self._links, segments):
            self._set_segment(line, segment)

        # the base anchor is drawn as the platform, not as a joint marker
        joints = scene.to_plot_coords(frame.pose.joint_positions()[1:])
        self._joints.set_data_3d(joints[:, 0], joints[:, 1], joints[:, 2])

        palm, fingers = scene.gripper_segments(frame.gripper_frames, self._geometry)
        self._set_segment(self._palm, palm)
        for line, segment in zip(self._fingers, fingers):
            self._set_segment(line, segment)

        self._apply_camera(frame)
        return [*self._links, self._joints, self._palm, *self._fingers]

    def _setup_axes(self) -> None:
        ax = self._ax
        ax.set_facecolor(scene.BACKGROUND_COLOR)
        ax.figure.set_facecolor(scene.BACKGROUND_COLOR)
        ax.set_axis_off()
        ax.set_box_aspect((1.0, 1.0, 1.0))

    def _draw_static(self) -> None:
        ax = self._ax
        for segment in scene.ground_grid_segments(self._cfg.grid_half_extent):
            self._plot_segment(segment, color=scene.GRID_COLOR, linewidth=0.5)
        for start, end, color in scene.axis_segments(self._cfg.axis_length):
            self._plot_segment((start, end), color=color, linewidth=2)
        base = scene.to_plot_coords(np.zeros(3))
        ax.plot(
            [base[0]], [base[1]], [base[2]],
            marker="o", markersize=18, color=scene.BASE_COLOR,
        )

    def _plot_segment(self, segment: scene.Segment, **kwargs) -> None:
        pts = scene.to_plot_coords(np.array(segment))
        self._ax.plot(pts[:, 0], pts[:, 1], pts[:, 2], **kwargs)

    @staticmethod
    def _set_segment(line: Line3D, segment: scene.Segment) -> None:
        pts = scene.to_plot_coords(np.array(segment))
        line.set_data_3d(pts[:, 0], pts[:, 1], pts[:, 2])

    def _apply_camera(self, frame: Frame) -> None:
        self._ax.view_init(elev=frame.camera_elevation, azim=frame.camera_azimuth)
        xlim, ylim, zlim = scene.view_limits(frame.camera_distance)
        self._ax.set_xlim(*xlim)
        self._ax.set_ylim(*ylim)
        self._ax.set_zlim(*zlim)
