"""Orbit camera driven by the arrow and zoom keys."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from armsim.config.arm_config import CameraConfig
from armsim.input.snapshot import InputSnapshot

from .joint_controller import validate_dt


@dataclass
class CameraRig:
    """View parameters combined with the arm pose only when drawing.

    Attributes:
        elevation: Tilt above the ground plane in degrees.
        azimuth: Rotation around the vertical axis in degrees.
        distance: Distance from the look-at point, kept within the configured range.
    """

    elevation: float
    azimuth: float
    distance: float
    config: CameraConfig

    @classmethod
    def from_config(cls, config: CameraConfig | None = None) -> "CameraRig":
        config = config or CameraConfig()
        return cls(
            elevation=config.initial_elevation_deg,
            azimuth=config.initial_azimuth_deg,
            distance=config.initial_distance,
            config=config,
        )

    def tick(self, snapshot: InputSnapshot, dt: float) -> None:
        dt = validate_dt(dt)
        cfg = self.config
        orbit = cfg.orbit_rate_deg_per_s * dt
        zoom = cfg.zoom_rate_per_s * dt

        self.elevation += (float(snapshot.camera_up) - float(snapshot.camera_down)) * orbit
        self.azimuth += (float(snapshot.camera_left) - float(snapshot.camera_right)) * orbit
        # zoom in moves the camera closer
        self.distance += (float(snapshot.zoom_out) - float(snapshot.zoom_in)) * zoom
        self.distance = float(np.clip(self.distance, cfg.min_distance, cfg.max_distance))

    def reset(self) -> None:
        self.elevation = self.config.initial_elevation_deg
        self.azimuth = self.config.initial_azimuth_deg
        self.distance = self.config.initial_distance
