"""Homogeneous transform and angle helpers (numpy, degrees at the API)."""

import numpy as np
from numpy.typing import NDArray

AXES = ("x", "y", "z")


def rotation(axis: str, angle_deg: float) -> NDArray[np.float64]:
    """4x4 right-handed rotation about a principal axis. angle in degrees."""
    if axis not in AXES:
        raise ValueError(f"axis must be 'x', 'y', or 'z', got '{axis}'")
    theta = np.deg2rad(angle_deg)
    c, s = np.cos(theta), np.sin(theta)
    T = np.eye(4)
    if axis == "x":
        T[1:3, 1:3] = [[c, -s], [s, c]]
    elif axis == "y":
        T[0, 0], T[0, 2] = c, s
        T[2, 0], T[2, 2] = -s, c
    else:
        T[0:2, 0:2] = [[c, -s], [s, c]]
    return T


def translation(x: float, y: float, z: float) -> NDArray[np.float64]:
    """4x4 pure translation matrix."""
    T = np.eye(4)
    T[:3, 3] = (x, y, z)
    return T


def position_of(T: NDArray[np.float64]) -> NDArray[np.float64]:
    """Translation component of a 4x4 transform as a (3,) array."""
    if T.shape != (4, 4):
        raise ValueError(f"Expected a 4x4 transform, got shape {T.shape}")
    return T[:3, 3].copy()


def transform_point(T: NDArray[np.float64], point: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map a 3D point from the local frame of *T* into its parent frame."""
    p = np.append(np.asarray(point, dtype=np.float64), 1.0)
    return (T @ p)[:3]


def is_rigid(T: NDArray[np.float64], atol: float = 1e-9) -> bool:
    """True when *T* is a proper rigid transform (orthonormal, det +1, last row 0 0 0 1)."""
    R = T[:3, :3]
    return bool(
        np.allclose(R @ R.T, np.eye(3), atol=atol)
        and abs(np.linalg.det(R) - 1.0) < atol
        and np.allclose(T[3], [0.0, 0.0, 0.0, 1.0], atol=atol)
    )


def normalize_deg(angle_deg: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = float(angle_deg) % 360.0
    # -1e-17 % 360 rounds up to 360.0
    return 0.0 if wrapped == 360.0 else wrapped


def angles_equivalent(a_deg: float, b_deg: float, atol: float = 1e-9) -> bool:
    """Compare two angles modulo 360 degrees."""
    diff = (float(a_deg) - float(b_deg) + 180.0) % 360.0 - 180.0
    return abs(diff) <= atol
