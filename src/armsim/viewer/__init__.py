"""Matplotlib front-end: 3D scene rendering and the interactive window."""

from .app import ArmViewer
from .renderer import ArmRenderer

__all__ = ["ArmRenderer", "ArmViewer"]
