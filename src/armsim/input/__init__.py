"""Input device modules."""

from .keyboard import DEFAULT_KEY_BINDINGS, KeyboardInput
from .snapshot import InputSnapshot

__all__ = ["DEFAULT_KEY_BINDINGS", "InputSnapshot", "KeyboardInput"]
