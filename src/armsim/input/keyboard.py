"""Keyboard state tracker that turns key events into input snapshots."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Set

from .snapshot import InputSnapshot

logger = logging.getLogger(__name__)

DEFAULT_KEY_BINDINGS: Dict[str, str] = {
    "q": "base_increase",
    "e": "base_decrease",
    "w": "shoulder_increase",
    "s": "shoulder_decrease",
    "a": "elbow_increase",
    "d": "elbow_decrease",
    "r": "wrist_roll_increase",
    "f": "wrist_roll_decrease",
    "x": "gripper_toggle",
    "up": "camera_up",
    "down": "camera_down",
    "left": "camera_left",
    "right": "camera_right",
    "pageup": "zoom_in",
    "pagedown": "zoom_out",
    "escape": "quit",
}

EDGE_SIGNALS = frozenset({"gripper_toggle"})


def normalize_key(key: str | None) -> str | None:
    """Lower-case a key name and drop a ``shift+`` prefix ("shift+Q" -> "q")."""
    if not key:
        return None
    key = key.lower()
    if key.startswith("shift+"):
        key = key[len("shift+"):]
    return key


class KeyboardInput:
    """Tracks held keys and pending presses between two snapshots.

    Key events may come from any thread; the held-key set is kept behind a lock
    and :meth:`snapshot` returns a consistent copy.  Held signals stay true for
    as long as their key is down.  Edge signals (the gripper toggle) are true
    in exactly one snapshot per press, however long the key is held, and two
    presses are always separated by a snapshot where the signal is false.

    Auto-repeat arrives either as extra presses (macOS, Windows) or as
    release/press pairs (X11).  A release followed by a press of the same key
    before the next snapshot is treated as repeat: the key stays held and no
    new edge is queued.  Releases are therefore applied to the held set only
    when the next snapshot is taken.

    Usage with matplotlib::

        keyboard = KeyboardInput()
        keyboard.connect(fig.canvas)
        snapshot = keyboard.snapshot()
    """

    def __init__(self, bindings: Dict[str, str] | None = None) -> None:
        self._bindings = dict(bindings or DEFAULT_KEY_BINDINGS)
        valid = set(InputSnapshot.signal_names())
        for key, signal in self._bindings.items():
            if signal not in valid:
                raise ValueError(f"Key '{key}' is bound to unknown signal '{signal}'")
        self._held: Set[str] = set()
        self._released: Set[str] = set()
        self._pending_edges: Set[str] = set()
        self._lock = threading.Lock()

    @property
    def bindings(self) -> Dict[str, str]:
        return dict(self._bindings)

    @property
    def held_keys(self) -> List[str]:
        with self._lock:
            return sorted(self._held)

    def press(self, key: str | None) -> None:
        key = normalize_key(key)
        if key is None:
            return
        signal = self._bindings.get(key)
        if signal is None:
            logger.debug("Ignoring unbound key '%s'", key)
            return
        with self._lock:
            if key in self._released:
                self._released.discard(key)
                return
            if key not in self._held and signal in EDGE_SIGNALS:
                self._pending_edges.add(signal)
            self._held.add(key)

    def release(self, key: str | None) -> None:
        key = normalize_key(key)
        if key is None:
            return
        with self._lock:
            if key in self._held:
                self._released.add(key)

    def on_key_press(self, event: Any) -> None:
        self.press(getattr(event, "key", None))

    def on_key_release(self, event: Any) -> None:
        self.release(getattr(event, "key", None))

    def connect(self, canvas: Any) -> List[int]:
        """Subscribe to a matplotlib canvas' key events. Returns the callback ids."""
        return [
            canvas.mpl_connect("key_press_event", self.on_key_press),
            canvas.mpl_connect("key_release_event", self.on_key_release),
        ]

    def clear(self) -> None:
        """Forget all held keys, e.g. after the window lost focus."""
        with self._lock:
            self._held.clear()
            self._released.clear()
            self._pending_edges.clear()

    def snapshot(self) -> InputSnapshot:
        """Sample the current input, then apply releases and consume pending edges."""
        with self._lock:
            down = self._held - self._released
            active = {self._bindings[k] for k in down if self._bindings[k] not in EDGE_SIGNALS}
            active |= self._pending_edges
            self._held -= self._released
            self._released = set()
            self._pending_edges = set()
        return InputSnapshot(**{name: True for name in active})
