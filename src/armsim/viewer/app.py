"""Interactive matplotlib window driving an :class:`ArmSession`."""

from __future__ import annotations

import time
from logging import getLogger
from typing import Any, Dict, List

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from armsim.config.arm_config import ArmSimConfig
from armsim.input.keyboard import KeyboardInput
from armsim.session import ArmSession, Frame, format_status

from .renderer import ArmRenderer

logger = getLogger(__name__)


def release_default_keymaps(keys: List[str]) -> Dict[str, List[str]]:
    """Remove *keys* from matplotlib's built-in shortcuts (save, fullscreen, ...).

    Returns the previous value of every changed ``keymap.*`` entry, to be
    handed back to :func:`restore_keymaps`.
    """
    previous = {}
    for name, bound in list(matplotlib.rcParams.items()):
        if not name.startswith("keymap."):
            continue
        kept = [k for k in bound if k.lower() not in keys]
        if len(kept) != len(bound):
            previous[name] = list(bound)
            matplotlib.rcParams[name] = kept
    return previous


def restore_keymaps(previous: Dict[str, List[str]]) -> None:
    for name, bound in previous.items():
        matplotlib.rcParams[name] = bound


class ArmViewer:
    """Real-time window: key events in, one session step per timer tick, redraw.

    Elapsed time between ticks is measured and capped at
    ``ViewerConfig.max_frame_time`` so a stalled window does not produce a
    single huge step.

    Args:
        session: Session to drive. A new one built from *config* by default.
        config: Configuration used when *session* is not given.
        keyboard: Key tracker. A :class:`KeyboardInput` with default bindings by default.
    """

    def __init__(
        self,
        session: ArmSession | None = None,
        config: ArmSimConfig | None = None,
        keyboard: KeyboardInput | None = None,
    ) -> None:
        self._session = session or ArmSession(config)
        self._cfg = self._session.config.viewer
        self._keyboard = keyboard or KeyboardInput()

        self._saved_keymaps = release_default_keymaps(list(self._keyboard.bindings))
        self._fig = plt.figure(figsize=self._cfg.figsize)
        self._ax = self._fig.add_subplot(projection="3d")
        self._renderer = ArmRenderer(self._ax, self._cfg, self._session.config.gripper)
        self._status = self._fig.text(
            0.01, 0.01, "", color="white", fontsize=8, family="monospace"
        )

        self._keyboard.connect(self._fig.canvas)
        self._fig.canvas.mpl_connect("figure_leave_event", self._on_leave)
        self._fig.canvas.mpl_connect("close_event", self._on_close)

        self._animation: FuncAnimation | None = None
        self._last_time: float | None = None
        self._closed = False
        self.render(self._session.frame)

    @property
    def session(self) -> ArmSession:
        return self._session

    @property
    def figure(self) -> Any:
        return self._fig

    @property
    def is_closed(self) -> bool:
        return self._closed

    def run(self) -> None:
        """Start the timer and block until the window is closed."""
        interval_ms = 1000.0 / self._cfg.fps
        self._last_time = time.perf_counter()
        self._animation = FuncAnimation(
            self._fig, self.update, interval=interval_ms, cache_frame_data=False
        )
        logger.info("Viewer started at %d fps.", self._cfg.fps)
        plt.show()
        logger.info("Viewer stopped after %d ticks.", self._session.frame.tick)

    def update(self, _frame_index: int | None = None) -> list:
        """Timer callback: advance the session by the measured elapsed time."""
        now = time.perf_counter()
        last = self._last_time if self._last_time is not None else now
        dt = min(max(0.0, now - last), self._cfg.max_frame_time)
        self._last_time = now
        return self.step(dt)

    def step(self, dt: float) -> list:
        """Advance the session by *dt* seconds with the current keyboard snapshot."""
        frame = self._session.step(self._keyboard.snapshot(), dt)
        artists = self.render(frame)
        if frame.quit_requested:
            self.close()
        return artists

    def render(self, frame: Frame) -> list:
        artists = self._renderer.draw(frame)
        status = format_status(frame)
        self._status.set_text(status)
        manager = self._fig.canvas.manager
        if manager is not None:
            manager.set_window_title(f"{self._cfg.window_title} | {status}")
        return [*artists, self._status]

    def close(self) -> None:
        if self._closed:
            return
        if self._animation is not None and self._animation.event_source is not None:
            self._animation.event_source.stop()
        plt.close(self._fig)
        self._finish()

    def _on_leave(self, _event: Any) -> None:
        # key releases are lost while the pointer is outside the window
        self._keyboard.clear()

    def _on_close(self, _event: Any) -> None:
        if self._animation is not None and self._animation.event_source is not None:
            self._animation.event_source.stop()
        self._finish()

    def _finish(self) -> None:
        if not self._closed:
            restore_keymaps(self._saved_keymaps)
        self._closed = True

