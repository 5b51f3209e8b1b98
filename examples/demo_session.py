#!/usr/bin/env python3
"""Demo script stepping the arm without a window.

Sweeps the shoulder up, opens the gripper and spins the base while printing
the status line, so the pose math can be watched from a terminal.
Press Ctrl+C to stop.

Usage:
    python examples/demo_session.py
"""

from __future__ import annotations

import time
from logging import INFO, basicConfig

from armsim import ArmSession, InputSnapshot, format_status

basicConfig(level=INFO)

FPS = 60


def main() -> None:
    """Run the session demo."""
    session = ArmSession()
    dt = 1.0 / FPS
    print("Arm session demo")
    print("=" * 60)

    try:
        tick = 0
        while True:
            t = tick * dt
            phase = int(t) % 4
            snapshot = InputSnapshot(
                shoulder_increase=phase == 0,
                shoulder_decrease=phase == 2,
                base_increase=phase in (1, 3),
                gripper_toggle=t % 2.0 < dt,
            )
            frame = session.step(snapshot, dt)
            print(f"\r{format_status(frame)[:70]}", end="", flush=True)
            tick += 1
            time.sleep(dt)

    except KeyboardInterrupt:
        print("\n\nStopping demo...")

    finally:
        print(f"Demo finished after {session.frame.tick} ticks.")


if __name__ == "__main__":
    main()
