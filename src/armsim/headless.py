"""Run a session without a window and summarise the result."""

from __future__ import annotations

from logging import getLogger
from typing import Callable

from rich.console import Console
from rich.table import Table

from armsim.input.snapshot import InputSnapshot
from armsim.kinematics.transforms import normalize_deg
from armsim.session import ArmSession, Frame, format_status

logger = getLogger(__name__)

InputScript = Callable[[float], InputSnapshot]


def demo_script(t: float) -> InputSnapshot:
    """Scripted input: raise the shoulder, bend the elbow, swing the base, open the gripper."""
    return InputSnapshot(
        shoulder_increase=t < 1.0,
        elbow_decrease=0.5 <= t < 1.25,
        base_increase=1.0 <= t < 2.5,
        wrist_roll_increase=2.0 <= t < 3.0,
        gripper_toggle=1.5 <= t < 1.6,
    )


def run_headless(
    session: ArmSession,
    seconds: float,
    fps: int,
    script: InputScript = demo_script,
) -> Frame:
    """Step *session* at a fixed *fps* for *seconds* of simulated time.

    Stops early when the script requests quit.
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    if fps <= 0:
        raise ValueError("fps must be greater than 0.")

    dt = 1.0 / fps
    n_ticks = int(round(seconds * fps))
    frame = session.frame
    for i in range(n_ticks):
        frame = session.step(script(i / fps), dt)
        if frame.quit_requested:
            logger.info("Headless run stopped by quit request at tick %d.", frame.tick)
            break
    logger.info("Headless run finished: %d ticks.", frame.tick)
    return frame


def summary_table(frame: Frame) -> Table:
    table = Table(title=f"Arm state after {frame.tick} ticks")
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", justify="right", style="magenta")

    joints = frame.joints
    table.add_row("Base (deg)", f"{normalize_deg(joints.base):.1f}")
    table.add_row("Shoulder (deg)", f"{joints.shoulder:.1f}")
    table.add_row("Elbow (deg)", f"{joints.elbow:.1f}")
    table.add_row("Wrist roll (deg)", f"{normalize_deg(joints.wrist_roll):.1f}")
    x, y, z = frame.pose.end_effector_position
    table.add_row("End-effector", f"({x:.2f}, {y:.2f}, {z:.2f})")
    table.add_row("Reach", f"{frame.pose.reach:.2f}")
    table.add_row("Gripper", f"{frame.gripper.label} ({frame.gripper.current_angle:.1f} deg)")
    return table


def print_summary(frame: Frame, console: Console | None = None) -> None:
    console = console or Console()
    console.print(summary_table(frame))
    console.print(format_status(frame), highlight=False)
