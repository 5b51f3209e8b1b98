from dataclasses import dataclass, fields
from typing import List


@dataclass(frozen=True)
class InputSnapshot:
    """Input signals sampled once per tick.

    Every field except ``gripper_toggle`` is a held state: true for as long as
    the control is down. ``gripper_toggle`` is true on the tick a press is
    first seen.
    """

    base_increase: bool = False
    base_decrease: bool = False
    shoulder_increase: bool = False
    shoulder_decrease: bool = False
    elbow_increase: bool = False
    elbow_decrease: bool = False
    wrist_roll_increase: bool = False
    wrist_roll_decrease: bool = False
    camera_up: bool = False
    camera_down: bool = False
    camera_left: bool = False
    camera_right: bool = False
    zoom_in: bool = False
    zoom_out: bool = False
    quit: bool = False
    gripper_toggle: bool = False

    @classmethod
    def idle(cls) -> "InputSnapshot":
        return cls()

    @classmethod
    def signal_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def active(self) -> List[str]:
        """Names of the signals that are on in this snapshot."""
        return [name for name in self.signal_names() if getattr(self, name)]
