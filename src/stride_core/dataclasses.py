"""Per-frame value types shared by the core and the hosts."""
from dataclasses import dataclass, field
from typing import FrozenSet

from stride_helper import Color, Control, Vec3


@dataclass(frozen=True)
class IncapacitationFlags:
    """Actor conditions that interrupt auto-run."""
    dead: bool = False
    dying: bool = False
    hogtied: bool = False
    cuffed: bool = False

    @property
    def incapacitated(self) -> bool:
        return self.dead or self.dying or self.hogtied or self.cuffed


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the core reads from the host during a single frame."""
    now: int
    position: Vec3 = (0.0, 0.0, 0.0)
    heading: float = 0.0
    camera_heading: float = 0.0
    sprinting: bool = False
    incapacitation: IncapacitationFlags = field(default_factory=IncapacitationFlags)
    pressed: FrozenSet[Control] = frozenset()
    just_pressed: FrozenSet[Control] = frozenset()

    @property
    def incapacitated(self) -> bool:
        return self.incapacitation.incapacitated

    def is_pressed(self, control: Control) -> bool:
        return control in self.pressed

    def was_just_pressed(self, control: Control) -> bool:
        return control in self.just_pressed


@dataclass(frozen=True)
class ChargeBar:
    """Progress bar parameters in normalized screen coordinates (0..1)."""
    progress: float
    color: Color
    x: float
    y: float
    width: float
    height: float
