"""Local actor of the sandbox: position, heading and a single steering task."""
from dataclasses import dataclass, field, replace
import logging
import math
from typing import List, Optional, Tuple

from stride_core import IncapacitationFlags
from stride_helper import Vec3, heading_towards

# Blend ratio the actor uses when walking or sprinting by hand
WALK_RATIO = 1.0
SPRINT_RATIO = 3.0


@dataclass
class SteeringTask:
    target: Vec3
    speed: float
    facing: float


@dataclass
class SimulatedActor:
    actor_id: int = 1
    position: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    heading: float = 0.0
    max_move_ratio: float = 1.0
    sprinting: bool = False
    incapacitation: IncapacitationFlags = field(default_factory=IncapacitationFlags)
    task: Optional[SteeringTask] = None

    def toggle_flag(self, name: str) -> None:
        value = not getattr(self.incapacitation, name)
        self.incapacitation = replace(self.incapacitation, **{name: value})
        logging.info(f"Actor {name} set to {value}")

    def walk(
        self,
        direction: Tuple[float, float],
        sprint: bool,
        unit_speed: float,
        dt: float
    ) -> None:
        """
        Move by hand along `direction`, ignored while a steering task runs.
        """
        self.sprinting = False
        if self.task is not None or self.incapacitation.incapacitated:
            return

        dx, dy = direction
        length = math.hypot(dx, dy)
        if length == 0.0:
            return

        ratio = min(SPRINT_RATIO if sprint else WALK_RATIO, self.max_move_ratio)
        distance = ratio * unit_speed * dt
        self.position[0] += dx / length * distance
        self.position[1] += dy / length * distance
        self.heading = heading_towards(dx, dy)
        self.sprinting = sprint

    def step(self, unit_speed: float, dt: float) -> None:
        """Advance the steering task, if any, by one frame."""
        if self.task is None or self.incapacitation.incapacitated:
            return

        dx = self.task.target[0] - self.position[0]
        dy = self.task.target[1] - self.position[1]
        remaining = math.hypot(dx, dy)
        distance = self.task.speed * unit_speed * dt

        if remaining <= distance:
            self.position[0], self.position[1] = self.task.target[0], self.task.target[1]
            self.task = None
        else:
            self.position[0] += dx / remaining * distance
            self.position[1] += dy / remaining * distance
            self.heading = self.task.facing
