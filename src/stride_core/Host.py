"""
Capability surface the movement core calls into.

Hosts wrap their engine's input, actor, camera, steering and drawing
primitives behind this interface. Every call is synchronous and is made from
within the frame tick.
"""
from abc import ABC, abstractmethod

from stride_helper import ActorHandle, Color, Control, Vec3
from stride_core.dataclasses import IncapacitationFlags


class Host(ABC):
    # Input
    @abstractmethod
    def query_pressed(self, control: Control) -> bool:
        pass

    @abstractmethod
    def query_just_pressed(self, control: Control) -> bool:
        pass

    # Actor
    @abstractmethod
    def get_local_actor_id(self) -> ActorHandle:
        pass

    @abstractmethod
    def get_position(self, actor: ActorHandle) -> Vec3:
        pass

    @abstractmethod
    def get_heading(self, actor: ActorHandle) -> float:
        pass

    @abstractmethod
    def is_sprinting(self, actor: ActorHandle) -> bool:
        pass

    @abstractmethod
    def get_incapacitation(self, actor: ActorHandle) -> IncapacitationFlags:
        pass

    @abstractmethod
    def get_camera_heading(self) -> float:
        pass

    # Movement
    @abstractmethod
    def set_max_move_speed_ratio(self, actor: ActorHandle, ratio: float) -> None:
        pass

    @abstractmethod
    def move_toward(
        self,
        actor: ActorHandle,
        target: Vec3,
        speed: float,
        facing: float
    ) -> None:
        """
        Issue or continue a steering command toward `target`.

        Re-issued every frame while auto-run is active, so implementations
        must treat repeated calls as an update of the running command.
        """
        pass

    @abstractmethod
    def clear_movement_task(self, actor: ActorHandle) -> None:
        pass

    # Drawing
    @abstractmethod
    def draw_centered_text(self, text: str) -> None:
        pass

    @abstractmethod
    def draw_progress_bar(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        progress: float,
        color: Color
    ) -> None:
        pass

    # Time
    @abstractmethod
    def now(self) -> int:
        """Monotonic milliseconds."""
        pass
