import logging
import time
from typing import Any, Dict

import pygame

from stride_core import Host, IncapacitationFlags
from stride_helper import Color, Vec3, forward_vector, normalize_heading
from stride_ui.KeyTracker import KeyTracker
from stride_ui.Renderer import Renderer
from stride_ui.SimulatedActor import SimulatedActor, SteeringTask

INCAPACITATION_TOGGLES = {
    "toggle_dead": "dead",
    "toggle_dying": "dying",
    "toggle_hogtied": "hogtied",
    "toggle_cuffed": "cuffed",
}


class PygameHost(Host):
    """
    Capability surface backed by pygame input and a simulated local actor.

    `begin_frame` polls the keyboard and applies manual walking and camera
    turning, `end_frame` advances the actor's steering task.
    """

    def __init__(
        self,
        actor: SimulatedActor,
        renderer: Renderer,
        settings: Any
    ) -> None:
        self.actor = actor
        self.renderer = renderer

        self.keyboard: Dict[str, int] = settings.get("controls", {}).get("keyboard", {})
        sandbox = settings.get("sandbox", {})
        self.walk_speed = sandbox.get("walk_speed", 2.0)
        self.camera_turn_rate = sandbox.get("camera_turn_rate", 120.0)
        self.mouse_sensitivity = sandbox.get("mouse_sensitivity", 0.3)

        self.keys = KeyTracker(self.keyboard.values())
        self.camera_heading = 0.0
        self._start = time.monotonic()

    def begin_frame(self, dt: float) -> None:
        self.keys.update(pygame.key.get_pressed())

        for control, flag in INCAPACITATION_TOGGLES.items():
            if self._just_pressed(control):
                self.actor.toggle_flag(flag)

        turn = 0.0
        if self._pressed("camera_left"):
            turn += 1.0
        if self._pressed("camera_right"):
            turn -= 1.0
        self.rotate_camera(turn * self.camera_turn_rate * dt)

        self.actor.walk(self._walk_direction(), self._pressed("sprint"), self.walk_speed, dt)

    def end_frame(self, dt: float) -> None:
        self.actor.step(self.walk_speed, dt)

    def rotate_camera(self, degrees: float) -> None:
        self.camera_heading = normalize_heading(self.camera_heading + degrees)

    def handle_mouse_motion(self, dx: int) -> None:
        # Dragging right turns the camera clockwise on screen
        self.rotate_camera(-dx * self.mouse_sensitivity)

    # Input
    def query_pressed(self, control: int) -> bool:
        return self.keys.is_pressed(control)

    def query_just_pressed(self, control: int) -> bool:
        return self.keys.just_pressed(control)

    # Actor
    def get_local_actor_id(self) -> int:
        return self.actor.actor_id

    def get_position(self, actor: int) -> Vec3:
        x, y, z = self.actor.position
        return (x, y, z)

    def get_heading(self, actor: int) -> float:
        return self.actor.heading

    def is_sprinting(self, actor: int) -> bool:
        return self.actor.sprinting

    def get_incapacitation(self, actor: int) -> IncapacitationFlags:
        return self.actor.incapacitation

    def get_camera_heading(self) -> float:
        return self.camera_heading

    # Movement
    def set_max_move_speed_ratio(self, actor: int, ratio: float) -> None:
        self.actor.max_move_ratio = ratio

    def move_toward(self, actor: int, target: Vec3, speed: float, facing: float) -> None:
        if self.actor.task is None:
            logging.debug(f"Steering task started toward {target}")

        self.actor.task = SteeringTask(target=target, speed=speed, facing=facing)

    def clear_movement_task(self, actor: int) -> None:
        self.actor.task = None

    # Drawing
    def draw_centered_text(self, text: str) -> None:
        self.renderer.draw_centered_text(text)

    def draw_progress_bar(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        progress: float,
        color: Color
    ) -> None:
        self.renderer.draw_progress_bar(x, y, width, height, progress, color)

    # Time
    def now(self) -> int:
        return int((time.monotonic() - self._start) * 1000)

    def _pressed(self, control: str) -> bool:
        key = self.keyboard.get(control)
        return key is not None and self.keys.is_pressed(key)

    def _just_pressed(self, control: str) -> bool:
        key = self.keyboard.get(control)
        return key is not None and self.keys.just_pressed(key)

    def _walk_direction(self) -> tuple[float, float]:
        forward_x, forward_y = forward_vector(self.camera_heading)
        # Heading grows counter-clockwise on screen, so -90° is to the right
        right_x, right_y = forward_vector(self.camera_heading - 90.0)

        dx = dy = 0.0
        if self._pressed("walk_forward"):
            dx += forward_x
            dy += forward_y
        if self._pressed("walk_backward"):
            dx -= forward_x
            dy -= forward_y
        if self._pressed("walk_right"):
            dx += right_x
            dy += right_y
        if self._pressed("walk_left"):
            dx -= right_x
            dy -= right_y

        return (dx, dy)
