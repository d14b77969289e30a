import logging

import pygame

from stride_core import MovementConfig, MovementController
from stride_ui.Init import Init
from stride_ui.PygameHost import PygameHost
from stride_ui.Renderer import Renderer
from stride_ui.Settings import Settings
from stride_ui.SimulatedActor import SimulatedActor
from stride_ui.utils.helpers import strip_color_markup


class AppState:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

        # Rejects invalid tunables before any window is opened
        self.config = MovementConfig.from_settings(settings)
        self.config.validate()

        video = settings.get("video", {})
        self.size = (video.get("width", 1280), video.get("height", 720))
        self.fullscreen = video.get("fullscreen", False)
        self.main_loop_fps = settings.get("timing", {}).get("main_loop_fps", 60)
        self.title = settings.get("settings", {}).get("title", "STRIDE")

        self.screen, self.clock = Init.ui(self.size, self.title, self.fullscreen)

        sandbox = settings.get("sandbox", {})
        self.renderer = Renderer(self.screen, sandbox.get("pixels_per_unit", 12.0))
        self.actor = SimulatedActor()
        self.host = PygameHost(self.actor, self.renderer, settings)
        self.controller = MovementController(self.config, self.host)

        self.running = True
        self.dt = 0.0

    def handle_events(self) -> bool:
        """
        Handle pygame events. Returns False if application should quit.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                return False

            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                self.host.handle_mouse_motion(event.rel[0])

        return True

    def update(self) -> None:
        self.host.begin_frame(self.dt)

        self.renderer.begin()
        self.renderer.draw_world(self.actor, self.host.camera_heading)
        self.renderer.draw_status(self._status_lines())

        self.controller.update()

        self.host.end_frame(self.dt)

    def render(self) -> None:
        pygame.display.flip()

    def tick(self) -> None:
        self.dt = self.clock.tick(self.main_loop_fps) / 1000.0

    def shutdown(self) -> None:
        logging.info("Shutting down")
        pygame.quit()

    def _status_lines(self) -> tuple[str, ...]:
        x, y, _ = self.actor.position
        flags = self.actor.incapacitation
        active = [name for name in ("dead", "dying", "hogtied", "cuffed") if getattr(flags, name)]

        return (
            f"FPS: {self.clock.get_fps():.1f}",
            f"Pos: x={x:.1f} y={y:.1f}  Heading: {self.actor.heading:.0f}  Camera: {self.host.camera_heading:.0f}",
            f"Auto-run: {self.controller.auto_run.state.value}  Ratio: {self.actor.max_move_ratio:.1f}",
            f"Flags: {', '.join(active) if active else 'none'}",
            strip_color_markup(self.controller.display.speed_label()),
        )
