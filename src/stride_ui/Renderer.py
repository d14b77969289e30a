from typing import Tuple

import pygame

from stride_helper import Color, forward_vector
from stride_ui.SimulatedActor import SimulatedActor
from stride_ui.utils.colors import BLACK, BLUE, DARK_GREY, GOLD, GREY, LIGHT_GREY, RED, WHITE
from stride_ui.utils.fonts import HUD_FONT, SMALL_FONT
from stride_ui.utils.helpers import normalized_rect, parse_color_markup


class Renderer:
    """
    Draws the sandbox world and the HUD elements requested by the core.

    HUD coordinates are normalized (0..1) and resolution independent.
    """
    TEXT_POSITION = (0.5, 0.95)
    TEXT_ALPHA = 215
    BAR_BACKGROUND = (50, 50, 50, 150)
    GRID_SPACING = 5.0

    def __init__(self, screen: pygame.Surface, pixels_per_unit: float = 12.0) -> None:
        self.screen = screen
        self.pixels_per_unit = pixels_per_unit

    def begin(self) -> None:
        self.screen.fill(DARK_GREY)

    def draw_world(self, actor: SimulatedActor, camera_heading: float) -> None:
        center = self._center()
        self._draw_grid(actor)

        # Steering target
        if actor.task is not None:
            target = self._to_screen(actor.task.target, actor)
            pygame.draw.line(self.screen, GOLD, center, target, 1)
            pygame.draw.circle(self.screen, GOLD, target, 4)

        # Camera direction
        self._draw_ray(center, camera_heading, 60, BLUE)

        color = RED if actor.incapacitation.incapacitated else WHITE
        pygame.draw.circle(self.screen, color, center, 8)
        self._draw_ray(center, actor.heading, 16, color, width=3)

    def draw_status(self, lines: Tuple[str, ...]) -> None:
        y = 10
        for line in lines:
            surface, rect = SMALL_FONT.render(line, LIGHT_GREY)
            self.screen.blit(surface, (10, y))
            y += rect.height + 4

    def draw_centered_text(
        self,
        text: str,
        position: Tuple[float, float] = TEXT_POSITION
    ) -> None:
        segments = [
            (HUD_FONT.render(chunk, color), HUD_FONT.render(chunk, BLACK))
            for color, chunk in parse_color_markup(text)
        ]
        if not segments:
            return

        rects = [rendered[1] for rendered, _ in segments]
        total_width = sum(rect.width for rect in rects)
        # Rect.y is the distance from the baseline to the top of the glyphs
        ascent = max(rect.y for rect in rects)
        height = ascent + max(rect.height - rect.y for rect in rects)

        width, screen_height = self.screen.get_size()
        x = int(position[0] * width - total_width / 2)
        y = int(position[1] * screen_height - height / 2)

        for (surface, rect), (shadow, _) in segments:
            surface.set_alpha(self.TEXT_ALPHA)
            top = y + ascent - rect.y
            self.screen.blit(shadow, (x + 1, top + 1))
            self.screen.blit(surface, (x, top))
            x += rect.width

    def draw_progress_bar(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        progress: float,
        color: Color
    ) -> None:
        left, top, bar_width, bar_height = normalized_rect(x, y, width, height, self.screen.get_size())

        background = pygame.Surface((bar_width, bar_height), pygame.SRCALPHA)
        background.fill(self.BAR_BACKGROUND)
        self.screen.blit(background, (left, top))

        # Fill is anchored to the left edge of the background
        fill_width = int(bar_width * progress)
        if fill_width > 0:
            fill = pygame.Surface((fill_width, bar_height), pygame.SRCALPHA)
            fill.fill(color)
            self.screen.blit(fill, (left, top))

    def _center(self) -> Tuple[int, int]:
        width, height = self.screen.get_size()
        return (width // 2, height // 2)

    def _to_screen(self, point, actor: SimulatedActor) -> Tuple[int, int]:
        """World (x, y) to pixels, view centered on the actor with +Y up."""
        cx, cy = self._center()
        dx = (point[0] - actor.position[0]) * self.pixels_per_unit
        dy = (point[1] - actor.position[1]) * self.pixels_per_unit

        return (int(cx + dx), int(cy - dy))

    def _draw_ray(
        self,
        origin: Tuple[int, int],
        heading: float,
        length: int,
        color: Tuple[int, int, int],
        width: int = 1
    ) -> None:
        forward_x, forward_y = forward_vector(heading)
        end = (int(origin[0] + forward_x * length), int(origin[1] - forward_y * length))
        pygame.draw.line(self.screen, color, origin, end, width)

    def _draw_grid(self, actor: SimulatedActor) -> None:
        width, height = self.screen.get_size()
        spacing = self.GRID_SPACING * self.pixels_per_unit
        offset_x = (-actor.position[0] * self.pixels_per_unit + width / 2) % spacing
        offset_y = (actor.position[1] * self.pixels_per_unit + height / 2) % spacing

        x = offset_x
        while x < width:
            pygame.draw.line(self.screen, GREY, (int(x), 0), (int(x), height))
            x += spacing

        y = offset_y
        while y < height:
            pygame.draw.line(self.screen, GREY, (0, int(y)), (width, int(y)))
            y += spacing
