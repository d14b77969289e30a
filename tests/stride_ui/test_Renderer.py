import os
os.environ["SDL_VIDEODRIVER"] = "dummy"

import unittest

import pygame

from stride_core import IncapacitationFlags
from stride_ui.Renderer import Renderer
from stride_ui.SimulatedActor import SimulatedActor, SteeringTask
from stride_ui.utils.colors import BLACK, RED, WHITE


class TestRenderer(unittest.TestCase):
    def setUp(self):
        self.screen = pygame.Surface((200, 100))
        self.screen.fill(BLACK)
        self.renderer = Renderer(self.screen, pixels_per_unit=10.0)

    def pixel(self, x, y):
        return tuple(self.screen.get_at((x, y)))[:3]

    def lit_pixels(self):
        width, height = self.screen.get_size()
        return sum(
            1
            for x in range(width)
            for y in range(height)
            if self.pixel(x, y) != BLACK
        )

    def test_progress_bar_fill_is_left_anchored(self):
        self.renderer.draw_progress_bar(0.5, 0.5, 0.5, 0.2, 0.5, (255, 0, 0, 255))

        # Bar spans x 50..150, y 40..60
        self.assertEqual(self.pixel(60, 50), (255, 0, 0))
        self.assertNotEqual(self.pixel(120, 50), (255, 0, 0))
        self.assertNotEqual(self.pixel(120, 50), BLACK)
        self.assertEqual(self.pixel(20, 50), BLACK)

    def test_empty_progress_draws_background_only(self):
        self.renderer.draw_progress_bar(0.5, 0.5, 0.5, 0.2, 0.0, (255, 0, 0, 255))

        self.assertNotEqual(self.pixel(60, 50), (255, 0, 0))
        self.assertNotEqual(self.pixel(60, 50), BLACK)

    def test_centered_text_draws_something(self):
        self.renderer.draw_centered_text("~COLOR_GREEN~Speed~COLOR_WHITE~ 1.0", (0.5, 0.5))

        self.assertGreater(self.lit_pixels(), 0)

    def test_empty_text_draws_nothing(self):
        self.renderer.draw_centered_text("", (0.5, 0.5))
        self.renderer.draw_centered_text("~COLOR_RED~", (0.5, 0.5))

        self.assertEqual(self.lit_pixels(), 0)

    def test_world_marks_actor_at_center(self):
        actor = SimulatedActor()
        actor.task = SteeringTask(target=(0.0, 4.0, 0.0), speed=1.0, facing=0.0)

        self.renderer.begin()
        self.renderer.draw_world(actor, 90.0)

        self.assertEqual(self.pixel(100, 50), WHITE)

    def test_incapacitated_actor_drawn_red(self):
        actor = SimulatedActor(incapacitation=IncapacitationFlags(dead=True))

        self.renderer.draw_world(actor, 0.0)

        self.assertEqual(self.pixel(100, 50), RED)

    def test_status_lines(self):
        self.renderer.draw_status(("FPS: 60.0", "Flags: none"))

        self.assertGreater(self.lit_pixels(), 0)


if __name__ == "__main__":
    unittest.main()
