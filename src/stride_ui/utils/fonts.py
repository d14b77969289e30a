import pygame
from pygame.freetype import Font

pygame.freetype.init()


def _load_font(size: int) -> Font:
    """Load pygame's bundled default font."""
    return Font(None, size)


HUD_FONT = _load_font(22)
SMALL_FONT = _load_font(14)
