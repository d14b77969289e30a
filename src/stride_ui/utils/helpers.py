import logging
import re
from typing import List, Tuple

from stride_ui.utils.colors import MARKUP_COLORS, WHITE

_MARKUP_PATTERN = re.compile(r"~([A-Z_]+)~")


def parse_color_markup(
    text: str,
    default: Tuple[int, int, int] = WHITE
) -> List[Tuple[Tuple[int, int, int], str]]:
    """
    Split `~COLOR_<NAME>~` markup into (color, text) segments.

    Unknown tokens are dropped, empty segments are skipped.

    >>> parse_color_markup("~COLOR_RED~A~COLOR_WHITE~B")
    [((224, 50, 50), 'A'), ((255, 255, 255), 'B')]
    """
    segments = []
    color = default
    position = 0

    for match in _MARKUP_PATTERN.finditer(text):
        if match.start() > position:
            segments.append((color, text[position:match.start()]))

        token = match.group(1)
        name = token.removeprefix("COLOR_")
        if token.startswith("COLOR_") and name in MARKUP_COLORS:
            color = MARKUP_COLORS[name]
        else:
            logging.debug(f"Ignoring unknown markup token: {token}")

        position = match.end()

    if position < len(text):
        segments.append((color, text[position:]))

    return segments


def strip_color_markup(text: str) -> str:
    return "".join(segment for _, segment in parse_color_markup(text))


def normalized_rect(
    x: float,
    y: float,
    width: float,
    height: float,
    screen_size: Tuple[int, int]
) -> Tuple[int, int, int, int]:
    """
    Convert a rect centered at normalized (x, y) into pixel (left, top, w, h).
    """
    screen_width, screen_height = screen_size
    pixel_width = int(width * screen_width)
    pixel_height = int(height * screen_height)
    left = int(x * screen_width - pixel_width / 2)
    top = int(y * screen_height - pixel_height / 2)

    return (left, top, pixel_width, pixel_height)
