import math
from typing import Tuple


def clamp(raw: float, min_val: float, max_val: float) -> float:
    lower = min(min_val, max_val)
    upper = max(min_val, max_val)
    clamped = max(lower, min(upper, raw))

    return clamped


def forward_vector(heading: float) -> Tuple[float, float]:
    """
    Unit vector on the horizontal plane for a heading in degrees.

    0° points along +Y and X grows clockwise, so 90° is (-1, 0).
    """
    rad = math.radians(heading)

    return (-math.sin(rad), math.cos(rad))


def heading_towards(dx: float, dy: float) -> float:
    """Inverse of `forward_vector`, result in [0, 360)."""
    return math.degrees(math.atan2(-dx, dy)) % 360.0


def normalize_heading(heading: float) -> float:
    return heading % 360.0
