from stride_helper.helper import (
  clamp,
  forward_vector,
  heading_towards,
  normalize_heading,
)
from stride_helper.custom_types import (
  ActorHandle,
  Color,
  Control,
  Vec3,
)

__all__ = [
  "clamp",
  "forward_vector",
  "heading_towards",
  "normalize_heading",
  "ActorHandle",
  "Color",
  "Control",
  "Vec3",
]
