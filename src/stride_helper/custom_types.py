from typing import Hashable, Tuple

Vec3 = Tuple[float, float, float]
Color = Tuple[int, int, int, int]

# Opaque control identifier, a pygame key code in the sandbox host
Control = Hashable
ActorHandle = Hashable
