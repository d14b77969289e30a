from typing import Iterable, Sequence, Set


class KeyTracker:
    """
    Polls held keys once per frame and derives edge-triggered presses.

    A key is "just pressed" only on the first frame it is seen held.
    """

    def __init__(self, keys: Iterable[int]) -> None:
        self.keys = set(keys)
        self.held: Set[int] = set()
        self.pressed_this_frame: Set[int] = set()

    def update(self, pressed_keys: Sequence[bool]) -> None:
        previous = self.held
        self.held = {key for key in self.keys if pressed_keys[key]}
        self.pressed_this_frame = self.held - previous

    def is_pressed(self, key: int) -> bool:
        return key in self.held

    def just_pressed(self, key: int) -> bool:
        return key in self.pressed_this_frame

    def __repr__(self) -> str:
        return f"<KeyTracker(held={sorted(self.held)}, pressed={sorted(self.pressed_this_frame)})>"
