import logging
from typing import Callable, Optional, Sequence

from stride_core.MovementConfig import SpeedConfig, SpeedIndicator

# Adjustments are rounded so repeated increments land exactly on the bounds
SPEED_PRECISION = 6


class SpeedModel:
    """
    Owns the current on-foot speed and whether the host still has to be told
    about it.
    """

    def __init__(
        self,
        config: SpeedConfig,
        indicators: Sequence[SpeedIndicator],
        on_change: Optional[Callable[[], None]] = None
    ) -> None:
        self.config = config
        self.indicators = tuple(indicators)
        self.on_change = on_change

        self.current_speed: float = config.default_speed
        self.changed: bool = False

    def adjust(self, delta: float) -> bool:
        """
        Apply `current_speed + delta` if the result stays within bounds.

        Returns False and leaves the state untouched otherwise.
        """
        new_speed = round(self.current_speed + delta, SPEED_PRECISION)
        if self.config.min_speed <= new_speed <= self.config.max_speed:
            self._apply(new_speed, changed=True)
            return True

        logging.debug(f"Ignoring speed adjustment to {new_speed}")
        return False

    def set_exact(self, speed: float) -> None:
        if not self.config.min_speed <= speed <= self.config.max_speed:
            raise ValueError(
                f"Speed {speed} outside of [{self.config.min_speed}, {self.config.max_speed}]"
            )

        self._apply(speed, changed=True)

    def reset(self) -> None:
        """
        Return to the default speed without scheduling a push to the host.

        The host keeps whatever ratio it was given last until another change
        is pushed.
        """
        self._apply(self.config.default_speed, changed=False)

    def mark_pushed(self) -> None:
        self.changed = False

    def speed_fraction_of(self, speed: float) -> float:
        return (speed - self.config.min_speed) / (self.config.max_speed - self.config.min_speed)

    def indicator_text(self) -> str:
        fraction = self.speed_fraction_of(self.current_speed)
        for indicator in self.indicators:
            if fraction <= indicator.threshold:
                return indicator.text

        return self.indicators[-1].text

    def _apply(self, speed: float, changed: bool) -> None:
        self.current_speed = speed
        self.changed = changed

        if self.on_change:
            self.on_change()

    def __repr__(self) -> str:
        return (f"<SpeedModel(current_speed={self.current_speed:.2f}, changed={self.changed}, "
                f"range=({self.config.min_speed}, {self.config.max_speed}))>")
