"""Projection of speed and auto-run state onto what the host should draw."""
from typing import Callable, Optional

from stride_core.AutoRunController import AutoRunController
from stride_core.dataclasses import ChargeBar
from stride_core.MovementConfig import AutoRunConfig, DisplayConfig
from stride_core.SpeedModel import SpeedModel


class DisplayState:
    def __init__(
        self,
        config: DisplayConfig,
        auto_run_config: AutoRunConfig,
        speed_model: SpeedModel,
        auto_run: AutoRunController,
        clock: Callable[[], int]
    ) -> None:
        """
        Args:
            config: Display tunables (readout duration, indicator texts)
            auto_run_config: Charge bar geometry and colour
            speed_model: Source of the current speed and indicator text
            auto_run: Source of the auto-run lifecycle state
            clock: Monotonic millisecond clock, usually `Host.now`
        """
        self.config = config
        self.auto_run_config = auto_run_config
        self.speed_model = speed_model
        self.auto_run = auto_run
        self.clock = clock

        self.hide_after: int = 0

    def refresh(self, duration_ms: Optional[int] = None) -> None:
        if duration_ms is None:
            duration_ms = self.config.display_time

        self.hide_after = self.clock() + duration_ms

    def should_show_speed_text(self) -> bool:
        return self.clock() < self.hide_after or self.auto_run.is_active

    def speed_label(self) -> str:
        prefix = self.config.auto_run_prefix if self.auto_run.is_active else ""

        return f"{prefix}Speed: {self.speed_model.current_speed:.1f} {self.speed_model.indicator_text()}"

    def charge_bar_params(self) -> Optional[ChargeBar]:
        if not self.auto_run.is_charging:
            return None

        x, y = self.auto_run_config.bar_position
        width, height = self.auto_run_config.bar_size

        return ChargeBar(
            progress=self.auto_run.charge_progress,
            color=self.auto_run_config.bar_color,
            x=x,
            y=y,
            width=width,
            height=height,
        )
