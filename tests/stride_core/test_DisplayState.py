"""Tests for DisplayState - speed readout visibility, label and charge bar."""
import unittest
from unittest.mock import MagicMock, Mock

from stride_core import (
    AutoRunConfig,
    AutoRunController,
    ChargeBar,
    ControlBindings,
    DisplayConfig,
    DisplayState,
    FrameSnapshot,
    Host,
    SpeedConfig,
    SpeedModel,
)
from stride_core.MovementConfig import DEFAULT_SPEED_INDICATORS

CONTROLS = ControlBindings(
    sprint="sprint",
    increase_speed="up",
    decrease_speed="down",
    reset_speed="reset",
    max_speed="max",
    min_speed="min",
    toggle_auto_run="toggle",
    cancel_auto_run="cancel",
    lock_camera="lock",
)


class TestDisplayState(unittest.TestCase):
    def setUp(self):
        self.clock = Mock(return_value=1000)
        self.speed_model = SpeedModel(SpeedConfig(), DEFAULT_SPEED_INDICATORS)
        self.auto_run = AutoRunController(AutoRunConfig(), CONTROLS, self.speed_model, MagicMock(spec=Host))
        self.display = DisplayState(
            DisplayConfig(),
            AutoRunConfig(),
            self.speed_model,
            self.auto_run,
            self.clock
        )
        self.speed_model.on_change = self.display.refresh

    def _charge(self, start, now):
        self.auto_run.update_charge(FrameSnapshot(now=start, pressed=frozenset(["toggle"]), sprinting=True))
        self.auto_run.update_charge(FrameSnapshot(now=now, pressed=frozenset(["toggle"]), sprinting=True))

    def test_hidden_initially(self):
        self.assertFalse(self.display.should_show_speed_text())

    def test_refresh_shows_text_for_display_time(self):
        self.display.refresh()
        self.assertEqual(self.display.hide_after, 3000)

        self.clock.return_value = 2999
        self.assertTrue(self.display.should_show_speed_text())

        self.clock.return_value = 3000
        self.assertFalse(self.display.should_show_speed_text())

    def test_refresh_with_custom_duration(self):
        self.display.refresh(500)
        self.assertEqual(self.display.hide_after, 1500)

    def test_speed_change_refreshes_timer(self):
        self.speed_model.adjust(0.1)
        self.assertEqual(self.display.hide_after, 3000)

    def test_always_shown_while_active(self):
        self._charge(0, 2000)
        self.auto_run.activate_if_charged(FrameSnapshot(now=2000))

        self.clock.return_value = 100000
        self.assertTrue(self.display.should_show_speed_text())

    def test_speed_label_without_auto_run(self):
        self.assertEqual(
            self.display.speed_label(),
            "Speed: 1.0 ~COLOR_GREEN~+~COLOR_WHITE~++++"
        )

    def test_speed_label_with_auto_run_prefix(self):
        self._charge(0, 2000)
        self.auto_run.activate_if_charged(FrameSnapshot(now=2000))

        label = self.display.speed_label()
        self.assertTrue(label.startswith("~COLOR_GOLD~[AUTO-RUN]~COLOR_WHITE~Speed: 1.6 "))
        self.assertTrue(label.endswith(self.speed_model.indicator_text()))

    def test_speed_label_rounds_to_one_decimal(self):
        self.speed_model.set_exact(2.96)
        self.assertIn("Speed: 3.0 ", self.display.speed_label())

    def test_no_charge_bar_when_idle(self):
        self.assertIsNone(self.display.charge_bar_params())

    def test_charge_bar_while_charging(self):
        self._charge(0, 1000)

        bar = self.display.charge_bar_params()

        self.assertEqual(bar, ChargeBar(
            progress=0.5,
            color=(255, 165, 0, 200),
            x=0.5,
            y=0.75,
            width=0.2,
            height=0.02,
        ))

    def test_no_charge_bar_once_active(self):
        self._charge(0, 2000)
        self.auto_run.activate_if_charged(FrameSnapshot(now=2000))

        self.assertIsNone(self.display.charge_bar_params())


if __name__ == "__main__":
    unittest.main()
