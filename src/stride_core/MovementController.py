"""Per-frame orchestration of speed, auto-run and display."""
import logging

from stride_helper import ActorHandle
from stride_core.AutoRunController import AutoRunController
from stride_core.DisplayState import DisplayState
from stride_core.dataclasses import FrameSnapshot
from stride_core.Host import Host
from stride_core.MovementConfig import MovementConfig
from stride_core.SpeedModel import SpeedModel


class MovementController:
    """
    Constructed once by the host and ticked once per rendered frame.

    Frame order: sample inputs, update charge, update auto-run, push the
    speed if it changed, draw, then handle manual speed controls.
    """

    def __init__(self, config: MovementConfig, host: Host) -> None:
        config.validate()

        self.config = config
        self.host = host
        self.controls = config.controls

        self.speed_model = SpeedModel(config.speed, config.display.speed_indicators)
        self.auto_run = AutoRunController(config.auto_run, config.controls, self.speed_model, host)
        self.display = DisplayState(
            config.display,
            config.auto_run,
            self.speed_model,
            self.auto_run,
            host.now
        )
        self.speed_model.on_change = self.display.refresh

    def sample(self, actor: ActorHandle) -> FrameSnapshot:
        controls = self.controls.all()

        return FrameSnapshot(
            now=self.host.now(),
            position=tuple(self.host.get_position(actor)),
            heading=self.host.get_heading(actor),
            camera_heading=self.host.get_camera_heading(),
            sprinting=self.host.is_sprinting(actor),
            incapacitation=self.host.get_incapacitation(actor),
            pressed=frozenset(c for c in controls if self.host.query_pressed(c)),
            just_pressed=frozenset(c for c in controls if self.host.query_just_pressed(c)),
        )

    def update(self) -> FrameSnapshot:
        actor = self.host.get_local_actor_id()
        snapshot = self.sample(actor)

        self.auto_run.update_charge(snapshot)

        bar = self.display.charge_bar_params()
        if bar is not None:
            self.host.draw_progress_bar(bar.x, bar.y, bar.width, bar.height, bar.progress, bar.color)
            self.auto_run.activate_if_charged(snapshot)

        self.auto_run.update_active(snapshot, actor)

        self._push_speed(actor)

        if self.display.should_show_speed_text():
            self.host.draw_centered_text(self.display.speed_label())

        self._handle_speed_controls(snapshot)

        return snapshot

    def _push_speed(self, actor: ActorHandle) -> None:
        if not self.speed_model.changed:
            return

        self.host.set_max_move_speed_ratio(actor, self.speed_model.current_speed)
        self.speed_model.mark_pushed()
        logging.debug(f"Pushed move speed ratio {self.speed_model.current_speed:.2f}")

    def _handle_speed_controls(self, snapshot: FrameSnapshot) -> None:
        if self.auto_run.is_active or not snapshot.is_pressed(self.controls.sprint):
            return

        speed = self.config.speed
        if snapshot.was_just_pressed(self.controls.increase_speed):
            self.speed_model.adjust(speed.increment)

        elif snapshot.was_just_pressed(self.controls.decrease_speed):
            self.speed_model.adjust(-speed.increment)

        elif snapshot.was_just_pressed(self.controls.reset_speed):
            self.speed_model.reset()

        elif snapshot.was_just_pressed(self.controls.max_speed):
            self.speed_model.set_exact(speed.max_speed)

        elif snapshot.was_just_pressed(self.controls.min_speed):
            self.speed_model.set_exact(speed.min_speed)
