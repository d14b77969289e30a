import logging

from stride_helper import ActorHandle, clamp, forward_vector
from stride_core.ChargeState import ChargeState
from stride_core.dataclasses import FrameSnapshot
from stride_core.Host import Host
from stride_core.MovementConfig import AutoRunConfig, ControlBindings
from stride_core.SpeedModel import SpeedModel


class AutoRunController:
    """
    Charge/activate/cancel lifecycle of auto-run.

    Holding the toggle control while sprinting charges auto-run over
    `charge_time`. Once active, the actor is steered toward a point
    `forward_distance` ahead every frame until the cancel control is pressed
    or the actor becomes incapacitated.
    """

    def __init__(
        self,
        config: AutoRunConfig,
        controls: ControlBindings,
        speed_model: SpeedModel,
        host: Host
    ) -> None:
        self.config = config
        self.controls = controls
        self.speed_model = speed_model
        self.host = host

        self.state = ChargeState.IDLE
        self.charge_progress: float = 0.0
        self.charge_started_at: int = 0
        self.locked_heading: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.state is ChargeState.ACTIVE

    @property
    def is_charging(self) -> bool:
        return self.state is ChargeState.CHARGING

    def update_charge(self, snapshot: FrameSnapshot) -> None:
        if self.state is ChargeState.ACTIVE:
            return

        if snapshot.is_pressed(self.controls.toggle_auto_run) and snapshot.sprinting:
            if self.state is ChargeState.IDLE:
                self.state = ChargeState.CHARGING
                self.charge_started_at = snapshot.now
                self.charge_progress = 0.0
                logging.debug("Auto-run charge started")

            elapsed = snapshot.now - self.charge_started_at
            self.charge_progress = clamp(elapsed / self.config.charge_time, 0.0, 1.0)

        elif self.state is ChargeState.CHARGING:
            logging.debug(f"Auto-run charge interrupted at {self.charge_progress:.2f}")
            self._reset_charge()
            self.state = ChargeState.IDLE

    def activate_if_charged(self, snapshot: FrameSnapshot) -> bool:
        if self.state is not ChargeState.CHARGING or self.charge_progress < 1.0:
            return False

        self._reset_charge()
        self.state = ChargeState.ACTIVE
        self.speed_model.set_exact(self.speed_model.config.auto_run_speed)
        self.locked_heading = snapshot.heading
        logging.info(f"Auto-run activated, heading {self.locked_heading:.1f}")

        return True

    def update_active(self, snapshot: FrameSnapshot, actor: ActorHandle) -> None:
        if self.state is not ChargeState.ACTIVE:
            return

        if snapshot.was_just_pressed(self.controls.cancel_auto_run):
            self.cancel(actor, "cancel pressed")
        elif snapshot.incapacitated:
            self.cancel(actor, f"actor incapacitated ({snapshot.incapacitation})")
        else:
            self._steer(snapshot, actor)

    def cancel(self, actor: ActorHandle, reason: str = "") -> None:
        self.state = ChargeState.IDLE
        self._reset_charge()
        self.speed_model.reset()
        self.host.clear_movement_task(actor)
        logging.info(f"Auto-run stopped: {reason}" if reason else "Auto-run stopped")

    def _steer(self, snapshot: FrameSnapshot, actor: ActorHandle) -> None:
        if snapshot.is_pressed(self.controls.lock_camera):
            # Keep running along the body heading, camera is free to look around
            heading = snapshot.heading
        else:
            heading = snapshot.camera_heading

        self.locked_heading = heading

        forward_x, forward_y = forward_vector(heading)
        x, y, z = snapshot.position
        distance = self.config.forward_distance
        target = (x + forward_x * distance, y + forward_y * distance, z)

        self.host.move_toward(actor, target, self.speed_model.config.auto_run_speed, heading)

    def _reset_charge(self) -> None:
        self.charge_progress = 0.0
        self.charge_started_at = 0

    def __repr__(self) -> str:
        return (f"<AutoRunController(state={self.state.value}, "
                f"progress={self.charge_progress:.2f}, heading={self.locked_heading:.1f})>")
