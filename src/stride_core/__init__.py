from stride_core.AutoRunController import AutoRunController
from stride_core.ChargeState import ChargeState
from stride_core.DisplayState import DisplayState
from stride_core.Host import Host
from stride_core.MovementConfig import (
  AutoRunConfig,
  ControlBindings,
  DisplayConfig,
  MovementConfig,
  SpeedConfig,
  SpeedIndicator,
)
from stride_core.MovementController import MovementController
from stride_core.SpeedModel import SpeedModel
from stride_core.dataclasses import ChargeBar, FrameSnapshot, IncapacitationFlags
from stride_core.exceptions import ConfigurationError

__all__ = [
  "AutoRunConfig",
  "AutoRunController",
  "ChargeBar",
  "ChargeState",
  "ConfigurationError",
  "ControlBindings",
  "DisplayConfig",
  "DisplayState",
  "FrameSnapshot",
  "Host",
  "IncapacitationFlags",
  "MovementConfig",
  "MovementController",
  "SpeedConfig",
  "SpeedIndicator",
  "SpeedModel",
]
