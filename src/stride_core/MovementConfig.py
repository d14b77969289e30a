"""Static tunables for the movement controller, validated once at startup."""
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

from stride_helper import Color, Control
from stride_core.exceptions import ConfigurationError

T = TypeVar("T")

# Settings values are coerced to these field types while parsing
SCALAR_TYPES = (int, float, str)


@dataclass(frozen=True)
class SpeedIndicator:
    threshold: float
    text: str


DEFAULT_SPEED_INDICATORS: Tuple[SpeedIndicator, ...] = (
    SpeedIndicator(0.3, "~COLOR_GREEN~+~COLOR_WHITE~++++"),
    SpeedIndicator(0.5, "~COLOR_GREEN~++~COLOR_WHITE~+++"),
    SpeedIndicator(0.7, "~COLOR_YELLOW~+++~COLOR_WHITE~++"),
    SpeedIndicator(0.9, "~COLOR_ORANGE~++++~COLOR_WHITE~+"),
    SpeedIndicator(1.0, "~COLOR_RED~+++++"),
)


@dataclass(frozen=True)
class SpeedConfig:
    min_speed: float = 0.2
    max_speed: float = 3.0
    increment: float = 0.1
    default_speed: float = 1.0
    auto_run_speed: float = 1.6


@dataclass(frozen=True)
class DisplayConfig:
    display_time: int = 2000
    speed_indicators: Tuple[SpeedIndicator, ...] = DEFAULT_SPEED_INDICATORS
    auto_run_prefix: str = "~COLOR_GOLD~[AUTO-RUN]~COLOR_WHITE~"


@dataclass(frozen=True)
class AutoRunConfig:
    charge_time: int = 2000
    forward_distance: float = 20.0
    bar_position: Tuple[float, float] = (0.5, 0.75)
    bar_size: Tuple[float, float] = (0.2, 0.02)
    bar_color: Color = (255, 165, 0, 200)


@dataclass(frozen=True)
class ControlBindings:
    sprint: Control
    increase_speed: Control
    decrease_speed: Control
    reset_speed: Control
    max_speed: Control
    min_speed: Control
    toggle_auto_run: Control
    cancel_auto_run: Control
    lock_camera: Control

    def all(self) -> Tuple[Control, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class MovementConfig:
    controls: ControlBindings
    speed: SpeedConfig = SpeedConfig()
    display: DisplayConfig = DisplayConfig()
    auto_run: AutoRunConfig = AutoRunConfig()

    def validate(self) -> None:
        """
        Reject configurations the controller cannot run with.

        Raises:
            ConfigurationError: on the first violated constraint
        """
        speed = self.speed
        if speed.min_speed >= speed.max_speed:
            raise ConfigurationError(
                f"min_speed ({speed.min_speed}) must be lower than max_speed ({speed.max_speed})"
            )

        if speed.increment <= 0:
            raise ConfigurationError(f"increment must be positive, got {speed.increment}")

        for name in ("default_speed", "auto_run_speed"):
            value = getattr(speed, name)
            if not speed.min_speed <= value <= speed.max_speed:
                raise ConfigurationError(
                    f"{name} ({value}) outside of [{speed.min_speed}, {speed.max_speed}]"
                )

        indicators = self.display.speed_indicators
        if not indicators:
            raise ConfigurationError("At least one speed indicator is required")

        thresholds = [indicator.threshold for indicator in indicators]
        for previous, current in zip(thresholds, thresholds[1:]):
            if current <= previous:
                raise ConfigurationError(f"Speed indicator thresholds must be ascending: {thresholds}")

        if thresholds[-1] != 1.0:
            raise ConfigurationError(f"Last speed indicator threshold must be 1.0, got {thresholds[-1]}")

        if self.display.display_time < 0:
            raise ConfigurationError(f"display_time must not be negative, got {self.display.display_time}")

        if self.auto_run.charge_time <= 0:
            raise ConfigurationError(f"charge_time must be positive, got {self.auto_run.charge_time}")

        if self.auto_run.forward_distance <= 0:
            raise ConfigurationError(
                f"forward_distance must be positive, got {self.auto_run.forward_distance}"
            )

    @classmethod
    def from_settings(cls, settings: Any) -> 'MovementConfig':
        """
        Build a config from a settings mapping (or anything with `get`).

        Missing entries fall back to the dataclass defaults. Control bindings
        have no defaults and are read from `controls.keyboard`.
        """
        movement = settings.get("movement", {})
        display = dict(settings.get("display", {}))
        auto_run = dict(settings.get("auto_run", {}))
        keyboard = settings.get("controls", {}).get("keyboard", {})

        try:
            controls = _pick(ControlBindings, keyboard, required=True)
        except KeyError as e:
            raise ConfigurationError(f"Missing control binding: {e.args[0]}") from e

        try:
            if "speed_indicators" in display:
                display["speed_indicators"] = tuple(
                    SpeedIndicator(float(item["threshold"]), str(item["text"]))
                    for item in display["speed_indicators"]
                )

            for key in ("bar_position", "bar_size", "bar_color"):
                if key in auto_run:
                    auto_run[key] = tuple(auto_run[key])

            return cls(
                controls=controls,
                speed=_pick(SpeedConfig, movement),
                display=_pick(DisplayConfig, display),
                auto_run=_pick(AutoRunConfig, auto_run),
            )
        except KeyError as e:
            raise ConfigurationError(f"Missing setting: {e.args[0]}") from e
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Malformed setting: {e}") from e


def _pick(
    cls: Type[T],
    section: Optional[Mapping[str, Any]],
    required: bool = False
) -> T:
    section = section or {}
    values: Dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in section:
            if required:
                raise KeyError(f.name)
            continue

        value = section[f.name]
        if f.type in SCALAR_TYPES:
            value = f.type(value)
        values[f.name] = value

    return cls(**values)
