from typing import Dict, List, Any
from pathlib import Path
import copy

import tomllib
import tomli_w

import pygame


class Settings:
    DEFAULTS: Dict[str, Any] = {
        "controls": {
          "keyboard": {
              "sprint": pygame.K_LSHIFT,
              "increase_speed": pygame.K_UP,
              "decrease_speed": pygame.K_DOWN,
              "reset_speed": pygame.K_r,
              "max_speed": pygame.K_RIGHT,
              "min_speed": pygame.K_LEFT,
              "toggle_auto_run": pygame.K_g,
              "cancel_auto_run": pygame.K_x,
              "lock_camera": pygame.K_c,
              "walk_forward": pygame.K_w,
              "walk_backward": pygame.K_s,
              "walk_left": pygame.K_a,
              "walk_right": pygame.K_d,
              "camera_left": pygame.K_q,
              "camera_right": pygame.K_e,
              "toggle_dead": pygame.K_F1,
              "toggle_dying": pygame.K_F2,
              "toggle_hogtied": pygame.K_F3,
              "toggle_cuffed": pygame.K_F4,
          }
        },
        "movement": {
            "min_speed": 0.2,
            "max_speed": 3.0,
            "increment": 0.1,
            "default_speed": 1.0,
            "auto_run_speed": 1.6,
        },
        "display": {
            "display_time": 2000,
            "auto_run_prefix": "~COLOR_GOLD~[AUTO-RUN]~COLOR_WHITE~",
            "speed_indicators": [
                {"threshold": 0.3, "text": "~COLOR_GREEN~+~COLOR_WHITE~++++"},
                {"threshold": 0.5, "text": "~COLOR_GREEN~++~COLOR_WHITE~+++"},
                {"threshold": 0.7, "text": "~COLOR_YELLOW~+++~COLOR_WHITE~++"},
                {"threshold": 0.9, "text": "~COLOR_ORANGE~++++~COLOR_WHITE~+"},
                {"threshold": 1.0, "text": "~COLOR_RED~+++++"},
            ],
        },
        "auto_run": {
            "charge_time": 2000,
            "forward_distance": 20.0,
            "bar_position": [0.5, 0.75],
            "bar_size": [0.2, 0.02],
            "bar_color": [255, 165, 0, 200],
        },
        "video": {
            "width": 1280,
            "height": 720,
            "fullscreen": False,
        },
        "timing": {
            "main_loop_fps": 60,
        },
        "sandbox": {
            "walk_speed": 2.0,
            "camera_turn_rate": 120.0,
            "mouse_sensitivity": 0.3,
            "pixels_per_unit": 12.0,
        },
        "settings": {
            "title": "STRIDE",
        },
    }

    def __init__(self, path: str = "settings.toml") -> None:
        self.path = Path(path)
        self.settings = {}
        self.load()

    def load(self) -> None:
        if self.path.exists():
            with self.path.open("rb") as file:
                raw = tomllib.load(file)
                loaded = self._deserialize(raw)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), loaded)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

    def save(self) -> None:
        serialized = self._serialize(self.settings)
        with self.path.open("wb") as f:
            f.write(tomli_w.dumps(serialized).encode("utf-8"))

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _serialize(self, data: Dict[str, Any]) -> Dict[str, Any] | List[Any]:
        if "controls" in data:
            data = data.copy()
            data["controls"] = self._serialize_controls(data["controls"])
        return self._remove_none(data)

    def _remove_none(self, obj: object) -> Dict[str, Any] | List[Any] | object:
        if isinstance(obj, dict):
            return {k: self._remove_none(v) for k, v in obj.items() if v is not None}
        elif isinstance(obj, list):
            return [self._remove_none(v) for v in obj if v is not None]
        else:
            return obj

    def _deserialize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if "controls" in data:
            data = data.copy()
            data["controls"] = self._deserialize_controls(data["controls"])

        return data

    def _serialize_controls(self, controls: Dict[str, Any]) -> Dict[str, Any]:
        return {
            device: {k: self._key_to_string(v) for k, v in bindings.items()}
            for device, bindings in controls.items()
        }

    def _deserialize_controls(self, controls: Dict[str, Any]) -> Dict[str, Any]:
        return {
            device: {k: self._string_to_key(v) for k, v in bindings.items()}
            for device, bindings in controls.items()
        }

    def _key_to_string(self, keycode: Any) -> str:
        for name in dir(pygame):
            if name.startswith("K_") and getattr(pygame, name) == keycode:
                return name

        raise ValueError(f"Unknown key code: {keycode}")

    def _string_to_key(self, keyname: str) -> int:
        if not keyname.startswith("K_"):
            raise ValueError(f"Invalid key name in config: {keyname}")

        try:
            return getattr(pygame, keyname)
        except AttributeError:
            raise ValueError(f"Invalid key name in config: {keyname}")
