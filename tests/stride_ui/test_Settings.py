import unittest
import tempfile
from pathlib import Path
import pygame
import tomli_w

from stride_ui.Settings import Settings


class TestSettings(unittest.TestCase):
    def setUp(self):
        self.tempfile = tempfile.NamedTemporaryFile(delete=False, suffix=".toml")
        self.path = self.tempfile.name
        self.tempfile.close()

    def tearDown(self):
        Path(self.path).unlink(missing_ok=True)

    def write(self, data):
        with open(self.path, "wb") as f:
            f.write(tomli_w.dumps(data).encode("utf-8"))

    def test_load_defaults_if_file_missing(self):
        Path(self.path).unlink()
        settings = Settings(self.path)
        self.assertEqual(settings.get("timing").get("main_loop_fps"), 60)
        self.assertEqual(settings.get("movement")["auto_run_speed"], 1.6)
        self.assertEqual(settings.settings["controls"]["keyboard"]["sprint"], pygame.K_LSHIFT)

    def test_defaults_are_not_shared(self):
        Path(self.path).unlink()
        settings = Settings(self.path)
        settings.get("movement")["max_speed"] = 9.0

        self.assertEqual(Settings.DEFAULTS["movement"]["max_speed"], 3.0)

    def test_save_and_load_round_trip(self):
        settings = Settings(self.path)
        settings.set("movement", {"min_speed": 0.5, "max_speed": 2.0})
        settings.set("video", {"width": 640, "height": 480})
        settings.save()

        loaded = Settings(self.path)
        self.assertEqual(loaded.get("movement")["min_speed"], 0.5)
        self.assertEqual(loaded.get("movement")["increment"], 0.1)
        self.assertEqual(loaded.get("video")["width"], 640)
        self.assertEqual(loaded.get("video")["height"], 480)
        self.assertEqual(loaded.get("controls")["keyboard"]["toggle_auto_run"], pygame.K_g)
        self.assertEqual(
            loaded.get("display")["speed_indicators"],
            Settings.DEFAULTS["display"]["speed_indicators"]
        )

    def test_saved_controls_use_key_names(self):
        settings = Settings(self.path)
        settings.save()

        text = Path(self.path).read_text()
        self.assertIn('cancel_auto_run = "K_x"', text)

    def test_merge_partial_override(self):
        self.write({
            "video": {"width": 800},
            "auto_run": {"charge_time": 1500},
            "controls": {
                "keyboard": {
                    "toggle_auto_run": "K_SPACE"
                }
            }
        })

        settings = Settings(self.path)
        self.assertEqual(settings.settings["video"]["width"], 800)
        self.assertEqual(settings.settings["video"]["height"], 720)
        self.assertEqual(settings.settings["auto_run"]["charge_time"], 1500)
        self.assertEqual(settings.settings["auto_run"]["forward_distance"], 20.0)
        self.assertEqual(settings.settings["controls"]["keyboard"]["toggle_auto_run"], pygame.K_SPACE)
        self.assertEqual(settings.settings["controls"]["keyboard"]["cancel_auto_run"], pygame.K_x)

    def test_invalid_key_name_raises(self):
        for name in ("SPACE", "K_DOES_NOT_EXIST"):
            with self.subTest(name=name):
                self.write({"controls": {"keyboard": {"sprint": name}}})

                with self.assertRaises(ValueError):
                    Settings(self.path)


if __name__ == "__main__":
    unittest.main()
