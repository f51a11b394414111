"""Unit tests for user settings."""
import unittest
import json
import os
import tempfile
from countdays.config import Config


class TestConfig(unittest.TestCase):
    """Test settings loading and fallbacks."""

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "settings.json")

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write(self, content: str) -> None:
        with open(self.path, 'w') as f:
            f.write(content)

    def test_defaults_without_file(self) -> None:
        config = Config(self.path)

        self.assertTrue(config.seed_sample_events)
        self.assertEqual(config.card_opacity, 0.3)
        self.assertEqual(config.display_mode, "compact")

    def test_reads_user_values(self) -> None:
        self._write(json.dumps({
            "seed_sample_events": False,
            "card_opacity": 0.5,
            "display_mode": "days",
        }))

        config = Config(self.path)

        self.assertFalse(config.seed_sample_events)
        self.assertEqual(config.card_opacity, 0.5)
        self.assertEqual(config.display_mode, "days")

    def test_invalid_values_fall_back(self) -> None:
        self._write(json.dumps({"card_opacity": 4, "display_mode": "weeks"}))

        config = Config(self.path)

        self.assertEqual(config.card_opacity, 0.3)
        self.assertEqual(config.display_mode, "compact")

    def test_non_boolean_seed_falls_back(self) -> None:
        """A string such as "false" is not read as a truthy flag."""
        for value in ("false", 0, None, "yes"):
            with self.subTest(value=value):
                self._write(json.dumps({"seed_sample_events": value}))

                config = Config(self.path)

                self.assertTrue(config.seed_sample_events)

    def test_broken_file_uses_defaults(self) -> None:
        self._write("{broken")

        config = Config(self.path)

        self.assertEqual(config.display_mode, "compact")

    def test_reload_picks_up_changes(self) -> None:
        config = Config(self.path)
        self._write(json.dumps({"display_mode": "days"}))

        config.reload()

        self.assertEqual(config.display_mode, "days")


if __name__ == "__main__":
    unittest.main()
