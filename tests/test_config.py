"""
Tests for environment configuration
"""
import os
import tempfile
import unittest
from unittest.mock import patch

from easycal.config import Settings, load_settings


class TestLoadSettings(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(load_settings(environ={}), Settings())
        self.assertEqual(Settings().slot_interval, 30)
        self.assertEqual(Settings().timezone, "Asia/Jerusalem")

    def test_values_from_environment(self):
        settings = load_settings(environ={
            "EASYCAL_LOG_LEVEL": "debug",
            "EASYCAL_LOG_FILE": "easycal.log",
            "EASYCAL_SLOT_INTERVAL": "15",
            "EASYCAL_TIMEZONE": "Europe/London",
        })

        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.log_file, "easycal.log")
        self.assertEqual(settings.slot_interval, 15)
        self.assertEqual(settings.timezone, "Europe/London")

    def test_generic_log_level_fallback(self):
        self.assertEqual(load_settings(environ={"LOG_LEVEL": "warning"}).log_level, "WARNING")

    def test_invalid_slot_interval(self):
        for raw in ("abc", "0", "-30"):
            with self.assertRaises(ValueError) as ctx:
                load_settings(environ={"EASYCAL_SLOT_INTERVAL": raw})
            self.assertIn("EASYCAL_SLOT_INTERVAL", str(ctx.exception))

    def test_reads_dotenv_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_path = os.path.join(tmp, ".env")
            with open(env_path, "w", encoding="utf-8") as f:
                f.write("EASYCAL_SLOT_INTERVAL=20\n")

            with patch.dict(os.environ, {}, clear=True):
                settings = load_settings(dotenv_path=env_path)

        self.assertEqual(settings.slot_interval, 20)


if __name__ == '__main__':
    unittest.main()
