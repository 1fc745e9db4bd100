"""Tests for JSON config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mdviewer import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mdviewer.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

                config_path.write_text("{not json", encoding="utf-8")
                with self.assertLogs("mdviewer.config", level="WARNING"):
                    self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_code_style_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("mdviewer.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_code_style())
                config.save_code_style("  friendly  ")
                config.save_code_style("   ")

                self.assertEqual(config.load_code_style(), "friendly")

    def test_source_directories_are_sanitized(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mdviewer.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "default_source_directory": "  handbook ",
                        "source_directories": ["notes", "  ", 42, None, " wiki "],
                    }
                )

                self.assertEqual(config.load_default_source_directory(), "handbook")
                self.assertEqual(config.load_extra_source_directories(), ["notes", "wiki"])

    def test_wrong_types_fall_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mdviewer.config.CONFIG_PATH", config_path):
                config.save_config({"default_source_directory": 3, "source_directories": "notes", "code_style": []})

                self.assertIsNone(config.load_default_source_directory())
                self.assertEqual(config.load_extra_source_directories(), [])
                self.assertIsNone(config.load_code_style())


if __name__ == "__main__":
    unittest.main()
