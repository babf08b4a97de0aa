"""Unit tests for renderer settings persistence."""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from shrekdoc.config import RenderSettings, SettingsStore, get_store


class TestSettingsStore(unittest.TestCase):
    """Test settings persistence functionality."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = Path(self.temp_dir) / "settings.json"
        self.store = SettingsStore(self.path)

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_defaults_without_file(self):
        self.assertEqual(self.store.load(), RenderSettings())

    def test_save_and_load(self):
        settings = RenderSettings(highlight_color="e", newline_glyph="$")
        self.assertTrue(self.store.save(settings))

        fresh = SettingsStore(self.path)
        self.assertEqual(fresh.load(), settings)

    def test_invalid_json_falls_back_to_defaults(self):
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertLogs("shrekdoc.config", level="WARNING"):
            self.assertEqual(self.store.load(), RenderSettings())

    def test_non_dict_falls_back_to_defaults(self):
        self.path.write_text("[1, 2]", encoding="utf-8")
        with self.assertLogs("shrekdoc.config", level="WARNING"):
            self.assertEqual(self.store.load(), RenderSettings())

    def test_invalid_values_are_ignored(self):
        data = {"highlight_color": "88", "newpage_color": "e", "bogus": 1}
        self.path.write_text(json.dumps(data), encoding="utf-8")
        settings = self.store.load()
        self.assertEqual(settings.highlight_color, RenderSettings().highlight_color)
        self.assertEqual(settings.newpage_color, "e")

    def test_load_is_cached(self):
        first = self.store.load()
        self.path.write_text(json.dumps({"base_color": "3"}), encoding="utf-8")
        self.assertIs(self.store.load(), first)
        self.store.clear_cache()
        self.assertEqual(self.store.load().base_color, "3")

    def test_save_failure_returns_false(self):
        blocker = Path(self.temp_dir) / "file.txt"
        blocker.write_text("x", encoding="utf-8")
        store = SettingsStore(blocker / "settings.json")
        with self.assertLogs("shrekdoc.config", level="WARNING"):
            self.assertFalse(store.save(RenderSettings()))

    def test_global_store_is_singleton(self):
        self.assertIs(get_store(), get_store())


if __name__ == '__main__':
    unittest.main()
