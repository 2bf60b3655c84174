import json
import tempfile
import unittest
from datetime import date
from pathlib import Path
from unittest.mock import patch

from utils.app_config import get_appearance_mode, load_config, save_config, set_appearance_mode
from utils.date_helpers import format_date_label, parse_date_label


class TestAppConfig(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config_file = Path(self._tmp.name) / "cfg" / "config.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_config_is_empty(self):
        self.assertEqual(load_config(self.config_file), {})
        self.assertEqual(get_appearance_mode(self.config_file), "dark")

    def test_corrupt_config_is_empty(self):
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text("{oops", encoding="utf-8")
        self.assertEqual(load_config(self.config_file), {})

    def test_save_creates_dir_and_leaves_no_tmp(self):
        save_config({"appearance_mode": "light"}, self.config_file)
        self.assertEqual(
            json.loads(self.config_file.read_text(encoding="utf-8")),
            {"appearance_mode": "light"},
        )
        self.assertFalse(self.config_file.with_suffix(".tmp").exists())

    def test_appearance_round_trip_keeps_other_keys(self):
        save_config({"other": 1}, self.config_file)
        set_appearance_mode("system", self.config_file)
        self.assertEqual(get_appearance_mode(self.config_file), "system")
        self.assertEqual(load_config(self.config_file)["other"], 1)

    def test_unknown_appearance_falls_back(self):
        save_config({"appearance_mode": "neon"}, self.config_file)
        self.assertEqual(get_appearance_mode(self.config_file), "dark")

    def test_invalid_appearance_is_refused(self):
        with self.assertRaises(ValueError):
            set_appearance_mode("neon", self.config_file)


class TestDateLabels(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_date_label(date(2023, 8, 31)), "Aug 31, 2023")

    def test_parse(self):
        self.assertEqual(parse_date_label("Aug 31, 2023"), date(2023, 8, 31))
        self.assertEqual(parse_date_label("2023-08-31"), date(2023, 8, 31))
        self.assertIsNone(parse_date_label("payday"))
        self.assertIsNone(parse_date_label(""))

    def test_today(self):
        with patch("utils.date_helpers.today", return_value=date(2024, 2, 29)):
            self.assertEqual(parse_date_label(" today "), date(2024, 2, 29))


if __name__ == "__main__":
    unittest.main()
