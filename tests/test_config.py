"""Tests for the JSON configuration loader."""

import json
from pathlib import Path
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch import ConfigManager, apply_configuration, solve
from queensearch import settings

_SETTING_NAMES = (
    "NUM_PROCESSES",
    "EXECUTOR",
    "PARTITION_DEPTH",
    "SHORT_BOARD_POLICY",
    "MAX_BOARD_SIZE",
    "STATE_KIND",
    "CANCEL_POLL_INTERVAL",
    "TIME_LIMIT",
)


class ConfigurationTests(unittest.TestCase):
    """Loading, applying and persisting configuration."""

    def setUp(self):
        self._saved = {name: getattr(settings, name) for name in _SETTING_NAMES}
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "config.json"

    def tearDown(self):
        for name, value in self._saved.items():
            setattr(settings, name, value)
        self._tmp.cleanup()

    def _write(self, payload):
        self.path.write_text(json.dumps(payload))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(self.path)

    def test_apply_overrides_settings(self):
        self._write(
            {
                "search_settings": {
                    "num_processes": 3,
                    "executor": "thread",
                    "partition_depth": 2,
                    "short_board_policy": "single",
                    "max_board_size": 12,
                    "state_kind": "array",
                    "cancel_poll_interval": 8,
                },
                "timeout_settings": {"time_limit": 30.0},
            }
        )
        manager = apply_configuration(self.path)
        self.assertIsInstance(manager, ConfigManager)
        self.assertEqual(settings.NUM_PROCESSES, 3)
        self.assertEqual(settings.EXECUTOR, "thread")
        self.assertEqual(settings.PARTITION_DEPTH, 2)
        self.assertEqual(settings.SHORT_BOARD_POLICY, "single")
        self.assertEqual(settings.MAX_BOARD_SIZE, 12)
        self.assertEqual(settings.STATE_KIND, "array")
        self.assertEqual(settings.CANCEL_POLL_INTERVAL, 8)
        self.assertEqual(settings.TIME_LIMIT, 30.0)

        result = solve(8, "count", "parallel")
        self.assertEqual(result.count, 92)
        self.assertEqual(result.tasks_total, 42)

    def test_missing_keys_keep_current_values(self):
        self._write({"search_settings": {"partition_depth": 0}})
        apply_configuration(self.path)
        self.assertEqual(settings.PARTITION_DEPTH, 0)
        self.assertEqual(settings.EXECUTOR, self._saved["EXECUTOR"])
        self.assertEqual(settings.TIME_LIMIT, self._saved["TIME_LIMIT"])

    def test_null_max_board_size_disables_limit(self):
        self._write({"search_settings": {"max_board_size": None}})
        apply_configuration(self.path)
        self.assertIsNone(settings.MAX_BOARD_SIZE)

    def test_update_setting_persists(self):
        self._write({})
        manager = ConfigManager(self.path)
        manager.update_setting("timeout_settings", "time_limit", 5)
        reloaded = ConfigManager(self.path)
        self.assertEqual(reloaded.get_timeout_settings(), {"time_limit": 5})
        self.assertEqual(reloaded.get_search_settings(), {})

    def test_sample_config_is_loadable(self):
        manager = ConfigManager(ROOT / "config.json")
        self.assertEqual(manager.get_search_settings()["state_kind"], "bitmask")


if __name__ == "__main__":
    unittest.main()
