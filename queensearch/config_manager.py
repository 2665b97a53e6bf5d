"""Configuration management for the N-Queens search engine.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize worker-pool, partitioning and timeout settings.

File format (high-level)
------------------------
- search_settings: num_processes, executor, partition_depth,
  short_board_policy, max_board_size, state_kind, cancel_poll_interval.
- timeout_settings: time_limit (seconds or null).

All methods return Python native types; the class does not validate semantics
beyond presence of keys. `apply_configuration` copies recognised values into
`queensearch.settings`.
"""
import json
from pathlib import Path

from loguru import logger

from . import settings


class ConfigManager:
    """Load, query, and persist the configuration file.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_search_settings(self):
        """Return worker-pool and partitioning settings."""
        return self.config.get("search_settings", {})

    def get_timeout_settings(self):
        """Return timeout settings."""
        return self.config.get("timeout_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
        logger.info("Setting {}.{} = {!r} saved to {}", section, key, value, self.config_path)


def apply_configuration(config_path="config.json"):
    """Load configuration and copy it into the global ``settings`` module.

    Keys missing from the file keep their current value. Returns the
    ``ConfigManager`` used.
    """
    config_mgr = ConfigManager(config_path)

    search_settings = config_mgr.get_search_settings()
    if search_settings:
        settings.NUM_PROCESSES = max(1, int(search_settings.get("num_processes", settings.NUM_PROCESSES)))
        settings.EXECUTOR = search_settings.get("executor", settings.EXECUTOR)
        settings.PARTITION_DEPTH = int(search_settings.get("partition_depth", settings.PARTITION_DEPTH))
        settings.SHORT_BOARD_POLICY = search_settings.get("short_board_policy", settings.SHORT_BOARD_POLICY)
        max_size = search_settings.get("max_board_size", settings.MAX_BOARD_SIZE)
        settings.MAX_BOARD_SIZE = None if max_size is None else int(max_size)
        settings.STATE_KIND = search_settings.get("state_kind", settings.STATE_KIND)
        settings.CANCEL_POLL_INTERVAL = int(
            search_settings.get("cancel_poll_interval", settings.CANCEL_POLL_INTERVAL)
        )

    timeout_settings = config_mgr.get_timeout_settings()
    if timeout_settings:
        settings.set_time_limit(timeout_settings.get("time_limit", settings.TIME_LIMIT))

    logger.info("Configuration applied from {}", config_mgr.config_path)
    return config_mgr
