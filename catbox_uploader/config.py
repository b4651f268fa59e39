#!/usr/bin/env python3
"""
Configuration management for the Catbox uploader.
Handles loading and saving configuration settings using a singleton pattern.
"""

import os
import json
from typing import Dict, Any, Optional


class Config:
    _instance: Optional["Config"] = None
    _initialized = False

    # Calculate the project root directory (parent of catbox_uploader/)
    PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    # Default configuration settings
    DEFAULT_CONFIG = {
        "log_folder": os.path.join(PROJECT_ROOT, "logs"),  # Logs directory
        "log_basename": "catbox",  # Base name for log files
        "userhash_file": os.path.join(
            PROJECT_ROOT, ".userhash"
        ),  # Saved default userhash
        "max_log_size_mb": 5,
        "max_log_backups": 10,
    }

    # Configuration file path
    CONFIG_FILE = os.path.join(PROJECT_ROOT, "catbox_config.json")

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._load_config()
            self._initialized = True

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from the config file, or create it with defaults if it doesn't exist.
        Also ensures that necessary directories exist.

        Returns:
            Dict: Configuration settings
        """
        if os.path.exists(self.CONFIG_FILE):
            try:
                with open(self.CONFIG_FILE, "r") as f:
                    config = json.load(f)
                    # Update with any missing defaults
                    for key, value in self.DEFAULT_CONFIG.items():
                        if key not in config:
                            config[key] = value

                    self._ensure_directories(config)
                    return config
            except (json.JSONDecodeError, IOError):
                # Unreadable config, fall back to defaults
                pass

        self._save_config(self.DEFAULT_CONFIG)
        self._ensure_directories(self.DEFAULT_CONFIG)
        return self.DEFAULT_CONFIG.copy()

    def _ensure_directories(self, config: Dict[str, Any]) -> None:
        """
        Ensure that directories for logs and the userhash file exist.

        Args:
            config: Configuration settings
        """
        for folder in (
            config["log_folder"],
            os.path.dirname(config["userhash_file"]),
        ):
            if folder and not os.path.exists(folder):
                try:
                    os.makedirs(folder, exist_ok=True)
                except OSError as e:
                    print(f"Warning: Could not create directory {folder}: {e}")

    def _save_config(self, config: Dict[str, Any]) -> None:
        """
        Save configuration to the config file.

        Args:
            config: Configuration settings
        """
        try:
            with open(self.CONFIG_FILE, "w") as f:
                json.dump(config, f, indent=4)
        except IOError as e:
            print(f"Warning: Could not save configuration to {self.CONFIG_FILE}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key doesn't exist

        Returns:
            The configuration value or default if not found
        """
        return self._config.get(key, default)


# Create a single instance of the Config class
config = Config()
