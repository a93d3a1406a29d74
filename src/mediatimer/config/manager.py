#!/usr/bin/env python3
"""
Configuration Management for MediaTimer
Handles loading and managing the wizard settings from an INI file
"""

import configparser
import os
from typing import Any, Optional

from ..core.logger import log_error, log_info, log_warning

SECTION = "MEDIATIMER"


class ConfigurationError(Exception):
    """Raised when configuration loading fails"""

    pass


class ConfigManager:
    """Central configuration manager for MediaTimer"""

    def __init__(self, config_file: Optional[str] = None):
        self.config = configparser.ConfigParser()
        self.config_file = config_file
        self.load_configuration()

    def load_configuration(self) -> None:
        """Load configuration from file, or create defaults"""
        if self.config_file and os.path.exists(self.config_file):
            try:
                self.config.read(self.config_file, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Invalid config file {self.config_file}: {e}"
                ) from e
            log_info(f"Loaded config from: {self.config_file}", component="config")
            return

        log_warning(
            "No config file found. Creating default config.", component="config"
        )
        self._create_default_config()

    def _create_default_config(self) -> None:
        """Create default configuration"""
        self.config[SECTION] = {
            "vars_file": os.path.join("~", "medialoop_config", "vars"),
            "key_prefix": "MT_",
            # Start every day with 09:00:00-17:00:00 when no vars file exists
            "seed_default_range": "false",
            "enable_system_logging": "false",
            "log_dir": "/tmp",
        }

        if self.config_file and not os.path.exists(self.config_file):
            try:
                with open(self.config_file, "w", encoding="utf-8") as f:
                    self.config.write(f)
                log_info(
                    f"Created default config file: {self.config_file}",
                    component="config",
                )
            except OSError as e:
                log_error(
                    f"Could not write default config file: {e}", component="config"
                )

    def get(self, key: str, default: Any = None, section: str = SECTION) -> Any:
        """Get configuration value"""
        if section in self.config:
            return self.config.get(section, key, fallback=default)
        return self.config.defaults().get(key, default)

    def getboolean(self, key: str, default: bool = False, section: str = SECTION) -> bool:
        """Get boolean configuration value"""
        try:
            if section in self.config:
                return self.config.getboolean(section, key, fallback=default)
            if key in self.config.defaults():
                return self.config.getboolean("DEFAULT", key)
            return default
        except ValueError:
            log_warning(f"Invalid boolean for {key}, using {default}", component="config")
            return default

    @property
    def vars_file(self) -> str:
        """Path of the vars file read by the playback service"""
        path = self.get("vars_file", os.path.join("~", "medialoop_config", "vars"))
        return os.path.expanduser(path)

    @property
    def key_prefix(self) -> str:
        """Prefix of the per-day keys in the vars file"""
        return self.get("key_prefix", "MT_")

    @property
    def seed_default_range(self) -> bool:
        """Seed a missing schedule with 09:00:00-17:00:00 on every day"""
        return self.getboolean("seed_default_range", False)

    @property
    def enable_system_logging(self) -> bool:
        """Check if system detailed logging is enabled"""
        return self.getboolean("enable_system_logging", False)

    @property
    def log_dir(self) -> str:
        """Directory holding mediatimer_system.log"""
        return os.path.expanduser(self.get("log_dir", "/tmp"))
