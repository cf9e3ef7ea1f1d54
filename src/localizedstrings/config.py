# src/localizedstrings/config.py
import configparser
from pathlib import Path
from typing import Any, Optional


class Config:
    """Configuration manager for localizedstrings"""

    def __init__(self, config_path: Optional[Path] = None):
        self.config = configparser.ConfigParser()
        self.config_path = config_path or Path(__file__).parent.parent / "config.ini"

        # Set defaults
        self._set_defaults()

        # Load config file if it exists
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    def _set_defaults(self):
        """Set default configuration values"""
        self.config.add_section('localization')
        self.config.set('localization', 'fallback_interface_language', '')
        self.config.set('localization', 'empty_is_missing', 'false')
        self.config.set('localization', 'log_missing_translations', 'true')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'WARNING')

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value with type conversion"""
        try:
            value = self.config.get(section, key)
            if section == 'localization':
                if key in ('empty_is_missing', 'log_missing_translations'):
                    return value.strip().lower() == 'true'
                if key == 'fallback_interface_language':
                    return value.strip()
            elif section == 'logging':
                if key == 'log_level':
                    return value.strip().upper()

            return value
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

# Global config instance
config = Config()
