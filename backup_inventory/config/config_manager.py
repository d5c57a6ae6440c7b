"""Configuration management for the backup inventory."""

import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator

APP_HOME_ENV = "BACKUP_INVENTORY_HOME"


def get_app_config_dir() -> str:
    """Get the application configuration directory.

    Uses $BACKUP_INVENTORY_HOME when set, ~/.backup-inventory otherwise.
    """
    home = os.environ.get(APP_HOME_ENV)
    if home:
        return os.path.abspath(os.path.expanduser(home))
    return os.path.join(os.path.expanduser("~"), ".backup-inventory")


class ConfigManager:
    """Manages configuration loading and validation for the backup inventory."""

    DEFAULT_CONFIG_LOCATIONS = [
        "config.yaml",
        "config.yml",
        os.path.expanduser("~/.backup-inventory/config.yaml"),
        os.path.expanduser("~/.backup-inventory/config.yml"),
        "/etc/backup-inventory/config.yaml",
        "/etc/backup-inventory/config.yml"
    ]

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations.
        """
        self.config_path = config_path
        self.config_file: Optional[str] = None
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file.

        Without an explicit config path and with no file in the default
        locations, only the defaults are used.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If an explicit config file cannot be found.
            ValueError: If config file is invalid.
        """
        self.config_file = self._find_config_file()

        if self.config_file is None:
            self.config_data = {}
        else:
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {self.config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {self.config_file}: {e}")

        self.validator.validate(self.config_data)

        self._set_defaults()

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.

        Returns:
            Path to configuration file, or None if there is none.

        Raises:
            FileNotFoundError: If the explicit config path does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        defaults = {
            'backups': {
                'directory': os.path.join(get_app_config_dir(), 'backups'),
                'extension': 'db'
            },
            'logging': {
                'level': 'INFO',
                'file': None
            }
        }

        for section, section_defaults in defaults.items():
            if self.config_data.get(section) is None:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if self.config_data[section].get(key) is None:
                    self.config_data[section][key] = value

    def get_backups_config(self) -> Dict[str, Any]:
        """Get backups configuration.

        Returns:
            Backups configuration dictionary.
        """
        return self.config_data.get('backups', {})

    def get_backups_directory(self) -> str:
        """Get the absolute path of the backups directory."""
        directory = self.get_backups_config().get('directory')
        if not directory:
            directory = os.path.join(get_app_config_dir(), 'backups')
        return os.path.abspath(os.path.expandvars(os.path.expanduser(directory)))

    def get_backup_extension(self) -> str:
        """Get the backup file extension, without the leading dot."""
        return str(self.get_backups_config().get('extension') or 'db').lstrip('.')

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})
