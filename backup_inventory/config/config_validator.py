"""Configuration validation for backup inventory."""

from typing import Dict, Any


class ConfigValidator:
    """Validates backup inventory configuration."""

    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_structure(config)

        if config.get('backups') is not None:
            self._validate_backups_config(config['backups'])

        if config.get('logging') is not None:
            self._validate_logging_config(config['logging'])

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.

        Raises:
            ValueError: If the configuration or one of its sections is not
                a mapping.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        bad_sections = [section for section in ('backups', 'logging')
                        if config.get(section) is not None and not isinstance(config[section], dict)]
        if bad_sections:
            raise ValueError(f"Configuration sections must be mappings: {bad_sections}")

    def _validate_backups_config(self, backups_config: Dict[str, Any]) -> None:
        """Validate backups configuration.

        Raises:
            ValueError: If the directory or extension is invalid.
        """
        if backups_config.get('directory') is not None:
            directory = backups_config['directory']
            if not isinstance(directory, str) or not directory.strip():
                raise ValueError("Backups directory must be a non-empty string")

        if backups_config.get('extension') is not None:
            extension = backups_config['extension']
            if not isinstance(extension, str) or not extension.lstrip('.'):
                raise ValueError("Backup extension must be a non-empty string")
            if '/' in extension or '\\' in extension:
                raise ValueError(f"Backup extension cannot contain path separators: {extension}")

    def _validate_logging_config(self, logging_config: Dict[str, Any]) -> None:
        """Validate logging configuration.

        Raises:
            ValueError: If the log level is unknown.
        """
        level = logging_config.get('level')
        if level is not None and str(level).upper() not in self.LOG_LEVELS:
            raise ValueError(f"Invalid log level in configuration: {level}")
