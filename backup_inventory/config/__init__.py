"""Configuration management for backup inventory."""

from .config_manager import ConfigManager, get_app_config_dir
from .config_validator import ConfigValidator

__all__ = ["ConfigManager", "ConfigValidator", "get_app_config_dir"]
