"""Utility modules for backup inventory."""

from .formatters import format_file_size, format_backup_time, format_summary

__all__ = ["format_file_size", "format_backup_time", "format_summary"]
