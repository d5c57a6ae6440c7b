"""Command-line interface for backup inventory."""

import logging
import sys
import click
from typing import Optional

from .core.inventory import BackupInventory
from .config.config_manager import ConfigManager
from .utils.formatters import format_summary


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Logs go to stderr so json output on stdout stays parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _load_config(ctx) -> ConfigManager:
    """Load configuration and apply command-line overrides."""
    config_manager = ConfigManager(ctx.obj.get('config_path'))
    config_manager.load_config()

    # Command-line logging options win over the configured ones
    logging_config = config_manager.get_logging_config()
    setup_logging(ctx.obj.get('log_level') or logging_config.get('level') or 'INFO',
                  ctx.obj.get('log_file') or logging_config.get('file'))

    backups_dir = ctx.obj.get('backups_dir')
    if backups_dir:
        config_manager.config_data['backups']['directory'] = backups_dir

    return config_manager


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--backups-dir', '-d',
              help='Backups directory (overrides the configured one)')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (defaults to the configured level)')
@click.option('--log-file',
              help='Log file path')
@click.pass_context
def cli(ctx, config_path: Optional[str], backups_dir: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Backup Inventory - Summarize the backups in a backups directory."""
    ctx.ensure_object(dict)

    setup_logging(log_level or 'WARNING', log_file)

    ctx.obj['config_path'] = config_path
    ctx.obj['log_level'] = log_level
    ctx.obj['log_file'] = log_file
    ctx.obj['backups_dir'] = backups_dir


@cli.command()
@click.option('--output', '-o', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.pass_context
def info(ctx, output: str):
    """Show the latest backup and the totals of all backups."""
    try:
        inventory = BackupInventory.from_config(_load_config(ctx))
        summary = inventory.get_backup_info()
    except Exception as e:
        click.echo(f"Error reading backup info: {e}", err=True)
        sys.exit(1)

    if output == 'json':
        click.echo(summary.to_json(indent=2))
    else:
        click.echo(f"📂 {inventory.backups_dir}")
        click.echo(format_summary(summary))


@cli.command()
@click.pass_context
def validate_config(ctx):
    """Validate configuration file."""
    try:
        config_manager = _load_config(ctx)
    except Exception as e:
        click.echo(f"❌ Configuration validation failed: {e}", err=True)
        sys.exit(1)

    if config_manager.config_file:
        click.echo(f"✅ Configuration loaded from {config_manager.config_file}")
    else:
        click.echo("✅ No configuration file found, using defaults")

    logging_config = config_manager.get_logging_config()
    click.echo(f"   Backups directory: {config_manager.get_backups_directory()}")
    click.echo(f"   Backup extension: .{config_manager.get_backup_extension()}")
    click.echo(f"   Log level: {logging_config.get('level')}")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
