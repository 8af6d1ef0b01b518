"""Create the main Typer CLI app."""

import logging

import typer

from ths.api.config.AppConfig import AppConfig
from ths.api.config.ConfigError import ConfigError
from ths.cli.config import config
from ths.cli.service import service
from ths.cli.sidecar import sidecar
from ths.utils.logger import configure_logging


def _configure_logging_from_config() -> None:
    """Configure logging at the level from config.json, INFO when it cannot be loaded."""
    level = logging.INFO
    try:
        level = getattr(logging, AppConfig.load().log.level)
    except ConfigError:
        # The command itself reports the config problem
        pass
    configure_logging(level=level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Thanos sidecar service manager",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(sidecar(), name="sidecar")
    app.add_typer(service(), name="service")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        _configure_logging_from_config()

    return app
