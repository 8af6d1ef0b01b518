"""Sidecar Typer app factory."""

import typer

from ths.api.sidecar.cmd_apply import cmd_apply
from ths.api.sidecar.cmd_render import cmd_render
from ths.cli._handle_stage_result import _handle_stage_result


def sidecar() -> typer.Typer:
    """Create and configure the sidecar Typer app."""
    app = typer.Typer(
        name="sidecar",
        help="Thanos sidecar parameters and installation",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Sidecar operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="render")
    def render_cmd() -> None:
        """Show the flags and unit without installing anything."""
        _handle_stage_result(cmd_render)()

    @app.command(name="apply")
    def apply_cmd() -> None:
        """Install the sidecar unit and start or stop it."""
        _handle_stage_result(cmd_apply)()

    return app
