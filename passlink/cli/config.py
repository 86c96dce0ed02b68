"""Config Typer app factory."""

import typer

from passlink.api.config.cmd_set import cmd_set
from passlink.api.config.cmd_show import cmd_show
from passlink.api.config.cmd_version import cmd_version
from passlink.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name (default: list sections)"),
    ) -> None:
        """Show configuration for a section, or list the sections."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="set")
    def set_cmd(
        key: str = typer.Argument(..., help="Dot-path key, e.g. link.translation"),
        value: str | None = typer.Argument(None, help="Value (parsed as JSON, else kept as a string)"),
        delete: bool = typer.Option(False, "--delete", help="Remove the key so its default applies"),
    ) -> None:
        """Set or remove a configuration value."""
        _handle_stage_result(cmd_set)(key, value, delete=delete)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show passlink version information."""
        _handle_stage_result(cmd_version)()

    return app
