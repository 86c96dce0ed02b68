"""Link Typer app factory."""

import typer

from passlink.api.link.cmd_format import cmd_format
from passlink.api.link.cmd_show import cmd_show
from passlink.cli._handle_stage_result import _handle_stage_result


def _print_line(output: dict) -> None:
    if output["line"]:
        typer.echo(output["line"])


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Build passage links from Bible references",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="format")
    def format_cmd(
        reference: str | None = typer.Argument(None, help="Bible reference, e.g. 'John 3:16-18' (default: clipboard)"),
        translation: str | None = typer.Option(None, "--translation", "-t", help="Translation code (default: config)"),
        separator: str | None = typer.Option(None, "--separator", "-s", help="String placed between links"),
        no_short_link: bool = typer.Option(False, "--no-short-link", help="Render the label as plain text"),
        no_app_bridge: bool = typer.Option(False, "--no-app-bridge", help='Leave out the "Open in Logos" link'),
        no_catalog: bool = typer.Option(False, "--no-catalog", help="Leave out the Biblia.com link"),
        line_only: bool = typer.Option(False, "--line-only", help="Print only the composed line to stdout"),
    ) -> None:
        """Convert a Bible reference into a line of passage links.

        Links enabled in the config are included unless switched off here.
        """
        _handle_stage_result(cmd_format, result_printer=_print_line if line_only else None)(
            reference=reference,
            translation=translation,
            separator=separator,
            short_link=False if no_short_link else None,
            app_bridge=False if no_app_bridge else None,
            catalog=False if no_catalog else None,
        )

    @app.command(name="show")
    def show_cmd(
        reference: str = typer.Argument(..., help="Bible reference, e.g. 'John 3:16-18'"),
        translation: str | None = typer.Option(None, "--translation", "-t", help="Translation code (default: config)"),
    ) -> None:
        """Show the label and every link for a reference."""
        _handle_stage_result(cmd_show)(reference=reference, translation=translation)

    return app
