"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from passlink.api.config.PasslinkConfig import PasslinkConfig
    from passlink.utils.configure_logging import configure_logging

    try:
        level = PasslinkConfig.load().log.level
    except ValueError:
        # Commands report the config error themselves
        level = "INFO"
    configure_logging(level=level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from passlink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from passlink.utils.get_package_version import get_package_version

        print(f"passlink {get_package_version()}")
        return 0

    _configure_logging()

    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
