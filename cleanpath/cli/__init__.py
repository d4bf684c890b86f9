"""CLI - main entry point."""

import sys


def _usage_error_types() -> tuple[type[Exception], ...]:
    """Usage error classes of click and of the click Typer runs on.

    Newer Typer releases bundle their own click, whose exceptions do not
    derive from the installed click's.
    """
    import click
    import typer

    bundled = tuple(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError")
    return (click.exceptions.UsageError, *bundled)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from ..constants import PROG_NAME
    from ..utils.configure_logging import configure_logging
    from ._create_app import _create_app
    from ._print_usage import _print_usage

    configure_logging()

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        rv = app(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except _usage_error_types() as e:
        typer.echo(f"{PROG_NAME}: {e.format_message()}", err=True)
        _print_usage(err=True)
        return 1
    except (click.exceptions.Abort, typer.Abort):
        return 130
    return rv if isinstance(rv, int) else 0
