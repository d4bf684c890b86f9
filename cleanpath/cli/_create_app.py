"""Create the cleanpath Typer CLI app."""

import sys
from typing import Annotated

import typer

from ..api.config.build_config import build_config
from ..api.config.ConfigError import ConfigError
from ..api.pipeline.transform_path import transform_path
from ..api.pipeline.transform_path_verbose import transform_path_verbose
from ..constants import PROG_NAME
from ._print_trace import _print_trace
from ._print_usage import _print_usage
from ._read_stdin_paths import _read_stdin_paths

# -h/--help is the command's own eager option, printing the short usage
_CONTEXT_SETTINGS: dict = {"help_option_names": []}


def _create_app() -> typer.Typer:
    """Create and configure the cleanpath Typer app."""
    app = typer.Typer(
        name=PROG_NAME,
        help="Clean and transform path strings",
        add_completion=False,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings=_CONTEXT_SETTINGS,
    )

    def show_help(value: bool) -> None:
        if value:
            _print_usage(err=False)
            raise typer.Exit()

    @app.command(context_settings=_CONTEXT_SETTINGS)
    def cleanpath(
        paths: Annotated[list[str] | None, typer.Argument(help="Paths to transform", show_default=False)] = None,
        read_input: Annotated[bool, typer.Option("-i", "--stdin", help="Read paths from stdin, one per line")] = False,
        tilde_expand: Annotated[bool, typer.Option("-t", "--tilda", help="Expand leading tilda")] = False,
        tilde_unexpand: Annotated[bool, typer.Option("-T", "--untilda", help="Unexpand leading tilda")] = False,
        env_expand: Annotated[bool, typer.Option("-e", "--env", help="Expand environment variables")] = False,
        env_unexpand: Annotated[bool, typer.Option("-E", "--unenv", help="Unexpand environment variables")] = False,
        absolute: Annotated[bool, typer.Option("-a", "--absolute", help="Make path absolute")] = False,
        unabsolute: Annotated[bool, typer.Option("-A", "--unabsolute", help="Make path relative")] = False,
        old_pattern: Annotated[str, typer.Option("-o", "--old", help="Regex pattern to replace")] = "",
        new_pattern: Annotated[str, typer.Option("-n", "--new", help="Replacement for -o pattern")] = "",
        user: Annotated[str, typer.Option("-u", "--user", help="User name for tilda expansion")] = "",
        base: Annotated[str, typer.Option("-b", "--base", help="Base directory for absolute/relative paths")] = ".",
        parent: Annotated[
            str, typer.Option("-p", "--parent", help="Maximum parent traversals for relative paths, '-' unlimited")
        ] = "0",
        env_names: Annotated[
            list[str] | None,
            typer.Option("-x", "--eXpand", help="Environment variable name to expand (repeatable, '-' means all)"),
        ] = None,
        verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose logging to stderr")] = False,
        help_: Annotated[
            bool,
            typer.Option("-h", "--help", is_eager=True, callback=show_help, help="Show help and exit"),
        ] = False,
    ) -> None:
        """Normalize paths and apply the selected transforms, one result per line."""
        try:
            config = build_config(
                {
                    "read_input": read_input,
                    "tilde_expand": tilde_expand,
                    "tilde_unexpand": tilde_unexpand,
                    "env_expand": env_expand,
                    "env_unexpand": env_unexpand,
                    "absolute": absolute,
                    "unabsolute": unabsolute,
                    "old_pattern": old_pattern,
                    "new_pattern": new_pattern,
                    "user": user,
                    "base": base,
                    "parent": parent,
                    "env_names": env_names or [],
                    "verbose": verbose,
                }
            )
        except ConfigError as e:
            typer.echo(f"{PROG_NAME}: {e}", err=True)
            _print_usage(err=True)
            raise typer.Exit(1) from None

        inputs = list(paths or [])
        if not read_input and not inputs:
            _print_usage(err=True)
            raise typer.Exit(1)

        if read_input:
            try:
                inputs.extend(_read_stdin_paths(sys.stdin))
            except (OSError, UnicodeDecodeError) as e:
                typer.echo(f"{PROG_NAME}: reading stdin: {e}", err=True)
                raise typer.Exit(1) from None

        for path in inputs:
            if verbose:
                final, trace = transform_path_verbose(path, config)
                _print_trace(trace)
            else:
                final = transform_path(path, config)
            typer.echo(final)

    return app
