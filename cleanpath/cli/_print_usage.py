"""Print the short usage summary."""

import typer

USAGE = """\
usage: cleanpath [options] <path> [path ...]
options:
  -i, --stdin       read paths from stdin, one per line
  -t, --tilda       expand leading tilda
  -T, --untilda     unexpand leading tilda
  -e, --env         expand environment variables
  -E, --unenv       unexpand environment variables
  -a, --absolute    make path absolute
  -A, --unabsolute  make path relative
  -o, --old         regex pattern to replace
  -n, --new         replacement for -o pattern
  -u, --user        user name for tilda expansion
  -b, --base        base directory for absolute/relative paths (default '.')
  -p, --parent      maximum parent traversals for relative paths (default 0, '-' unlimited)
  -x, --eXpand      environment variable name to expand (repeatable, '-' means all)
  -v, --verbose     verbose logging to stderr
  -h, --help        show help and exit"""


def _print_usage(err: bool = True) -> None:
    """Print the usage summary to stderr (or stdout)."""
    typer.echo(USAGE, err=err)
