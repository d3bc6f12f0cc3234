"""csv2json CLI entry point."""

import sys

import click

from .. import __version__
from ..converter import convert
from ..delimiter import parse_delimiter
from ..errors import Csv2JsonError
from ..models import OutputMode, RunConfig
from .completion import SHELLS, gen_completion_callback
from .helpers import fail, silence_stdout
from .params import HEADER_POLICY


@click.command(name="csv2json")
@click.argument("csv", nargs=-1, metavar="[CSV]...")
@click.option(
    "-d",
    "--delimiter",
    help="Field delimiter (\\t for tab). By default, it is predicted from the extension",
)
@click.option(
    "-a",
    "--array",
    "as_array",
    is_flag=True,
    help="Output arrays instead of objects",
)
@click.option(
    "-H",
    "--header",
    "header_policy",
    type=HEADER_POLICY,
    default=None,
    help="Emit the header row as a line: first-file-only (ff), no, or always. "
    "Defaults to always with --array, otherwise no",
)
@click.option(
    "--gen-completion",
    "shell",
    type=click.Choice(SHELLS, case_sensitive=False),
    is_eager=True,
    expose_value=False,
    callback=gen_completion_callback,
    help="Generate tab-completion scripts for your shell",
)
@click.version_option(__version__, prog_name="csv2json")
def cli(csv, delimiter, as_array, header_policy):
    """Convert CSV/TSV to newline-delimited JSON.

    Reads each CSV path in turn (stdin when none is given, or for "-") and
    writes one JSON value per row to stdout. The first row of every input
    is its header.

    Examples:
        csv2json data.csv                 # {"name":"Alice","age":"30"}
        csv2json -a data.tsv              # ["name","age"] then ["Alice","30"]
        cat a.csv | csv2json -H ff - b.csv
    """
    try:
        config = RunConfig(
            paths=list(csv),
            delimiter=parse_delimiter(delimiter) if delimiter is not None else None,
            mode=OutputMode.from_flags(as_array, header_policy),
        )
        convert(config, sys.stdout.buffer)
    except BrokenPipeError as e:
        silence_stdout()
        fail(str(e))
    except (Csv2JsonError, OSError) as e:
        fail(str(e))


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
