"""Shell completion script generation."""

import click
from click.shell_completion import get_completion_class

SHELLS = ["bash", "zsh", "fish"]


def completion_source(command: click.Command, prog_name: str, shell: str) -> str:
    """Return click's completion script for ``command`` in ``shell``.

    Raises:
        click.BadParameter: If click has no completion support for ``shell``
    """
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.BadParameter(f"unsupported shell: {shell}")
    complete_var = f"_{prog_name.replace('-', '_').upper()}_COMPLETE"
    return comp_cls(command, {}, prog_name, complete_var).source()


def gen_completion_callback(ctx: click.Context, param, value) -> None:
    """Eager ``--gen-completion`` handler: print the script and exit 0."""
    if value is None or ctx.resilient_parsing:
        return
    prog_name = ctx.find_root().info_name or "csv2json"
    click.echo(completion_source(ctx.command, prog_name, value))
    ctx.exit(0)
