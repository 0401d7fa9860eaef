"""tokendiff CLI - tokendiff command."""

import click

from tokendiff.cli.compare import compare_command
from tokendiff.cli.delta import delta_command
from tokendiff.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="tokendiff")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """tokendiff - Compare color token catalogs and suggest replacements."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else None)


cli.add_command(compare_command, name="compare")
cli.add_command(delta_command, name="delta")


if __name__ == "__main__":
    cli()
