import logging

import click

from pushui import __version__
from pushui.commands.add import add_cmd
from pushui.commands.init import init_cmd
from pushui.commands.list import list_cmd
from pushui.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, hidden=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Add predesigned UI components to your project."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(list_cmd)
cli.add_command(list_cmd, name="ls")


def main() -> None:
    """CLI entry point used by the `pushui` console script."""
    cli()


if __name__ == "__main__":
    main()
