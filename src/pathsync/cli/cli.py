import logging

import click

from pathsync.cli.commands.install import install_cmd
from pathsync.cli.commands.status import status_cmd
from pathsync.cli.commands.uninstall import uninstall_cmd
from pathsync.core.context import create_context
from pathsync.core.errors import PathSyncError
from pathsync.output import user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pathsync")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Keep a toolchain's bin directory on your PATH."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except PathSyncError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e


cli.add_command(install_cmd)
cli.add_command(uninstall_cmd)
cli.add_command(status_cmd)


def main() -> None:
    """CLI entry point used by the `pathsync` console script."""
    cli()
