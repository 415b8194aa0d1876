"""Uninstall command: take the toolchain's bin directory off PATH."""

import click

from pathsync.cli.commands.install import report_result
from pathsync.core.context import PathSyncContext
from pathsync.core.errors import PathSyncError
from pathsync.output import user_output


@click.command("uninstall")
@click.option(
    "--no-modify-path",
    is_flag=True,
    help="Do not touch shell startup files or the registry.",
)
@click.pass_obj
def uninstall_cmd(ctx: PathSyncContext, *, no_modify_path: bool) -> None:
    """Remove the toolchain's bin directory from PATH.

    Removes the source line and any older inline export from every
    recognized startup file. The env script itself is left in place.
    """
    path_sync = ctx.path_sync(no_modify_path=no_modify_path)
    try:
        result = path_sync.uninstall(ctx.install_root)
    except PathSyncError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    if result.skipped:
        user_output("Skipped PATH modification.")
        return

    report_result(result, verb="Cleaned")
