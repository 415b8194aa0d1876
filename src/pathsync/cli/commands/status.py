"""Status command: show where the bin directory is exposed on PATH."""

import click

from pathsync.core.context import PathSyncContext
from pathsync.core.errors import PathSyncError
from pathsync.output import machine_output, user_output


def _describe(*, exists: bool, has_indirection: bool, has_legacy: bool) -> str:
    if not exists:
        return "missing"
    if has_indirection and has_legacy:
        return "sourced + legacy export"
    if has_indirection:
        return "sourced"
    if has_legacy:
        return "legacy export"
    return "not configured"


@click.command("status")
@click.pass_obj
def status_cmd(ctx: PathSyncContext) -> None:
    """Show which startup files or registry values expose the bin directory."""
    path_sync = ctx.path_sync(no_modify_path=False)
    user_output(f"Install root: {ctx.install_root.path}")

    try:
        if ctx.platform == "windows":
            on_path = path_sync.bin_dir_on_registry_path(ctx.install_root)
            state = "present" if on_path else "absent"
            machine_output(f"{ctx.install_root.bin_dir}: {state}")
            return

        for status in path_sync.inspect(ctx.install_root):
            description = _describe(
                exists=status.exists,
                has_indirection=status.has_indirection,
                has_legacy=status.has_legacy,
            )
            machine_output(f"{status.path}: {description}")
    except PathSyncError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
