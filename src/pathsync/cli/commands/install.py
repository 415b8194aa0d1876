"""Install command: put the toolchain's bin directory on PATH."""

import click

from pathsync.core.context import PathSyncContext
from pathsync.core.errors import PathSyncError
from pathsync.core.sync import SyncResult
from pathsync.output import user_output


def post_install_hint(ctx: PathSyncContext) -> list[str]:
    """Lines telling the user how to pick up the new PATH in the current session."""
    if ctx.platform == "windows":
        return [
            "Restart your terminal so new programs see the updated PATH.",
        ]
    return [
        "To configure your current shell, run:",
        f'  source "{ctx.install_root.display_path}/env.sh"',
    ]


def report_result(result: SyncResult, *, verb: str) -> None:
    if result.script_written:
        user_output(click.style("✓", fg="green") + " Wrote env script")
    for path in result.changed_files:
        user_output(click.style("✓", fg="green") + f" {verb} {path}")
    if result.registry_changed:
        user_output(click.style("✓", fg="green") + f" {verb} user PATH in the registry")
    if not result.changed:
        user_output(click.style("✓", fg="green") + " PATH already up to date")


@click.command("install")
@click.option(
    "--no-modify-path",
    is_flag=True,
    help="Do not touch shell startup files or the registry.",
)
@click.pass_obj
def install_cmd(ctx: PathSyncContext, *, no_modify_path: bool) -> None:
    """Add the toolchain's bin directory to PATH.

    \b
    On Unix this writes env.sh into the install root and sources it from
    .profile, existing bash startup files and, for zsh users, .zshenv.
    On Windows it appends the bin directory to the user PATH.
    """
    path_sync = ctx.path_sync(no_modify_path=no_modify_path)
    try:
        result = path_sync.install(ctx.install_root)
    except PathSyncError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    if result.skipped:
        user_output("Skipped PATH modification.")
        user_output(f"Add {ctx.install_root.bin_dir} to PATH yourself to use the toolchain.")
        return

    report_result(result, verb="Updated")
    user_output("")
    for line in post_install_hint(ctx):
        user_output(line)
