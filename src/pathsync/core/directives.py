"""Directive lines that put the install root's bin directory on PATH.

Two forms are recognized, each matched as one literal line:
- LegacyExport: the inline `export PATH=...` line older releases wrote
- Indirection: a `source` line pointing at the generated env script

Nothing here interprets shell syntax. Pure functions only; file access
lives in rc_patcher.
"""

from dataclasses import dataclass

from pathsync.core.constants import BIN_DIR_NAME, ENV_SCRIPT_NAME
from pathsync.core.install_root import InstallRoot


@dataclass(frozen=True)
class LegacyExport:
    """Inline PATH export naming the bin directory directly."""

    line: str


@dataclass(frozen=True)
class Indirection:
    """Line sourcing the generated env script."""

    line: str


Directive = LegacyExport | Indirection


def export_line(install_root: InstallRoot) -> str:
    """The PATH export line, shared by the env script and the legacy form."""
    return f'export PATH="{install_root.display_path}/{BIN_DIR_NAME}:$PATH"'


def legacy_directive(install_root: InstallRoot) -> LegacyExport:
    return LegacyExport(line=export_line(install_root))


def indirection_directive(install_root: InstallRoot) -> Indirection:
    return Indirection(line=f'source "{install_root.display_path}/{ENV_SCRIPT_NAME}"')


def contains_line(content: str, line: str) -> bool:
    """Check whether line appears in content as a whole line."""
    return line in content.split("\n")


def append_line(content: str, line: str) -> str:
    """Append line as its own block: a blank separator, the line, a newline.

    Example:
        >>> append_line("foo\\nbar", "source x")
        'foo\\nbar\\nsource x\\n'
    """
    return f"{content}\n{line}\n"


def _remove_line_once(content: str, line: str) -> str | None:
    """Remove one whole-line occurrence of line, or return None if there is none."""
    if content in (line, f"{line}\n"):
        return ""

    # Block written by append_line: dropping it restores the original tail
    appended = f"\n{line}\n"
    if content.endswith(appended):
        return content[: -len(appended)]

    unterminated = f"\n{line}"
    if content.endswith(unterminated):
        return content[: -len(unterminated)]

    leading = f"{line}\n"
    if content.startswith(leading):
        return content[len(leading) :]

    index = content.find(appended)
    if index == -1:
        return None
    return content[:index] + "\n" + content[index + len(appended) :]


def remove_line(content: str, line: str) -> str:
    """Remove every whole-line occurrence of line from content.

    Each occurrence takes one adjacent newline with it, so a line added with
    append_line comes out without leaving a blank line behind.

    Example:
        >>> remove_line(append_line("foo\\nbar", "source x"), "source x")
        'foo\\nbar'
    """
    result = content
    while True:
        shortened = _remove_line_once(result, line)
        if shortened is None:
            return result
        result = shortened
