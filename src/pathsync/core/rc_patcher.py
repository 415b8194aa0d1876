"""Idempotent edits of a single shell startup file.

Each call reads one file, computes the new content with the pure helpers in
directives, and writes back only when the content changed. Calls are
self-contained, so a failed run can simply be retried.
"""

import logging
from pathlib import Path

from pathsync.core.directives import (
    append_line,
    contains_line,
    indirection_directive,
    legacy_directive,
    remove_line,
)
from pathsync.core.errors import ShellConfigUpdateError
from pathsync.core.install_root import InstallRoot
from pathsync.core.shell_candidates import ShellCandidate

logger = logging.getLogger(__name__)

# Files are handled as raw bytes: no newline translation, and bytes that are
# not UTF-8 round-trip through surrogate escapes.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def read_rc(path: Path) -> str | None:
    """Read a startup file, returning None if it does not exist."""
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ShellConfigUpdateError(path) from e
    return data.decode(_ENCODING, errors=_ERRORS)


def _write(path: Path, content: str) -> None:
    try:
        path.write_bytes(content.encode(_ENCODING, errors=_ERRORS))
    except OSError as e:
        raise ShellConfigUpdateError(path) from e


def install_content(content: str, candidate: ShellCandidate, install_root: InstallRoot) -> str:
    """Compute a candidate's content after install.

    Legacy-only candidates lose the inline export. Indirection candidates
    lose it too and gain the source line, unless the source line is
    already there.
    """
    legacy = legacy_directive(install_root)
    if candidate.directive == "legacy":
        return remove_line(content, legacy.line)

    indirection = indirection_directive(install_root)
    if contains_line(content, indirection.line):
        return content
    return append_line(remove_line(content, legacy.line), indirection.line)


def uninstall_content(content: str, install_root: InstallRoot) -> str:
    """Compute a file's content after uninstall: both directive forms removed."""
    without_source = remove_line(content, indirection_directive(install_root).line)
    return remove_line(without_source, legacy_directive(install_root).line)


def apply_install(candidate: ShellCandidate, install_root: InstallRoot) -> bool:
    """Add the source line to one candidate, migrating any inline export.

    Args:
        candidate: File to update
        install_root: Install root the directive points at

    Returns:
        True if the file was written

    Raises:
        ShellConfigUpdateError: If the file cannot be read or written
    """
    content = read_rc(candidate.path)
    if content is None:
        if not candidate.required:
            logger.debug("Skipping %s: file does not exist", candidate.path)
            return False
        content = ""

    updated = install_content(content, candidate, install_root)
    if updated == content:
        logger.debug("No change needed in %s", candidate.path)
        return False

    _write(candidate.path, updated)
    logger.debug("Updated %s", candidate.path)
    return True


def apply_uninstall(candidate: ShellCandidate, install_root: InstallRoot) -> bool:
    """Remove the source line and any inline export from one candidate.

    Missing files are left missing.

    Returns:
        True if the file was written

    Raises:
        ShellConfigUpdateError: If the file cannot be read or written
    """
    content = read_rc(candidate.path)
    if content is None:
        return False

    updated = uninstall_content(content, install_root)
    if updated == content:
        logger.debug("No directive found in %s", candidate.path)
        return False

    _write(candidate.path, updated)
    logger.debug("Removed directives from %s", candidate.path)
    return True
