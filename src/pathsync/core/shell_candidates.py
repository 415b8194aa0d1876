"""Discovery of the shell startup files that must stay in sync.

Resolution is pure apart from existence probes, which happen at call time
and are never cached.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pathsync.core.constants import (
    BASH_RC_FILES,
    LEGACY_RC_FILES,
    PROFILE,
    ZPROFILE,
    ZSHENV,
)

# Directive a candidate is expected to carry after install
DirectiveKind = Literal["indirection", "legacy"]


@dataclass(frozen=True)
class ShellCandidate:
    """A startup file considered for directive insertion or removal.

    required candidates may be created by install; all others are only
    edited when they already exist. directive="legacy" marks a file that is
    only scanned for the old inline export during migration.
    """

    path: Path
    exists: bool
    directive: DirectiveKind
    required: bool


def _candidate(path: Path, *, directive: DirectiveKind, required: bool) -> ShellCandidate:
    return ShellCandidate(path=path, exists=path.is_file(), directive=directive, required=required)


def is_zsh(shell_hint: str | None) -> bool:
    """Check whether a $SHELL-style hint names a zsh-family shell."""
    if shell_hint is None:
        return False
    return "zsh" in Path(shell_hint).name


def zsh_dir(home_dir: Path, zdotdir_override: Path | None) -> Path:
    """Directory zsh reads its startup files from."""
    return zdotdir_override if zdotdir_override is not None else home_dir


def resolve_candidates(
    shell_hint: str | None,
    home_dir: Path,
    zdotdir_override: Path | None,
) -> list[ShellCandidate]:
    """List the startup files an install must update, in a stable order.

    Args:
        shell_hint: Value of $SHELL, if any
        home_dir: User home directory
        zdotdir_override: Value of $ZDOTDIR, if any; only affects zsh files

    Returns:
        .profile (always), existing bash files, .zshenv when the hint is zsh,
        then the legacy migration scan for files not already listed
    """
    candidates = [_candidate(home_dir / PROFILE, directive="indirection", required=True)]

    for name in BASH_RC_FILES:
        path = home_dir / name
        if path.is_file():
            candidates.append(_candidate(path, directive="indirection", required=False))

    if is_zsh(shell_hint):
        zshenv = zsh_dir(home_dir, zdotdir_override) / ZSHENV
        candidates.append(_candidate(zshenv, directive="indirection", required=True))

    seen = {candidate.path for candidate in candidates}
    for path in _legacy_paths(home_dir, zdotdir_override):
        if path in seen:
            continue
        seen.add(path)
        candidates.append(_candidate(path, directive="legacy", required=False))

    return candidates


def _legacy_paths(home_dir: Path, zdotdir_override: Path | None) -> list[Path]:
    dirs = [home_dir]
    if zdotdir_override is not None:
        dirs.append(zdotdir_override)
    return [directory / name for directory in dirs for name in LEGACY_RC_FILES]


def resolve_cleanup_candidates(
    home_dir: Path,
    zdotdir_override: Path | None,
) -> list[ShellCandidate]:
    """List every recognized startup file for uninstall, whatever the current shell.

    The user may have switched shells since install, so the shell hint is
    ignored here. Nothing in this list is ever created.
    """
    paths = [home_dir / PROFILE, *(home_dir / name for name in BASH_RC_FILES)]
    paths += [home_dir / ZSHENV, home_dir / ZPROFILE]
    if zdotdir_override is not None:
        paths += [zdotdir_override / ZSHENV, *(zdotdir_override / n for n in LEGACY_RC_FILES)]

    candidates: list[ShellCandidate] = []
    seen: set[Path] = set()
    for path in paths:
        if path in seen:
            continue
        seen.add(path)
        candidates.append(_candidate(path, directive="indirection", required=False))
    return candidates
