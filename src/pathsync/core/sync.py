"""Install and uninstall sequencing for PATH synchronization.

Unix:    env script -> candidate resolution -> one rc edit per candidate
Windows: one registry edit for the bin directory

Errors propagate unchanged and abort the rest of the run. Edits already
made are kept; each one is idempotent, so rerunning finishes the job.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pathsync.core.config import ShellEnvironment
from pathsync.core.directives import contains_line, indirection_directive, legacy_directive
from pathsync.core.env_script import ensure_script
from pathsync.core.install_root import InstallRoot
from pathsync.core.rc_patcher import apply_install, apply_uninstall, read_rc
from pathsync.core.shell_candidates import resolve_candidates, resolve_cleanup_candidates
from pathsync.core.windows_path import WindowsPathStore
from pathsync.gateway.registry.abc import WindowsRegistry
from pathsync.gateway.registry.types import USER_ENVIRONMENT_PATH, RegistryLocation

logger = logging.getLogger(__name__)

Platform = Literal["unix", "windows"]


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one install or uninstall run."""

    skipped: bool
    script_written: bool
    changed_files: tuple[Path, ...]
    registry_changed: bool

    @staticmethod
    def skipped_result() -> "SyncResult":
        return SyncResult(
            skipped=True, script_written=False, changed_files=(), registry_changed=False
        )

    @property
    def changed(self) -> bool:
        return self.script_written or bool(self.changed_files) or self.registry_changed


@dataclass(frozen=True)
class CandidateStatus:
    """Directive state of one startup file."""

    path: Path
    exists: bool
    has_indirection: bool
    has_legacy: bool


class PathSync:
    """Runs install and uninstall against the shell files or the registry.

    Takes its collaborators as constructor args (testable, follows the
    gateway pattern). Returns structured SyncResult values and raises
    PathSyncError subclasses; no click output here.
    """

    def __init__(
        self,
        *,
        environment: ShellEnvironment,
        platform: Platform,
        registry: WindowsRegistry,
        modify_path: bool,
        registry_location: RegistryLocation = USER_ENVIRONMENT_PATH,
    ) -> None:
        self._environment = environment
        self._platform = platform
        self._path_store = WindowsPathStore(registry)
        self._modify_path = modify_path
        self._registry_location = registry_location

    def install(self, install_root: InstallRoot) -> SyncResult:
        """Expose install_root's bin directory on PATH.

        Raises:
            ScriptWriteError: If the env script cannot be written
            ShellConfigUpdateError: If a startup file cannot be updated
            RegistryAccessError: If the registry cannot be updated
        """
        if not self._modify_path:
            logger.debug("PATH modification disabled; skipping install")
            return SyncResult.skipped_result()

        if self._platform == "windows":
            changed = self._path_store.add_segment(
                self._registry_location, str(install_root.bin_dir)
            )
            return SyncResult(
                skipped=False, script_written=False, changed_files=(), registry_changed=changed
            )

        script_written = ensure_script(install_root)
        candidates = resolve_candidates(
            self._environment.shell_hint,
            self._environment.home_dir,
            self._environment.zdotdir,
        )
        changed_files = [c.path for c in candidates if apply_install(c, install_root)]
        return SyncResult(
            skipped=False,
            script_written=script_written,
            changed_files=tuple(changed_files),
            registry_changed=False,
        )

    def uninstall(self, install_root: InstallRoot) -> SyncResult:
        """Remove install_root's bin directory from PATH.

        Works whether or not the env script still exists. The script itself
        is left in place.

        Raises:
            ShellConfigUpdateError: If a startup file cannot be updated
            RegistryAccessError: If the registry cannot be updated
        """
        if not self._modify_path:
            logger.debug("PATH modification disabled; skipping uninstall")
            return SyncResult.skipped_result()

        if self._platform == "windows":
            changed = self._path_store.remove_segment(
                self._registry_location, str(install_root.bin_dir)
            )
            return SyncResult(
                skipped=False, script_written=False, changed_files=(), registry_changed=changed
            )

        candidates = resolve_cleanup_candidates(
            self._environment.home_dir, self._environment.zdotdir
        )
        changed_files = [c.path for c in candidates if apply_uninstall(c, install_root)]
        return SyncResult(
            skipped=False,
            script_written=False,
            changed_files=tuple(changed_files),
            registry_changed=False,
        )

    def inspect(self, install_root: InstallRoot) -> list[CandidateStatus]:
        """Report which recognized startup files carry a directive. Read-only."""
        indirection = indirection_directive(install_root).line
        legacy = legacy_directive(install_root).line
        statuses: list[CandidateStatus] = []
        for candidate in resolve_cleanup_candidates(
            self._environment.home_dir, self._environment.zdotdir
        ):
            content = read_rc(candidate.path) or ""
            statuses.append(
                CandidateStatus(
                    path=candidate.path,
                    exists=candidate.exists,
                    has_indirection=contains_line(content, indirection),
                    has_legacy=contains_line(content, legacy),
                )
            )
        return statuses

    def bin_dir_on_registry_path(self, install_root: InstallRoot) -> bool:
        """Check whether the bin directory is in the registry PATH value."""
        return self._path_store.contains_segment(
            self._registry_location, str(install_root.bin_dir)
        )
