"""Errors raised by the PATH synchronization engine.

Every error names the resource it failed on. Missing files and missing
registry values are never errors; callers treat them as already satisfied.
"""

from pathlib import Path

from pathsync.gateway.registry.types import RegistryLocation


class PathSyncError(RuntimeError):
    """Base class for errors that abort an install or uninstall."""


class ScriptWriteError(PathSyncError):
    """Error raised when the generated env script cannot be written."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"could not write env script {path}")


class ShellConfigUpdateError(PathSyncError):
    """Error raised when a shell startup file cannot be read or rewritten."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"could not amend shell profile at {path}\n"
            f"Make sure the file is readable and writable (chmod u+rw {path}) "
            f"or rerun with --no-modify-path and update PATH yourself."
        )


class RegistryAccessError(PathSyncError):
    """Error raised when the Windows PATH registry value cannot be read or written."""

    def __init__(self, location: RegistryLocation) -> None:
        self.location = location
        super().__init__(f"could not access registry value {location.display()}")


class ConfigError(PathSyncError):
    """Error raised when the settings file exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid settings file {path}: {reason}")
