"""Configuration inputs for PATH synchronization.

Two sources feed a sync run:
- ShellEnvironment: the environment variables that decide which files to edit
- PathSyncConfig: persisted settings in <install_root>/settings.toml
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pathsync.core.constants import (
    HOME_ENV_VAR,
    INSTALL_ROOT_ENV_VAR,
    SETTINGS_FILE_NAME,
    SHELL_ENV_VAR,
    ZDOTDIR_ENV_VAR,
)
from pathsync.core.errors import ConfigError


def _non_empty(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if not value:
        return None
    return value


@dataclass(frozen=True)
class ShellEnvironment:
    """Snapshot of the environment variables consumed by a sync run."""

    shell_hint: str | None
    home_dir: Path
    zdotdir: Path | None
    install_root_override: Path | None

    @staticmethod
    def from_environ(environ: Mapping[str, str]) -> "ShellEnvironment":
        """Build from an environment mapping (usually os.environ).

        Empty variables count as unset. HOME falls back to Path.home().
        """
        home = _non_empty(environ, HOME_ENV_VAR)
        zdotdir = _non_empty(environ, ZDOTDIR_ENV_VAR)
        override = _non_empty(environ, INSTALL_ROOT_ENV_VAR)
        return ShellEnvironment(
            shell_hint=_non_empty(environ, SHELL_ENV_VAR),
            home_dir=Path(home) if home is not None else Path.home(),
            zdotdir=Path(zdotdir) if zdotdir is not None else None,
            install_root_override=Path(override) if override is not None else None,
        )


@dataclass(frozen=True)
class PathSyncConfig:
    """Persisted settings for PATH synchronization."""

    modify_path: bool = True


def settings_path(install_root: Path) -> Path:
    return install_root / SETTINGS_FILE_NAME


def load_config(install_root: Path) -> PathSyncConfig:
    """Load settings from <install_root>/settings.toml.

    Args:
        install_root: Directory holding the settings file

    Returns:
        PathSyncConfig with loaded values, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or has
            a wrongly typed value
    """
    path = settings_path(install_root)
    if not path.exists():
        return PathSyncConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, str(e)) from e
    except OSError as e:
        raise ConfigError(path, e.strerror or str(e)) from e

    modify_path = data.get("modify_path", True)
    if not isinstance(modify_path, bool):
        raise ConfigError(path, "'modify_path' must be true or false")

    return PathSyncConfig(modify_path=modify_path)
