"""Resolution and rendering of the toolchain install root."""

from dataclasses import dataclass
from pathlib import Path

from pathsync.core.config import ShellEnvironment
from pathsync.core.constants import (
    BIN_DIR_NAME,
    DEFAULT_INSTALL_SUBDIR,
    ENV_SCRIPT_NAME,
    HOME_TOKEN,
)


@dataclass(frozen=True)
class InstallRoot:
    """Directory holding the toolchain's bin directory and env script.

    is_default is True when the root equals <home>/.toolchain, whether or not
    it was set through the override variable.
    """

    path: Path
    is_default: bool

    @property
    def bin_dir(self) -> Path:
        return self.path / BIN_DIR_NAME

    @property
    def env_script_path(self) -> Path:
        return self.path / ENV_SCRIPT_NAME

    @property
    def display_path(self) -> str:
        """Root as written into shell files.

        The default root is written as $HOME/.toolchain so the same line
        works on every machine that shares the home layout.
        """
        if self.is_default:
            return f"{HOME_TOKEN}/{DEFAULT_INSTALL_SUBDIR}"
        return str(self.path)


def default_install_root(home_dir: Path) -> Path:
    return home_dir / DEFAULT_INSTALL_SUBDIR


def resolve_install_root(environment: ShellEnvironment) -> InstallRoot:
    """Resolve the install root from the override variable or the home default."""
    default = default_install_root(environment.home_dir)
    path = environment.install_root_override or default
    return InstallRoot(path=path, is_default=path == default)
