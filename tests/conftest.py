"""Shared fixtures for pathsync tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from pathsync.core.config import ShellEnvironment
from pathsync.core.install_root import InstallRoot, resolve_install_root

MakeEnv = Callable[..., ShellEnvironment]


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """An empty home directory for the test user."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def custom_root(tmp_path: Path) -> Path:
    """An install root outside the home directory, written literally into rc files."""
    return tmp_path / "toolchain"


@pytest.fixture
def make_env(home: Path) -> MakeEnv:
    """Build a ShellEnvironment rooted at the test home directory."""

    def _make(
        *,
        shell_hint: str | None = None,
        zdotdir: Path | None = None,
        install_root_override: Path | None = None,
    ) -> ShellEnvironment:
        return ShellEnvironment(
            shell_hint=shell_hint,
            home_dir=home,
            zdotdir=zdotdir,
            install_root_override=install_root_override,
        )

    return _make


@pytest.fixture
def default_root(make_env: MakeEnv) -> InstallRoot:
    return resolve_install_root(make_env())


@pytest.fixture
def literal_root(make_env: MakeEnv, custom_root: Path) -> InstallRoot:
    return resolve_install_root(make_env(install_root_override=custom_root))
