"""Application context with dependency injection."""

import os
import sys
from dataclasses import dataclass

from pathsync.core.config import PathSyncConfig, ShellEnvironment, load_config
from pathsync.core.install_root import InstallRoot, resolve_install_root
from pathsync.core.sync import PathSync, Platform
from pathsync.gateway.registry.abc import WindowsRegistry
from pathsync.gateway.registry.real import RealWindowsRegistry


def detect_platform() -> Platform:
    return "windows" if sys.platform == "win32" else "unix"


@dataclass(frozen=True)
class PathSyncContext:
    """Immutable context holding all dependencies for pathsync operations.

    Created at CLI entry point and threaded through the commands.
    """

    environment: ShellEnvironment
    platform: Platform
    registry: WindowsRegistry
    install_root: InstallRoot
    config: PathSyncConfig

    def path_sync(self, *, no_modify_path: bool) -> PathSync:
        """Build the orchestrator; the CLI flag and the settings file can both disable it."""
        return PathSync(
            environment=self.environment,
            platform=self.platform,
            registry=self.registry,
            modify_path=self.config.modify_path and not no_modify_path,
        )

    @staticmethod
    def for_test(
        environment: ShellEnvironment,
        platform: Platform = "unix",
        registry: WindowsRegistry | None = None,
        config: PathSyncConfig | None = None,
    ) -> "PathSyncContext":
        """Create a context for tests with a fake registry and default settings.

        Example:
            >>> from pathlib import Path
            >>> env = ShellEnvironment(
            ...     shell_hint=None,
            ...     home_dir=Path("/tmp/home"),
            ...     zdotdir=None,
            ...     install_root_override=None,
            ... )
            >>> ctx = PathSyncContext.for_test(env)
        """
        from pathsync.gateway.registry.fake import FakeWindowsRegistry

        return PathSyncContext(
            environment=environment,
            platform=platform,
            registry=registry if registry is not None else FakeWindowsRegistry(),
            install_root=resolve_install_root(environment),
            config=config if config is not None else PathSyncConfig(),
        )


def create_context() -> PathSyncContext:
    """Create the production context from os.environ and the settings file.

    Raises:
        ConfigError: If the settings file is malformed
    """
    environment = ShellEnvironment.from_environ(os.environ)
    install_root = resolve_install_root(environment)
    return PathSyncContext(
        environment=environment,
        platform=detect_platform(),
        registry=RealWindowsRegistry(),
        install_root=install_root,
        config=load_config(install_root.path),
    )
