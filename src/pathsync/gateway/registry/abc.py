"""Abstract base class for Windows registry operations.

The registry gateway is the only code allowed to touch winreg. Everything
that edits the user PATH goes through it so tests can run on any platform.
"""

from abc import ABC, abstractmethod

from pathsync.gateway.registry.types import (
    RegistryLocation,
    RegistryPathValue,
    UnsupportedPathValue,
)


class WindowsRegistry(ABC):
    """Abstract interface for reading and writing a string registry value.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def read_value(
        self, location: RegistryLocation
    ) -> RegistryPathValue | UnsupportedPathValue | None:
        """Read a string value.

        Args:
            location: Key and value name to read

        Returns:
            The value and its string type, UnsupportedPathValue if the value
            has a non-string type, or None if the key or value does not exist

        Raises:
            OSError: If the registry cannot be accessed
        """
        ...

    @abstractmethod
    def write_value(self, location: RegistryLocation, value: RegistryPathValue) -> None:
        """Create or overwrite a string value, creating the key if needed.

        Raises:
            OSError: If the registry cannot be written
        """
        ...

    @abstractmethod
    def delete_value(self, location: RegistryLocation) -> None:
        """Delete a value. Deleting a value that does not exist is a no-op.

        Raises:
            OSError: If the registry cannot be written
        """
        ...

    @abstractmethod
    def broadcast_environment_change(self) -> None:
        """Tell running programs that the user environment changed."""
        ...
