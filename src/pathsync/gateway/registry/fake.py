"""Fake WindowsRegistry implementation for testing.

FakeWindowsRegistry is an in-memory implementation that enables fast and
deterministic tests of PATH editing on any platform.
"""

from pathsync.gateway.registry.abc import WindowsRegistry
from pathsync.gateway.registry.types import (
    RegistryLocation,
    RegistryPathValue,
    UnsupportedPathValue,
)


class FakeWindowsRegistry(WindowsRegistry):
    """In-memory fake implementation that tracks mutations.

    This class has NO public setup methods beyond constructor.
    All state is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        values: dict[RegistryLocation, RegistryPathValue | UnsupportedPathValue] | None = None,
        read_error: OSError | None = None,
        write_error: OSError | None = None,
    ) -> None:
        """Create FakeWindowsRegistry with optional initial state.

        Args:
            values: Initial values by location (missing location = value absent)
            read_error: Error to raise from read_value, simulating access denied
            write_error: Error to raise from write_value and delete_value
        """
        self._values = dict(values or {})
        self._read_error = read_error
        self._write_error = write_error
        self._writes: list[tuple[RegistryLocation, RegistryPathValue]] = []
        self._deletes: list[RegistryLocation] = []
        self._broadcast_count = 0

    # --- Test assertions ---

    @property
    def values(self) -> dict[RegistryLocation, RegistryPathValue | UnsupportedPathValue]:
        """Current registry state. Returns a copy to prevent external mutation."""
        return dict(self._values)

    @property
    def writes(self) -> list[tuple[RegistryLocation, RegistryPathValue]]:
        """Every write_value call in order.

        This property is for test assertions only.
        """
        return list(self._writes)

    @property
    def deletes(self) -> list[RegistryLocation]:
        """Every delete_value call in order.

        This property is for test assertions only.
        """
        return list(self._deletes)

    @property
    def broadcast_count(self) -> int:
        return self._broadcast_count

    # --- Registry operations ---

    def read_value(
        self, location: RegistryLocation
    ) -> RegistryPathValue | UnsupportedPathValue | None:
        if self._read_error is not None:
            raise self._read_error
        return self._values.get(location)

    def write_value(self, location: RegistryLocation, value: RegistryPathValue) -> None:
        if self._write_error is not None:
            raise self._write_error
        self._values[location] = value
        self._writes.append((location, value))

    def delete_value(self, location: RegistryLocation) -> None:
        if self._write_error is not None:
            raise self._write_error
        self._values.pop(location, None)
        self._deletes.append(location)

    def broadcast_environment_change(self) -> None:
        self._broadcast_count += 1
