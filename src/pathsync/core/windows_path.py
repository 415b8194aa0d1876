"""Idempotent edits of the Windows per-user PATH registry value.

PATH is a `;`-joined list of directories stored as REG_SZ or REG_EXPAND_SZ.
Edits keep the stored type, and removing the last directory deletes the
value instead of leaving an empty string behind.
"""

import logging

from pathsync.core.errors import RegistryAccessError
from pathsync.gateway.registry.abc import WindowsRegistry
from pathsync.gateway.registry.types import (
    RegistryLocation,
    RegistryPathValue,
    UnsupportedPathValue,
)

logger = logging.getLogger(__name__)


def split_segments(data: str) -> list[str]:
    return [segment for segment in data.split(";") if segment]


def _same_segment(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


class WindowsPathStore:
    """Adds and removes single directories in a registry PATH value.

    Takes the registry gateway as a constructor arg so the logic can be
    tested with FakeWindowsRegistry on any platform.
    """

    def __init__(self, registry: WindowsRegistry) -> None:
        self._registry = registry

    def _read(
        self, location: RegistryLocation
    ) -> RegistryPathValue | UnsupportedPathValue | None:
        try:
            return self._registry.read_value(location)
        except OSError as e:
            raise RegistryAccessError(location) from e

    def _write(self, location: RegistryLocation, value: RegistryPathValue) -> None:
        try:
            self._registry.write_value(location, value)
        except OSError as e:
            raise RegistryAccessError(location) from e
        self._registry.broadcast_environment_change()

    def _delete(self, location: RegistryLocation) -> None:
        try:
            self._registry.delete_value(location)
        except OSError as e:
            raise RegistryAccessError(location) from e
        self._registry.broadcast_environment_change()

    def contains_segment(self, location: RegistryLocation, segment: str) -> bool:
        """Check whether segment is one of the directories in the value."""
        current = self._read(location)
        if not isinstance(current, RegistryPathValue):
            return False
        return any(_same_segment(s, segment) for s in split_segments(current.data))

    def add_segment(self, location: RegistryLocation, segment: str) -> bool:
        """Append segment to the value unless it is already present.

        A value that did not exist is created as REG_EXPAND_SZ.

        Returns:
            True if the registry was written

        Raises:
            RegistryAccessError: If the registry cannot be read or written
        """
        current = self._read(location)
        if isinstance(current, UnsupportedPathValue):
            logger.warning("Not modifying %s: %s", location.display(), current.message)
            return False

        segments = split_segments(current.data) if current is not None else []
        if any(_same_segment(s, segment) for s in segments):
            logger.debug("%s already contains %s", location.display(), segment)
            return False

        value_type = current.value_type if current is not None else "expandable"
        data = ";".join([*segments, segment])
        self._write(location, RegistryPathValue(data=data, value_type=value_type))
        logger.debug("Added %s to %s", segment, location.display())
        return True

    def remove_segment(self, location: RegistryLocation, segment: str) -> bool:
        """Remove segment from the value, deleting the value if nothing is left.

        Returns:
            True if the registry was written or the value deleted

        Raises:
            RegistryAccessError: If the registry cannot be read or written
        """
        current = self._read(location)
        if current is None:
            return False
        if isinstance(current, UnsupportedPathValue):
            logger.warning("Not modifying %s: %s", location.display(), current.message)
            return False

        segments = split_segments(current.data)
        remaining = [s for s in segments if not _same_segment(s, segment)]
        if len(remaining) == len(segments):
            logger.debug("%s does not contain %s", location.display(), segment)
            return False

        if not remaining:
            self._delete(location)
            logger.debug("Deleted %s: no directories left", location.display())
            return True

        data = ";".join(remaining)
        self._write(location, RegistryPathValue(data=data, value_type=current.value_type))
        logger.debug("Removed %s from %s", segment, location.display())
        return True
