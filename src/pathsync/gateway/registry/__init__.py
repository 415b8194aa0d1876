"""Windows registry access for the user PATH value."""

from pathsync.gateway.registry.abc import WindowsRegistry as WindowsRegistry
from pathsync.gateway.registry.fake import FakeWindowsRegistry as FakeWindowsRegistry
from pathsync.gateway.registry.real import RealWindowsRegistry as RealWindowsRegistry
