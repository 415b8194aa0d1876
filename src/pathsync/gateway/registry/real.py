"""Real WindowsRegistry implementation using winreg.

winreg only exists on Windows, so it is imported inside each method. The
class can be constructed anywhere; calling it off Windows raises OSError.
"""

import ctypes
import logging

from pathsync.gateway.registry.abc import WindowsRegistry
from pathsync.gateway.registry.types import (
    RegistryLocation,
    RegistryPathValue,
    UnsupportedPathValue,
)

logger = logging.getLogger(__name__)

HWND_BROADCAST = 0xFFFF
WM_SETTINGCHANGE = 0x001A
SMTO_ABORTIFHUNG = 0x0002
BROADCAST_TIMEOUT_MS = 5000


def _winreg():
    try:
        import winreg
    except ImportError:
        raise OSError("the Windows registry is only available on Windows") from None
    return winreg


def _hive(location: RegistryLocation) -> int:
    winreg = _winreg()
    hive = getattr(winreg, location.hive, None)
    if hive is None:
        raise OSError(f"unknown registry hive {location.hive}")
    return hive


class RealWindowsRegistry(WindowsRegistry):
    """Production implementation backed by winreg."""

    def read_value(
        self, location: RegistryLocation
    ) -> RegistryPathValue | UnsupportedPathValue | None:
        winreg = _winreg()
        try:
            with winreg.OpenKey(_hive(location), location.subkey, 0, winreg.KEY_READ) as key:
                data, type_code = winreg.QueryValueEx(key, location.value_name)
        except FileNotFoundError:
            return None

        if type_code == winreg.REG_EXPAND_SZ:
            return RegistryPathValue(data=data, value_type="expandable")
        if type_code == winreg.REG_SZ:
            return RegistryPathValue(data=data, value_type="string")
        return UnsupportedPathValue(type_code=type_code)

    def write_value(self, location: RegistryLocation, value: RegistryPathValue) -> None:
        winreg = _winreg()
        type_code = winreg.REG_EXPAND_SZ if value.value_type == "expandable" else winreg.REG_SZ
        with winreg.CreateKeyEx(_hive(location), location.subkey, 0, winreg.KEY_SET_VALUE) as key:
            winreg.SetValueEx(key, location.value_name, 0, type_code, value.data)

    def delete_value(self, location: RegistryLocation) -> None:
        winreg = _winreg()
        try:
            with winreg.OpenKey(_hive(location), location.subkey, 0, winreg.KEY_SET_VALUE) as key:
                winreg.DeleteValue(key, location.value_name)
        except FileNotFoundError:
            return

    def broadcast_environment_change(self) -> None:
        # Best effort: programs that miss the broadcast pick up the change on restart
        windll = getattr(ctypes, "windll", None)
        if windll is None:
            logger.debug("Skipping WM_SETTINGCHANGE broadcast: not on Windows")
            return
        windll.user32.SendMessageTimeoutW(
            HWND_BROADCAST,
            WM_SETTINGCHANGE,
            0,
            "Environment",
            SMTO_ABORTIFHUNG,
            BROADCAST_TIMEOUT_MS,
            None,
        )
