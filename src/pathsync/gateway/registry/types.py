"""Value types for the Windows registry gateway.

RegistryPathValue | UnsupportedPathValue follows the NonIdealState pattern:
a PATH stored with a non-string registry type is reported, not coerced.
"""

from dataclasses import dataclass
from typing import Literal

# REG_SZ is "string", REG_EXPAND_SZ is "expandable"
PathValueType = Literal["string", "expandable"]


@dataclass(frozen=True)
class RegistryLocation:
    """A named value under a registry key."""

    hive: str
    subkey: str
    value_name: str

    def display(self) -> str:
        return f"{self.hive}\\{self.subkey}\\{self.value_name}"


USER_ENVIRONMENT_PATH = RegistryLocation(
    hive="HKEY_CURRENT_USER",
    subkey="Environment",
    value_name="PATH",
)


@dataclass(frozen=True)
class RegistryPathValue:
    """A string registry value together with its string type."""

    data: str
    value_type: PathValueType


@dataclass(frozen=True)
class UnsupportedPathValue:
    """Error: the value exists but is not a string type. Implements NonIdealState."""

    type_code: int

    @property
    def error_type(self) -> str:
        return "unsupported-registry-type"

    @property
    def message(self) -> str:
        return f"registry value has type {self.type_code}, expected REG_SZ or REG_EXPAND_SZ"
