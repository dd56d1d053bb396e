"""Operating-system family information consumed by resolvers."""

from __future__ import annotations

from enum import Enum
import ntpath
import os
import posixpath
import sys
from typing import TYPE_CHECKING
from typing import Protocol
from typing import runtime_checkable

if TYPE_CHECKING:
    import types


class OSType(str, Enum):
    """Operating-system families the resolver distinguishes."""

    UNKNOWN = "Unknown"
    WINDOWS = "Windows"
    OSX = "OSX"
    LINUX = "Linux"

    @classmethod
    def from_platform(cls, platform: str | None = None) -> OSType:
        """Map a ``sys.platform`` style string to an :class:`OSType`."""
        name = (platform if platform is not None else sys.platform).lower()
        if name.startswith(("win", "cygwin", "msys")):
            return cls.WINDOWS
        if name.startswith("darwin"):
            return cls.OSX
        if name.startswith("linux"):
            return cls.LINUX
        return cls.UNKNOWN

    @classmethod
    def parse(cls, value: str) -> OSType:
        """Parse a user-facing name such as ``"windows"`` or ``"mac"``."""
        lowered = value.strip().lower()
        aliases = {
            "windows": cls.WINDOWS,
            "win32": cls.WINDOWS,
            "osx": cls.OSX,
            "mac": cls.OSX,
            "macos": cls.OSX,
            "darwin": cls.OSX,
            "linux": cls.LINUX,
        }
        try:
            return aliases[lowered]
        except KeyError:
            raise ValueError(f"Unknown platform: {value!r}") from None


def path_module_for(os_type: OSType | None) -> types.ModuleType:
    """Return the ``os.path`` flavour for *os_type*.

    ``None`` means the running interpreter's own rules.
    """
    if os_type is None:
        return os.path
    return ntpath if os_type is OSType.WINDOWS else posixpath


@runtime_checkable
class IPlatformService(Protocol):
    """Read-only OS family predicates."""

    @property
    def os_type(self) -> OSType: ...

    @property
    def is_windows(self) -> bool: ...

    @property
    def is_mac(self) -> bool: ...

    @property
    def is_linux(self) -> bool: ...


class StaticPlatformService:
    """Platform service reporting a fixed OS family."""

    def __init__(self, os_type: OSType) -> None:
        self._os_type = os_type

    @property
    def os_type(self) -> OSType:
        return self._os_type

    @property
    def is_windows(self) -> bool:
        return self._os_type is OSType.WINDOWS

    @property
    def is_mac(self) -> bool:
        return self._os_type is OSType.OSX

    @property
    def is_linux(self) -> bool:
        return self._os_type is OSType.LINUX

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._os_type.value})"


class SystemPlatformService(StaticPlatformService):
    """Platform service describing the running interpreter's OS."""

    def __init__(self) -> None:
        super().__init__(OSType.from_platform())
