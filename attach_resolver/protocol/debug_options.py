"""Option tags understood by the Python debug adapter's ``debugOptions`` list."""

from __future__ import annotations

from enum import Enum


class DebugOptions(str, Enum):
    """Values allowed in ``debugOptions``.

    Only a handful are ever added by the resolver; the rest are accepted from
    users and passed through untouched.
    """

    REDIRECT_OUTPUT = "RedirectOutput"
    DEBUG_STD_LIB = "DebugStdLib"
    DJANGO = "Django"
    JINJA = "Jinja"
    SUB_PROCESS = "Multiprocess"
    FIX_FILE_PATH_CASE = "FixFilePathCase"
    WINDOWS_CLIENT = "WindowsClient"
    UNIX_CLIENT = "UnixClient"
    SHOW_RETURN_VALUE = "ShowReturnValue"
    STOP_ON_ENTRY = "StopOnEntry"
    SUDO = "Sudo"

    def __str__(self) -> str:
        return self.value
