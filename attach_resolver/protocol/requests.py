"""
TypedDicts describing the attach request handed to a debug adapter.

The same shape is used for the partial, user-authored request and for the
resolved one; resolution only fills in keys that were missing.
"""
from __future__ import annotations

from typing import Literal
from typing import TypedDict


class PathMapping(TypedDict):
    """How a local source root corresponds to a root in the debuggee."""

    localRoot: str
    remoteRoot: str


class AttachRequestArguments(TypedDict, total=False):
    """Arguments of an 'attach' debug configuration.

    Unknown keys are allowed at runtime and are carried through resolution
    unchanged.
    """

    request: Literal["attach"]
    type: str
    name: str
    host: str
    port: int
    localRoot: str
    remoteRoot: str
    pathMappings: list[PathMapping]
    debugOptions: list[str]
    justMyCode: bool
    debugStdLib: bool
    showReturnValue: bool
    django: bool
    jinja: bool
    subProcess: bool
    workspaceFolder: str
