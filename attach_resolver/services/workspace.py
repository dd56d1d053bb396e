"""Workspace folder enumeration consumed by resolvers.

Folder lookup mirrors what editors do for multi-root workspaces: a file
belongs to the folder whose root is the longest prefix of the file's path,
compared on whole path components. Paths follow the conventions of the OS
family the workspace lives on, which need not be the one running this code.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING
from typing import Protocol
from typing import runtime_checkable

from attach_resolver.services.platform import path_module_for

if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Sequence
    import types

    from attach_resolver.services.platform import OSType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkspaceFolder:
    """A root folder of the open workspace."""

    fs_path: str
    name: str = ""
    index: int = 0

    @classmethod
    def from_path(
        cls,
        fs_path: str,
        index: int = 0,
        pathmod: types.ModuleType = os.path,
    ) -> WorkspaceFolder:
        return cls(fs_path=fs_path, name=pathmod.basename(pathmod.normpath(fs_path)), index=index)


def normalize_path(path: str, pathmod: types.ModuleType = os.path) -> str:
    """Normalise *path* for comparison using *pathmod* (``ntpath``/``posixpath``)."""
    return pathmod.normcase(pathmod.normpath(path))


def is_path_within(root: str, path: str, pathmod: types.ModuleType = os.path) -> bool:
    """Return ``True`` when *path* is *root* or lies underneath it."""
    norm_root = normalize_path(root, pathmod)
    norm_path = normalize_path(path, pathmod)
    if norm_path == norm_root:
        return True
    prefix = norm_root if norm_root.endswith(pathmod.sep) else norm_root + pathmod.sep
    return norm_path.startswith(prefix)


@runtime_checkable
class IWorkspaceService(Protocol):
    """Ordered list of workspace roots plus file-to-folder lookup."""

    @property
    def workspace_folders(self) -> Sequence[WorkspaceFolder]: ...

    def get_workspace_folder(self, file_path: str) -> WorkspaceFolder | None: ...


class StaticWorkspaceService:
    """Workspace service over a fixed, ordered list of folders.

    *os_type* selects Windows or POSIX path rules for matching; without it
    the running interpreter's rules apply.
    """

    def __init__(
        self,
        folders: Iterable[str | WorkspaceFolder] = (),
        os_type: OSType | None = None,
    ) -> None:
        self._pathmod = path_module_for(os_type)
        resolved: list[WorkspaceFolder] = []
        for index, folder in enumerate(folders):
            if isinstance(folder, WorkspaceFolder):
                resolved.append(folder)
            else:
                resolved.append(WorkspaceFolder.from_path(folder, index=index, pathmod=self._pathmod))
        self._folders = tuple(resolved)

    @property
    def workspace_folders(self) -> Sequence[WorkspaceFolder]:
        return self._folders

    def get_workspace_folder(self, file_path: str) -> WorkspaceFolder | None:
        """Return the most specific folder containing *file_path*."""
        best: WorkspaceFolder | None = None
        best_len = -1
        for folder in self._folders:
            if not is_path_within(folder.fs_path, file_path, self._pathmod):
                continue
            length = len(normalize_path(folder.fs_path, self._pathmod))
            if length > best_len:
                best, best_len = folder, length
        if best is None:
            logger.debug("No workspace folder contains %s", file_path)
        return best
