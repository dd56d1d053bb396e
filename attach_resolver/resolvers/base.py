"""Shared machinery for debug configuration resolvers.

A resolver takes a partially specified debug configuration and fills in
whatever the user left out, using the editor state exposed by three
collaborators: the platform, the active document and the workspace folders.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import Generic
from typing import TypeVar

from attach_resolver.config import get_config
from attach_resolver.services import path_module_for

if TYPE_CHECKING:
    from attach_resolver.config import ResolverConfig
    from attach_resolver.services import IDocumentManager
    from attach_resolver.services import IPlatformService
    from attach_resolver.services import IWorkspaceService
    from attach_resolver.services import WorkspaceFolder

logger = logging.getLogger(__name__)

T = TypeVar("T")


def defined_or_default(value: T | None, default: T) -> T:
    """Return *value* unless it is ``None``."""
    return default if value is None else value


@dataclass(frozen=True)
class ResolutionContext:
    """Everything a resolver reads from its collaborators, captured once."""

    workspace_folder: str | None
    is_windows: bool
    config: ResolverConfig


class BaseConfigurationResolver(ABC, Generic[T]):
    """Base class for resolvers of a particular request type.

    Subclasses implement :meth:`resolve_debug_configuration`.
    """

    def __init__(
        self,
        workspace_service: IWorkspaceService,
        document_manager: IDocumentManager,
        platform_service: IPlatformService,
        config: ResolverConfig | None = None,
    ) -> None:
        self.workspace_service = workspace_service
        self.document_manager = document_manager
        self.platform_service = platform_service
        self._config = config

    @property
    def config(self) -> ResolverConfig:
        """Explicit config if one was given, else the process-wide one."""
        return self._config if self._config is not None else get_config()

    def get_program(self) -> str | None:
        """Return the active document's path if it is a Python file."""
        editor = self.document_manager.active_text_editor
        if editor is not None and editor.document.is_python:
            return editor.document.file_name
        return None

    def get_workspace_folder(self, folder: WorkspaceFolder | None) -> str | None:
        """Work out which workspace folder a session belongs to.

        An explicit *folder* wins. Otherwise the active document is matched
        against the workspace roots (most specific first), falling back to
        the first root. With no roots at all, the directory of an active
        Python file is used.
        """
        if folder is not None:
            return folder.fs_path

        folders = self.workspace_service.workspace_folders
        editor = self.document_manager.active_text_editor

        if editor is not None and folders:
            match = self.workspace_service.get_workspace_folder(editor.document.file_name)
            if match is not None:
                return match.fs_path

        if folders:
            return folders[0].fs_path

        program = self.get_program()
        if program:
            pathmod = path_module_for(self.platform_service.os_type)
            return pathmod.dirname(program) or None
        return None

    async def read_context(self, folder: WorkspaceFolder | None) -> ResolutionContext:
        """Snapshot collaborator state for a single resolution."""
        workspace_folder = self.get_workspace_folder(folder)
        context = ResolutionContext(
            workspace_folder=workspace_folder,
            is_windows=self.platform_service.is_windows,
            config=self.config,
        )
        logger.debug(
            "Resolution context: folder=%s windows=%s",
            context.workspace_folder,
            context.is_windows,
        )
        return context

    @abstractmethod
    async def resolve_debug_configuration(
        self,
        folder: WorkspaceFolder | None,
        debug_configuration: dict[str, Any] | None,
    ) -> T | None:
        """Return a resolved copy of *debug_configuration*, or ``None``."""
