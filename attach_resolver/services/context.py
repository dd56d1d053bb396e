"""Immutable snapshot of the editor state a resolver runs against."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from attach_resolver.constants import PYTHON_LANGUAGE
from attach_resolver.services.documents import StaticDocumentManager
from attach_resolver.services.documents import TextDocument
from attach_resolver.services.platform import OSType
from attach_resolver.services.platform import StaticPlatformService
from attach_resolver.services.workspace import StaticWorkspaceService


@dataclass(frozen=True)
class WorkspaceContext:
    """Active file, workspace roots and OS family at resolution time.

    Builds the three collaborator services a resolver needs, so callers
    without a live editor can describe the environment declaratively.
    """

    active_file: str | None = None
    language_id: str = PYTHON_LANGUAGE
    workspace_folders: tuple[str, ...] = ()
    os_type: OSType = field(default_factory=OSType.from_platform)

    def __post_init__(self) -> None:
        object.__setattr__(self, "workspace_folders", tuple(self.workspace_folders))

    @property
    def active_document(self) -> TextDocument | None:
        if self.active_file is None:
            return None
        return TextDocument(self.active_file, self.language_id)

    def platform_service(self) -> StaticPlatformService:
        return StaticPlatformService(self.os_type)

    def document_manager(self) -> StaticDocumentManager:
        return StaticDocumentManager(self.active_document)

    def workspace_service(self) -> StaticWorkspaceService:
        return StaticWorkspaceService(self.workspace_folders, os_type=self.os_type)
