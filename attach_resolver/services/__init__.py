"""Editor and platform collaborators consulted during resolution."""

from attach_resolver.services.context import WorkspaceContext
from attach_resolver.services.documents import IDocumentManager
from attach_resolver.services.documents import StaticDocumentManager
from attach_resolver.services.documents import TextDocument
from attach_resolver.services.documents import TextEditor
from attach_resolver.services.platform import IPlatformService
from attach_resolver.services.platform import OSType
from attach_resolver.services.platform import StaticPlatformService
from attach_resolver.services.platform import SystemPlatformService
from attach_resolver.services.platform import path_module_for
from attach_resolver.services.workspace import IWorkspaceService
from attach_resolver.services.workspace import StaticWorkspaceService
from attach_resolver.services.workspace import WorkspaceFolder

__all__ = [
    "IDocumentManager",
    "IPlatformService",
    "IWorkspaceService",
    "OSType",
    "StaticDocumentManager",
    "StaticPlatformService",
    "StaticWorkspaceService",
    "SystemPlatformService",
    "TextDocument",
    "TextEditor",
    "WorkspaceContext",
    "WorkspaceFolder",
    "path_module_for",
]
