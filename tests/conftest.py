from __future__ import annotations

import os
from pathlib import Path

import pytest

from attach_resolver.config import reset_config
from attach_resolver.resolvers import AttachConfigurationResolver
from attach_resolver.services import OSType
from attach_resolver.services import StaticDocumentManager
from attach_resolver.services import StaticPlatformService
from attach_resolver.services import StaticWorkspaceService
from attach_resolver.services import TextDocument
from attach_resolver.services import WorkspaceFolder

# OSType.UNKNOWN is not a platform anyone debugs on.
KNOWN_OS_TYPES = [OSType.WINDOWS, OSType.OSX, OSType.LINUX]


@pytest.fixture(autouse=True)
def _reset_resolver_config():
    """Keep process-wide resolver settings from leaking between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(params=KNOWN_OS_TYPES, ids=lambda os_type: os_type.value)
def os_type(request) -> OSType:
    return request.param


@pytest.fixture
def expected_default_options(os_type: OSType) -> list[str]:
    options = ["RedirectOutput"]
    if os_type is OSType.WINDOWS:
        options += ["FixFilePathCase", "WindowsClient"]
    else:
        options.append("UnixClient")
    options.append("ShowReturnValue")
    return options


@pytest.fixture
def workspace_folder() -> WorkspaceFolder:
    return WorkspaceFolder.from_path(str(Path(__file__).parent))


@pytest.fixture
def default_workspace() -> str:
    return os.path.join("usr", "desktop")


class ResolverFactory:
    """Builds resolvers over in-memory collaborators for one OS type."""

    def __init__(self, os_type: OSType) -> None:
        self.os_type = os_type

    def __call__(
        self,
        *,
        active_file: str | None = None,
        language_id: str = "python",
        folders: list[str] | None = None,
    ) -> AttachConfigurationResolver:
        document = TextDocument(active_file, language_id) if active_file else None
        return AttachConfigurationResolver(
            StaticWorkspaceService(folders or [], os_type=self.os_type),
            StaticDocumentManager(document),
            StaticPlatformService(self.os_type),
        )


@pytest.fixture
def make_resolver(os_type: OSType) -> ResolverFactory:
    return ResolverFactory(os_type)
