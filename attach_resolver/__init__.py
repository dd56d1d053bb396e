"""attach-resolver - fill in Python debug-adapter attach configurations."""

from attach_resolver.resolvers import AttachConfigurationResolver
from attach_resolver.services import WorkspaceContext

__all__ = ["AttachConfigurationResolver", "WorkspaceContext", "__version__", "main"]
__version__ = "0.1.0"


def main() -> None:
    """Entry point that mirrors :func:`attach_resolver.__main__.main`."""
    from attach_resolver.__main__ import main as _cli_main

    _cli_main()
