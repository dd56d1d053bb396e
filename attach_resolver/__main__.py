"""Command line front end - ``python -m attach_resolver``.

Reads an attach configuration as JSON (from a file or stdin), resolves it
against a described editor state and prints the result.

Usage::

    python -m attach_resolver request.json --workspace-folder ~/project
    echo '{"request": "attach", "port": 5678}' | python -m attach_resolver --platform windows
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import IO
from typing import TYPE_CHECKING
from typing import Any

from attach_resolver.config import LOG_LEVELS
from attach_resolver.config import get_config
from attach_resolver.constants import ATTACH_REQUEST
from attach_resolver.constants import LOG_FORMAT
from attach_resolver.constants import PYTHON_LANGUAGE
from attach_resolver.errors import RequestLoadError
from attach_resolver.errors import ResolverError
from attach_resolver.errors import report_error
from attach_resolver.resolvers import AttachConfigurationResolver
from attach_resolver.services import OSType
from attach_resolver.services import WorkspaceContext
from attach_resolver.services import WorkspaceFolder

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOTHING_TO_DEBUG = 1
EXIT_INVALID_INPUT = 2


def load_request(source: str | None, stdin: IO[str] | None = None) -> dict[str, Any] | None:
    """Load an attach configuration from *source* (a path, ``-`` or ``None`` for stdin).

    A JSON ``null`` document means there is no configuration and yields ``None``.
    """
    label = source if source and source != "-" else "<stdin>"
    try:
        if source and source != "-":
            with open(source, encoding="utf-8") as f:
                text = f.read()
        else:
            text = (stdin or sys.stdin).read()
    except OSError as e:
        raise RequestLoadError(f"Cannot read request from {label}", source=label, cause=e) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RequestLoadError(
            f"Request in {label} is not valid JSON",
            source=label,
            details={"line": e.lineno, "column": e.colno},
            cause=e,
        ) from e

    if data is None:
        return None

    if not isinstance(data, dict):
        raise RequestLoadError(
            "Request must be a JSON object",
            source=label,
            details={"type": type(data).__name__},
        )

    request = data.get("request")
    if request is not None and request != ATTACH_REQUEST:
        raise RequestLoadError(
            f"Expected an attach request, got {request!r}",
            source=label,
            details={"request": request},
        )
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attach-resolver",
        description="Fill in a Python debug adapter attach configuration",
    )
    parser.add_argument(
        "request",
        nargs="?",
        default=None,
        help="JSON file with the attach configuration (default: stdin)",
    )
    parser.add_argument(
        "--workspace-folder",
        dest="workspace_folders",
        action="append",
        default=[],
        metavar="PATH",
        help="Workspace root; repeat for multi-root workspaces",
    )
    parser.add_argument(
        "--folder",
        default=None,
        metavar="PATH",
        help="Workspace folder the session belongs to (skips inference)",
    )
    parser.add_argument("--active-file", default=None, help="Path of the focused document")
    parser.add_argument(
        "--language-id",
        default=PYTHON_LANGUAGE,
        help=f"Language of the focused document (default: {PYTHON_LANGUAGE})",
    )
    parser.add_argument(
        "--platform",
        type=OSType.parse,
        default=None,
        help="windows, osx or linux (default: this machine)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=LOG_LEVELS,
        help="Log level (default: from resolver settings)",
    )
    return parser


async def resolve(
    args: argparse.Namespace, request: dict[str, Any] | None
) -> dict[str, Any] | None:
    context = WorkspaceContext(
        active_file=args.active_file,
        language_id=args.language_id,
        workspace_folders=tuple(args.workspace_folders),
        os_type=args.platform or OSType.from_platform(),
    )
    resolver = AttachConfigurationResolver.from_context(context)
    folder = WorkspaceFolder.from_path(args.folder) if args.folder else None
    return await resolver.resolve_debug_configuration(folder, request)  # type: ignore[return-value]


def run(
    argv: Sequence[str] | None = None,
    stdout: IO[str] | None = None,
    stdin: IO[str] | None = None,
) -> int:
    """Run the command line interface and return the exit status."""
    out = stdout or sys.stdout
    args = build_parser().parse_args(argv)

    level = args.log_level or get_config().log_level
    logging.getLogger("attach_resolver").setLevel(getattr(logging, level, logging.INFO))

    try:
        request = load_request(args.request, stdin=stdin)
    except ResolverError as e:
        json.dump(report_error(e), sys.stderr, indent=2)
        sys.stderr.write("\n")
        return EXIT_INVALID_INPUT

    resolved = asyncio.run(resolve(args, request))
    if resolved is None:
        logger.info("Nothing to debug")
        return EXIT_NOTHING_TO_DEBUG

    json.dump(resolved, out, indent=2)
    out.write("\n")
    return EXIT_OK


def main() -> None:
    """
    Main entry point for the command line interface
    """
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
