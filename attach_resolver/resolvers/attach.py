"""Resolver for ``attach`` debug configurations.

Every default is a :class:`FieldDefault`: a key plus a function computing its
value from the configuration so far and the :class:`ResolutionContext`. A
default only applies when the key is missing or ``None``, so anything the
user wrote survives resolution untouched. Rules run in table order; later
rules may read keys filled in by earlier ones (``debugOptions`` depends on
``justMyCode``, ``pathMappings`` on ``host``).
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING
from typing import Any

from attach_resolver.constants import ATTACH_REQUEST
from attach_resolver.protocol import AttachRequestArguments
from attach_resolver.protocol import DebugOptions
from attach_resolver.protocol import PathMapping
from attach_resolver.resolvers.base import BaseConfigurationResolver
from attach_resolver.resolvers.base import ResolutionContext
from attach_resolver.resolvers.base import defined_or_default

if TYPE_CHECKING:
    from collections.abc import Callable

    from attach_resolver.config import ResolverConfig
    from attach_resolver.services import WorkspaceContext
    from attach_resolver.services import WorkspaceFolder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDefault:
    """Default for one configuration key, applied only when it is absent."""

    key: str
    compute: Callable[[dict[str, Any], ResolutionContext], Any]

    def needs_default(self, configuration: dict[str, Any]) -> bool:
        return configuration.get(self.key) is None

    def apply(self, configuration: dict[str, Any], context: ResolutionContext) -> None:
        if not self.needs_default(configuration):
            return
        value = self.compute(configuration, context)
        if value is None:
            return
        configuration[self.key] = value
        logger.debug("Defaulted %s to %r", self.key, value)


def derive_just_my_code(just_my_code: bool | None, debug_std_lib: bool | None) -> bool:
    """Reconcile ``justMyCode`` with the legacy ``debugStdLib`` flag.

    An explicit ``justMyCode`` wins; otherwise it is the negation of
    ``debugStdLib``, which itself defaults to ``False``.
    """
    return defined_or_default(just_my_code, not defined_or_default(debug_std_lib, False))


def default_debug_options(configuration: dict[str, Any], context: ResolutionContext) -> list[str]:
    """Build the ``debugOptions`` list for a configuration that has none.

    Runs after ``justMyCode`` is derived, so a configuration with
    ``debugStdLib: true`` (and no ``justMyCode``) gets ``DebugStdLib`` right
    after ``RedirectOutput``, ahead of the OS-specific tags.
    """
    options = [DebugOptions.REDIRECT_OUTPUT]
    if not configuration.get("justMyCode", True):
        options.append(DebugOptions.DEBUG_STD_LIB)
    if configuration.get("django"):
        options.append(DebugOptions.DJANGO)
    if configuration.get("jinja"):
        options.append(DebugOptions.JINJA)
    if configuration.get("subProcess") is True:
        options.append(DebugOptions.SUB_PROCESS)
    if context.is_windows:
        options.extend((DebugOptions.FIX_FILE_PATH_CASE, DebugOptions.WINDOWS_CLIENT))
    else:
        options.append(DebugOptions.UNIX_CLIENT)
    if configuration.get("showReturnValue") is not False:
        options.append(DebugOptions.SHOW_RETURN_VALUE)
    return [option.value for option in options]


def infer_path_mappings(
    configuration: dict[str, Any], context: ResolutionContext
) -> list[PathMapping]:
    """Infer ``pathMappings`` for a configuration that has none.

    Explicit ``localRoot``/``remoteRoot`` become the single mapping. Failing
    that, a loopback host shares the local filesystem, so the workspace
    folder maps onto itself. A remote host gets no mapping at all.
    """
    local_root = configuration.get("localRoot")
    remote_root = configuration.get("remoteRoot")
    if local_root and remote_root:
        return [{"localRoot": local_root, "remoteRoot": remote_root}]

    folder = context.workspace_folder
    if folder and context.config.is_loopback(configuration.get("host")):
        return [{"localRoot": folder, "remoteRoot": folder}]

    return []


ATTACH_DEFAULTS: tuple[FieldDefault, ...] = (
    FieldDefault("request", lambda _cfg, _ctx: ATTACH_REQUEST),
    FieldDefault("host", lambda _cfg, ctx: ctx.config.default_host),
    FieldDefault(
        "justMyCode",
        lambda cfg, _ctx: derive_just_my_code(cfg.get("justMyCode"), cfg.get("debugStdLib")),
    ),
    FieldDefault("debugOptions", default_debug_options),
    FieldDefault("pathMappings", infer_path_mappings),
    FieldDefault("workspaceFolder", lambda _cfg, ctx: ctx.workspace_folder),
)


class AttachConfigurationResolver(BaseConfigurationResolver[AttachRequestArguments]):
    """Fill in an attach request from user input and editor state."""

    defaults: tuple[FieldDefault, ...] = ATTACH_DEFAULTS

    @classmethod
    def from_context(
        cls,
        context: WorkspaceContext,
        config: ResolverConfig | None = None,
    ) -> AttachConfigurationResolver:
        """Build a resolver whose collaborators come from *context*."""
        return cls(
            context.workspace_service(),
            context.document_manager(),
            context.platform_service(),
            config=config,
        )

    async def resolve_debug_configuration(
        self,
        folder: WorkspaceFolder | None,
        debug_configuration: dict[str, Any] | None,
    ) -> AttachRequestArguments | None:
        """Return a fully populated copy of *debug_configuration*.

        ``None`` means there was nothing to resolve. The input mapping is
        never modified.
        """
        if debug_configuration is None:
            logger.debug("No attach configuration supplied, nothing to resolve")
            return None

        context = await self.read_context(folder)
        resolved: dict[str, Any] = dict(debug_configuration)
        for rule in self.defaults:
            rule.apply(resolved, context)

        logger.debug(
            "Resolved attach configuration for %s:%s (justMyCode=%s, %d path mapping(s))",
            resolved.get("host"),
            resolved.get("port"),
            resolved.get("justMyCode"),
            len(resolved.get("pathMappings") or ()),
        )
        return resolved  # type: ignore[return-value]
