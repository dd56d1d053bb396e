"""Request shapes and option tags for attach configurations."""

from attach_resolver.protocol.debug_options import DebugOptions
from attach_resolver.protocol.requests import AttachRequestArguments
from attach_resolver.protocol.requests import PathMapping

__all__ = [
    "AttachRequestArguments",
    "DebugOptions",
    "PathMapping",
]
