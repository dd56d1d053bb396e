"""Debug configuration resolvers."""

from attach_resolver.resolvers.attach import ATTACH_DEFAULTS
from attach_resolver.resolvers.attach import AttachConfigurationResolver
from attach_resolver.resolvers.attach import FieldDefault
from attach_resolver.resolvers.attach import default_debug_options
from attach_resolver.resolvers.attach import derive_just_my_code
from attach_resolver.resolvers.attach import infer_path_mappings
from attach_resolver.resolvers.base import BaseConfigurationResolver
from attach_resolver.resolvers.base import ResolutionContext

__all__ = [
    "ATTACH_DEFAULTS",
    "AttachConfigurationResolver",
    "BaseConfigurationResolver",
    "FieldDefault",
    "ResolutionContext",
    "default_debug_options",
    "derive_just_my_code",
    "infer_path_mappings",
]
