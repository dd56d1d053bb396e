"""Error handling for the attach configuration resolver."""

from attach_resolver.errors.resolver_errors import ConfigurationError
from attach_resolver.errors.resolver_errors import RequestLoadError
from attach_resolver.errors.resolver_errors import ResolverError
from attach_resolver.errors.resolver_errors import report_error

__all__ = [
    "ConfigurationError",
    "RequestLoadError",
    "ResolverError",
    "report_error",
]
