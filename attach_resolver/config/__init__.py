"""Configuration management for the attach configuration resolver."""

from attach_resolver.config.config_manager import ConfigContext
from attach_resolver.config.config_manager import config_context
from attach_resolver.config.config_manager import get_config
from attach_resolver.config.config_manager import reset_config
from attach_resolver.config.config_manager import set_config
from attach_resolver.config.config_manager import update_config
from attach_resolver.config.resolver_config import DEFAULT_CONFIG
from attach_resolver.config.resolver_config import LOG_LEVELS
from attach_resolver.config.resolver_config import ResolverConfig

__all__ = [
    "DEFAULT_CONFIG",
    "LOG_LEVELS",
    "ConfigContext",
    "ResolverConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]
