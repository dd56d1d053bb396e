"""Global settings management for the attach configuration resolver.

Resolvers read the current :class:`ResolverConfig` through :func:`get_config`;
callers swap it with :func:`set_config` or temporarily with
:func:`config_context`.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    import types

from attach_resolver.config.resolver_config import DEFAULT_CONFIG
from attach_resolver.config.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)

_UPDATABLE_KEYS = frozenset({"default_host", "loopback_hosts", "log_level"})


class ConfigManager:
    """Thread-safe manager for process-wide resolver settings."""

    def __init__(self, default_config: ResolverConfig) -> None:
        self._lock = threading.RLock()
        self._default_config = default_config
        self._current_config = default_config

    def get_config(self) -> ResolverConfig:
        """Get the current configuration in a thread-safe manner."""
        with self._lock:
            return self._current_config

    def set_config(self, config: ResolverConfig) -> None:
        """Validate and install *config*."""
        with self._lock:
            config.validate()
            self._current_config = config

    def update_config(self, **kwargs: Any) -> None:
        """Replace selected fields of the current configuration."""
        with self._lock:
            unknown_keys = sorted(set(kwargs) - _UPDATABLE_KEYS)
            if unknown_keys:
                logger.warning("Ignoring unknown config key(s): %s", ", ".join(unknown_keys))

            changes = {k: v for k, v in kwargs.items() if k in _UPDATABLE_KEYS}
            new_config = self._current_config.with_changes(**changes)
            new_config.validate()
            self._current_config = new_config

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        with self._lock:
            self._current_config = self._default_config

    def apply_context_changes(self, changes: dict[str, Any]) -> tuple[ResolverConfig, ResolverConfig]:
        """Apply temporary configuration changes atomically.

        Returns:
            Tuple of (original_config, new_config).
        """
        with self._lock:
            original = self._current_config
            new_config = original.with_changes(**changes)
            new_config.validate()
            self._current_config = new_config
            return original, new_config

    def restore_config(self, config: ResolverConfig) -> None:
        """Restore a previously captured configuration."""
        with self._lock:
            self._current_config = config


_config_manager = ConfigManager(DEFAULT_CONFIG)


def get_config() -> ResolverConfig:
    """Get the current configuration.

    Returns:
        The current ResolverConfig instance
    """
    return _config_manager.get_config()


def set_config(config: ResolverConfig) -> None:
    """Set the current configuration.

    Args:
        config: The new configuration to set
    """
    _config_manager.set_config(config)


def update_config(**kwargs: Any) -> None:
    """Update the current configuration with new values.

    Args:
        **kwargs: Configuration values to update
    """
    _config_manager.update_config(**kwargs)


def reset_config() -> None:
    """Reset configuration to defaults."""
    _config_manager.reset_config()


class ConfigContext:
    """Context manager for temporary configuration changes.

    The previous configuration is restored when the context exits, even if
    the body raised.
    """

    def __init__(self, **kwargs: Any):
        self._manager = _config_manager
        self._changes = kwargs
        self._original_config: ResolverConfig | None = None

    def __enter__(self) -> ResolverConfig:
        self._original_config, new_config = self._manager.apply_context_changes(self._changes)
        return new_config

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        if self._original_config is not None:
            self._manager.restore_config(self._original_config)


def config_context(**kwargs: Any) -> ConfigContext:
    """Create a context manager for temporary configuration changes."""
    return ConfigContext(**kwargs)
