"""Settings for the attach configuration resolver.

The values here are process-wide knobs that the resolver consults when it
fills in defaults. They never override anything present on a request.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import Any
from typing import Literal

from attach_resolver.constants import DEFAULT_HOST
from attach_resolver.constants import LOOPBACK_HOSTS
from attach_resolver.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ResolverConfig:
    """Resolver-wide settings."""

    default_host: str = DEFAULT_HOST
    loopback_hosts: tuple[str, ...] = field(default=LOOPBACK_HOSTS)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    def __post_init__(self) -> None:
        # Accept any sequence, e.g. a list decoded from JSON.
        self.loopback_hosts = tuple(self.loopback_hosts)

    def is_loopback(self, host: str | None) -> bool:
        """Return ``True`` when *host* names the local machine."""
        if not host:
            return False
        return host.lower() in {h.lower() for h in self.loopback_hosts}

    def with_changes(self, **changes: Any) -> ResolverConfig:
        """Return a copy of this config with *changes* applied."""
        return replace(self, **changes)

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        if not isinstance(self.default_host, str) or not self.default_host.strip():
            raise ConfigurationError(
                "Default host must be a non-empty string",
                config_key="default_host",
                details={"default_host": self.default_host},
            )

        if not self.loopback_hosts:
            raise ConfigurationError(
                "At least one loopback host is required",
                config_key="loopback_hosts",
            )

        bad_hosts = [h for h in self.loopback_hosts if not isinstance(h, str) or not h]
        if bad_hosts:
            raise ConfigurationError(
                "Loopback hosts must be non-empty strings",
                config_key="loopback_hosts",
                details={"invalid": bad_hosts},
            )

        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                config_key="log_level",
                details={"allowed": list(LOG_LEVELS)},
            )


# Default configuration instance
DEFAULT_CONFIG = ResolverConfig()
