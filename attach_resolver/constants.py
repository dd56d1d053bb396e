"""
Constants used throughout the attach configuration resolver.
"""
from typing import Final

# Request
ATTACH_REQUEST: Final[str] = "attach"

# Network
DEFAULT_HOST: Final[str] = "localhost"
# Literal match only; 0.0.0.0, zone-scoped IPv6 and DNS aliases are not detected.
LOOPBACK_HOSTS: Final[tuple[str, ...]] = ("localhost", "127.0.0.1", "::1")

# Editor
PYTHON_LANGUAGE: Final[str] = "python"

# Logging
LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
