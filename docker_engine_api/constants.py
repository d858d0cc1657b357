"""
Constants for docker-engine-api.

This module defines named constants for wire-level values and configuration
defaults shared across the client, the CLI and the configuration layer.
"""

from pathlib import Path

# Daemon
DEFAULT_DAEMON_URL = "http://localhost:2375"
# None disables httpx timeouts entirely (a followed log stream may idle forever)
DEFAULT_TIMEOUT: float | None = None

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_REGISTRY_CONFIG = "X-Registry-Config"

# Content types
CONTENT_TYPE_TAR = "application/x-tar"

# Image import reads the archive from the request body when fromSrc is "-"
FROM_SRC_REQUEST_BODY = "-"

# Configuration
CONFIG_PATH = Path.home() / ".config" / "docker-engine-api" / "config.toml"
DEFAULT_LOG_MAX_BYTES = 10485760  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5

# Exit Codes (for CLI commands)
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

__all__ = [
    "CONFIG_PATH",
    "CONTENT_TYPE_TAR",
    "DEFAULT_DAEMON_URL",
    "DEFAULT_LOG_BACKUP_COUNT",
    "DEFAULT_LOG_MAX_BYTES",
    "DEFAULT_TIMEOUT",
    "EXIT_ERROR",
    "EXIT_SUCCESS",
    "EXIT_USAGE_ERROR",
    "FROM_SRC_REQUEST_BODY",
    "HEADER_CONTENT_LENGTH",
    "HEADER_CONTENT_TYPE",
    "HEADER_REGISTRY_CONFIG",
]
