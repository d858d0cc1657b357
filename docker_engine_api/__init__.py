"""
docker-engine-api: asyncio client for the Docker Engine HTTP API.

This package shapes HTTP requests and responses for image and container
lifecycle endpoints; all lifecycle semantics stay in the daemon.
"""

from docker_engine_api.core import (
    ByteStream,
    ContainerService,
    DockerEngineClient,
    ImageService,
)
from docker_engine_api.exceptions import (
    DaemonConflictError,
    DaemonConnectionError,
    DaemonError,
    DaemonNotFoundError,
    DaemonNotModifiedError,
    DockerEngineError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "ByteStream",
    "ContainerService",
    "DockerEngineClient",
    "ImageService",
    # Exceptions
    "DaemonConflictError",
    "DaemonConnectionError",
    "DaemonError",
    "DaemonNotFoundError",
    "DaemonNotModifiedError",
    "DockerEngineError",
    "ValidationError",
]
