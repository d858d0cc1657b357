"""
Request/response mapping for the Docker Engine API.
"""

from docker_engine_api.core.client import DockerEngineClient
from docker_engine_api.core.containers import ContainerService
from docker_engine_api.core.images import ImageService
from docker_engine_api.core.streams import ByteStream
from docker_engine_api.core.transport import DaemonTransport

__all__ = [
    "ByteStream",
    "ContainerService",
    "DaemonTransport",
    "DockerEngineClient",
    "ImageService",
]
