"""
Pydantic models mirroring Docker Engine API payloads.
"""

from docker_engine_api.models.auth import (
    AuthConfig,
    BasicAuth,
    RegistryConfig,
    RegistryCredentials,
    TokenAuth,
)
from docker_engine_api.models.base import DockerModel, Filters, Labels
from docker_engine_api.models.container import (
    Container,
    ContainerChange,
    ContainerChangeKind,
    ContainerCreateResponse,
    ContainerInspect,
    ContainerPruneResponse,
    ContainerState,
    ContainerTop,
    ContainerUpdateResponse,
    Mount,
    Port,
)
from docker_engine_api.models.host_config import (
    ContainerConfig,
    ContainerUpdate,
    HostConfig,
    LogConfig,
    NetworkingConfig,
    PortBinding,
    RestartPolicy,
    Ulimit,
)
from docker_engine_api.models.image import BuildPruneResponse, Image, ImageInspect
from docker_engine_api.models.network import EndpointSettings, NetworkSettings
from docker_engine_api.models.stats import (
    ContainerStats,
    CPUStats,
    MemoryStats,
    PidsStats,
)

__all__ = [
    # Base
    "DockerModel",
    "Filters",
    "Labels",
    # Auth
    "AuthConfig",
    "BasicAuth",
    "RegistryConfig",
    "RegistryCredentials",
    "TokenAuth",
    # Containers
    "Container",
    "ContainerChange",
    "ContainerChangeKind",
    "ContainerCreateResponse",
    "ContainerInspect",
    "ContainerPruneResponse",
    "ContainerState",
    "ContainerTop",
    "ContainerUpdateResponse",
    "Mount",
    "Port",
    # Configuration bodies
    "ContainerConfig",
    "ContainerUpdate",
    "HostConfig",
    "LogConfig",
    "NetworkingConfig",
    "PortBinding",
    "RestartPolicy",
    "Ulimit",
    # Networking
    "EndpointSettings",
    "NetworkSettings",
    # Stats
    "ContainerStats",
    "CPUStats",
    "MemoryStats",
    "PidsStats",
    # Images
    "BuildPruneResponse",
    "Image",
    "ImageInspect",
]
