"""
Network settings reported for a container.
"""

from typing import Any

from docker_engine_api.models.base import DockerModel


class EndpointSettings(DockerModel):
    """Attachment of a container to one network."""

    NetworkID: str | None = None
    EndpointID: str | None = None
    Gateway: str | None = None
    IPAddress: str | None = None
    IPPrefixLen: int | None = None
    IPv6Gateway: str | None = None
    GlobalIPv6Address: str | None = None
    GlobalIPv6PrefixLen: int | None = None
    MacAddress: str | None = None
    Aliases: list[str] | None = None


class NetworkSettings(DockerModel):
    """Per-network endpoint settings keyed by network name."""

    Networks: dict[str, EndpointSettings] | None = None
    Ports: dict[str, list[dict[str, Any]] | None] | None = None
    SandboxID: str | None = None
    SandboxKey: str | None = None
