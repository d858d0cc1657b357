"""
Container payloads returned by the daemon.

This module contains Pydantic models for container summaries (list),
container details (inspect), filesystem changes, process tables and the
small response envelopes of create/update/prune.
"""

from enum import IntEnum
from typing import Any

from pydantic import Field

from docker_engine_api.models.base import DockerModel
from docker_engine_api.models.base import Labels as LabelMap
from docker_engine_api.models.host_config import ContainerConfig
from docker_engine_api.models.host_config import HostConfig as HostConfigModel
from docker_engine_api.models.network import NetworkSettings as NetworkSettingsModel


class Port(DockerModel):
    """Port mapping on a container summary."""

    IP: str | None = None
    PrivatePort: int
    PublicPort: int | None = None
    Type: str | None = None


class Mount(DockerModel):
    """Volume or bind mount attached to a container."""

    Type: str | None = None
    Name: str | None = None
    Source: str | None = None
    Destination: str | None = None
    Driver: str | None = None
    Mode: str | None = None
    RW: bool | None = None
    Propagation: str | None = None


class Container(DockerModel):
    """Container summary as returned by ``GET /containers/json``."""

    Id: str
    Names: list[str] | None = None
    Image: str | None = None
    ImageID: str | None = None
    Command: str | None = None
    Created: int | None = None
    State: str | None = None
    Status: str | None = None
    Ports: list[Port] | None = None
    Labels: LabelMap | None = None
    SizeRw: int | None = None
    SizeRootFs: int | None = None
    # Only NetworkMode is populated on summaries
    HostConfig: HostConfigModel | None = None
    NetworkSettings: NetworkSettingsModel | None = None
    Mounts: list[Mount] | None = None


class ContainerState(DockerModel):
    """Runtime state block of an inspected container."""

    Status: str | None = None
    Running: bool | None = None
    Paused: bool | None = None
    Restarting: bool | None = None
    OOMKilled: bool | None = None
    Dead: bool | None = None
    Pid: int | None = None
    ExitCode: int | None = None
    Error: str | None = None
    StartedAt: str | None = None
    FinishedAt: str | None = None
    Health: dict[str, Any] | None = None


class ContainerInspect(DockerModel):
    """Container detail as returned by ``GET /containers/{id}/json``."""

    Id: str
    Created: str | None = None
    Path: str | None = None
    Args: list[str] | None = None
    State: ContainerState | None = None
    Image: str | None = None
    ResolvConfPath: str | None = None
    HostnamePath: str | None = None
    HostsPath: str | None = None
    LogPath: str | None = None
    Name: str | None = None
    RestartCount: int | None = None
    Driver: str | None = None
    Platform: str | None = None
    MountLabel: str | None = None
    ProcessLabel: str | None = None
    AppArmorProfile: str | None = None
    ExecIDs: list[str] | None = None
    HostConfig: HostConfigModel | None = None
    GraphDriver: dict[str, Any] | None = None
    SizeRw: int | None = None
    SizeRootFs: int | None = None
    Mounts: list[Mount] | None = None
    config: ContainerConfig | None = Field(default=None, alias="Config")
    NetworkSettings: NetworkSettingsModel | None = None


class ContainerChangeKind(IntEnum):
    """Kind of filesystem change; values are the daemon's numeric codes."""

    Modify = 0
    Added = 1
    Deleted = 2


class ContainerChange(DockerModel):
    """One entry of ``GET /containers/{id}/changes``."""

    Path: str
    Kind: ContainerChangeKind


class ContainerTop(DockerModel):
    """Process table from ``GET /containers/{id}/top``."""

    Titles: list[str] = Field(default_factory=list)
    Processes: list[list[str]] = Field(default_factory=list)


class ContainerCreateResponse(DockerModel):
    Id: str
    Warnings: list[str] | None = None


class ContainerUpdateResponse(DockerModel):
    Warnings: list[str] | None = None


class ContainerPruneResponse(DockerModel):
    ContainersDeleted: list[str] | None = None
    SpaceReclaimed: int | None = None
