"""
Container configuration request bodies.

Pydantic models for the ``ContainerConfig`` body of ``POST /containers/create``,
its nested ``HostConfig`` and the ``ContainerUpdate`` body of
``POST /containers/{id}/update``.
"""

from typing import Any

from pydantic import Field

from docker_engine_api.models.base import DockerModel
from docker_engine_api.models.base import Labels as LabelMap


class RestartPolicy(DockerModel):
    """Restart policy, e.g. ``{"Name": "on-failure", "MaximumRetryCount": 3}``."""

    Name: str | None = None
    MaximumRetryCount: int | None = None


class PortBinding(DockerModel):
    """Host side of a published port."""

    HostIp: str | None = None
    HostPort: str | None = None


class Ulimit(DockerModel):
    Name: str
    Soft: int
    Hard: int


class LogConfig(DockerModel):
    """Logging driver selection for a container."""

    Type: str | None = None
    # "Config" is reserved by pydantic, so the attribute is aliased
    config: dict[str, str] | None = Field(default=None, alias="Config")


# Module-level names for fields that share their type's name
_RestartPolicy = RestartPolicy
_LogConfig = LogConfig


class HostConfig(DockerModel):
    """Host-level settings: resources, mounts, networking, restart policy."""

    Binds: list[str] | None = None
    Links: list[str] | None = None
    Memory: int | None = None
    MemorySwap: int | None = None
    MemoryReservation: int | None = None
    NanoCpus: int | None = None
    CpuPercent: int | None = None
    CpuShares: int | None = None
    CpuPeriod: int | None = None
    CpuRealtimePeriod: int | None = None
    CpuRealtimeRuntime: int | None = None
    CpuQuota: int | None = None
    CpusetCpus: str | None = None
    CpusetMems: str | None = None
    MaximumIOps: int | None = None
    MaximumIOBps: int | None = None
    BlkioWeight: int | None = None
    BlkioWeightDevice: list[Any] | None = None
    BlkioDeviceReadBps: list[Any] | None = None
    BlkioDeviceReadIOps: list[Any] | None = None
    BlkioDeviceWriteBps: list[Any] | None = None
    BlkioDeviceWriteIOps: list[Any] | None = None
    DeviceRequests: list[Any] | None = None
    MemorySwappiness: int | None = None
    OomKillDisable: bool | None = None
    OomScoreAdj: int | None = None
    PidMode: str | None = None
    PidsLimit: int | None = None
    PortBindings: dict[str, list[PortBinding] | None] | None = None
    PublishAllPorts: bool | None = None
    Privileged: bool | None = None
    ReadonlyRootfs: bool | None = None
    Dns: list[str] | None = None
    DnsOptions: list[str] | None = None
    DnsSearch: list[str] | None = None
    VolumesFrom: list[str] | None = None
    CapAdd: list[str] | None = None
    CapDrop: list[str] | None = None
    GroupAdd: list[str] | None = None
    RestartPolicy: _RestartPolicy | None = None
    AutoRemove: bool | None = None
    NetworkMode: str | None = None
    Devices: list[Any] | None = None
    Ulimits: list[Ulimit] | None = None
    LogConfig: _LogConfig | None = None
    SecurityOpt: list[str] | None = None
    StorageOpt: dict[str, str] | None = None
    CgroupParent: str | None = None
    VolumeDriver: str | None = None
    ShmSize: int | None = None


class NetworkingConfig(DockerModel):
    """Endpoint settings keyed by network name."""

    EndpointsConfig: dict[str, dict[str, Any]] | None = None


_HostConfig = HostConfig
_NetworkingConfig = NetworkingConfig


class ContainerConfig(DockerModel):
    """Body of ``POST /containers/create``; only ``Image`` is required by the daemon."""

    Hostname: str | None = None
    Domainname: str | None = None
    User: str | None = None
    AttachStdin: bool | None = None
    AttachStdout: bool | None = None
    AttachStderr: bool | None = None
    Tty: bool | None = None
    OpenStdin: bool | None = None
    StdinOnce: bool | None = None
    Env: list[str] | None = None
    Cmd: list[str] | str | None = None
    Entrypoint: list[str] | str | None = None
    Image: str | None = None
    Labels: LabelMap | None = None
    Volumes: dict[str, dict[str, Any]] | None = None
    WorkingDir: str | None = None
    NetworkDisabled: bool | None = None
    MacAddress: str | None = None
    ExposedPorts: dict[str, dict[str, Any]] | None = None
    StopSignal: str | None = None
    StopTimeout: int | None = None
    HostConfig: _HostConfig | None = None
    NetworkingConfig: _NetworkingConfig | None = None


class ContainerUpdate(DockerModel):
    """Resource limits that can change on a live container."""

    BlkioWeight: int | None = None
    CpuShares: int | None = None
    CpuPeriod: int | None = None
    CpuQuota: int | None = None
    CpuRealtimePeriod: int | None = None
    CpuRealtimeRuntime: int | None = None
    CpusetCpus: str | None = None
    CpusetMems: str | None = None
    Memory: int | None = None
    MemorySwap: int | None = None
    MemoryReservation: int | None = None
    RestartPolicy: _RestartPolicy | None = None
