"""
Image payloads returned by the daemon.
"""

from typing import Any

from pydantic import Field

from docker_engine_api.models.base import DockerModel
from docker_engine_api.models.base import Labels as LabelMap
from docker_engine_api.models.host_config import ContainerConfig


class Image(DockerModel):
    """Image summary as returned by ``GET /images/json``."""

    Id: str
    ParentId: str | None = None
    RepoTags: list[str] | None = None
    RepoDigests: list[str] | None = None
    # Unix seconds on current daemons, RFC 3339 on some older ones
    Created: int | str | None = None
    Size: int | None = None
    SharedSize: int | None = None
    VirtualSize: int | None = None
    Labels: LabelMap | None = None
    Containers: int | None = None


class ImageInspect(DockerModel):
    """Image detail as returned by ``GET /images/{name}/json``."""

    Id: str
    RepoTags: list[str] | None = None
    RepoDigests: list[str] | None = None
    Parent: str | None = None
    Comment: str | None = None
    Created: str | None = None
    DockerVersion: str | None = None
    Author: str | None = None
    Architecture: str | None = None
    Variant: str | None = None
    Os: str | None = None
    OsVersion: str | None = None
    Size: int | None = None
    VirtualSize: int | None = None
    GraphDriver: dict[str, Any] | None = None
    RootFS: dict[str, Any] | None = None
    Metadata: dict[str, Any] | None = None
    config: ContainerConfig | None = Field(default=None, alias="Config")


class BuildPruneResponse(DockerModel):
    CacheDeleted: list[str] | None = None
    SpaceReclaimed: int | None = None
