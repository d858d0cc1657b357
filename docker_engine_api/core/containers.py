"""
Container operations against the Docker Engine API.

Every method issues exactly one request to ``/containers/...``. State
changing endpoints (start, stop, restart, kill, pause, rename) return None
on success; failure always surfaces as an exception.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter

from docker_engine_api.core.streams import ByteStream
from docker_engine_api.core.transport import DaemonTransport, path_segment
from docker_engine_api.logging import get_logger
from docker_engine_api.models import (
    Container,
    ContainerChange,
    ContainerConfig,
    ContainerCreateResponse,
    ContainerInspect,
    ContainerPruneResponse,
    ContainerStats,
    ContainerTop,
    ContainerUpdate,
    ContainerUpdateResponse,
    Filters,
)

logger = get_logger(__name__)

_container_list = TypeAdapter(list[Container])
_change_list = TypeAdapter(list[ContainerChange])


class ContainerService:
    """
    Container endpoints of one Docker daemon.

    Stateless apart from the injected HTTP client; any number of calls may
    run concurrently.
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        """
        Initialize container service.

        Args:
            http: HTTP client used for every request
            base_url: Daemon URL, e.g. ``http://localhost:2375``
        """
        self._transport = DaemonTransport(http, base_url)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @staticmethod
    def _path(container_id: str, action: str) -> str:
        return f"/containers/{path_segment(container_id)}/{action}"

    async def list(
        self,
        all: bool | None = None,  # noqa: A002
        limit: int | None = None,
        size: bool | None = None,
        filters: Filters | None = None,
    ) -> list[Container]:
        """
        List containers.

        Summaries are smaller than the inspect representation; linked
        containers, for example, are not reported.

        Args:
            all: Include stopped containers
            limit: Return only this many most recently created containers
            size: Report SizeRw and SizeRootFs
            filters: Filter map, e.g. ``{"status": ["paused"]}``. Supported
                keys include ancestor, before, expose, exited, health, id,
                isolation, is-task, label, name, network, publish, since,
                status and volume

        Returns:
            Container summaries in daemon order
        """
        data = await self._transport.request(
            "GET",
            "/containers/json",
            [("all", all), ("limit", limit), ("size", size), ("filters", filters)],
        )
        return _container_list.validate_python(data or [])

    async def create(
        self,
        config: ContainerConfig | dict[str, Any],
        name: str | None = None,
        platform: str | None = None,
    ) -> ContainerCreateResponse:
        """
        Create a container.

        The config is sent as the JSON body exactly as given: models are
        dumped with only the fields that were set, dicts are sent untouched.

        Args:
            config: Container configuration
            name: Container name, matching ``/?[a-zA-Z0-9][a-zA-Z0-9_.-]+``
            platform: ``os[/arch[/variant]]`` used for image lookup

        Returns:
            Id of the new container and any daemon warnings
        """
        data = await self._transport.request(
            "POST",
            "/containers/create",
            [("name", name), ("platform", platform)],
            json_body=config,
        )
        created = ContainerCreateResponse.model_validate(data)
        logger.info("Container created", container_id=created.Id, name=name)
        return created

    async def inspect(
        self, container_id: str, size: bool | None = None
    ) -> ContainerInspect:
        """
        Return low-level information about a container.

        Args:
            container_id: Container id or name
            size: Report SizeRw and SizeRootFs

        Returns:
            Container detail
        """
        data = await self._transport.request(
            "GET", self._path(container_id, "json"), [("size", size)]
        )
        return ContainerInspect.model_validate(data)

    async def top(self, container_id: str, ps_args: str | None = None) -> ContainerTop:
        """
        List processes running inside a container.

        Not supported by Windows daemons.

        Args:
            container_id: Container id or name
            ps_args: Arguments for ``ps`` (daemon default ``-ef``)
        """
        data = await self._transport.request(
            "GET", self._path(container_id, "top"), [("ps_args", ps_args)]
        )
        return ContainerTop.model_validate(data)

    async def logs(
        self,
        container_id: str,
        follow: bool | None = None,
        stdout: bool | None = None,
        stderr: bool | None = None,
        since: int | None = None,
        until: int | None = None,
        timestamps: bool | None = None,
        tail: str | None = None,
    ) -> ByteStream:
        """
        Stream stdout/stderr logs of a container.

        Only works with the json-file and journald logging drivers. Without a
        TTY the daemon multiplexes both streams with 8-byte frame headers; the
        bytes are passed through untouched.

        Args:
            container_id: Container id or name
            follow: Keep the connection open for new output
            stdout: Include stdout
            stderr: Include stderr
            since: Only logs since this UNIX timestamp
            until: Only logs before this UNIX timestamp
            timestamps: Prefix every line with its timestamp
            tail: Number of lines from the end, or ``all``

        Returns:
            Open byte stream; the caller must close it
        """
        return await self._transport.stream(
            "GET",
            self._path(container_id, "logs"),
            [
                ("follow", follow),
                ("stdout", stdout),
                ("stderr", stderr),
                ("since", since),
                ("until", until),
                ("timestamps", timestamps),
                ("tail", tail),
            ],
        )

    async def changes(self, container_id: str) -> list[ContainerChange]:
        """
        List files added, deleted or modified in a container's filesystem.

        Returns:
            Changes; the daemon's ``null`` for an untouched container maps to []
        """
        data = await self._transport.request("GET", self._path(container_id, "changes"))
        return _change_list.validate_python(data or [])

    async def backup(self, container_id: str) -> ByteStream:
        """
        Export the filesystem of a container as a tarball.

        Returns:
            Open byte stream of the tar archive; the caller must close it
        """
        return await self._transport.stream("GET", self._path(container_id, "export"))

    async def stats(self, container_id: str) -> ContainerStats:
        """
        Get a single resource usage snapshot of a container.

        Always requests one sample (``stream=false``, ``one-shot=true``); the
        live stats stream is not exposed.
        """
        data = await self._transport.request(
            "GET",
            self._path(container_id, "stats"),
            [("stream", False), ("one-shot", True)],
        )
        return ContainerStats.model_validate(data)

    async def start(self, container_id: str) -> None:
        await self._transport.request("POST", self._path(container_id, "start"))
        logger.info("Container started", container_id=container_id)

    async def stop(self, container_id: str, timeout: int | None = None) -> None:
        """
        Stop a container.

        Args:
            container_id: Container id or name
            timeout: Seconds to wait before killing the container
        """
        await self._transport.request(
            "POST", self._path(container_id, "stop"), [("t", timeout)]
        )
        logger.info("Container stopped", container_id=container_id)

    async def restart(self, container_id: str, timeout: int | None = None) -> None:
        """
        Restart a container.

        Args:
            container_id: Container id or name
            timeout: Seconds to wait before killing the container
        """
        await self._transport.request(
            "POST", self._path(container_id, "restart"), [("t", timeout)]
        )
        logger.info("Container restarted", container_id=container_id)

    async def kill(self, container_id: str, signal: str | None = None) -> None:
        """
        Send a signal to a container (SIGKILL unless told otherwise).

        Args:
            container_id: Container id or name
            signal: Signal name or number, e.g. ``SIGINT`` or ``9``
        """
        await self._transport.request(
            "POST", self._path(container_id, "kill"), [("signal", signal)]
        )
        logger.info("Container killed", container_id=container_id, signal=signal)

    async def update(
        self, container_id: str, config: ContainerUpdate | dict[str, Any]
    ) -> ContainerUpdateResponse:
        """
        Change resource limits of a container without recreating it.

        Returns:
            Daemon warnings, if any
        """
        data = await self._transport.request(
            "POST", self._path(container_id, "update"), json_body=config
        )
        return ContainerUpdateResponse.model_validate(data or {})

    async def rename(self, container_id: str, name: str) -> None:
        await self._transport.request(
            "POST", self._path(container_id, "rename"), [("name", name)]
        )
        logger.info("Container renamed", container_id=container_id, name=name)

    async def pause(self, container_id: str) -> None:
        await self._transport.request("POST", self._path(container_id, "pause"))
        logger.info("Container paused", container_id=container_id)

    async def prune(self, filters: Filters | None = None) -> ContainerPruneResponse:
        """
        Delete stopped containers.

        Args:
            filters: Filter map. Supported keys: until, label

        Returns:
            Deleted container ids and reclaimed bytes
        """
        data = await self._transport.request(
            "POST", "/containers/prune", [("filters", filters)]
        )
        return ContainerPruneResponse.model_validate(data or {})
