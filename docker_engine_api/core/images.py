"""
Image operations against the Docker Engine API.

Every method maps to exactly one request:
- list: GET /images/json
- build: POST /build
- build_prune: POST /build/prune
- create: POST /images/create (pull or import)
- inspect: GET /images/{name}/json
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter

from docker_engine_api.constants import (
    CONTENT_TYPE_TAR,
    FROM_SRC_REQUEST_BODY,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HEADER_REGISTRY_CONFIG,
)
from docker_engine_api.core.transport import (
    DaemonTransport,
    encode_registry_header,
    path_segment,
)
from docker_engine_api.exceptions import ValidationError
from docker_engine_api.logging import get_logger
from docker_engine_api.models import (
    AuthConfig,
    BuildPruneResponse,
    Filters,
    Image,
    ImageInspect,
    Labels,
    RegistryConfig,
)

logger = get_logger(__name__)

_image_list = TypeAdapter(list[Image])


class ImageService:
    """
    Image endpoints of one Docker daemon.

    Stateless apart from the injected HTTP client; any number of calls may
    run concurrently.
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        """
        Initialize image service.

        Args:
            http: HTTP client used for every request
            base_url: Daemon URL, e.g. ``http://localhost:2375``
        """
        self._transport = DaemonTransport(http, base_url)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    async def list(
        self,
        all: bool | None = None,  # noqa: A002
        filters: Filters | None = None,
        shared_size: bool | None = None,
        digests: bool | None = None,
    ) -> list[Image]:
        """
        List images.

        Args:
            all: Show all images, not only those from a final layer
            filters: Filter map, e.g. ``{"dangling": ["true"]}``. Supported
                keys: before, dangling, label, reference, since
            shared_size: Report shared size as SharedSize on each image
            digests: Report RepoDigests on each image

        Returns:
            Image summaries in daemon order
        """
        data = await self._transport.request(
            "GET",
            "/images/json",
            [
                ("all", all),
                ("filters", filters),
                ("sharedSize", shared_size),
                ("digests", digests),
            ],
        )
        return _image_list.validate_python(data or [])

    async def build(  # noqa: PLR0913
        self,
        binary: bytes,
        content_type: str | None = None,
        registry_config: RegistryConfig | None = None,
        dockerfile: str | None = None,
        tags: list[str] | None = None,
        extra_hosts: str | None = None,
        remote: str | None = None,
        quiet: bool | None = None,
        no_cache: bool | None = None,
        cache_from: str | None = None,
        pull: str | None = None,
        remove_intermediate: bool | None = None,
        force_remove_intermediate: bool | None = None,
        memory_limit: int | None = None,
        memory_swap: int | None = None,
        cpu_shares: int | None = None,
        cpu_set_cpus: str | None = None,
        cpu_period: int | None = None,
        cpu_quota: int | None = None,
        build_args: dict[str, str] | None = None,
        shm_size: int | None = None,
        squash: bool | None = None,
        labels: Labels | None = None,
        network_mode: str | None = None,
        platform: str | None = None,
        target: str | None = None,
        outputs: str | None = None,
    ) -> None:
        """
        Build an image from a tar archive containing a Dockerfile.

        The daemon validates the Dockerfile first, then runs each instruction
        in turn. Dropping the connection cancels the build.

        Args:
            binary: Build context as a tar archive
            content_type: Body content type (default ``application/x-tar``)
            registry_config: Credentials per registry host, sent base64
                encoded in X-Registry-Config
            dockerfile: Path to the Dockerfile inside the context
            tags: ``name:tag`` references; each one is sent as its own ``t``
            extra_hosts: Extra /etc/hosts entries
            remote: Git or HTTP(S) context URI used instead of the archive
            quiet: Suppress verbose build output
            no_cache: Do not use the build cache
            cache_from: JSON array of images used for cache resolution
            pull: Pull the base image even if a local one exists
            remove_intermediate: Remove intermediate containers on success
            force_remove_intermediate: Always remove intermediate containers
            memory_limit: Memory limit in bytes
            memory_swap: Memory plus swap; -1 disables swap
            cpu_shares: Relative CPU weight
            cpu_set_cpus: CPUs allowed for execution, e.g. ``0-3``
            cpu_period: CPU CFS period in microseconds
            cpu_quota: CPU CFS quota in microseconds
            build_args: Build-time variables
            shm_size: Size of /dev/shm in bytes
            squash: Squash the resulting layers into one
            labels: Labels to set on the image
            network_mode: Network mode for RUN instructions
            platform: ``os[/arch[/variant]]``
            target: Build stage to stop at
            outputs: BuildKit output configuration
        """
        params = [("dockerfile", dockerfile)]
        params.extend(("t", tag) for tag in tags or [])
        params.extend(
            [
                ("extrahosts", extra_hosts),
                ("remote", remote),
                ("q", quiet),
                ("nocache", no_cache),
                ("cachefrom", cache_from),
                ("pull", pull),
                ("rm", remove_intermediate),
                ("forcerm", force_remove_intermediate),
                ("memory", memory_limit),
                ("memswap", memory_swap),
                ("cpushares", cpu_shares),
                ("cpusetcpus", cpu_set_cpus),
                ("cpuperiod", cpu_period),
                ("cpuquota", cpu_quota),
                ("buildargs", build_args),
                ("shmsize", shm_size),
                ("squash", squash),
                ("labels", labels),
                ("networkmode", network_mode),
                ("platform", platform),
                ("target", target),
                ("outputs", outputs),
            ]
        )

        headers = {
            HEADER_CONTENT_TYPE: content_type or CONTENT_TYPE_TAR,
            HEADER_CONTENT_LENGTH: str(len(binary)),
        }
        if registry_config is not None:
            headers[HEADER_REGISTRY_CONFIG] = encode_registry_header(registry_config)

        await self._transport.request(
            "POST", "/build", params, content=binary, headers=headers
        )
        logger.info("Image build finished", tags=tags or [])

    async def build_prune(
        self,
        keep_storage: int | None = None,
        all: bool | None = None,  # noqa: A002
        filters: Filters | None = None,
    ) -> BuildPruneResponse:
        """
        Delete build cache.

        Args:
            keep_storage: Bytes of cache to keep
            all: Remove all types of build cache
            filters: Filter map. Supported keys: until, id, parent, type,
                description, inuse, shared, private

        Returns:
            Deleted cache ids and reclaimed bytes
        """
        data = await self._transport.request(
            "POST",
            "/build/prune",
            [("keep-storage", keep_storage), ("all", all), ("filters", filters)],
        )
        return BuildPruneResponse.model_validate(data or {})

    async def create(
        self,
        binary: bytes | None = None,
        auth_config: AuthConfig | dict[str, Any] | None = None,
        from_image: str | None = None,
        from_src: str | None = None,
        repo: str | None = None,
        tag: str | None = None,
        message: str | None = None,
        changes: list[str] | None = None,
        platform: str | None = None,
    ) -> None:
        """
        Create an image by pulling it from a registry or importing it.

        Exactly one of ``binary`` (import from the request body) and
        ``from_src`` (import from a URL) must be given.

        Args:
            binary: Image archive to import
            auth_config: Registry credentials, sent base64 encoded
            from_image: Image to pull; may include a tag or digest
            from_src: Source URL to import from
            repo: Repository name for an imported image
            tag: Tag or digest
            message: Commit message for an imported image
            changes: Dockerfile instructions to apply, e.g. ``ENV DEBUG=true``
            platform: ``os[/arch[/variant]]``

        Raises:
            ValidationError: Both or neither of binary and from_src were given
        """
        if (binary is None) == (from_src is None):
            raise ValidationError(
                "Create mode is not clear: pass exactly one of binary or from_src"
            )

        params = [
            ("fromSrc", from_src if from_src is not None else FROM_SRC_REQUEST_BODY),
            ("fromImage", from_image),
            ("repo", repo),
            ("tag", tag),
            ("message", message),
            ("changes", changes),
            ("platform", platform),
        ]
        headers = {}
        if auth_config is not None:
            headers[HEADER_REGISTRY_CONFIG] = encode_registry_header(auth_config)

        await self._transport.request(
            "POST", "/images/create", params, content=binary, headers=headers
        )

    async def inspect(self, name: str) -> ImageInspect:
        """
        Return low-level information about an image.

        Args:
            name: Image name or id

        Returns:
            Image detail
        """
        data = await self._transport.request("GET", f"/images/{path_segment(name)}/json")
        return ImageInspect.model_validate(data)
