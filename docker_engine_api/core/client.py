"""
Docker Engine API client facade.

This module bundles the image and container services behind one object that
owns (or borrows) an httpx.AsyncClient.
"""

import httpx

from docker_engine_api.config import get_config, normalize_daemon_url, parse_timeout
from docker_engine_api.core.containers import ContainerService
from docker_engine_api.core.images import ImageService
from docker_engine_api.logging import get_logger

logger = get_logger(__name__)

_UNSET = object()


class DockerEngineClient:
    """
    Client for one Docker daemon.

    Either injects a caller-owned httpx.AsyncClient (for Unix sockets, TLS
    or test transports), or lazily creates a persistent one that ``close``
    releases. Injected clients are never closed here.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None | object = _UNSET,
        http: httpx.AsyncClient | None = None,
    ):
        """
        Initialize Docker Engine client.

        Args:
            base_url: Daemon URL (defaults to ``daemon.url`` from config);
                ``tcp://`` addresses are accepted
            timeout: Timeout in seconds for the owned client, None for no
                timeout (defaults to ``daemon.timeout`` from config)
            http: Pre-configured client to use instead of an owned one
        """
        config = get_config()
        self.base_url = normalize_daemon_url(base_url or config.get("daemon.url"))
        if timeout is _UNSET:
            timeout = config.get("daemon.timeout")
        # Values set through `config --key` arrive as strings
        self._timeout = parse_timeout(timeout) if isinstance(timeout, str) else timeout
        self._owns_http = http is None
        self._http = http
        self._images: ImageService | None = None
        self._containers: ContainerService | None = None

    def _get_http(self) -> httpx.AsyncClient:
        """
        Get or create the HTTP client.

        Returns:
            httpx.AsyncClient instance
        """
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
            logger.debug(
                "Created httpx client for Docker daemon",
                base_url=self.base_url,
                timeout=self._timeout,
            )
        return self._http

    @property
    def images(self) -> ImageService:
        """Image operations."""
        if self._images is None:
            self._images = ImageService(self._get_http(), self.base_url)
        return self._images

    @property
    def containers(self) -> ContainerService:
        """Container operations."""
        if self._containers is None:
            self._containers = ContainerService(self._get_http(), self.base_url)
        return self._containers

    async def close(self) -> None:
        """
        Close the owned httpx client and release resources.

        Streams returned by ``logs``/``backup`` that are still open are cut
        off by this.
        """
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None
            self._images = None
            self._containers = None
            logger.debug("Closed httpx client for Docker daemon")

    async def __aenter__(self) -> "DockerEngineClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False
