"""
pytest fixtures and configuration for docker-engine-api tests.
"""

import json
from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from docker_engine_api.config import Config, reset_config
from docker_engine_api.core.containers import ContainerService
from docker_engine_api.core.images import ImageService

DAEMON_URL = "http://docker.local:2375"

_ENV_VARS = ["DOCKER_HOST", "DOCKER_ENGINE_TIMEOUT", "LOG_LEVEL"]


class FakeDaemon:
    """
    Stand-in Docker daemon behind httpx.MockTransport.

    Records every request and answers with the configured response, or
    with the result of a custom handler.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._status_code = 200
        self._json: Any = None
        self._content = b""
        self._headers: dict[str, str] = {}
        self._handler: Callable[[httpx.Request], httpx.Response] | None = None

    def respond(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        """Configure the next responses."""
        self._status_code = status_code
        self._json = json_body
        self._content = content
        self._headers = headers or {}
        self._handler = None

    def use(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        """Answer with a custom handler instead of a fixed response."""
        self._handler = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._handler is not None:
            return self._handler(request)
        if self._json is not None:
            return httpx.Response(
                self._status_code, json=self._json, headers=self._headers
            )
        return httpx.Response(
            self._status_code, content=self._content, headers=self._headers
        )

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the daemon"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's DOCKER_HOST and friends out of the tests."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """
    Point the default config file into tmp_path and reset the singleton.

    Yields:
        Path of the (not yet existing) default config file
    """
    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setattr(Config, "CONFIG_PATH", config_path)
    reset_config()
    yield config_path
    reset_config()


@pytest.fixture
def daemon_url() -> str:
    return DAEMON_URL


@pytest.fixture
def fake_daemon() -> FakeDaemon:
    return FakeDaemon()


@pytest.fixture
async def http_client(fake_daemon: FakeDaemon) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Create an httpx client wired to the fake daemon.

    Yields:
        AsyncClient instance
    """
    async with httpx.AsyncClient(transport=fake_daemon.transport()) as client:
        yield client


@pytest.fixture
def containers(http_client: httpx.AsyncClient) -> ContainerService:
    return ContainerService(http_client, DAEMON_URL)


@pytest.fixture
def images(http_client: httpx.AsyncClient) -> ImageService:
    return ImageService(http_client, DAEMON_URL)


@pytest.fixture
def sample_container() -> dict:
    """
    Container summary as returned by GET /containers/json.

    Returns:
        Sample container dict
    """
    return {
        "Id": "8dfafdbc3a40e9f8b07e7f5c9ae1b8d3a1f6cb6b2b6a1e9c0d1f2a3b4c5d6e7f",
        "Names": ["/web"],
        "Image": "nginx:1.25",
        "ImageID": "sha256:61395b4c586da2b9b3b7ca903ea6a448e6783dfdd7f768ff2c1a0f3360aaba99",
        "Command": "/docker-entrypoint.sh nginx -g 'daemon off;'",
        "Created": 1700000000,
        "State": "running",
        "Status": "Up 2 hours",
        "Ports": [
            {"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8080, "Type": "tcp"}
        ],
        "Labels": {"com.example.service": "web"},
        "SizeRw": 12288,
        "SizeRootFs": 187000000,
        "HostConfig": {"NetworkMode": "bridge"},
        "NetworkSettings": {
            "Networks": {
                "bridge": {
                    "NetworkID": "7ea29fc1412292a2d7bba362f9253545fecdfa8ce9a6e37dd10ba8bee7129812",
                    "EndpointID": "2cdc4edb1ded3631c81f57966563e5c8525b81121bb3706a9a9a3ae102711f3f",
                    "Gateway": "172.17.0.1",
                    "IPAddress": "172.17.0.2",
                    "IPPrefixLen": 16,
                    "MacAddress": "02:42:ac:11:00:02",
                }
            }
        },
        "Mounts": [
            {
                "Type": "volume",
                "Name": "web-data",
                "Source": "/var/lib/docker/volumes/web-data/_data",
                "Destination": "/usr/share/nginx/html",
                "Driver": "local",
                "Mode": "z",
                "RW": True,
                "Propagation": "",
            }
        ],
    }


@pytest.fixture
def sample_image() -> dict:
    """
    Image summary as returned by GET /images/json.

    Returns:
        Sample image dict
    """
    return {
        "Id": "sha256:61395b4c586da2b9b3b7ca903ea6a448e6783dfdd7f768ff2c1a0f3360aaba99",
        "ParentId": "",
        "RepoTags": ["nginx:1.25"],
        "RepoDigests": [
            "nginx@sha256:4c0fdaa8b6341bfdeca5f18f7837462c80cff90527ee35ef185571e1c327beac"
        ],
        "Created": 1699000000,
        "Size": 187000000,
        "SharedSize": -1,
        "VirtualSize": 187000000,
        "Labels": {"maintainer": "NGINX Docker Maintainers"},
        "Containers": -1,
    }


@pytest.fixture
def sample_stats() -> dict:
    """
    One-shot stats snapshot as returned by GET /containers/{id}/stats.

    Returns:
        Sample stats dict
    """
    return {
        "read": "2024-01-01T12:00:01.000000000Z",
        "preread": "2024-01-01T12:00:00.000000000Z",
        "name": "/web",
        "id": "8dfafdbc3a40",
        "pids_stats": {"current": 3, "limit": 4096},
        "networks": {"eth0": {"rx_bytes": 5338, "tx_bytes": 648}},
        "memory_stats": {
            "stats": {"cache": 0},
            "usage": 6537216,
            "limit": 67108864,
        },
        "blkio_stats": {},
        "cpu_stats": {
            "cpu_usage": {"total_usage": 200000000},
            "system_cpu_usage": 10000000000,
            "online_cpus": 2,
            "throttling_data": {"periods": 0, "throttled_periods": 0, "throttled_time": 0},
        },
        "precpu_stats": {
            "cpu_usage": {"total_usage": 100000000},
            "system_cpu_usage": 9000000000,
            "online_cpus": 2,
            "throttling_data": {"periods": 0, "throttled_periods": 0, "throttled_time": 0},
        },
    }
