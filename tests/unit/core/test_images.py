"""
Tests for image operations.
"""

import base64
import json

import pytest

from docker_engine_api.exceptions import (
    DaemonError,
    DaemonNotFoundError,
    ValidationError,
)
from docker_engine_api.models import BasicAuth, Image


def decode_registry_header(value: str) -> dict:
    return json.loads(base64.b64decode(value))


class TestListImages:
    """Test GET /images/json."""

    @pytest.mark.asyncio
    async def test_list_parses_images(self, fake_daemon, images, sample_image):
        fake_daemon.respond(200, json_body=[sample_image])

        result = await images.list()

        assert fake_daemon.last_request.url.path == "/images/json"
        assert fake_daemon.last_request.url.query == b""
        assert isinstance(result[0], Image)
        assert result[0].RepoTags == ["nginx:1.25"]
        assert result[0].Size == 187000000

    @pytest.mark.asyncio
    async def test_list_maps_param_names(self, fake_daemon, images):
        fake_daemon.respond(200, json_body=[])

        await images.list(
            all=False, filters={"dangling": ["true"]}, shared_size=True, digests=True
        )

        params = fake_daemon.last_request.url.params
        assert params["all"] == "false"
        assert params["filters"] == '{"dangling":["true"]}'
        assert params["sharedSize"] == "true"
        assert params["digests"] == "true"


class TestBuildImage:
    """Test POST /build."""

    @pytest.mark.asyncio
    async def test_build_sends_archive_with_tar_headers(self, fake_daemon, images):
        fake_daemon.respond(200, content=b'{"stream":"Successfully built 1234"}\n')
        context = b"\x00" * 1024

        result = await images.build(context, dockerfile="Dockerfile.prod")

        request = fake_daemon.last_request
        assert result is None
        assert request.method == "POST"
        assert request.url.path == "/build"
        assert request.url.params["dockerfile"] == "Dockerfile.prod"
        assert request.headers["Content-Type"] == "application/x-tar"
        assert request.headers["Content-Length"] == "1024"
        assert "X-Registry-Config" not in request.headers
        assert request.content == context

    @pytest.mark.asyncio
    async def test_build_repeats_tag_param(self, fake_daemon, images):
        fake_daemon.respond(200)

        await images.build(b"tar", tags=["web:1.0", "web:latest"])

        assert fake_daemon.last_request.url.params.get_list("t") == [
            "web:1.0",
            "web:latest",
        ]

    @pytest.mark.asyncio
    async def test_build_maps_options_to_wire_names(self, fake_daemon, images):
        fake_daemon.respond(200)

        await images.build(
            b"tar",
            extra_hosts="db:10.0.0.2",
            quiet=True,
            no_cache=False,
            remove_intermediate=True,
            force_remove_intermediate=False,
            memory_limit=1048576,
            memory_swap=-1,
            cpu_set_cpus="0-1",
            build_args={"VERSION": "1.2"},
            labels={"team": "core"},
            network_mode="host",
            target="runtime",
        )

        params = fake_daemon.last_request.url.params
        assert params["extrahosts"] == "db:10.0.0.2"
        assert params["q"] == "true"
        assert params["nocache"] == "false"
        assert params["rm"] == "true"
        assert params["forcerm"] == "false"
        assert params["memory"] == "1048576"
        assert params["memswap"] == "-1"
        assert params["cpusetcpus"] == "0-1"
        assert json.loads(params["buildargs"]) == {"VERSION": "1.2"}
        assert json.loads(params["labels"]) == {"team": "core"}
        assert params["networkmode"] == "host"
        assert params["target"] == "runtime"
        assert "remote" not in params

    @pytest.mark.asyncio
    async def test_build_custom_content_type_and_registry_config(
        self, fake_daemon, images
    ):
        fake_daemon.respond(200)
        registry_config = {
            "registry.example.com": {"username": "ci", "password": "secret"}
        }

        await images.build(
            b"tar",
            content_type="application/octet-stream",
            registry_config=registry_config,
        )

        headers = fake_daemon.last_request.headers
        assert headers["Content-Type"] == "application/octet-stream"
        assert decode_registry_header(headers["X-Registry-Config"]) == registry_config

    @pytest.mark.asyncio
    async def test_build_failure_raises(self, fake_daemon, images):
        fake_daemon.respond(
            500, json_body={"message": "Cannot locate specified Dockerfile: Dockerfile"}
        )

        with pytest.raises(DaemonError) as exc_info:
            await images.build(b"tar")

        assert exc_info.value.status_code == 500
        assert "Dockerfile" in exc_info.value.message


class TestBuildPrune:
    """Test POST /build/prune."""

    @pytest.mark.asyncio
    async def test_build_prune(self, fake_daemon, images):
        fake_daemon.respond(
            200, json_body={"CacheDeleted": ["a1", "b2"], "SpaceReclaimed": 1048576}
        )

        result = await images.build_prune(
            keep_storage=1024, all=True, filters={"until": ["24h"]}
        )

        params = fake_daemon.last_request.url.params
        assert fake_daemon.last_request.url.path == "/build/prune"
        assert params["keep-storage"] == "1024"
        assert params["all"] == "true"
        assert params["filters"] == '{"until":["24h"]}'
        assert result.CacheDeleted == ["a1", "b2"]
        assert result.SpaceReclaimed == 1048576


class TestCreateImage:
    """Test POST /images/create."""

    @pytest.mark.asyncio
    async def test_create_rejects_both_sources(self, fake_daemon, images):
        """Should fail before any request when both sources are given."""
        with pytest.raises(ValidationError, match="Create mode is not clear"):
            await images.create(binary=b"tar", from_src="http://example.com/img.tar")

        assert fake_daemon.requests == []

    @pytest.mark.asyncio
    async def test_create_rejects_missing_source(self, fake_daemon, images):
        """Should fail before any request when no source is given."""
        with pytest.raises(ValidationError):
            await images.create(from_image="alpine", tag="3.19")

        assert fake_daemon.requests == []

    @pytest.mark.asyncio
    async def test_validation_error_is_value_error(self, images):
        with pytest.raises(ValueError):
            await images.create()

    @pytest.mark.asyncio
    async def test_create_from_binary_uses_request_body(self, fake_daemon, images):
        fake_daemon.respond(200)

        result = await images.create(
            binary=b"image-tar",
            repo="imported/app",
            tag="1.0",
            changes=["ENV DEBUG=true"],
            message="imported",
        )

        request = fake_daemon.last_request
        assert result is None
        assert request.url.path == "/images/create"
        assert request.url.params["fromSrc"] == "-"
        assert request.url.params["repo"] == "imported/app"
        assert request.url.params["tag"] == "1.0"
        assert json.loads(request.url.params["changes"]) == ["ENV DEBUG=true"]
        assert request.url.params["message"] == "imported"
        assert request.content == b"image-tar"
        assert "X-Registry-Config" not in request.headers

    @pytest.mark.asyncio
    async def test_create_from_url_sends_auth_header(self, fake_daemon, images):
        fake_daemon.respond(200)
        auth = BasicAuth(username="ci", password="secret")

        await images.create(
            from_src="http://example.com/img.tar",
            from_image="alpine",
            auth_config=auth,
            platform="linux/arm64",
        )

        request = fake_daemon.last_request
        assert request.url.params["fromSrc"] == "http://example.com/img.tar"
        assert request.url.params["fromImage"] == "alpine"
        assert request.url.params["platform"] == "linux/arm64"
        assert request.content == b""
        assert decode_registry_header(request.headers["X-Registry-Config"]) == {
            "username": "ci",
            "password": "secret",
        }


class TestInspectImage:
    """Test GET /images/{name}/json."""

    @pytest.mark.asyncio
    async def test_inspect_keeps_reference_in_path(self, fake_daemon, images):
        fake_daemon.respond(
            200,
            json_body={
                "Id": "sha256:abc",
                "RepoTags": ["registry.local:5000/team/app:1.0"],
                "Architecture": "amd64",
                "Os": "linux",
                "Config": {"Cmd": ["/app"], "Env": ["PATH=/usr/bin"]},
            },
        )

        info = await images.inspect("registry.local:5000/team/app:1.0")

        assert fake_daemon.last_request.url.path == (
            "/images/registry.local:5000/team/app:1.0/json"
        )
        assert info.Architecture == "amd64"
        assert info.config.Cmd == ["/app"]

    @pytest.mark.asyncio
    async def test_inspect_missing_image(self, fake_daemon, images):
        fake_daemon.respond(404, json_body={"message": "No such image: nope:latest"})

        with pytest.raises(DaemonNotFoundError) as exc_info:
            await images.inspect("nope:latest")

        assert exc_info.value.body == {"message": "No such image: nope:latest"}


class TestDaemonErrorBodies:
    """Image operations pass the daemon's error body through unchanged."""

    ERROR_BODY = {"message": "no such container"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500])
    @pytest.mark.parametrize(
        "operation,kwargs",
        [
            ("list", {}),
            ("build", {"binary": b"FROM scratch"}),
            ("build_prune", {}),
            ("create", {"binary": b"layer.tar"}),
            ("create", {"from_src": "http://files.local/rootfs.tar", "repo": "app"}),
        ],
    )
    async def test_error_body_is_kept(
        self, fake_daemon, images, operation, kwargs, status_code
    ):
        fake_daemon.respond(status_code, json_body=self.ERROR_BODY)

        with pytest.raises(DaemonError) as exc_info:
            await getattr(images, operation)(**kwargs)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.body == self.ERROR_BODY
