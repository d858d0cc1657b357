"""
Request building and response mapping shared by every endpoint.

Each operation is one stateless round trip:
- compose ``{base_url}{path}`` and append only the query parameters that
  were supplied
- send a single request through the injected httpx.AsyncClient
- return the decoded body, or raise DaemonError carrying the daemon's error
  body verbatim; transport failures become DaemonConnectionError

No retry, backoff or per-call timeout is applied here.
"""

import base64
import json
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from docker_engine_api.core.streams import ByteStream
from docker_engine_api.exceptions import DaemonConnectionError, DaemonError
from docker_engine_api.logging import get_logger
from docker_engine_api.models.base import DockerModel

logger = get_logger(__name__)

QueryParams = Iterable[tuple[str, Any]]


def to_jsonable(value: Any) -> Any:
    """Replace models (at any depth) with their wire dicts."""
    if isinstance(value, DockerModel):
        return value.to_wire()
    if isinstance(value, Mapping):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def compact_json(value: Any) -> str:
    return json.dumps(to_jsonable(value), separators=(",", ":"))


def encode_query_value(value: Any) -> str:
    """
    Serialize one query parameter value.

    Booleans become ``true``/``false``, mappings, sequences and models become
    compact JSON, everything else goes through ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple, DockerModel)):
        return compact_json(value)
    return str(value)


def encode_query(params: QueryParams) -> str:
    """
    Build a query string from (key, value) pairs, skipping None values.

    Pairs keep their order and keys may repeat (``t`` on ``/build``).
    """
    pairs = [
        (key, encode_query_value(value)) for key, value in params if value is not None
    ]
    return urlencode(pairs, quote_via=quote)


def encode_registry_header(value: Any) -> str:
    """Base64 of the compact JSON form, as the X-Registry-Config header expects."""
    return base64.b64encode(compact_json(value).encode("utf-8")).decode("ascii")


def path_segment(value: str) -> str:
    """
    Quote a container id or image reference for use inside a URL path.

    Image references keep their ``/``, ``:`` and ``@`` separators.
    """
    return quote(value, safe="/:@")


def decode_body(response: httpx.Response) -> Any:
    """
    Decode a buffered response body.

    Returns None for an empty body, the parsed JSON when it parses, and the
    text otherwise.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class DaemonTransport:
    """
    One daemon endpoint bound to one HTTP client.

    The transport owns no connection state of its own: connection pooling,
    TLS and socket selection all belong to the injected httpx.AsyncClient.
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        """
        Initialize transport.

        Args:
            http: HTTP client used for every request
            base_url: Daemon URL, e.g. ``http://localhost:2375``
        """
        self.http = http
        self.base_url = base_url.rstrip("/")

    def url(self, path: str, params: QueryParams = ()) -> str:
        """
        Build the full request URL.

        Args:
            path: Endpoint path starting with ``/``
            params: Query parameters; None values are left out

        Returns:
            Absolute URL with the encoded query string, if any
        """
        endpoint = f"{self.base_url}{path}"
        query = encode_query(params)
        return f"{endpoint}?{query}" if query else endpoint

    async def _send(
        self,
        method: str,
        url: str,
        *,
        json_body: Any = None,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        stream: bool = False,
    ) -> httpx.Response:
        logger.debug("Docker API request", method=method, url=url, stream=stream)

        request = self.http.build_request(
            method,
            url,
            json=json_body,
            content=content,
            headers=dict(headers) if headers else None,
        )
        try:
            response = await self.http.send(request, stream=stream)
        except httpx.TransportError as e:
            logger.error(
                "Docker daemon unreachable", method=method, url=url, error=str(e)
            )
            raise DaemonConnectionError(
                f"Cannot reach Docker daemon at {self.base_url}: {e}",
                original_error=e,
            ) from e

        if response.is_success:
            return response

        try:
            if stream:
                await response.aread()
            body = decode_body(response)
        finally:
            if stream:
                await response.aclose()

        error = DaemonError.from_status(
            response.status_code, body, method=method, url=url
        )
        logger.warning(
            "Docker API error",
            method=method,
            url=url,
            status_code=response.status_code,
            message=error.message,
        )
        raise error

    async def request(
        self,
        method: str,
        path: str,
        params: QueryParams = (),
        *,
        json_body: Any = None,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Issue one buffered request and return the decoded body.

        Args:
            method: HTTP method
            path: Endpoint path
            params: Query parameters
            json_body: Object sent as JSON (models are dumped unmodified)
            content: Raw request body (tar archives)
            headers: Extra request headers

        Returns:
            Decoded JSON body, text, or None for an empty body

        Raises:
            DaemonError: The daemon answered with a non-2xx status
            DaemonConnectionError: The daemon could not be reached
        """
        response = await self._send(
            method,
            self.url(path, params),
            json_body=to_jsonable(json_body) if json_body is not None else None,
            content=content,
            headers=headers,
        )
        return decode_body(response)

    async def stream(
        self, method: str, path: str, params: QueryParams = ()
    ) -> ByteStream:
        """
        Issue one request and hand back the unread response body.

        The returned stream is owned by the caller, who must close it.

        Raises:
            DaemonError: The daemon answered with a non-2xx status
            DaemonConnectionError: The daemon could not be reached
        """
        response = await self._send(method, self.url(path, params), stream=True)
        return ByteStream(response)
