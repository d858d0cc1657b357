"""
Custom exceptions for docker-engine-api.

Three kinds of failure reach the caller:

- ValidationError: contradictory arguments, raised before any I/O
- DaemonError: the daemon answered with a non-2xx status; its decoded
  error body is carried verbatim in ``body``
- DaemonConnectionError: the request never produced a response
  (connection refused, DNS failure, timeout)
"""

from typing import Any


class DockerEngineError(Exception):
    """Base exception for docker-engine-api errors."""

    pass


class ValidationError(DockerEngineError, ValueError):
    """Raised when caller-supplied arguments are contradictory."""

    pass


class DaemonError(DockerEngineError):
    """Raised when the Docker daemon returns an error response."""

    def __init__(
        self,
        status_code: int,
        body: Any,
        method: str | None = None,
        url: str | None = None,
    ):
        """
        Initialize daemon error.

        Args:
            status_code: HTTP status returned by the daemon
            body: Decoded error body (JSON object, or text when not JSON)
            method: HTTP method of the failed request
            url: URL of the failed request
        """
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Daemon-supplied message, or the raw body when it has none."""
        if isinstance(self.body, dict) and "message" in self.body:
            return str(self.body["message"])
        if self.body in (None, ""):
            return f"HTTP {self.status_code}"
        return str(self.body)

    @classmethod
    def from_status(
        cls,
        status_code: int,
        body: Any,
        method: str | None = None,
        url: str | None = None,
    ) -> "DaemonError":
        """Build the most specific DaemonError subclass for a status code."""
        error_cls = _STATUS_ERRORS.get(status_code, cls)
        return error_cls(status_code, body, method=method, url=url)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, body={self.body!r})"


class DaemonNotModifiedError(DaemonError):
    """Raised when the target is already in the requested state (304)."""

    pass


class DaemonNotFoundError(DaemonError):
    """Raised when the daemon reports a missing container or image (404)."""

    pass


class DaemonConflictError(DaemonError):
    """Raised when the daemon reports a conflicting state (409)."""

    pass


class DaemonConnectionError(DockerEngineError):
    """Raised when the daemon cannot be reached."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """
        Initialize connection error.

        Args:
            message: Error message
            original_error: Transport exception that caused the failure
        """
        self.original_error = original_error
        super().__init__(message)


_STATUS_ERRORS: dict[int, type[DaemonError]] = {
    304: DaemonNotModifiedError,
    404: DaemonNotFoundError,
    409: DaemonConflictError,
}
