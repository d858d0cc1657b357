"""
Shared plumbing for CLI commands: client construction and error reporting.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer

from docker_engine_api.constants import EXIT_ERROR
from docker_engine_api.core.client import DockerEngineClient
from docker_engine_api.exceptions import DaemonConnectionError, DaemonError
from docker_engine_api.logging import get_logger
from docker_engine_api.models.base import DockerModel

logger = get_logger(__name__)

T = TypeVar("T")


def daemon_url(ctx: typer.Context) -> str | None:
    """Daemon URL given with the global ``--url`` option, if any."""
    obj = ctx.obj or {}
    return obj.get("url")


def run_with_client(
    ctx: typer.Context, action: Callable[[DockerEngineClient], Awaitable[T]]
) -> T:
    """
    Run one client action to completion and map failures to exit codes.

    Args:
        ctx: Typer context carrying the global options
        action: Coroutine function receiving a connected client

    Returns:
        Whatever the action returned
    """

    async def _run() -> T:
        async with DockerEngineClient(base_url=daemon_url(ctx)) as client:
            return await action(client)

    try:
        return asyncio.run(_run())
    except DaemonError as e:
        logger.debug("Command failed", status_code=e.status_code, body=e.body)
        typer.echo(f"❌ {e.message}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from None
    except DaemonConnectionError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from None


def echo_json(data: Any) -> None:
    """Print models or plain data as indented JSON."""
    if isinstance(data, DockerModel):
        data = data.to_wire()
    elif isinstance(data, list):
        data = [item.to_wire() if isinstance(item, DockerModel) else item for item in data]
    typer.echo(json.dumps(data, indent=2))


def parse_filters(values: list[str] | None) -> dict[str, list[str]] | None:
    """
    Turn repeated ``key=value`` options into a filter map.

    ``["status=running", "status=paused"]`` gives
    ``{"status": ["running", "paused"]}``.
    """
    if not values:
        return None
    filters: dict[str, list[str]] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Filter must look like key=value: {item}")
        filters.setdefault(key, []).append(value)
    return filters


def format_size(size: int | None) -> str:
    """Human readable byte count (decimal units, like the docker CLI)."""
    if size is None:
        return "N/A"
    value = float(size)
    for unit in ("B", "kB", "MB", "GB"):
        if value < 1000:
            return f"{value:.1f}{unit}" if unit != "B" else f"{int(value)}B"
        value /= 1000
    return f"{value:.1f}TB"
