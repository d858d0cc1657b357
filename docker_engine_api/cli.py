"""
CLI entry point for docker-engine-api.

This module provides the main Typer CLI application: container and image
command groups over DockerEngineClient, plus configuration management.
"""

# ruff: noqa: PLC0415 (intentional lazy imports to keep startup light)
import typer
from typer import Typer

from docker_engine_api.commands.containers import container_app
from docker_engine_api.commands.images import image_app
from docker_engine_api.config import get_config
from docker_engine_api.constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_MAX_BYTES
from docker_engine_api.logging import setup_logging

app = Typer(
    name="docker-engine-api",
    help="Command line client for the Docker Engine HTTP API",
    add_completion=True,
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    url: str | None = typer.Option(
        None,
        "--url",
        "-H",
        help="Docker daemon URL (default: daemon.url from config or DOCKER_HOST)",
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """
    Talk to a Docker daemon over its HTTP API.
    """
    config = get_config()
    log_config = config.logging
    setup_logging(
        level=log_level or log_config.get("level", "WARNING"),
        log_format=log_config.get("format", "text"),
        log_file=log_config.get("file") or None,
        max_bytes=log_config.get("max_bytes", DEFAULT_LOG_MAX_BYTES),
        backup_count=log_config.get("backup_count", DEFAULT_LOG_BACKUP_COUNT),
    )
    ctx.obj = {"url": url}


@app.command()
def config(
    key: str | None = None,
    value: str | None = None,
    delete: bool = False,
):
    """
    Configuration management.
    """
    import sys

    from docker_engine_api.commands.config import main as config_main

    sys.exit(config_main(key=key, value=value, delete=delete))


app.add_typer(container_app, name="container")
app.add_typer(image_app, name="image")


if __name__ == "__main__":
    app()
