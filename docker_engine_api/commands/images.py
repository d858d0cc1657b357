"""
Image command group.
"""

from typing import Annotated

import typer

from docker_engine_api.commands._runner import (
    echo_json,
    format_size,
    parse_filters,
    run_with_client,
)

image_app = typer.Typer(
    name="image",
    help="Manage images",
    no_args_is_help=True,
)


@image_app.command("list")
def list_images(
    ctx: typer.Context,
    all_: bool = typer.Option(False, "--all", "-a", help="Include intermediate images"),
    digests: bool = typer.Option(False, "--digests", help="Show digests"),
    filter_: list[str] | None = typer.Option(
        None, "--filter", "-f", help="Filter as key=value (repeatable)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """List images."""
    filters = parse_filters(filter_)
    images = run_with_client(
        ctx,
        lambda client: client.images.list(
            all=all_ or None, filters=filters, digests=digests or None
        ),
    )

    if json_output:
        echo_json(images)
        return

    if not images:
        typer.echo("No images found.")
        return

    for image in images:
        short_id = image.Id.removeprefix("sha256:")[:12]
        tags = ", ".join(image.RepoTags or ["<none>:<none>"])
        typer.echo(f"{short_id}  {tags}  {format_size(image.Size)}")
        if digests:
            for digest in image.RepoDigests or []:
                typer.echo(f"    {digest}")


@image_app.command("inspect")
def inspect_image(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Image name or id")],
):
    """Show low-level information about an image."""
    detail = run_with_client(ctx, lambda client: client.images.inspect(name))
    echo_json(detail)


@image_app.command("build-prune")
def build_prune(
    ctx: typer.Context,
    all_: bool = typer.Option(False, "--all", "-a", help="Remove all build cache"),
    keep_storage: int | None = typer.Option(
        None, "--keep-storage", help="Bytes of cache to keep"
    ),
    filter_: list[str] | None = typer.Option(
        None, "--filter", "-f", help="Filter as key=value (repeatable)"
    ),
):
    """Delete build cache."""
    filters = parse_filters(filter_)
    result = run_with_client(
        ctx,
        lambda client: client.images.build_prune(
            keep_storage=keep_storage, all=all_ or None, filters=filters
        ),
    )
    for cache_id in result.CacheDeleted or []:
        typer.echo(f"Deleted: {cache_id}")
    typer.echo(f"Total reclaimed space: {format_size(result.SpaceReclaimed or 0)}")
