"""
Container command group.

Thin wrappers over ContainerService: each command issues one API call and
prints the result.
"""

from typing import Annotated

import typer

from docker_engine_api.commands._runner import (
    echo_json,
    format_size,
    parse_filters,
    run_with_client,
)

container_app = typer.Typer(
    name="container",
    help="Manage containers",
    no_args_is_help=True,
)

ContainerId = Annotated[str, typer.Argument(help="Container id or name")]


@container_app.command("list")
def list_containers(
    ctx: typer.Context,
    all_: bool = typer.Option(False, "--all", "-a", help="Include stopped containers"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Most recent N containers"),
    size: bool = typer.Option(False, "--size", "-s", help="Report container sizes"),
    filter_: list[str] | None = typer.Option(
        None, "--filter", "-f", help="Filter as key=value (repeatable)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """List containers."""
    filters = parse_filters(filter_)
    containers = run_with_client(
        ctx,
        lambda client: client.containers.list(
            all=all_ or None, limit=limit, size=size or None, filters=filters
        ),
    )

    if json_output:
        echo_json(containers)
        return

    if not containers:
        typer.echo("No containers found.")
        return

    for c in containers:
        status_emoji = "🟢" if c.State == "running" else "🔴"
        names = ", ".join(name.lstrip("/") for name in c.Names or [])
        line = f"{status_emoji} {c.Id[:12]}  {names}  {c.Image or 'N/A'}  {c.Status or ''}"
        if size:
            line += f"  {format_size(c.SizeRw)}"
        typer.echo(line.rstrip())


@container_app.command("inspect")
def inspect_container(
    ctx: typer.Context,
    container_id: ContainerId,
    size: bool = typer.Option(False, "--size", "-s", help="Report container sizes"),
):
    """Show low-level information about a container."""
    detail = run_with_client(
        ctx, lambda client: client.containers.inspect(container_id, size=size or None)
    )
    echo_json(detail)


@container_app.command("top")
def top(
    ctx: typer.Context,
    container_id: ContainerId,
    ps_args: str | None = typer.Option(None, "--ps-args", help="Arguments for ps"),
):
    """List processes running inside a container."""
    table = run_with_client(
        ctx, lambda client: client.containers.top(container_id, ps_args=ps_args)
    )
    typer.echo("\t".join(table.Titles))
    for process in table.Processes:
        typer.echo("\t".join(process))


@container_app.command("logs")
def logs(
    ctx: typer.Context,
    container_id: ContainerId,
    follow: bool = typer.Option(False, "--follow", "-f", help="Follow log output"),
    tail: str | None = typer.Option(None, "--tail", "-n", help="Lines from the end, or all"),
    timestamps: bool = typer.Option(False, "--timestamps", "-t", help="Show timestamps"),
    since: int | None = typer.Option(None, "--since", help="UNIX timestamp lower bound"),
    until: int | None = typer.Option(None, "--until", help="UNIX timestamp upper bound"),
):
    """Print the raw stdout/stderr log stream of a container."""

    async def _stream(client) -> None:
        stream = await client.containers.logs(
            container_id,
            follow=follow or None,
            stdout=True,
            stderr=True,
            since=since,
            until=until,
            timestamps=timestamps or None,
            tail=tail,
        )
        async with stream:
            async for chunk in stream:
                typer.echo(chunk, nl=False)

    run_with_client(ctx, _stream)


@container_app.command("changes")
def changes(ctx: typer.Context, container_id: ContainerId):
    """List filesystem changes of a container."""
    entries = run_with_client(ctx, lambda client: client.containers.changes(container_id))
    markers = {0: "C", 1: "A", 2: "D"}
    for entry in entries:
        typer.echo(f"{markers[int(entry.Kind)]} {entry.Path}")


@container_app.command("stats")
def stats(
    ctx: typer.Context,
    container_id: ContainerId,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Show a single resource usage snapshot."""
    snapshot = run_with_client(ctx, lambda client: client.containers.stats(container_id))

    if json_output:
        echo_json(snapshot)
        return

    cpu = snapshot.cpu_percent()
    memory = snapshot.memory_stats
    pids = snapshot.pids_stats
    typer.echo(f"CPU:    {'N/A' if cpu is None else f'{cpu:.2f}%'}")
    typer.echo(
        f"Memory: {format_size(memory.usage if memory else None)}"
        f" / {format_size(memory.limit if memory else None)}"
    )
    typer.echo(f"PIDs:   {pids.current if pids and pids.current is not None else 'N/A'}")


@container_app.command("start")
def start(ctx: typer.Context, container_id: ContainerId):
    """Start a container."""
    run_with_client(ctx, lambda client: client.containers.start(container_id))
    typer.echo(f"✅ Started {container_id}")


@container_app.command("stop")
def stop(
    ctx: typer.Context,
    container_id: ContainerId,
    timeout: int | None = typer.Option(None, "--time", "-t", help="Seconds before kill"),
):
    """Stop a container."""
    run_with_client(ctx, lambda client: client.containers.stop(container_id, timeout=timeout))
    typer.echo(f"✅ Stopped {container_id}")


@container_app.command("restart")
def restart(
    ctx: typer.Context,
    container_id: ContainerId,
    timeout: int | None = typer.Option(None, "--time", "-t", help="Seconds before kill"),
):
    """Restart a container."""
    run_with_client(
        ctx, lambda client: client.containers.restart(container_id, timeout=timeout)
    )
    typer.echo(f"✅ Restarted {container_id}")


@container_app.command("kill")
def kill(
    ctx: typer.Context,
    container_id: ContainerId,
    signal: str | None = typer.Option(None, "--signal", "-s", help="Signal to send"),
):
    """Send a signal to a container."""
    run_with_client(ctx, lambda client: client.containers.kill(container_id, signal=signal))
    typer.echo(f"✅ Killed {container_id}")


@container_app.command("pause")
def pause(ctx: typer.Context, container_id: ContainerId):
    """Pause all processes in a container."""
    run_with_client(ctx, lambda client: client.containers.pause(container_id))
    typer.echo(f"✅ Paused {container_id}")


@container_app.command("rename")
def rename(
    ctx: typer.Context,
    container_id: ContainerId,
    name: Annotated[str, typer.Argument(help="New container name")],
):
    """Rename a container."""
    run_with_client(ctx, lambda client: client.containers.rename(container_id, name))
    typer.echo(f"✅ Renamed {container_id} to {name}")


@container_app.command("prune")
def prune(
    ctx: typer.Context,
    filter_: list[str] | None = typer.Option(
        None, "--filter", "-f", help="Filter as key=value (repeatable)"
    ),
):
    """Delete stopped containers."""
    filters = parse_filters(filter_)
    result = run_with_client(ctx, lambda client: client.containers.prune(filters=filters))
    for container_id in result.ContainersDeleted or []:
        typer.echo(f"Deleted: {container_id}")
    typer.echo(f"Total reclaimed space: {format_size(result.SpaceReclaimed or 0)}")
