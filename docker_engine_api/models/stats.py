"""
Resource usage snapshot from ``GET /containers/{id}/stats``.

The daemon reports these objects in snake_case, unlike the rest of the API.
"""

from typing import Any

from docker_engine_api.models.base import DockerModel


class PidsStats(DockerModel):
    current: int | None = None
    limit: int | None = None


class CPUStats(DockerModel):
    cpu_usage: dict[str, Any] | None = None
    system_cpu_usage: int | None = None
    online_cpus: int | None = None
    throttling_data: dict[str, Any] | None = None


class MemoryStats(DockerModel):
    stats: dict[str, Any] | None = None
    max_usage: int | None = None
    usage: int | None = None
    failcnt: int | None = None
    limit: int | None = None


class ContainerStats(DockerModel):
    """Point-in-time resource snapshot of one container."""

    read: str | None = None
    preread: str | None = None
    name: str | None = None
    id: str | None = None
    num_procs: int | None = None
    pids_stats: PidsStats | None = None
    networks: dict[str, Any] | None = None
    memory_stats: MemoryStats | None = None
    blkio_stats: dict[str, Any] | None = None
    storage_stats: dict[str, Any] | None = None
    cpu_stats: CPUStats | None = None
    precpu_stats: CPUStats | None = None

    def cpu_percent(self) -> float | None:
        """
        CPU usage in percent, computed the way ``docker stats`` does.

        Returns None when the snapshot lacks the counters (for example a
        stopped container, or a one-shot read without a previous sample).
        """
        if not self.cpu_stats or not self.precpu_stats:
            return None
        usage = (self.cpu_stats.cpu_usage or {}).get("total_usage")
        pre_usage = (self.precpu_stats.cpu_usage or {}).get("total_usage")
        system = self.cpu_stats.system_cpu_usage
        pre_system = self.precpu_stats.system_cpu_usage
        if None in (usage, pre_usage, system, pre_system):
            return None

        cpu_delta = usage - pre_usage
        system_delta = system - pre_system
        if system_delta <= 0 or cpu_delta < 0:
            return None
        online = self.cpu_stats.online_cpus or len(
            (self.cpu_stats.cpu_usage or {}).get("percpu_usage") or [1]
        )
        return cpu_delta / system_delta * online * 100.0
