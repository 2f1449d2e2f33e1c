"""Host and process introspection.

Every probe is read fresh on each call; nothing here is cached or mutated,
so the functions are safe to call from concurrent requests.
"""

import math
import os
import platform
import socket
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import psutil

from status_service.core.exceptions import IntrospectionError

BYTES_PER_MB = 1024 * 1024

_CPUINFO = Path("/proc/cpuinfo")


@dataclass(frozen=True)
class HostFacts:
    hostname: str
    platform: str
    architecture: str
    python_version: str
    cpu_cores: int
    cpu_model: str


@dataclass(frozen=True)
class MemoryFacts:
    total_mb: int
    free_mb: int
    used_percent: int


@dataclass(frozen=True)
class ProcessFacts:
    pid: int
    memory_usage_mb: int
    uptime_seconds: int
    uptime_human: str


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return math.floor(value + 0.5)


def to_mb(num_bytes: int) -> int:
    return round_half_up(num_bytes / BYTES_PER_MB)


def format_uptime(seconds: float) -> str:
    """Render elapsed seconds as e.g. ``"1d 2h 3m 4s"``.

    Larger units are only emitted when non-zero; seconds are always present.
    """
    total = max(int(seconds), 0)
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)


def cpu_model() -> str:
    """Best-effort CPU model name, ``"unknown"`` when the host hides it."""
    if _CPUINFO.is_file():
        for line in _CPUINFO.read_text(errors="replace").splitlines():
            if line.lower().startswith("model name"):
                return line.split(":", 1)[1].strip()
    return platform.processor() or "unknown"


def collect_host_facts() -> HostFacts:
    try:
        cores = psutil.cpu_count(logical=True) or os.cpu_count() or 0
        model = cpu_model()
    except (OSError, psutil.Error) as exc:
        raise IntrospectionError("cpu", str(exc)) from exc

    return HostFacts(
        hostname=socket.gethostname(),
        platform=sys.platform,
        architecture=platform.machine(),
        python_version=platform.python_version(),
        cpu_cores=cores,
        cpu_model=model,
    )


def collect_memory_facts() -> MemoryFacts:
    try:
        memory = psutil.virtual_memory()
    except (OSError, psutil.Error) as exc:
        raise IntrospectionError("memory", str(exc)) from exc

    return MemoryFacts(
        total_mb=to_mb(memory.total),
        free_mb=to_mb(memory.available),
        used_percent=round_half_up((1 - memory.available / memory.total) * 100),
    )


def collect_process_facts() -> ProcessFacts:
    try:
        process = psutil.Process()
        with process.oneshot():
            rss = process.memory_info().rss
            started = process.create_time()
    except (OSError, psutil.Error) as exc:
        raise IntrospectionError("process", str(exc)) from exc

    uptime = max(time.time() - started, 0.0)
    return ProcessFacts(
        pid=process.pid,
        memory_usage_mb=to_mb(rss),
        uptime_seconds=int(uptime),
        uptime_human=format_uptime(uptime),
    )
