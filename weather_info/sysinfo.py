"""Best-effort host and process information for the ``/api/info`` endpoint."""
from __future__ import annotations

import datetime as dt
import logging
import os
import platform
import socket
from typing import Mapping, Optional

import psutil

from .models import SystemInfo

UNKNOWN_HOST = "Unknown Host"
RESOURCE_NOTE = "Note: Resource details (RAM/CPU) can vary by environment and may require specific APIs."
CONTAINER_ENV_VARS = (
    "DOTNET_RUNNING_IN_CONTAINER",
    "KUBERNETES_SERVICE_HOST",
    # Set by most shells too, so this flag is rarely false in practice.
    "HOSTNAME",
)


def resolve_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as exc:
        logging.warning("Hostname lookup failed, using %r: %s", UNKNOWN_HOST, exc)
        return UNKNOWN_HOST


def describe_os() -> str:
    uname = platform.uname()
    return f"{uname.system} {uname.release} ({uname.machine})"


def process_cpu_load(sample_interval: float = 0.1) -> Optional[float]:
    """Return this process' CPU load as a fraction of total capacity, or ``None``.

    psutil reports a percentage that can exceed 100 on multi-core hosts, so the
    value is normalised by the logical core count and clamped to [0.0, 1.0].
    A non-positive ``sample_interval`` disables sampling: a fresh process handle
    has no earlier reading to compare against.
    """
    if sample_interval <= 0:
        logging.debug("Process CPU sampling disabled (interval %s)", sample_interval)
        return None
    try:
        percent = psutil.Process().cpu_percent(interval=sample_interval)
        cores = psutil.cpu_count(logical=True) or 1
    except (psutil.AccessDenied, NotImplementedError) as exc:
        logging.debug("Process CPU load not supported here: %s", exc)
        return None
    except (psutil.Error, OSError) as exc:
        logging.warning("Could not read process CPU load: %s", exc)
        return None
    except Exception as exc:  # pylint: disable=broad-except
        logging.warning("Unexpected error reading process CPU load: %s", exc)
        return None
    return min(1.0, max(0.0, percent / 100.0 / cores))


def is_containerized(environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return any(environ.get(name) for name in CONTAINER_ENV_VARS)


def compose_system_info(os_info: str, hostname: str, cpu_load: Optional[float]) -> str:
    if cpu_load is not None:
        return (
            f"OS: {os_info}; Hostname: {hostname}; "
            f"Process CPU Load: {cpu_load * 100:.2f}%; Note: Resource limits can vary."
        )
    return f"OS: {os_info}; Hostname: {hostname}; {RESOURCE_NOTE}"


def collect_system_info(sample_interval: float = 0.1) -> SystemInfo:
    """Gather hostname, OS and CPU details. Every step falls back instead of raising."""
    hostname = resolve_hostname()
    summary = compose_system_info(describe_os(), hostname, process_cpu_load(sample_interval))
    return SystemInfo(
        current_date_time=dt.date.today(),
        is_containerized=is_containerized(),
        hostname=hostname,
        system_info=summary,
    )
