"""Derived service state."""

from enum import Enum


class ServiceState(str, Enum):
    """Computed from the registry on every query, never stored."""

    RUNNING = "running"
    STOPPED = "stopped"
