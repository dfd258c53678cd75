"""Lifecycle states tracked by a Supervisor."""

from enum import Enum


class SupervisorState(str, Enum):
    IDLE = "idle"
    STARTING = "starting"
    READY = "ready"
    FAILED = "failed"
    STOPPED = "stopped"
