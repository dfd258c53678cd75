"""Compute the current ServiceState."""

from .is_service_running import is_service_running
from .ServiceState import ServiceState


def get_service_state() -> ServiceState:
    return ServiceState.RUNNING if is_service_running() else ServiceState.STOPPED
