"""Service module - background service lifecycle."""

from .._output_schemas.service import ServiceStartOutput, ServiceStatusOutput, ServiceStopOutput

__all__ = [
    "ServiceStartOutput",
    "ServiceStatusOutput",
    "ServiceStopOutput",
]
