"""Implementations of the core services.

The services module contains the business logic that fulfils the
use cases defined in `catalog_service_cli.internal.ports.services`.
"""

from .catalog_service import CatalogService
from .deletion import DeletionWorkflow
from .poller import InitializationPoller, PollState

__all__ = [
    "CatalogService",
    "DeletionWorkflow",
    "InitializationPoller",
    "PollState",
]
