"""Application layer - use cases and orchestration."""

from .catalog import CatalogIntegrityError, CustomProduct, ProductCatalog
from .commands import GenerateSummaryCommand
from .dtos import LabourSettings, ProjectSummaryOutput, RoomAreaOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "CatalogIntegrityError",
    "CustomProduct",
    "GenerateSummaryCommand",
    "LabourSettings",
    "ProductCatalog",
    "ProjectSummaryOutput",
    "RoomAreaOutput",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
