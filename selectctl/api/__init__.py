"""Platform data models and clients."""

from .client import CatalogClient, PlatformClient
from .models import PERSONAL, Organization, Region, VMSize

__all__ = [
    "PERSONAL",
    "Organization",
    "Region",
    "VMSize",
    "PlatformClient",
    "CatalogClient",
]
