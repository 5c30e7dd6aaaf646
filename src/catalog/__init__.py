"""Component catalog: discovery, reconciliation and lazy content resolution."""

from .catalog import CatalogConfig, CatalogState, ComponentCatalog
from .errors import (
    AuthenticationError,
    CatalogError,
    ComponentNotFoundError,
    RateLimitError,
    RemoteError,
    RemoteNotFoundError,
)
from .github import GitHubClient
from .reconcile import CatalogIndex, locators_match
from .scanner import ComponentDiscovery
from .schema import VARIANTS, Capabilities, ComponentMetadata, ComponentRecord

__all__ = [
    "AuthenticationError",
    "Capabilities",
    "CatalogConfig",
    "CatalogError",
    "CatalogIndex",
    "CatalogState",
    "ComponentCatalog",
    "ComponentDiscovery",
    "ComponentMetadata",
    "ComponentNotFoundError",
    "ComponentRecord",
    "GitHubClient",
    "RateLimitError",
    "RemoteError",
    "RemoteNotFoundError",
    "VARIANTS",
    "locators_match",
]
