"""Catalog service module."""

from promo_wizard.core.config import settings

from .client import BaseCatalogClient, CatalogClient
from .mock import MockCatalogClient

__all__ = [
    "BaseCatalogClient",
    "CatalogClient",
    "MockCatalogClient",
    "get_catalog_client",
]

_catalog: BaseCatalogClient | None = None


def get_catalog_client() -> BaseCatalogClient:
    """Get configured catalog client (singleton).

    Returns client based on PROMO_WIZARD_CATALOG_PROVIDER setting.
    """
    global _catalog
    if _catalog is None:
        if settings.catalog_provider == "mock":
            _catalog = MockCatalogClient()
        else:
            _catalog = CatalogClient(
                base_url=settings.catalog_base_url,
                api_key=settings.api_key,
                timeout=settings.http_timeout_seconds,
            )
    return _catalog
