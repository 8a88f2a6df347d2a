"""Wizard services: selection store and external service clients."""

from promo_wizard.services.catalog import BaseCatalogClient, CatalogClient, MockCatalogClient, get_catalog_client
from promo_wizard.services.selection_store import SelectionStore
from promo_wizard.services.submission import BasePromotionSubmitter, PromotionSubmitter, get_promotion_submitter

__all__ = [
    "BaseCatalogClient",
    "BasePromotionSubmitter",
    "CatalogClient",
    "MockCatalogClient",
    "PromotionSubmitter",
    "SelectionStore",
    "get_catalog_client",
    "get_promotion_submitter",
]
