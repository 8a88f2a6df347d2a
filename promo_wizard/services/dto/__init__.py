"""Service DTOs."""

from promo_wizard.services.dto.catalog import (
    CatalogItem,
    CatalogPage,
    CatalogPageRequest,
    CatalogPageResponse,
    CatalogRecord,
)
from promo_wizard.services.dto.notification import Notification, Severity
from promo_wizard.services.dto.selection import ProductSelection, SessionSnapshot, StoreSelection
from promo_wizard.services.dto.submission import (
    PromotionPayload,
    PromotionProductPayload,
    PromotionStorePayload,
    SubmitResult,
)

__all__ = [
    "CatalogItem",
    "CatalogPage",
    "CatalogPageRequest",
    "CatalogPageResponse",
    "CatalogRecord",
    "Notification",
    "ProductSelection",
    "PromotionPayload",
    "PromotionProductPayload",
    "PromotionStorePayload",
    "SessionSnapshot",
    "Severity",
    "StoreSelection",
    "SubmitResult",
]
