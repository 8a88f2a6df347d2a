"""Promotion submit service module."""

from promo_wizard.core.config import settings

from .client import BasePromotionSubmitter, PromotionSubmitter, extract_error_message

__all__ = [
    "BasePromotionSubmitter",
    "PromotionSubmitter",
    "extract_error_message",
    "get_promotion_submitter",
]

_submitter: BasePromotionSubmitter | None = None


def get_promotion_submitter() -> BasePromotionSubmitter:
    """Get submit client (singleton)."""
    global _submitter
    if _submitter is None:
        _submitter = PromotionSubmitter(
            base_url=settings.submit_base_url,
            api_key=settings.api_key,
            timeout=settings.http_timeout_seconds,
        )
    return _submitter
