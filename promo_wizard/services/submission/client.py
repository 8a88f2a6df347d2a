"""Promotion submit API client."""

from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from promo_wizard.core.exceptions import SubmissionError
from promo_wizard.core.logging import get_logger
from promo_wizard.services.dto.submission import PromotionPayload, SubmitResult

logger = get_logger(__name__)


class BasePromotionSubmitter(ABC):
    """Abstract submitter for assembled promotions."""

    @abstractmethod
    async def save_promotion(self, payload: PromotionPayload) -> SubmitResult:
        """Create the promotion record.

        Args:
            payload: Assembled promotion

        Returns:
            SubmitResult with optional message and created record ID

        Raises:
            SubmissionError: With the most specific message available
        """


def extract_error_message(data: Any) -> str | None:
    """Pick the most specific message from an error body.

    Understands {"message": ...}, {"detail": ...} and
    {"detail": {"message": ...}} shapes.
    """
    if not isinstance(data, dict):
        return None

    message = data.get("message")
    if isinstance(message, str) and message:
        return message

    detail = data.get("detail")
    if isinstance(detail, dict):
        detail_message = detail.get("message")
        if isinstance(detail_message, str) and detail_message:
            return detail_message
    elif isinstance(detail, str) and detail:
        return detail

    return None


class PromotionSubmitter(BasePromotionSubmitter):
    """HTTP client for the promotion submit service."""

    def __init__(self, base_url: str, api_key: str = "", timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    async def save_promotion(self, payload: PromotionPayload) -> SubmitResult:
        """POST /api/promotions with the wire payload."""
        headers = {"X-API-Key": self.api_key} if self.api_key else {}

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    f"{self.base_url}/api/promotions",
                    json=payload.to_wire(),
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status not in (200, 201):
                        # Try to get message from JSON body for a clearer error
                        try:
                            error_data = await response.json(content_type=None)
                            error_msg = extract_error_message(error_data) or f"HTTP {response.status}"
                        except (aiohttp.ContentTypeError, ValueError):
                            error_msg = f"HTTP {response.status}"
                        logger.error("Submit API error: %s", error_msg)
                        raise SubmissionError(message=error_msg, status=response.status)

                    data = await response.json(content_type=None)
                    return SubmitResult.model_validate(data or {})
        except aiohttp.ClientError as e:
            logger.error("Submit client error: %s", e)
            raise SubmissionError(message=f"{type(e).__name__}: {e}") from e
        except (PydanticValidationError, ValueError) as e:
            logger.error("Invalid submit response: %s", e)
            raise SubmissionError(message="Invalid response from promotion service") from e
        except TimeoutError as e:
            raise SubmissionError(message="timeout") from e
