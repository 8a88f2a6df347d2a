"""Product catalog API client."""

from abc import ABC, abstractmethod

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from promo_wizard.core.exceptions import CatalogFetchError
from promo_wizard.core.logging import get_logger
from promo_wizard.services.dto.catalog import CatalogPageRequest, CatalogPageResponse

logger = get_logger(__name__)


class BaseCatalogClient(ABC):
    """Abstract client for the product catalog.

    Allows swapping the transport without touching the wizard.
    """

    @abstractmethod
    async def fetch_products(self, request: CatalogPageRequest) -> CatalogPageResponse:
        """Fetch one page of products.

        Args:
            request: Page number and optional category filter

        Returns:
            CatalogPageResponse with page size, total count and records

        Raises:
            CatalogFetchError: If the page could not be fetched
        """


class CatalogClient(BaseCatalogClient):
    """HTTP client for the catalog service."""

    def __init__(self, base_url: str, api_key: str = "", timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {"X-API-Key": self.api_key} if self.api_key else {}

    async def fetch_products(self, request: CatalogPageRequest) -> CatalogPageResponse:
        """GET /api/catalog/products for one page."""
        params = {"pageNumber": str(request.page_number)}
        if request.category_filter:
            params["type"] = request.category_filter

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    f"{self.base_url}/api/catalog/products",
                    params=params,
                    headers=self._headers(),
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(
                            "Catalog error: HTTP %s, body: %s",
                            response.status,
                            error_text[:200],
                        )
                        raise CatalogFetchError(
                            message=f"HTTP {response.status}",
                            page_number=request.page_number,
                            status=response.status,
                        )

                    data = await response.json()
                    return CatalogPageResponse.model_validate(data)
        except aiohttp.ClientError as e:
            logger.error("Catalog client error: %s", e)
            raise CatalogFetchError(
                message=f"{type(e).__name__}: {e}",
                page_number=request.page_number,
            ) from e
        except (PydanticValidationError, ValueError) as e:
            # ValueError covers a body that is not valid JSON
            logger.error("Invalid catalog response: %s", e)
            raise CatalogFetchError(
                message="Invalid catalog response",
                page_number=request.page_number,
            ) from e
        except TimeoutError as e:
            raise CatalogFetchError(message="timeout", page_number=request.page_number) from e
