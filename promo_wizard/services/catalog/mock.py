"""In-memory catalog implementation."""

from collections.abc import Iterable

from promo_wizard.core.exceptions import CatalogFetchError
from promo_wizard.services.catalog.client import BaseCatalogClient
from promo_wizard.services.dto.catalog import CatalogPageRequest, CatalogPageResponse, CatalogRecord

DEFAULT_PAGE_SIZE = 5

DEMO_RECORDS = [
    CatalogRecord(id="P1", name="Widget", category="Tools"),
    CatalogRecord(id="P2", name="Gadget", category="Tools"),
    CatalogRecord(id="P3", name="Sparkling Water", category="Beverages"),
    CatalogRecord(id="P4", name="Orange Juice", category="Beverages"),
    CatalogRecord(id="P5", name="Granola Bar", category="Snacks"),
    CatalogRecord(id="P6", name="Potato Chips", category="Snacks"),
    CatalogRecord(id="P7", name="Paper Towels", category=None),
]


class MockCatalogClient(BaseCatalogClient):
    """Mock catalog for tests and local runs.

    Serves a fixed record list with the same paging contract as the
    catalog service. Requests are recorded in `requests`.
    """

    def __init__(
        self,
        records: Iterable[CatalogRecord] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.records = list(DEMO_RECORDS if records is None else records)
        self.page_size = page_size
        self.requests: list[CatalogPageRequest] = []
        self.fail_next: str | None = None

    async def fetch_products(self, request: CatalogPageRequest) -> CatalogPageResponse:
        self.requests.append(request)

        if self.fail_next is not None:
            message, self.fail_next = self.fail_next, None
            raise CatalogFetchError(message=message, page_number=request.page_number)

        records = self.records
        if request.category_filter:
            records = [r for r in records if r.category == request.category_filter]

        offset = (request.page_number - 1) * self.page_size
        return CatalogPageResponse(
            page_size=self.page_size,
            total_item_count=len(records),
            records=records[offset:offset + self.page_size],
        )
