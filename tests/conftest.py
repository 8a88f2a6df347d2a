"""Pytest fixtures for wizard scenarios."""

import asyncio

import pytest
import pytest_asyncio

from promo_wizard.core.exceptions import SubmissionError
from promo_wizard.services.catalog import BaseCatalogClient, MockCatalogClient
from promo_wizard.services.dto.catalog import CatalogPageRequest, CatalogPageResponse, CatalogRecord
from promo_wizard.services.dto.selection import StoreSelection
from promo_wizard.services.dto.submission import PromotionPayload, SubmitResult
from promo_wizard.services.selection_store import SelectionStore
from promo_wizard.services.submission import BasePromotionSubmitter
from promo_wizard.wizard import LoggingWizardHost, WizardController

PAGE_SIZE = 5

CATALOG_RECORDS = [
    CatalogRecord(id="P1", name="Widget", category="Tools"),
    *[
        CatalogRecord(id=f"P{i}", name=f"Product {i}", category="Snacks" if i % 2 else None)
        for i in range(2, 13)
    ],
]

STORES = [
    StoreSelection(store_id="S1", store_name="Main St"),
    StoreSelection(store_id="S2", store_name="Harbour Rd", location_group="North"),
]


class RecordingSubmitter(BasePromotionSubmitter):
    """Submitter that records payloads and returns a canned result."""

    def __init__(self) -> None:
        self.payloads: list[PromotionPayload] = []
        self.result = SubmitResult(message="Promotion saved", promotion_id="a0P000000000001")
        self.error: Exception | None = None
        self.on_call = None

    async def save_promotion(self, payload: PromotionPayload) -> SubmitResult:
        self.payloads.append(payload)
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.result

    def fail_with(self, message: str | None) -> None:
        self.error = SubmissionError(message=message)


class GatedCatalogClient(BaseCatalogClient):
    """Catalog whose responses are released manually, per page number."""

    def __init__(self, delegate: BaseCatalogClient) -> None:
        self.delegate = delegate
        self.gates: dict[int, asyncio.Event] = {}

    def gate(self, page_number: int) -> asyncio.Event:
        return self.gates.setdefault(page_number, asyncio.Event())

    async def fetch_products(self, request: CatalogPageRequest) -> CatalogPageResponse:
        await self.gate(request.page_number).wait()
        return await self.delegate.fetch_products(request)


class BrokenCatalogClient(BaseCatalogClient):
    """Catalog that fails with a non-application error after a given page."""

    def __init__(self, delegate: BaseCatalogClient, working_pages: int = 0) -> None:
        self.delegate = delegate
        self.working_pages = working_pages

    async def fetch_products(self, request: CatalogPageRequest) -> CatalogPageResponse:
        if request.page_number > self.working_pages:
            raise RuntimeError("connection pool exhausted")
        return await self.delegate.fetch_products(request)


@pytest.fixture
def store() -> SelectionStore:
    return SelectionStore()


@pytest.fixture
def catalog() -> MockCatalogClient:
    return MockCatalogClient(records=CATALOG_RECORDS, page_size=PAGE_SIZE)


@pytest.fixture
def submitter() -> RecordingSubmitter:
    return RecordingSubmitter()


@pytest.fixture
def host() -> LoggingWizardHost:
    return LoggingWizardHost()


@pytest_asyncio.fixture
async def controller(catalog, submitter, host) -> WizardController:
    """Opened wizard on step 1."""
    wizard = WizardController(
        catalog=catalog,
        submitter=submitter,
        host=host,
        record_id="001000000000042",
        available_stores=STORES,
    )
    await wizard.open()
    return wizard
