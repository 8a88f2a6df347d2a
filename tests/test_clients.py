"""Tests for the HTTP catalog and submit clients against a local server."""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from promo_wizard.core.exceptions import CatalogFetchError, SubmissionError
from promo_wizard.services.catalog import CatalogClient
from promo_wizard.services.dto.catalog import CatalogPageRequest
from promo_wizard.services.dto.selection import ProductSelection, SessionSnapshot, StoreSelection
from promo_wizard.services.dto.submission import PromotionPayload
from promo_wizard.services.selection_store import SelectionStore
from promo_wizard.services.submission import PromotionSubmitter, extract_error_message
from promo_wizard.wizard.steps import ProductSelectionStep

pytestmark = [pytest.mark.asyncio]

API_KEY = "test-key"


class FakeServices:
    """Scripted catalog and submit endpoints."""

    def __init__(self) -> None:
        self.requests: list[web.Request] = []
        self.bodies: list[dict] = []
        self.catalog_response: web.Response = web.json_response(
            {
                "pageSize": 2,
                "totalItemCount": 3,
                "records": [
                    {"id": "P1", "name": "Widget", "category": "Tools"},
                    {"id": "P2", "name": "Gadget"},
                ],
            }
        )
        self.submit_response: web.Response = web.json_response(
            {"message": "Created", "promotionId": "a0P1"},
            status=201,
        )

    async def catalog(self, request: web.Request) -> web.Response:
        self.requests.append(request)
        return self.catalog_response

    async def submit(self, request: web.Request) -> web.Response:
        self.requests.append(request)
        self.bodies.append(await request.json())
        return self.submit_response


@pytest.fixture
def services() -> FakeServices:
    return FakeServices()


@pytest_asyncio.fixture
async def base_url(services):
    app = web.Application()
    app.router.add_get("/api/catalog/products", services.catalog)
    app.router.add_post("/api/promotions", services.submit)
    async with TestServer(app) as server:
        yield str(server.make_url("/"))


def make_payload() -> PromotionPayload:
    snapshot = SessionSnapshot(
        promotion_name="Spring Sale",
        selected_products=(
            ProductSelection(product_id="P1", product_name="Widget", category="", discount_percent=25),
        ),
        selected_stores=(StoreSelection(store_id="S1", store_name="Main St"),),
    )
    return PromotionPayload.from_snapshot(snapshot, account_id="001")


class TestCatalogClient:
    """GET /api/catalog/products."""

    async def test_fetch_parses_page(self, base_url, services):
        client = CatalogClient(base_url, api_key=API_KEY)

        page = await client.fetch_products(CatalogPageRequest(page_number=2, category_filter="Tools"))

        assert page.page_size == 2
        assert page.total_item_count == 3
        assert [r.id for r in page.records] == ["P1", "P2"]
        assert page.records[1].category is None
        request = services.requests[0]
        assert request.query["pageNumber"] == "2"
        assert request.query["type"] == "Tools"
        assert request.headers["X-API-Key"] == API_KEY

    async def test_no_filter_and_no_key_are_omitted(self, base_url, services):
        client = CatalogClient(base_url)

        await client.fetch_products(CatalogPageRequest(page_number=1))

        request = services.requests[0]
        assert "type" not in request.query
        assert "X-API-Key" not in request.headers

    async def test_http_error_raises(self, base_url, services):
        services.catalog_response = web.Response(status=503, text="maintenance")
        client = CatalogClient(base_url)

        with pytest.raises(CatalogFetchError) as exc_info:
            await client.fetch_products(CatalogPageRequest(page_number=1))

        assert exc_info.value.status == 503
        assert exc_info.value.message == "HTTP 503"
        assert exc_info.value.page_number == 1

    async def test_malformed_body_raises(self, base_url, services):
        services.catalog_response = web.json_response({"records": "nope"})
        client = CatalogClient(base_url)

        with pytest.raises(CatalogFetchError) as exc_info:
            await client.fetch_products(CatalogPageRequest(page_number=1))

        assert exc_info.value.message == "Invalid catalog response"

    async def test_invalid_json_body_raises(self, base_url, services):
        services.catalog_response = web.Response(text="{not json", content_type="application/json")
        client = CatalogClient(base_url)

        with pytest.raises(CatalogFetchError) as exc_info:
            await client.fetch_products(CatalogPageRequest(page_number=1))

        assert exc_info.value.message == "Invalid catalog response"

    async def test_invalid_json_body_is_held_by_product_step(self, base_url, services):
        """
        Scenario: Catalog answers 200 with a body that is not JSON
        Expected: Product step reports the failure instead of raising
        """
        # Arrange
        services.catalog_response = web.Response(text="{not json", content_type="application/json")
        step = ProductSelectionStep(SelectionStore(), CatalogClient(base_url))

        # Act
        ok = await step.fetch_page()

        # Assert
        assert ok is False
        assert step.last_error == "Invalid catalog response"
        assert step.is_loading is False
        assert step.items == []

    async def test_connection_error_raises(self, unused_tcp_port):
        client = CatalogClient(f"http://127.0.0.1:{unused_tcp_port}")

        with pytest.raises(CatalogFetchError):
            await client.fetch_products(CatalogPageRequest(page_number=1))


class TestPromotionSubmitter:
    """POST /api/promotions."""

    async def test_submit_sends_wire_payload(self, base_url, services):
        submitter = PromotionSubmitter(base_url, api_key=API_KEY)

        result = await submitter.save_promotion(make_payload())

        assert result.message == "Created"
        assert result.promotion_id == "a0P1"
        assert services.bodies[0]["promotionName"] == "Spring Sale"
        assert services.bodies[0]["products"][0]["category"] is None
        assert services.bodies[0]["stores"][0] == {"storeId": "S1", "storeName": "Main St", "locationGroup": None}

    async def test_empty_success_body(self, base_url, services):
        services.submit_response = web.json_response({})
        submitter = PromotionSubmitter(base_url)

        result = await submitter.save_promotion(make_payload())

        assert result.message is None
        assert result.promotion_id is None

    @pytest.mark.parametrize(
        ("response", "expected"),
        [
            (lambda: web.json_response({"message": "Name already used"}, status=400), "Name already used"),
            (lambda: web.json_response({"detail": {"message": "Bad store"}}, status=422), "Bad store"),
            (lambda: web.json_response({"detail": "Forbidden"}, status=403), "Forbidden"),
            (lambda: web.Response(status=502, text="<html>bad gateway</html>"), "HTTP 502"),
        ],
    )
    async def test_error_uses_most_specific_message(self, base_url, services, response, expected):
        services.submit_response = response()
        submitter = PromotionSubmitter(base_url)

        with pytest.raises(SubmissionError) as exc_info:
            await submitter.save_promotion(make_payload())

        assert exc_info.value.message == expected


class TestExtractErrorMessage:
    """Error body parsing."""

    async def test_shapes(self):
        assert extract_error_message({"message": "a"}) == "a"
        assert extract_error_message({"message": "", "detail": "b"}) == "b"
        assert extract_error_message({"detail": {"error_code": "X"}}) is None
        assert extract_error_message(["not", "a", "dict"]) is None
