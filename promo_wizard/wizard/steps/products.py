"""Step 2: paginated product selection.

Shows one catalog page at a time. Checkbox and discount edits go straight
into the selection store, so a product picked on page 1 stays picked while
page 2 is displayed, and validation looks at the whole accumulated set
rather than the rendered page.
"""

import math

from promo_wizard.core.exceptions import AppException, NotFoundError
from promo_wizard.core.logging import get_logger
from promo_wizard.services.catalog.client import BaseCatalogClient
from promo_wizard.services.dto.catalog import CatalogItem, CatalogPage, CatalogPageRequest, CatalogRecord
from promo_wizard.services.dto.selection import ProductSelection, SessionSnapshot
from promo_wizard.services.selection_store import SelectionStore
from promo_wizard.wizard.steps.base import WizardStepComponent

logger = get_logger(__name__)

MIN_DISCOUNT = 0.0
MAX_DISCOUNT = 100.0

FETCH_FAILED = "Failed to load products"
NO_PRODUCT_SELECTED = "select at least one product."
DISCOUNT_REQUIRED = "every selected product needs a discount greater than 0."


def parse_discount(raw: str | float | int | None) -> float:
    """Parse user input into a discount within [0, 100].

    Non-numeric input is treated as 0.
    """
    if raw is None or isinstance(raw, bool):
        return MIN_DISCOUNT
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        return MIN_DISCOUNT
    if math.isnan(value):
        return MIN_DISCOUNT
    return max(MIN_DISCOUNT, min(MAX_DISCOUNT, value))


class ProductSelectionStep(WizardStepComponent):
    """Paginated selection manager for catalog products."""

    def __init__(
        self,
        store: SelectionStore,
        catalog: BaseCatalogClient,
        category_filter: str | None = None,
    ) -> None:
        super().__init__(store)
        self.catalog = catalog
        self.category_filter = category_filter

        self.current_page = 1
        self.page_size = 0
        self.total_item_count = 0
        self.items: list[CatalogItem] = []
        self.is_loading = False

        # Latest issued fetch; older responses are dropped
        self._request_seq = 0
        self._unsubscribe = store.subscribe(self._on_store_changed)

    # --- Fetching ---

    async def fetch_page(self) -> bool:
        """Fetch `current_page` and reconcile its rows with the store.

        Returns:
            True if the page was applied, False on failure or stale response
        """
        self._request_seq += 1
        seq = self._request_seq
        page_number = self.current_page

        self.is_loading = True
        self.error = None
        logger.debug("Fetching catalog page %d (request %d)", page_number, seq)

        try:
            response = await self.catalog.fetch_products(
                CatalogPageRequest(category_filter=self.category_filter, page_number=page_number)
            )
        except AppException as e:
            if seq != self._request_seq:
                logger.debug("Dropping stale catalog failure for request %d", seq)
                return False
            self.error = e.message or FETCH_FAILED
            logger.warning("Catalog page %d failed: %s", page_number, e.message)
            return False
        except Exception as e:
            if seq != self._request_seq:
                logger.debug("Dropping stale catalog failure for request %d", seq)
                return False
            self.error = FETCH_FAILED
            logger.exception("Unexpected error fetching catalog page %d: %s", page_number, e)
            return False
        finally:
            if seq == self._request_seq:
                self.is_loading = False

        if seq != self._request_seq:
            logger.debug("Dropping stale catalog page %d for request %d", page_number, seq)
            return False

        self.page_size = response.page_size
        self.total_item_count = response.total_item_count
        self.items = [self._item_from_record(record) for record in response.records]
        logger.info(
            "Loaded catalog page %d: %d items of %d",
            page_number,
            len(self.items),
            self.total_item_count,
        )
        return True

    async def previous_page(self) -> bool:
        if not self.has_previous_page:
            return False
        self.current_page -= 1
        await self.fetch_page()
        return True

    async def next_page(self) -> bool:
        if not self.has_next_page:
            return False
        self.current_page += 1
        await self.fetch_page()
        return True

    # --- Edits ---

    def toggle_selection(self, product_id: str, checked: bool) -> None:
        """Check or uncheck a row of the current page.

        Raises:
            NotFoundError: Product is not on the current page
        """
        item = self._require_item(product_id)

        if checked:
            self.store.set_product_selection(
                ProductSelection(
                    product_id=item.id,
                    product_name=item.name,
                    category=item.category,
                    discount_percent=item.discount_percent or 0,
                )
            )
        else:
            # Row keeps its discount for a later re-check
            self.store.remove_product_selection(product_id)

        self._update_item(product_id, is_selected=checked)

    def edit_discount(self, product_id: str, raw_value: str | float | int | None) -> float:
        """Apply a discount edit.

        Returns:
            The clamped value that was applied

        Raises:
            NotFoundError: Product is neither on the page nor selected
        """
        value = parse_discount(raw_value)
        on_page = self._find_item(product_id) is not None
        selected = self.store.is_product_selected(product_id)
        if not on_page and not selected:
            raise NotFoundError(message=f"Product {product_id} is not on the current page")

        if on_page:
            self._update_item(product_id, discount_percent=value)
        if selected:
            self.store.set_product_selection({"product_id": product_id, "discount_percent": value})
        return value

    # --- Validation ---

    def all_valid(self) -> bool:
        products = self.store.get_state().selected_products

        if not products:
            self.error = NO_PRODUCT_SELECTED
            return False

        if any(not p.has_discount for p in products):
            self.error = DISCOUNT_REQUIRED
            return False

        # Edits are synced on every change, the store already holds the committed set
        self.error = None
        return True

    def dispose(self) -> None:
        self._unsubscribe()

    # --- View ---

    @property
    def last_error(self) -> str | None:
        return self.error

    @property
    def page(self) -> CatalogPage:
        return CatalogPage(
            page_number=self.current_page,
            page_size=self.page_size,
            total_item_count=self.total_item_count,
            items=list(self.items),
        )

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_item_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def page_info(self) -> str:
        return self.page.page_info

    @property
    def selected_count(self) -> int:
        return self.store.selected_product_count()

    @property
    def has_selected_products(self) -> bool:
        return self.selected_count > 0

    @property
    def selected_products(self) -> list[ProductSelection]:
        return list(self.store.get_state().selected_products)

    @property
    def no_products(self) -> bool:
        return not self.is_loading and not self.items

    # --- Internals ---

    def _item_from_record(self, record: CatalogRecord) -> CatalogItem:
        is_selected = self.store.is_product_selected(record.id)
        return CatalogItem(
            id=record.id,
            name=record.name,
            category=record.category,
            is_selected=is_selected,
            discount_percent=self.store.discount_for(record.id),
        )

    def _on_store_changed(self, snapshot: SessionSnapshot) -> None:
        selected = {p.product_id: p for p in snapshot.selected_products}
        self.items = [
            item.model_copy(
                update={
                    "is_selected": item.id in selected,
                    "discount_percent": (
                        selected[item.id].discount_percent if item.id in selected else item.discount_percent
                    ),
                }
            )
            for item in self.items
        ]

    def _find_item(self, product_id: str) -> CatalogItem | None:
        return next((item for item in self.items if item.id == product_id), None)

    def _require_item(self, product_id: str) -> CatalogItem:
        item = self._find_item(product_id)
        if item is None:
            raise NotFoundError(message=f"Product {product_id} is not on the current page")
        return item

    def _update_item(self, product_id: str, **changes: object) -> None:
        self.items = [
            item.model_copy(update=changes) if item.id == product_id else item
            for item in self.items
        ]
