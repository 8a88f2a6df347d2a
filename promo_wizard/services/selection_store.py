"""Session-scoped selection store with synchronous subscriber fan-out."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from promo_wizard.core.exceptions import ReentrantMutationError, ValidationError
from promo_wizard.core.logging import get_logger
from promo_wizard.services.dto.selection import ProductSelection, SessionSnapshot, StoreSelection

logger = get_logger(__name__)

Subscriber = Callable[[SessionSnapshot], None]
Unsubscribe = Callable[[], None]


class SelectionStore:
    """Single source of truth for one wizard session.

    Holds the promotion name, the product selection set (keyed by product ID)
    and the ordered store selection. Every mutation notifies all subscribers
    with a fresh snapshot before returning. Subscribers must not mutate the
    store from inside their callback.
    """

    def __init__(self) -> None:
        self._promotion_name = ""
        self._products: dict[str, ProductSelection] = {}
        self._stores: list[StoreSelection] = []
        self._subscribers: list[Subscriber] = []
        self._notifying = False

    # --- Lifecycle ---

    def reset(self) -> None:
        """Replace state with defaults and notify."""
        self._ensure_not_notifying()
        self._promotion_name = ""
        self._products = {}
        self._stores = []
        logger.debug("Selection store reset")
        self._notify()

    def get_state(self) -> SessionSnapshot:
        """Return an immutable snapshot of the session."""
        return SessionSnapshot(
            promotion_name=self._promotion_name,
            selected_products=tuple(self._products.values()),
            selected_stores=tuple(self._stores),
        )

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Register callback for future mutations.

        Args:
            callback: Called with the latest snapshot after each mutation

        Returns:
            Handle that removes the callback; calling it twice is a no-op
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    # --- Mutations ---

    def update_promotion_name(self, name: str) -> None:
        self._ensure_not_notifying()
        self._promotion_name = name
        self._notify()

    def set_product_selection(self, product: ProductSelection | Mapping[str, Any]) -> ProductSelection:
        """Upsert a product by product_id.

        An existing entry is merged with the given fields, later fields win.
        A mapping may carry only some fields (e.g. product_id and
        discount_percent) when the product is already selected.

        Args:
            product: Full selection or partial field mapping

        Returns:
            The stored selection after the merge

        Raises:
            ValidationError: Mapping has no product_id
            pydantic.ValidationError: Merged fields are invalid
        """
        self._ensure_not_notifying()
        if isinstance(product, ProductSelection):
            fields = product.model_dump(exclude_unset=True)
            fields["product_id"] = product.product_id
        else:
            fields = dict(product)

        product_id = fields.get("product_id")
        if not product_id:
            raise ValidationError(message="Product selection requires product_id")

        existing = self._products.get(product_id)
        if existing is not None:
            merged = ProductSelection.model_validate({**existing.model_dump(), **fields})
        else:
            merged = ProductSelection.model_validate(fields)

        self._products[product_id] = merged
        self._notify()
        return merged

    def remove_product_selection(self, product_id: str) -> None:
        """Delete a product; unknown IDs are ignored."""
        self._ensure_not_notifying()
        self._products.pop(product_id, None)
        self._notify()

    def replace_product_selections(self, products: Iterable[ProductSelection]) -> None:
        """Replace the whole product set (used on step commit)."""
        self._ensure_not_notifying()
        self._products = {p.product_id: p for p in products}
        self._notify()

    def replace_store_selections(self, stores: Iterable[StoreSelection]) -> None:
        """Replace the whole store selection (used on step commit)."""
        self._ensure_not_notifying()
        self._stores = list(stores)
        self._notify()

    # --- Derived queries ---

    def is_product_selected(self, product_id: str) -> bool:
        return product_id in self._products

    def discount_for(self, product_id: str) -> float:
        """Discount of a selected product, 0 if not selected."""
        product = self._products.get(product_id)
        return product.discount_percent if product else 0

    def get_product(self, product_id: str) -> ProductSelection | None:
        return self._products.get(product_id)

    def selected_product_count(self) -> int:
        return len(self._products)

    # --- Internals ---

    def _ensure_not_notifying(self) -> None:
        if self._notifying:
            raise ReentrantMutationError()

    def _notify(self) -> None:
        snapshot = self.get_state()
        self._notifying = True
        try:
            # Copy: a callback may unsubscribe itself
            for callback in list(self._subscribers):
                callback(snapshot)
        finally:
            self._notifying = False
