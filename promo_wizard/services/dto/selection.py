"""Selection DTOs held by the selection store."""

from pydantic import BaseModel, ConfigDict, Field


class ProductSelection(BaseModel):
    """A chosen catalog product with its discount."""

    model_config = ConfigDict(frozen=True)

    product_id: str = Field(..., min_length=1, description="Catalog product ID")
    product_name: str = Field(..., description="Product display name")
    category: str | None = Field(default=None, description="Product category")
    discount_percent: float = Field(
        default=0,
        ge=0,
        le=100,
        description="Discount in percent, must be > 0 before the step commits",
    )

    @property
    def has_discount(self) -> bool:
        """Check if a positive discount is set."""
        return self.discount_percent > 0


class StoreSelection(BaseModel):
    """A target store."""

    model_config = ConfigDict(frozen=True)

    store_id: str = Field(..., min_length=1, description="Store ID")
    store_name: str = Field(..., description="Store display name")
    location_group: str | None = Field(default=None, description="Location group")


class SessionSnapshot(BaseModel):
    """Immutable copy of the wizard session state."""

    model_config = ConfigDict(frozen=True)

    promotion_name: str = ""
    selected_products: tuple[ProductSelection, ...] = ()
    selected_stores: tuple[StoreSelection, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if the snapshot equals a freshly reset session."""
        return not (self.promotion_name or self.selected_products or self.selected_stores)
