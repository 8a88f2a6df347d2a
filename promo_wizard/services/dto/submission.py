"""Submission DTOs."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from promo_wizard.services.dto.selection import ProductSelection, SessionSnapshot, StoreSelection


class PromotionProductPayload(BaseModel):
    """Product line of the submit payload."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    product_name: str = Field(..., alias="productName")
    category: str | None = None
    discount_percent: float = Field(..., alias="discountPercent")

    @field_validator("category")
    @classmethod
    def blank_category_to_none(cls, value: str | None) -> str | None:
        return value or None

    @classmethod
    def from_selection(cls, selection: ProductSelection) -> "PromotionProductPayload":
        return cls(
            product_id=selection.product_id,
            product_name=selection.product_name,
            category=selection.category,
            discount_percent=selection.discount_percent,
        )


class PromotionStorePayload(BaseModel):
    """Store line of the submit payload."""

    model_config = ConfigDict(populate_by_name=True)

    store_id: str = Field(..., alias="storeId")
    store_name: str = Field(..., alias="storeName")
    location_group: str | None = Field(default=None, alias="locationGroup")

    @field_validator("location_group")
    @classmethod
    def blank_location_group_to_none(cls, value: str | None) -> str | None:
        return value or None

    @classmethod
    def from_selection(cls, selection: StoreSelection) -> "PromotionStorePayload":
        return cls(
            store_id=selection.store_id,
            store_name=selection.store_name,
            location_group=selection.location_group,
        )


class PromotionPayload(BaseModel):
    """Payload sent to the submit service."""

    model_config = ConfigDict(populate_by_name=True)

    promotion_name: str = Field(..., alias="promotionName")
    account_id: str | None = Field(default=None, alias="accountId")
    template_id: str | None = Field(default=None, alias="templateId")
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    products: list[PromotionProductPayload] = Field(default_factory=list)
    stores: list[PromotionStorePayload] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot, account_id: str | None) -> "PromotionPayload":
        """Assemble payload from the session snapshot.

        Args:
            snapshot: Current selection store state
            account_id: Record the promotion is created for

        Returns:
            PromotionPayload with template and dates left empty
        """
        return cls(
            promotion_name=snapshot.promotion_name,
            account_id=account_id,
            products=[PromotionProductPayload.from_selection(p) for p in snapshot.selected_products],
            stores=[PromotionStorePayload.from_selection(s) for s in snapshot.selected_stores],
        )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with service field names."""
        return self.model_dump(mode="json", by_alias=True)


class SubmitResult(BaseModel):
    """Submit service response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    promotion_id: str | None = Field(default=None, alias="promotionId")
