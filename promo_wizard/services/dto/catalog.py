"""Catalog DTOs: wire request/response and the rendered page."""

import math

from pydantic import BaseModel, ConfigDict, Field, computed_field

CATEGORY_PLACEHOLDER = "N/A"


class CatalogPageRequest(BaseModel):
    """Request for one catalog page."""

    category_filter: str | None = Field(default=None, description="Product type filter, None means all")
    page_number: int = Field(..., ge=1, description="1-based page number")


class CatalogRecord(BaseModel):
    """Product record as returned by the catalog service."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    category: str | None = None


class CatalogPageResponse(BaseModel):
    """Catalog service response for one page."""

    model_config = ConfigDict(populate_by_name=True)

    page_size: int = Field(..., ge=0, alias="pageSize")
    total_item_count: int = Field(..., ge=0, alias="totalItemCount")
    records: list[CatalogRecord] = Field(default_factory=list)


class CatalogItem(BaseModel):
    """One rendered row of the current page.

    is_selected and discount_percent are a view of the selection store,
    never authoritative.
    """

    id: str
    name: str
    category: str | None = None
    is_selected: bool = False
    discount_percent: float = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_disabled(self) -> bool:
        """Discount input is editable only for selected rows."""
        return not self.is_selected

    @computed_field  # type: ignore[prop-decorator]
    @property
    def category_label(self) -> str:
        """Category for display."""
        return self.category or CATEGORY_PLACEHOLDER


class CatalogPage(BaseModel):
    """Page currently rendered by the product step."""

    page_number: int = 1
    page_size: int = 0
    total_item_count: int = 0
    items: list[CatalogItem] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """Number of pages for the last known total."""
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_item_count / self.page_size)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def page_info(self) -> str:
        """Range label like "6-10 of 12"."""
        start = (self.page_number - 1) * self.page_size + 1
        end = min(self.page_number * self.page_size, self.total_item_count)
        return f"{start}-{end} of {self.total_item_count}"
