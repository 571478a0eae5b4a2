"""
Category contracts.

Defines the wire shapes of the BigCommerce v3 categories endpoint and the
result returned by the aggregating call:
- Category / CustomURL: one catalogue node as decoded from ``data[]``
- Pagination / CategoryPage: the paginated envelope
- CategoryFetchResult: decorated categories plus the last error, if any

These contracts must be used by both:
- clients/real_http/bigcommerce_categories.py (live API)
- clients/mocks/local_categories.py (pages loaded from a local JSON file)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bigcommerce_catalog.errors import CategoryClientError

# Fields derived after the fetch. They are never read from the payload.
DERIVED_FIELDS = ("url", "full_name")


class CustomURL(BaseModel):
    url: str = ""
    is_customized: bool = False


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    parent_id: int = 0
    name: str = ""
    visible: bool = Field(default=False, alias="is_visible")
    custom_url: CustomURL = Field(default_factory=CustomURL)

    # Derived
    url: str = ""
    full_name: str = ""

    @model_validator(mode="before")
    @classmethod
    def _drop_derived_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if k not in DERIVED_FIELDS}
        return data

    @property
    def is_root(self) -> bool:
        return self.parent_id == 0

    def to_record(self) -> Dict[str, Any]:
        """Flat dict used for JSON exports."""
        return {
            "id": self.id,
            "parent_id": self.parent_id,
            "name": self.name,
            "visible": self.visible,
            "url": self.url,
            "full_name": self.full_name,
            "custom_url": self.custom_url.model_dump(),
        }


class Pagination(BaseModel):
    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    links: Any = None
    too_many: bool = False

    @property
    def has_more(self) -> bool:
        return self.current_page < self.total_pages


class PageMeta(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)


class CategoryPage(BaseModel):
    data: List[Category] = Field(default_factory=list)
    meta: PageMeta = Field(default_factory=PageMeta)

    @property
    def has_more(self) -> bool:
        return self.meta.pagination.has_more


@dataclass
class CategoryFetchResult:
    """Outcome of a full pagination run.

    ``categories`` always holds every page fetched before a failure.
    ``error`` is None only when the whole listing was read.
    """
    categories: List[Category] = field(default_factory=list)
    error: Optional[CategoryClientError] = None
    pages_fetched: int = 0
    unresolved_ids: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None
