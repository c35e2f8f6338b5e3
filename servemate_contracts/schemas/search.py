"""
Shared search/pagination fragment and paginated list wrapper.

Every `*Search` schema derives from SearchCriteria (page, pageSize,
sortOrder) and adds its own optional filters plus a `sortBy` restricted to
the entity's sortable columns. Query strings arrive as strings, so empty
values (`?page=&status=`) count as absent and fall back to defaults.
"""

import math
from typing import Annotated, Any, Generic, List, Mapping, TypeVar

from pydantic import BeforeValidator, Field, computed_field, model_validator

from ..base import ContractModel
from ..config import Config
from ..enums import SortOrder
from ..types import NonNegativeInt, PositiveInt, coerce_int


T = TypeVar('T')


def _lower(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip().lower()
    return v


PageSize = Annotated[int, BeforeValidator(coerce_int), Field(ge=1, le=Config.MAX_PAGE_SIZE)]


class SearchCriteria(ContractModel):
    """Pagination and sort-direction params shared by all search schemas."""

    page: PositiveInt = Field(default=1, description="1-based page number")
    page_size: PageSize = Field(default=Config.DEFAULT_PAGE_SIZE, description="Rows per page")
    sort_order: Annotated[SortOrder, BeforeValidator(_lower)] = Field(
        default=SortOrder.ASC,
        description="asc or desc"
    )

    @model_validator(mode='before')
    @classmethod
    def drop_empty_params(cls, data: Any) -> Any:
        """Treat empty query values as absent so defaults apply."""
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None and value != ''}
        return data

    @property
    def offset(self) -> int:
        """Row offset for the requested page."""
        return (self.page - 1) * self.page_size


class Page(ContractModel, Generic[T]):
    """
    Paginated list response.

    totalPages is always computed as ceil(totalCount / pageSize); a value sent
    by the caller is ignored.
    """

    items: List[T] = Field(default_factory=list)
    total_count: NonNegativeInt
    page: PositiveInt = 1
    page_size: PositiveInt = Config.DEFAULT_PAGE_SIZE

    @computed_field(alias='totalPages')
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)
