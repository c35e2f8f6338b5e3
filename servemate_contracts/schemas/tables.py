"""
Table schemas: floor layout, seating and server assignment.
"""

from typing import Optional

from pydantic import Field, model_validator

from ..base import ContractModel, check_range
from ..derive import derive
from ..enums import TableCondition, TableSortOptionsEnum
from ..registry import register_schema
from ..types import IdList, NonNegativeInt, PositiveInt, QueryBool, upper_enum
from .search import Page, SearchCriteria


Condition = upper_enum(TableCondition)


class _OriginalCapacityDefault(ContractModel):
    """originalCapacity falls back to capacity when not sent."""

    @model_validator(mode='after')
    def default_original_capacity(self):
        if self.original_capacity is None:
            # Use object.__setattr__ since model is frozen
            object.__setattr__(self, 'original_capacity', self.capacity)
        return self


class Table(_OriginalCapacityDefault):
    id: PositiveInt
    table_number: PositiveInt
    capacity: NonNegativeInt
    additional_capacity: NonNegativeInt = 0
    is_occupied: QueryBool = False
    status: Condition = TableCondition.AVAILABLE
    guests: NonNegativeInt = 0
    original_capacity: Optional[NonNegativeInt] = None


TableId = derive(Table, 'TableId', pick=['id'])

TableRef = derive(
    Table, 'TableRef',
    pick=['id', 'table_number'],
    doc="Table as embedded in reservations and conflicts.",
)

TableCreate = derive(Table, 'TableCreate', omit=['id'], base=_OriginalCapacityDefault)

TableUpdates = derive(
    Table, 'TableUpdates',
    omit=['id'],
    partial=True,
    require_any=True,
    doc="Partial table update. At least one field must be provided.",
)


class TableSearchCriteria(derive(Table, 'TableSearchBase',
                                 pick=['table_number', 'is_occupied', 'status'],
                                 partial=True, base=SearchCriteria)):
    """Floor-plan filters. min/max capacity bound the seat count."""

    min_capacity: Optional[NonNegativeInt] = None
    max_capacity: Optional[NonNegativeInt] = None
    sort_by: TableSortOptionsEnum = TableSortOptionsEnum.ID

    @model_validator(mode='after')
    def check_capacity_range(self) -> 'TableSearchCriteria':
        check_range(self, 'min_capacity', 'max_capacity')
        return self


class TableAssignment(ContractModel):
    """Assign a server to one or more tables."""

    server_id: PositiveInt
    is_primary: QueryBool = True
    assigned_tables: IdList = Field(min_length=1)


class TableSeating(ContractModel):
    guests: PositiveInt
    reservation_id: Optional[PositiveInt] = None


class TableList(Page[Table]):
    """Paginated tables."""


for _schema in (Table, TableId, TableRef, TableCreate, TableUpdates, TableSearchCriteria,
                TableAssignment, TableSeating, TableList):
    register_schema(_schema)
