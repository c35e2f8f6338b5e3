"""
Reservation schemas.

`tables` holds table ids and accepts [{"id": 1}], ["1", "2"] or "1,2".
`allergies` accepts a list or a comma-separated string in any casing.
"""

from typing import List, Optional

from pydantic import EmailStr, Field, model_validator

from .. import clock
from ..base import ContractModel, check_range
from ..derive import derive
from ..enums import Allergy, ReservationSortColumn, ReservationStatus
from ..registry import register_schema
from ..types import CoercedDateTime, IdList, PositiveInt, QueryBool, enum_list, upper_enum
from .search import Page, SearchCriteria
from .tables import TableRef


class Reservation(ContractModel):
    id: PositiveInt
    guests_count: PositiveInt
    time: CoercedDateTime
    name: str
    email: Optional[EmailStr] = None
    phone: str
    status: upper_enum(ReservationStatus) = ReservationStatus.PENDING
    allergies: enum_list(Allergy) = Field(default_factory=list)
    tables: IdList = Field(default_factory=list)
    comments: Optional[str] = None
    created_at: CoercedDateTime = Field(default_factory=clock.now)
    updated_at: CoercedDateTime = Field(default_factory=clock.now)
    is_active: QueryBool = True


class ReservationSearchCriteria(derive(Reservation, 'ReservationSearchBase',
                                       pick=['name', 'email', 'phone', 'status', 'guests_count',
                                             'time', 'allergies', 'tables', 'is_active'],
                                       partial=True, base=SearchCriteria)):
    """Reservation filters with guest-count and time ranges. Sorted by time by default."""

    guests_count_min: Optional[PositiveInt] = None
    guests_count_max: Optional[PositiveInt] = None
    time_start: Optional[CoercedDateTime] = None
    time_end: Optional[CoercedDateTime] = None
    sort_by: ReservationSortColumn = ReservationSortColumn.TIME

    @model_validator(mode='after')
    def check_ranges(self) -> 'ReservationSearchCriteria':
        check_range(self, 'guests_count_min', 'guests_count_max')
        check_range(self, 'time_start', 'time_end')
        return self


CreateReservation = derive(
    Reservation, 'CreateReservation',
    omit=['id', 'created_at', 'updated_at', 'is_active'],
)

ReservationWithTables = derive(
    Reservation, 'ReservationWithTables',
    extend=[{'tables': (List[TableRef], Field(default_factory=list))}],
    doc="Reservation with its tables resolved to id and table number.",
)


class ReservationConflict(ContractModel):
    """Another reservation holding the same tables at an overlapping time."""

    reservation_id: PositiveInt
    time: CoercedDateTime
    tables: List[TableRef]


class ReservationDetailed(ContractModel):
    reservation: ReservationWithTables
    conflict: List[ReservationConflict] = Field(default_factory=list)


UpdateReservation = derive(
    Reservation, 'UpdateReservation',
    omit=['id', 'created_at', 'updated_at'],
    partial=True,
    require_any=True,
)

ReservationGuestInfo = derive(
    Reservation, 'ReservationGuestInfo',
    pick=['email', 'name', 'phone', 'allergies', 'guests_count'],
    partial=True,
    require_any=True,
    doc="Guest-facing details of a reservation. At least one field must be provided.",
)

ReservationId = derive(Reservation, 'ReservationId', pick=['id'])


class ReservationList(Page[Reservation]):
    """Paginated reservations."""


for _schema in (Reservation, ReservationSearchCriteria, CreateReservation, ReservationWithTables,
                ReservationConflict, ReservationDetailed, UpdateReservation, ReservationGuestInfo,
                ReservationId, ReservationList):
    register_schema(_schema)
