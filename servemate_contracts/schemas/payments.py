"""
Payment schemas.

Amounts are plain floats (JSON numbers); totals and capture live in the
payments service.
"""

from typing import Optional

from pydantic import Field, model_validator

from .. import clock
from ..base import ContractModel, check_range
from ..derive import derive
from ..enums import PaymentMethod, PaymentSortOptions, PaymentState
from ..registry import register_schema
from ..types import CoercedDateTime, NonNegativeNumber, PositiveInt, PositiveNumber, upper_enum
from .search import Page, SearchCriteria


Method = upper_enum(PaymentMethod)
State = upper_enum(PaymentState)


class Payment(ContractModel):
    id: PositiveInt
    amount: NonNegativeNumber
    tax: NonNegativeNumber = 0
    tip: NonNegativeNumber = 0
    service_charge: NonNegativeNumber = 0
    payment_type: Method
    status: State = PaymentState.PENDING
    order_id: PositiveInt
    created_at: CoercedDateTime = Field(default_factory=clock.now)
    completed_at: Optional[CoercedDateTime] = None


CreatePayment = derive(
    Payment, 'CreatePayment',
    omit=['id', 'created_at', 'completed_at'],
    doc="Payment request for an order. Status starts as PENDING unless sent.",
)


class PaymentSearch(derive(Payment, 'PaymentSearchBase',
                           pick=['amount', 'payment_type', 'status', 'order_id'],
                           partial=True, base=SearchCriteria)):
    """Payment filters. createdAfter/createdBefore bound createdAt."""

    created_after: Optional[CoercedDateTime] = None
    created_before: Optional[CoercedDateTime] = None
    sort_by: PaymentSortOptions = PaymentSortOptions.ID

    @model_validator(mode='after')
    def check_created_range(self) -> 'PaymentSearch':
        check_range(self, 'created_after', 'created_before')
        return self


class RefundPayment(ContractModel):
    amount: PositiveNumber
    reason: Optional[str] = Field(default=None, max_length=500)


class PaymentList(Page[Payment]):
    """Paginated payments."""


for _schema in (Payment, CreatePayment, PaymentSearch, RefundPayment, PaymentList):
    register_schema(_schema)
