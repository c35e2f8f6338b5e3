"""
Order schemas.

An order holds ordered food and drink lines. Lines are submitted grouped by
guest:

    {
        "tableNumber": 5, "guestsCount": 2, "serverId": 10,
        "foodItems": [{"guestNumber": 1, "items": [{"itemId": 3, "price": 12.5}]}],
    }

Order status values are validated here; transition legality (AWAITING ->
RECEIVED -> ...) belongs to the order service.
"""

from typing import List, Optional

from pydantic import Field, model_validator

from .. import clock
from ..base import ContractModel, check_range
from ..derive import derive
from ..enums import Allergy, OrderSortOptions, OrderState, PaymentState
from ..errors import cross_field_error
from ..registry import register_schema
from ..types import (
    CoercedDateTime,
    IdList,
    NonNegativeNumber,
    PositiveInt,
    QueryBool,
    enum_list,
    upper_enum,
)
from .items import BaseItem
from .search import Page, SearchCriteria


Allergies = enum_list(Allergy)


# =============================================================================
# ORDER LINES
# =============================================================================

class OrderItem(ContractModel):
    """One ordered menu item for one guest."""

    id: PositiveInt
    item_id: PositiveInt
    quantity: PositiveInt = 1
    price: NonNegativeNumber
    discount: NonNegativeNumber = 0
    final_price: NonNegativeNumber
    guest_number: PositiveInt
    special_request: Optional[str] = None
    allergies: Allergies = Field(default_factory=list)
    printed: QueryBool = False
    fired: QueryBool = False
    payment_status: upper_enum(PaymentState) = PaymentState.NONE

    @model_validator(mode='after')
    def check_discount(self):
        if self.discount > self.price:
            raise cross_field_error("discount must not be greater than price")
        return self


ItemRef = derive(BaseItem, 'ItemRef', pick=['id', 'name'])


class OrderItemDetail(OrderItem):
    """Order line with the menu item it refers to."""

    item: ItemRef


OrderItemInput = derive(
    OrderItem, 'OrderItemInput',
    pick=['item_id', 'quantity', 'price', 'special_request', 'allergies'],
    doc="A new order line as sent by the client.",
)


class GuestItems(ContractModel):
    """New order lines for one guest."""

    guest_number: PositiveInt
    items: List[OrderItemInput] = Field(min_length=1)


# =============================================================================
# ORDERS
# =============================================================================

class Order(ContractModel):
    id: PositiveInt
    table_number: PositiveInt
    order_number: PositiveInt
    guests_count: PositiveInt
    server_id: PositiveInt
    status: upper_enum(OrderState)
    order_time: CoercedDateTime = Field(default_factory=clock.now)
    updated_at: CoercedDateTime = Field(default_factory=clock.now)
    completion_time: Optional[CoercedDateTime] = None
    total_amount: NonNegativeNumber
    comments: Optional[str] = None
    allergies: Allergies = Field(default_factory=list)
    food_items: List[OrderItem] = Field(default_factory=list)
    drink_items: List[OrderItem] = Field(default_factory=list)


OrderId = derive(Order, 'OrderId', pick=['id'])

OrderWithItems = derive(
    Order, 'OrderWithItems',
    extend=[{
        'food_items': (List[OrderItemDetail], Field(default_factory=list)),
        'drink_items': (List[OrderItemDetail], Field(default_factory=list)),
    }],
    doc="Order with each line resolved to its menu item.",
)


class _ItemLines(ContractModel):
    """Food and drink guest groups; at least one line overall."""

    food_items: List[GuestItems] = Field(default_factory=list)
    drink_items: List[GuestItems] = Field(default_factory=list)

    @model_validator(mode='after')
    def require_item_lines(self):
        if not self.food_items and not self.drink_items:
            raise cross_field_error("At least one food or drink item must be provided")
        return self


class OrderCreate(derive(Order, 'OrderCreateBase',
                         pick=['table_number', 'guests_count', 'server_id', 'comments', 'allergies'],
                         base=_ItemLines)):
    """New order with its first item lines."""

    @model_validator(mode='after')
    def check_guest_numbers(self) -> 'OrderCreate':
        for group in self.food_items + self.drink_items:
            if group.guest_number > self.guests_count:
                raise cross_field_error(
                    f"guestNumber {group.guest_number} exceeds guestsCount {self.guests_count}"
                )
        return self


class OrderUpdateItems(_ItemLines):
    """Lines added to an existing order."""


OrderUpdateProps = derive(
    Order, 'OrderUpdateProps',
    omit=['id', 'order_number', 'order_time', 'updated_at', 'food_items', 'drink_items'],
    partial=True,
    require_any=True,
    doc="Partial update of order-level fields. At least one field must be provided.",
)


class OrderSearch(derive(Order, 'OrderSearchBase',
                         pick=['table_number', 'guests_count', 'server_id', 'status', 'allergies'],
                         partial=True, base=SearchCriteria)):
    """Order filters. orderTimeStart/orderTimeEnd bound orderTime."""

    order_time_start: Optional[CoercedDateTime] = None
    order_time_end: Optional[CoercedDateTime] = None
    sort_by: OrderSortOptions = OrderSortOptions.ID

    @model_validator(mode='after')
    def check_order_time_range(self) -> 'OrderSearch':
        check_range(self, 'order_time_start', 'order_time_end')
        return self


class OrderItemIds(ContractModel):
    """Line ids to print, fire or pay."""

    ids: IdList = Field(min_length=1)


class PreparedFoodItem(ContractModel):
    id: PositiveInt
    price: NonNegativeNumber
    food_item: ItemRef


class PreparedDrinkItem(ContractModel):
    id: PositiveInt
    price: NonNegativeNumber
    drink_item: ItemRef


class PrepareItems(ContractModel):
    """Lines sent to the kitchen/bar, with their menu items."""

    food_items: List[PreparedFoodItem] = Field(default_factory=list)
    drink_items: List[PreparedDrinkItem] = Field(default_factory=list)


class OrderList(Page[Order]):
    """Paginated orders."""


for _schema in (OrderItem, ItemRef, OrderItemDetail, OrderItemInput, GuestItems, Order, OrderId,
                OrderWithItems, OrderCreate, OrderUpdateItems, OrderUpdateProps, OrderSearch,
                OrderItemIds, PreparedFoodItem, PreparedDrinkItem, PrepareItems, OrderList):
    register_schema(_schema)
