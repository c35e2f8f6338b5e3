"""
Entity schemas and their derived create/update/search/list variants.

Importing this package registers every schema in the schema registry.
"""

from .search import Page, SearchCriteria
from .users import (
    CreateUser,
    UpdateUser,
    User,
    UserCredentials,
    UserId,
    UserList,
    UserLogin,
    UserResponse,
    UserSearch,
)
from .tables import (
    Table,
    TableAssignment,
    TableCreate,
    TableId,
    TableList,
    TableRef,
    TableSearchCriteria,
    TableSeating,
    TableUpdates,
)
from .payments import CreatePayment, Payment, PaymentList, PaymentSearch, RefundPayment
from .items import (
    BaseItem,
    CreateDrinkItem,
    CreateFoodItem,
    DrinkItem,
    DrinkItemList,
    DrinkItemSearch,
    FoodItem,
    FoodItemList,
    FoodItemSearch,
    UpdateDrinkItem,
    UpdateFoodItem,
)
from .orders import (
    GuestItems,
    ItemRef,
    Order,
    OrderCreate,
    OrderId,
    OrderItem,
    OrderItemDetail,
    OrderItemIds,
    OrderItemInput,
    OrderList,
    OrderSearch,
    OrderUpdateItems,
    OrderUpdateProps,
    OrderWithItems,
    PreparedDrinkItem,
    PreparedFoodItem,
    PrepareItems,
)
from .reservations import (
    CreateReservation,
    Reservation,
    ReservationConflict,
    ReservationDetailed,
    ReservationGuestInfo,
    ReservationId,
    ReservationList,
    ReservationSearchCriteria,
    ReservationWithTables,
    UpdateReservation,
)

__all__ = [
    # Shared
    'Page',
    'SearchCriteria',
    # Users
    'User',
    'UserResponse',
    'CreateUser',
    'UpdateUser',
    'UserSearch',
    'UserList',
    'UserId',
    'UserLogin',
    'UserCredentials',
    # Tables
    'Table',
    'TableRef',
    'TableId',
    'TableCreate',
    'TableUpdates',
    'TableSearchCriteria',
    'TableAssignment',
    'TableSeating',
    'TableList',
    # Payments
    'Payment',
    'CreatePayment',
    'PaymentSearch',
    'RefundPayment',
    'PaymentList',
    # Items
    'BaseItem',
    'FoodItem',
    'DrinkItem',
    'CreateFoodItem',
    'CreateDrinkItem',
    'UpdateFoodItem',
    'UpdateDrinkItem',
    'FoodItemSearch',
    'DrinkItemSearch',
    'FoodItemList',
    'DrinkItemList',
    # Orders
    'OrderItem',
    'ItemRef',
    'OrderItemDetail',
    'OrderItemInput',
    'GuestItems',
    'Order',
    'OrderId',
    'OrderWithItems',
    'OrderCreate',
    'OrderUpdateItems',
    'OrderUpdateProps',
    'OrderSearch',
    'OrderItemIds',
    'PreparedFoodItem',
    'PreparedDrinkItem',
    'PrepareItems',
    'OrderList',
    # Reservations
    'Reservation',
    'ReservationSearchCriteria',
    'CreateReservation',
    'ReservationWithTables',
    'ReservationConflict',
    'ReservationDetailed',
    'UpdateReservation',
    'ReservationGuestInfo',
    'ReservationId',
    'ReservationList',
]
