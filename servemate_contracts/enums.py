"""
Enumerated Domain Values - SINGLE SOURCE OF TRUTH

Closed sets of string constants used by every schema. The domain enums are
regenerated from the schema-of-record by an external tool; schemas only ever
reference these classes, so adding a member needs no change elsewhere.

DO NOT duplicate these values in schema modules.
"""

from enum import Enum


# =============================================================================
# USERS
# =============================================================================

class UserRole(str, Enum):
    ADMIN = 'ADMIN'
    MANAGER = 'MANAGER'
    HOST = 'HOST'
    SERVER = 'SERVER'
    USER = 'USER'


# =============================================================================
# ORDERS & PAYMENTS
# =============================================================================

class OrderState(str, Enum):
    """
    Order lifecycle values.

    AWAITING -> RECEIVED -> SERVED -> READY_TO_PAY -> COMPLETED, with
    CANCELED and DISPUTED as side-exits. Transition legality is enforced by
    the business layer, not here.
    """
    AWAITING = 'AWAITING'
    RECEIVED = 'RECEIVED'
    SERVED = 'SERVED'
    READY_TO_PAY = 'READY_TO_PAY'
    COMPLETED = 'COMPLETED'
    CANCELED = 'CANCELED'
    DISPUTED = 'DISPUTED'


class PaymentState(str, Enum):
    NONE = 'NONE'
    PENDING = 'PENDING'
    PAID = 'PAID'
    REFUNDED = 'REFUNDED'
    CANCELLED = 'CANCELLED'


class PaymentMethod(str, Enum):
    CASH = 'CASH'
    CREDIT_CARD = 'CREDIT_CARD'
    DEBIT_CARD = 'DEBIT_CARD'
    MOBILE_PAYMENT = 'MOBILE_PAYMENT'
    GIFT_CARD = 'GIFT_CARD'


# =============================================================================
# MENU
# =============================================================================

class Allergy(str, Enum):
    NONE = 'NONE'
    GLUTEN = 'GLUTEN'
    DAIRY = 'DAIRY'
    EGGS = 'EGGS'
    FISH = 'FISH'
    SHELLFISH = 'SHELLFISH'
    MOLLUSCS = 'MOLLUSCS'
    PEANUT = 'PEANUT'
    TREE_NUTS = 'TREE_NUTS'
    SOY = 'SOY'
    SESAME = 'SESAME'
    CELERY = 'CELERY'
    MUSTARD = 'MUSTARD'
    LUPIN = 'LUPIN'
    SULPHITES = 'SULPHITES'


class FoodCategory(str, Enum):
    APPETIZER = 'APPETIZER'
    SOUP = 'SOUP'
    SALAD = 'SALAD'
    MEAT = 'MEAT'
    POULTRY = 'POULTRY'
    SEAFOOD = 'SEAFOOD'
    PASTA = 'PASTA'
    PIZZA = 'PIZZA'
    VEGETARIAN = 'VEGETARIAN'
    DESSERT = 'DESSERT'
    OTHER = 'OTHER'


class FoodType(str, Enum):
    APPETIZER = 'APPETIZER'
    MAIN_COURSE = 'MAIN_COURSE'
    SIDE_DISH = 'SIDE_DISH'
    DESSERT = 'DESSERT'
    SNACK = 'SNACK'
    OTHER = 'OTHER'


class SpiceLevel(str, Enum):
    NOT_SPICY = 'NOT_SPICY'
    MILD = 'MILD'
    MEDIUM = 'MEDIUM'
    HOT = 'HOT'
    EXTRA_HOT = 'EXTRA_HOT'


class DrinkCategory(str, Enum):
    WATER = 'WATER'
    SODA = 'SODA'
    JUICE = 'JUICE'
    COFFEE = 'COFFEE'
    TEA = 'TEA'
    BEER = 'BEER'
    WINE = 'WINE'
    COCKTAIL = 'COCKTAIL'
    ALCOHOLIC = 'ALCOHOLIC'
    NON_ALCOHOLIC = 'NON_ALCOHOLIC'


class DrinkTemp(str, Enum):
    COLD = 'COLD'
    ROOM = 'ROOM'
    HOT = 'HOT'


# =============================================================================
# TABLES & RESERVATIONS
# =============================================================================

class TableCondition(str, Enum):
    AVAILABLE = 'AVAILABLE'
    OCCUPIED = 'OCCUPIED'
    RESERVED = 'RESERVED'
    OUT_OF_SERVICE = 'OUT_OF_SERVICE'


class ReservationStatus(str, Enum):
    PENDING = 'PENDING'
    CONFIRMED = 'CONFIRMED'
    SEATED = 'SEATED'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'
    NO_SHOW = 'NO_SHOW'


# =============================================================================
# SEARCH / SORTING
# =============================================================================
# Sort values are the wire (camelCase) column names, matched exactly.

class SortOrder(str, Enum):
    ASC = 'asc'
    DESC = 'desc'


class UserSortColumn(str, Enum):
    ID = 'id'
    NAME = 'name'
    EMAIL = 'email'
    ROLE = 'role'
    CREATED_AT = 'createdAt'
    LAST_LOGIN = 'lastLogin'


class OrderSortOptions(str, Enum):
    ID = 'id'
    TABLE_NUMBER = 'tableNumber'
    GUESTS_COUNT = 'guestsCount'
    ORDER_TIME = 'orderTime'
    STATUS = 'status'
    TOTAL_AMOUNT = 'totalAmount'
    SERVER_ID = 'serverId'


class PaymentSortOptions(str, Enum):
    ID = 'id'
    AMOUNT = 'amount'
    PAYMENT_TYPE = 'paymentType'
    CREATED_AT = 'createdAt'
    COMPLETED_AT = 'completedAt'
    ORDER_ID = 'orderId'


class TableSortOptionsEnum(str, Enum):
    ID = 'id'
    TABLE_NUMBER = 'tableNumber'
    CAPACITY = 'capacity'
    STATUS = 'status'
    GUESTS = 'guests'


class ItemSortOptions(str, Enum):
    ID = 'id'
    NAME = 'name'
    PRICE = 'price'
    CATEGORY = 'category'


class ReservationSortColumn(str, Enum):
    ID = 'id'
    TIME = 'time'
    NAME = 'name'
    GUESTS_COUNT = 'guestsCount'
    STATUS = 'status'
    CREATED_AT = 'createdAt'
