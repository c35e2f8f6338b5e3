"""
Shared fixtures for contract tests.

Payload fixtures are valid camelCase wire payloads; tests copy and tweak
them (`{**order_payload, 'totalAmount': -46}`).
"""

from datetime import datetime, timezone

import pytest

from servemate_contracts import clock


FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now():
    """Pin clock.now() so timestamp defaults are deterministic."""
    with clock.frozen(FIXED_NOW) as at:
        yield at


@pytest.fixture
def user_payload():
    return {
        'id': 1,
        'name': 'Alice Tan',
        'email': 'alice@servemate.io',
        'role': 'SERVER',
        'password': 'secret123',
    }


@pytest.fixture
def order_payload():
    return {
        'id': '1',
        'tableNumber': '5',
        'orderNumber': '101',
        'guestsCount': '4',
        'serverId': '10',
        'status': 'RECEIVED',
        'orderTime': datetime(2024, 1, 15, 18, 30),
        'updatedAt': datetime(2024, 1, 15, 18, 30),
        'completionTime': None,
        'totalAmount': 46,
        'comments': 'No spicy food',
    }


@pytest.fixture
def order_item_payload():
    return {
        'id': 1,
        'itemId': 100,
        'quantity': 1,
        'specialRequest': 'No onions',
        'price': 15.99,
        'guestNumber': 1,
        'allergies': ['CELERY'],
        'discount': 0,
        'finalPrice': 15.99,
        'printed': False,
        'fired': False,
        'paymentStatus': 'NONE',
    }


@pytest.fixture
def payment_payload():
    return {
        'id': 1,
        'amount': 100.5,
        'paymentType': 'CREDIT_CARD',
        'orderId': 7,
    }


@pytest.fixture
def table_payload():
    return {
        'id': 1,
        'tableNumber': 12,
        'capacity': 4,
    }


@pytest.fixture
def food_item_payload():
    return {
        'id': 1,
        'name': 'Margherita',
        'price': 12.5,
        'category': 'PIZZA',
        'type': 'MAIN_COURSE',
    }


@pytest.fixture
def drink_item_payload():
    return {
        'id': 2,
        'name': 'Lemonade',
        'price': 4,
        'category': 'JUICE',
        'volume': 330,
        'temperature': 'COLD',
    }


@pytest.fixture
def reservation_payload():
    return {
        'id': 1,
        'guestsCount': 4,
        'time': '2024-02-01T19:30:00',
        'name': 'John Lim',
        'phone': '+65 9123 4567',
        'allergies': [],
    }
