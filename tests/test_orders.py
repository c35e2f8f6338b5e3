"""
Tests for order schemas.
"""

import pytest

from servemate_contracts.enums import Allergy, OrderSortOptions, OrderState, PaymentState
from servemate_contracts.errors import ContractViolation, ViolationKind
from servemate_contracts.schemas import (
    Order,
    OrderCreate,
    OrderItem,
    OrderItemIds,
    OrderSearch,
    OrderUpdateItems,
    OrderUpdateProps,
    OrderWithItems,
    PrepareItems,
)


def _line(**overrides):
    line = {'itemId': 1, 'price': 1, 'specialRequest': None}
    line.update(overrides)
    return line


class TestOrder:
    """Tests for Order"""

    def test_valid_order(self, order_payload):
        order = Order.parse(order_payload)
        assert order.id == 1
        assert order.table_number == 5
        assert order.status == OrderState.RECEIVED
        assert order.completion_time is None

    def test_optional_fields_defaulted(self, order_payload):
        payload = {k: v for k, v in order_payload.items() if k not in ('comments', 'completionTime')}
        order = Order.parse(payload)
        assert order.comments is None
        assert order.allergies == []
        assert order.food_items == []
        assert order.drink_items == []

    def test_negative_total_amount(self, order_payload):
        with pytest.raises(ContractViolation) as exc:
            Order.parse({**order_payload, 'totalAmount': -46})
        assert exc.value.for_path('totalAmount')[0].kind == ViolationKind.CONSTRAINT

    def test_status_case_insensitive(self, order_payload):
        assert Order.parse({**order_payload, 'status': 'ready_to_pay'}).status == OrderState.READY_TO_PAY

    def test_unknown_status(self, order_payload):
        with pytest.raises(ContractViolation) as exc:
            Order.parse({**order_payload, 'status': 'LOST'})
        assert exc.value.for_path('status')[0].kind == ViolationKind.ENUM_MEMBERSHIP

    def test_nested_items(self, order_payload, order_item_payload):
        order = Order.parse({**order_payload, 'foodItems': [order_item_payload]})
        assert order.food_items[0].allergies == [Allergy.CELERY]


class TestOrderItem:
    """Tests for OrderItem"""

    def test_valid_item(self, order_item_payload):
        item = OrderItem.parse(order_item_payload)
        assert item.payment_status == PaymentState.NONE
        assert item.final_price == 15.99

    def test_defaults(self):
        item = OrderItem.parse({'id': 1, 'itemId': 2, 'price': 5, 'finalPrice': 5, 'guestNumber': 1})
        assert item.quantity == 1
        assert item.discount == 0
        assert item.printed is False
        assert item.fired is False
        assert item.payment_status == PaymentState.NONE
        assert item.allergies == []

    def test_negative_price(self, order_item_payload):
        with pytest.raises(ContractViolation) as exc:
            OrderItem.parse({**order_item_payload, 'price': -15.99, 'finalPrice': -15.99})
        assert set(exc.value.paths()) == {'price', 'finalPrice'}

    @pytest.mark.parametrize("field", ['discount', 'finalPrice', 'quantity'])
    def test_negative_values_rejected(self, order_item_payload, field):
        with pytest.raises(ContractViolation) as exc:
            OrderItem.parse({**order_item_payload, field: -1})
        assert exc.value.for_path(field)[0].kind == ViolationKind.CONSTRAINT

    def test_zero_quantity(self, order_item_payload):
        with pytest.raises(ContractViolation) as exc:
            OrderItem.parse({**order_item_payload, 'quantity': 0})
        assert exc.value.paths() == ['quantity']

    def test_discount_above_price(self, order_item_payload):
        with pytest.raises(ContractViolation) as exc:
            OrderItem.parse({**order_item_payload, 'discount': 20})
        assert exc.value.kinds() == [ViolationKind.CROSS_FIELD]


class TestOrderSearch:
    """Tests for OrderSearch"""

    def test_valid_search(self):
        parsed = OrderSearch.parse({
            'tableNumber': '5',
            'serverId': '10',
            'status': 'COMPLETED',
            'page': '1',
            'pageSize': '20',
            'sortBy': 'id',
            'sortOrder': 'asc',
        })
        assert parsed.table_number == 5
        assert parsed.server_id == 10
        assert parsed.page_size == 20

    def test_empty_criteria(self):
        parsed = OrderSearch.parse({})
        assert parsed.sort_by == OrderSortOptions.ID
        assert parsed.allergies is None

    def test_page_zero(self):
        with pytest.raises(ContractViolation):
            OrderSearch.parse({'page': '0', 'pageSize': '20'})

    def test_allergies_string_and_list_agree(self):
        from_string = OrderSearch.parse({'allergies': 'GLUTEN,DAIRY'})
        from_list = OrderSearch.parse({'allergies': ['GLUTEN', 'DAIRY']})
        assert from_string.allergies == from_list.allergies == ['GLUTEN', 'DAIRY']

    def test_order_time_range(self):
        with pytest.raises(ContractViolation) as exc:
            OrderSearch.parse({'orderTimeStart': '2024-01-02', 'orderTimeEnd': '2024-01-01'})
        assert exc.value.kinds() == [ViolationKind.CROSS_FIELD]

    def test_order_time_range_mixes_zoned_and_plain_dates(self):
        assert OrderSearch.parse({'orderTimeStart': '2024-01-01T18:30:00Z', 'orderTimeEnd': '2024-01-02'})
        with pytest.raises(ContractViolation) as exc:
            OrderSearch.parse({'orderTimeStart': '2024-01-02T18:30:00Z', 'orderTimeEnd': '2024-01-02'})
        assert exc.value.kinds() == [ViolationKind.CROSS_FIELD]


class TestOrderUpdateProps:
    """Tests for OrderUpdateProps"""

    def test_partial_update(self):
        parsed = OrderUpdateProps.parse({'status': 'COMPLETED', 'comments': 'Updated comment'})
        assert parsed.to_payload(exclude_unset=True) == {'status': 'COMPLETED', 'comments': 'Updated comment'}

    def test_empty_update(self):
        with pytest.raises(ContractViolation) as exc:
            OrderUpdateProps.parse({})
        assert exc.value.kinds() == [ViolationKind.CROSS_FIELD]

    def test_items_not_updatable_here(self):
        assert 'food_items' not in OrderUpdateProps.model_fields
        assert 'order_number' not in OrderUpdateProps.model_fields


class TestOrderCreate:
    """Tests for OrderCreate"""

    def test_no_items(self):
        with pytest.raises(ContractViolation) as exc:
            OrderCreate.parse({'tableNumber': 1, 'guestsCount': 1, 'serverId': 1, 'foodItems': [], 'drinkItems': []})
        assert exc.value.kinds() == [ViolationKind.CROSS_FIELD]

    def test_with_food_items(self):
        order = OrderCreate.parse({
            'tableNumber': 1,
            'guestsCount': 1,
            'serverId': 1,
            'foodItems': [{'guestNumber': 1, 'items': [_line()]}],
        })
        assert order.drink_items == []
        line = order.food_items[0].items[0]
        assert line.quantity == 1
        assert line.special_request is None

    def test_guest_group_needs_lines(self):
        with pytest.raises(ContractViolation) as exc:
            OrderCreate.parse({
                'tableNumber': 1,
                'guestsCount': 1,
                'serverId': 1,
                'foodItems': [{'guestNumber': 1, 'items': []}],
            })
        assert exc.value.paths() == ['foodItems.0.items']

    def test_guest_number_within_party(self):
        with pytest.raises(ContractViolation) as exc:
            OrderCreate.parse({
                'tableNumber': 1,
                'guestsCount': 2,
                'serverId': 1,
                'drinkItems': [{'guestNumber': 3, 'items': [_line()]}],
            })
        assert exc.value.kinds() == [ViolationKind.CROSS_FIELD]

    def test_line_allergies_from_string(self):
        order = OrderCreate.parse({
            'tableNumber': 1,
            'guestsCount': 1,
            'serverId': 1,
            'foodItems': [{'guestNumber': 1, 'items': [_line(allergies='peanut, soy')]}],
        })
        assert order.food_items[0].items[0].allergies == [Allergy.PEANUT, Allergy.SOY]


class TestOrderUpdateItems:
    """Tests for OrderUpdateItems"""

    def test_no_items(self):
        with pytest.raises(ContractViolation):
            OrderUpdateItems.parse({'foodItems': [], 'drinkItems': []})

    def test_with_drink_items(self):
        update = OrderUpdateItems.parse({'drinkItems': [{'guestNumber': 1, 'items': [_line()]}]})
        assert update.food_items == []
        assert update.drink_items[0].guest_number == 1


class TestOrderItemIds:
    """Tests for OrderItemIds"""

    def test_ids_from_string(self):
        assert OrderItemIds.parse({'ids': '1,2'}).ids == [1, 2]

    def test_empty_ids(self):
        with pytest.raises(ContractViolation) as exc:
            OrderItemIds.parse({'ids': []})
        assert exc.value.for_path('ids')[0].kind == ViolationKind.CONSTRAINT


class TestPrepareItems:
    """Tests for PrepareItems"""

    def test_food_and_drink(self):
        prep = PrepareItems.parse({
            'foodItems': [{'id': 1, 'price': 10.99, 'foodItem': {'name': 'Burger', 'id': 1}}],
            'drinkItems': [{'id': 2, 'price': 5.99, 'drinkItem': {'name': 'Cola', 'id': 2}}],
        })
        assert prep.food_items[0].food_item.name == 'Burger'
        assert prep.drink_items[0].drink_item.id == 2

    def test_empty_arrays(self):
        prep = PrepareItems.parse({'foodItems': [], 'drinkItems': []})
        assert prep.food_items == []


class TestOrderWithItems:
    """Tests for OrderWithItems"""

    def test_lines_carry_menu_item(self, order_payload, order_item_payload):
        line = {**order_item_payload, 'item': {'id': 100, 'name': 'Soup'}}
        order = OrderWithItems.parse({**order_payload, 'foodItems': [line]})
        assert order.food_items[0].item.name == 'Soup'

    def test_line_without_item_rejected(self, order_payload, order_item_payload):
        with pytest.raises(ContractViolation) as exc:
            OrderWithItems.parse({**order_payload, 'foodItems': [order_item_payload]})
        assert exc.value.paths() == ['foodItems.0.item']
