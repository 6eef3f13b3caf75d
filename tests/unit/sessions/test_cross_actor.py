"""Customer and partner working on the same order through one record store.

The two sides hold independent copies once a partner imports an order
from the ledger: status changes on either side never reach the other.
"""

from __future__ import annotations

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import InvalidPartnerAction, OrderNotFound

pytestmark = pytest.mark.unit


@pytest.fixture()
def placed(customer_session, print_spec, shop):
    return customer_session.orders.create_order(print_spec, shop)


class TestImportShopOrders:
    def test_partner_imports_order_for_their_shop(self, placed, partner_session, customer):
        imported = partner_session.orders.import_shop_orders()

        assert [o.id for o in imported] == [placed.id]
        copy = partner_session.orders.get_order(placed.id)
        assert copy.order_number == placed.order_number
        assert copy.customer.name == customer.name
        assert copy.customer.phone == customer.phone

    def test_shop_email_match_ignores_case(self, make_session, customer, partner, print_spec):
        make_session(customer).orders.create_order(
            print_spec, {"shopName": "X", "shopEmail": "X@Y.COM"}
        )
        assert len(make_session(partner).orders.import_shop_orders()) == 1

    def test_other_shops_orders_are_skipped(self, make_session, customer, partner, print_spec):
        make_session(customer).orders.create_order(
            print_spec, {"shopName": "Z", "shopEmail": "z@y.com"}
        )
        assert make_session(partner).orders.import_shop_orders() == []

    def test_second_import_adds_nothing(self, placed, partner_session):
        partner_session.orders.import_shop_orders()
        assert partner_session.orders.import_shop_orders() == []
        assert len(list(partner_session.orders.list_orders())) == 1

    def test_customer_cannot_import(self, customer_session):
        with pytest.raises(InvalidPartnerAction):
            customer_session.orders.import_shop_orders()

    def test_partner_cannot_see_order_before_import(self, placed, partner_session):
        with pytest.raises(OrderNotFound):
            partner_session.orders.get_order(placed.id)


class TestIndependentCopies:
    def test_partner_change_does_not_reach_customer(
        self, placed, customer_session, partner_session
    ):
        partner_session.orders.import_shop_orders()
        partner_session.orders.update_order_status(placed.id, "accepted")

        assert partner_session.orders.get_order(placed.id).status == OrderStatus.ACCEPTED
        assert customer_session.orders.get_order(placed.id).status == OrderStatus.PENDING

    def test_customer_change_does_not_reach_partner_copy(
        self, placed, customer_session, partner_session
    ):
        partner_session.orders.import_shop_orders()
        customer_session.orders.update_order_status(placed.id, "cancelled")

        partner_session.orders.import_shop_orders()
        assert partner_session.orders.get_order(placed.id).status == OrderStatus.PENDING

    def test_partner_update_notifies_partner_only(
        self, placed, customer_session, partner_session
    ):
        partner_session.orders.import_shop_orders()
        partner_session.orders.update_order_status(placed.id, "accepted")

        partner_messages = [n.message for n in partner_session.notifications.list_notifications()]
        assert partner_messages == ["You updated order status to Accepted"]
        assert len(customer_session.notifications.list_notifications()) == 1

    def test_partner_cannot_place_orders(self, partner_session, print_spec, shop):
        with pytest.raises(InvalidPartnerAction):
            partner_session.orders.create_order(print_spec, shop)
