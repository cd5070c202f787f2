# Status badges, transition rules and shipment eligibility

import pytest

from core.errors import StatusTransitionError
from core.status import (
    NEUTRAL_BADGE,
    ShipmentOrderSelector,
    allowed_transitions,
    can_transition,
    check_transition,
    is_shipment_eligible,
    status_badge,
)
from schemas.beer_orders import BeerOrderRead, BeerOrderStatus
from tests.conftest import make_order

ALL_STATUSES = ["PENDING", "CONFIRMED", "SHIPPED", "DELIVERED", "CANCELLED"]


def _orders(*statuses):
    return [BeerOrderRead.model_validate(make_order(i, status=s)) for i, s in enumerate(statuses, start=1)]


class TestBadges:

    def test_each_status_has_its_own_badge(self):
        badges = {status_badge(s) for s in ALL_STATUSES}

        assert len(badges) == 5
        assert NEUTRAL_BADGE not in badges

    @pytest.mark.parametrize("value", ["ON_HOLD", "", None, "pending"])
    def test_unknown_status_is_neutral(self, value):
        assert status_badge(value) == NEUTRAL_BADGE


class TestTransitions:

    @pytest.mark.parametrize("current,expected", [
        ("PENDING", [BeerOrderStatus.CONFIRMED, BeerOrderStatus.CANCELLED]),
        ("CONFIRMED", [BeerOrderStatus.SHIPPED, BeerOrderStatus.CANCELLED]),
        ("SHIPPED", [BeerOrderStatus.DELIVERED]),
        ("DELIVERED", []),
        ("CANCELLED", []),
        ("ON_HOLD", []),
    ])
    def test_allowed_transitions(self, current, expected):
        assert allowed_transitions(current) == expected

    def test_can_transition(self):
        assert can_transition("PENDING", "CONFIRMED")
        assert can_transition(BeerOrderStatus.SHIPPED, BeerOrderStatus.DELIVERED)
        assert not can_transition("PENDING", "SHIPPED")
        assert not can_transition("DELIVERED", "PENDING")
        assert not can_transition("PENDING", "LOST")

    def test_check_transition_raises_with_message(self):
        order = _orders("DELIVERED")[0]

        with pytest.raises(StatusTransitionError) as exc:
            check_transition(order, BeerOrderStatus.CANCELLED)

        assert exc.value.message == "Cannot change order #1 from DELIVERED to CANCELLED"


class TestShipmentEligibility:

    def test_only_confirmed_and_shipped_are_candidates(self):
        orders = _orders(*ALL_STATUSES)

        candidates = ShipmentOrderSelector().candidates(orders)

        assert [o.status for o in candidates] == ["CONFIRMED", "SHIPPED"]
        assert [is_shipment_eligible(o) for o in orders] == [False, True, True, False, False]

    def test_order_field_locked_when_editing(self):
        selector = ShipmentOrderSelector()

        assert selector.is_disabled(editing=True) is True
        assert selector.is_disabled(editing=False) is False

    def test_label(self):
        orders = _orders("CONFIRMED")
        selector = ShipmentOrderSelector()

        assert selector.label(1, orders) == "#1 - CUST-1"
        assert selector.label(42, orders) == "Order #42"
