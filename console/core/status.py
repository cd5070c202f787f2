from typing import Dict, FrozenSet, Iterable, List, Optional, Union

from core.errors import StatusTransitionError
from schemas.beer_orders import BeerOrderRead, BeerOrderStatus


NEUTRAL_BADGE = "badge-neutral"

STATUS_BADGES: Dict[BeerOrderStatus, str] = {
    BeerOrderStatus.PENDING: "badge-pending",
    BeerOrderStatus.CONFIRMED: "badge-confirmed",
    BeerOrderStatus.SHIPPED: "badge-shipped",
    BeerOrderStatus.DELIVERED: "badge-delivered",
    BeerOrderStatus.CANCELLED: "badge-cancelled",
}

# The remote service owns the real rules; this only limits what the console offers.
TRANSITIONS: Dict[BeerOrderStatus, FrozenSet[BeerOrderStatus]] = {
    BeerOrderStatus.PENDING: frozenset({BeerOrderStatus.CONFIRMED, BeerOrderStatus.CANCELLED}),
    BeerOrderStatus.CONFIRMED: frozenset({BeerOrderStatus.SHIPPED, BeerOrderStatus.CANCELLED}),
    BeerOrderStatus.SHIPPED: frozenset({BeerOrderStatus.DELIVERED}),
    BeerOrderStatus.DELIVERED: frozenset(),
    BeerOrderStatus.CANCELLED: frozenset(),
}

SHIPPABLE_STATUSES = frozenset({BeerOrderStatus.CONFIRMED, BeerOrderStatus.SHIPPED})


def parse_status(value: Union[str, BeerOrderStatus, None]) -> Optional[BeerOrderStatus]:
    if value is None:
        return None
    try:
        return BeerOrderStatus(value)
    except ValueError:
        return None


def status_badge(value: Union[str, BeerOrderStatus, None]) -> str:
    s = parse_status(value)
    if s is None:
        return NEUTRAL_BADGE
    return STATUS_BADGES[s]


def allowed_transitions(value: Union[str, BeerOrderStatus, None]) -> List[BeerOrderStatus]:
    """Legal next statuses, in declaration order. Unknown statuses offer nothing."""
    s = parse_status(value)
    if s is None:
        return []
    targets = TRANSITIONS[s]
    return [t for t in BeerOrderStatus if t in targets]


def can_transition(current: Union[str, BeerOrderStatus, None], target: Union[str, BeerOrderStatus]) -> bool:
    t = parse_status(target)
    return t is not None and t in allowed_transitions(current)


def check_transition(order: BeerOrderRead, target: BeerOrderStatus) -> None:
    if not can_transition(order.status, target):
        raise StatusTransitionError(
            f"Cannot change order #{order.id} from {order.status or 'UNKNOWN'} to {BeerOrderStatus(target).value}"
        )


def is_shipment_eligible(order: BeerOrderRead) -> bool:
    return parse_status(order.status) in SHIPPABLE_STATUSES


class ShipmentOrderSelector:
    """Which orders the shipment form may point at."""

    def candidates(self, orders: Iterable[BeerOrderRead]) -> List[BeerOrderRead]:
        return [o for o in orders if is_shipment_eligible(o)]

    def is_disabled(self, editing: bool) -> bool:
        # a shipment's order is fixed after creation
        return editing

    def label(self, beer_order_id: int, orders: Iterable[BeerOrderRead]) -> str:
        for o in orders:
            if o.id == beer_order_id:
                return f"#{o.id} - {o.customer_ref}"
        return f"Order #{beer_order_id}"
