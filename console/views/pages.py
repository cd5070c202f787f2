import asyncio
from typing import Any, Dict, List, Optional

from core.errors import ConsoleError, ShipmentTargetError
from core.status import (
    ShipmentOrderSelector,
    allowed_transitions,
    check_transition,
    status_badge,
)
from schemas.base import CamelModel
from schemas.beer_orders import BeerOrderRead, BeerOrderStatus, OrderDraftIn
from schemas.beers import BeerCreate, BeerRead, BeerUpdate
from schemas.customers import CustomerCreate, CustomerRead, CustomerUpdate
from schemas.shipments import ShipmentCreate, ShipmentRead, ShipmentUpdate
from services import BeerOrderService, BeerService, CustomerService, ShipmentService
from workflows.order_composition import OrderComposer, OrderDraft
from .base import PageView


class PageSnapshot(CamelModel):
    # set when the reload after a successful change failed; the change itself went through
    error: Optional[str] = None


class BeersPage(PageSnapshot):
    beers: List[BeerRead]


class CustomersPage(PageSnapshot):
    customers: List[CustomerRead]


class BeerOrderRow(CamelModel):
    order: BeerOrderRead
    badge: str
    allowed_transitions: List[BeerOrderStatus]


class BeerOrdersPage(PageSnapshot):
    orders: List[BeerOrderRow]
    beers: List[BeerRead]
    status_options: List[BeerOrderStatus]


class ShipmentRow(CamelModel):
    shipment: ShipmentRead
    order_label: str
    order_locked: bool


class ShipmentsPage(PageSnapshot):
    shipments: List[ShipmentRow]
    order_candidates: List[BeerOrderRead]


class BeersView(PageView):
    name = "beers"

    def __init__(self, service: BeerService):
        super().__init__()
        self.service = service
        self.beers: List[BeerRead] = []

    async def fetch(self) -> Dict[str, Any]:
        return {"beers": await self.service.get_all()}

    def apply(self, data: Dict[str, Any]) -> None:
        self.beers = data["beers"]

    def snapshot(self) -> BeersPage:
        return BeersPage(beers=self.beers, error=self.error)

    async def create(self, payload: BeerCreate) -> BeerRead:
        return await self.perform(self.service.create(payload))

    async def update(self, beer_id: int, payload: BeerUpdate) -> BeerRead:
        return await self.perform(self.service.update(beer_id, payload))

    async def delete(self, beer_id: int) -> None:
        await self.perform(self.service.delete(beer_id))


class CustomersView(PageView):
    name = "customers"

    def __init__(self, service: CustomerService):
        super().__init__()
        self.service = service
        self.customers: List[CustomerRead] = []

    async def fetch(self) -> Dict[str, Any]:
        return {"customers": await self.service.get_all()}

    def apply(self, data: Dict[str, Any]) -> None:
        self.customers = data["customers"]

    def snapshot(self) -> CustomersPage:
        return CustomersPage(customers=self.customers, error=self.error)

    async def create(self, payload: CustomerCreate) -> CustomerRead:
        return await self.perform(self.service.create(payload))

    async def update(self, customer_id: int, payload: CustomerUpdate) -> CustomerRead:
        return await self.perform(self.service.update(customer_id, payload))

    async def delete(self, customer_id: int) -> None:
        await self.perform(self.service.delete(customer_id))


class BeerOrdersView(PageView):
    name = "beer orders"

    def __init__(self, orders: BeerOrderService, beers: BeerService):
        super().__init__()
        self.order_service = orders
        self.beer_service = beers
        self.orders: List[BeerOrderRead] = []
        self.beers: List[BeerRead] = []

    async def fetch(self) -> Dict[str, Any]:
        orders, beers = await asyncio.gather(self.order_service.get_all(), self.beer_service.get_all())
        return {"orders": orders, "beers": beers}

    def apply(self, data: Dict[str, Any]) -> None:
        self.orders = data["orders"]
        self.beers = data["beers"]

    def snapshot(self) -> BeerOrdersPage:
        rows = [
            BeerOrderRow(order=o, badge=status_badge(o.status), allowed_transitions=allowed_transitions(o.status))
            for o in self.orders
        ]
        return BeerOrdersPage(orders=rows, beers=self.beers, status_options=list(BeerOrderStatus), error=self.error)

    def composer(self, draft: Optional[OrderDraft] = None) -> OrderComposer:
        known = [b.id for b in self.beers] if self.loaded else None
        return OrderComposer(self.order_service, draft=draft, on_submitted=self.load, known_beer_ids=known)

    async def submit_draft(self, form: OrderDraftIn) -> BeerOrderRead:
        composer = self.composer(OrderDraft.from_form(form))
        try:
            return await composer.submit()
        finally:
            self.action_error = composer.last_error

    async def change_status(self, order_id: int, status: BeerOrderStatus) -> BeerOrderRead:
        order = next((o for o in self.orders if o.id == order_id), None)
        try:
            if order is None:
                order = await self.order_service.get_by_id(order_id)
            check_transition(order, status)
        except ConsoleError as e:
            self.action_error = e.message
            raise
        return await self.perform(self.order_service.update_status(order_id, status))

    async def delete(self, order_id: int) -> None:
        await self.perform(self.order_service.delete(order_id))


class ShipmentsView(PageView):
    name = "shipments"

    def __init__(self, shipments: ShipmentService, orders: BeerOrderService):
        super().__init__()
        self.shipment_service = shipments
        self.order_service = orders
        self.selector = ShipmentOrderSelector()
        self.shipments: List[ShipmentRead] = []
        self.orders: List[BeerOrderRead] = []

    async def fetch(self) -> Dict[str, Any]:
        shipments, orders = await asyncio.gather(self.shipment_service.get_all(), self.order_service.get_all())
        return {"shipments": shipments, "orders": orders}

    def apply(self, data: Dict[str, Any]) -> None:
        self.shipments = data["shipments"]
        self.orders = data["orders"]

    def snapshot(self) -> ShipmentsPage:
        # rows are existing shipments, so their order link is never editable
        locked = self.selector.is_disabled(editing=True)
        rows = [
            ShipmentRow(shipment=s, order_label=self.selector.label(s.beer_order_id, self.orders), order_locked=locked)
            for s in self.shipments
        ]
        return ShipmentsPage(shipments=rows, order_candidates=self.selector.candidates(self.orders), error=self.error)

    async def create(self, payload: ShipmentCreate) -> ShipmentRead:
        candidate_ids = {o.id for o in self.selector.candidates(self.orders)}
        if payload.beer_order_id not in candidate_ids:
            err = ShipmentTargetError(f"Order #{payload.beer_order_id} is not confirmed or shipped")
            self.action_error = err.message
            raise err
        return await self.perform(self.shipment_service.create(payload))

    async def update(self, shipment_id: int, payload: ShipmentUpdate) -> ShipmentRead:
        return await self.perform(self.shipment_service.update(shipment_id, payload))

    async def delete(self, shipment_id: int) -> None:
        await self.perform(self.shipment_service.delete(shipment_id))
