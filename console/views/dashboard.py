import asyncio
from typing import Any, Dict, List, Optional, Sequence

from core.config import settings
from schemas.base import CamelModel
from schemas.beer_orders import BeerOrderRead
from schemas.beers import BeerRead
from services import BeerOrderService, BeerService, CustomerService, ShipmentService
from .base import PageView


def recent_orders(orders: Sequence[BeerOrderRead], limit: Optional[int] = None) -> List[BeerOrderRead]:
    """Newest orders first. Equal timestamps keep their source order; undated orders go last."""
    if limit is None:
        limit = settings.recent_orders_limit
    ordered = sorted(
        orders,
        key=lambda o: (o.created_date is not None, o.created_date),
        reverse=True,
    )
    return ordered[:limit]


def low_stock_beers(beers: Sequence[BeerRead], threshold: Optional[int] = None) -> List[BeerRead]:
    if threshold is None:
        threshold = settings.low_stock_threshold
    return [b for b in beers if b.quantity_on_hand < threshold]


class DashboardRead(CamelModel):
    total_beers: int
    total_customers: int
    total_orders: int
    total_shipments: int
    recent_orders: List[BeerOrderRead]
    low_stock_beers: List[BeerRead]


class DashboardView(PageView):
    name = "dashboard"

    def __init__(
        self,
        beers: BeerService,
        customers: CustomerService,
        orders: BeerOrderService,
        shipments: ShipmentService,
    ):
        super().__init__()
        self.beers = beers
        self.customers = customers
        self.orders = orders
        self.shipments = shipments
        self.stats: Optional[DashboardRead] = None

    async def fetch(self) -> Dict[str, Any]:
        beers, customers, orders, shipments = await asyncio.gather(
            self.beers.get_all(),
            self.customers.get_all(),
            self.orders.get_all(),
            self.shipments.get_all(),
        )
        return {"beers": beers, "customers": customers, "orders": orders, "shipments": shipments}

    def apply(self, data: Dict[str, Any]) -> None:
        self.stats = DashboardRead(
            total_beers=len(data["beers"]),
            total_customers=len(data["customers"]),
            total_orders=len(data["orders"]),
            total_shipments=len(data["shipments"]),
            recent_orders=recent_orders(data["orders"]),
            low_stock_beers=low_stock_beers(data["beers"]),
        )
