from fastapi import APIRouter, Depends

from core.dependencies import (
    get_beer_order_service,
    get_beer_service,
    get_customer_service,
    get_shipment_service,
)
from routers.common import load_page
from services import BeerOrderService, BeerService, CustomerService, ShipmentService
from views.dashboard import DashboardRead, DashboardView

router = APIRouter()


@router.get("/", response_model=DashboardRead)
async def get_dashboard(
    beers: BeerService = Depends(get_beer_service),
    customers: CustomerService = Depends(get_customer_service),
    orders: BeerOrderService = Depends(get_beer_order_service),
    shipments: ShipmentService = Depends(get_shipment_service),
):
    view = await load_page(DashboardView(beers, customers, orders, shipments))
    return view.stats
