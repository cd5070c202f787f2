from fastapi import APIRouter, Depends, status

from core.dependencies import get_beer_order_service, get_shipment_service
from routers.common import load_page, run_action
from schemas.shipments import ShipmentCreate, ShipmentUpdate
from services import BeerOrderService, ShipmentService
from views.pages import ShipmentsPage, ShipmentsView

router = APIRouter()


@router.get("/", response_model=ShipmentsPage)
async def list_shipments(
    shipments: ShipmentService = Depends(get_shipment_service),
    orders: BeerOrderService = Depends(get_beer_order_service),
):
    view = await load_page(ShipmentsView(shipments, orders))
    return view.snapshot()


@router.post("/", response_model=ShipmentsPage, status_code=status.HTTP_201_CREATED)
async def create_shipment(
    payload: ShipmentCreate,
    shipments: ShipmentService = Depends(get_shipment_service),
    orders: BeerOrderService = Depends(get_beer_order_service),
):
    # candidate orders come from a fresh load
    view = await load_page(ShipmentsView(shipments, orders))
    await run_action(view, view.create(payload))
    return view.snapshot()


@router.put("/{shipment_id}", response_model=ShipmentsPage)
async def update_shipment(
    shipment_id: int,
    payload: ShipmentUpdate,
    shipments: ShipmentService = Depends(get_shipment_service),
    orders: BeerOrderService = Depends(get_beer_order_service),
):
    view = ShipmentsView(shipments, orders)
    await run_action(view, view.update(shipment_id, payload))
    return view.snapshot()


@router.delete("/{shipment_id}", response_model=ShipmentsPage)
async def delete_shipment(
    shipment_id: int,
    shipments: ShipmentService = Depends(get_shipment_service),
    orders: BeerOrderService = Depends(get_beer_order_service),
):
    view = ShipmentsView(shipments, orders)
    await run_action(view, view.delete(shipment_id))
    return view.snapshot()
