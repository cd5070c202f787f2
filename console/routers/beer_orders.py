from fastapi import APIRouter, Depends, status

from core.dependencies import get_beer_order_service, get_beer_service
from routers.common import load_page, run_action
from schemas.beer_orders import BeerOrderStatusUpdate, OrderDraftIn
from services import BeerOrderService, BeerService
from views.pages import BeerOrdersPage, BeerOrdersView

router = APIRouter()


def _view(orders: BeerOrderService, beers: BeerService) -> BeerOrdersView:
    return BeerOrdersView(orders, beers)


@router.get("/", response_model=BeerOrdersPage)
async def list_beer_orders(
    orders: BeerOrderService = Depends(get_beer_order_service),
    beers: BeerService = Depends(get_beer_service),
):
    view = await load_page(_view(orders, beers))
    return view.snapshot()


@router.post("/", response_model=BeerOrdersPage, status_code=status.HTTP_201_CREATED)
async def submit_beer_order(
    draft: OrderDraftIn,
    orders: BeerOrderService = Depends(get_beer_order_service),
    beers: BeerService = Depends(get_beer_service),
):
    # load first so the draft is checked against the current beer catalog
    view = await load_page(_view(orders, beers))
    await run_action(view, view.submit_draft(draft))
    return view.snapshot()


@router.put("/{order_id}/status", response_model=BeerOrdersPage)
async def update_beer_order_status(
    order_id: int,
    payload: BeerOrderStatusUpdate,
    orders: BeerOrderService = Depends(get_beer_order_service),
    beers: BeerService = Depends(get_beer_service),
):
    view = await load_page(_view(orders, beers))
    await run_action(view, view.change_status(order_id, payload.status))
    return view.snapshot()


@router.delete("/{order_id}", response_model=BeerOrdersPage)
async def delete_beer_order(
    order_id: int,
    orders: BeerOrderService = Depends(get_beer_order_service),
    beers: BeerService = Depends(get_beer_service),
):
    view = _view(orders, beers)
    await run_action(view, view.delete(order_id))
    return view.snapshot()
