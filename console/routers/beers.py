from fastapi import APIRouter, Depends, status

from core.dependencies import get_beer_service
from routers.common import load_page, run_action
from schemas.beers import BeerCreate, BeerUpdate
from services import BeerService
from views.pages import BeersPage, BeersView

router = APIRouter()


@router.get("/", response_model=BeersPage)
async def list_beers(service: BeerService = Depends(get_beer_service)):
    view = await load_page(BeersView(service))
    return view.snapshot()


@router.post("/", response_model=BeersPage, status_code=status.HTTP_201_CREATED)
async def create_beer(payload: BeerCreate, service: BeerService = Depends(get_beer_service)):
    view = BeersView(service)
    await run_action(view, view.create(payload))
    return view.snapshot()


@router.put("/{beer_id}", response_model=BeersPage)
async def update_beer(beer_id: int, payload: BeerUpdate, service: BeerService = Depends(get_beer_service)):
    view = BeersView(service)
    await run_action(view, view.update(beer_id, payload))
    return view.snapshot()


@router.delete("/{beer_id}", response_model=BeersPage)
async def delete_beer(beer_id: int, service: BeerService = Depends(get_beer_service)):
    view = BeersView(service)
    await run_action(view, view.delete(beer_id))
    return view.snapshot()
