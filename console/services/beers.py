from schemas.beers import BeerCreate, BeerRead, BeerUpdate
from .base import ResourceService


class BeerService(ResourceService[BeerRead]):
    path = "/beers"
    read_model = BeerRead

    async def create(self, payload: BeerCreate) -> BeerRead:
        return await self._create(payload)

    async def update(self, beer_id: int, payload: BeerUpdate) -> BeerRead:
        return await self._update(beer_id, payload)
