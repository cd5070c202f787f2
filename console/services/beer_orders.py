from typing import List, Optional

from schemas.beer_orders import (
    BeerOrderRead,
    BeerOrderStatus,
    BeerOrderStatusUpdate,
    CreateBeerOrderCommand,
)
from .base import ResourceService


class BeerOrderService(ResourceService[BeerOrderRead]):
    path = "/beer-orders"
    read_model = BeerOrderRead
    filter_param = "customerRef"

    async def get_all(self, customer_ref: Optional[str] = None) -> List[BeerOrderRead]:
        return await super().get_all(customer_ref)

    async def create(self, command: CreateBeerOrderCommand) -> BeerOrderRead:
        return await self._create(command)

    async def update_status(self, order_id: int, status: BeerOrderStatus) -> BeerOrderRead:
        # status has its own partial update; orders have no general field edit
        payload = BeerOrderStatusUpdate(status=status)
        data = await self.client.put(f"{self._item_path(order_id)}/status", payload.to_payload())
        return self._read(data)
