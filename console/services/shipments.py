from typing import List, Optional

from schemas.shipments import ShipmentCreate, ShipmentRead, ShipmentUpdate
from .base import ResourceService


class ShipmentService(ResourceService[ShipmentRead]):
    path = "/beer-order-shipments"
    read_model = ShipmentRead
    filter_param = "beerOrderId"

    async def get_all(self, beer_order_id: Optional[int] = None) -> List[ShipmentRead]:
        return await super().get_all(beer_order_id)

    async def create(self, payload: ShipmentCreate) -> ShipmentRead:
        return await self._create(payload)

    async def update(self, shipment_id: int, payload: ShipmentUpdate) -> ShipmentRead:
        # ShipmentCreate is a subclass; dump only the editable fields
        editable = payload.model_dump(include=set(ShipmentUpdate.model_fields))
        return await self._update(shipment_id, ShipmentUpdate(**editable))
