from schemas.customers import CustomerCreate, CustomerRead, CustomerUpdate
from .base import ResourceService


class CustomerService(ResourceService[CustomerRead]):
    path = "/customers"
    read_model = CustomerRead

    async def create(self, payload: CustomerCreate) -> CustomerRead:
        return await self._create(payload)

    async def update(self, customer_id: int, payload: CustomerUpdate) -> CustomerRead:
        return await self._update(customer_id, payload)
