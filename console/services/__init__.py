from .beers import BeerService
from .customers import CustomerService
from .beer_orders import BeerOrderService
from .shipments import ShipmentService

__all__ = ["BeerService", "CustomerService", "BeerOrderService", "ShipmentService"]
