from fastapi import Depends, Request

from core.api_client import ApiClient
from services import BeerOrderService, BeerService, CustomerService, ShipmentService


def get_api_client(request: Request) -> ApiClient:
    return request.app.state.api_client


def get_beer_service(client: ApiClient = Depends(get_api_client)) -> BeerService:
    return BeerService(client)


def get_customer_service(client: ApiClient = Depends(get_api_client)) -> CustomerService:
    return CustomerService(client)


def get_beer_order_service(client: ApiClient = Depends(get_api_client)) -> BeerOrderService:
    return BeerOrderService(client)


def get_shipment_service(client: ApiClient = Depends(get_api_client)) -> ShipmentService:
    return ShipmentService(client)
