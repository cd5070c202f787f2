# Console Test Suite - Shared Fixtures
#
# This module provides:
# - A scripted stand-in for the remote beer service (httpx.MockTransport)
# - ApiClient / service fixtures bound to that stand-in
# - A FastAPI TestClient with the API client dependency overridden
# - Small factories for wire-format (camelCase) entities

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from core.api_client import ApiClient
from core.dependencies import get_api_client
from services import BeerOrderService, BeerService, CustomerService, ShipmentService


BASE_URL = "http://beer-service.test/api/v1"
BASE_PATH = "/api/v1"


# =============================================================================
# REMOTE SERVICE STAND-IN
# =============================================================================

@dataclass
class Call:
    method: str
    path: str
    params: Dict[str, str]
    body: Any
    content_type: Optional[str]


class StubRemote:
    """
    Answers requests from a table of (method, path) -> response and records
    every call it receives. Unregistered routes answer 404.
    """

    def __init__(self):
        self.routes: Dict[tuple, Dict[str, Any]] = {}
        self.calls: List[Call] = []

    def reply(self, method: str, path: str, status_code: int = 200, json_body: Any = None, content: Optional[bytes] = None):
        self.routes[(method, path)] = {"status": status_code, "json": json_body, "content": content}

    def fail(self, method: str, path: str, exc: Exception):
        self.routes[(method, path)] = {"raise": exc}

    def calls_to(self, method: str, path: str) -> List[Call]:
        return [c for c in self.calls if c.method == method and c.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path[len(BASE_PATH):]
        body = json.loads(request.content) if request.content else None
        self.calls.append(Call(
            method=request.method,
            path=path,
            params=dict(request.url.params),
            body=body,
            content_type=request.headers.get("content-type"),
        ))

        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"detail": f"No route {request.method} {path}"})
        if "raise" in route:
            raise route["raise"]
        if route["content"] is not None:
            return httpx.Response(route["status"], content=route["content"])
        if route["json"] is None:
            return httpx.Response(route["status"])
        return httpx.Response(route["status"], json=route["json"])


# =============================================================================
# FACTORIES
# =============================================================================

def make_beer(beer_id: int, quantity_on_hand: int = 50, **overrides) -> Dict[str, Any]:
    data = {
        "id": beer_id,
        "version": 1,
        "beerName": f"Beer {beer_id}",
        "beerStyle": "IPA",
        "upc": f"0{beer_id:011d}",
        "quantityOnHand": quantity_on_hand,
        "price": 12.99,
        "createdDate": "2024-01-01T09:00:00",
        "updatedDate": "2024-01-02T09:00:00",
    }
    data.update(overrides)
    return data


def make_customer(customer_id: int, **overrides) -> Dict[str, Any]:
    data = {
        "id": customer_id,
        "version": 0,
        "name": f"Customer {customer_id}",
        "email": f"customer{customer_id}@example.com",
        "phoneNumber": "555-0100",
        "addressLine1": "1 Main St",
        "addressLine2": None,
        "city": "Springfield",
        "state": "IL",
        "postalCode": "62701",
        "createdDate": "2024-01-01T09:00:00",
        "updatedDate": "2024-01-01T09:00:00",
    }
    data.update(overrides)
    return data


def make_order(order_id: int, status: str = "PENDING", created: str = "2024-03-01T10:00:00", **overrides) -> Dict[str, Any]:
    data = {
        "id": order_id,
        "version": 0,
        "customerRef": f"CUST-{order_id}",
        "paymentAmount": 25.98,
        "status": status,
        "createdDate": created,
        "updatedDate": created,
        "beerOrderLines": [
            {"id": order_id * 10, "version": 0, "beerId": 1, "orderQuantity": 2, "quantityAllocated": 2, "status": "ALLOCATED"},
        ],
    }
    data.update(overrides)
    return data


def make_shipment(shipment_id: int, beer_order_id: int, **overrides) -> Dict[str, Any]:
    data = {
        "id": shipment_id,
        "version": 3,
        "shipmentDate": "2024-03-05T14:30:00",
        "carrier": "UPS",
        "trackingNumber": f"1Z{shipment_id:08d}",
        "beerOrderId": beer_order_id,
        "createdDate": "2024-03-05T14:30:00",
        "updatedDate": "2024-03-05T14:30:00",
    }
    data.update(overrides)
    return data


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def remote() -> StubRemote:
    return StubRemote()


@pytest.fixture
def api_client(remote: StubRemote) -> ApiClient:
    transport = httpx.MockTransport(remote.handler)
    return ApiClient(BASE_URL, client=httpx.AsyncClient(transport=transport))


@pytest.fixture
def beer_service(api_client: ApiClient) -> BeerService:
    return BeerService(api_client)


@pytest.fixture
def customer_service(api_client: ApiClient) -> CustomerService:
    return CustomerService(api_client)


@pytest.fixture
def order_service(api_client: ApiClient) -> BeerOrderService:
    return BeerOrderService(api_client)


@pytest.fixture
def shipment_service(api_client: ApiClient) -> ShipmentService:
    return ShipmentService(api_client)


@pytest.fixture
def console(api_client: ApiClient):
    from main import app

    app.dependency_overrides[get_api_client] = lambda: api_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
