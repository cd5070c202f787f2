from fastapi import APIRouter, Depends, status

from core.dependencies import get_customer_service
from routers.common import load_page, run_action
from schemas.customers import CustomerCreate, CustomerUpdate
from services import CustomerService
from views.pages import CustomersPage, CustomersView

router = APIRouter()


@router.get("/", response_model=CustomersPage)
async def list_customers(service: CustomerService = Depends(get_customer_service)):
    view = await load_page(CustomersView(service))
    return view.snapshot()


@router.post("/", response_model=CustomersPage, status_code=status.HTTP_201_CREATED)
async def create_customer(payload: CustomerCreate, service: CustomerService = Depends(get_customer_service)):
    view = CustomersView(service)
    await run_action(view, view.create(payload))
    return view.snapshot()


@router.put("/{customer_id}", response_model=CustomersPage)
async def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    view = CustomersView(service)
    await run_action(view, view.update(customer_id, payload))
    return view.snapshot()


@router.delete("/{customer_id}", response_model=CustomersPage)
async def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    view = CustomersView(service)
    await run_action(view, view.delete(customer_id))
    return view.snapshot()
