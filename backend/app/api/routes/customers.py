from typing import List

from fastapi import APIRouter, Depends, status

from app.api.deps import get_customer_service
from app.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse
from app.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=List[CustomerResponse])
async def get_customers(customer_service: CustomerService = Depends(get_customer_service)):
    """Get all customers."""
    customers = await customer_service.get_all()
    return [CustomerResponse.model_validate(customer) for customer in customers]


@router.get("/{id}", response_model=CustomerResponse)
async def get_customer(id: str, customer_service: CustomerService = Depends(get_customer_service)):
    """Get a customer by ID."""
    customer = await customer_service.get_by_id(id)
    return CustomerResponse.model_validate(customer)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CustomerCreate,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """Create a customer without login credentials."""
    customer = await customer_service.create(request.model_dump())
    return CustomerResponse.model_validate(customer)


@router.put("/{id}", response_model=CustomerResponse)
async def update_customer(
    id: str,
    request: CustomerUpdate,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """
    Update a customer.

    Only the provided fields are changed; at least one is required.
    """
    customer = await customer_service.update(id, request.model_dump())
    return CustomerResponse.model_validate(customer)


@router.delete("/{id}", response_model=CustomerResponse)
async def delete_customer(id: str, customer_service: CustomerService = Depends(get_customer_service)):
    """Delete a customer and return the removed record."""
    customer = await customer_service.delete(id)
    return CustomerResponse.model_validate(customer)
