from typing import List

from fastapi import APIRouter, Depends, status

from app.api.deps import get_order_service
from app.schemas.order import OrderCreate, OrderUpdate, OrderResponse
from app.services.order_service import OrderService

router = APIRouter()


@router.get("", response_model=List[OrderResponse])
async def get_orders(order_service: OrderService = Depends(get_order_service)):
    """Get all orders."""
    orders = await order_service.get_all()
    return [OrderResponse.model_validate(order) for order in orders]


@router.get("/{id}", response_model=OrderResponse)
async def get_order(id: str, order_service: OrderService = Depends(get_order_service)):
    """Get an order by ID."""
    order = await order_service.get_by_id(id)
    return OrderResponse.model_validate(order)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: OrderCreate,
    order_service: OrderService = Depends(get_order_service)
):
    """Create an order."""
    order = await order_service.create(request.model_dump())
    return OrderResponse.model_validate(order)


@router.put("/{id}", response_model=OrderResponse)
async def update_order(
    id: str,
    request: OrderUpdate,
    order_service: OrderService = Depends(get_order_service)
):
    """Update an order. Only non-empty fields are changed."""
    order = await order_service.update(id, request.model_dump())
    return OrderResponse.model_validate(order)


@router.delete("/{id}", response_model=OrderResponse)
async def delete_order(id: str, order_service: OrderService = Depends(get_order_service)):
    """Delete an order and return the removed record."""
    order = await order_service.delete(id)
    return OrderResponse.model_validate(order)
