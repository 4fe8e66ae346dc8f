from fastapi import APIRouter, Depends

from app.api.deps import get_cart_owner_id, get_cart_service
from app.schemas.cart import (
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    MessageResponse
)
from app.services.cart_service import CartService

router = APIRouter()


@router.post("/{id}/cart/item", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    customer_id: str = Depends(get_cart_owner_id),
    cart_service: CartService = Depends(get_cart_service)
):
    """
    Add a product to the customer's cart.

    Creates the cart if the customer has none. If the product is already in
    the cart, its quantity is increased.
    """
    cart = await cart_service.add_to_cart(
        customer_id=customer_id,
        product_id=request.product_id,
        product_name=request.product_name,
        quantity=request.quantity
    )
    return CartResponse.from_cart(cart)


@router.get("/{id}/cart", response_model=CartResponse)
async def get_cart(
    customer_id: str = Depends(get_cart_owner_id),
    cart_service: CartService = Depends(get_cart_service)
):
    """
    Get the customer's cart.

    Returns 404 "customer's cart is empty" when the customer has no cart.
    """
    cart = await cart_service.get_cart_by_customer_id(customer_id)
    return CartResponse.from_cart(cart)


@router.put("/{id}/cart/item", response_model=CartResponse)
async def update_cart_item(
    request: UpdateCartItemRequest,
    customer_id: str = Depends(get_cart_owner_id),
    cart_service: CartService = Depends(get_cart_service)
):
    """
    Set the quantity of an item already in the cart.
    """
    cart = await cart_service.update_cart_item(
        customer_id=customer_id,
        product_id=request.product_id,
        quantity=request.quantity
    )
    return CartResponse.from_cart(cart)


@router.delete("/{id}/cart/item/{product_id}", response_model=CartResponse)
async def remove_cart_item(
    product_id: str,
    customer_id: str = Depends(get_cart_owner_id),
    cart_service: CartService = Depends(get_cart_service)
):
    """
    Remove an item from the cart.
    """
    cart = await cart_service.remove_cart_item(customer_id, product_id)
    return CartResponse.from_cart(cart)


@router.delete("/{id}/cart", response_model=MessageResponse)
async def clear_cart(
    customer_id: str = Depends(get_cart_owner_id),
    cart_service: CartService = Depends(get_cart_service)
):
    """
    Delete the customer's cart. Succeeds even if there was no cart.
    """
    await cart_service.clear_cart(customer_id)
    return MessageResponse(message="Cart cleared successfully")
