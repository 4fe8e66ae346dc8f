from typing import List

from fastapi import APIRouter, Depends, status

from app.api.deps import get_product_service
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
async def get_products(product_service: ProductService = Depends(get_product_service)):
    """Get all products."""
    products = await product_service.get_all()
    return [ProductResponse.model_validate(product) for product in products]


@router.get("/{id}", response_model=ProductResponse)
async def get_product(id: str, product_service: ProductService = Depends(get_product_service)):
    """Get a product by ID."""
    product = await product_service.get_by_id(id)
    return ProductResponse.model_validate(product)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreate,
    product_service: ProductService = Depends(get_product_service)
):
    """Create a product."""
    product = await product_service.create(request.model_dump())
    return ProductResponse.model_validate(product)


@router.put("/{id}", response_model=ProductResponse)
async def update_product(
    id: str,
    request: ProductUpdate,
    product_service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    Price changes do not affect carts: cart items keep the price they were
    added with until they are added or updated again.
    """
    product = await product_service.update(id, request.model_dump())
    return ProductResponse.model_validate(product)


@router.delete("/{id}", response_model=ProductResponse)
async def delete_product(id: str, product_service: ProductService = Depends(get_product_service)):
    """Delete a product and return the removed record."""
    product = await product_service.delete(id)
    return ProductResponse.model_validate(product)
