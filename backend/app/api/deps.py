from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.database import get_database
from app.core.exceptions import PermissionDeniedError
from app.core.security import decode_access_token
from app.models.customer import Customer
from app.repositories.mongodb.customer import MongoCustomerRepository
from app.repositories.mongodb.order import MongoOrderRepository
from app.repositories.mongodb.product import MongoProductRepository
from app.services.auth_service import AuthService
from app.services.cart_service import CartService
from app.services.customer_service import CustomerService
from app.services.order_service import OrderService
from app.services.product_service import ProductService

# Security scheme
security = HTTPBearer()


async def get_db() -> AsyncIOMotorDatabase:
    """Dependency to get database instance."""
    return get_database()


async def get_customer_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> CustomerService:
    return CustomerService(MongoCustomerRepository(db))


async def get_product_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> ProductService:
    return ProductService(MongoProductRepository(db))


async def get_order_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> OrderService:
    return OrderService(MongoOrderRepository(db))


async def get_auth_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> AuthService:
    return AuthService(MongoCustomerRepository(db))


async def get_cart_service(request: Request) -> CartService:
    """
    Dependency returning the application-wide cart service.

    A single instance is shared so its per-customer locks cover every request.
    """
    return request.app.state.cart_service


async def get_current_customer(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    customer_service: CustomerService = Depends(get_customer_service)
) -> Customer:
    """
    Dependency to get the current authenticated customer.

    Validates the JWT token and loads the customer it was issued for.

    Raises:
        HTTPException: If token is invalid or customer not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise credentials_exception

    customer_id: str = payload.get("sub")
    if customer_id is None:
        raise credentials_exception

    customer = await customer_service.customer_repo.get_by_id(customer_id)
    if customer is None:
        raise credentials_exception

    return customer


async def get_cart_owner_id(
    id: str,
    current_customer: Customer = Depends(get_current_customer)
) -> str:
    """
    Dependency for cart routes: the path customer must be the token's customer.
    """
    if current_customer.id != id:
        raise PermissionDeniedError()
    return id
