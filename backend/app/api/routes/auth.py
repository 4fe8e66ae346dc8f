from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, get_current_customer
from app.models.customer import Customer
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from app.schemas.customer import CustomerResponse
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new customer account.
    """
    customer = await auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
        phone=request.phone
    )
    return CustomerResponse.model_validate(customer)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Login with email and password.

    Returns the customer and a JWT access token on success.
    """
    customer, token = await auth_service.login(request.email, request.password)
    return LoginResponse(customer=CustomerResponse.model_validate(customer), token=token)


@router.get("/me", response_model=CustomerResponse)
async def get_me(current_customer: Customer = Depends(get_current_customer)):
    """
    Get the current authenticated customer's information.
    """
    return CustomerResponse.model_validate(current_customer)
