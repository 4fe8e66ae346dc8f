"""
Application error taxonomy.

Every error carries the HTTP status it maps to; the handler registered in
`app.main` renders them as `{"error": message}`.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to API callers."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class RateLimitExceededError(AppError):
    """Client exceeded its request window."""
    status_code = status.HTTP_429_TOO_MANY_REQUESTS

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__("Too many requests")


class ProductNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"product {product_id} not found")


class CartNotFoundError(AppError):
    """The customer has no cart document."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__("customer's cart is empty")


class ItemNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"item with product ID {product_id} not found in cart")


class CustomerNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"customer {customer_id} not found")


class OrderNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"order {order_id} not found")


class InvalidQuantityError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(f"quantity must be greater than 0, got {quantity}")


class EmptyUpdateError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("At least one field must be provided for update")


class EmailAlreadyRegisteredError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered")


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__("Incorrect email or password")


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "You can only access your own cart"):
        super().__init__(message)


class StoreError(AppError):
    """Any persistence-layer failure (connection, decode, constraint)."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, operation: str, cause: Exception = None):
        self.operation = operation
        self.cause = cause
        message = f"failed to {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
