import logging
from typing import Tuple

from app.core.exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.customer import Customer
from app.repositories.interfaces import CustomerRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login for customers."""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def register(self, name: str, email: str, password: str, phone: str = "") -> Customer:
        """
        Create a customer with a hashed password.

        The lookup rejects the common case early; the unique email index makes
        the repository raise EmailAlreadyRegisteredError for concurrent
        registrations that both pass it.
        """
        existing = await self.customer_repo.get_by_email(email)
        if existing is not None:
            raise EmailAlreadyRegisteredError(email)

        customer = await self.customer_repo.create({
            "name": name,
            "email": email,
            "phone": phone,
            "password_hash": get_password_hash(password)
        })
        logger.info(f"Registered customer {customer.id}")
        return customer

    async def login(self, email: str, password: str) -> Tuple[Customer, str]:
        """
        Verify credentials and issue an access token.

        Unknown email and wrong password raise the same error.
        """
        customer = await self.customer_repo.get_by_email(email)
        if customer is None or not verify_password(password, customer.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        token = create_access_token(data={"sub": customer.id, "email": customer.email})
        return customer, token
