"""
Domain exceptions raised by the store and service layers.

The API layer maps these onto HTTP status codes in ``main.py``; nothing
below the endpoints knows about HTTP.
"""

from uuid import UUID


class CustomerError(Exception):
    """Base class for customer domain errors."""


class CustomerNotFoundError(CustomerError):
    """No customer exists with the requested id."""

    def __init__(self, customer_id: UUID) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer with ID {customer_id} not found.")


class CustomerAlreadyExistsError(CustomerError):
    """A customer with the same email address is already stored."""

    def __init__(self, email_address: str) -> None:
        self.email_address = email_address
        super().__init__(f"Customer with email {email_address} already exists.")


class DuplicateEmailError(CustomerError):
    """The unique index on ``customers.email_address`` rejected a write."""

    def __init__(self, email_address: str) -> None:
        self.email_address = email_address
        super().__init__(f"Email address {email_address} is already in use.")
