"""
Customer endpoints for API v1.

These routes expose CRUD operations on customers.  Request bodies are
validated by ``CustomerDTO`` before the service is called; invalid
payloads never reach the database.  Domain errors raised by the service
(``CustomerNotFoundError``, ``CustomerAlreadyExistsError``) are turned
into HTTP responses by the exception handlers registered in
``main.py``.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from customer_api.app.repositories.customer_repository import CustomerRepository
from customer_api.app.schemas.customer import CustomerDTO
from customer_api.app.services.customer_service import CustomerService

router = APIRouter()


def get_customer_service() -> CustomerService:
    """Build a service for the current request."""
    return CustomerService(CustomerRepository())


@router.post("", response_model=CustomerDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerDTO,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerDTO:
    """Create a customer.

    Returns HTTP 409 if another customer already uses the email address.
    """
    return await service.create_customer(customer_in)


@router.get("/{customer_id}", response_model=CustomerDTO)
async def get_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerDTO:
    """Retrieve a single customer by ID.

    Returns HTTP 404 if the customer is not found.
    """
    return await service.get_customer(customer_id)


@router.get("", response_model=List[CustomerDTO])
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerDTO]:
    """Return all customers."""
    return await service.list_customers()


@router.put("/{customer_id}", response_model=CustomerDTO)
async def update_customer(
    customer_id: UUID,
    customer_in: CustomerDTO,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerDTO:
    """Replace the fields of an existing customer."""
    return await service.update_customer(customer_id, customer_in)


@router.delete("/{customer_id}", response_class=PlainTextResponse)
async def delete_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> str:
    """Delete a customer and return a confirmation message."""
    await service.delete_customer(customer_id)
    return f"Successfully deleted the customer with ID: {customer_id}"
