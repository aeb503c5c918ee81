"""
Service layer for customers.

``CustomerService`` holds the business rules that sit between the API
handlers and the repository:

* a customer may only be created with an email address that is not
  already in use;
* reads, updates and deletes of an unknown id raise
  ``CustomerNotFoundError``;
* entities are converted to and from ``CustomerDTO`` here, so neither
  the endpoints nor the repository see the other's types.

The duplicate check on create and the insert are two separate
repository calls.  Two concurrent creates with the same address can
both pass the check; the unique index on ``email_address`` rejects the
second insert and that rejection is reported as
``CustomerAlreadyExistsError`` as well.

Updates do not re-check email uniqueness.  A clash there is only caught
by the index and surfaces as ``DuplicateEmailError``.

Repository calls are blocking ``sqlite3`` round-trips, so they run in
Starlette's threadpool instead of on the event loop.
"""

from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from starlette.concurrency import run_in_threadpool

from customer_api.app.core.exceptions import (
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    DuplicateEmailError,
)
from customer_api.app.models.customer import Customer
from customer_api.app.repositories.customer_repository import CustomerRepository
from customer_api.app.schemas.customer import CustomerDTO

logger = logging.getLogger(__name__)


def to_dto(customer: Customer) -> CustomerDTO:
    """Convert a stored entity into its transfer representation."""
    return CustomerDTO(
        id=customer.id,
        phone_number=customer.phone_number,
        first_name=customer.first_name,
        middle_name=customer.middle_name,
        last_name=customer.last_name,
        email_address=customer.email_address,
    )


def to_entity(dto: CustomerDTO) -> Customer:
    """Convert a transfer representation into an entity.

    The id is carried over as-is; callers creating a new record clear
    it first so the repository assigns a fresh one.
    """
    return Customer(
        id=dto.id,
        phone_number=dto.phone_number,
        first_name=dto.first_name,
        middle_name=dto.middle_name,
        last_name=dto.last_name,
        email_address=dto.email_address,
    )


class CustomerService:
    """Business operations on customers backed by a ``CustomerRepository``."""

    def __init__(self, repository: CustomerRepository) -> None:
        self.repository = repository

    async def create_customer(self, data: CustomerDTO) -> CustomerDTO:
        if await run_in_threadpool(self.repository.exists_by_email, data.email_address):
            logger.warning("Rejected customer with existing email %s", data.email_address)
            raise CustomerAlreadyExistsError(data.email_address)
        entity = to_entity(data)
        entity.id = None
        try:
            saved = await run_in_threadpool(self.repository.create, entity)
        except DuplicateEmailError as exc:
            raise CustomerAlreadyExistsError(data.email_address) from exc
        logger.info("Created customer %s", saved.id)
        return to_dto(saved)

    async def get_customer(self, customer_id: UUID) -> CustomerDTO:
        customer = await run_in_threadpool(self.repository.find_by_id, customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return to_dto(customer)

    async def list_customers(self) -> List[CustomerDTO]:
        customers = await run_in_threadpool(self.repository.find_all)
        return [to_dto(customer) for customer in customers]

    async def update_customer(self, customer_id: UUID, data: CustomerDTO) -> CustomerDTO:
        """Overwrite every mutable field of an existing customer.

        The id in ``data`` is ignored; ``customer_id`` decides which
        record is updated.
        """
        customer = await run_in_threadpool(self.repository.find_by_id, customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        customer.first_name = data.first_name
        customer.middle_name = data.middle_name
        customer.last_name = data.last_name
        customer.email_address = data.email_address
        customer.phone_number = data.phone_number
        saved = await run_in_threadpool(self.repository.save, customer)
        logger.info("Updated customer %s", customer_id)
        return to_dto(saved)

    async def delete_customer(self, customer_id: UUID) -> bool:
        if not await run_in_threadpool(self.repository.exists_by_id, customer_id):
            raise CustomerNotFoundError(customer_id)
        await run_in_threadpool(self.repository.delete_by_id, customer_id)
        logger.info("Deleted customer %s", customer_id)
        return True
