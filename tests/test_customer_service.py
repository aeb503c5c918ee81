"""Unit tests for CustomerService with a mocked repository."""
import threading
import uuid
from unittest.mock import MagicMock

import pytest

from customer_api.app.core.exceptions import (
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    DuplicateEmailError,
)
from customer_api.app.models.customer import Customer
from customer_api.app.repositories.customer_repository import CustomerRepository
from customer_api.app.schemas.customer import CustomerDTO
from customer_api.app.services.customer_service import CustomerService, to_dto, to_entity


def _dto(**overrides):
    fields = {
        "phone_number": "1234567890",
        "first_name": "John",
        "last_name": "Doe",
        "email_address": "test@example.com",
    }
    fields.update(overrides)
    return CustomerDTO(**fields)


def _entity(**overrides):
    fields = {
        "id": uuid.uuid4(),
        "phone_number": "1234567890",
        "first_name": "John",
        "last_name": "Doe",
        "email_address": "test@example.com",
    }
    fields.update(overrides)
    return Customer(**fields)


@pytest.fixture()
def repository():
    return MagicMock(spec=CustomerRepository)


@pytest.fixture()
def service(repository):
    return CustomerService(repository)


@pytest.mark.asyncio
async def test_create_customer(service, repository):
    repository.exists_by_email.return_value = False
    repository.create.side_effect = lambda customer: Customer(
        **{**customer.__dict__, "id": uuid.uuid4()}
    )

    saved = await service.create_customer(_dto(id=uuid.uuid4()))

    assert saved.email_address == "test@example.com"
    assert saved.id is not None
    repository.exists_by_email.assert_called_once_with("test@example.com")
    passed = repository.create.call_args.args[0]
    assert passed.id is None


@pytest.mark.asyncio
async def test_create_customer_with_existing_email(service, repository):
    repository.exists_by_email.return_value = True

    with pytest.raises(CustomerAlreadyExistsError):
        await service.create_customer(_dto())
    repository.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_customer_losing_race_to_unique_index(service, repository):
    repository.exists_by_email.return_value = False
    repository.create.side_effect = DuplicateEmailError("test@example.com")

    with pytest.raises(CustomerAlreadyExistsError):
        await service.create_customer(_dto())


@pytest.mark.asyncio
async def test_get_customer(service, repository):
    entity = _entity()
    repository.find_by_id.return_value = entity

    found = await service.get_customer(entity.id)

    assert found.id == entity.id
    assert found.first_name == "John"


@pytest.mark.asyncio
async def test_get_missing_customer(service, repository):
    repository.find_by_id.return_value = None

    with pytest.raises(CustomerNotFoundError):
        await service.get_customer(uuid.uuid4())


@pytest.mark.asyncio
async def test_list_customers(service, repository):
    repository.find_all.return_value = [
        _entity(email_address="a@example.com"),
        _entity(email_address="b@example.com"),
    ]

    result = await service.list_customers()

    assert [c.email_address for c in result] == ["a@example.com", "b@example.com"]


@pytest.mark.asyncio
async def test_update_customer(service, repository):
    existing = _entity()
    repository.find_by_id.return_value = existing
    repository.save.side_effect = lambda customer: customer
    other_id = uuid.uuid4()

    updated = await service.update_customer(
        existing.id,
        _dto(
            id=other_id,
            first_name="Jane",
            middle_name="Q",
            last_name="Roe",
            email_address="updated@example.com",
            phone_number="0987654321",
        ),
    )

    assert updated.id == existing.id
    assert updated.first_name == "Jane"
    assert updated.middle_name == "Q"
    assert updated.last_name == "Roe"
    assert updated.email_address == "updated@example.com"
    assert updated.phone_number == "0987654321"
    repository.save.assert_called_once()
    repository.exists_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_update_missing_customer(service, repository):
    repository.find_by_id.return_value = None

    with pytest.raises(CustomerNotFoundError):
        await service.update_customer(uuid.uuid4(), _dto())
    repository.save.assert_not_called()


@pytest.mark.asyncio
async def test_delete_customer(service, repository):
    customer_id = uuid.uuid4()
    repository.exists_by_id.return_value = True

    assert await service.delete_customer(customer_id) is True
    repository.delete_by_id.assert_called_once_with(customer_id)


@pytest.mark.asyncio
async def test_delete_missing_customer(service, repository):
    repository.exists_by_id.return_value = False

    with pytest.raises(CustomerNotFoundError):
        await service.delete_customer(uuid.uuid4())
    repository.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_repository_calls_run_off_the_event_loop_thread(service, repository):
    loop_thread = threading.get_ident()
    seen = []
    repository.find_all.side_effect = lambda: seen.append(threading.get_ident()) or []

    assert await service.list_customers() == []
    assert seen and seen[0] != loop_thread


def test_conversion_round_trip():
    entity = _entity(middle_name="Q")
    assert to_entity(to_dto(entity)) == entity
