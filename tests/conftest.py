import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.config import settings
from customer_api.app.core.db import init_db
from customer_api.app.main import app
from customer_api.app.repositories.customer_repository import CustomerRepository


@pytest.fixture()
def database(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    init_db()
    return tmp_path / "test.db"


@pytest.fixture()
def repository(database):
    return CustomerRepository()


@pytest.fixture()
def client(database):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def jane_payload():
    return {
        "firstName": "Jane",
        "lastName": "Smith",
        "emailAddress": "jane.smith@example.com",
        "phoneNumber": "0987654321",
    }
