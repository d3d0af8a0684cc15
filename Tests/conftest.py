# Tests/conftest.py
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from Models import Customer
from config import Settings
from database import CustomerStore
from main import create_app

FIXED_NOW = datetime(2024, 5, 17, 8, 30, 15, 123000, tzinfo=timezone.utc)
FIXED_STAMP = "2024-05-17T08:30:15.123Z"


def make_customer(customer_id, name, **overrides):
    data = {
        "id": customer_id,
        "name": name,
        "address": f"{name} Street 1",
        "phone": "555-0100",
        "email": f"{name.lower()}@example.com",
        "lastupdate": "2020-02-29T10:00:00.000Z",
        "country": "Sweden",
        "active": True,
        "contact": "Karin",
    }
    data.update(overrides)
    return Customer(**data)


@pytest.fixture
def fixed_now():
    return lambda: FIXED_NOW


@pytest.fixture
def store():
    """Five seeded customers, ids 1-5."""
    return CustomerStore(
        make_customer(i, name)
        for i, name in enumerate(["Acme", "Globex", "Initech", "Umbrella", "Stark"], start=1)
    )


@pytest.fixture
def settings():
    return Settings(log_level="WARNING")


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
