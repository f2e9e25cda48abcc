import mongomock
import pytest

from expense_tracker import create_app, mail
from expense_tracker.config import TestConfig


LUNCH = {
    "amount": 100,
    "description": "lunch",
    "category": "food",
    "date": "2024-01-01",
    "paymentMethod": "cash",
}


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def app(mongo_client):
    return create_app(TestConfig, mongo_client=mongo_client)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def outbox(app):
    with mail.record_messages() as messages:
        yield messages


@pytest.fixture
def lunch():
    return dict(LUNCH)
