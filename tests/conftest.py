import mongomock
import pytest
from fastapi.testclient import TestClient

from todo_api.core.config import Settings
from todo_api.db.store import TodoStore
from todo_api.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store():
    collection = mongomock.MongoClient()['todoDB']['todos']
    return TodoStore(collection)


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
