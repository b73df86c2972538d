import pytest
from fastapi.testclient import TestClient

from starwars.config import Settings
from starwars.main import create_app
from starwars.store import CharacterStore


@pytest.fixture
def store():
    """A freshly seeded directory per test."""
    return CharacterStore()


@pytest.fixture
def client(store):
    app = create_app(store=store, settings=Settings(port=3000, host="127.0.0.1", log_level="INFO"))
    # unhandled faults should come back as 500s rather than re-raise in the test
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def han_solo():
    return {"name": "Han Solo", "role": "Smuggler", "age": 32, "forcePoints": 400}
