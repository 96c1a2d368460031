import pytest

from todo_api.main import app
from todo_api.repositories import InMemoryRepository, get_repository


@pytest.fixture(autouse=True)
def fresh_repository():
    # Every test starts from an empty store with ids counting from 1.
    repo = InMemoryRepository()
    app.dependency_overrides[get_repository] = lambda: repo
    yield repo
    app.dependency_overrides.clear()
