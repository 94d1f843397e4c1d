"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from numguess.api.links import LinkBuilder
from numguess.core.config import Settings
from numguess.db.memory_registry import InMemoryGameRegistry
from numguess.main import create_app
from numguess.services.game_service import GameService

BASE_URL = "http://testserver"


@pytest.fixture
def registry() -> Iterator[InMemoryGameRegistry]:
    """Fresh registry per test, cleared at teardown to keep tests independent of each other."""
    repo = InMemoryGameRegistry()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(registry: InMemoryGameRegistry) -> GameService:
    return GameService(registry)


@pytest.fixture
def links() -> LinkBuilder:
    return LinkBuilder(BASE_URL)


@pytest.fixture
def client(registry: InMemoryGameRegistry) -> Iterator[TestClient]:
    """HTTP client talking to an app wired to the test registry (so tests can peek at the secret)."""
    app = create_app(Settings(log_level="DEBUG"), registry=registry)
    with TestClient(app) as test_client:
        yield test_client
