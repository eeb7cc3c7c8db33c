"""Shared fixtures for the ToDo API test suite."""

import pytest
from fastapi.testclient import TestClient

from todo_api.app.main import create_app
from todo_api.app.repositories import InMemoryToDoStore
from todo_api.app.services.todo_service import ToDoService


@pytest.fixture
def store() -> InMemoryToDoStore:
    return InMemoryToDoStore()


@pytest.fixture
def service(store) -> ToDoService:
    return ToDoService(store)


@pytest.fixture
def client(store) -> TestClient:
    """HTTP client for an app backed by the ``store`` fixture."""
    return TestClient(create_app(repository=store))
