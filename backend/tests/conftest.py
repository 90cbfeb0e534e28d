"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

import summarization.extractor as extractor
from dependencies import get_history_store_provider, get_llm_provider
from history import InMemoryHistoryStore
from main import app
from summarization import summary_circuit

from fakes import FakeChatModel


@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    """No retry sleeps, a closed circuit breaker and no leftover overrides."""
    monkeypatch.setattr(extractor, "RETRY_BASE_DELAY", 0)
    summary_circuit.reset()
    app.dependency_overrides = {}
    yield
    app.dependency_overrides = {}
    summary_circuit.reset()


@pytest.fixture
def fake_llm() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture
def history_store() -> InMemoryHistoryStore:
    return InMemoryHistoryStore()


@pytest.fixture
def test_client(fake_llm, history_store) -> TestClient:
    """TestClient wired to the fake model and an in-memory history store."""
    app.dependency_overrides[get_llm_provider] = lambda: (lambda: fake_llm)
    app.dependency_overrides[get_history_store_provider] = lambda: (lambda: history_store)
    return TestClient(app)
