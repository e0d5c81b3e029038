"""Shared test fixtures.

Provides a fresh seeded ``store`` per test (injected into the app through
``dependency_overrides``) and a FastAPI ``test_client``.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from candidate_tracker.db.store import InMemoryCandidateStore, get_store, seed_candidates


@pytest.fixture()
def store() -> InMemoryCandidateStore:
    """Provide a store holding the three seed candidates."""
    return InMemoryCandidateStore(seed_candidates())


@pytest.fixture()
def test_client(store: InMemoryCandidateStore) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by the ``store`` fixture."""
    from candidate_tracker.main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture()
def valid_payload() -> dict[str, str]:
    return {
        "name": "Asha Patel",
        "email": "asha@example.com",
        "phone": "+1 (555) 987-6543",
        "role": "Data Engineer",
        "status": "Applied",
    }
