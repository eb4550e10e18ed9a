from typing import Generator

import pytest
from fastapi.testclient import TestClient

from runlog.app import dependencies
from runlog.app.app import app
from runlog.chat import Dispatcher
from runlog.db.store import InMemoryRunStore

from ..conftest import FIXED_NOW


@pytest.fixture
def client(store: InMemoryRunStore, dispatcher: Dispatcher) -> Generator[TestClient, None, None]:
    """Test client wired to a fresh store and a fixed clock."""
    app.dependency_overrides[dependencies.run_store] = lambda: store
    app.dependency_overrides[dependencies.dispatcher] = lambda: dispatcher
    app.dependency_overrides[dependencies.current_time] = lambda: FIXED_NOW
    yield TestClient(app)
    app.dependency_overrides.clear()
