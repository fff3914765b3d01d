import pytest
from fastapi.testclient import TestClient

from echo_bridge.main import app


@pytest.fixture
def client():
    # Unhandled faults must come back as 500 payloads instead of re-raising.
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
