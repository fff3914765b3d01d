import logging
from datetime import datetime

import pytest

from echo_bridge.api import echo as echo_api
from echo_bridge.core.config import get_settings


def _parse_timestamp(value):
    return datetime.strptime(value, "%Y-%m-%d %H:%M:%S")


def test_echo_success(client):
    before = datetime.now().replace(microsecond=0)
    response = client.post("/api/echo", json={"message": "Hello, World!"})
    after = datetime.now()

    assert response.status_code == 200
    body = response.json()
    assert body["echo"] == "Echo: Hello, World!"
    assert before <= _parse_timestamp(body["timestamp"]) <= after


@pytest.mark.parametrize("message", ["x", "  padded  ", "ü" * 1000, "a" * 1000])
def test_echo_accepts_valid_messages(client, message):
    response = client.post("/api/echo", json={"message": message})
    assert response.status_code == 200
    assert response.json()["echo"] == "Echo: " + message


@pytest.mark.parametrize("payload", [{"message": ""}, {"message": "   "}, {"message": None}, {}])
def test_echo_rejects_blank_message(client, payload):
    response = client.post("/api/echo", json=payload)
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert body["message"] == "{message=Message cannot be empty}"
    assert body["status"] == 400


def test_echo_rejects_long_message(client):
    response = client.post("/api/echo", json={"message": "a" * 1001})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"
    assert response.json()["message"] == "{message=Message cannot exceed 1000 characters}"


def test_echo_rejects_malformed_body(client):
    response = client.post(
        "/api/echo", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_echo_rejects_wrong_type(client):
    response = client.post("/api/echo", json={"message": 42})
    assert response.status_code == 400
    assert response.json()["message"].startswith("{message=")


def test_echo_internal_fault(client, monkeypatch):
    def explode(message):
        raise RuntimeError("echo exploded")

    monkeypatch.setattr(echo_api, "build_echo_response", explode)
    response = client.post("/api/echo", json={"message": "hi"})
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Internal server error"
    assert body["message"] == "echo exploded"
    assert body["status"] == 500


def test_health(client):
    for _ in range(2):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.text == "Echo Bridge Backend is running!"
        assert response.headers["content-type"].startswith("text/plain")


def test_health_unaffected_by_failed_requests(client):
    client.post("/api/echo", json={"message": ""})
    assert client.get("/api/health").text == "Echo Bridge Backend is running!"


def test_cors_allows_any_origin(client):
    response = client.get("/api/health", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_echo_internal_fault_keeps_cors_headers(client, monkeypatch):
    def explode(message):
        raise RuntimeError("echo exploded")

    monkeypatch.setattr(echo_api, "build_echo_response", explode)
    response = client.post(
        "/api/echo", json={"message": "hi"}, headers={"Origin": "http://example.com"}
    )
    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json()["error"] == "Internal server error"


def test_internal_fault_response_is_logged(client, monkeypatch, caplog):
    def explode(message):
        raise RuntimeError("echo exploded")

    monkeypatch.setattr(echo_api, "build_echo_response", explode)
    with caplog.at_level(logging.INFO, logger="echo_bridge"):
        client.post("/api/echo", json={"message": "hi"})
    assert any("Status: 500" in record.getMessage() for record in caplog.records)


def test_echo_counts_emoji_as_two_characters(client):
    assert client.post("/api/echo", json={"message": "😀" * 500}).status_code == 200
    response = client.post("/api/echo", json={"message": "😀" * 600})
    assert response.status_code == 400
    assert response.json()["message"] == "{message=Message cannot exceed 1000 characters}"


def test_fixed_values_ignore_environment(client, monkeypatch):
    monkeypatch.setenv("ECHO_PREFIX", "Hacked: ")
    monkeypatch.setenv("HEALTH_MESSAGE", "Hacked")
    monkeypatch.setenv("MAX_MESSAGE_LENGTH", "5")
    get_settings.cache_clear()
    try:
        fresh = get_settings()
        assert not hasattr(fresh, "ECHO_PREFIX")
    finally:
        get_settings.cache_clear()

    response = client.post("/api/echo", json={"message": "a" * 1000})
    assert response.status_code == 200
    assert response.json()["echo"] == "Echo: " + "a" * 1000
    assert client.get("/api/health").text == "Echo Bridge Backend is running!"
