"""Shared fixtures for unit tests."""

import threading
from typing import Any

import pytest
from pydantic import BaseModel

from jsonresponse.core.config import Settings
from jsonresponse.options import ResponseOptions
from jsonresponse.writer import ResponseRecorder


class Invoice(BaseModel):
    """Simple Pydantic model used as a payload."""

    number: str
    total: float
    paid: bool


@pytest.fixture
def recorder() -> ResponseRecorder:
    """Provide a fresh in-memory response writer.

    Returns:
        ResponseRecorder: Empty recorder.
    """
    return ResponseRecorder()


@pytest.fixture
def options() -> ResponseOptions:
    """Provide response options independent of the process-wide ones.

    Returns:
        ResponseOptions: Options with default transformer, content type, no indent.
    """
    return ResponseOptions()


@pytest.fixture
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Provide a Settings object built from test environment variables.

    Returns:
        Settings: Settings with test defaults.
    """
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("APP_VERSION", "1.0.0")
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "3000")
    return Settings()


@pytest.fixture
def sample_payloads() -> list[Any]:
    """Various JSON-serializable payloads.

    Returns:
        list[Any]: Payloads of different shapes.
    """
    return [
        1,
        1.5,
        True,
        False,
        "",
        "foo",
        "Unicode: 🌍🚀",
        [],
        [1, "two", 3.0, None],
        {},
        {"foo": "bar"},
        {"nested": {"inner": {"value": 123}}, "list": [{"a": 1}, {"b": [2, 3]}]},
    ]


@pytest.fixture
def invoice() -> Invoice:
    """Provide a Pydantic payload.

    Returns:
        Invoice: A paid invoice.
    """
    return Invoice(number="INV-1", total=99.5, paid=True)


@pytest.fixture
def thread_sync() -> dict[str, Any]:
    """Provide thread synchronization utilities for thread safety tests.

    Returns:
        dict[str, Any]: Dictionary with threading utilities.
    """
    return {
        "barrier": threading.Barrier,
        "event": threading.Event,
        "lock": threading.Lock,
    }
