"""Root conftest.py for the jsonresponse test suite.

This file contains project-wide fixtures and pytest configuration.
"""

import os
from collections.abc import Generator

import pytest

from jsonresponse.core.config import get_settings
from jsonresponse.options import get_options


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test multiple components"
    )


@pytest.fixture(autouse=True)
def clean_caches() -> Generator[None]:
    """Clear cached settings and process-wide options around each test.

    Tests that swap the transformer or toggle indentation on the process-wide
    options never leak that state into other tests.
    """
    get_settings.cache_clear()
    get_options.cache_clear()
    yield
    get_settings.cache_clear()
    get_options.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove app-specific environment variables that would change settings.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        pytest.MonkeyPatch: The monkeypatch instance for env manipulation.
    """
    env_prefixes = [
        "APP_",
        "API_",
        "ENVIRONMENT",
        "DEBUG",
        "LOG_CONFIG__",
        "RESPONSE_CONFIG__",
        "K_SERVICE",
        "AWS_EXECUTION_ENV",
    ]
    for key in list(os.environ.keys()):
        if any(key.upper().startswith(prefix) for prefix in env_prefixes):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
