"""Pytest configuration and shared fixtures for gcorecloud tests."""

import os

import pytest

from gcorecloud.config import ClientSettings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear settings-related environment variables before each test.

    This prevents test pollution when testing settings resolution.
    """
    test_prefixes = ("TEST_", "GCORE_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def settings():
    return ClientSettings(api_key="test-key", api_url="https://api.example.com/cloud", project_id=1, region_id=2)
