"""Shared fixtures for command tests."""

from unittest.mock import AsyncMock

import pytest

from puter_cli.puter_app.api_client import PuterClient


@pytest.fixture
def mock_client():
    """A PuterClient whose methods are AsyncMocks."""
    return AsyncMock(spec=PuterClient)


@pytest.fixture
def sample_app() -> dict:
    return {
        "uid": "app-7c4e1e2a",
        "name": "my-app",
        "title": "My App",
        "description": "",
        "index_url": "https://my-app.puter.site",
        "created_at": "2024-03-01T10:20:30Z",
        "owner": {"username": "alice"},
        "stats": {"open_count": 12, "user_count": 3},
    }


@pytest.fixture
def sample_subdomain() -> dict:
    return {
        "uid": "sd-1",
        "subdomain": "myapp",
        "root_dir": {"path": "/alice/Sites/myapp", "name": "myapp"},
        "owner": {"username": "alice"},
        "protected": False,
        "created_at": "2024-03-02T08:00:00Z",
    }
