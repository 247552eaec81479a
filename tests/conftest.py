"""pytest configuration for the Puter CLI tests."""

import os

import pytest


def pytest_configure(config):
    """Configure pytest environment before the package is imported."""
    os.environ.setdefault("PUTER_API_BASE_URL", "http://localhost:4100")
    os.environ.setdefault("PUTER_API_KEY", "test-token")
    # Wide console so rich does not wrap URLs and table rows
    os.environ["COLUMNS"] = "200"


@pytest.fixture(autouse=True)
def isolated_credentials(tmp_path, monkeypatch):
    """Point the credentials file at a temporary location."""
    path = tmp_path / "credentials.json"
    monkeypatch.setenv("PUTER_CREDENTIALS_FILE", str(path))
    monkeypatch.delenv("PUTER_USERNAME", raising=False)
    monkeypatch.delenv("PUTER_CWD", raising=False)
    return path
