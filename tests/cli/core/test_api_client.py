"""Tests for the Puter API client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from puter_cli.core.api_client import UnauthenticatedError
from puter_cli.core.constants import StatsPeriod
from puter_cli.puter_app.api_client import PuterClient

API_URL = "http://localhost:4100"


def _response(status_code: int, method: str, path: str, **kwargs) -> httpx.Response:
    return httpx.Response(
        status_code, request=httpx.Request(method, f"{API_URL}{path}"), **kwargs
    )


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx.AsyncClient."""
    with patch("httpx.AsyncClient") as mock_client:
        mock_instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = mock_instance
        mock_instance.post.return_value = _response(
            200, "POST", "/drivers/call", json={"success": True, "result": []}
        )
        yield mock_instance


@pytest.fixture
def api_client():
    return PuterClient(api_url=f"{API_URL}/", api_key="test-token")


@pytest.mark.asyncio
async def test_call_driver_posts_envelope(api_client, mock_httpx_client):
    response = await api_client.call_driver("puter-apps", "read", {"id": {"name": "x"}})

    assert response.ok
    assert response.result == []

    args, kwargs = mock_httpx_client.post.call_args
    assert args[0] == f"{API_URL}/drivers/call"
    assert kwargs["json"] == {
        "interface": "puter-apps",
        "method": "read",
        "args": {"id": {"name": "x"}},
    }
    assert kwargs["headers"]["Authorization"] == "Bearer test-token"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["headers"]["X-Puter-Trace-Id"] == api_client.trace_id


@pytest.mark.asyncio
async def test_select_apps_payload(api_client, mock_httpx_client):
    await api_client.select_apps(StatsPeriod.LAST_7_DAYS, 128)

    _, kwargs = mock_httpx_client.post.call_args
    assert kwargs["json"]["args"] == {
        "params": {"icon_size": 128},
        "predicate": ["user-can-edit"],
        "stats_period": "7d",
    }


@pytest.mark.asyncio
async def test_create_app_requests_name_dedupe(api_client, mock_httpx_client):
    await api_client.create_app(name="blog", index_url="https://example.com")

    _, kwargs = mock_httpx_client.post.call_args
    args = kwargs["json"]["args"]
    assert args["options"] == {"dedupe_name": True}
    assert args["object"]["name"] == "blog"
    assert args["object"]["title"] == "blog"
    assert args["object"]["index_url"] == "https://example.com"


@pytest.mark.asyncio
async def test_delete_subdomain_payload(api_client, mock_httpx_client):
    await api_client.delete_subdomain("myapp")

    _, kwargs = mock_httpx_client.post.call_args
    assert kwargs["json"]["interface"] == "puter-subdomains"
    assert kwargs["json"]["method"] == "delete"
    assert kwargs["json"]["args"] == {"id": {"subdomain": "myapp"}}


@pytest.mark.asyncio
async def test_error_envelope_with_http_error_is_parsed(api_client, mock_httpx_client):
    mock_httpx_client.post.return_value = _response(
        404,
        "POST",
        "/drivers/call",
        json={
            "success": False,
            "error": {"code": "entity_not_found", "message": "Entity not found"},
        },
    )

    response = await api_client.read_app("missing")

    assert not response.ok
    assert response.not_found
    assert response.error_message == "Entity not found"


@pytest.mark.asyncio
async def test_http_error_without_envelope_raises(api_client, mock_httpx_client):
    mock_httpx_client.post.return_value = _response(
        502, "POST", "/drivers/call", text="Bad Gateway"
    )

    with pytest.raises(httpx.HTTPStatusError, match="Bad Gateway"):
        await api_client.select_subdomains()


@pytest.mark.asyncio
async def test_unauthenticated(api_client, mock_httpx_client):
    mock_httpx_client.post.return_value = _response(
        401, "POST", "/drivers/call", json={"message": "Unauthorized"}
    )

    with pytest.raises(UnauthenticatedError):
        await api_client.select_subdomains()


@pytest.mark.asyncio
async def test_mkdir(api_client, mock_httpx_client):
    mock_httpx_client.post.return_value = _response(
        200,
        "POST",
        "/mkdir",
        json={"uid": "dir-1", "name": "app-123", "path": "/alice/AppData/a/app-123"},
    )

    directory = await api_client.mkdir(parent="/alice/AppData/a", path="app-123")

    assert directory.uid == "dir-1"
    assert directory.name == "app-123"
    args, kwargs = mock_httpx_client.post.call_args
    assert args[0] == f"{API_URL}/mkdir"
    assert kwargs["json"] == {
        "parent": "/alice/AppData/a",
        "path": "app-123",
        "overwrite": True,
        "dedupe_name": False,
        "create_missing_parents": True,
    }


@pytest.mark.asyncio
async def test_delete_site_empty_object(api_client, mock_httpx_client):
    mock_httpx_client.post.return_value = _response(200, "POST", "/delete-site", json={})

    data = await api_client.delete_site("subdomainObj-1234")

    assert data == {}
    _, kwargs = mock_httpx_client.post.call_args
    assert kwargs["json"] == {"site_uuid": "subdomainObj-1234"}


@pytest.mark.asyncio
async def test_delete_site_http_error(api_client, mock_httpx_client):
    mock_httpx_client.post.return_value = _response(
        500, "POST", "/delete-site", json={"error": {"message": "boom"}}
    )

    with pytest.raises(httpx.HTTPStatusError, match="boom"):
        await api_client.delete_site("subdomainObj-1234")


@pytest.mark.asyncio
async def test_whoami(api_client, mock_httpx_client):
    mock_httpx_client.get.return_value = _response(
        200, "GET", "/whoami", json={"username": "alice", "uuid": "u-1", "is_temp": False}
    )

    user = await api_client.whoami()

    assert user.username == "alice"
    args, _ = mock_httpx_client.get.call_args
    assert args[0] == f"{API_URL}/whoami"
