"""Tests for deleting an app."""

import pytest

from puter_cli.commands.app.delete import delete_app_async
from tests.cli.fixtures.api_test_utils import driver_error, driver_ok


@pytest.mark.asyncio
async def test_nonexistent_app(mock_client, capsys):
    mock_client.read_app.return_value = driver_error("entity_not_found", "Not found")

    assert await delete_app_async(mock_client, "nonexistent-app") is False

    assert "not found" in capsys.readouterr().out
    mock_client.delete_app.assert_not_awaited()


@pytest.mark.asyncio
async def test_deletes_after_showing_details(mock_client, sample_app, capsys):
    mock_client.read_app.return_value = driver_ok(sample_app)
    mock_client.delete_app.return_value = driver_ok(True)

    assert await delete_app_async(mock_client, "my-app") is True

    out = capsys.readouterr().out
    assert "App Details" in out
    assert "My App" in out
    assert "https://my-app.puter.site" in out
    assert 'App "my-app" deleted successfully!' in out
    mock_client.read_app.assert_awaited_once_with("my-app")
    mock_client.delete_app.assert_awaited_once_with("my-app")


@pytest.mark.asyncio
async def test_delete_failure_hints_at_name(mock_client, sample_app, capsys):
    mock_client.read_app.return_value = driver_ok(sample_app)
    mock_client.delete_app.return_value = driver_error()

    assert await delete_app_async(mock_client, "my-app") is False

    assert "provide the 'name' not the 'title'" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_read_exception(mock_client, capsys):
    mock_client.read_app.side_effect = TimeoutError("timed out")

    assert await delete_app_async(mock_client, "my-app") is False

    assert "timed out" in capsys.readouterr().out
    mock_client.delete_app.assert_not_awaited()
