"""Tests for the CLI wiring."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from puter_cli import __version__
from puter_cli.cli.main import app
from puter_cli.core.constants import StatsPeriod
from puter_cli.puter_app.api_client import Directory
from tests.cli.fixtures.api_test_utils import driver_error, driver_ok


@pytest.fixture
def runner():
    """Create a Typer CLI test runner."""
    return CliRunner()


def test_help_lists_commands(runner):
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("apps", "app", "domains", "domain", "site", "deploy", "login"):
        assert command in result.stdout
    assert "apps:list" not in result.stdout


def test_version(runner):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_deploy_help(runner):
    result = runner.invoke(app, ["deploy", "--help"])

    assert result.exit_code == 0
    assert "--subdomain" in result.stdout
    assert "--api-url" in result.stdout
    assert "--api-key" in result.stdout


def test_apps_list(runner, mock_client, sample_app):
    mock_client.select_apps.return_value = driver_ok([sample_app])

    with patch(
        "puter_cli.commands.apps.list.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["apps", "list", "30d", "128"])

    assert result.exit_code == 0, result.stdout
    mock_client.select_apps.assert_awaited_once_with(StatsPeriod.LAST_30_DAYS, 128)
    assert "You have in total: 1 application(s)." in result.stdout


def test_colon_alias(runner, mock_client):
    mock_client.select_apps.return_value = driver_ok([])

    with patch(
        "puter_cli.commands.apps.list.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["apps:list"])

    assert result.exit_code == 0, result.stdout
    mock_client.select_apps.assert_awaited_once_with(StatsPeriod.ALL, 64)


def test_apps_list_rejects_icon_size(runner, mock_client):
    with patch(
        "puter_cli.commands.apps.list.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["apps", "list", "all", "100"])

    assert result.exit_code == 1
    assert "Invalid icon size 100" in result.stdout
    mock_client.select_apps.assert_not_awaited()


def test_apps_list_rejects_period(runner):
    result = runner.invoke(app, ["apps", "list", "fortnight"])

    assert result.exit_code == 2


def test_apps_list_rejects_format(runner):
    result = runner.invoke(app, ["apps", "list", "--format", "xml"])

    assert result.exit_code == 1
    assert "Invalid format 'xml'" in result.stdout


def test_missing_credentials(runner, monkeypatch):
    monkeypatch.delenv("PUTER_API_KEY", raising=False)
    monkeypatch.setattr("puter_cli.commands.utils.settings.API_KEY", "")

    result = runner.invoke(app, ["domains", "list"])

    assert result.exit_code == 1
    assert "Must be logged in" in result.stdout


def test_app_create(runner, mock_client):
    mock_client.create_app.return_value = driver_ok(
        {"uid": "app-1", "name": "blog", "owner": {"username": "alice"}}
    )
    mock_client.mkdir.return_value = Directory(uid="dir-1", name="app-x")
    mock_client.create_subdomain.return_value = driver_ok({"subdomain": "blog-x"})
    mock_client.update_app.return_value = driver_ok({"name": "blog"})

    with patch(
        "puter_cli.commands.app.create.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["app", "create", "blog", "A blog"])

    assert result.exit_code == 0, result.stdout
    assert mock_client.create_app.await_args.kwargs["description"] == "A blog"


def test_app_delete_not_found_exits_nonzero(runner, mock_client):
    mock_client.read_app.return_value = driver_error("entity_not_found")

    with patch(
        "puter_cli.commands.app.delete.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["app:delete", "ghost"])

    assert result.exit_code == 1
    assert 'App "ghost" not found.' in result.stdout


def test_domain_delete_stops_at_first_failure(runner, mock_client):
    mock_client.delete_subdomain.return_value = driver_error("entity_not_found")

    with patch(
        "puter_cli.commands.domain.delete.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["domain", "delete", "id1", "id2"])

    assert result.exit_code == 1
    mock_client.delete_subdomain.assert_awaited_once_with("id1")


def test_domains_list_failure_exits_nonzero(runner, mock_client):
    mock_client.select_subdomains.return_value = driver_error()

    with patch(
        "puter_cli.commands.domains.list.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["domains", "list"])

    assert result.exit_code == 1
    assert "Error listing subdomains" in result.stdout


def test_site_delete(runner, mock_client):
    mock_client.delete_site.return_value = {}
    mock_client.delete_subdomain.return_value = driver_ok(True)

    with patch(
        "puter_cli.commands.site.delete.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["site", "delete", "subdomainObj-1"])

    assert result.exit_code == 0, result.stdout
    assert "should be deleted" in result.stdout


def test_deploy(runner, mock_client, monkeypatch):
    monkeypatch.setenv("PUTER_USERNAME", "alice")
    monkeypatch.setenv("PUTER_CWD", "/alice/Desktop")
    mock_client.select_subdomains.return_value = driver_ok([])
    mock_client.create_subdomain.return_value = driver_ok({"subdomain": "myapp"})

    with patch(
        "puter_cli.commands.deploy.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["deploy", "myapp", "site", "--subdomain=myapp"])

    assert result.exit_code == 0, result.stdout
    mock_client.create_subdomain.assert_awaited_once_with(
        subdomain="myapp", root_dir="/alice/Desktop/site"
    )
    assert "https://myapp.puter.site" in result.stdout


def test_deploy_requires_username(runner, mock_client):
    with patch(
        "puter_cli.commands.deploy.main.setup_authenticated_client",
        return_value=mock_client,
    ):
        result = runner.invoke(app, ["deploy", "myapp"])

    assert result.exit_code == 1
    assert "Unknown Puter username" in result.stdout
    mock_client.select_subdomains.assert_not_awaited()
