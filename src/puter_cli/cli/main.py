"""Puter CLI entry point."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import typer

from puter_cli import __version__
from puter_cli.commands import (
    create_app,
    delete_app,
    delete_site,
    delete_subdomain,
    deploy_site,
    list_apps,
    list_subdomains,
    login,
    logout,
    whoami,
)
from puter_cli.config import settings

# Setup file logging
LOG_DIR = Path.home() / ".puter-cli" / "logs"
os.makedirs(LOG_DIR, exist_ok=True)
LOG_FILE = LOG_DIR / "puter-cli.log"

# Configure separate file logging without console output
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding="utf-8",
)
file_handler.setFormatter(
    logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
)

# Configure logging - only sending to file, not to console
logging.basicConfig(
    level=logging.DEBUG if settings.VERBOSE else logging.INFO,
    handlers=[file_handler],
)

# Root typer for `puter` CLI commands
app = typer.Typer(
    help="Puter CLI for managing apps, subdomains and static sites",
    no_args_is_help=True,
)

app.command(name="deploy")(deploy_site)
app.command(name="login")(login)
app.command(name="logout")(logout)
app.command(name="whoami")(whoami)

# Sub-typer for `puter apps` commands
app_cmd_apps = typer.Typer(help="Management commands for your apps", no_args_is_help=True)
app_cmd_apps.command(name="list")(list_apps)
app.add_typer(app_cmd_apps, name="apps", help="Manage your apps")

# Sub-typer for `puter app` commands
app_cmd_app = typer.Typer(help="Management commands for an app", no_args_is_help=True)
app_cmd_app.command(name="create")(create_app)
app_cmd_app.command(name="delete")(delete_app)
app.add_typer(app_cmd_app, name="app", help="Manage an app")

# Sub-typer for `puter domains` commands
app_cmd_domains = typer.Typer(help="Management commands for your subdomains", no_args_is_help=True)
app_cmd_domains.command(name="list")(list_subdomains)
app.add_typer(app_cmd_domains, name="domains", help="Manage your subdomains")

# Sub-typer for `puter domain` commands
app_cmd_domain = typer.Typer(help="Management commands for a subdomain", no_args_is_help=True)
app_cmd_domain.command(name="delete")(delete_subdomain)
app.add_typer(app_cmd_domain, name="domain", help="Manage a subdomain")

# Sub-typer for `puter site` commands
app_cmd_site = typer.Typer(help="Management commands for hosted sites", no_args_is_help=True)
app_cmd_site.command(name="delete")(delete_site)
app.add_typer(app_cmd_site, name="site", help="Manage hosted sites")

# Colon-style aliases, e.g. `puter apps:list`
app.command(name="apps:list", hidden=True)(list_apps)
app.command(name="app:create", hidden=True)(create_app)
app.command(name="app:delete", hidden=True)(delete_app)
app.command(name="domains:list", hidden=True)(list_subdomains)
app.command(name="domain:delete", hidden=True)(delete_subdomain)
app.command(name="site:delete", hidden=True)(delete_site)


def _version_callback(value: Optional[bool]) -> None:
    if value:
        typer.echo(f"Puter CLI version: {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        is_flag=True,
        is_eager=True,
        callback=_version_callback,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Write debug details to the log file."
    ),
) -> None:
    """Puter CLI."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
