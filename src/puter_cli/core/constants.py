"""Core constants for the Puter CLI.

Centralizing these constants prevents circular imports and provides a single
source of truth for values that are referenced by multiple modules.
"""

from enum import Enum

# Environment variable names
ENV_API_BASE_URL = "PUTER_API_BASE_URL"
ENV_API_KEY = "PUTER_API_KEY"
ENV_VERBOSE = "PUTER_VERBOSE"
ENV_USERNAME = "PUTER_USERNAME"
ENV_CWD = "PUTER_CWD"
ENV_CREDENTIALS_FILE = "PUTER_CREDENTIALS_FILE"

# API defaults
DEFAULT_API_BASE_URL = "https://api.puter.com"
DEFAULT_CONFIG_DIR = "~/.puter-cli"
CREDENTIALS_FILENAME = "credentials.json"

# Hosting
SITE_DOMAIN = "puter.site"
DEFAULT_APP_URL = "https://dev-center.puter.com/coming-soon.html"
NO_URL_PLACEHOLDER = "<NO_URL>"

# Driver interfaces exposed by /drivers/call
APPS_INTERFACE = "puter-apps"
SUBDOMAINS_INTERFACE = "puter-subdomains"

# Error code returned by the drivers when an entity does not exist
ENTITY_NOT_FOUND = "entity_not_found"


class StatsPeriod(str, Enum):
    """Aggregation window for app usage statistics."""

    ALL = "all"
    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    THIS_YEAR = "this_year"
    LAST_YEAR = "last_year"
    MONTH_TO_DATE = "month_to_date"
    YEAR_TO_DATE = "year_to_date"
    LAST_12_MONTHS = "last_12_months"


ICON_SIZES = (16, 32, 64, 128, 256, 512)
DEFAULT_ICON_SIZE = 64

OUTPUT_FORMATS = ("text", "json", "yaml")


def site_url(subdomain: str) -> str:
    """Public URL of a site hosted under ``subdomain``."""
    return f"https://{subdomain}.{SITE_DOMAIN}"
