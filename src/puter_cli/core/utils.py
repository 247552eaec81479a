"""Small helpers shared by the CLI commands."""

import asyncio
import posixpath
import random
from datetime import datetime
from typing import Any, Coroutine, Iterable, Optional, TypeVar
from urllib.parse import urlparse

from .constants import NO_URL_PLACEHOLDER

T = TypeVar("T")

_ADJECTIVES = (
    "amber", "bold", "brave", "bright", "calm", "clever", "cosmic", "crisp",
    "daring", "eager", "fancy", "gentle", "golden", "happy", "lively", "lucky",
    "mellow", "misty", "noble", "quiet", "rapid", "shiny", "silent", "snowy",
    "sunny", "swift", "tidy", "vivid", "witty", "zesty",
)

_NOUNS = (
    "apple", "badger", "breeze", "canyon", "cloud", "comet", "coral", "falcon",
    "forest", "garden", "harbor", "island", "lagoon", "maple", "meadow", "moon",
    "otter", "panda", "pebble", "planet", "river", "rocket", "shadow", "spark",
    "star", "summit", "tiger", "valley", "willow", "zebra",
)


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion from synchronous (typer) code."""
    return asyncio.run(coro)


def resolve_path(base_dir: str, path: str) -> str:
    """Resolve a remote POSIX path against ``base_dir``.

    Absolute paths are normalized as-is; ``~`` expands to the first segment
    of ``base_dir`` (the user's home on Puter).
    """
    if path.startswith("~"):
        home = "/" + base_dir.strip("/").split("/")[0]
        path = home + path[1:]
    if not path.startswith("/"):
        path = posixpath.join(base_dir, path)
    resolved = posixpath.normpath(path)
    # normpath keeps a leading "//"
    if resolved.startswith("//"):
        resolved = "/" + resolved.lstrip("/")
    return resolved


def generate_app_name(taken: Optional[Iterable[str]] = None, attempts: int = 50) -> str:
    """Generate a random ``adjective-noun-NNNN`` name not present in ``taken``."""
    taken_names = set(taken or ())
    for _ in range(attempts):
        name = (
            f"{random.choice(_ADJECTIVES)}-{random.choice(_NOUNS)}-"
            f"{random.randint(1000, 9999)}"
        )
        if name not in taken_names:
            return name
    raise RuntimeError("Unable to generate an unused name")


def subdomain_from_url(index_url: Optional[str]) -> str:
    """Extract the subdomain label from an app's index URL."""
    if not index_url:
        return NO_URL_PLACEHOLDER
    host = urlparse(index_url).netloc or index_url.split("/")[0]
    return host.split(".")[0] or NO_URL_PLACEHOLDER


def format_date(value: Optional[datetime], with_time: bool = True) -> str:
    if value is None:
        return "N/A"
    if with_time:
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value.strftime("%Y-%m-%d")
