"""Puter API client: driver calls for apps and subdomains, plus hosting endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from ..core.api_client import APIClient
from ..core.constants import (
    APPS_INTERFACE,
    ENTITY_NOT_FOUND,
    SUBDOMAINS_INTERFACE,
    StatsPeriod,
)


class Owner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = None


class AppStats(BaseModel):
    model_config = ConfigDict(extra="ignore")

    open_count: int = 0
    user_count: int = 0


class App(BaseModel):
    """An app record as returned by the ``puter-apps`` driver."""

    model_config = ConfigDict(extra="ignore")

    uid: Optional[str] = None
    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    index_url: Optional[str] = None
    created_at: Optional[datetime] = None
    owner: Optional[Owner] = None
    stats: Optional[AppStats] = None


class RootDir(BaseModel):
    model_config = ConfigDict(extra="ignore")

    path: Optional[str] = None
    name: Optional[str] = None


class Subdomain(BaseModel):
    """A subdomain binding as returned by the ``puter-subdomains`` driver."""

    model_config = ConfigDict(extra="ignore")

    uid: Optional[str] = None
    subdomain: str
    root_dir: Optional[RootDir] = None
    owner: Optional[Owner] = None
    protected: bool = False
    created_at: Optional[datetime] = None

    @property
    def root_dir_path(self) -> Optional[str]:
        return self.root_dir.path if self.root_dir else None

    @property
    def owner_username(self) -> Optional[str]:
        return self.owner.username if self.owner else None


class Directory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    uid: Optional[str] = None
    name: Optional[str] = None
    path: Optional[str] = None


class UserInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str
    uuid: Optional[str] = None
    email: Optional[str] = None


class DriverError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: Optional[str] = None
    message: Optional[str] = None


class DriverResponse(BaseModel):
    """Envelope returned by ``/drivers/call``."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    result: Any = None
    error: Optional[DriverError] = None

    @property
    def ok(self) -> bool:
        return self.success

    @property
    def not_found(self) -> bool:
        return self.error is not None and self.error.code == ENTITY_NOT_FOUND

    @property
    def error_message(self) -> str:
        if self.error and self.error.message:
            return self.error.message
        return "Unknown error"


def _is_driver_envelope(response: httpx.Response) -> bool:
    try:
        data = response.json()
    except ValueError:
        return False
    return isinstance(data, dict) and "success" in data


class PuterClient(APIClient):
    """Client for the Puter apps/subdomains drivers and hosting endpoints."""

    async def call_driver(
        self, interface: str, method: str, args: Dict[str, Any]
    ) -> DriverResponse:
        """Invoke a driver method via ``/drivers/call``.

        Driver failures are answered with a ``success: false`` envelope, often
        with a 4xx status; those are returned rather than raised.

        Raises:
            UnauthenticatedError: If the auth token is rejected
            httpx.HTTPError: If the request fails without a driver envelope
        """
        payload = {"interface": interface, "method": method, "args": args}
        try:
            response = await self.post("/drivers/call", payload)
        except httpx.HTTPStatusError as e:
            if not _is_driver_envelope(e.response):
                raise
            response = e.response

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected driver response: {data!r}")
        return DriverResponse.model_validate(data)

    # Apps

    async def select_apps(
        self, stats_period: StatsPeriod, icon_size: int
    ) -> DriverResponse:
        return await self.call_driver(
            APPS_INTERFACE,
            "select",
            {
                "params": {"icon_size": icon_size},
                "predicate": ["user-can-edit"],
                "stats_period": StatsPeriod(stats_period).value,
            },
        )

    async def create_app(
        self, name: str, index_url: str, description: str = ""
    ) -> DriverResponse:
        return await self.call_driver(
            APPS_INTERFACE,
            "create",
            {
                "object": {
                    "name": name,
                    "index_url": index_url,
                    "title": name,
                    "description": description,
                    "maximize_on_start": False,
                    "background": False,
                    "metadata": {"window_resizable": True},
                },
                "options": {"dedupe_name": True},
            },
        )

    async def read_app(self, name: str) -> DriverResponse:
        return await self.call_driver(APPS_INTERFACE, "read", {"id": {"name": name}})

    async def update_app(self, name: str, index_url: str, title: str) -> DriverResponse:
        return await self.call_driver(
            APPS_INTERFACE,
            "update",
            {
                "id": {"name": name},
                "object": {"index_url": index_url, "title": title},
            },
        )

    async def delete_app(self, name: str) -> DriverResponse:
        return await self.call_driver(
            APPS_INTERFACE, "delete", {"id": {"name": name}}
        )

    # Subdomains

    async def select_subdomains(
        self, args: Optional[Dict[str, Any]] = None
    ) -> DriverResponse:
        return await self.call_driver(SUBDOMAINS_INTERFACE, "select", args or {})

    async def create_subdomain(self, subdomain: str, root_dir: str) -> DriverResponse:
        return await self.call_driver(
            SUBDOMAINS_INTERFACE,
            "create",
            {"object": {"subdomain": subdomain, "root_dir": root_dir}},
        )

    async def delete_subdomain(self, identifier: str) -> DriverResponse:
        return await self.call_driver(
            SUBDOMAINS_INTERFACE,
            "delete",
            {"id": {"subdomain": identifier}},
        )

    # Filesystem and hosting

    async def mkdir(
        self,
        parent: str,
        path: str,
        overwrite: bool = True,
        dedupe_name: bool = False,
        create_missing_parents: bool = True,
    ) -> Directory:
        response = await self.post(
            "/mkdir",
            {
                "parent": parent,
                "path": path,
                "overwrite": overwrite,
                "dedupe_name": dedupe_name,
                "create_missing_parents": create_missing_parents,
            },
        )
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError("API response did not contain the directory data")
        return Directory.model_validate(data)

    async def delete_site(self, site_uuid: str) -> Dict[str, Any]:
        response = await self.post("/delete-site", {"site_uuid": site_uuid})
        if not response.content:
            return {}
        data = response.json()
        return data if isinstance(data, dict) else {"result": data}

    async def whoami(self) -> UserInfo:
        response = await self.get("/whoami")
        return UserInfo.model_validate(response.json())


def parse_apps(response: DriverResponse) -> List[App]:
    return [App.model_validate(item) for item in response.result or []]


def parse_subdomains(response: DriverResponse) -> List[Subdomain]:
    return [Subdomain.model_validate(item) for item in response.result or []]
