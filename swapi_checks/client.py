"""
SWAPI HTTP Client

Thin wrapper around httpx.AsyncClient that knows the SWAPI URL layout:

    {base}/{resource}                  -> full listing
    {base}/{resource}/?search={key}    -> search filter

Usage:
    async with SwapiClient(settings) as client:
        response = await client.search("people", "Luke Skywalker")
"""

from types import TracebackType

import httpx
from loguru import logger

from .config import SwapiSettings
from .models import Resource


class SwapiClient:
    """
    One connection pool per check session.

    Redirects are followed: SWAPI answers ``/people`` with a redirect to
    ``/people/``. Status codes are NOT raised; callers decide what a non-200
    means.
    """

    def __init__(
        self,
        settings: SwapiSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            settings: Base URL and timeout (defaults to SwapiSettings())
            transport: Optional transport override (httpx.MockTransport in tests)
        """
        self.settings = settings or SwapiSettings()
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout),
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "SwapiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def listing_url(self, resource: Resource) -> str:
        return f"{self.settings.base_url}/{resource}"

    def search_url(self, resource: Resource) -> str:
        return f"{self.settings.base_url}/{resource}/"

    async def list_resource(self, resource: Resource) -> httpx.Response:
        """GET the full listing of a resource."""
        url = self.listing_url(resource)
        logger.debug(f"[SwapiClient] GET {url}")
        return await self._http.get(url)

    async def search(self, resource: Resource, key: str) -> httpx.Response:
        """GET a resource filtered by ``?search={key}`` (key is URL-encoded)."""
        url = self.search_url(resource)
        logger.debug(f"[SwapiClient] GET {url}?search={key}")
        return await self._http.get(url, params={"search": key})
