"""
ESPN tennis site API client.

Provides access to ATP and WTA rankings, news and scoreboards
via ESPN's public JSON endpoints (no API key).
"""

import asyncio
import logging
from typing import Any

import httpx

from ..core.http import BaseApiClient
from ..core.types import ESPN_BASE_URL, Resource, Tour, get_tour_config

logger = logging.getLogger(__name__)


class ESPNTennisClient(BaseApiClient):
    """ESPN tennis API client."""

    BASE_URL = ESPN_BASE_URL

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def fetch_json(self, url: str) -> Any:
        """GET a URL (absolute, or relative to BASE_URL) and return parsed JSON."""
        return await self._get(url)

    # =========================================================================
    # Per-tour resources
    # =========================================================================

    async def get_rankings(self, tour: Tour) -> dict[str, Any]:
        """Get the current ranking lists for a tour."""
        return await self.fetch_json(get_tour_config(tour).path(Resource.rankings))

    async def get_news(self, tour: Tour) -> dict[str, Any]:
        """Get the latest news feed for a tour."""
        return await self.fetch_json(get_tour_config(tour).path(Resource.news))

    async def get_scoreboard(self, tour: Tour) -> dict[str, Any]:
        """Get today's scoreboard for a tour."""
        return await self.fetch_json(get_tour_config(tour).path(Resource.scoreboard))

    # =========================================================================
    # Fan-out
    # =========================================================================

    async def fetch_tours(
        self,
        tours: list[Tour],
        resource: Resource,
    ) -> list[tuple[Tour, Any]]:
        """
        Fetch one resource for several tours concurrently.

        Args:
            tours: Tours to fetch, in output order
            resource: Which ESPN resource to fetch

        Returns:
            (tour, payload) pairs in the same order as ``tours``

        Raises:
            UpstreamError: As soon as any request fails; no partial results
        """
        payloads = await asyncio.gather(
            *[self.fetch_json(get_tour_config(tour).path(resource)) for tour in tours]
        )
        logger.debug(f"Fetched {resource.value} for {[t.value for t in tours]}")
        return list(zip(tours, payloads))
