"""HTTP client for the Phish.net v5 API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, cast
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from setlistcache.adapters.http_resilience import ResilientClient
from setlistcache.domain.errors import UpstreamError

from .schema import SetlistsResponse
from .translator import parse_setlist_entry

if TYPE_CHECKING:
    from collections.abc import Callable

    from setlistcache.config.http_resilience import ResilienceConfig
    from setlistcache.config.phishnet import PhishNetConfig
    from setlistcache.domain.model import SetlistEntry, ShowId

log = getLogger(__name__)


class PhishNetAPIError(UpstreamError):
    """Raised when the Phish.net API cannot deliver the setlist of a show."""


class PhishNetClient:
    """Fetches setlists one show at a time."""

    def __init__(
        self,
        *,
        config: PhishNetConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def fetch_setlist(self, show_id: ShowId) -> list[SetlistEntry]:
        response = asyncio.run(self._fetch_setlist_async(show_id))
        entries = [parse_setlist_entry(payload) for payload in response.data]
        if not entries:
            log.info("Phish.net returned an empty setlist for show %s", show_id)
        return entries

    async def _fetch_setlist_async(self, show_id: ShowId) -> SetlistsResponse:
        async with self._client_factory(self._resilience) as client:
            return await self._perform_request(client=client, show_id=show_id)

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        show_id: ShowId,
    ) -> SetlistsResponse:
        if self._resilience.base_url is None:
            raise PhishNetAPIError(
                "Missing Phish.net base_url in resilience configuration", show_id=show_id
            )
        path = f"setlists/showid/{quote(show_id, safe='')}.json"
        params = {"apikey": self._config.api_key}

        # messages below must not embed the request URL, it carries the api key
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise PhishNetAPIError(
                f"Phish.net request failed with status code: {status_code}",
                show_id=show_id,
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise PhishNetAPIError(
                f"Phish.net request failed: {type(exc).__name__}", show_id=show_id
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise PhishNetAPIError(
                "Phish.net returned a non-JSON body",
                show_id=show_id,
                status_code=response.status_code,
            ) from exc

        if not isinstance(payload, dict):
            raise PhishNetAPIError(
                "Unexpected Phish.net response payload",
                show_id=show_id,
                status_code=response.status_code,
            )

        try:
            parsed = SetlistsResponse.model_validate(payload)
        except ValidationError as exc:
            raise PhishNetAPIError(
                "Invalid Phish.net response format",
                show_id=show_id,
                status_code=response.status_code,
            ) from exc

        if parsed.error:
            log.error("Phish.net API error for show %s: %s", show_id, parsed.error_message)
            raise PhishNetAPIError(
                parsed.error_message or "Phish.net reported an error",
                show_id=show_id,
                status_code=response.status_code,
            )

        return parsed


if TYPE_CHECKING:
    from setlistcache.domain.ports.fetching import SetlistFetcher

    _fetcher_check: SetlistFetcher = PhishNetClient(config=cast("PhishNetConfig", object()))
