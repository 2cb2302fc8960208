from __future__ import annotations

import logging
from typing import Any

import httpx

from chat_websearch.config.settings import Settings, get_settings
from chat_websearch.errors import NoCredentialError, SearchRequestError

logger = logging.getLogger(__name__)


class SearchClient:
    """Posts a query to the search-provider proxy and returns its JSON body."""

    def __init__(
        self,
        endpoint_url: str,
        api_key: str = "",
        *,
        timeout_seconds: float = 20,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._api_key = api_key.strip()
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SearchClient:
        settings = settings or get_settings()
        return cls(
            settings.search_endpoint_url,
            settings.serpapi_api_key,
            timeout_seconds=settings.search_timeout_seconds,
        )

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    async def search(self, query: str) -> Any:
        if not self.has_credential:
            raise NoCredentialError("No search provider API key configured")

        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                headers=headers,
                transport=self._transport,
            ) as client:
                response = await client.post(self._endpoint_url, json={"query": query})
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            logger.debug(
                "Search request failed: %s %s",
                exc.response.status_code,
                exc.response.text,
            )
            raise SearchRequestError(
                f"Search request failed with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SearchRequestError(f"Search request failed: {exc}") from exc
        except ValueError as exc:
            raise SearchRequestError("Search response is not valid JSON") from exc
