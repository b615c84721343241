"""httpx transport adapter — implements HttpTransportPort."""

from __future__ import annotations

import logging

import httpx

from address_lookup.application.ports.http_transport_port import HttpTransportPort

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransportPort):
    """GET-only transport over httpx.AsyncClient.

    Failures are logged and turned into None; the caller decides what an
    empty body means. No retries.
    """

    def __init__(
        self,
        user_agent: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._user_agent = user_agent
        self._timeout = timeout
        self._client = client

    async def get(self, url: str) -> str | None:
        try:
            if self._client is not None:
                return await self._request(self._client, url)
            async with httpx.AsyncClient() as client:
                return await self._request(client, url)
        except httpx.HTTPStatusError as e:
            logger.warning("HTTP %d for %s", e.response.status_code, url)
            return None
        except httpx.HTTPError:
            logger.exception("HTTP transport error for %s", url)
            return None

    async def _request(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(
            url,
            headers={"User-Agent": self._user_agent},
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.text
