"""Port interface for the HTTP transport used by provider adapters."""

from abc import ABC, abstractmethod


class HttpTransportPort(ABC):
    @abstractmethod
    async def get(self, url: str) -> str | None:
        """Fetch *url* and return the response body as text.

        May return None (or an empty string) or raise on network or HTTP
        errors; adapters treat all three the same way.
        """
        ...
