"""Abstract base for HTTP transports."""

from abc import ABC, abstractmethod


class Transport(ABC):
    @abstractmethod
    async def fetch(self, url: str, headers: dict[str, str] | None = None) -> str:
        """GET ``url`` and return the response body as text.

        Any network failure or non-success status is raised as an exception.
        """
        ...

    async def close(self) -> None:
        """Clean up resources."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
