"""Default transport backed by httpx."""

import logging

import httpx

from yt_transcript_scraper.models import ProxyConfig
from .base import Transport

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    def __init__(self, proxy: ProxyConfig | None = None, timeout: float = 30.0):
        self._client = httpx.AsyncClient(
            proxy=proxy.url if proxy else None,
            timeout=timeout,
            follow_redirects=True,
        )
        if proxy:
            logger.debug(f"Routing requests through proxy {proxy.host}:{proxy.port}")

    async def fetch(self, url: str, headers: dict[str, str] | None = None) -> str:
        resp = await self._client.get(url, headers=headers)
        resp.raise_for_status()
        return resp.text

    async def close(self) -> None:
        await self._client.aclose()
