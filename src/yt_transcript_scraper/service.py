"""Transcript retrieval pipeline: resolve id, fetch page, pick track, fetch and parse."""

import asyncio
import logging

from yt_transcript_scraper.captions import locate_caption_track
from yt_transcript_scraper.config import Settings
from yt_transcript_scraper.errors import TranscriptError
from yt_transcript_scraper.models import TranscriptConfig, TranscriptSegment
from yt_transcript_scraper.parser import parse_transcript
from yt_transcript_scraper.transports import HttpxTransport, Transport
from yt_transcript_scraper.utils import parse_proxy_url, resolve_video_id

logger = logging.getLogger(__name__)


class TranscriptService:
    """Fetches transcripts through an injected transport.

    Without a transport, each call opens its own ``HttpxTransport`` (honoring
    ``config.proxy``) and closes it when done. An injected transport is left
    open and owns its own proxy routing.
    """

    def __init__(
        self, transport: Transport | None = None, settings: Settings | None = None
    ):
        self._transport = transport
        self._settings = settings or Settings()

    def _headers(self, lang: str | None) -> dict[str, str]:
        headers = {"User-Agent": self._settings.user_agent}
        if lang:
            headers["Accept-Language"] = lang
        return headers

    async def fetch_transcript(
        self, video_id_or_url: str, config: TranscriptConfig | None = None
    ) -> list[TranscriptSegment]:
        config = config or TranscriptConfig()
        video_id = resolve_video_id(video_id_or_url)
        if video_id is None:
            raise TranscriptError.invalid_identifier(video_id_or_url)

        if self._transport is not None:
            return await self._run(self._transport, video_id, config)

        try:
            transport = HttpxTransport(
                proxy=parse_proxy_url(config.proxy),
                timeout=self._settings.request_timeout,
            )
        except Exception as e:
            raise TranscriptError.page_fetch(video_id, str(e)) from e
        async with transport:
            return await self._run(transport, video_id, config)

    async def _run(
        self, transport: Transport, video_id: str, config: TranscriptConfig
    ) -> list[TranscriptSegment]:
        headers = self._headers(config.lang)
        base_url = self._settings.base_url.rstrip("/")

        try:
            page = await transport.fetch(f"{base_url}/watch?v={video_id}", headers)
        except Exception as e:
            logger.warning(f"Watch page fetch failed for {video_id}: {e}")
            raise TranscriptError.page_fetch(video_id, str(e)) from e

        track = locate_caption_track(page, config.lang, video_id, base_url)
        logger.debug(f"Selected {track.language_code} caption track for {video_id}")

        try:
            document = await transport.fetch(track.base_url, headers)
        except Exception as e:
            logger.warning(f"Transcript fetch failed for {video_id}: {e}")
            raise TranscriptError.transcript_fetch(video_id, str(e)) from e

        segments = parse_transcript(document, lang=track.language_code)
        logger.info(
            f"Fetched {len(segments)} segments for {video_id} ({track.language_code})"
        )
        return segments

    async def fetch_transcripts(
        self, video_ids_or_urls: list[str], config: TranscriptConfig | None = None
    ) -> list[list[TranscriptSegment] | TranscriptError]:
        """Fetch several transcripts concurrently.

        Results keep input order; a failed input yields its TranscriptError
        in place of a segment list.
        """
        results = await asyncio.gather(
            *(self.fetch_transcript(v, config) for v in video_ids_or_urls),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException) and not isinstance(
                result, TranscriptError
            ):
                raise result
        return results


async def fetch_transcript(
    video_id_or_url: str,
    config: TranscriptConfig | None = None,
    *,
    transport: Transport | None = None,
) -> list[TranscriptSegment]:
    """Fetch the transcript of a YouTube video given its ID or URL."""
    return await TranscriptService(transport).fetch_transcript(video_id_or_url, config)


async def fetch_transcripts(
    video_ids_or_urls: list[str],
    config: TranscriptConfig | None = None,
    *,
    transport: Transport | None = None,
) -> list[list[TranscriptSegment] | TranscriptError]:
    return await TranscriptService(transport).fetch_transcripts(
        video_ids_or_urls, config
    )
