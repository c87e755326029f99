"""Shared test fixtures."""

import pytest

from yt_transcript_scraper.transports import Transport

VIDEO_ID = "dQw4w9WgXcQ"
WATCH_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"
EN_TRACK_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=en"
ES_TRACK_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=es"

WATCH_PAGE = r"""<!DOCTYPE html><html><head><title>Video</title></head><body>
<script>var ytInitialPlayerResponse = {"responseContext":{},"playabilityStatus":{"status":"OK"},
"captions":{"playerCaptionsTracklistRenderer":{"captionTracks":[
{"baseUrl":"https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en","name":{"simpleText":"English"},"vssId":".en","languageCode":"en","isTranslatable":true},
{"baseUrl":"/api/timedtext?v=dQw4w9WgXcQ\u0026lang=es","name":{"runs":[{"text":"Spanish"}]},"vssId":"a.es","languageCode":"es","kind":"asr","isTranslatable":true}
],"audioTracks":[{"captionTrackIndices":[0,1]}]}},"videoDetails":{"videoId":"dQw4w9WgXcQ"}};</script>
</body></html>"""

EN_DOCUMENT = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0.5" dur="1.5">Never gonna give you up</text>'
    '<text start="2" dur="2.333">I&amp;#39;m never gonna let you down</text>'
    "</transcript>"
)

ES_DOCUMENT = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0.5" dur="1.5">Nunca te voy a abandonar</text>'
    "</transcript>"
)


class FakeTransport(Transport):
    """Serves canned bodies by URL and records every request."""

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls: list[tuple[str, dict | None]] = []
        self.closed = False

    async def fetch(self, url, headers=None):
        self.calls.append((url, headers))
        body = self.responses.get(url)
        if body is None:
            raise ConnectionError(f"no route for {url}")
        if isinstance(body, Exception):
            raise body
        return body

    async def close(self):
        self.closed = True


@pytest.fixture
def watch_page():
    return WATCH_PAGE


@pytest.fixture
def fake_transport():
    return FakeTransport({
        WATCH_URL: WATCH_PAGE,
        EN_TRACK_URL: EN_DOCUMENT,
        ES_TRACK_URL: ES_DOCUMENT,
    })
