"""Utility functions."""

import logging
import re
from urllib.parse import parse_qs, urlsplit

from yt_transcript_scraper.models import ProxyAuth, ProxyConfig

logger = logging.getLogger(__name__)

VIDEO_ID_LENGTH = 11

# Path markers whose following segment is the video id
_ID_PATH_MARKERS = {"v", "e", "embed", "shorts"}

_YOUTUBE_URL_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})",
    re.IGNORECASE,
)

_PROXY_URL_PATTERN = re.compile(
    r"^(https?)://(?:([^:@]*):?([^@]*)@)?([^:@/]+)(?::(\d+))?/?$"
)


def _canonical(candidate: str | None) -> str | None:
    if candidate and len(candidate) == VIDEO_ID_LENGTH:
        return candidate
    return None


def resolve_video_id(value: str | None) -> str | None:
    """Extract a YouTube video ID from a URL, or return an 11-char ID as-is."""
    if not value:
        return None
    if len(value) == VIDEO_ID_LENGTH:
        return value

    try:
        parts = urlsplit(value)
    except ValueError:
        parts = None

    if parts is None or not parts.scheme or not parts.netloc:
        match = _YOUTUBE_URL_PATTERN.search(value)
        return match.group(1) if match else None

    segments = [s for s in parts.path.split("/") if s]
    if segments:
        if len(segments[0]) == VIDEO_ID_LENGTH:
            return segments[0]
        if segments[0] in _ID_PATH_MARKERS:
            return _canonical(segments[1] if len(segments) > 1 else None)

    query_ids = parse_qs(parts.query).get("v")
    return _canonical(query_ids[0] if query_ids else None)


def parse_proxy_url(url: str | None) -> ProxyConfig | None:
    """Parse ``scheme://[user:pass@]host[:port]`` into a proxy descriptor."""
    if not url:
        return None
    match = _PROXY_URL_PATTERN.match(url.strip())
    if not match:
        logger.warning("Ignoring malformed proxy URL")
        return None

    protocol, username, password, host, port = match.groups()
    auth = None
    if username and password:
        auth = ProxyAuth(username=username, password=password)

    return ProxyConfig(
        protocol=protocol,
        host=host,
        port=int(port) if port else (443 if protocol == "https" else 80),
        auth=auth,
    )
