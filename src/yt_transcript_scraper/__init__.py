"""Fetch YouTube closed-caption transcripts as timed segments."""

from .config import USER_AGENT, Settings
from .errors import TranscriptError, TranscriptErrorKind
from .models import (
    CaptionTrack,
    ProxyAuth,
    ProxyConfig,
    TranscriptConfig,
    TranscriptSegment,
)
from .service import TranscriptService, fetch_transcript, fetch_transcripts
from .transports import HttpxTransport, Transport
from .utils import parse_proxy_url, resolve_video_id

__all__ = [
    "USER_AGENT",
    "Settings",
    "TranscriptError",
    "TranscriptErrorKind",
    "CaptionTrack",
    "ProxyAuth",
    "ProxyConfig",
    "TranscriptConfig",
    "TranscriptSegment",
    "TranscriptService",
    "fetch_transcript",
    "fetch_transcripts",
    "HttpxTransport",
    "Transport",
    "parse_proxy_url",
    "resolve_video_id",
]
