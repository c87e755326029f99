"""Caption track discovery in a video watch page."""

import json
import logging
import re
from urllib.parse import urljoin

from yt_transcript_scraper.config import YOUTUBE_BASE_URL
from yt_transcript_scraper.errors import TranscriptError
from yt_transcript_scraper.models import CaptionTrack

logger = logging.getLogger(__name__)

_CAPTION_TRACKS_MARKER = re.compile(r'"captionTracks"\s*:\s*')
_CAPTCHA_MARKER = 'class="g-recaptcha"'
_PLAYABILITY_MARKER = '"playabilityStatus":'
_CAPTIONS_BLOCK_MARKER = '"playerCaptionsTracklistRenderer"'

_decoder = json.JSONDecoder()


def extract_caption_tracks_json(markup: str):
    """Decode the JSON value embedded after the ``captionTracks`` key.

    Returns None when the key is absent. Raises ValueError when the
    fragment following it is not valid JSON.
    """
    match = _CAPTION_TRACKS_MARKER.search(markup)
    if not match:
        return None
    value, _ = _decoder.raw_decode(markup, match.end())
    return value


def _track_name(descriptor: dict) -> str:
    name = descriptor.get("name") or {}
    if not isinstance(name, dict):
        return ""
    if "simpleText" in name:
        return str(name["simpleText"])
    runs = name.get("runs") or []
    return "".join(str(run.get("text", "")) for run in runs if isinstance(run, dict))


def list_caption_tracks(
    markup: str, base_url: str = YOUTUBE_BASE_URL
) -> list[CaptionTrack] | None:
    """Return the usable caption tracks on a page, or None if it has no caption data."""
    try:
        raw_tracks = extract_caption_tracks_json(markup)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Caption tracks fragment is not valid JSON: {e}")
        return []
    if raw_tracks is None:
        return None
    if not isinstance(raw_tracks, list):
        return []

    tracks = []
    for descriptor in raw_tracks:
        if not isinstance(descriptor, dict):
            continue
        language_code = descriptor.get("languageCode")
        track_url = descriptor.get("baseUrl")
        if not isinstance(language_code, str) or not isinstance(track_url, str):
            continue
        kind = descriptor.get("kind")
        tracks.append(
            CaptionTrack(
                language_code=language_code,
                base_url=urljoin(base_url + "/", track_url),
                name=_track_name(descriptor),
                kind=kind if isinstance(kind, str) else None,
            )
        )
    return tracks


def select_caption_track(
    tracks: list[CaptionTrack], lang: str | None = None
) -> CaptionTrack | None:
    """First track whose language code contains ``lang``, else the first track."""
    if not tracks:
        return None
    if not lang:
        return tracks[0]
    for track in tracks:
        if lang in track.language_code:
            return track
    return None


def find_caption_track(
    markup: str, lang: str | None = None, base_url: str = YOUTUBE_BASE_URL
) -> CaptionTrack | None:
    return select_caption_track(list_caption_tracks(markup, base_url) or [], lang)


def locate_caption_track(
    markup: str,
    lang: str | None = None,
    video_id: str = "",
    base_url: str = YOUTUBE_BASE_URL,
) -> CaptionTrack:
    """Select a caption track, raising a classified TranscriptError if none fits."""
    tracks = list_caption_tracks(markup, base_url)

    if tracks is None:
        if _CAPTIONS_BLOCK_MARKER in markup:
            raise TranscriptError.no_transcripts(video_id)
        if _CAPTCHA_MARKER in markup:
            raise TranscriptError.blocked(video_id)
        if _PLAYABILITY_MARKER not in markup:
            raise TranscriptError.video_unavailable(video_id)
        raise TranscriptError.captions_disabled(video_id)

    if not tracks:
        raise TranscriptError.no_transcripts(video_id)

    track = select_caption_track(tracks, lang)
    if track is None:
        raise TranscriptError.language_not_available(
            video_id, lang, [t.language_code for t in tracks]
        )
    return track
