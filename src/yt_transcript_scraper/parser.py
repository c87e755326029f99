"""Parser for the timed-text caption document."""

import html
import logging
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from yt_transcript_scraper.models import TranscriptSegment

logger = logging.getLogger(__name__)

_TEXT_ELEMENT = re.compile(r"<text\b([^>]*?)(?:/>|>(.*?)</text\s*>)", re.DOTALL)
_ATTRIBUTE = re.compile(r"""([\w:-]+)\s*=\s*(["'])(.*?)\2""", re.DOTALL)
_INLINE_TAG = re.compile(r"</?[A-Za-z][^>]*>")


def seconds_to_ms(value: str | None) -> int | None:
    """Convert decimal seconds text to milliseconds, rounding half up.

    Returns None for missing, unparsable, negative, non-finite or
    out-of-range values.
    """
    if value is None:
        return None
    try:
        seconds = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not seconds.is_finite() or seconds < 0:
        return None
    try:
        return int((seconds * 1000).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return None


def decode_text(raw: str) -> str:
    """Resolve character entities (including double-escaped ones like ``&amp;#39;``)
    and drop inline formatting tags such as ``<font color="#fff">``."""
    text = raw
    while True:
        decoded = html.unescape(text)
        if decoded == text:
            return _INLINE_TAG.sub("", decoded)
        text = decoded


def parse_transcript(document: str, lang: str = "") -> list[TranscriptSegment]:
    """Parse every ``<text start dur>`` element into a segment, in document order."""
    segments = []
    skipped = 0
    for match in _TEXT_ELEMENT.finditer(document):
        attrs = {name: value for name, _, value in _ATTRIBUTE.findall(match.group(1))}
        offset_ms = seconds_to_ms(attrs.get("start"))
        duration_ms = seconds_to_ms(attrs.get("dur"))
        if offset_ms is None or duration_ms is None:
            skipped += 1
            continue
        segments.append(
            TranscriptSegment(
                text=decode_text(match.group(2) or ""),
                offset_ms=offset_ms,
                duration_ms=duration_ms,
                lang=lang,
            )
        )

    if skipped:
        logger.debug(f"Skipped {skipped} malformed transcript element(s)")
    return segments
