"""Error taxonomy for transcript retrieval.

Every failure surfaces as a single ``TranscriptError`` whose ``kind``
tells callers what went wrong without needing a class per case.
"""

from enum import Enum


class TranscriptErrorKind(str, Enum):
    INVALID_IDENTIFIER = "invalid_identifier"
    PAGE_FETCH_ERROR = "page_fetch_error"
    TRANSCRIPT_FETCH_ERROR = "transcript_fetch_error"
    BLOCKED = "blocked"
    VIDEO_UNAVAILABLE = "video_unavailable"
    CAPTIONS_DISABLED = "captions_disabled"
    NO_TRANSCRIPTS_AVAILABLE = "no_transcripts_available"
    LANGUAGE_NOT_AVAILABLE = "language_not_available"


class TranscriptError(Exception):
    def __init__(
        self,
        kind: TranscriptErrorKind,
        message: str,
        video_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.video_id = video_id
        self.details = details or {}

    def __repr__(self) -> str:
        return f"TranscriptError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def invalid_identifier(cls, value: str | None) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.INVALID_IDENTIFIER,
            f"Impossible to retrieve Youtube video ID from {value!r}",
            details={"input": value},
        )

    @classmethod
    def page_fetch(cls, video_id: str, reason: str = "") -> "TranscriptError":
        detail = f": {reason}" if reason else ""
        return cls(
            TranscriptErrorKind.PAGE_FETCH_ERROR,
            f"An error occurred while fetching the video page ({video_id}){detail}",
            video_id,
        )

    @classmethod
    def transcript_fetch(cls, video_id: str, reason: str = "") -> "TranscriptError":
        detail = f": {reason}" if reason else ""
        return cls(
            TranscriptErrorKind.TRANSCRIPT_FETCH_ERROR,
            f"An error occurred while fetching the transcript ({video_id}){detail}",
            video_id,
        )

    @classmethod
    def blocked(cls, video_id: str) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.BLOCKED,
            "YouTube is receiving too many requests from this IP and now "
            "requires solving a captcha to continue",
            video_id,
        )

    @classmethod
    def video_unavailable(cls, video_id: str) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.VIDEO_UNAVAILABLE,
            f"The video is no longer available ({video_id})",
            video_id,
        )

    @classmethod
    def captions_disabled(cls, video_id: str) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.CAPTIONS_DISABLED,
            f"Transcript is disabled on this video ({video_id})",
            video_id,
        )

    @classmethod
    def no_transcripts(cls, video_id: str) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.NO_TRANSCRIPTS_AVAILABLE,
            f"No transcripts are available for this video ({video_id})",
            video_id,
        )

    @classmethod
    def language_not_available(
        cls, video_id: str, lang: str, available: list[str]
    ) -> "TranscriptError":
        return cls(
            TranscriptErrorKind.LANGUAGE_NOT_AVAILABLE,
            f"No transcripts are available in {lang} for this video ({video_id}). "
            f"Available languages: {', '.join(available)}",
            video_id,
            details={"requested_language": lang, "available_languages": available},
        )
