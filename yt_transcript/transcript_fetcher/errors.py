# yt_transcript/transcript_fetcher/errors.py
"""
Closed error taxonomy for the transcript fetcher.

One exception class per failure condition. Every class carries:
- kind: ErrorKind tag, stable across releases
- failure_type: coarse FailureType grouping used in diagnostics
- suggested_fixes: human hints surfaced by the CLI and the report

All failures are terminal for the run; nothing here is retried.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from yt_transcript.transcript_fetcher.schema import FailureType, StageFailure


class ErrorKind(str, Enum):
    NETWORK_ERROR = "NetworkError"
    PAGE_LOAD_ERROR = "PageLoadError"
    CAPTCHA_REQUIRED = "CaptchaRequired"
    CREDENTIAL_NOT_FOUND = "CredentialNotFound"
    METADATA_FETCH_ERROR = "MetadataFetchError"
    TRANSCRIPTS_DISABLED = "TranscriptsDisabled"
    TRANSCRIPT_UNAVAILABLE = "TranscriptUnavailable"
    RATE_LIMITED = "RateLimited"
    TRANSCRIPT_FETCH_ERROR = "TranscriptFetchError"
    EMPTY_TRANSCRIPT = "EmptyTranscript"


class TranscriptError(Exception):
    """Base class for every fetcher failure."""

    kind: ErrorKind
    failure_type: FailureType = FailureType.EXTRACTION_ERROR
    default_message: str = "Transcript fetch failed."
    suggested_fixes: List[str] = []

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_failure(self, stage_name: str) -> StageFailure:
        return StageFailure(
            stage=stage_name,
            type=self.failure_type,
            cause=self.kind.value,
            impact="No transcript returned",
            suggested_fixes=list(self.suggested_fixes),
        )


class HTTPStatusError(TranscriptError):
    """Shared shape for failures caused by a non-success HTTP status."""

    failure_type = FailureType.SOURCE_ERROR

    def __init__(self, status_code: Optional[int], message: Optional[str] = None) -> None:
        self.status_code = status_code
        super().__init__(message or self.default_message.format(status=status_code))


class NetworkError(TranscriptError):
    kind = ErrorKind.NETWORK_ERROR
    failure_type = FailureType.NETWORK_ERROR
    default_message = "Network request failed."
    suggested_fixes = ["Check internet connection", "Try again later"]


class PageLoadError(HTTPStatusError):
    kind = ErrorKind.PAGE_LOAD_ERROR
    default_message = "Failed to load video page (HTTP {status}). The video may be unavailable."
    suggested_fixes = ["Check that the video id is correct", "Check that the video is public"]


class CaptchaRequired(TranscriptError):
    kind = ErrorKind.CAPTCHA_REQUIRED
    failure_type = FailureType.BLOCKED
    default_message = "YouTube is requesting a CAPTCHA. Please try again later."
    suggested_fixes = ["Wait before retrying", "Try from a different network"]


class CredentialNotFound(TranscriptError):
    kind = ErrorKind.CREDENTIAL_NOT_FOUND
    default_message = "Could not extract YouTube API key. The video may not have transcripts available."
    suggested_fixes = ["Check that the video page loads in a browser"]


class MetadataFetchError(HTTPStatusError):
    kind = ErrorKind.METADATA_FETCH_ERROR
    default_message = "Failed to fetch video metadata (HTTP {status}). The video may be unavailable."
    suggested_fixes = ["Try again later", "Check that the video is public"]


class TranscriptsDisabled(TranscriptError):
    kind = ErrorKind.TRANSCRIPTS_DISABLED
    failure_type = FailureType.UNAVAILABLE
    default_message = "Transcripts are disabled for this video."
    suggested_fixes = ["Pick a video with captions enabled"]


class TranscriptUnavailable(TranscriptError):
    kind = ErrorKind.TRANSCRIPT_UNAVAILABLE
    failure_type = FailureType.UNAVAILABLE
    default_message = "No transcript available for this video."
    suggested_fixes = ["Check that the video is playable and not age or region restricted"]


class RateLimited(TranscriptError):
    kind = ErrorKind.RATE_LIMITED
    failure_type = FailureType.BLOCKED
    default_message = "Too many requests. Please try again later."
    suggested_fixes = ["Wait before retrying"]


class TranscriptFetchError(HTTPStatusError):
    kind = ErrorKind.TRANSCRIPT_FETCH_ERROR
    default_message = "Failed to fetch transcript (HTTP {status})."
    suggested_fixes = ["Try again later"]


class EmptyTranscript(TranscriptError):
    kind = ErrorKind.EMPTY_TRANSCRIPT
    default_message = "Transcript was empty. The video may not have captions available."
    suggested_fixes = ["Pick a video with captions enabled"]
