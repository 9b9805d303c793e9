from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.errors import (
    CaptchaRequired,
    CredentialNotFound,
    EmptyTranscript,
    ErrorKind,
    MetadataFetchError,
    NetworkError,
    PageLoadError,
    RateLimited,
    TranscriptError,
    TranscriptFetchError,
    TranscriptsDisabled,
    TranscriptUnavailable,
)
from yt_transcript.transcript_fetcher.runner import fetch_transcript, run_fetch, transcript_to_text
from yt_transcript.transcript_fetcher.schema import TranscriptReport, TranscriptSegment
from yt_transcript.transcript_fetcher.video_id import extract_video_id, video_thumbnail_url

__all__ = [
    "CaptchaRequired",
    "CredentialNotFound",
    "EmptyTranscript",
    "ErrorKind",
    "FetcherConfig",
    "MetadataFetchError",
    "NetworkError",
    "PageLoadError",
    "RateLimited",
    "TranscriptError",
    "TranscriptFetchError",
    "TranscriptReport",
    "TranscriptSegment",
    "TranscriptsDisabled",
    "TranscriptUnavailable",
    "extract_video_id",
    "fetch_transcript",
    "run_fetch",
    "transcript_to_text",
    "video_thumbnail_url",
]
