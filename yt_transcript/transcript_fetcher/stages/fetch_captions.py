# yt_transcript/transcript_fetcher/stages/fetch_captions.py
"""
Stage 4: Download the selected caption track and parse it into segments.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Tuple

import requests

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.errors import EmptyTranscript, RateLimited, TranscriptFetchError
from yt_transcript.transcript_fetcher.http import is_success, response_text, send
from yt_transcript.transcript_fetcher.markup import parse_caption_markup, strip_format_param
from yt_transcript.transcript_fetcher.schema import CaptionTrack, StageResult, TranscriptSegment
from yt_transcript.transcript_fetcher.stages.base import timer
from yt_transcript.logging_core.logger import get_logger, log_event
import logging

STAGE_NAME = "fetch_captions"


def download_caption_markup(session: requests.Session, track_url: str, config: FetcherConfig) -> str:
    response = send(
        session,
        "GET",
        strip_format_param(track_url),
        context="Failed to fetch transcript",
        timeout=config.timeout,
    )
    if response.status_code == 429:
        raise RateLimited()
    if not is_success(response.status_code):
        raise TranscriptFetchError(response.status_code)
    return response_text(response)


def fetch_segments(session: requests.Session, track: CaptionTrack, config: FetcherConfig) -> List[TranscriptSegment]:
    body = download_caption_markup(session, track.url, config)
    segments = parse_caption_markup(body, track.language_code)
    if not segments:
        raise EmptyTranscript()
    return segments


def process(state: Dict[str, Any], run_id: uuid.UUID, session: requests.Session, config: FetcherConfig) -> Tuple[Dict[str, Any], StageResult]:
    logger = get_logger(run_id)
    track: CaptionTrack = state["track"]

    log_event(
        logger,
        logging.INFO,
        "Downloading captions",
        stage_name=STAGE_NAME,
        event_type="start",
        metadata={"language": track.language_code},
    )

    with timer() as end:
        state["segments"] = fetch_segments(session, track, config)
        result = StageResult(stage_name=STAGE_NAME, success=True, execution_time_ms=end())

    log_event(
        logger,
        logging.INFO,
        "Captions parsed",
        stage_name=STAGE_NAME,
        event_type="success",
        metadata={"segment_count": len(state["segments"])},
    )
    return state, result
