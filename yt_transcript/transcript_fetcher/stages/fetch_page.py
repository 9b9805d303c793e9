# yt_transcript/transcript_fetcher/stages/fetch_page.py
"""
Stage 1: Download the video's watch page.

Responsibility:
- GET the canonical watch URL with the session's browser headers
- Fail with PageLoadError on a non-success status
- Fail with CaptchaRequired when the page is a bot challenge
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Tuple

import requests

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.errors import CaptchaRequired, PageLoadError
from yt_transcript.transcript_fetcher.http import is_success, response_text, send
from yt_transcript.transcript_fetcher.schema import StageResult
from yt_transcript.transcript_fetcher.stages.base import timer
from yt_transcript.logging_core.logger import get_logger, log_event
import logging

STAGE_NAME = "fetch_page"
CAPTCHA_MARKER = 'class="g-recaptcha"'


def load_watch_page(session: requests.Session, video_id: str, config: FetcherConfig) -> str:
    response = send(
        session,
        "GET",
        config.watch_url(video_id),
        context="Failed to load video page",
        timeout=config.timeout,
    )
    if not is_success(response.status_code):
        raise PageLoadError(response.status_code)

    body = response_text(response)
    if CAPTCHA_MARKER in body:
        raise CaptchaRequired()
    return body


def process(state: Dict[str, Any], run_id: uuid.UUID, session: requests.Session, config: FetcherConfig) -> Tuple[Dict[str, Any], StageResult]:
    logger = get_logger(run_id)
    video_id = state["video_id"]

    log_event(
        logger,
        logging.INFO,
        "Loading watch page",
        stage_name=STAGE_NAME,
        event_type="start",
        metadata={"video_id": video_id},
    )

    with timer() as end:
        state["watch_url"] = config.watch_url(video_id)
        state["page_html"] = load_watch_page(session, video_id, config)
        result = StageResult(stage_name=STAGE_NAME, success=True, execution_time_ms=end())

    log_event(
        logger,
        logging.INFO,
        "Watch page loaded",
        stage_name=STAGE_NAME,
        event_type="success",
        metadata={"page_bytes": len(state["page_html"])},
    )
    return state, result
