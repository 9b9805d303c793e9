# yt_transcript/transcript_fetcher/stages/extract_credential.py
"""
Stage 2: Find the player API key embedded in the watch page.

The key shows up either as plain JSON ("INNERTUBE_API_KEY":"...") or inside
a JSON-encoded string literal with escaped quotes. Patterns are tried in
that order; the first hit wins.
"""

from __future__ import annotations

import re
import uuid
from typing import Any, Dict, Tuple

import requests

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.errors import CredentialNotFound
from yt_transcript.transcript_fetcher.schema import StageResult
from yt_transcript.transcript_fetcher.stages.base import timer
from yt_transcript.logging_core.logger import get_logger, log_event
import logging

STAGE_NAME = "extract_credential"

API_KEY_PATTERNS = [
    re.compile(r'"INNERTUBE_API_KEY":"([^"]+)"'),
    re.compile(r'INNERTUBE_API_KEY\\":\\"([^\\"]+)\\"'),
]


def find_api_key(page_html: str) -> str:
    for pattern in API_KEY_PATTERNS:
        match = pattern.search(page_html)
        if match:
            return match.group(1)
    raise CredentialNotFound()


def process(state: Dict[str, Any], run_id: uuid.UUID, session: requests.Session, config: FetcherConfig) -> Tuple[Dict[str, Any], StageResult]:
    logger = get_logger(run_id)

    with timer() as end:
        state["api_key"] = find_api_key(state["page_html"])
        result = StageResult(stage_name=STAGE_NAME, success=True, execution_time_ms=end())

    log_event(
        logger,
        logging.INFO,
        "API key extracted",
        stage_name=STAGE_NAME,
        event_type="success",
        metadata={"key_length": len(state["api_key"])},
    )
    return state, result
