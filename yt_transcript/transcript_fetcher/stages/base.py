# yt_transcript/transcript_fetcher/stages/base.py
"""
Shared base definitions for all pipeline stages.

This module defines:
- The Stage function contract
- A lightweight timer for consistent execution_time_ms measurement

No business logic belongs here.
"""

from __future__ import annotations

import time
import uuid
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Tuple, TypeAlias

import requests

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.schema import StageResult


Stage: TypeAlias = Callable[
    [Dict[str, Any], uuid.UUID, requests.Session, FetcherConfig],
    Tuple[Dict[str, Any], StageResult],
]
"""
Type alias for stage functions.

Signature:
    stage(state: dict, run_id: uuid.UUID, session, config) -> (updated_state: dict, StageResult)

A stage returns only on success. On failure it raises a TranscriptError and
leaves `state` untouched past what it had already filled.
"""


@contextmanager
def timer() -> Iterator[Callable[[], float]]:
    """
    Context manager that provides an end() function returning elapsed milliseconds.

    Usage:
        with timer() as end:
            # do work
            pass
        execution_time_ms = end()
    """
    start = time.perf_counter()

    def end() -> float:
        return (time.perf_counter() - start) * 1000

    yield end
