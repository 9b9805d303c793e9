# yt_transcript/transcript_fetcher/runner.py
"""
Orchestration runner for the transcript fetcher.

Responsibilities:
- Build the per-run HTTP session, logger and diagnostics collector
- Execute stages in fixed order, each feeding the next through `state`
- Stop at the first failing stage (all-or-nothing)
- Expose the raising API (fetch_transcript) and the reporting API (run_fetch)

No business logic lives here: only orchestration.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Iterable, List, Optional
import logging

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.diagnostics.collector import DiagnosticsCollector
from yt_transcript.transcript_fetcher.errors import TranscriptError
from yt_transcript.transcript_fetcher.http import build_session
from yt_transcript.transcript_fetcher.schema import StageResult, TranscriptReport, TranscriptSegment
from yt_transcript.transcript_fetcher.stages import (
    extract_credential,
    fetch_captions,
    fetch_page,
    negotiate_metadata,
)
from yt_transcript.transcript_fetcher.stages.base import Stage, timer
from yt_transcript.logging_core.logger import get_logger, log_event


STAGES: List[Stage] = [
    fetch_page.process,
    extract_credential.process,
    negotiate_metadata.process,
    fetch_captions.process,
]


def _execute(video_id: str, config: FetcherConfig, run_id: uuid.UUID, collector: DiagnosticsCollector) -> List[TranscriptSegment]:
    logger = get_logger(run_id)

    log_event(
        logger,
        logging.INFO,
        "Starting transcript fetch",
        event_type="pipeline_start",
        metadata={"video_id": video_id, "run_id": str(run_id)},
    )

    state: Dict[str, Any] = {"video_id": video_id}
    session = build_session(config)
    try:
        for stage_func in STAGES:
            stage_name = stage_func.__module__.split(".")[-1]
            with timer() as end:
                try:
                    state, stage_result = stage_func(state, run_id, session, config)
                except TranscriptError as exc:
                    collector.add_stage_result(
                        StageResult(
                            stage_name=stage_name,
                            success=False,
                            errors=[exc.message],
                            failures=[exc.to_failure(stage_name)],
                            execution_time_ms=end(),
                        )
                    )
                    log_event(
                        logger,
                        logging.WARNING,
                        "Transcript fetch failed",
                        stage_name=stage_name,
                        event_type="pipeline_failure",
                        metadata={
                            "kind": exc.kind.value,
                            "error": exc.message,
                            "status_code": getattr(exc, "status_code", None),
                        },
                    )
                    raise
            collector.add_stage_result(stage_result)
    finally:
        session.close()

    segments: List[TranscriptSegment] = state["segments"]
    log_event(
        logger,
        logging.INFO,
        "Transcript fetched",
        event_type="pipeline_success",
        metadata={"segment_count": len(segments), "language": segments[0].lang},
    )
    return segments


def fetch_transcript(video_id: str, config: Optional[FetcherConfig] = None) -> List[TranscriptSegment]:
    """
    Fetch the caption transcript of a video.

    Args:
        video_id: The provider's video identifier (not a URL).
        config: Optional FetcherConfig; defaults are used when omitted.

    Returns:
        A non-empty list of segments, all in the same language.

    Raises:
        TranscriptError: one of the subclasses in errors.py, tagged by kind.
    """
    run_id = uuid.uuid4()
    return _execute(video_id, config or FetcherConfig(), run_id, DiagnosticsCollector(run_id))


def run_fetch(video_id: str, config: Optional[FetcherConfig] = None) -> TranscriptReport:
    """
    Same pipeline as fetch_transcript(), returning a report instead of raising.

    The report always carries per-stage diagnostics.
    """
    run_id = uuid.uuid4()
    collector = DiagnosticsCollector(run_id)

    try:
        segments = _execute(video_id, config or FetcherConfig(), run_id, collector)
    except TranscriptError as exc:
        return TranscriptReport(
            run_id=run_id,
            video_id=video_id,
            success=False,
            error_kind=exc.kind.value,
            error_message=exc.message,
            diagnostics=collector.build_diagnostics(),
        )

    return TranscriptReport(
        run_id=run_id,
        video_id=video_id,
        success=True,
        segments=segments,
        language=segments[0].lang,
        diagnostics=collector.build_diagnostics(),
    )


def transcript_to_text(segments: Iterable[TranscriptSegment]) -> str:
    return " ".join(segment.text for segment in segments)


# High-Level Intent
# runner.py is the only place that knows the stage order. Stages never call
# each other; they read and fill `state`.

# Data Flow
# fetch_transcript(video_id) / run_fetch(video_id)
# → build_session + collector + logger
# → fetch_page → extract_credential → negotiate_metadata → fetch_captions
# → state["segments"]

# Edge Cases & Failure Scenarios
# Stage raises TranscriptError → failed StageResult recorded, later stages
# skipped, error re-raised (fetch_transcript) or reported (run_fetch).
# Any other exception is a bug and propagates unchanged.
# Session is closed on every path.
