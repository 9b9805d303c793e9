# yt_transcript/transcript_fetcher/stages/negotiate_metadata.py
"""
Stage 3: Ask the player endpoint for the video's caption tracks.

Responsibility:
- POST the player request once per configured persona, in order, until one
  answers with a success status (ANDROID first, then WEB with browser headers)
- Locate the track-list node, tolerating the two nesting shapes seen in the wild
- Tell "tracks disabled" apart from "video not playable"
- Pick the track: preferred language first, else the provider's first track
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

import requests

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.errors import (
    MetadataFetchError,
    TranscriptsDisabled,
    TranscriptUnavailable,
)
from yt_transcript.transcript_fetcher.http import is_success, send
from yt_transcript.transcript_fetcher.schema import CaptionTrack, ClientPersona, StageResult
from yt_transcript.transcript_fetcher.stages.base import timer
from yt_transcript.logging_core.logger import get_logger, log_event

STAGE_NAME = "negotiate_metadata"

# Candidate locations, first match wins.
TRACKLIST_PATHS: List[Tuple[str, ...]] = [
    ("captions", "playerCaptionsTracklistRenderer"),
    ("playerCaptionsTracklistRenderer",),
]
TRACK_URL_FIELDS = ("baseUrl", "url")
FALLBACK_TRACK_LANGUAGE = "en"


def _dig(document: Any, *keys: str) -> Any:
    node = document
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def request_player_response(
    session: requests.Session,
    video_id: str,
    api_key: str,
    config: FetcherConfig,
    logger: Optional[logging.LoggerAdapter] = None,
) -> Tuple[Dict[str, Any], ClientPersona]:
    """
    Try each persona in turn and return the first successful player response.

    Raises MetadataFetchError with the status of the last attempt when every
    persona is rejected.
    """
    if not config.personas:
        raise MetadataFetchError(None, "No client personas configured for the metadata request.")

    url = config.player_url(api_key)
    referer = config.watch_url(video_id)

    for persona in config.personas:
        response = send(
            session,
            "POST",
            url,
            context=f"Failed to fetch video metadata ({persona.name} client)",
            timeout=config.timeout,
            json=persona.request_body(video_id),
            headers=persona.request_headers(config.origin, referer),
        )
        if is_success(response.status_code):
            break
        if logger is not None:
            log_event(
                logger,
                logging.WARNING,
                "Player request rejected",
                stage_name=STAGE_NAME,
                event_type="fallback",
                metadata={"client": persona.name, "status_code": response.status_code},
            )
    else:
        raise MetadataFetchError(response.status_code)

    try:
        document = response.json()
    except ValueError as exc:
        raise MetadataFetchError(response.status_code, f"Failed to parse player response: {exc}") from exc
    if not isinstance(document, dict):
        raise MetadataFetchError(response.status_code, "Failed to parse player response: expected a JSON object.")

    return document, persona


def locate_tracklist(player_response: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    for path in TRACKLIST_PATHS:
        node = _dig(player_response, *path)
        if isinstance(node, dict):
            return node
    return None


def extract_caption_tracks(player_response: Dict[str, Any]) -> List[Any]:
    """
    Return the raw caption track list, never empty.

    A missing track-list node on a playable video means captions are turned
    off; on anything else the video itself is the problem.
    """
    tracklist = locate_tracklist(player_response)
    if tracklist is None:
        if _dig(player_response, "playabilityStatus", "status") == "OK":
            raise TranscriptsDisabled()
        raise TranscriptUnavailable()

    tracks = tracklist.get("captionTracks")
    if not isinstance(tracks, list) or not tracks:
        raise TranscriptsDisabled()
    return tracks


def select_track(tracks: List[Any], preferred_language: str = "en") -> CaptionTrack:
    """Pick the preferred-language track, else the first one the provider listed."""
    chosen = next(
        (track for track in tracks if isinstance(track, dict) and track.get("languageCode") == preferred_language),
        tracks[0],
    )
    if not isinstance(chosen, dict):
        chosen = {}

    url = next(
        (chosen[field] for field in TRACK_URL_FIELDS if isinstance(chosen.get(field), str) and chosen[field]),
        None,
    )
    if url is None:
        raise TranscriptUnavailable("No transcript URL found for this video.")

    language = chosen.get("languageCode")
    return CaptionTrack(
        language_code=language if isinstance(language, str) and language else FALLBACK_TRACK_LANGUAGE,
        url=url,
        name=_dig(chosen, "name", "simpleText"),
        kind=chosen.get("kind"),
    )


def process(state: Dict[str, Any], run_id: uuid.UUID, session: requests.Session, config: FetcherConfig) -> Tuple[Dict[str, Any], StageResult]:
    logger = get_logger(run_id)
    video_id = state["video_id"]

    log_event(
        logger,
        logging.INFO,
        "Requesting caption tracks",
        stage_name=STAGE_NAME,
        event_type="start",
        metadata={"video_id": video_id, "clients": [persona.name for persona in config.personas]},
    )

    with timer() as end:
        player_response, persona = request_player_response(session, video_id, state["api_key"], config, logger)
        tracks = extract_caption_tracks(player_response)
        track = select_track(tracks, config.preferred_language)
        state["track"] = track

        warnings: List[str] = []
        if persona is not config.personas[0]:
            warnings.append(f"Player request succeeded only with the {persona.name} client")
        if track.language_code != config.preferred_language:
            warnings.append(
                f"No '{config.preferred_language}' captions; using '{track.language_code}' instead"
            )
        result = StageResult(stage_name=STAGE_NAME, success=True, warnings=warnings, execution_time_ms=end())

    log_event(
        logger,
        logging.INFO,
        "Caption track selected",
        stage_name=STAGE_NAME,
        event_type="success",
        metadata={
            "client": persona.name,
            "track_count": len(tracks),
            "language": track.language_code,
            "kind": track.kind,
        },
    )
    return state, result


# High-Level Intent
# negotiate_metadata.py owns the only branching logic in the pipeline: the
# persona fallback and the interpretation of the player response.

# Data Flow
# state["api_key"] → request_player_response() (persona loop)
# → extract_caption_tracks() → select_track() → state["track"]

# Edge Cases & Failure Scenarios
# Every persona rejected → MetadataFetchError with the last status code.
# Transport error on any attempt → NetworkError, no further personas tried.
# Body is not a JSON object → MetadataFetchError carrying the 2xx status.
# Track-list node missing, playabilityStatus OK → TranscriptsDisabled.
# Track-list node missing, any other status → TranscriptUnavailable.
# captionTracks missing, not a list or empty → TranscriptsDisabled.
# Selected track without baseUrl/url → TranscriptUnavailable.
