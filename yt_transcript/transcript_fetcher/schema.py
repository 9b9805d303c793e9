# yt_transcript/transcript_fetcher/schema.py
"""
Authoritative data contracts for the transcript fetcher.

This module defines:
- TranscriptSegment, the only type handed back to callers
- CaptionTrack and ClientPersona, transient records used between stages
- The StageResult contract returned by every pipeline stage
- Typed failure categories for diagnostics
- TranscriptReport, the non-raising result of run_fetch()
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TranscriptSegment(BaseModel):
    """One spoken utterance with its timing, in seconds."""
    text: str
    duration: float = Field(ge=0.0)
    offset: float = Field(ge=0.0)
    lang: str

    model_config = ConfigDict(frozen=True)


class CaptionTrack(BaseModel):
    """A caption track picked from the player response."""
    language_code: str
    url: str
    name: Optional[str] = None
    kind: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ClientPersona(BaseModel):
    """
    Client identity presented to the player endpoint.

    browser_headers adds the client-name/version, Origin and Referer headers
    a desktop browser would send.
    """
    name: str
    client_version: str
    hl: Optional[str] = None
    gl: Optional[str] = None
    client_name_id: Optional[str] = None
    browser_headers: bool = False

    model_config = ConfigDict(frozen=True)

    def request_body(self, video_id: str) -> Dict[str, Any]:
        client: Dict[str, Any] = {"clientName": self.name, "clientVersion": self.client_version}
        if self.hl:
            client["hl"] = self.hl
        if self.gl:
            client["gl"] = self.gl
        return {"context": {"client": client}, "videoId": video_id}

    def request_headers(self, origin: str, referer: str) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.browser_headers:
            if self.client_name_id:
                headers["X-Youtube-Client-Name"] = self.client_name_id
            headers["X-Youtube-Client-Version"] = self.client_version
            headers["Origin"] = origin
            headers["Referer"] = referer
        return headers


class FailureType(str, Enum):
    """Typed failure categories for machine-parsable diagnostics."""
    NETWORK_ERROR = "network_error"
    SOURCE_ERROR = "source_error"
    BLOCKED = "blocked"
    EXTRACTION_ERROR = "extraction_error"
    UNAVAILABLE = "unavailable"


class StageFailure(BaseModel):
    """Structured representation of a single failure."""
    stage: str
    type: FailureType
    cause: str
    impact: str
    suggested_fixes: List[str] = Field(default_factory=list)


class StageResult(BaseModel):
    """
    Standardized result recorded for every executed pipeline stage.

    A failed stage always carries exactly one StageFailure.
    """
    stage_name: str
    success: bool
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    failures: List[StageFailure] = Field(default_factory=list)
    suggested_fixes: List[str] = Field(default_factory=list)
    execution_time_ms: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class Diagnostics(BaseModel):
    """Explainability and audit trail for one run."""
    stage_status: Dict[str, StageResult] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    suggested_fixes: List[str] = Field(default_factory=list)


class TranscriptReport(BaseModel):
    """
    Outcome of a whole run, success or not.

    segments is empty whenever success is False; there are no partial results.
    """
    run_id: uuid.UUID
    video_id: str
    success: bool
    segments: List[TranscriptSegment] = Field(default_factory=list)
    language: Optional[str] = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)


# High-Level Intent
# schema.py holds every structured type the fetcher produces or passes
# between stages. Only TranscriptSegment (and TranscriptReport, which wraps
# it) ever leaves the package.

# Edge Cases & Failure Scenarios
# Negative duration/offset → rejected by the model; markup.py clamps to 0.0 first.
# Persona without browser_headers → only Content-Type is sent.
