# yt_transcript/transcript_fetcher/config.py
"""
Per-run configuration for the transcript fetcher.

Passed explicitly to the runner; nothing is read from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from yt_transcript.transcript_fetcher.personas import DEFAULT_PERSONAS
from yt_transcript.transcript_fetcher.schema import ClientPersona

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class FetcherConfig:
    """Config for one fetch run."""
    host: str = "www.youtube.com"
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "en"
    preferred_language: str = "en"
    timeout: Optional[float] = None  # None: transport default
    personas: Tuple[ClientPersona, ...] = DEFAULT_PERSONAS

    @property
    def origin(self) -> str:
        return f"https://{self.host}"

    def watch_url(self, video_id: str) -> str:
        return f"{self.origin}/watch?v={video_id}"

    def player_url(self, api_key: str) -> str:
        return f"{self.origin}/youtubei/v1/player?key={api_key}"
