# yt_transcript/transcript_fetcher/video_id.py
"""
Video identifier helpers used by hosts before calling the fetcher.

No network calls: pure deterministic parsing.
"""

from __future__ import annotations

import re
from typing import Optional

VIDEO_URL_PATTERNS = [
    re.compile(r"youtube\.com/watch\?v=([A-Za-z0-9_-]{11})"),
    re.compile(r"youtu\.be/([A-Za-z0-9_-]{11})"),
    re.compile(r"youtube\.com/embed/([A-Za-z0-9_-]{11})"),
    re.compile(r"youtube\.com/shorts/([A-Za-z0-9_-]{11})"),
]
BARE_VIDEO_ID = re.compile(r"^[A-Za-z0-9_-]{11}$")


def extract_video_id(url_or_id: str) -> Optional[str]:
    """
    Return the 11-character video id from a URL or a bare id.

    Returns None when nothing matches.
    """
    candidate = url_or_id.strip()
    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)

    if BARE_VIDEO_ID.match(candidate):
        return candidate

    return None


def video_thumbnail_url(video_id: str) -> str:
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"
