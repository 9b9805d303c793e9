# yt_transcript/transcript_fetcher/personas.py
"""Built-in client personas, tried in order against the player endpoint."""

from __future__ import annotations

from typing import Tuple

from yt_transcript.transcript_fetcher.schema import ClientPersona

ANDROID = ClientPersona(name="ANDROID", client_version="20.10.38")

WEB = ClientPersona(
    name="WEB",
    client_version="2.20250122.01.00",
    hl="en",
    gl="US",
    client_name_id="1",
    browser_headers=True,
)

DEFAULT_PERSONAS: Tuple[ClientPersona, ...] = (ANDROID, WEB)
