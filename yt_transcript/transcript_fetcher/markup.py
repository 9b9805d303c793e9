# yt_transcript/transcript_fetcher/markup.py
"""
Text-level helpers for the caption payload.

Caption documents are matched line by line with a permissive pattern rather
than parsed as XML: partial or malformed documents still yield every line
that has the <text start=".." dur="..">..</text> shape.
"""

from __future__ import annotations

import math
import re
from typing import List

from yt_transcript.transcript_fetcher.schema import TranscriptSegment

CAPTION_LINE_REGEX = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')

_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
}
# One alternation, one pass: "&amp;lt;" decodes to "&lt;" and stops there.
_ENTITY_REGEX = re.compile("|".join(re.escape(entity) for entity in _ENTITIES))


def decode_entities(text: str) -> str:
    """Decode the handled markup escapes in a single left-to-right pass."""
    return _ENTITY_REGEX.sub(lambda match: _ENTITIES[match.group(0)], text)


def strip_format_param(url: str) -> str:
    """
    Remove the fmt query parameter so the default markup format is served.

    Every other parameter is kept byte for byte, in order.
    """
    base, question, rest = url.partition("?")
    if not question:
        return url
    query, hash_sign, fragment = rest.partition("#")

    kept = [param for param in query.split("&") if not param.startswith("fmt=")]
    rebuilt = base + ("?" + "&".join(kept) if kept else "")
    return rebuilt + hash_sign + fragment


def parse_seconds(raw: str) -> float:
    """Parse a seconds attribute; unparseable, non-finite or negative values become 0.0."""
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def parse_caption_markup(body: str, lang: str) -> List[TranscriptSegment]:
    """Extract every caption line from the payload, in document order."""
    return [
        TranscriptSegment(
            text=decode_entities(text),
            duration=parse_seconds(dur),
            offset=parse_seconds(start),
            lang=lang,
        )
        for start, dur, text in CAPTION_LINE_REGEX.findall(body)
    ]
