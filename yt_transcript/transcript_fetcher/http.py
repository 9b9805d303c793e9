# yt_transcript/transcript_fetcher/http.py
"""
HTTP plumbing shared by the stages.

A fresh requests.Session is built for every run with the fixed browser
headers. Transport failures are translated into NetworkError here so the
stages only deal with status codes and bodies.
"""

from __future__ import annotations

import re
from typing import Any

import requests

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.errors import NetworkError

# Transport error text embeds the request URL, player key included.
_KEY_PARAM_REGEX = re.compile(r"([?&]key=)[^&\s'\")]+")


def build_session(config: FetcherConfig) -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": config.user_agent,
            "Accept-Language": config.accept_language,
        }
    )
    return session


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def redact_key(text: str) -> str:
    return _KEY_PARAM_REGEX.sub(r"\1***", text)


def response_text(response: requests.Response) -> str:
    """
    Body as text, UTF-8 unless the server named a charset.

    requests falls back to ISO-8859-1 for text/* without a charset.
    """
    if "charset" in response.headers.get("Content-Type", "").lower():
        return response.text
    return response.content.decode("utf-8", "replace")


def send(session: requests.Session, method: str, url: str, *, context: str, timeout: float | None = None, **kwargs: Any) -> requests.Response:
    """
    Issue one request, raising NetworkError on any transport failure.

    The body is read eagerly so read errors surface here too.
    """
    try:
        response = session.request(method, url, timeout=timeout, **kwargs)
        response.content  # pylint: disable=pointless-statement
    except requests.RequestException as exc:
        raise NetworkError(f"{context}: {redact_key(str(exc))}") from exc
    return response
