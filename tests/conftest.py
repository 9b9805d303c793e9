import json
import logging
from unittest.mock import MagicMock

import pytest
import requests

from yt_transcript.logging_core.logger import JSONFormatter

WATCH_PAGE = (
    "<html><head><script>"
    'ytcfg.set({"INNERTUBE_API_KEY":"AIzaTestKey123","INNERTUBE_CLIENT_NAME":"WEB"});'
    "</script></head><body></body></html>"
)

CAPTION_XML = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0.5" dur="2.1">Hello &amp;amp; welcome</text>'
    '<text start="2.6" dur="1.4">it&#39;s &lt;b&gt;great&lt;/b&gt;</text>'
    "</transcript>"
)

TRACK_URL = "https://www.youtube.com/api/timedtext?v=abc123def45&lang=en&fmt=srv3&caps=asr"


def make_response(status_code=200, text="", url="https://www.youtube.com/"):
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    return response


def json_response(payload, status_code=200):
    return make_response(status_code, json.dumps(payload))


def player_payload(tracks, status="OK"):
    return {
        "playabilityStatus": {"status": status},
        "captions": {"playerCaptionsTracklistRenderer": {"captionTracks": tracks}},
    }


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("yt_transcript")
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JSONFormatter):
            logger.removeHandler(handler)
