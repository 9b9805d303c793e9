import uuid

import pytest

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.errors import CredentialNotFound, ErrorKind
from yt_transcript.transcript_fetcher.stages import extract_credential
from yt_transcript.transcript_fetcher.stages.extract_credential import find_api_key

from tests.conftest import WATCH_PAGE


def test_plain_json_key():
    assert find_api_key(WATCH_PAGE) == "AIzaTestKey123"


def test_escaped_json_key():
    page = 'var data = "{\\"INNERTUBE_API_KEY\\":\\"AIzaEscaped\\",\\"x\\":1}";'
    assert find_api_key(page) == "AIzaEscaped"


def test_plain_form_wins_over_escaped_form():
    page = 'x = "{\\"INNERTUBE_API_KEY\\":\\"Escaped\\"}"; y = {"INNERTUBE_API_KEY":"Plain"}'
    assert find_api_key(page) == "Plain"


def test_missing_key_raises():
    with pytest.raises(CredentialNotFound) as excinfo:
        find_api_key("<html>nothing here</html>")

    assert excinfo.value.kind is ErrorKind.CREDENTIAL_NOT_FOUND
    assert "may not have transcripts available" in excinfo.value.message


def test_process_stores_key(session):
    state, result = extract_credential.process({"page_html": WATCH_PAGE}, uuid.uuid4(), session, FetcherConfig())

    assert state["api_key"] == "AIzaTestKey123"
    assert result.success
    session.request.assert_not_called()
