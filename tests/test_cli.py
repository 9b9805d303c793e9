import json
import uuid
from unittest.mock import patch

from typer.testing import CliRunner

from yt_transcript.cli.transcript import app, format_timestamp
from yt_transcript.transcript_fetcher.schema import Diagnostics, TranscriptReport, TranscriptSegment

runner = CliRunner()

SEGMENTS = [
    TranscriptSegment(text="Hello", duration=1.0, offset=0.0, lang="en"),
    TranscriptSegment(text="world", duration=1.0, offset=65.5, lang="en"),
]


def _report(**overrides):
    fields = dict(run_id=uuid.uuid4(), video_id="dQw4w9WgXcQ", success=True, segments=SEGMENTS, language="en")
    fields.update(overrides)
    return TranscriptReport(**fields)


def test_format_timestamp():
    assert format_timestamp(0) == "00:00"
    assert format_timestamp(65.5) == "01:05"
    assert format_timestamp(3725) == "1:02:05"


@patch("yt_transcript.cli.transcript.run_fetch")
def test_text_output_from_url(mock_run_fetch):
    mock_run_fetch.return_value = _report()

    result = runner.invoke(app, ["fetch", "https://youtu.be/dQw4w9WgXcQ"])

    assert result.exit_code == 0
    assert "Hello world" in result.output
    video_id, config = mock_run_fetch.call_args.args
    assert video_id == "dQw4w9WgXcQ"
    assert config.preferred_language == "en"


@patch("yt_transcript.cli.transcript.run_fetch")
def test_segments_output_with_options(mock_run_fetch):
    mock_run_fetch.return_value = _report()

    result = runner.invoke(app, ["fetch", "dQw4w9WgXcQ", "--format", "segments", "--lang", "de", "--timeout", "3"])

    assert result.exit_code == 0
    assert "[00:00] Hello" in result.output
    assert "[01:05] world" in result.output
    config = mock_run_fetch.call_args.args[1]
    assert config.preferred_language == "de"
    assert config.timeout == 3.0


@patch("yt_transcript.cli.transcript.run_fetch")
def test_json_output_to_file(mock_run_fetch, tmp_path):
    mock_run_fetch.return_value = _report()
    out = tmp_path / "nested" / "transcript.json"

    result = runner.invoke(app, ["fetch", "dQw4w9WgXcQ", "-f", "json", "-o", str(out)])

    assert result.exit_code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["success"] is True
    assert [s["text"] for s in payload["segments"]] == ["Hello", "world"]


@patch("yt_transcript.cli.transcript.run_fetch")
def test_failure_exits_with_kind(mock_run_fetch):
    mock_run_fetch.return_value = _report(
        success=False,
        segments=[],
        language=None,
        error_kind="RateLimited",
        error_message="Too many requests. Please try again later.",
        diagnostics=Diagnostics(suggested_fixes=["Wait before retrying"]),
    )

    result = runner.invoke(app, ["fetch", "dQw4w9WgXcQ"])

    assert result.exit_code == 1
    assert "RateLimited" in result.output
    assert "Wait before retrying" in result.output


@patch("yt_transcript.cli.transcript.run_fetch")
def test_invalid_input(mock_run_fetch):
    result = runner.invoke(app, ["fetch", "not a video"])

    assert result.exit_code == 2
    mock_run_fetch.assert_not_called()
