# yt_transcript/cli/transcript.py
"""
CLI entrypoint for fetching a video transcript.

Thin adapter: no business logic.
Responsibilities:
- Parse arguments
- Resolve a URL or bare id into a video id
- Invoke run_fetch()
- Render the report as text, timestamped segments or JSON
"""

from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from yt_transcript.transcript_fetcher.config import FetcherConfig
from yt_transcript.transcript_fetcher.runner import run_fetch, transcript_to_text
from yt_transcript.transcript_fetcher.schema import TranscriptReport, TranscriptSegment
from yt_transcript.transcript_fetcher.video_id import extract_video_id
from yt_transcript.logging_core.logger import configure_logging


app = typer.Typer(
    name="yt-transcript",
    help="Fetch the caption transcript of a YouTube video",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Fetch the caption transcript of a YouTube video."""


class OutputFormat(str, Enum):
    text = "text"
    segments = "segments"
    json = "json"


def format_timestamp(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def render(report: TranscriptReport, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.json:
        return json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False)
    if output_format is OutputFormat.segments:
        return "\n".join(_segment_line(segment) for segment in report.segments)
    return transcript_to_text(report.segments)


def _segment_line(segment: TranscriptSegment) -> str:
    return f"[{format_timestamp(segment.offset)}] {segment.text}"


@app.command()
def fetch(
    video: str = typer.Argument(..., help="YouTube video URL or 11-character video id"),
    output_format: OutputFormat = typer.Option(OutputFormat.text, "--format", "-f", help="Output format"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write output to this file instead of stdout"),
    lang: str = typer.Option("en", "--lang", help="Preferred caption language"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Per-request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit JSON logs on stderr"),
) -> None:
    """
    Fetch a transcript and print it.
    """
    configure_logging(logging.INFO if verbose else logging.WARNING, sys.stderr)

    video_id = extract_video_id(video)
    if video_id is None:
        typer.echo(f"Invalid YouTube URL or video id: {video}", err=True)
        raise typer.Exit(code=2)

    config = FetcherConfig(preferred_language=lang, timeout=timeout)
    report = run_fetch(video_id, config)

    if not report.success:
        typer.echo(typer.style(f"✗ {report.error_kind}: {report.error_message}", fg=typer.colors.RED, bold=True), err=True)
        fixes: List[str] = report.diagnostics.suggested_fixes
        for fix in fixes:
            typer.echo(f"  - {fix}", err=True)
        raise typer.Exit(code=1)

    rendered = render(report, output_format)
    if out is None:
        typer.echo(rendered)
        return

    output_path = out.expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered + "\n", encoding="utf-8")
    typer.echo(typer.style(f"✓ {len(report.segments)} segments ({report.language}) written to {output_path}", fg=typer.colors.GREEN), err=True)


if __name__ == "__main__":
    app()
