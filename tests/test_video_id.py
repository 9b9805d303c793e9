import pytest

from yt_transcript.transcript_fetcher.video_id import extract_video_id, video_thumbnail_url


@pytest.mark.parametrize(
    "value",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "dQw4w9WgXcQ",
        "  dQw4w9WgXcQ \n",
    ],
)
def test_extracts_id(value):
    assert extract_video_id(value) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("value", ["", "not a url", "https://vimeo.com/12345", "dQw4w9WgXc", "dQw4w9WgXcQQ"])
def test_rejects_invalid(value):
    assert extract_video_id(value) is None


def test_thumbnail_url():
    assert video_thumbnail_url("dQw4w9WgXcQ") == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"
