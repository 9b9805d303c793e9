import pytest

from yt_transcript.transcript_fetcher.markup import (
    decode_entities,
    parse_caption_markup,
    parse_seconds,
    strip_format_param,
)

from tests.conftest import CAPTION_XML


class TestDecodeEntities:
    def test_decodes_all_handled_escapes(self):
        assert decode_entities("&amp; &lt; &gt; &quot; &#39; &apos;") == "& < > \" ' '"

    def test_ampersand_is_not_decoded_twice(self):
        assert decode_entities("&amp;lt;") == "&lt;"
        assert decode_entities("&amp;amp;") == "&amp;"

    def test_unknown_entities_are_left_alone(self):
        assert decode_entities("caf&eacute; &#x27;") == "caf&eacute; &#x27;"

    def test_plain_text_unchanged(self):
        assert decode_entities("no escapes here") == "no escapes here"


class TestStripFormatParam:
    def test_removes_fmt_and_keeps_other_params(self):
        url = "https://www.youtube.com/api/timedtext?v=abc&lang=en&fmt=srv3&caps=asr"
        assert strip_format_param(url) == "https://www.youtube.com/api/timedtext?v=abc&lang=en&caps=asr"

    def test_removes_trailing_fmt(self):
        url = "https://www.youtube.com/api/timedtext?v=abc&lang=en&fmt=srv3"
        assert strip_format_param(url) == "https://www.youtube.com/api/timedtext?v=abc&lang=en"

    def test_removes_leading_fmt(self):
        url = "https://www.youtube.com/api/timedtext?fmt=json3&v=abc"
        assert strip_format_param(url) == "https://www.youtube.com/api/timedtext?v=abc"

    def test_url_without_fmt_is_untouched(self):
        url = "https://www.youtube.com/api/timedtext?v=abc&tfmt=1&lang=en"
        assert strip_format_param(url) == url

    def test_removes_repeated_fmt(self):
        url = "https://x/api/timedtext?v=a&fmt=srv3&fmt=json3&lang=en"
        assert strip_format_param(url) == "https://x/api/timedtext?v=a&lang=en"

    def test_only_fmt_drops_query(self):
        assert strip_format_param("https://x/api/timedtext?fmt=srv3") == "https://x/api/timedtext"

    def test_fragment_kept(self):
        url = "https://x/api/timedtext?v=a&fmt=srv3#t=1"
        assert strip_format_param(url) == "https://x/api/timedtext?v=a#t=1"

    def test_url_without_query_is_untouched(self):
        assert strip_format_param("https://x/api/timedtext") == "https://x/api/timedtext"


class TestParseSeconds:
    @pytest.mark.parametrize("raw,expected", [("1.25", 1.25), ("0", 0.0), ("12", 12.0)])
    def test_valid(self, raw, expected):
        assert parse_seconds(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.2.3", "nan", "inf", "-3"])
    def test_invalid_defaults_to_zero(self, raw):
        assert parse_seconds(raw) == 0.0


class TestParseCaptionMarkup:
    def test_parses_every_line_in_order(self):
        segments = parse_caption_markup(CAPTION_XML, "en")

        assert [s.text for s in segments] == ["Hello &amp; welcome", "it's <b>great</b>"]
        assert [s.offset for s in segments] == [0.5, 2.6]
        assert [s.duration for s in segments] == [2.1, 1.4]
        assert {s.lang for s in segments} == {"en"}

    def test_n_elements_give_n_segments(self):
        body = "".join(f'<text start="{i}" dur="1">line {i}</text>' for i in range(25))
        segments = parse_caption_markup(body, "de")

        assert len(segments) == 25
        assert all(s.duration >= 0 and s.offset >= 0 for s in segments)

    def test_malformed_numbers_default_to_zero(self):
        segments = parse_caption_markup('<text start="x" dur="">oops</text>', "en")

        assert len(segments) == 1
        assert segments[0].offset == 0.0
        assert segments[0].duration == 0.0
        assert segments[0].text == "oops"

    def test_tolerates_truncated_document(self):
        body = '<transcript><text start="1" dur="2">kept</text><text start="3" dur='
        assert [s.text for s in parse_caption_markup(body, "en")] == ["kept"]

    @pytest.mark.parametrize("body", ["", "   \n\t", "<transcript></transcript>"])
    def test_empty_bodies_give_no_segments(self, body):
        assert parse_caption_markup(body, "en") == []
