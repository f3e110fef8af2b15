from __future__ import annotations

from caption_convert.core.ass import ASS_HEADER, parse_ass, render_ass
from caption_convert.schemas.cue import Cue

SAMPLE_ASS = (
    "[Script Info]\n"
    "Title: sample\n"
    "\n"
    "[V4+ Styles]\n"
    "Format: Name, Fontname, Fontsize\n"
    "Style: Default,Arial,20\n"
    "Dialogue: 0,0:00:09.00,0:00:10.00,Default,,0,0,0,,outside events\n"
    "\n"
    "[Events]\n"
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
    "Dialogue: 0,0:00:01.00,0:00:02.50,Default,,0,0,0,,{\\b1}bold{\\b0} text\\Nline two\n"
    "Comment: 0,0:00:02.00,0:00:03.00,Default,,0,0,0,,not a cue\n"
    "Dialogue: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,Hello, world, again\n"
)


def test_parse_ass_reads_dialogue_from_events_only() -> None:
    assert parse_ass(SAMPLE_ASS) == [
        Cue(start=1_000, end=2_500, text="bold text\nline two"),
        Cue(start=3_000, end=4_000, text="Hello, world, again"),
    ]


def test_parse_ass_uses_declared_column_order() -> None:
    content = "[Events]\nFormat: Start, End, Text\nDialogue: 0:00:01.00,0:00:02.00,a,b\n"
    assert parse_ass(content) == [Cue(start=1_000, end=2_000, text="a,b")]


def test_parse_ass_matches_keywords_case_insensitively() -> None:
    content = "[EVENTS]\nformat: Layer, START, end, Text\nDIALOGUE: 0,0:00:01.00,0:00:02.00,hi\n"
    assert parse_ass(content) == [Cue(start=1_000, end=2_000, text="hi")]


def test_parse_ass_ignores_dialogue_until_valid_format() -> None:
    content = (
        "[Events]\n"
        "Dialogue: 0,0:00:00.50,0:00:01.00,Default,,0,0,0,,before format\n"
        "Format: Layer, Start, Text\n"
        "Dialogue: 0,0:00:01.00,ignored\n"
        "Format: Layer, Start, End, Text\n"
        "Dialogue: 0,0:00:01.00,0:00:02.00,kept\n"
    )
    assert parse_ass(content) == [Cue(start=1_000, end=2_000, text="kept")]


def test_parse_ass_drops_short_and_badly_timed_lines() -> None:
    content = (
        "[Events]\n"
        "Format: Layer, Start, End, Style, Text\n"
        "Dialogue: 0,0:00:01.00\n"
        "Dialogue: 0,0:0:01.00,0:00:02.00,Default,bad minutes\n"
        "Dialogue: 0,0:00:01.000,0:00:02.00,Default,bad centis\n"
        "Dialogue: 0,0:00:03.00,0:00:04.00,Default,ok\n"
    )
    assert parse_ass(content) == [Cue(start=3_000, end=4_000, text="ok")]


def test_parse_ass_handles_crlf_and_bom() -> None:
    content = "\ufeff[Events]\r\nFormat: Start, End, Text\r\nDialogue: 0:00:01.00,0:00:02.00,x\r\n"
    assert parse_ass(content) == [Cue(start=1_000, end=2_000, text="x")]


def test_render_ass_without_cues_is_header_only() -> None:
    output = render_ass([])
    assert output == ASS_HEADER
    assert output.endswith("Text\n")
    assert "Style: Default," in output
    assert "Style: Secondary," in output


def test_render_ass_dialogue_line() -> None:
    output = render_ass([Cue(start=1_000, end=2_504, text="a\nb")])
    assert output == ASS_HEADER + "Dialogue: 0,0:00:01.00,0:00:02.50,Default,,0,0,0,,a\\Nb\n"


def test_ass_normalize_is_idempotent() -> None:
    first = render_ass(parse_ass(SAMPLE_ASS))
    assert render_ass(parse_ass(first)) == first
    assert len(parse_ass(first)) == 2
