from __future__ import annotations

import re
from collections.abc import Sequence

from caption_convert.core.timecode import (
    format_srt_time,
    format_vtt_time,
    parse_srt_vtt_time,
)
from caption_convert.schemas.cue import Cue

VTT_HEADER = "WEBVTT"
_BLOCK_SEPARATOR_PATTERN = re.compile(r"\n{2,}")
_TIME_LINE_PATTERN = re.compile(r"(.+?)\s*-->\s*(.+)")
_BYTE_ORDER_MARK = "\ufeff"


def normalize_newlines(content: str) -> str:
    """Unify line endings to ``\\n`` and drop a leading byte-order mark."""
    text = content.replace("\r\n", "\n").replace("\r", "\n")
    if text.startswith(_BYTE_ORDER_MARK):
        text = text[1:]
    return text


def _parse_time_line(line: str) -> tuple[int, int] | None:
    match = _TIME_LINE_PATTERN.search(line)
    if not match:
        return None
    end_tokens = match.group(2).split()
    start = parse_srt_vtt_time(match.group(1))
    end = parse_srt_vtt_time(end_tokens[0] if end_tokens else "")
    if start is None or end is None:
        return None
    return start, end


def parse_srt_vtt(content: str) -> list[Cue]:
    cues: list[Cue] = []
    for block in _BLOCK_SEPARATOR_PATTERN.split(normalize_newlines(content)):
        lines = block.split("\n")
        time_index = next(
            (index for index, line in enumerate(lines) if "-->" in line), None
        )
        if time_index is None:
            continue
        times = _parse_time_line(lines[time_index])
        if times is None:
            continue
        text = "\n".join(lines[time_index + 1 :]).rstrip()
        cues.append(Cue(start=times[0], end=times[1], text=text))
    return cues


parse_srt = parse_srt_vtt
parse_vtt = parse_srt_vtt


def render_srt(cues: Sequence[Cue]) -> str:
    blocks = [
        f"{index}\n{format_srt_time(cue.start)} --> {format_srt_time(cue.end)}\n{cue.text}"
        for index, cue in enumerate(cues, start=1)
    ]
    return "\n\n".join(blocks) + ("\n" if blocks else "")


def render_vtt(cues: Sequence[Cue]) -> str:
    blocks = [
        f"{format_vtt_time(cue.start)} --> {format_vtt_time(cue.end)}\n{cue.text}"
        for cue in cues
    ]
    body = "\n\n".join(blocks) + ("\n" if blocks else "")
    return f"{VTT_HEADER}\n\n{body}"
