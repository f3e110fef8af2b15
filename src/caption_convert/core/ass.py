from __future__ import annotations

from collections.abc import Sequence

from caption_convert.core.subtitle import normalize_newlines
from caption_convert.core.text import ass_to_plain, plain_to_ass
from caption_convert.core.timecode import format_ass_time, parse_ass_time
from caption_convert.schemas.cue import Cue

ASS_HEADER = """[Script Info]
Title: Converted from WebVTT
ScriptType: v4.00+
WrapStyle: 0
PlayResX: 1280
PlayResY: 720
ScaledBorderAndShadow: yes

[V4+ Styles]
Format: Name,Fontname,Fontsize,PrimaryColour,SecondaryColour,OutlineColour,BackColour,Bold,Italic,Underline,StrikeOut,ScaleX,ScaleY,Spacing,Angle,BorderStyle,Outline,Shadow,Alignment,MarginL,MarginR,MarginV,Encoding
Style: Default,LINE Seed TW_OTF Bold,48,&H0080FFFF,&H000000FF,&H00000000,&H00000000,-1,0,0,0,100,100,1,0,1,2,0,2,1,1,20,1
Style: Secondary,Helvetica,12,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,-1,0,0,0,100,100,0,0,1,2,0,2,1,1,20,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
"""

EVENTS_SECTION = "[events]"
FORMAT_PREFIX = "format:"
DIALOGUE_PREFIX = "dialogue:"
REQUIRED_COLUMNS: tuple[str, ...] = ("start", "end", "text")


def _column_positions(columns: list[str]) -> dict[str, int] | None:
    lowered = [column.lower() for column in columns]
    if any(name not in lowered for name in REQUIRED_COLUMNS):
        return None
    return {name: lowered.index(name) for name in REQUIRED_COLUMNS}


def parse_ass(content: str) -> list[Cue]:
    """Collect ``Dialogue:`` lines from the ``[Events]`` section.

    Columns are resolved from the latest ``Format:`` line; the last declared
    column absorbs any remaining commas, so free text may contain them.
    """
    cues: list[Cue] = []
    in_events = False
    columns: list[str] | None = None
    positions: dict[str, int] | None = None

    for line in normalize_newlines(content).split("\n"):
        trimmed = line.strip()
        if trimmed.startswith("[") and trimmed.endswith("]"):
            in_events = trimmed.lower() == EVENTS_SECTION
            continue
        if not in_events:
            continue

        lowered = trimmed.lower()
        if lowered.startswith(FORMAT_PREFIX):
            columns = [part.strip() for part in trimmed[len(FORMAT_PREFIX) :].split(",")]
            positions = _column_positions(columns)
            continue
        if not lowered.startswith(DIALOGUE_PREFIX):
            continue
        if columns is None or positions is None:
            continue

        payload = trimmed[len(DIALOGUE_PREFIX) :].strip()
        fields = payload.split(",", len(columns) - 1)
        if len(fields) < len(columns):
            continue
        start = parse_ass_time(fields[positions["start"]])
        end = parse_ass_time(fields[positions["end"]])
        if start is None or end is None:
            continue
        cues.append(Cue(start=start, end=end, text=ass_to_plain(fields[positions["text"]])))
    return cues


def _render_dialogue(cue: Cue) -> str:
    return (
        f"Dialogue: 0,{format_ass_time(cue.start)},{format_ass_time(cue.end)},"
        f"Default,,0,0,0,,{plain_to_ass(cue.text)}"
    )


def render_ass(cues: Sequence[Cue]) -> str:
    lines = [ASS_HEADER.rstrip()]
    lines.extend(_render_dialogue(cue) for cue in cues)
    return "\n".join(lines) + "\n"
