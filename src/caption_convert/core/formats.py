from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from caption_convert.core.ass import parse_ass, render_ass
from caption_convert.core.subtitle import parse_srt, parse_vtt, render_srt, render_vtt
from caption_convert.infra.config import SUPPORTED_EXTENSIONS
from caption_convert.schemas.cue import Cue

CueParser = Callable[[str], list[Cue]]
CueRenderer = Callable[[Sequence[Cue]], str]


class UnsupportedFormatError(ValueError):
    """Raised when a path's extension is not one of the supported caption formats."""


@dataclass(frozen=True)
class CaptionFormat:
    name: str
    extension: str
    parse: CueParser
    render: CueRenderer


CAPTION_FORMATS: dict[str, CaptionFormat] = {
    caption_format.extension: caption_format
    for caption_format in (
        CaptionFormat(name="srt", extension=".srt", parse=parse_srt, render=render_srt),
        CaptionFormat(name="vtt", extension=".vtt", parse=parse_vtt, render=render_vtt),
        CaptionFormat(name="ass", extension=".ass", parse=parse_ass, render=render_ass),
    )
}


def is_supported_path(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def resolve_format(path: Path) -> CaptionFormat:
    extension = path.suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Unsupported caption format '{extension or path.name}'. "
            f"Allowed: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return CAPTION_FORMATS[extension]
