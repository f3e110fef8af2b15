from __future__ import annotations

import math
import re

_ASS_TIMESTAMP_PATTERN = re.compile(r"^([0-9]+):([0-9]{2}):([0-9]{2})\.([0-9]{1,2})$")
_DIGITS_PATTERN = re.compile(r"[0-9]+")
_FRACTION_PATTERN = re.compile(r"[0-9]{1,3}")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _to_millis(hours: int, minutes: int, seconds: int, millis: int) -> int:
    return ((hours * 60 + minutes) * 60 + seconds) * 1_000 + millis


def parse_srt_vtt_time(raw: str) -> int | None:
    """Parse ``[HH:]MM:SS(,|.)f{1,3}`` into milliseconds, or None if malformed."""
    clean = raw.strip().replace(",", ".", 1)
    pieces = clean.split(".")
    if len(pieces) != 2:
        return None
    clock, fraction = pieces
    if not _FRACTION_PATTERN.fullmatch(fraction):
        return None
    clock_pieces = clock.split(":")
    if len(clock_pieces) not in (2, 3):
        return None
    if not all(_DIGITS_PATTERN.fullmatch(piece) for piece in clock_pieces):
        return None
    numbers = [int(piece) for piece in clock_pieces]
    if len(numbers) == 2:
        numbers.insert(0, 0)
    hours, minutes, seconds = numbers
    return _to_millis(hours, minutes, seconds, int(fraction.ljust(3, "0")))


def _format_millis(millis: float, separator: str) -> str:
    total = max(0, _round_half_up(millis))
    hours = total // 3_600_000
    minutes = (total % 3_600_000) // 60_000
    secs = (total % 60_000) // 1_000
    ms = total % 1_000
    return f"{hours:02d}:{minutes:02d}:{secs:02d}{separator}{ms:03d}"


def format_srt_time(millis: float) -> str:
    """Format milliseconds to SRT timestamp (HH:MM:SS,mmm)."""
    return _format_millis(millis, ",")


def format_vtt_time(millis: float) -> str:
    """Format milliseconds to WebVTT timestamp (HH:MM:SS.mmm)."""
    return _format_millis(millis, ".")


def parse_ass_time(raw: str) -> int | None:
    match = _ASS_TIMESTAMP_PATTERN.match(raw.strip())
    if match is None:
        return None
    hours, minutes, seconds = (int(group) for group in match.group(1, 2, 3))
    centis = int(match.group(4).ljust(2, "0"))
    return _to_millis(hours, minutes, seconds, centis * 10)


def format_ass_time(millis: float) -> str:
    """Format milliseconds to ASS timestamp (H:MM:SS.cc)."""
    total_cs = max(0, _round_half_up(millis / 10))
    cs = total_cs % 100
    total_seconds = total_cs // 100
    secs = total_seconds % 60
    total_minutes = total_seconds // 60
    minutes = total_minutes % 60
    hours = total_minutes // 60
    return f"{hours}:{minutes:02d}:{secs:02d}.{cs:02d}"
