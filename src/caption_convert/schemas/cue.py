from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cue:
    start: int
    end: int
    text: str
