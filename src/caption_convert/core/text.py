from __future__ import annotations

import re

_OVERRIDE_BLOCK_PATTERN = re.compile(r"\{[^}]*\}")
ASS_LINE_BREAK = "\\N"


def ass_to_plain(text: str) -> str:
    """Strip ASS override blocks and expand its escape sequences."""
    cleaned = _OVERRIDE_BLOCK_PATTERN.sub("", text)
    cleaned = cleaned.replace("\\N", "\n")
    cleaned = cleaned.replace("\\n", "\n")
    return cleaned.replace("\\h", " ")


def plain_to_ass(text: str) -> str:
    return ASS_LINE_BREAK.join(text.replace("\r", "").split("\n"))
