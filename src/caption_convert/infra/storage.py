from __future__ import annotations

from pathlib import Path


def read_text(path: Path, *, encoding: str) -> str:
    """Decode ``path``, substituting U+FFFD for undecodable bytes."""
    return path.read_bytes().decode(encoding, errors="replace")


def write_text(path: Path, content: str, *, encoding: str) -> int:
    """Overwrite ``path`` with ``content``; returns the number of bytes written."""
    payload = content.encode(encoding)
    path.write_bytes(payload)
    return len(payload)
