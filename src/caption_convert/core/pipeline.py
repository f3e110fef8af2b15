from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from caption_convert.core.formats import CaptionFormat, resolve_format
from caption_convert.infra.config import AppConfig
from caption_convert.infra.storage import read_text, write_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertRequest:
    source_path: Path
    target_path: Path
    config: AppConfig


@dataclass(frozen=True)
class ConvertResult:
    source_path: Path
    target_path: Path
    source_format: str
    target_format: str
    cue_count: int


def convert_text(
    content: str,
    source_format: CaptionFormat,
    target_format: CaptionFormat,
) -> str:
    return target_format.render(source_format.parse(content))


def convert_file(request: ConvertRequest) -> ConvertResult:
    """Parse the source file and write it back out in the target's format.

    Both formats are resolved before touching the filesystem, so an
    unsupported extension never leaves a partial target behind.
    """
    source_format = resolve_format(request.source_path)
    target_format = resolve_format(request.target_path)
    logger.debug(
        "Converting %s (%s) -> %s (%s)",
        request.source_path,
        source_format.name,
        request.target_path,
        target_format.name,
    )

    content = read_text(request.source_path, encoding=request.config.encoding)
    cues = source_format.parse(content)
    logger.debug("Parsed %d cues from %s", len(cues), request.source_path)

    output = target_format.render(cues)
    written = write_text(request.target_path, output, encoding=request.config.encoding)
    logger.debug("Wrote %d bytes to %s", written, request.target_path)

    return ConvertResult(
        source_path=request.source_path,
        target_path=request.target_path,
        source_format=source_format.name,
        target_format=target_format.name,
        cue_count=len(cues),
    )
