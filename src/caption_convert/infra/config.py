from __future__ import annotations

import codecs
from dataclasses import dataclass

SUPPORTED_EXTENSIONS: tuple[str, ...] = (".srt", ".vtt", ".ass")
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class AppConfig:
    encoding: str
    log_level: str


def normalize_encoding(value: str) -> str:
    encoding = value.strip()
    if not encoding:
        raise ValueError("Encoding must not be empty.")
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        raise ValueError(f"Unsupported encoding '{value}'.") from exc


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{value}'. Allowed: {sorted(SUPPORTED_LOG_LEVELS)}"
        )
    return level


def build_app_config(
    *,
    encoding: str = DEFAULT_ENCODING,
    log_level: str = DEFAULT_LOG_LEVEL,
) -> AppConfig:
    return AppConfig(
        encoding=normalize_encoding(encoding),
        log_level=normalize_log_level(log_level),
    )
