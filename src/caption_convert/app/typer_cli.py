from __future__ import annotations

import logging
from pathlib import Path

import typer

from caption_convert.core.formats import UnsupportedFormatError, is_supported_path
from caption_convert.core.pipeline import ConvertRequest, convert_file
from caption_convert.infra.config import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    SUPPORTED_EXTENSIONS,
    build_app_config,
)
from caption_convert.infra.logging_setup import configure_logging

USAGE_TEXT = (
    "Usage: caption-convert [source] [target]\n"
    f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="caption-convert",
    add_completion=False,
    help="Convert captions between SRT, WebVTT and ASS.",
)


def _usage_error() -> typer.Exit:
    typer.echo(USAGE_TEXT, err=True)
    return typer.Exit(code=1)


@app.command()
def convert_command(
    source_path: Path | None = typer.Argument(
        None, help="Source caption file (.srt, .vtt or .ass)."
    ),
    target_path: Path | None = typer.Argument(
        None, help="Target caption file; its extension selects the output format."
    ),
    encoding: str = typer.Option(
        DEFAULT_ENCODING, "--encoding", help="Text encoding for both files."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log conversion details to stderr."
    ),
) -> None:
    """Convert a caption file to the format implied by the target extension."""
    if source_path is None or target_path is None:
        raise _usage_error()
    if not is_supported_path(source_path) or not is_supported_path(target_path):
        raise _usage_error()

    try:
        config = build_app_config(
            encoding=encoding,
            log_level="DEBUG" if verbose else DEFAULT_LOG_LEVEL,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--encoding") from exc
    configure_logging(config.log_level)

    try:
        result = convert_file(
            ConvertRequest(
                source_path=source_path,
                target_path=target_path,
                config=config,
            )
        )
    except UnsupportedFormatError as exc:
        raise _usage_error() from exc
    except Exception as exc:
        typer.echo(str(exc) or exc.__class__.__name__, err=True)
        raise typer.Exit(code=1) from exc
    logger.info(
        "Converted %d cues: %s -> %s",
        result.cue_count,
        result.source_path,
        result.target_path,
    )


def run() -> None:
    """Console-script entrypoint."""
    app()
