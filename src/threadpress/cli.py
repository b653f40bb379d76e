"""Typer-based command line interface for the export pipeline.

The ``run`` command reads a saved thread page, extracts its comments, asks
for any output option not given on the command line (only when prompting is
enabled, by default when stdin is a terminal) and writes one output file.

Exit codes
----------
0 success
3 I/O error (missing or undecodable source, unsupported extension, write failure)
4 configuration error
5 pipeline error (no comments found or unexpected exception)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import click
import typer
from pydantic import ValidationError

from .config import ConfigModel, ExportOptions, load_config
from .config.schema import COLUMN_CHOICES, FONT_SIZES, OUTPUT_FORMATS
from .pipeline import export_thread, extract_comments
from .utils.errors import (
    ConfigError,
    EmptyInputError,
    OutputWriteError,
    SourceDecodeError,
    SourceNotFoundError,
    UnsupportedFormatError,
)
from .utils.logging import configure_logging
from .utils.progress import ProgressReporter

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="threadpress",
    help="Export thread comments to txt, md or pdf. Use 'threadpress run' to export.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(code)


def _first_line(exc: BaseException) -> str:
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


def _check_filename(value: str) -> str:
    if not value.strip():
        raise click.BadParameter("Filename cannot be empty")
    return value.strip()


def _collect_options(
    cfg: ConfigModel,
    *,
    prompt: bool,
    fmt: str | None,
    filename: str | None,
    font_size: int | None,
    columns: int | None,
    title: str | None,
) -> ExportOptions:
    """Merge CLI values over config defaults, asking for the missing ones."""

    defaults = cfg.output
    if prompt and fmt is None:
        fmt = typer.prompt(
            "Select output format",
            default=defaults.format,
            type=click.Choice(OUTPUT_FORMATS),
        )
    if prompt and filename is None:
        filename = typer.prompt(
            "Enter the output filename (without extension)",
            default=defaults.filename,
            value_proc=_check_filename,
        )
    if prompt and (fmt or defaults.format) == "pdf":
        if font_size is None:
            font_size = int(
                typer.prompt(
                    "Select font size",
                    default=str(defaults.font_size),
                    type=click.Choice([str(s) for s in FONT_SIZES]),
                )
            )
        if columns is None:
            columns = typer.prompt(
                "Select number of columns",
                default=defaults.columns,
                type=click.IntRange(min(COLUMN_CHOICES), max(COLUMN_CHOICES)),
            )
        if title is None:
            title = typer.prompt("Enter the document title", default=defaults.title)

    values: dict[str, Any] = defaults.model_dump()
    overrides = {
        "format": fmt,
        "filename": filename,
        "font_size": font_size,
        "columns": columns,
        "title": title,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ExportOptions.model_validate(values)


@app.callback()
def main() -> None:
    """Entry point for the threadpress command group."""
    pass


@app.command()
def run(  # noqa: PLR0913
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--in", "--input", help="Saved thread page (.html); defaults to the config source"
    ),
    filename: Optional[str] = typer.Option(  # noqa: B008
        None, "--out", "-o", help="Output filename without extension"
    ),
    out_dir: Path = typer.Option(  # noqa: B008
        Path("."), "--out-dir", help="Directory for the output file"
    ),
    fmt: Optional[str] = typer.Option(  # noqa: B008
        None, "--format", "-f", help="Output format [txt|md|pdf]"
    ),
    font_size: Optional[int] = typer.Option(  # noqa: B008
        None, "--font-size", help="PDF body font size [9|11|13|15]"
    ),
    columns: Optional[int] = typer.Option(  # noqa: B008
        None, "--columns", help="PDF column count [1-4]"
    ),
    title: Optional[str] = typer.Option(None, "--title", help="PDF document title"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    prompt: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--prompt/--no-prompt",
        help="Ask for missing options (default: only when stdin is a terminal)",
    ),
    progress: bool = typer.Option(  # noqa: B008
        True, "--progress/--no-progress", help="Show a progress bar on stderr"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> dict[str, str]:
    """Extract the comments of ``--in`` and write them to ``<out>.<format>``."""

    configure_logging(verbose)

    # Load configuration
    try:
        cfg = load_config(config_path)
    except (ValidationError, Exception) as exc:  # pragma: no cover - diverse
        _safe_exit(4, _first_line(exc))
    if verbose:
        typer.echo("Loaded config", err=True)

    source = in_path if in_path is not None else Path(cfg.source)

    # Read and extract
    try:
        with ProgressReporter(enabled=progress) as bar:
            comments = extract_comments(source, cfg.extract, progress=bar)
    except (SourceNotFoundError, SourceDecodeError, UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    except EmptyInputError as exc:
        _safe_exit(5, str(exc))
    typer.echo(f"Found {len(comments)} comments", err=True)

    ask = sys.stdin.isatty() if prompt is None else prompt
    try:
        options = _collect_options(
            cfg,
            prompt=ask,
            fmt=fmt,
            filename=filename,
            font_size=font_size,
            columns=columns,
            title=title,
        )
    except ValidationError as exc:
        _safe_exit(4, _first_line(exc))

    # Write output
    try:
        with ProgressReporter(enabled=progress, label="Preparing output...") as bar:
            bar.update(50, "Preparing output...")
            result = export_thread(
                cfg, options=options, comments=comments, out_dir=out_dir, progress=bar
            )
    except ConfigError as exc:
        _safe_exit(4, str(exc))
    except (OutputWriteError, UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)

    typer.echo(f"Successfully saved to: {result.path}")
    typer.echo(f"Total comments extracted: {result.count}")
    return {"out": str(result.path), "count": str(result.count)}
