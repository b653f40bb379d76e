"""Export pipeline: read, extract, lay out and write one document.

The stages run strictly one after another.  Layout does not start before
extraction has finished, and the output file is only created once the
complete document is ready.  Every call builds its own plan and output
stream, so separate exports share no state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import ConfigModel, ExportOptions
from .config.schema import ExtractSettings
from .extract import parse_comments
from .io import read_file, write_file
from .layout import LayoutConfig, PageGeometry
from .layout.models import validate_layout
from .utils.errors import EmptyInputError
from .utils.logging import get_logger
from .utils.progress import ProgressCallback, null_progress

__all__ = [
    "ExportResult",
    "export_thread",
    "extract_comments",
    "layout_settings",
    "writer_options",
]

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ExportResult:
    """Outcome of a successful export."""

    path: Path
    count: int
    format: str


def layout_settings(
    cfg: ConfigModel, options: ExportOptions | None = None
) -> tuple[PageGeometry, LayoutConfig]:
    """Build the page geometry and layout configuration from ``cfg``."""

    options = options or cfg.output
    page = cfg.page
    lay = cfg.layout
    geometry = PageGeometry(width=page.width, height=page.height, margin=page.margin)
    config = LayoutConfig(
        column_count=options.columns,
        column_gap=lay.column_gap,
        font_size=float(options.font_size),
        block_spacing=lay.block_spacing,
        separator_gap=lay.separator_gap,
        separator_thickness=lay.separator_thickness,
        near_bottom_ratio=lay.near_bottom_ratio,
        title_font_size=lay.title_font_size,
        title_gap=lay.title_gap,
    )
    return geometry, config


def writer_options(cfg: ConfigModel, options: ExportOptions) -> dict[str, Any]:
    """Return the keyword arguments for the writer of ``options.format``."""

    if options.format != "pdf":
        return {}
    geometry, config = layout_settings(cfg, options)
    return {
        "title": options.title,
        "geometry": geometry,
        "layout_config": config,
        "font_name": cfg.layout.font_name,
        "line_gap": cfg.layout.line_gap,
        "rule_color": cfg.layout.separator_color,
    }


def _comments_from_html(html: str, settings: ExtractSettings | None) -> list[str]:
    if settings is None:
        comments = parse_comments(html)
    else:
        comments = parse_comments(
            html,
            comment_selector=settings.comment_selector,
            paragraph_selector=settings.paragraph_selector,
        )
    if not comments:
        raise EmptyInputError("No comments found in the HTML file")
    return comments


def extract_comments(
    source: str | os.PathLike[str],
    settings: ExtractSettings | None = None,
    *,
    progress: ProgressCallback = null_progress,
) -> list[str]:
    """Read ``source`` and return its comments.

    Raises
    ------
    SourceNotFoundError
        If ``source`` does not exist.
    SourceDecodeError
        If ``source`` is not valid UTF-8 text.
    EmptyInputError
        If the page holds no comments.
    """

    progress(0, "Reading source file...")
    html = read_file(source)
    progress(20, "Source file loaded")
    progress(20, "Parsing comments...")
    comments = _comments_from_html(html, settings)
    progress(40, f"Found {len(comments)} comments")
    return comments


def export_thread(
    cfg: ConfigModel,
    *,
    options: ExportOptions | None = None,
    source: str | os.PathLike[str] | None = None,
    out_dir: str | os.PathLike[str] = ".",
    comments: list[str] | None = None,
    progress: ProgressCallback = null_progress,
) -> ExportResult:
    """Run the full export and return where the result was written.

    ``comments`` may be passed when extraction already ran, for example
    when options were collected from the user in between.
    """

    options = options or cfg.output
    if options.format == "pdf":
        validate_layout(*layout_settings(cfg, options))

    if comments is None:
        source = source if source is not None else cfg.source
        comments = extract_comments(source, cfg.extract, progress=progress)
    elif not comments:
        raise EmptyInputError("No comments found in the HTML file")

    out_path = Path(out_dir) / options.output_name
    progress(50, f"Generating {options.format.upper()} file...")
    log.debug("Writing %d comments to %s", len(comments), out_path)
    write_file(out_path, comments, **writer_options(cfg, options))
    progress(90, "Saving output file...")
    progress(100, "Complete!")
    return ExportResult(path=out_path, count=len(comments), format=options.format)
