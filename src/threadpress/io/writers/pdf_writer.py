"""PDF document writer.

The comments are laid out with :func:`threadpress.layout.layout` and drawn on
a reportlab canvas.  The whole document is rendered in memory before the
output file is created, so a failure never leaves a partial PDF behind.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from threadpress.layout import LayoutConfig, PageGeometry
from threadpress.layout.measure import ReportLabMeasurer
from threadpress.render import render_pdf

from ..atomic import atomic_write_bytes

PathLikeStr = os.PathLike[str]


def write_pdf(
    path: str | PathLikeStr,
    comments: Sequence[str],
    *,
    title: str | None = None,
    geometry: PageGeometry | None = None,
    layout_config: LayoutConfig | None = None,
    font_name: str = "Helvetica",
    line_gap: float = 5.0,
    rule_color: str = "#cccccc",
) -> None:
    """Render ``comments`` as a paginated PDF at ``path``."""

    data = render_pdf(
        comments,
        geometry or PageGeometry(),
        layout_config or LayoutConfig(),
        title=title,
        measurer=ReportLabMeasurer(font_name, line_gap),
        font_name=font_name,
        rule_color=rule_color,
    )
    atomic_write_bytes(path, data)


__all__ = ["write_pdf"]
