"""Replay a placement plan onto a document backend.

The renderer makes no layout decisions: page breaks, columns and separator
positions all come from the plan produced by :func:`threadpress.layout.layout`.
"""

from __future__ import annotations

from collections.abc import Sequence

from threadpress.layout import LayoutConfig, PageGeometry, PlacementEntry, layout
from threadpress.layout.measure import ReportLabMeasurer, TextMeasurer
from threadpress.utils.errors import EmptyInputError
from threadpress.utils.logging import get_logger

from .backend import CanvasBackend, DocumentBackend

__all__ = ["render", "render_pdf"]

log = get_logger(__name__)


def render(
    plan: Sequence[PlacementEntry],
    blocks: Sequence[str],
    geometry: PageGeometry,
    config: LayoutConfig,
    title: str | None,
    backend: DocumentBackend,
) -> bytes:
    """Draw ``blocks`` at the positions in ``plan`` and return the document.

    The title is drawn centred at the top of the first page.  A new page is
    opened whenever an entry's page differs from the open one.
    """

    if not plan:
        raise EmptyInputError("Placement plan is empty")

    backend.begin_page()
    current_page = 0
    if title:
        backend.draw_text(
            title,
            geometry.margin,
            geometry.margin,
            geometry.content_width,
            config.title_font_size,
            "center",
        )

    for entry in plan:
        if entry.page < current_page:
            raise ValueError(f"plan goes back from page {current_page} to {entry.page}")
        if entry.page != current_page:
            backend.begin_page()
            current_page = entry.page
        if entry.separator_y is not None:
            backend.draw_line(
                entry.x, entry.separator_y, entry.x + entry.width, entry.separator_y
            )
        backend.draw_text(
            blocks[entry.block_index], entry.x, entry.y, entry.width, config.font_size
        )

    log.debug("Rendered %d blocks on %d pages", len(plan), current_page + 1)
    return backend.finalize()


def render_pdf(
    blocks: Sequence[str],
    geometry: PageGeometry,
    config: LayoutConfig,
    *,
    title: str | None = None,
    measurer: TextMeasurer | None = None,
    font_name: str = "Helvetica",
    rule_color: str = "#cccccc",
) -> bytes:
    """Lay out ``blocks`` and return the finished PDF bytes."""

    measurer = measurer or ReportLabMeasurer(font_name)
    plan = layout(blocks, geometry, config, measurer, title=title)
    backend = CanvasBackend(
        geometry,
        measurer,
        font_name=font_name,
        rule_color=rule_color,
        rule_width=config.separator_thickness,
        title=title,
    )
    return render(plan, blocks, geometry, config, title, backend)
