"""Layout engine: flow comment blocks into columns and pages.

:func:`layout` turns an ordered sequence of text blocks into an ordered
list of :class:`~threadpress.layout.models.PlacementEntry` values.  It
performs no I/O and keeps no state between calls, so the same inputs always
produce the same plan.

Two policies are used and deliberately kept apart:

* **Single column** places a block first and checks afterwards.  When the
  bottom of the block passes the near-bottom threshold and more blocks
  remain, the next block starts a new page.  A block that starts above the
  threshold may run past the bottom margin.
* **Multiple columns** measure first.  A block that would cross the bottom
  of the column moves to the next column, and after the last column to the
  next page.  The separator rule is only emitted when the following block
  stays in the same column.

A block taller than a whole column is placed at the top of the column it
lands in and allowed to overflow; the cursor never rewinds.
"""

from __future__ import annotations

from collections.abc import Sequence

from threadpress.utils.errors import EmptyInputError
from threadpress.utils.logging import get_logger

from .measure import TextMeasurer
from .models import Cursor, LayoutConfig, PageGeometry, PlacementEntry, column_width

__all__ = ["layout", "page_count", "title_reserve"]

log = get_logger(__name__)


def title_reserve(
    title: str | None,
    geometry: PageGeometry,
    config: LayoutConfig,
    measurer: TextMeasurer,
) -> float:
    """Return the vertical space the title block takes on the first page."""

    if not title:
        return 0.0
    height = measurer.measure(title, geometry.content_width, config.title_font_size)
    return height + config.title_gap


def page_count(plan: Sequence[PlacementEntry]) -> int:
    """Return the number of pages ``plan`` spans."""

    return plan[-1].page + 1 if plan else 0


def layout(
    blocks: Sequence[str],
    geometry: PageGeometry,
    config: LayoutConfig,
    measurer: TextMeasurer,
    *,
    title: str | None = None,
) -> list[PlacementEntry]:
    """Return the placement plan for ``blocks``.

    Parameters
    ----------
    blocks:
        Comment texts in output order.
    geometry, config:
        Page geometry and column settings.  Both are validated before any
        text is measured.
    measurer:
        Wraps and measures text at the column width.
    title:
        Optional heading drawn at the top of the first page.  Its height is
        reserved in every column of page 0.

    Raises
    ------
    ConfigError
        If the column count is below one or the column width is not positive.
    EmptyInputError
        If ``blocks`` is empty.
    """

    width = column_width(geometry, config)
    if not blocks:
        raise EmptyInputError("No comments to lay out")

    first_top = geometry.margin + title_reserve(title, geometry, config, measurer)
    if config.column_count == 1:
        plan = _layout_single(blocks, geometry, config, measurer, first_top)
    else:
        plan = _layout_columns(blocks, geometry, config, measurer, width, first_top)
    log.debug(
        "Laid out %d blocks on %d pages in %d column(s)",
        len(plan),
        page_count(plan),
        config.column_count,
    )
    return plan


def _layout_single(
    blocks: Sequence[str],
    geometry: PageGeometry,
    config: LayoutConfig,
    measurer: TextMeasurer,
    first_top: float,
) -> list[PlacementEntry]:
    width = geometry.content_width
    threshold = geometry.margin + geometry.content_height * config.near_bottom_ratio
    cursor = Cursor(y=first_top)
    plan: list[PlacementEntry] = []
    last = len(blocks) - 1

    for index, block in enumerate(blocks):
        separator_y = None
        if not cursor.fresh:
            separator_y = cursor.y
            cursor.y += config.separator_gap
        height = measurer.measure(block, width, config.font_size)
        plan.append(
            PlacementEntry(
                block_index=index,
                page=cursor.page,
                column=0,
                x=geometry.margin,
                y=cursor.y,
                width=width,
                measured_height=height,
                separator_y=separator_y,
            )
        )
        cursor.y += height
        cursor.fresh = False
        if cursor.y > threshold and index < last:
            cursor.page += 1
            cursor.y = geometry.margin
            cursor.fresh = True
        else:
            cursor.y += config.block_spacing
    return plan


def _layout_columns(
    blocks: Sequence[str],
    geometry: PageGeometry,
    config: LayoutConfig,
    measurer: TextMeasurer,
    width: float,
    first_top: float,
) -> list[PlacementEntry]:
    bottom = geometry.bottom
    full_column = geometry.content_height
    cursor = Cursor(y=first_top)
    plan: list[PlacementEntry] = []

    def top_of(page: int) -> float:
        return first_top if page == 0 else geometry.margin

    def advance() -> None:
        cursor.column += 1
        if cursor.column == config.column_count:
            cursor.column = 0
            cursor.page += 1
        cursor.y = top_of(cursor.page)
        cursor.fresh = True
        log.debug("Advanced to page %d column %d", cursor.page, cursor.column)

    for index, block in enumerate(blocks):
        height = measurer.measure(block, width, config.font_size)
        separator_y = None
        if not cursor.fresh:
            if cursor.y + config.separator_gap + height > bottom:
                advance()
            else:
                separator_y = cursor.y
                cursor.y += config.separator_gap
        # Columns on the first page are shortened by the title; a block that
        # fits a full column keeps moving until it reaches one.
        while cursor.fresh and cursor.y + height > bottom and height <= full_column:
            advance()
        if height > full_column:
            log.debug("Block %d (%.1fpt) is taller than a column", index, height)

        plan.append(
            PlacementEntry(
                block_index=index,
                page=cursor.page,
                column=cursor.column,
                x=geometry.margin + cursor.column * (width + config.column_gap),
                y=cursor.y,
                width=width,
                measured_height=height,
                separator_y=separator_y,
            )
        )
        cursor.y += height + config.block_spacing
        cursor.fresh = False
    return plan
