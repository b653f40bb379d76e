"""Value types shared by the layout engine and the renderer.

Coordinates are in points with the origin at the top-left corner of the
page and ``y`` growing downwards.  ``y`` values are absolute page
positions, so the first usable row of a page is ``geometry.margin``.
"""

from __future__ import annotations

from dataclasses import dataclass

from threadpress.utils.errors import ConfigError

__all__ = [
    "Cursor",
    "LayoutConfig",
    "PageGeometry",
    "PlacementEntry",
    "column_width",
    "validate_layout",
]


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Fixed page size and uniform margin."""

    width: float = 612.0
    height: float = 792.0
    margin: float = 50.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def content_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def bottom(self) -> float:
        """Lowest ``y`` a block may reach without overflowing."""

        return self.content_height + self.margin


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    """Column and spacing settings for one layout pass.

    ``block_spacing`` is added after every block and ``separator_gap`` after
    every separator rule, so consecutive blocks in a column read as
    block, spacing, rule, gap, block.
    """

    column_count: int = 1
    column_gap: float = 20.0
    font_size: float = 11.0
    block_spacing: float = 12.0
    separator_gap: float = 12.0
    separator_thickness: float = 1.0
    near_bottom_ratio: float = 0.94
    title_font_size: float = 20.0
    title_gap: float = 24.0


@dataclass(slots=True)
class Cursor:
    """Running position of a layout pass.

    ``fresh`` is true while nothing has been placed in the current column.
    """

    page: int = 0
    column: int = 0
    y: float = 0.0
    fresh: bool = True


@dataclass(slots=True, frozen=True)
class PlacementEntry:
    """Resolved position of one block.

    ``separator_y`` is the ``y`` of the rule drawn above the block, or
    ``None`` when the block opens a page or column or is the first block.
    """

    block_index: int
    page: int
    column: int
    x: float
    y: float
    width: float
    measured_height: float
    separator_y: float | None = None

    @property
    def bottom(self) -> float:
        return self.y + self.measured_height


def column_width(geometry: PageGeometry, config: LayoutConfig) -> float:
    """Return the width of one column, validating the configuration."""

    validate_layout(geometry, config)
    gaps = config.column_gap * (config.column_count - 1)
    return (geometry.content_width - gaps) / config.column_count


def validate_layout(geometry: PageGeometry, config: LayoutConfig) -> None:
    """Raise :class:`ConfigError` when ``geometry``/``config`` cannot be laid out."""

    if not isinstance(config.column_count, int) or config.column_count < 1:
        raise ConfigError(f"column count must be at least 1, got {config.column_count!r}")
    if config.column_gap < 0:
        raise ConfigError(f"column gap must not be negative, got {config.column_gap}")
    if config.font_size <= 0 or config.title_font_size <= 0:
        raise ConfigError("font sizes must be positive")
    if min(config.block_spacing, config.separator_gap, config.title_gap) < 0:
        raise ConfigError("spacing values must not be negative")
    if not 0.0 < config.near_bottom_ratio <= 1.0:
        raise ConfigError(f"near-bottom ratio must be in (0, 1], got {config.near_bottom_ratio}")
    if geometry.content_height <= 0:
        raise ConfigError(
            f"page height {geometry.height} leaves no room inside margin {geometry.margin}"
        )
    gaps = config.column_gap * (config.column_count - 1)
    width = (geometry.content_width - gaps) / config.column_count
    if width <= 0:
        raise ConfigError(
            f"column width {width:.1f} is not positive: {config.column_count} columns "
            f"with gap {config.column_gap} do not fit in content width "
            f"{geometry.content_width}"
        )
