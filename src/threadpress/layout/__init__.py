"""Multi-column paginated layout of comment blocks."""

from .engine import layout, page_count, title_reserve
from .measure import ReportLabMeasurer, TextMeasurer
from .models import Cursor, LayoutConfig, PageGeometry, PlacementEntry, column_width

__all__ = [
    "Cursor",
    "LayoutConfig",
    "PageGeometry",
    "PlacementEntry",
    "ReportLabMeasurer",
    "TextMeasurer",
    "column_width",
    "layout",
    "page_count",
    "title_reserve",
]
