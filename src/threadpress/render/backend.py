"""Document-writing backends.

A backend receives drawing operations in page coordinates with the origin at
the top-left corner.  :class:`CanvasBackend` flips them onto a reportlab
canvas, whose origin is the bottom-left corner, and returns the PDF bytes
from :meth:`CanvasBackend.finalize`.
"""

from __future__ import annotations

import io
from typing import Literal, Protocol, runtime_checkable

from reportlab.lib.colors import HexColor, black
from reportlab.pdfgen import canvas

from threadpress.layout.measure import TextMeasurer
from threadpress.layout.models import PageGeometry

Alignment = Literal["left", "center", "right"]

__all__ = ["Alignment", "CanvasBackend", "DocumentBackend"]


@runtime_checkable
class DocumentBackend(Protocol):
    """Minimal drawing surface used by the renderer."""

    def begin_page(self) -> None:
        """Close the open page, if any, and start a new one."""

        ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        width: float,
        font_size: float,
        align: Alignment = "left",
    ) -> None:
        """Draw ``text`` wrapped at ``width`` with its top edge at ``y``."""

        ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a separator rule."""

        ...

    def finalize(self) -> bytes:
        """Close the document and return its bytes."""

        ...


class CanvasBackend:
    """Render onto an in-memory reportlab canvas."""

    def __init__(
        self,
        geometry: PageGeometry,
        measurer: TextMeasurer,
        *,
        font_name: str = "Helvetica",
        rule_color: str = "#cccccc",
        rule_width: float = 1.0,
        title: str | None = None,
    ) -> None:
        self.geometry = geometry
        self.measurer = measurer
        self.font_name = font_name
        self.rule_color = HexColor(rule_color)
        self.rule_width = rule_width
        self.pages = 0
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(geometry.width, geometry.height))
        self._canvas.setAuthor("threadpress")
        if title:
            self._canvas.setTitle(title)

    def begin_page(self) -> None:
        if self.pages:
            self._canvas.showPage()
        self.pages += 1

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        width: float,
        font_size: float,
        align: Alignment = "left",
    ) -> None:
        c = self._canvas
        c.setFont(self.font_name, font_size)
        c.setFillColor(black)
        leading = self.measurer.line_height(font_size)
        baseline = y + font_size
        for line in self.measurer.wrap(text, width, font_size):
            pdf_y = self.geometry.height - baseline
            if align == "center":
                c.drawCentredString(x + width / 2, pdf_y, line)
            elif align == "right":
                c.drawRightString(x + width, pdf_y, line)
            else:
                c.drawString(x, pdf_y, line)
            baseline += leading

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        c = self._canvas
        height = self.geometry.height
        c.setStrokeColor(self.rule_color)
        c.setLineWidth(self.rule_width)
        c.line(x1, height - y1, x2, height - y2)

    def finalize(self) -> bytes:
        if not self.pages:
            self.begin_page()
        self._canvas.save()
        return self._buffer.getvalue()
