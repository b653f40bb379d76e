"""Text measurement.

The layout engine only needs to know how tall a block of text is once it is
wrapped at a given width.  The renderer draws the wrapped lines returned by
the same measurer so planned heights and drawn heights agree.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

__all__ = ["ReportLabMeasurer", "TextMeasurer"]


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol for wrapping and measuring plain text."""

    def wrap(self, text: str, width: float, font_size: float) -> list[str]:
        """Return ``text`` broken into lines no wider than ``width``."""

        ...

    def line_height(self, font_size: float) -> float:
        """Return the distance between consecutive baselines."""

        ...

    def measure(self, text: str, width: float, font_size: float) -> float:
        """Return the height of ``text`` wrapped at ``width``."""

        ...


class ReportLabMeasurer:
    """Measure text with reportlab font metrics.

    Hard line breaks are kept; an empty line still takes one line of height,
    which is how paragraph breaks (``"\\n\\n"``) show up in the output.  Tokens
    wider than the column, such as long URLs, are broken between characters.
    """

    def __init__(self, font_name: str = "Helvetica", line_gap: float = 5.0) -> None:
        self.font_name = font_name
        self.line_gap = line_gap

    def wrap(self, text: str, width: float, font_size: float) -> list[str]:
        lines: list[str] = []
        for raw in text.split("\n"):
            if not raw.strip():
                lines.append("")
                continue
            for line in simpleSplit(raw, self.font_name, font_size, width) or [""]:
                if stringWidth(line, self.font_name, font_size) > width:
                    lines.extend(self._break_chars(line, width, font_size))
                else:
                    lines.append(line)
        return lines

    def _break_chars(self, word: str, width: float, font_size: float) -> list[str]:
        """Split a token wider than ``width`` into pieces that fit.

        A single character wider than ``width`` still gets a line of its own.
        """

        pieces: list[str] = []
        current = ""
        for ch in word:
            if current and stringWidth(current + ch, self.font_name, font_size) > width:
                pieces.append(current)
                current = ch
            else:
                current += ch
        if current:
            pieces.append(current)
        return pieces

    def line_height(self, font_size: float) -> float:
        return font_size * 1.2 + self.line_gap

    def measure(self, text: str, width: float, font_size: float) -> float:
        return len(self.wrap(text, width, font_size)) * self.line_height(font_size)
