"""PDF rendering of a placement plan."""

from .backend import CanvasBackend, DocumentBackend
from .renderer import render, render_pdf

__all__ = ["CanvasBackend", "DocumentBackend", "render", "render_pdf"]
