"""Export the comments of a saved discussion thread to txt, Markdown or PDF.

The pipeline reads a saved HTML page, extracts the comment texts, and
writes them out as a flat document.  PDF output is laid out by
:mod:`threadpress.layout` into one or more columns per page and replayed
onto a reportlab canvas by :mod:`threadpress.render`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
