"""Extension based registry for file I/O.

Readers are registered for ``.html``, ``.htm`` and ``.txt`` sources and
return the document text.  Writers are registered for ``.txt``, ``.md`` and
``.pdf`` and take the ordered list of comments.  The registry dispatches on
the lower-cased file extension.

``UnsupportedFormatError`` is raised when attempting to read or write a file
whose extension has no registered handler.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .readers.text_reader import read_text
from .writers.pdf_writer import write_pdf
from .writers.txt_writer import write_markdown, write_text

_READERS: dict[str, Callable[..., str]] = {}
_WRITERS: dict[str, Callable[..., None]] = {}


def register_reader(ext: str, func: Callable[..., str]) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".html"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a string.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: Callable[..., None]) -> None:
    """Register a writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    SourceNotFoundError
        If the file does not exist.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_file(path: str | os.PathLike[str], comments: Sequence[str], **kwargs: Any) -> None:
    """Write ``comments`` to ``path`` using the registered writer for its extension.

    Parameters
    ----------
    path:
        Destination file path.
    comments:
        Comment texts in output order.
    **kwargs:
        Additional keyword arguments forwarded to the underlying writer.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    OutputWriteError
        If the file could not be written.  No partial file is left behind.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, comments, **kwargs)


for _ext in (".html", ".htm", ".txt"):
    register_reader(_ext, read_text)
register_writer(".txt", write_text)
register_writer(".md", write_markdown)
register_writer(".pdf", write_pdf)

__all__ = [
    "register_reader",
    "register_writer",
    "get_extension",
    "read_file",
    "write_file",
]
