"""Text reader for saved pages.

:func:`read_text` loads a file without any content normalization.  UTF-8
byte-order marks are consumed by the default ``"utf-8-sig"`` codec.  A
missing file raises :class:`~threadpress.utils.errors.SourceNotFoundError`
before anything is read; bytes that are not valid in the encoding raise
:class:`~threadpress.utils.errors.SourceDecodeError`.  Other I/O errors
propagate to the caller.
"""

from __future__ import annotations

import os
from pathlib import Path

from threadpress.utils.errors import SourceDecodeError, SourceNotFoundError

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a text or HTML file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    if not Path(path).is_file():
        raise SourceNotFoundError(f"Source file not found: {path}")
    try:
        with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise SourceDecodeError(f"Cannot decode {path} as {encoding}: {exc.reason}") from exc


__all__ = ["read_text"]
