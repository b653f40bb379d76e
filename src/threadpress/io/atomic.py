"""All-or-nothing output files.

:func:`atomic_output` yields a binary handle to a temporary file next to the
destination.  The temporary file replaces the destination only when the
block exits cleanly; otherwise it is removed and the destination is left
untouched.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from threadpress.utils.errors import OutputWriteError

__all__ = ["atomic_output", "atomic_write_bytes"]


@contextmanager
def atomic_output(path: str | os.PathLike[str]) -> Iterator[BinaryIO]:
    """Yield a writable binary stream that becomes ``path`` on success.

    Raises
    ------
    OutputWriteError
        If the file system refuses the write.  Other exceptions raised inside
        the block propagate unchanged after the temporary file is removed.
    """

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".part", dir=target.parent
        )
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {target}: {exc}") from exc

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            yield fh
        os.replace(tmp, target)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        if isinstance(exc, OutputWriteError):
            raise
        raise OutputWriteError(f"Cannot write {target}: {exc}") from exc
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def atomic_write_bytes(path: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``path`` through :func:`atomic_output`."""

    with atomic_output(path) as fh:
        fh.write(data)
