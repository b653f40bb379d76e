"""Plain-text and Markdown writers.

Comments are written in order, joined by a separator: an 80 character rule
for plain text and a horizontal rule for Markdown.  Comment text is written
exactly as extracted.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from ..atomic import atomic_write_bytes

PathLikeStr = os.PathLike[str]

TEXT_SEPARATOR = "\n" + "-" * 80 + "\n\n"
MARKDOWN_SEPARATOR = "\n\n---\n\n"


def join_comments(comments: Sequence[str], separator: str) -> str:
    return separator.join(comments)


def write_text(
    path: str | PathLikeStr,
    comments: Sequence[str],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write ``comments`` separated by an 80-dash rule line."""

    atomic_write_bytes(path, join_comments(comments, TEXT_SEPARATOR).encode(encoding))


def write_markdown(
    path: str | PathLikeStr,
    comments: Sequence[str],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write ``comments`` separated by a Markdown horizontal rule."""

    atomic_write_bytes(path, join_comments(comments, MARKDOWN_SEPARATOR).encode(encoding))


__all__ = ["MARKDOWN_SEPARATOR", "TEXT_SEPARATOR", "write_markdown", "write_text"]
