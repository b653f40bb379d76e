"""Coarse progress reporting on stderr.

The pipeline reports ``(percent, stage)`` milestones through a plain
callable.  :class:`ProgressReporter` renders them with ``typer.progressbar``;
a disabled reporter accepts the same calls and draws nothing.
"""

from __future__ import annotations

import sys
from contextlib import ExitStack
from types import TracebackType
from typing import Any, Callable

import typer

ProgressCallback = Callable[[int, str], None]

__all__ = ["ProgressCallback", "ProgressReporter", "null_progress"]


def null_progress(percent: int, stage: str) -> None:
    """Progress callback that ignores every update."""


class ProgressReporter:
    """Context manager drawing a 0-100 progress bar labelled with the stage."""

    def __init__(self, *, enabled: bool = True, label: str = "Initializing...") -> None:
        self.enabled = enabled
        self.position = 0
        self.stage = label
        self._stack = ExitStack()
        self._bar: Any = None

    def __enter__(self) -> "ProgressReporter":
        if self.enabled:
            self._bar = self._stack.enter_context(
                typer.progressbar(
                    length=100,
                    label=self.stage,
                    file=sys.stderr,
                    show_percent=True,
                    show_eta=False,
                )
            )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._stack.close()
        self._bar = None

    def __call__(self, percent: int, stage: str) -> None:
        self.update(percent, stage)

    def update(self, percent: int, stage: str) -> None:
        """Move the bar to ``percent`` (never backwards) and relabel it."""

        percent = max(self.position, min(100, int(percent)))
        delta = percent - self.position
        self.position = percent
        self.stage = stage
        if self._bar is not None:
            self._bar.label = stage
            self._bar.update(delta)
