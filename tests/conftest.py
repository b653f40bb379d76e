from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest


class FixedMeasurer:
    """Measurer returning preset heights keyed by block text."""

    def __init__(self, heights: Mapping[str, float], default: float = 30.0) -> None:
        self.heights = dict(heights)
        self.default = default
        self.calls: list[tuple[str, float, float]] = []

    def wrap(self, text: str, width: float, font_size: float) -> list[str]:
        return text.split("\n")

    def line_height(self, font_size: float) -> float:
        return font_size

    def measure(self, text: str, width: float, font_size: float) -> float:
        self.calls.append((text, width, font_size))
        return self.heights.get(text, self.default)


def blocks_with_heights(heights: list[float]) -> tuple[list[str], FixedMeasurer]:
    blocks = [f"comment {i}" for i in range(len(heights))]
    return blocks, FixedMeasurer(dict(zip(blocks, heights, strict=True)))


@pytest.fixture
def fixed_blocks() -> Callable[[list[float]], tuple[list[str], FixedMeasurer]]:
    return blocks_with_heights


THREAD_HTML = """
<html><body>
<shreddit-comment>
  <div slot="comment"><p>First comment.</p><p>  Second paragraph.  </p></div>
  <shreddit-comment>
    <div slot="comment"><p>A reply</p><p>   </p></div>
  </shreddit-comment>
</shreddit-comment>
<div slot="comment"><span>no paragraphs here</span></div>
<div class="sidebar"><p>Not a comment</p></div>
<shreddit-comment>
  <div slot="comment"><p>Last &amp; final</p></div>
</shreddit-comment>
</body></html>
"""


@pytest.fixture
def thread_html(tmp_path: Path) -> Path:
    path = tmp_path / "source.html"
    path.write_text(THREAD_HTML, encoding="utf-8")
    return path


@pytest.fixture
def thread_markup() -> str:
    return THREAD_HTML
