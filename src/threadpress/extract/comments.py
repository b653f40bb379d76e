"""Extract comment texts from a saved thread page.

Each element matching the comment selector yields one comment: the stripped
text of its paragraphs joined by a blank line.  Comments without any
non-empty paragraph are skipped.  Document order is preserved and nothing is
deduplicated.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

COMMENT_SELECTOR = 'div[slot="comment"]'
PARAGRAPH_SELECTOR = "p"
PARAGRAPH_SEPARATOR = "\n\n"

__all__ = ["COMMENT_SELECTOR", "PARAGRAPH_SELECTOR", "parse_comments"]


def parse_comments(
    html: str,
    *,
    comment_selector: str = COMMENT_SELECTOR,
    paragraph_selector: str = PARAGRAPH_SELECTOR,
) -> list[str]:
    """Return the comments found in ``html`` in document order."""

    soup = BeautifulSoup(html, "html.parser")
    comments: list[str] = []
    for element in soup.select(comment_selector):
        paragraphs = [p.get_text().strip() for p in element.select(paragraph_selector)]
        paragraphs = [text for text in paragraphs if text]
        if paragraphs:
            comments.append(PARAGRAPH_SEPARATOR.join(paragraphs))
    return comments
