"""Comment extraction from saved thread pages."""

from .comments import COMMENT_SELECTOR, PARAGRAPH_SELECTOR, parse_comments

__all__ = ["COMMENT_SELECTOR", "PARAGRAPH_SELECTOR", "parse_comments"]
