from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from ..errors import ParseError
from ..utils.logging import get_logger
from .selectors import SelectorSet

_logger = get_logger("newsscraper.processors.document")


def parse_document(raw_html: str | bytes | None) -> BeautifulSoup:
    """Parse raw HTML into a queryable tree.

    ``html.parser`` recovers from almost any malformed markup, so a
    ``ParseError`` is only raised for input that is not text at all or that
    the builder rejects outright.
    """
    if raw_html is None:
        raise ParseError("No HTML content to parse")
    if not isinstance(raw_html, (str, bytes)):
        raise ParseError(f"Cannot parse HTML from {type(raw_html).__name__}")
    try:
        return BeautifulSoup(raw_html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Malformed HTML: {exc}") from exc


def find_candidates(root: Tag, selector: SelectorSet, *, limit: int) -> List[Tag]:
    """Return at most ``limit`` nodes matching ``selector``, in document order."""
    candidates = selector.find_all(root, limit=limit)
    _logger.debug("Found %d candidate node(s) for %r (limit=%d)", len(candidates), selector.source, limit)
    return candidates


def text_of(node: Optional[Tag]) -> str:
    """Concatenated descendant text, trimmed; empty string for a missing node."""
    if node is None:
        return ""
    return node.get_text().strip()


def attr_of(node: Optional[Tag], name: str) -> Optional[str]:
    if node is None:
        return None
    value = node.get(name)
    if isinstance(value, (list, tuple)):
        value = " ".join(value)
    return value
