"""Field extractors for a single candidate node.

Each extractor is a pure function of the node, the selector set and (for
links) the requested page URL. Missing fields fall back instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin, urlparse

from bs4 import Tag

from ..utils.pipeline_config import SelectorConfig
from .document import attr_of, text_of
from .selectors import parse_selector

_PARAGRAPH = parse_selector("p")


@dataclass(slots=True)
class ExtractedFields:
    title: str
    summary: str
    link: Optional[str]
    time_text: Optional[str]


def extract_title(node: Tag, selector: str) -> str:
    return text_of(parse_selector(selector).find_first(node))


def extract_summary(node: Tag, selector: str) -> str:
    """Text of the first summary-like node, else of the first paragraph.

    The result is untruncated; see ``format_summary``.
    """
    summary = text_of(parse_selector(selector).find_first(node))
    if not summary:
        summary = text_of(_PARAGRAPH.find_first(node))
    return summary


def format_summary(summary: str, *, max_length: int = 300, fallback: str = "No summary available") -> str:
    if len(summary) > max_length:
        return summary[:max_length] + "..."
    return summary or fallback


def page_origin(page_url: str) -> str:
    parsed = urlparse(page_url)
    return f"{parsed.scheme}://{parsed.netloc}"


def resolve_link(href: Optional[str], page_url: str) -> str:
    """Make ``href`` absolute against the origin of ``page_url``.

    Missing or blank hrefs, and non-web schemes such as ``mailto:`` or
    ``javascript:``, fall back to ``page_url`` itself.
    """
    href = (href or "").strip()
    if not href:
        return page_url
    scheme = urlparse(href).scheme.lower()
    if scheme in ("http", "https"):
        return href
    if scheme:
        return page_url
    return urljoin(page_origin(page_url) + "/", href)


def extract_link(node: Tag, selector: str) -> Optional[str]:
    """Raw href of the first link-like node; ``None`` when there is none."""
    return attr_of(parse_selector(selector).find_first(node), "href")


def extract_time_text(node: Tag, selector: str) -> Optional[str]:
    """Visible text of the first time-like node, else its ``datetime`` attribute."""
    time_node = parse_selector(selector).find_first(node)
    if time_node is None:
        return None
    return text_of(time_node) or attr_of(time_node, "datetime")


def extract_fields(node: Tag, selectors: SelectorConfig) -> ExtractedFields:
    return ExtractedFields(
        title=extract_title(node, selectors.title),
        summary=extract_summary(node, selectors.summary),
        link=extract_link(node, selectors.link),
        time_text=extract_time_text(node, selectors.time),
    )
