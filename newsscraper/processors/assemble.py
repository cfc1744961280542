from __future__ import annotations

import math
from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

from ..models import ArticleRecord
from ..utils.pipeline_config import ScraperConfig
from .classify import classify_text
from .extract import ExtractedFields, format_summary, resolve_link
from .normalize import normalize_time, to_iso, utc_now


def source_hostname(page_url: str) -> str:
    host = urlparse(page_url).hostname or ""
    return host[4:] if host.startswith("www.") else host


def passes_title_gate(title: str, *, min_length: int = 15, max_length: int = 200) -> bool:
    """True if ``title`` is non-empty and strictly between the two bounds."""
    return bool(title) and min_length < len(title) < max_length


def estimate_read_time(text: str, *, chars_per_minute: int = 200) -> str:
    minutes = max(1, math.ceil(len(text) / chars_per_minute))
    return f"{minutes} min read"


def assemble_record(
    fields: ExtractedFields,
    *,
    record_id: int,
    page_url: str,
    config: Optional[ScraperConfig] = None,
    now: Optional[datetime] = None,
) -> Optional[ArticleRecord]:
    """Build an ``ArticleRecord`` or return ``None`` if the title gate rejects it.

    Category and read time are derived from the untruncated summary.
    """
    cfg = config or ScraperConfig()
    title = fields.title
    if not passes_title_gate(title, min_length=cfg.title_min_length, max_length=cfg.title_max_length):
        return None

    now = now or utc_now()
    raw_summary = fields.summary
    return ArticleRecord(
        id=record_id,
        title=title,
        summary=format_summary(raw_summary, max_length=cfg.summary_max_length, fallback=cfg.summary_fallback),
        source=source_hostname(page_url),
        published_at=normalize_time(fields.time_text, now=now) or to_iso(now),
        url=resolve_link(fields.link, page_url),
        category=classify_text(f"{title} {raw_summary}"),
        read_time=estimate_read_time(raw_summary or title, chars_per_minute=cfg.read_time_chars_per_minute),
    )
