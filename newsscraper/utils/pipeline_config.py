from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

_DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    return int(raw) if raw else default


@dataclass(slots=True)
class SelectorConfig:
    """Generic selector strings used to discover and pick apart article nodes."""

    article: str = (
        'article, .article, .post, .story, .news-item, '
        '[class*="article"], [class*="story"], .entry'
    )
    title: str = (
        'h1, h2, h3, .title, .headline, '
        '[class*="title"], [class*="headline"], .entry-title'
    )
    summary: str = (
        'p, .summary, .excerpt, .description, '
        '[class*="summary"], [class*="excerpt"], .entry-summary'
    )
    link: str = "a"
    time: str = 'time, .date, .timestamp, [class*="date"], [class*="time"], .published'

    def with_overrides(self, overrides: Dict[str, str] | None) -> "SelectorConfig":
        """Return a copy with non-empty ``overrides`` applied.

        Keys may be field names (``title``) or the request-style names the
        front-end sends (``titleSelector``).
        """
        values = {
            "article": self.article,
            "title": self.title,
            "summary": self.summary,
            "link": self.link,
            "time": self.time,
        }
        for key, value in (overrides or {}).items():
            name = key[: -len("Selector")] if key.endswith("Selector") else key
            if name in values and isinstance(value, str) and value.strip():
                values[name] = value.strip()
        return SelectorConfig(**values)


@dataclass(slots=True)
class ScraperConfig:
    max_candidates: int = field(default_factory=lambda: _env_int("SCRAPER_MAX_CANDIDATES", 25))
    max_results: int = field(default_factory=lambda: _env_int("SCRAPER_MAX_RESULTS", 20))
    timeout: float = field(default_factory=lambda: float(os.getenv("SCRAPER_TIMEOUT") or 15))
    max_redirects: int = field(default_factory=lambda: _env_int("SCRAPER_MAX_REDIRECTS", 5))
    user_agent: str = field(default_factory=lambda: os.getenv("SCRAPER_USER_AGENT") or DEFAULT_USER_AGENT)
    headers: Dict[str, str] = field(default_factory=lambda: dict(_DEFAULT_HEADERS))

    # Inclusion gate bounds are exclusive on both ends
    title_min_length: int = 15
    title_max_length: int = 200
    summary_max_length: int = 300
    summary_fallback: str = "No summary available"
    dedup_prefix_length: int = 50
    read_time_chars_per_minute: int = 200

    selectors: SelectorConfig = field(default_factory=SelectorConfig)

    @property
    def request_headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent, **self.headers}
