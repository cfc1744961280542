"""Pytest-wide fixtures for newsscraper tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest

from newsscraper.models import ArticleRecord

PAGE_URL = "https://www.example-news.com/home"


@pytest.fixture
def page_url() -> str:
    return PAGE_URL


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_record():
    """Factory for ArticleRecord instances with sensible defaults."""

    def _make(title: str, **overrides) -> ArticleRecord:
        values = dict(
            id=1,
            title=title,
            summary="A short summary of the story.",
            source="example-news.com",
            published_at="2024-05-01T12:00:00.000Z",
            url="https://www.example-news.com/story",
            category="General",
            read_time="1 min read",
        )
        values.update(overrides)
        return ArticleRecord(**values)

    return _make


@pytest.fixture
def article_html():
    """Factory rendering one ``<article>`` block."""

    def _render(
        title: str,
        *,
        summary: Optional[str] = None,
        href: Optional[str] = None,
        time_text: Optional[str] = None,
    ) -> str:
        parts = [f"<article><h2>{title}</h2>"]
        if summary is not None:
            parts.append(f"<p>{summary}</p>")
        if href is not None:
            parts.append(f'<a href="{href}">Read more</a>')
        if time_text is not None:
            parts.append(f"<time>{time_text}</time>")
        parts.append("</article>")
        return "".join(parts)

    return _render


@pytest.fixture
def static_fetcher():
    """Build a fetcher callable that returns fixed HTML and records calls."""

    def _build(html: str):
        calls = []

        def _fetch(url, *, config=None):
            calls.append(url)
            return html

        _fetch.calls = calls
        return _fetch

    return _build
