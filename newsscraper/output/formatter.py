from __future__ import annotations

from typing import Iterable, List, Sequence

from ..models import ArticleRecord

SORT_MODES = ("relevance", "date", "source")


def filter_articles(articles: Iterable[ArticleRecord], term: str | None) -> List[ArticleRecord]:
    """Keep records whose title or summary contains ``term`` (case-insensitive)."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(articles)
    return [a for a in articles if needle in a.title.lower() or needle in a.summary.lower()]


def sort_articles(articles: Iterable[ArticleRecord], mode: str = "relevance") -> List[ArticleRecord]:
    """Order records for display.

    ``relevance`` keeps extraction order, ``date`` puts the newest first and
    ``source`` sorts by hostname. All modes are stable.
    """
    items = list(articles)
    if mode == "relevance":
        return items
    if mode == "date":
        # ISO timestamps in UTC with a fixed width sort lexicographically
        return sorted(items, key=lambda a: a.published_at, reverse=True)
    if mode == "source":
        return sorted(items, key=lambda a: a.source)
    raise ValueError(f"Unknown sort mode '{mode}'. Allowed: {list(SORT_MODES)}")


def format_article(article: ArticleRecord) -> str:
    return (
        f"{article.id}. [{article.category}] {article.title}\n"
        f"   {article.source} | {article.published_at} | {article.read_time}\n"
        f"   {article.summary}\n"
        f"   {article.url}"
    )


def format_articles(articles: Sequence[ArticleRecord], *, total: int, source: str) -> str:
    header = f"{len(articles)} of {total} article(s) from {source}"
    if not articles:
        return header
    return header + "\n\n" + "\n\n".join(format_article(a) for a in articles)
