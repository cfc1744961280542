from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .article import ArticleRecord


@dataclass(slots=True)
class ScrapeResult:
    """Successful pipeline outcome.

    ``total`` counts records after deduplication but before the final cap,
    so it may exceed ``len(articles)``.
    """

    articles: List[ArticleRecord] = field(default_factory=list)
    total: int = 0
    source: str = ""

    ok = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "articles": [a.to_dict() for a in self.articles],
            "total": self.total,
            "source": self.source,
        }


@dataclass(slots=True)
class ScrapeFailure:
    kind: str
    details: str
    error: str = "Failed to scrape website"

    ok = False

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "kind": self.kind, "details": self.details}
