from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(slots=True)
class ArticleRecord:
    """One extracted article, serialized with the camelCase keys the front-end reads."""

    id: int
    title: str
    summary: str
    source: str
    published_at: str
    url: str
    category: str
    read_time: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "source": self.source,
            "publishedAt": self.published_at,
            "url": self.url,
            "category": self.category,
            "readTime": self.read_time,
        }
