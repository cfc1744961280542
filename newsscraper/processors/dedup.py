from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set

from ..models import ArticleRecord


class Deduplicator:
    """Detect near-duplicate records within a single scrape.

    Two records are duplicates when the first ``prefix_length`` characters
    of their lower-cased titles are equal. State lives only as long as the
    instance; nothing is persisted between requests.
    """

    def __init__(self, *, prefix_length: int = 50) -> None:
        self.prefix_length = prefix_length
        self._seen: Set[str] = set()

    def title_key(self, title: str) -> str:
        return (title or "").lower()[: self.prefix_length]

    def is_duplicate(self, record: ArticleRecord) -> bool:
        return self.title_key(record.title) in self._seen

    def mark_seen(self, record: ArticleRecord) -> None:
        self._seen.add(self.title_key(record.title))


@dataclass(slots=True)
class DedupStats:
    total: int
    kept: int
    duplicates: int


def remove_duplicates(
    records: Iterable[ArticleRecord],
    *,
    prefix_length: int = 50,
    return_stats: bool = False,
):
    """Drop near-duplicates, keeping the first occurrence and the input order.

    Returns a list of unique records by default. If ``return_stats`` is True,
    returns a tuple of (unique_records, DedupStats).
    """
    dedup = Deduplicator(prefix_length=prefix_length)
    unique: List[ArticleRecord] = []
    total = 0
    for record in records:
        total += 1
        if dedup.is_duplicate(record):
            continue
        dedup.mark_seen(record)
        unique.append(record)
    stats = DedupStats(total=total, kept=len(unique), duplicates=total - len(unique))
    return (unique, stats) if return_stats else unique
