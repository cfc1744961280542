from __future__ import annotations

import time
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Optional
from urllib.parse import urlparse

from bs4 import Tag

from .errors import ScrapeError, ValidationError
from .fetchers import fetch_html, validate_url
from .models import ArticleRecord, ScrapeFailure, ScrapeResult
from .processors import (
    SelectorError,
    assemble_record,
    extract_fields,
    find_candidates,
    parse_document,
    parse_selector,
    remove_duplicates,
)
from .processors.normalize import utc_now
from .utils.logging import get_logger
from .utils.pipeline_config import ScraperConfig, SelectorConfig

logger = get_logger("newsscraper.orchestrator")

Fetcher = Callable[..., str]


class Orchestrator:
    """Run one URL through fetch, parse, extract, dedup and cap.

    Holds only immutable configuration, so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        *,
        fetcher: Fetcher = fetch_html,
    ) -> None:
        self.config = config or ScraperConfig()
        self.fetcher = fetcher

    def _selectors_for(self, overrides: Optional[Dict[str, str]]) -> SelectorConfig:
        if overrides is not None and not isinstance(overrides, dict):
            raise ValidationError("'selectors' must be an object")
        selectors = self.config.selectors.with_overrides(overrides)
        try:
            for text in (selectors.article, selectors.title, selectors.summary, selectors.link, selectors.time):
                parse_selector(text)
        except SelectorError as exc:
            raise ValidationError(str(exc)) from exc
        return selectors

    def _extract_candidate(
        self,
        node: Tag,
        *,
        record_id: int,
        page_url: str,
        selectors: SelectorConfig,
        now: datetime,
    ) -> Optional[ArticleRecord]:
        fields = extract_fields(node, selectors)
        return assemble_record(fields, record_id=record_id, page_url=page_url, config=self.config, now=now)

    def extract_articles(
        self,
        html: str,
        page_url: str,
        *,
        selectors: Optional[SelectorConfig] = None,
        now: Optional[datetime] = None,
    ) -> List[ArticleRecord]:
        """Extract gated records from ``html`` in document order (before dedup)."""
        selectors = selectors or self.config.selectors
        now = now or utc_now()
        document = parse_document(html)
        candidates = find_candidates(
            document, parse_selector(selectors.article), limit=self.config.max_candidates
        )

        records: List[ArticleRecord] = []
        dropped = 0
        failed = 0
        for index, node in enumerate(candidates, start=1):
            try:
                record = self._extract_candidate(
                    node, record_id=len(records) + 1, page_url=page_url, selectors=selectors, now=now
                )
            except Exception as exc:  # noqa: BLE001
                logger.debug("Skipping candidate %d of %s: %s", index, page_url, exc)
                failed += 1
                continue
            if record is None:
                dropped += 1
                continue
            records.append(record)

        logger.debug(
            "Extracted %d record(s) from %d candidate(s); %d failed the title gate, %d raised",
            len(records),
            len(candidates),
            dropped,
            failed,
        )
        return records

    def scrape(self, url: object, *, selectors: Optional[Dict[str, str]] = None) -> ScrapeResult:
        """Scrape ``url``; raises ``ScrapeError`` subclasses on fatal failures."""
        page_url = validate_url(url)
        selector_config = self._selectors_for(selectors)

        t0 = time.perf_counter()
        html = self.fetcher(page_url, config=self.config)
        fetch_ms = (time.perf_counter() - t0) * 1000

        extracted = self.extract_articles(html, page_url, selectors=selector_config)
        unique, stats = remove_duplicates(
            extracted, prefix_length=self.config.dedup_prefix_length, return_stats=True
        )
        # Renumber so ids stay dense after duplicates are dropped
        unique = [replace(record, id=i) for i, record in enumerate(unique, start=1)]
        articles = unique[: self.config.max_results]

        logger.info(
            "Scrape finished: url=%s, extracted=%s, duplicates=%s, returned=%s, fetch_ms=%.1f",
            page_url,
            stats.total,
            stats.duplicates,
            len(articles),
            fetch_ms,
        )
        return ScrapeResult(articles=articles, total=len(unique), source=urlparse(page_url).hostname or "")

    def run(self, url: object, *, selectors: Optional[Dict[str, str]] = None) -> ScrapeResult | ScrapeFailure:
        """Like ``scrape`` but folds fatal errors into a ``ScrapeFailure`` payload."""
        try:
            return self.scrape(url, selectors=selectors)
        except ScrapeError as exc:
            logger.error("Scraping error (%s): %s", exc.kind, exc.message)
            return ScrapeFailure(kind=exc.kind, details=exc.message)
