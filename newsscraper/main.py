"""Command-line entrypoint for the news scraper.

This script runs the extraction pipeline for a single URL:
1) load configuration
2) fetch and extract articles
3) print them as JSON or text, optionally filtered and sorted
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from .orchestrator import Orchestrator
from .output.formatter import SORT_MODES, filter_articles, format_articles, sort_articles
from .utils.config_loader import ConfigError, load_scraper_config
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import ScraperConfig


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract article headlines, summaries and links from a news page"
    )
    parser.add_argument("url", help="Absolute http(s) URL of the page to scrape")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to scraper configuration file (YAML)",
    )
    parser.add_argument(
        "--search",
        default=None,
        help="Only show articles whose title or summary contains this text",
    )
    parser.add_argument(
        "--sort",
        default="relevance",
        choices=list(SORT_MODES),
        help="Display order of the extracted articles",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default="json",
        choices=["json", "text"],
        help="Output format",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    # Optional: load .env
    try:
        from dotenv import load_dotenv  # type: ignore

        load_dotenv(override=False)
    except ImportError:
        pass
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("newsscraper.cli")

    config = ScraperConfig()
    if args.config:
        logger.info("Loading scraper configuration from %s", args.config)
        try:
            config = load_scraper_config(Path(args.config))
        except ConfigError as exc:
            logger.error("Failed to load configuration: %s", exc)
            return 1

    outcome = Orchestrator(config).run(args.url)
    if not outcome.ok:
        print(json.dumps(outcome.to_dict(), ensure_ascii=False, indent=2), file=sys.stderr)
        return 1

    articles = sort_articles(filter_articles(outcome.articles, args.search), args.sort)
    if args.output_format == "text":
        print(format_articles(articles, total=outcome.total, source=outcome.source))
    else:
        payload = outcome.to_dict()
        payload["articles"] = [a.to_dict() for a in articles]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
