"""Thin HTTP surface over the extraction pipeline."""

from __future__ import annotations

import os
from typing import Optional

from flask import Flask, jsonify, request

from .errors import ScrapeError, ValidationError
from .orchestrator import Orchestrator
from .utils.config_loader import load_scraper_config
from .utils.logging import get_logger
from .utils.pipeline_config import ScraperConfig

logger = get_logger("newsscraper.api")

_STATUS_BY_KIND = {
    "ValidationError": 400,
    "FetchError": 502,
    "ParseError": 500,
}


def create_app(config: Optional[ScraperConfig] = None, *, orchestrator: Optional[Orchestrator] = None) -> Flask:
    app = Flask(__name__)
    pipeline = orchestrator or Orchestrator(config)

    @app.get("/api/health")
    def health():
        return jsonify({"status": "OK", "message": "News scraper API is running"})

    @app.post("/api/scrape")
    def scrape():
        body = request.get_json(silent=True) or {}
        url = body.get("url") if isinstance(body, dict) else None
        if not url:
            return jsonify({"error": "URL is required"}), 400

        try:
            result = pipeline.scrape(url, selectors=body.get("selectors"))
        except ValidationError as exc:
            return jsonify({"error": exc.message}), 400
        except ScrapeError as exc:
            logger.error("Scraping error (%s): %s", exc.kind, exc.message)
            payload = {"error": "Failed to scrape website", "kind": exc.kind, "details": exc.message}
            return jsonify(payload), _STATUS_BY_KIND.get(exc.kind, 500)
        return jsonify(result.to_dict())

    return app


def main() -> None:  # pragma: no cover - server entrypoint
    try:
        from dotenv import load_dotenv  # type: ignore

        load_dotenv(override=False)
    except ImportError:
        pass
    from .utils.logging import configure_logging

    configure_logging()
    config_path = os.environ.get("SCRAPER_CONFIG")
    config = load_scraper_config(config_path) if config_path else None
    app = create_app(config)
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 3001)))


if __name__ == "__main__":  # pragma: no cover
    main()
