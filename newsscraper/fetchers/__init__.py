"""Content fetching layer for news pages."""

from .http import fetch_html, validate_url

__all__ = ["fetch_html", "validate_url"]
