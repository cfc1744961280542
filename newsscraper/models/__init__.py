"""Typed models used across the application."""

from .article import ArticleRecord
from .result import ScrapeFailure, ScrapeResult

__all__ = ["ArticleRecord", "ScrapeResult", "ScrapeFailure"]
