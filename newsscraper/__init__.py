"""Top-level package for the news scraper.

This package contains the extraction pipeline that turns an arbitrary news
page into structured article records, plus its CLI and HTTP entrypoints.
"""

__all__ = []
