"""Exception taxonomy for the scraping pipeline.

Only these errors abort a scrape. Missing fields on a single candidate are
handled by fallbacks inside the extractors and never raise.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for fatal pipeline errors."""

    kind = "ScrapeError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ScrapeError):
    """Raised when the requested URL (or request payload) is missing or malformed."""

    kind = "ValidationError"


class FetchError(ScrapeError):
    """Raised on network failure, timeout, redirect overflow or a non-2xx status."""

    kind = "FetchError"

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(ScrapeError):
    """Raised when the response body cannot be modelled as a document tree."""

    kind = "ParseError"
