from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import urlparse

import requests

from ..errors import FetchError, ValidationError
from ..utils.logging import get_logger
from ..utils.pipeline_config import ScraperConfig

logger = get_logger("newsscraper.fetchers.http")


def validate_url(url: object) -> str:
    """Return ``url`` stripped, or raise ``ValidationError`` if it is not absolute http(s)."""
    if not isinstance(url, str) or not url.strip():
        raise ValidationError("URL is required")
    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid URL for HTTP fetch: {url}")
    return url


def fetch_html(
    url: str,
    *,
    config: Optional[ScraperConfig] = None,
    session: Optional[requests.Session] = None,
    headers: Optional[Dict[str, str]] = None,
) -> str:
    """GET ``url`` with a browser-like identity and return the response body.

    The request is bounded by ``config.timeout`` and ``config.max_redirects``
    and is never retried. Every failure surfaces as ``FetchError`` with the
    underlying ``requests`` exception chained.
    """
    cfg = config or ScraperConfig()
    url = validate_url(url)
    merged_headers = {**cfg.request_headers, **(headers or {})}

    own_session = session is None
    sess = session or requests.Session()
    previous_redirects = sess.max_redirects
    sess.max_redirects = cfg.max_redirects
    logger.debug("Fetching HTML from %s (timeout=%ss, max_redirects=%s)", url, cfg.timeout, cfg.max_redirects)
    try:
        resp = sess.get(url, headers=merged_headers, timeout=cfg.timeout, allow_redirects=True)
        if resp.status_code >= 400:
            logger.warning("HTTP fetch failed (%s): %s", resp.status_code, url)
            resp.raise_for_status()
        if not 200 <= resp.status_code < 300:
            raise FetchError(
                f"Unexpected status code {resp.status_code}: {url}", url=url, status_code=resp.status_code
            )
    except requests.Timeout as exc:
        raise FetchError(f"Request to {url} timed out after {cfg.timeout}s", url=url) from exc
    except requests.TooManyRedirects as exc:
        raise FetchError(f"Exceeded {cfg.max_redirects} redirects while fetching {url}", url=url) from exc
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        raise FetchError(f"Request failed with status code {status}: {url}", url=url, status_code=status) from exc
    except requests.RequestException as exc:
        logger.warning("HTTP request error for %s: %s", url, exc)
        raise FetchError(str(exc) or f"Request to {url} failed", url=url) from exc
    finally:
        if own_session:
            sess.close()
        else:
            sess.max_redirects = previous_redirects

    if resp.encoding is None or (
        resp.encoding.lower() == "iso-8859-1" and "charset" not in resp.headers.get("Content-Type", "").lower()
    ):
        # requests falls back to ISO-8859-1 for text/* without a charset
        resp.encoding = resp.apparent_encoding

    logger.info("Fetched %s (%d bytes, status=%s)", url, len(resp.content or b""), resp.status_code)
    return resp.text
