from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import yaml

from ..processors.selectors import SelectorError, parse_selector
from .pipeline_config import ScraperConfig, SelectorConfig


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


_INT_FIELDS = {
    "max_candidates",
    "max_results",
    "max_redirects",
    "title_min_length",
    "title_max_length",
    "summary_max_length",
    "dedup_prefix_length",
    "read_time_chars_per_minute",
}
_POSITIVE_FIELDS = {
    "max_candidates",
    "max_results",
    "summary_max_length",
    "dedup_prefix_length",
    "read_time_chars_per_minute",
}
_STR_FIELDS = {"user_agent", "summary_fallback"}
_SELECTOR_KEYS = {"article", "title", "summary", "link", "time"}


def _validate_scraper_dict(entry: dict) -> None:
    """Validate the ``scraper`` mapping from YAML.

    Optional fields:
      - integer caps and gate bounds (see ``_INT_FIELDS``)
      - timeout: positive number of seconds
      - user_agent, summary_fallback: strings
      - headers: mapping[str, str]
      - selectors: mapping with any of article/title/summary/link/time
    """
    for key in _INT_FIELDS & set(entry):
        value = entry[key]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"'{key}' must be an integer, got {value!r}")
        if key in _POSITIVE_FIELDS and value <= 0:
            raise ConfigError(f"'{key}' must be positive, got {value}")
        if key == "max_redirects" and value < 0:
            raise ConfigError("'max_redirects' must not be negative")

    if "timeout" in entry:
        timeout = entry["timeout"]
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            raise ConfigError(f"'timeout' must be a positive number, got {timeout!r}")

    for key in _STR_FIELDS & set(entry):
        if not isinstance(entry[key], str) or not entry[key].strip():
            raise ConfigError(f"'{key}' must be a non-empty string")

    if entry.get("headers") is not None:
        headers = entry["headers"]
        if not isinstance(headers, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in headers.items()):
            raise ConfigError("'headers' must be a mapping of string keys to string values if provided")

    if entry.get("selectors") is not None:
        selectors = entry["selectors"]
        if not isinstance(selectors, dict):
            raise ConfigError("'selectors' must be a mapping if provided")
        unknown = set(selectors) - _SELECTOR_KEYS
        if unknown:
            raise ConfigError(f"Unknown selector keys: {sorted(unknown)}. Allowed: {sorted(_SELECTOR_KEYS)}")
        if not all(isinstance(v, str) and v.strip() for v in selectors.values()):
            raise ConfigError("Selector values must be non-empty strings")
        for key, value in selectors.items():
            try:
                parse_selector(value)
            except SelectorError as exc:
                raise ConfigError(f"Invalid '{key}' selector: {exc}") from exc


def _coerce_config(entry: dict, base: ScraperConfig) -> ScraperConfig:
    changes = {key: entry[key] for key in (_INT_FIELDS | _STR_FIELDS) if key in entry}
    if "timeout" in entry:
        changes["timeout"] = float(entry["timeout"])
    if entry.get("headers"):
        changes["headers"] = {**base.headers, **entry["headers"]}
    if entry.get("selectors"):
        changes["selectors"] = base.selectors.with_overrides(entry["selectors"])
    return replace(base, **changes)


def load_scraper_config(path: Path | str, *, base: ScraperConfig | None = None) -> ScraperConfig:
    """Load a YAML file into a ``ScraperConfig``.

    YAML structure:
      - Top-level mapping
      - Key ``scraper``: mapping of ``ScraperConfig`` field names to values

    Fields not present keep the values of ``base`` (environment-aware
    defaults when omitted). Unknown top-level keys are ignored for forward
    compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")

    entry = data.get("scraper") or {}
    if not isinstance(entry, dict):
        raise ConfigError("'scraper' must be a mapping in the YAML configuration")

    _validate_scraper_dict(entry)
    config = _coerce_config(entry, base or ScraperConfig())
    if config.title_min_length >= config.title_max_length:
        raise ConfigError("'title_min_length' must be smaller than 'title_max_length'")
    return config


__all__ = ["ConfigError", "ScraperConfig", "SelectorConfig", "load_scraper_config"]
