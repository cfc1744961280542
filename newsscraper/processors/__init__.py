"""Extraction pipeline: document model, field extraction, normalization, classification, deduplication."""

from .assemble import assemble_record, estimate_read_time, passes_title_gate, source_hostname
from .classify import CATEGORIES, CATEGORY_RULES, classify_text
from .dedup import DedupStats, Deduplicator, remove_duplicates
from .document import attr_of, find_candidates, parse_document, text_of
from .extract import ExtractedFields, extract_fields, format_summary, resolve_link
from .normalize import normalize_time, parse_date_to_iso, to_iso
from .selectors import SelectorError, SelectorSet, parse_selector

__all__ = [
    "assemble_record",
    "estimate_read_time",
    "passes_title_gate",
    "source_hostname",
    "CATEGORIES",
    "CATEGORY_RULES",
    "classify_text",
    "DedupStats",
    "Deduplicator",
    "remove_duplicates",
    "attr_of",
    "find_candidates",
    "parse_document",
    "text_of",
    "ExtractedFields",
    "extract_fields",
    "format_summary",
    "resolve_link",
    "normalize_time",
    "parse_date_to_iso",
    "to_iso",
    "SelectorError",
    "SelectorSet",
    "parse_selector",
]
