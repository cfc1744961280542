"""Compiled CSS selectors for candidate and field lookup.

Selector text is compiled with soupsieve (the engine behind bs4's
``select``), so combinators, attribute operators and pseudo-classes work as
they do in a browser. Comma alternatives are a union: matches come back in
document order, not grouped by alternative.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

import soupsieve
from bs4 import Tag


class SelectorError(ValueError):
    """Raised when selector text does not compile."""


@dataclass(frozen=True, slots=True)
class SelectorSet:
    source: str
    compiled: soupsieve.SoupSieve

    def find_first(self, root: Tag) -> Optional[Tag]:
        """First matching descendant of ``root``, or ``None``."""
        return self.compiled.select_one(root)

    def find_all(self, root: Tag, *, limit: Optional[int] = None) -> List[Tag]:
        return self.compiled.select(root, limit=limit or 0)


@lru_cache(maxsize=128)
def parse_selector(text: str) -> SelectorSet:
    """Compile ``text`` into a ``SelectorSet``; raises ``SelectorError``."""
    if not isinstance(text, str) or not text.strip():
        raise SelectorError("Selector must be a non-empty string")
    source = text.strip()
    try:
        compiled = soupsieve.compile(source)
    except soupsieve.SelectorSyntaxError as exc:
        raise SelectorError(f"Invalid selector {source!r}: {exc}") from exc
    return SelectorSet(source=source, compiled=compiled)


__all__ = ["SelectorError", "SelectorSet", "parse_selector"]
