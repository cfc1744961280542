from __future__ import annotations

import re
from typing import Pattern, Sequence, Tuple

DEFAULT_CATEGORY = "General"

# Ordered (label, pattern) table; the first pattern found in the text wins.
# Patterns match substrings, so "ai" also hits words like "said".
CATEGORY_RULES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("Technology", re.compile(r"tech|ai|software|computer|digital|cyber|robot|algorithm")),
    ("Health", re.compile(r"health|medical|doctor|hospital|disease|vaccine|medicine")),
    ("Business", re.compile(r"business|economy|market|finance|stock|trade|company")),
    ("Sports", re.compile(r"sport|football|soccer|basketball|tennis|game|match")),
    ("Politics", re.compile(r"politic|government|election|vote|president|minister")),
    ("World", re.compile(r"climate|environment|green|carbon|pollution|energy")),
)

CATEGORIES = tuple(label for label, _ in CATEGORY_RULES) + (DEFAULT_CATEGORY,)


def classify_text(
    text: str,
    *,
    rules: Sequence[Tuple[str, Pattern[str]]] = CATEGORY_RULES,
    default: str = DEFAULT_CATEGORY,
) -> str:
    """Return the label of the first rule whose pattern occurs in ``text``.

    Matching is case-insensitive; no scoring is involved.
    """
    lowered = (text or "").lower()
    for label, pattern in rules:
        if pattern.search(lowered):
            return label
    return default
