from __future__ import annotations

from html import unescape
import re
from typing import Iterable, List


def normalize_label(value: str) -> str:
    """Unescape HTML entities and collapse inner whitespace.

    Preserves original casing but trims leading/trailing spaces
    and converts sequences of whitespace to a single space.
    """
    if not value:
        return ""
    text = unescape(value).strip()
    text = re.sub(r"\s+", " ", text)
    return text


def dedupe_labels(values: Iterable[str], *, exclude: Iterable[str] = ()) -> List[str]:
    """
    Normalize a sequence of taxonomy labels.

    - Skips empty labels and those listed in ``exclude`` (case-insensitive)
    - Deduplicates case-insensitively while preserving first-seen casing

    Returns the cleaned labels in their original order.
    """
    excluded = {e.lower() for e in exclude}
    seen_lower = set()
    result: List[str] = []
    for value in values:
        label = normalize_label(value)
        key = label.lower()
        if not label or key in excluded or key in seen_lower:
            continue
        seen_lower.add(key)
        result.append(label)
    return result
