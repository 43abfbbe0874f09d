"""
Best-effort scanner for ``<img>`` tags in raw post markup.

This is deliberately not an HTML parser: post bodies in exports are often
fragments with shortcodes and broken nesting, and all that is needed here is
the image reference and a short description.  The rules are:

* a tag starts with ``<img`` followed by whitespace;
* it must carry a double-quoted ``src`` attribute preceded by whitespace;
  tags without one are ignored;
* the description is the first non-empty, trimmed value among the
  attributes listed in :data:`DESCRIPTION_ATTRIBUTES`, in that order, or
  the empty string.

Tags are reported in the order they appear in the markup.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, NamedTuple, Optional, Tuple

IMG_TAG_PATTERN = re.compile(r'<img(?=\s)[^>]+?(?<=\s)src="(.+?)"[^>]*>', re.IGNORECASE)

# Consulted in order; the first one with text wins.
DESCRIPTION_ATTRIBUTES: Tuple[str, ...] = ("alt", "title")


class ImgTag(NamedTuple):
    tag: str
    src: str
    description: str


@lru_cache(maxsize=None)
def _attribute_pattern(name: str) -> "re.Pattern[str]":
    return re.compile(r'(?<=\s)' + re.escape(name) + r'="([^"]*)"', re.IGNORECASE)


def get_attribute(tag: str, name: str) -> Optional[str]:
    """Value of the double-quoted attribute ``name`` in ``tag``, if any."""
    match = _attribute_pattern(name).search(tag)
    return match.group(1) if match else None


def describe_img_tag(tag: str) -> str:
    for name in DESCRIPTION_ATTRIBUTES:
        value = (get_attribute(tag, name) or "").strip()
        if value:
            return value
    return ""


def scan_img_tags(markup: Optional[str]) -> List[ImgTag]:
    if not markup:
        return []
    return [
        ImgTag(tag=m.group(0), src=m.group(1), description=describe_img_tag(m.group(0)))
        for m in IMG_TAG_PATTERN.finditer(markup)
    ]
