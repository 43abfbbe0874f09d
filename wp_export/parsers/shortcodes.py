"""
WordPress shortcode handling around the HTML → Markdown conversion.

Shortcodes are not HTML, so they are dealt with on the raw markup before it
reaches BeautifulSoup:

* ``[caption ...]...[/caption]`` wrappers are dropped, keeping the image and
  caption text they surround;
* ``[embed]URL[/embed]`` becomes the bare URL;
* ``[gallery ...]`` is kept verbatim.  It is swapped for an inert
  placeholder paragraph during conversion so that Markdown escaping cannot
  touch its brackets or attributes, then restored on its own line.
"""

from __future__ import annotations

import re
from typing import Dict, Tuple

CAPTION_PATTERN = re.compile(r"\[/?caption[^\]]*\]", re.IGNORECASE)
EMBED_PATTERN = re.compile(r"\[embed[^\]]*\](.*?)\[/embed\]", re.IGNORECASE | re.DOTALL)
GALLERY_PATTERN = re.compile(r"\[gallery\b[^\]]*\]", re.IGNORECASE)

_PLACEHOLDER = "WPEXPORTSHORTCODE{index:04d}"
_PLACEHOLDER_PATTERN = re.compile(r"WPEXPORTSHORTCODE\d{4}")


def strip_caption_shortcodes(html: str) -> str:
    return CAPTION_PATTERN.sub("", html)


def unwrap_embed_shortcodes(html: str) -> str:
    return EMBED_PATTERN.sub(lambda m: m.group(1).strip(), html)


def protect_gallery_shortcodes(html: str) -> Tuple[str, Dict[str, str]]:
    """Replace each gallery shortcode with a placeholder paragraph.

    Returns the rewritten markup and the placeholder → shortcode table
    needed by :func:`restore_shortcodes`.
    """
    saved: Dict[str, str] = {}

    def _swap(match: "re.Match[str]") -> str:
        token = _PLACEHOLDER.format(index=len(saved))
        saved[token] = match.group(0)
        return f"\n\n<p>{token}</p>\n\n"

    return GALLERY_PATTERN.sub(_swap, html), saved


def restore_shortcodes(markdown: str, saved: Dict[str, str]) -> str:
    if not saved:
        return markdown
    return _PLACEHOLDER_PATTERN.sub(lambda m: saved.get(m.group(0), m.group(0)), markdown)
