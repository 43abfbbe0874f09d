"""
HTML → Markdown conversion of post bodies.

WordPress stores post bodies as loosely structured HTML: paragraphs are often
plain text separated by blank lines, blocks are mixed with shortcodes and
embeds.  :func:`translate_post_content` turns that into Markdown with a
:class:`markdownify.MarkdownConverter` subclass tuned for those bodies:

- ATX headings, ``-`` bullets, fenced code blocks with the language taken
  from a ``language-*`` class, hard line breaks as two trailing spaces.
- Embeds and tables (``iframe``, ``table``, ``video``...) are kept as raw
  HTML, which Markdown renderers pass through.
- Scripts, styles and HTML comments (including ``<!--more-->``) are dropped.
- Text that would otherwise read as Markdown syntax is escaped, including
  block markers (``#``, ``>``, ``-``, ``1.``) at the start of a line.
- Gallery shortcodes survive verbatim on their own line.

The conversion is pure: the same input always gives the same output.
"""

from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from markdownify import ATX, SPACES, MarkdownConverter

from .shortcodes import (
    protect_gallery_shortcodes,
    restore_shortcodes,
    strip_caption_shortcodes,
    unwrap_embed_shortcodes,
)

BLOCK = "\n\n"

# Kept as HTML in the output.
RAW_HTML_TAGS = ("iframe", "table", "video", "audio", "object", "embed")

# Blank lines inside these are content, not paragraph breaks.
_VERBATIM_BLOCK = re.compile(
    r"(<(pre|%s)\b.*?</\2\s*>)" % "|".join(RAW_HTML_TAGS), re.IGNORECASE | re.DOTALL
)
_BLANK_LINES = re.compile(r"\n[ \t]*(?:\n[ \t]*)+")
_LANGUAGE_CLASS = re.compile(r"^(?:language|lang)-(.+)$")
_FENCE = re.compile(r"^[ \t]*(```|~~~)")

_INLINE_ESCAPE = re.compile(r"([\\`\[\]])")
_LINE_START_ESCAPES = (
    (re.compile(r"^([ \t]*)(#{1,6})(?=\s|$)", re.MULTILINE), r"\1\\\2"),
    (re.compile(r"^([ \t]*)(>)", re.MULTILINE), r"\1\\\2"),
    (re.compile(r"^([ \t]*)(-+|\+|=+)(?=\s|$)", re.MULTILINE), r"\1\\\2"),
    (re.compile(r"^([ \t]*)(\d{1,9})([.)])(?=\s|$)", re.MULTILINE), r"\1\2\\\3"),
)


def _code_language(pre: Tag) -> str:
    for candidate in (pre, pre.find("code")):
        if not isinstance(candidate, Tag):
            continue
        for cls in candidate.get("class") or []:
            match = _LANGUAGE_CLASS.match(cls)
            if match:
                return match.group(1)
    return ""


class PostContentConverter(MarkdownConverter):
    """markdownify converter for WordPress post bodies."""

    class Options:
        heading_style = ATX
        bullets = "-"
        newline_style = SPACES
        escape_asterisks = True
        escape_underscores = True
        escape_misc = False

    def escape(self, text, *args, **kwargs):
        if not text:
            return ""
        text = _INLINE_ESCAPE.sub(r"\\\1", text)
        text = super().escape(text, *args, **kwargs)
        for pattern, replacement in _LINE_START_ESCAPES:
            text = pattern.sub(replacement, text)
        return text

    def convert_div(self, el, text, *args, **kwargs):
        # empty divs stand for the blank lines between WordPress paragraphs
        if not text.strip():
            return BLOCK
        return self.convert_p(el, text, *args, **kwargs)

    convert_figure = convert_figcaption = convert_section = convert_article = convert_div

    def convert_pre(self, el, text, *args, **kwargs):
        text = text.strip("\n")
        if not text.strip():
            return ""
        fence = "~~~" if "```" in text else "```"
        return f"{BLOCK}{fence}{_code_language(el)}\n{text}\n{fence}{BLOCK}"

    def convert_iframe(self, el, text, *args, **kwargs):
        return f"{BLOCK}{el}{BLOCK}"

    convert_table = convert_video = convert_audio = convert_object = convert_embed = convert_iframe

    def convert_script(self, el, text, *args, **kwargs):
        return ""

    convert_style = convert_noscript = convert_head = convert_title = convert_script


def _mark_paragraph_breaks(html: str) -> str:
    """Replace blank lines outside code blocks and embeds with empty divs."""
    parts = _VERBATIM_BLOCK.split(html)
    # split() yields text, whole block, tag name, text, ...
    out: List[str] = []
    for index, part in enumerate(parts):
        kind = index % 3
        if kind == 0:
            out.append(_BLANK_LINES.sub("\n<div></div>\n", part))
        elif kind == 1:
            out.append(part)
    return "".join(out)


def _tidy(markdown: str) -> str:
    """Leave exactly one blank line between blocks, except inside fenced code."""
    lines: List[str] = []
    fence: Optional[str] = None
    for line in markdown.split("\n"):
        match = _FENCE.match(line)
        if fence:
            lines.append(line)
            if match and match.group(1) == fence:
                fence = None
            continue
        if match:
            fence = match.group(1)
        elif not line.strip():
            if not lines or lines[-1] == "":
                continue
            line = ""
        lines.append(line)
    return "\n".join(lines).strip("\n")


def translate_post_content(content: Optional[str]) -> str:
    """Convert the HTML body of a post to Markdown."""
    if not content or not content.strip():
        return ""

    html = content.replace("\r\n", "\n")
    html = strip_caption_shortcodes(html)
    html = unwrap_embed_shortcodes(html)
    html, shortcodes = protect_gallery_shortcodes(html)
    html = _mark_paragraph_breaks(html)

    soup = BeautifulSoup(html, "html.parser")
    markdown = _tidy(PostContentConverter().convert_soup(soup))
    return restore_shortcodes(markdown, shortcodes)
