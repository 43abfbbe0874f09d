"""
Collection of post records from export items.

One :class:`~wp_export.models.post.PostRecord` is built per qualifying item,
type by type in the order given by
:func:`~wp_export.extractors.post_types.get_post_types`, keeping document
order within a type.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone as dt_timezone, tzinfo
from email.utils import parsedate_to_datetime
from typing import Callable, Iterable, List, Optional
from urllib.parse import unquote

from ..models.config import ExportConfig
from ..models.post import PostRecord
from ..parsers.markdown import translate_post_content
from ..utils.console import log_message
from .document import ExportNode
from .post_types import get_items_of_type

# Slug WordPress gives the demo page it creates on install
DEFAULT_PAGE_SLUG = "sample-page"

COVER_IMAGE_META_KEY = "_thumbnail_id"

# email.utils is lenient (it maps year -0001 to 1999), so check the shape first
RFC2822_DATE = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]{3}),\s*)?\d{1,2}\s+[A-Za-z]{3}\s+\d{4}\s+"
    r"\d{2}:\d{2}(?::\d{2})?\s+(?:[+-]\d{4}|[A-Za-z]{1,5})$"
)
WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

Translator = Callable[[str], str]


def is_collectable(item: ExportNode, post_type: str) -> bool:
    if item.child_value("status") == "trash":
        return False
    if post_type == "page" and item.child_value("post_name") == DEFAULT_PAGE_SLUG:
        return False
    return True


def collect_posts(
    items: List[ExportNode],
    post_types: Iterable[str],
    config: ExportConfig,
    *,
    translate: Translator = translate_post_content,
) -> List[PostRecord]:
    all_posts: List[PostRecord] = []
    for post_type in post_types:
        posts_for_type = [
            build_post(item, config, translate=translate)
            for item in get_items_of_type(items, post_type)
            if is_collectable(item, post_type)
        ]

        if posts_for_type:
            if post_type == "post":
                log_message(f"{len(posts_for_type)} normal posts found.")
            elif post_type == "page":
                log_message(f"{len(posts_for_type)} pages found.")
            else:
                log_message(f'{len(posts_for_type)} custom "{post_type}" posts found.')

        all_posts.extend(posts_for_type)
    return all_posts


def build_post(
    item: ExportNode, config: ExportConfig, *, translate: Translator = translate_post_content
) -> PostRecord:
    return PostRecord(
        data=item,
        content=translate(item.child_value("encoded")),
        type=item.child_value("post_type"),
        id=item.child_value("post_id"),
        is_draft=item.child_value("status") == "draft",
        slug=unquote(item.child_value("post_name")),
        date=get_post_date(item, config.zone),
        cover_image_id=get_post_meta_value(item, COVER_IMAGE_META_KEY),
    )


def get_post_date(item: ExportNode, zone: tzinfo) -> Optional[datetime]:
    """
    Parse the item's RFC 2822 ``pubDate`` and express it in ``zone``.

    Unparseable or missing dates give ``None``; WordPress writes impossible
    dates such as ``-0001`` years for never-published drafts.
    """
    raw = (item.optional_child_value("pubDate") or "").strip()
    shape = RFC2822_DATE.match(raw)
    if not shape:
        return None
    try:
        parsed = parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
    if parsed is None:
        return None
    weekday = shape.group("weekday")
    if weekday and weekday.lower() != WEEKDAYS[parsed.weekday()]:
        return None
    if parsed.tzinfo is None:
        # "-0000" means UTC with no claim about the local zone
        parsed = parsed.replace(tzinfo=dt_timezone.utc)
    return parsed.astimezone(zone)


def get_post_meta_value(item: ExportNode, key: str) -> Optional[str]:
    for meta in item.children("postmeta"):
        if meta.child_value("meta_key") == key:
            return meta.child_value("meta_value")
    return None
