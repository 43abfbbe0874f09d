"""
Image discovery.

Exports describe images in two unrelated ways, so two independent strategies
are used and their results concatenated (attached first):

``collect_attached_images``
    Attachment items with an image URL.  These carry their own id (used for
    cover images) and usually the id of the post they were uploaded to.

``collect_scraped_images``
    ``<img>`` tags found in the raw body markup of every content item.  These
    have no id of their own and belong to the item they were found in.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ..models.post import ImageRecord
from ..parsers.img_tags import scan_img_tags
from ..utils.console import log_message
from ..utils.urls import resolve_image_url
from .document import ExportNode
from .post_types import get_items_of_type

IMAGE_URL_PATTERN = re.compile(r"\.(gif|jpe?g|png|webp)(\?|$)", re.IGNORECASE)

# Tried in order for an attachment's description.
ATTACHMENT_DESCRIPTION_FIELDS = ("content:encoded", "excerpt:encoded", "title")

# WordPress writes 0 for attachments that were never attached to a post
_NO_PARENT_VALUES = {"", "0"}


def is_image_url(url: Optional[str]) -> bool:
    return bool(url) and bool(IMAGE_URL_PATTERN.search(url))


def get_attachment_description(attachment: ExportNode) -> str:
    for field in ATTACHMENT_DESCRIPTION_FIELDS:
        value = attachment.optional_child_value(field)
        if value and value.strip():
            return value.strip()
    return ""


def get_attachment_parent(attachment: ExportNode) -> Optional[str]:
    parent = attachment.optional_child_value("post_parent")
    if parent is None or parent.strip() in _NO_PARENT_VALUES:
        return None
    return parent.strip()


def collect_attached_images(items: Iterable[ExportNode]) -> List[ImageRecord]:
    images = [
        ImageRecord(
            id=attachment.child_value("post_id"),
            post_id=get_attachment_parent(attachment),
            url=attachment.child_value("attachment_url"),
            description=get_attachment_description(attachment),
        )
        for attachment in get_items_of_type(items, "attachment")
        if is_image_url(attachment.optional_child_value("attachment_url"))
    ]

    log_message(f"{len(images)} attached images found.")
    return images


def collect_scraped_images(items: List[ExportNode], post_types: Iterable[str]) -> List[ImageRecord]:
    """
    Scrape ``<img>`` references from the raw body of every item of ``post_types``.

    Raises:
        ImageResolutionError: If a relative reference is found in an item
            whose ``link`` is not an absolute URL.
    """
    images: List[ImageRecord] = []
    for post_type in post_types:
        for item in get_items_of_type(items, post_type):
            post_id = item.child_value("post_id")
            for img in scan_img_tags(item.child_value("encoded")):
                url = resolve_image_url(img.src, item.optional_child_value("link"))
                images.append(
                    ImageRecord(id=None, post_id=post_id, url=url, description=img.description)
                )

    log_message(f"{len(images)} images scraped from post body content.")
    return images


def collect_images(
    items: List[ExportNode], post_types: Iterable[str], *, attached: bool, scraped: bool
) -> List[ImageRecord]:
    """Run the enabled strategies and concatenate their results, attached first."""
    post_types = list(post_types)
    images: List[ImageRecord] = []
    if attached:
        images.extend(collect_attached_images(items))
    if scraped:
        images.extend(collect_scraped_images(items, post_types))
    return images
