"""
Frontmatter field computers.

Each getter takes a :class:`~wp_export.models.post.PostRecord` and returns
the value of one frontmatter field, or ``None`` when the field does not
apply to the post.  Getters only read the record.

:data:`FRONTMATTER_GETTERS` is the registry consulted by
:func:`~wp_export.frontmatter.populate.populate_frontmatter`; its keys are
the field names accepted in the ``frontmatterFields`` option.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import unquote

from ..models.post import PostRecord
from ..utils.taxonomy import dedupe_labels, normalize_label

FrontmatterGetter = Callable[[PostRecord], Any]


def _taxonomy(post: PostRecord, domain: str, *, exclude=()) -> Optional[List[str]]:
    # nicenames are percent-encoded slugs
    nicenames = [
        unquote(c.attribute("nicename") or c.text)
        for c in post.data.children("category")
        if c.attribute("domain") == domain
    ]
    labels = dedupe_labels(nicenames, exclude=exclude)
    return labels or None


def author(post: PostRecord) -> Optional[str]:
    return post.data.optional_child_value("creator") or None


def categories(post: PostRecord) -> Optional[List[str]]:
    # every post lands in "uncategorized" unless told otherwise
    return _taxonomy(post, "category", exclude=("uncategorized",))


def cover_image(post: PostRecord) -> Optional[str]:
    return post.cover_image


def cover_image_description(post: PostRecord) -> Optional[str]:
    return post.cover_image_description


def date(post: PostRecord) -> Optional[str]:
    return post.date.isoformat() if post.date is not None else None


def draft(post: PostRecord) -> Optional[bool]:
    return True if post.is_draft else None


def excerpt(post: PostRecord) -> Optional[str]:
    raw = post.data.optional_child_value("excerpt:encoded") or ""
    text = re.sub(r"[\r\n]+", " ", raw).strip()
    return text or None


def id(post: PostRecord) -> str:  # noqa: A001
    return post.id


def image_descriptions(post: PostRecord) -> Optional[Dict[str, str]]:
    return dict(post.image_descriptions) or None


def slug(post: PostRecord) -> str:
    return post.slug


def tags(post: PostRecord) -> Optional[List[str]]:
    return _taxonomy(post, "post_tag")


def title(post: PostRecord) -> Optional[str]:
    return normalize_label(post.data.optional_child_value("title") or "") or None


def type(post: PostRecord) -> str:  # noqa: A001
    return post.type


FRONTMATTER_GETTERS: Dict[str, FrontmatterGetter] = {
    "author": author,
    "categories": categories,
    "coverImage": cover_image,
    "coverImageDescription": cover_image_description,
    "date": date,
    "draft": draft,
    "excerpt": excerpt,
    "id": id,
    "imageDescriptions": image_descriptions,
    "slug": slug,
    "tags": tags,
    "title": title,
    "type": type,
}
