from __future__ import annotations

from typing import Iterable, List

from .document import ExportNode

# WordPress types that describe files, history or site chrome rather than content
EXCLUDED_POST_TYPES = frozenset({
    "attachment",
    "revision",
    "nav_menu_item",
    "custom_css",
    "customize_changeset",
    "oembed_cache",
    "user_request",
    "wp_block",
    "wp_global_styles",
    "wp_navigation",
    "wp_template",
    "wp_template_part",
})


def get_post_types(items: Iterable[ExportNode]) -> List[str]:
    """
    Return the distinct content post types found in the export.

    Types are listed in order of first appearance, except that "post" and
    then "page" are moved to the front when present.  This is also the
    order in which posts are collected and therefore the output order.
    """
    post_types: List[str] = []
    for item in items:
        post_type = item.child_value("post_type")
        if post_type not in EXCLUDED_POST_TYPES and post_type not in post_types:
            post_types.append(post_type)

    prioritize_post_type(post_types, "page")
    prioritize_post_type(post_types, "post")
    return post_types


def prioritize_post_type(post_types: List[str], post_type: str) -> None:
    """Move ``post_type`` to the front of ``post_types`` in place, if present."""
    if post_type in post_types:
        post_types.remove(post_type)
        post_types.insert(0, post_type)


def get_items_of_type(items: Iterable[ExportNode], post_type: str) -> List[ExportNode]:
    return [item for item in items if item.child_value("post_type") == post_type]
