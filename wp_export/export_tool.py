"""
High-level orchestration of an export parsing run.

This module defines a :class:`WordPressExportTool` class that ties
together the extractors, parsers, mergers and frontmatter getters into a
complete pipeline:

1. load the export document;
2. discover and order the content post types;
3. collect one post record per qualifying item;
4. discover images (attached and/or scraped, per ``save_images``);
5. merge images into the posts that own or feature them;
6. compute the configured frontmatter fields.

Configuration is supplied as an :class:`~wp_export.models.config.ExportConfig`
or loaded from a JSON file path.  Fatal errors propagate unchanged; no
partial list of posts is ever returned.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, List, Mapping, Optional

from .extractors.document import export_items, load_export
from .extractors.images import collect_images
from .extractors.post_types import get_post_types
from .extractors.posts import collect_posts
from .frontmatter.getters import FRONTMATTER_GETTERS, FrontmatterGetter
from .frontmatter.populate import populate_frontmatter, resolve_frontmatter_fields
from .mergers.image_merger import merge_images_into_posts
from .models.config import ExportConfig, load_config
from .models.post import PostRecord
from .parsers.markdown import translate_post_content
from .utils.console import log_heading, log_message


class WordPressExportTool:
    """
    Encapsulates the configuration and collaborators of one parsing run.

    The content translator and the frontmatter registry can be swapped for
    tests or for other output formats; both default to the built-in ones.
    """

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        *,
        config_file: Optional[str] = None,
        translate: Callable[[str], str] = translate_post_content,
        frontmatter_getters: Mapping[str, FrontmatterGetter] = FRONTMATTER_GETTERS,
    ) -> None:
        if config is None:
            config = load_config(config_file)
        self.config = config
        self.translate = translate
        self.frontmatter_getters = frontmatter_getters

    def log_message(self, message: str, level: str = "INFO") -> None:
        log_message(message, level)

    def parse_export(self) -> List[PostRecord]:
        """
        Run the whole pipeline over ``config.input`` and return the posts.

        :return: Posts ordered by type ("post", "page", then custom types)
            and by document order within a type, with images merged and
            frontmatter populated.
        :raises ConfigurationError: If a frontmatter field is unknown.  This
            is checked before the export is read.
        :raises ExportDocumentError: If the export cannot be read or parsed.
        :raises ImageResolutionError: If a scraped image cannot be resolved
            to an absolute URL.
        """
        config = self.config
        resolve_frontmatter_fields(config.frontmatter_fields, self.frontmatter_getters)

        log_heading("Parsing")
        self.log_message(f"Reading export {config.input}")
        items = export_items(load_export(config.input))

        post_types = get_post_types(items)
        posts = collect_posts(items, post_types, config, translate=self.translate)

        images = collect_images(
            items,
            post_types,
            attached=config.saves_attached_images,
            scraped=config.saves_scraped_images,
        )
        merge_images_into_posts(images, posts)
        populate_frontmatter(posts, config.frontmatter_fields, self.frontmatter_getters)

        self.log_message(f"{len(posts)} posts ready.")
        return posts

    @staticmethod
    def summarize(posts: List[PostRecord]) -> Dict[str, int]:
        """Number of posts per type, in output order."""
        return dict(Counter(post.type for post in posts))
