"""
Parsers and converters used by the export pipeline.

Currently this subpackage exposes ``translate_post_content`` from
:mod:`wp_export.parsers.markdown` and ``scan_img_tags`` from
:mod:`wp_export.parsers.img_tags`.
"""

from .img_tags import scan_img_tags
from .markdown import translate_post_content

__all__ = ["scan_img_tags", "translate_post_content"]
