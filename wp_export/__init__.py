"""
Top-level package for the WordPress export parser.

This package turns a WordPress WXR export into an ordered list of post
records with their images and frontmatter, ready to be rendered as
Markdown.  Modules are split into subpackages:

* :mod:`wp_export.extractors` – export navigation, post types, posts, images
* :mod:`wp_export.parsers` – HTML to Markdown conversion and ``<img>`` scanning
* :mod:`wp_export.mergers` – reconciliation of images with posts
* :mod:`wp_export.frontmatter` – frontmatter field getters and population
* :mod:`wp_export.models` – post, image and configuration models
* :mod:`wp_export.utils` – errors, logging, URLs and pre-flight checks

Each layer has no direct knowledge of configuration files or of the command
line; orchestration is handled in :mod:`wp_export.export_tool`.
"""

__version__ = "0.1.0"
