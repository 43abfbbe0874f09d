"""
Command line entry point.

Usage:
  wp-export --input export.xml --save-images all --dump reports/posts.jsonl
  wp-export --config run.json --frontmatter-fields title,date:published

Values given on the command line override those read from ``--config``.
"""

from __future__ import annotations

import argparse
import json
import os
from typing import Any, Dict, List, Optional, Sequence

from .export_tool import WordPressExportTool
from .models.config import load_config
from .models.post import PostRecord
from .utils.console import log_message
from .utils.errors import WordPressExportError, report_error
from .utils.pre_flight_checks import run_pre_flight_checks


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse a WordPress export into post records with images and frontmatter.",
    )
    parser.add_argument("--config", help="JSON file with run options")
    parser.add_argument("--input", help="Path of the WordPress export (WXR) file")
    parser.add_argument(
        "--save-images",
        choices=["none", "attached", "scraped", "all"],
        help="Which image discovery strategies to run",
    )
    parser.add_argument("--timezone", help="Time zone used to interpret post dates")
    parser.add_argument(
        "--frontmatter-fields",
        help="Comma separated frontmatter fields, each 'key' or 'key:alias'",
    )
    parser.add_argument("--report-dir", help="Directory for error reports")
    parser.add_argument("--dump", help="Write one JSON line per post to this file")
    return parser.parse_args(argv)


def post_to_json(post: PostRecord) -> Dict[str, Any]:
    return {
        "type": post.type,
        "id": post.id,
        "slug": post.slug,
        "date": post.date.isoformat() if post.date else None,
        "frontmatter": post.frontmatter,
        "imageUrls": post.image_urls,
        "coverImage": post.cover_image,
    }


def dump_posts(posts: List[PostRecord], path: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for post in posts:
            json.dump(post_to_json(post), f, ensure_ascii=False, default=str)
            f.write("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    overrides = {
        "input": args.input,
        "save_images": args.save_images,
        "timezone": args.timezone,
        "frontmatter_fields": args.frontmatter_fields,
        "report_dir": args.report_dir,
    }
    report_dir = args.report_dir or os.path.join("reports", "parsing")

    try:
        config = load_config(args.config, overrides)
        report_dir = config.report_dir
        run_pre_flight_checks(config)
        tool = WordPressExportTool(config)
        posts = tool.parse_export()
    except WordPressExportError as e:
        report_error(e.code, e, report_dir=report_dir, context={"input": args.input})
        return 1

    for post_type, count in tool.summarize(posts).items():
        log_message(f"{post_type}: {count}")
    if args.dump:
        dump_posts(posts, args.dump)
        log_message(f"Wrote {len(posts)} posts to {args.dump}")
    return 0
