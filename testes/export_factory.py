"""Builders for small WXR documents used across the test modules."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple
from xml.sax.saxutils import escape

from wp_export.extractors.document import ExportNode, export_items, parse_export

WXR_HEADER = """<?xml version="1.0" encoding="UTF-8" ?>
<rss version="2.0"
    xmlns:excerpt="http://wordpress.org/export/1.2/excerpt/"
    xmlns:content="http://purl.org/rss/1.0/modules/content/"
    xmlns:wfw="http://wellformedweb.org/CommentAPI/"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:wp="http://wordpress.org/export/1.2/">
<channel>
<title>Test site</title>
<link>https://example.com</link>
"""

WXR_FOOTER = """
</channel>
</rss>
"""


def make_item(
    post_id: str = "1",
    post_type: str = "post",
    *,
    status: str = "publish",
    post_name: str = "hello-world",
    title: str = "Hello world",
    link: Optional[str] = "https://example.com/hello-world/",
    pub_date: str = "Mon, 01 Jan 2024 10:00:00 +0000",
    creator: str = "admin",
    content: str = "",
    excerpt: str = "",
    post_parent: Optional[str] = None,
    attachment_url: Optional[str] = None,
    postmeta: Optional[Dict[str, str]] = None,
    categories: Iterable[Tuple[str, str, str]] = (),
) -> str:
    """XML for one ``<item>``; ``categories`` holds ``(domain, nicename, label)``."""
    parts: List[str] = ["<item>", f"<title>{escape(title)}</title>"]
    if link is not None:
        parts.append(f"<link>{escape(link)}</link>")
    parts.append(f"<pubDate>{escape(pub_date)}</pubDate>")
    parts.append(f"<dc:creator><![CDATA[{creator}]]></dc:creator>")
    for domain, nicename, label in categories:
        parts.append(
            f'<category domain="{domain}" nicename="{nicename}"><![CDATA[{label}]]></category>'
        )
    parts.append(f"<content:encoded><![CDATA[{content}]]></content:encoded>")
    parts.append(f"<excerpt:encoded><![CDATA[{excerpt}]]></excerpt:encoded>")
    parts.append(f"<wp:post_id>{post_id}</wp:post_id>")
    parts.append(f"<wp:post_name><![CDATA[{post_name}]]></wp:post_name>")
    parts.append(f"<wp:status><![CDATA[{status}]]></wp:status>")
    if post_parent is not None:
        parts.append(f"<wp:post_parent>{post_parent}</wp:post_parent>")
    parts.append(f"<wp:post_type><![CDATA[{post_type}]]></wp:post_type>")
    if attachment_url is not None:
        parts.append(f"<wp:attachment_url><![CDATA[{attachment_url}]]></wp:attachment_url>")
    for key, value in (postmeta or {}).items():
        parts.append(
            "<wp:postmeta>"
            f"<wp:meta_key><![CDATA[{key}]]></wp:meta_key>"
            f"<wp:meta_value><![CDATA[{value}]]></wp:meta_value>"
            "</wp:postmeta>"
        )
    parts.append("</item>")
    return "\n".join(parts)


def make_attachment(
    post_id: str,
    url: str,
    *,
    parent: Optional[str] = None,
    title: str = "",
    content: str = "",
    excerpt: str = "",
) -> str:
    return make_item(
        post_id,
        "attachment",
        status="inherit",
        post_name=f"attachment-{post_id}",
        title=title,
        link=f"https://example.com/?attachment_id={post_id}",
        content=content,
        excerpt=excerpt,
        post_parent=parent,
        attachment_url=url,
    )


def make_export(*items: str) -> str:
    return WXR_HEADER + "\n".join(items) + WXR_FOOTER


def make_items(*items: str) -> List[ExportNode]:
    return export_items(parse_export(make_export(*items)))
