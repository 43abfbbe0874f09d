"""
Read-only navigation over a WordPress WXR export.

WXR is RSS 2.0 with a handful of extra namespaces (``wp:``, ``content:``,
``excerpt:``, ``dc:``).  :class:`ExportNode` wraps an ElementTree element and
exposes lookups by child name so the rest of the pipeline never deals with
namespace URIs directly:

* ``"post_id"`` matches the first child whose local name is ``post_id``,
  whatever its namespace;
* ``"excerpt:encoded"`` matches only a child in the namespace bound to the
  ``excerpt`` prefix.  Export versions 1.0 to 1.2 are all recognised.

The tree is never mutated.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple

from ..utils.errors import ExportDocumentError, MissingElementError

# Namespace URIs by conventional WXR prefix.
WXR_NAMESPACES: Dict[str, "re.Pattern[str]"] = {
    "content": re.compile(r"^http://purl\.org/rss/1\.0/modules/content/?$"),
    "excerpt": re.compile(r"^http://wordpress\.org/export/1\.\d+/excerpt/?$"),
    "wp": re.compile(r"^http://wordpress\.org/export/1\.\d+/?$"),
    "dc": re.compile(r"^http://purl\.org/dc/elements/1\.1/?$"),
    "wfw": re.compile(r"^http://wellformedweb\.org/CommentAPI/?$"),
}


def _split_tag(tag: str) -> Tuple[str, str]:
    """Split an ElementTree ``{uri}local`` tag into ``(uri, local)``."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return "", tag


class ExportNode:
    """A single element of the export with name-based child lookups."""

    __slots__ = ("element",)

    def __init__(self, element: ET.Element) -> None:
        self.element = element

    def __repr__(self) -> str:
        return f"ExportNode({self.name!r})"

    @property
    def name(self) -> str:
        return _split_tag(self.element.tag)[1]

    @property
    def text(self) -> str:
        return self.element.text or ""

    def _matches(self, element: ET.Element, name: str) -> bool:
        uri, local = _split_tag(element.tag)
        prefix, sep, wanted = name.partition(":")
        if not sep:
            return local == name
        if local != wanted:
            return False
        pattern = WXR_NAMESPACES.get(prefix)
        return bool(pattern and pattern.match(uri))

    def children(self, name: str) -> List["ExportNode"]:
        return [ExportNode(e) for e in self.element if self._matches(e, name)]

    def optional_child(self, name: str) -> Optional["ExportNode"]:
        for element in self.element:
            if self._matches(element, name):
                return ExportNode(element)
        return None

    def child(self, name: str) -> "ExportNode":
        """Return the first child called ``name``; raise if there is none."""
        node = self.optional_child(name)
        if node is None:
            raise MissingElementError(self.name, name)
        return node

    def child_value(self, name: str) -> str:
        """Text of the mandatory child ``name`` (empty string for an empty element)."""
        return self.child(name).text

    def optional_child_value(self, name: str) -> Optional[str]:
        node = self.optional_child(name)
        return node.text if node is not None else None

    def attribute(self, name: str) -> Optional[str]:
        return self.element.get(name)


def parse_export(text: str) -> ExportNode:
    """Parse the XML ``text`` of an export and return its root node.

    Raises:
        ExportDocumentError: If ``text`` is not well-formed XML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ExportDocumentError(f"Export is not well-formed XML: {e}") from e
    return ExportNode(root)


def load_export(path: str) -> ExportNode:
    """Read and parse the export file at ``path``.

    Raises:
        ExportDocumentError: If the file cannot be read or parsed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ExportDocumentError(f"Could not read export file {path}: {e}") from e
    return parse_export(content)


def export_items(root: ExportNode) -> List[ExportNode]:
    """All ``channel/item`` entries of the export, in document order."""
    return root.child("channel").children("item")
