"""
Frontmatter getters and their application to post records.
"""

from .getters import FRONTMATTER_GETTERS
from .populate import FieldSpec, parse_field_spec, populate_frontmatter, resolve_frontmatter_fields

__all__ = [
    "FRONTMATTER_GETTERS",
    "FieldSpec",
    "parse_field_spec",
    "populate_frontmatter",
    "resolve_frontmatter_fields",
]
