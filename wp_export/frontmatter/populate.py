from __future__ import annotations

from typing import Iterable, List, Mapping, NamedTuple, Optional, Tuple

from ..models.post import PostRecord
from ..utils.errors import ConfigurationError
from .getters import FRONTMATTER_GETTERS, FrontmatterGetter


class FieldSpec(NamedTuple):
    """One entry of ``frontmatterFields``: ``key`` or ``key:alias``."""

    key: str
    alias: Optional[str] = None

    @property
    def output_key(self) -> str:
        return self.alias or self.key


def parse_field_spec(field: str) -> FieldSpec:
    key, _, alias = field.strip().partition(":")
    return FieldSpec(key.strip(), alias.strip() or None)


def resolve_frontmatter_fields(
    fields: Iterable[str], registry: Mapping[str, FrontmatterGetter] = FRONTMATTER_GETTERS
) -> List[Tuple[FieldSpec, FrontmatterGetter]]:
    """
    Pair every configured field with its getter before any post is touched.

    Raises:
        ConfigurationError: Listing every requested key missing from
            ``registry``, so a misconfigured run fails before doing any work.
    """
    specs = [parse_field_spec(f) for f in fields]
    unknown = [s.key for s in specs if s.key not in registry]
    if unknown:
        names = ", ".join(f'"{k}"' for k in unknown)
        raise ConfigurationError(
            f"Could not find a frontmatter getter named {names}.", unknown_fields=unknown
        )
    return [(spec, registry[spec.key]) for spec in specs]


def populate_frontmatter(
    posts: Iterable[PostRecord],
    fields: Iterable[str],
    registry: Mapping[str, FrontmatterGetter] = FRONTMATTER_GETTERS,
) -> None:
    """Fill ``post.frontmatter`` for every post, in the configured field order."""
    resolved = resolve_frontmatter_fields(fields, registry)
    for post in posts:
        post.frontmatter = {spec.output_key: getter(post) for spec, getter in resolved}
