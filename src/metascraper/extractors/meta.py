"""
Meta Tag Extractor - OpenGraph, Twitter Cards and named meta tags

Turns the `<meta>` elements of a document into an ordered list of key/value
entries. Qualifier tags such as `og:image:width` that directly follow their
base tag (`og:image`) are grouped under it as extras.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from bs4 import Tag

from ..models import Meta, MetaKind
from ..tree import find_all, get_attr, get_text, meta_inner_text

logger = logging.getLogger(__name__)


@dataclass
class _Group:
    """A top-level entry still collecting its extras."""

    kind: MetaKind
    key: str
    content: str
    extras: List[Meta] = field(default_factory=list)

    def accepts(self, kind: MetaKind, key: str) -> bool:
        prefix = self.key + ":"
        return kind is self.kind and key.startswith(prefix) and len(key) > len(prefix)

    def freeze(self) -> Meta:
        return Meta.of(self.kind, self.key, self.content, extra=tuple(self.extras))


class MetaExtractor:
    """Single pass over `<meta>` elements with one-level grouping."""

    def extract(self, root: Tag) -> List[Meta]:
        """Extract grouped meta entries from every `<meta>` below `root`."""
        return self.extract_from(find_all(root, "meta"))

    def extract_from(self, elements: Iterable[Tag]) -> List[Meta]:
        """Group an ordered sequence of `<meta>` elements.

        An element is an extra of the most recent top-level entry when both
        use the same attribute (property or name) and its key extends that
        entry's key with a `:`-separated suffix. Only the most recent entry is
        considered; equal keys always start a new entry.
        """
        groups: List[_Group] = []
        current: Optional[_Group] = None
        skipped = 0

        for element in elements:
            keyed = self._read_key(element)
            if keyed is None:
                skipped += 1
                continue

            kind, key = keyed
            value = self._read_value(element)

            if current is not None and current.accepts(kind, key):
                current.extras.append(Meta.of(kind, key, value))
                continue

            current = _Group(kind=kind, key=key, content=value)
            groups.append(current)

        if skipped:
            logger.debug("Skipped %d meta elements without property or name", skipped)

        return [group.freeze() for group in groups]

    @staticmethod
    def _read_key(element: Tag) -> Optional[Tuple[MetaKind, str]]:
        prop = get_attr(element, "property")
        if prop is not None:
            return MetaKind.PROPERTY, prop.strip()
        name = get_attr(element, "name")
        if name is not None:
            return MetaKind.NAME, name.strip()
        return None

    @staticmethod
    def _read_value(element: Tag) -> str:
        content = get_attr(element, "content")
        if content is not None:
            return content.strip()
        own_text = get_text(element)
        if own_text:
            return own_text
        # <meta name="x">value</meta>
        inner = meta_inner_text(element)
        return inner.strip() if inner is not None else ""
