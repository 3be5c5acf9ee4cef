"""
Microdata Extractor - schema.org itemscope/itemprop parsing

Builds a forest of items from the `itemscope` elements of a document. Each
item owns the `itemprop` leaves below it and the nested items below it; a
nested item claims its whole subtree, so no property is counted twice.
Items nested inside a leaf value are still built, as children of the item
owning the leaf.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bs4 import Tag

from ..models import ItemProp, ItemScope
from ..tree import get_attr, get_text, has_ancestor_with, has_attr, iter_children

logger = logging.getLogger(__name__)

ITEMSCOPE = "itemscope"
ITEMPROP = "itemprop"
ITEMTYPE = "itemtype"

LINK_TAGS = frozenset({"a", "link", "area"})
MEDIA_TAGS = frozenset({"img", "audio", "video", "source", "track", "embed", "iframe"})


@dataclass
class _Draft:
    """An item whose props and children are still being collected."""

    element: Tag
    item_prop: Optional[str]
    props: List[ItemProp] = field(default_factory=list)
    children: List[_Draft] = field(default_factory=list)
    built: Optional[ItemScope] = None

    def freeze(self) -> ItemScope:
        self.built = ItemScope(
            tag_name=self.element.name,
            item_type=get_attr(self.element, ITEMTYPE),
            item_prop=self.item_prop,
            props=tuple(self.props),
            children=tuple(child.built for child in self.children),  # type: ignore[misc]
        )
        return self.built


class MicrodataExtractor:
    """Extraction of schema.org microdata items."""

    def extract(self, root: Tag) -> List[ItemScope]:
        """Return the top-level items of the document in document order."""
        scopes: List[ItemScope] = []
        for element in root.find_all(attrs={ITEMSCOPE: True}):
            if has_ancestor_with(element, ITEMSCOPE):
                continue
            scopes.append(self.build_scope(element))

        logger.debug("Extracted %d top-level microdata items", len(scopes))
        return scopes

    def build_scope(self, element: Tag, item_prop: Optional[str] = None) -> ItemScope:
        """Build the item rooted at `element` together with its nested items.

        Items are collected top-down and frozen bottom-up, so neither the
        nesting of items nor the nesting of plain elements is bounded by the
        recursion limit.
        """
        root = _Draft(element, item_prop)
        pending = [root]
        drafts: List[_Draft] = []

        while pending:
            draft = pending.pop()
            drafts.append(draft)
            self._collect(draft)
            pending.extend(draft.children)

        # Every draft comes after its parent, so children freeze first.
        for draft in reversed(drafts):
            draft.freeze()
        return root.built  # type: ignore[return-value]

    def _collect(self, draft: _Draft) -> None:
        """Fill the props and nested items of `draft` in document order."""
        # (node, inside a leaf value)
        stack: List[Tuple[Tag, bool]] = [(child, False) for child in reversed(list(iter_children(draft.element)))]

        while stack:
            node, in_leaf = stack.pop()
            name = get_attr(node, ITEMPROP)

            if has_attr(node, ITEMSCOPE):
                draft.children.append(_Draft(node, name))
                continue

            if name is not None and not in_leaf:
                draft.props.append(self.build_prop(node, name))
                in_leaf = True

            stack.extend((child, in_leaf) for child in reversed(list(iter_children(node))))

    @staticmethod
    def build_prop(element: Tag, name: str) -> ItemProp:
        """Read a leaf property value according to its tag."""
        tag = element.name

        if tag == "meta":
            return ItemProp(tag_name=tag, item_prop=name, content=get_attr(element, "content") or "")

        if tag == "time":
            return ItemProp(
                tag_name=tag,
                item_prop=name,
                content=get_text(element),
                datetime=get_attr(element, "datetime"),
            )

        if tag in LINK_TAGS:
            return ItemProp(
                tag_name=tag,
                item_prop=name,
                content=get_text(element),
                href=get_attr(element, "href"),
            )

        if tag in MEDIA_TAGS:
            return ItemProp(tag_name=tag, item_prop=name, content=get_attr(element, "src") or "")

        return ItemProp(tag_name=tag, item_prop=name, content=get_text(element))
