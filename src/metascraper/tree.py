"""
Read-only helpers over a BeautifulSoup document tree.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


def find_all(root: Tag, tag_name: str) -> List[Tag]:
    """Return every element named `tag_name` below `root`, in document order."""
    return [node for node in root.find_all(tag_name) if isinstance(node, Tag)]


def get_attr(node: Tag, name: str) -> Optional[str]:
    """Return an attribute value, or None when the attribute is absent.

    Multi-valued attributes (class, rel, ...) come back from BeautifulSoup as
    lists and are joined with single spaces.
    """
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def has_attr(node: Tag, name: str) -> bool:
    """Return True if `node` carries `name`, even with an empty value."""
    return node.has_attr(name)


def get_text(node: Tag) -> str:
    """Return the trimmed text content of `node`."""
    return node.get_text().strip()


def iter_children(node: Tag) -> Iterator[Tag]:
    """Yield the element children of `node`, skipping text nodes."""
    for child in node.children:
        if isinstance(child, Tag):
            yield child


def has_ancestor_with(node: Tag, attr: str) -> bool:
    """Return True if any ancestor element of `node` carries `attr`."""
    for parent in node.parents:
        if isinstance(parent, BeautifulSoup):
            break
        if parent.has_attr(attr):
            return True
    return False


def meta_inner_text(node: Tag) -> Optional[NavigableString]:
    """Return the text node holding the value of `<meta name="x">value</meta>`.

    HTML parsers close void elements such as `<meta>` immediately, so text
    written inside one ends up as its next sibling. Only keyed meta elements
    without a `content` attribute or text of their own claim that sibling;
    otherwise None is returned.
    """
    if node.name != "meta" or node.has_attr("content"):
        return None
    if not (node.has_attr("property") or node.has_attr("name")) or get_text(node):
        return None
    sibling = node.next_sibling
    if isinstance(sibling, NavigableString) and not isinstance(sibling, PreformattedString):
        return sibling if sibling.strip() else None
    return None
