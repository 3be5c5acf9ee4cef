"""
Title and visible text extraction.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List, Optional, Union

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from ..tree import meta_inner_text

DEFAULT_SKIP_TAGS = ("meta", "script", "style")


class TextExtractor:
    """Extracts the page title and the normalized visible body text."""

    def __init__(self, skip_tags: Iterable[str] = DEFAULT_SKIP_TAGS) -> None:
        self.skip_tags: FrozenSet[str] = frozenset(tag.lower() for tag in skip_tags)

    def title(self, root: Tag) -> str:
        """Return the trimmed text of the first `<title>`, or an empty string."""
        title_tag = root.find("title")
        if not isinstance(title_tag, Tag):
            return ""
        return title_tag.get_text().strip()

    def text(self, root: Tag) -> str:
        """Return the visible text of `<body>` with whitespace collapsed.

        Falls back to the whole document when there is no body element.
        """
        body = root.find("body")
        scope = body if isinstance(body, Tag) else root
        chunks: List[str] = list(self._iter_strings(scope))
        return " ".join(" ".join(chunks).split())

    def _iter_strings(self, node: Tag) -> Iterator[str]:
        # Malformed pages can nest deeper than the recursion limit.
        stack: List[Union[Tag, NavigableString]] = list(reversed(node.contents))
        claimed: Optional[NavigableString] = None

        while stack:
            child = stack.pop()
            if isinstance(child, Tag):
                if child.name in self.skip_tags:
                    if child.name == "meta":
                        claimed = meta_inner_text(child)
                    continue
                stack.extend(reversed(child.contents))
            elif child is claimed:
                claimed = None
            # Comments, doctypes and CDATA are preformatted strings.
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                yield str(child)
