"""
Data models for extracted page metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class MetaKind(str, Enum):
    """Which attribute supplied the key of a meta entry."""

    PROPERTY = "property"
    NAME = "name"


@dataclass(slots=True, frozen=True)
class Meta:
    """A `<meta>` key/value pair, with qualifier entries grouped under it."""

    content: str

    @property
    def kind(self) -> MetaKind:
        return MetaKind.PROPERTY if self.property is not None else MetaKind.NAME

    @property
    def key(self) -> str:
        return self.property if self.property is not None else self.name  # type: ignore[return-value]

    property: Optional[str] = None
    name: Optional[str] = None
    extra: Tuple[Meta, ...] = ()

    def __post_init__(self) -> None:
        """Validate that exactly one key attribute is set."""
        if (self.property is None) == (self.name is None):
            raise ValueError("Meta requires exactly one of property or name")

    @classmethod
    def of(cls, kind: MetaKind, key: str, content: str, extra: Tuple[Meta, ...] = ()) -> Meta:
        if kind is MetaKind.PROPERTY:
            return cls(content=content, property=key, extra=extra)
        return cls(content=content, name=key, extra=extra)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {self.kind.value: self.key, "content": self.content}
        if self.extra:
            data["extra"] = [item.to_dict() for item in self.extra]
        return data


@dataclass(slots=True, frozen=True)
class ItemProp:
    """A leaf microdata property."""

    tag_name: str
    item_prop: str
    content: str = ""
    href: Optional[str] = None
    datetime: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "tag_name": self.tag_name,
            "itemprop": self.item_prop,
            "content": self.content,
        }
        if self.href is not None:
            data["href"] = self.href
        if self.datetime is not None:
            data["datetime"] = self.datetime
        return data


@dataclass(slots=True, frozen=True)
class ItemScope:
    """A microdata item rooted at an element carrying `itemscope`.

    `item_prop` is only set when the item is the value of a property of an
    enclosing item; such items live in the parent's `children`.
    """

    tag_name: str
    item_type: Optional[str] = None
    item_prop: Optional[str] = None
    props: Tuple[ItemProp, ...] = ()
    children: Tuple[ItemScope, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"tag_name": self.tag_name}
        if self.item_type is not None:
            data["itemtype"] = self.item_type
        if self.item_prop is not None:
            data["itemprop"] = self.item_prop
        if self.props:
            data["props"] = [prop.to_dict() for prop in self.props]
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(slots=True, frozen=True)
class Page:
    """Everything extracted from one HTML document."""

    url: str
    html: str
    title: str
    text: str
    meta: Tuple[Meta, ...] = field(default_factory=tuple)
    schema: Tuple[ItemScope, ...] = field(default_factory=tuple)

    def meta_data(self) -> List[Meta]:
        """Return the top-level meta entries in document order."""
        return list(self.meta)

    def schema_data(self) -> List[ItemScope]:
        """Return the top-level microdata items in document order."""
        return list(self.schema)

    def to_dict(self, *, include_html: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "url": self.url,
            "title": self.title,
            "text": self.text,
            "meta": [entry.to_dict() for entry in self.meta],
            "schema": [scope.to_dict() for scope in self.schema],
        }
        if include_html:
            data["html"] = self.html
        return data
