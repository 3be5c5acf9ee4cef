"""
metascraper - meta tag, microdata and visible text extraction from HTML.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .exceptions import FetchError, MetascraperError, PageParseError
from .models import ItemProp, ItemScope, Meta, MetaKind, Page
from .page import PageAssembler, read_page

__all__ = [
    "__version__",
    "FetchError",
    "ItemProp",
    "ItemScope",
    "Meta",
    "MetaKind",
    "MetascraperError",
    "Page",
    "PageAssembler",
    "PageParseError",
    "read_page",
]
