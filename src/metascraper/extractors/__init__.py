"""
Metadata extractors operating on a parsed BeautifulSoup document.

Components:
- MetaExtractor: `<meta>` key/value pairs with qualifier grouping
- MicrodataExtractor: schema.org itemscope/itemprop items
- TextExtractor: page title and visible body text
"""

from .meta import MetaExtractor
from .microdata import MicrodataExtractor
from .text import TextExtractor

__all__ = [
    "MetaExtractor",
    "MicrodataExtractor",
    "TextExtractor",
]
