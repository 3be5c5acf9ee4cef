"""
Page assembly - parse one HTML document and run every extractor over it.
"""

from __future__ import annotations

from typing import Optional, Union

import structlog
from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from .config import ParserSettings
from .exceptions import PageParseError
from .extractors import MetaExtractor, MicrodataExtractor, TextExtractor
from .models import Page

logger = structlog.get_logger(__name__)

Markup = Union[bytes, str]


class PageAssembler:
    """
    Builds immutable `Page` results from raw HTML.

    The assembler holds no per-document state, so one instance can be shared
    across threads.
    """

    def __init__(self, settings: Optional[ParserSettings] = None) -> None:
        self.settings = settings or ParserSettings()
        self.meta_extractor = MetaExtractor()
        self.microdata_extractor = MicrodataExtractor()
        self.text_extractor = TextExtractor(self.settings.skip_text_tags)

    def parse(self, html: Markup) -> BeautifulSoup:
        """Parse raw HTML into a document tree.

        Raises:
            PageParseError: if the input is not bytes/str or the parser rejects it
        """
        if not isinstance(html, (bytes, str)):
            raise PageParseError(f"Expected HTML as bytes or str, got {type(html).__name__}")
        try:
            return BeautifulSoup(html, self.settings.features)
        except (FeatureNotFound, ParserRejectedMarkup) as e:
            logger.warning("HTML parsing failed", parser=self.settings.features, error=str(e))
            raise PageParseError(f"Could not parse HTML with {self.settings.features!r}: {e}") from e

    def assemble(self, html: Markup, url: str = "") -> Page:
        """
        Parse `html` and extract title, text, meta entries and microdata.

        Args:
            html: Raw HTML bytes or text
            url: URL the document was retrieved from (stored, never resolved)

        Returns:
            Page holding all four extraction results
        """
        soup = self.parse(html)

        source = html
        if isinstance(source, bytes):
            source = source.decode(soup.original_encoding or "utf-8", errors="replace")

        page = Page(
            url=url,
            html=source,
            title=self.text_extractor.title(soup),
            text=self.text_extractor.text(soup),
            meta=tuple(self.meta_extractor.extract(soup)),
            schema=tuple(self.microdata_extractor.extract(soup)),
        )

        logger.debug(
            "Page extracted",
            url=url,
            meta_count=len(page.meta),
            scope_count=len(page.schema),
            text_length=len(page.text),
        )
        return page


def read_page(html: Markup, url: str = "", settings: Optional[ParserSettings] = None) -> Page:
    """Extract a `Page` from raw HTML with a one-off assembler."""
    return PageAssembler(settings).assemble(html, url)
