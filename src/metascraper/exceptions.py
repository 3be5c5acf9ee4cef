"""
Exceptions raised by metascraper.
"""

from __future__ import annotations


class MetascraperError(Exception):
    """Base exception for metascraper errors."""
    pass


class PageParseError(MetascraperError):
    """Raised when input cannot be turned into a document tree."""
    pass


class FetchError(MetascraperError):
    """Raised when a page cannot be retrieved over HTTP."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
