"""
Shared test configuration for metascraper.

Provides sample documents and parsing helpers used across the unit and
integration suites.
"""

from typing import Callable

import pytest
from bs4 import BeautifulSoup

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Sample Documents
# ============================================================================

# Open Graph tags sampled from http://ogp.me/, microdata from https://schema.org/docs/gs.html
SAMPLE_PAGE = """
    <html>
        <head>
            <title>TestPage</title>
            <meta property="og:title" content="The Rock" />
            <meta property="og:type" content="video.movie" />
            <meta property="og:url" content="http://www.imdb.com/title/tt0117500/" />
            <meta property="og:image" content="http://example.com/rock.jpg" />
            <meta property="og:image:width" content="300" />
            <meta property="og:image:height" content="300" />
            <meta property="og:image" content="http://example.com/rock2.jpg" />
            <meta property="og:image" content="http://example.com/rock3.jpg" />
            <meta property="og:image:height" content="1000" />
            <meta name="keywords" content="a,b,c" />
            <meta name="unusual">special</meta>
        </head>
        <body>
            <div itemscope itemtype="http://schema.org/Offer">
                <span itemprop="name">Blend-O-Matic</span>
                <span itemprop="price">$19.95</span>
                <div itemprop="reviews" itemscope itemtype="http://schema.org/AggregateRating">
                    <img src="four-stars.jpg" />
                    <meta itemprop="ratingValue" content="4" />
                    <meta itemprop="bestRating" content="5" />
                    Based on <span itemprop="ratingCount">25</span> user ratings
                </div>
            </div>
            <div itemscope itemtype="http://schema.org/Event">
                <div itemprop="name">Spinal Tap</div>
                <span itemprop="description">One of the loudest bands ever reunites for an unforgettable two-day show.</span>
                Event date:
                <time itemprop="startDate" datetime="2011-05-08T19:30">May 8, 7:30pm</time>
            </div>
            <div itemscope itemtype="http://schema.org/Person">
              <a href="alice.html" itemprop="url">Alice Jones</a>
            </div>
            <div itemscope itemtype="http://schema.org/Person">
              <a href="bob.html" itemprop="url">Bob Smith</a>
            </div>
        </body>
    </html>
"""

SAMPLE_TEXT = (
    "Blend-O-Matic $19.95 Based on 25 user ratings Spinal Tap One of the loudest bands ever "
    "reunites for an unforgettable two-day show. Event date: May 8, 7:30pm Alice Jones Bob Smith"
)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def sample_page() -> str:
    """The reference page with Open Graph tags and schema.org microdata."""
    return SAMPLE_PAGE


@pytest.fixture
def sample_text() -> str:
    """Expected visible text of the reference page."""
    return SAMPLE_TEXT


@pytest.fixture
def parse_html() -> Callable[[str], BeautifulSoup]:
    """Parse an HTML snippet with the default tree builder."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse
