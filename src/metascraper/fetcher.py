"""
HTTP adapter that retrieves a page and hands it to the assembler.
"""

from __future__ import annotations

from typing import Optional

import httpx
import structlog

from .config import Config
from .exceptions import FetchError
from .models import Page
from .page import PageAssembler

logger = structlog.get_logger(__name__)


async def fetch_page(
    url: str,
    config: Optional[Config] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Page:
    """
    Fetch `url` and extract its metadata.

    Args:
        url: Page to retrieve
        config: Settings for the request and the parser; defaults when omitted
        client: Optional client to reuse; it is left open

    Returns:
        Page built from the response body and the final (post-redirect) URL

    Raises:
        FetchError: on transport errors or non-2xx responses
    """
    config = config or Config()
    fetch = config.fetch

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(
            timeout=fetch.timeout,
            follow_redirects=fetch.follow_redirects,
            headers={"User-Agent": fetch.user_agent},
        )

    try:
        logger.info("Fetching page", url=url)
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning("Fetch failed", url=url, error=str(e))
        raise FetchError(f"Request to {url} failed: {e}", url=url) from e
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        logger.warning("Unexpected HTTP status", url=url, status=response.status_code)
        raise FetchError(
            f"GET {url} returned HTTP {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    return PageAssembler(config.parser).assemble(response.content, str(response.url))
