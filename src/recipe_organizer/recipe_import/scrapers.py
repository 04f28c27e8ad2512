"""Fetch a recipe page and reduce it to clean plain text for prompting."""

import asyncio
import logging

import httpx
from bs4 import BeautifulSoup

from recipe_organizer.errors import ScrapeError

from .models import ScrapedContent

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
MIN_CONTENT_LENGTH = 50

# Some recipe sites reject default HTTP client user agents
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Checked in order; the first region with non-empty text wins
CONTENT_REGIONS = ("main", "article", "body")


async def fetch_page_text(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ScrapedContent:
    """
    Download a page and return its cleaned main text.

    Single GET, no retry. Every failure (network, TLS, timeout, non-2xx,
    too little text) is raised as ScrapeError with the cause in the message.
    """
    html = await _download(url, timeout=timeout, transport=transport)

    cleaned = clean_text(extract_main_text(html))
    if len(cleaned) < MIN_CONTENT_LENGTH:
        logger.info(f"Only {len(cleaned)} chars of content found at {url}")
        raise ScrapeError(
            f"Failed to scrape URL: unable to extract meaningful content from {url}",
            url=url,
        )

    logger.info(f"Scraped {len(cleaned)} chars from {url}")
    return ScrapedContent(source_url=url, cleaned_text=cleaned)


async def _download(
    url: str,
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None,
) -> str:
    try:
        # Hard deadline for the whole fetch; httpx timeouts are per network step
        async with asyncio.timeout(timeout), httpx.AsyncClient(
            follow_redirects=True,
            timeout=timeout,
            headers=BROWSER_HEADERS,
            transport=transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text
    except (httpx.TimeoutException, TimeoutError) as e:
        raise ScrapeError(
            f"Failed to scrape URL: request timed out after {timeout:g}s", url=url
        ) from e
    except httpx.HTTPStatusError as e:
        raise ScrapeError(
            f"Failed to scrape URL: HTTP {e.response.status_code}", url=url
        ) from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        cause = str(e) or type(e).__name__
        raise ScrapeError(f"Failed to scrape URL: {cause}", url=url) from e


def extract_main_text(html: str) -> str:
    """
    Pick the page's main content text.

    Script and style elements are removed first. Regions are tried in
    CONTENT_REGIONS order and a region is only used if its text is
    non-empty, so an empty <main> falls through to <article>. lxml always
    builds html/head/body, so the body tier exists even when the page
    omits the tag.
    """
    soup = BeautifulSoup(html, "lxml")

    for tag in soup.find_all(["script", "style"]):
        tag.decompose()

    for region in CONTENT_REGIONS:
        text = "".join(el.get_text() for el in soup.find_all(region))
        if text:
            return text

    return ""


def clean_text(text: str) -> str:
    """Strip every line, drop blank ones, rejoin with newlines."""
    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)
