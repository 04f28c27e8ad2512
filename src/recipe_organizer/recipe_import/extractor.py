"""Main recipe extraction orchestration."""

import logging

import httpx

from recipe_organizer.config import Settings
from recipe_organizer.errors import MalformedResponseError
from recipe_organizer.llm.client import ExtractionClient

from .models import ExtractedRecipe, ExtractionPath, ExtractionRequest
from .normalizer import normalize_recipe
from .prompts import build_prompt
from .resolver import resolve_input
from .scrapers import fetch_page_text

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


async def extract_recipe(
    request: ExtractionRequest,
    *,
    client: ExtractionClient,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ExtractedRecipe:
    """
    Extract a structured recipe from pasted text or a recipe page.

    Extraction pipeline:
    1. Resolve input (a valid URL wins over text)
    2. On the URL path, fetch and clean the page text
    3. Build the fixed extraction prompt
    4. Run the JSON-mode completion
    5. Normalize the reply, filling defaults for missing fields

    Raises:
        InputValidationError: neither usable text nor a valid URL
        ScrapeError: the page could not be fetched or had too little text
        ExtractionApiError: the completion API call failed
        MalformedResponseError: the reply was not a JSON object
    """
    resolved = resolve_input(request)

    if resolved.path is ExtractionPath.URL:
        logger.info(f"Extracting recipe from URL: {resolved.url}")
        scraped = await fetch_page_text(
            resolved.url,
            timeout=settings.scrape_timeout_seconds,
            transport=transport,
        )
        body_text = scraped.cleaned_text
    else:
        body_text = resolved.text
        logger.info(f"Extracting recipe from text: {_preview(body_text)}")

    prompt = build_prompt(body_text)
    raw = await client.complete(prompt.system, prompt.user)

    try:
        recipe = normalize_recipe(raw, original_url=resolved.url)
    except MalformedResponseError as e:
        logger.error(f"Malformed completion reply: {e} (reply: {e.raw!r})")
        raise

    logger.info(
        f"Extracted recipe '{recipe.title}': {len(recipe.ingredients)} ingredients, "
        f"{len(recipe.steps)} steps, cuisine={recipe.cuisine}"
    )
    return recipe


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_LENGTH:
        return text
    return text[:PREVIEW_LENGTH] + "..."
