"""Recipe import module for extracting recipes from pasted text or URLs."""

from .models import (
    ExtractedRecipe,
    ExtractionPath,
    ExtractionRequest,
    PromptMessages,
    ResolvedInput,
    ScrapedContent,
)
from .extractor import extract_recipe
from .normalizer import normalize_recipe, parse_response
from .prompts import EXTRACTION_SCHEMA, build_prompt
from .resolver import is_valid_url, resolve_input
from .scrapers import clean_text, extract_main_text, fetch_page_text

__all__ = [
    "ExtractedRecipe",
    "ExtractionPath",
    "ExtractionRequest",
    "PromptMessages",
    "ResolvedInput",
    "ScrapedContent",
    "extract_recipe",
    "normalize_recipe",
    "parse_response",
    "EXTRACTION_SCHEMA",
    "build_prompt",
    "is_valid_url",
    "resolve_input",
    "clean_text",
    "extract_main_text",
    "fetch_page_text",
]
