"""Fixed prompt template for recipe extraction."""

import json

from .models import PromptMessages

# Serialized into the system prompt; the reply is not validated against it.
EXTRACTION_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {
            "type": "string",
            "description": "The name/title of the recipe",
        },
        "ingredients": {
            "type": "array",
            "items": {"type": "string"},
            "description": "List of ingredients with quantities",
        },
        "steps": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Step-by-step cooking instructions",
        },
        "cuisine": {
            "type": "string",
            "description": "The cuisine type (e.g., Chinese, Western, Japanese, etc.)",
        },
        "image": {
            "type": "string",
            "description": "Image URL if mentioned in the text, otherwise empty string",
        },
        "sourceUrl": {
            "type": "string",
            "description": "Source URL if mentioned in the text, otherwise empty string",
        },
    },
    "required": ["title", "ingredients", "steps", "cuisine"],
}

DEFAULT_CUISINE = "Western"

SYSTEM_PROMPT_TEMPLATE = """You are a recipe extraction assistant. Extract recipe data and return JSON only, matching this schema:
{schema}

Rules:
- Always return valid JSON (no extra text).
- If a field is missing, use empty string or empty array.
- Infer cuisine if possible; otherwise default to "{default_cuisine}"."""


def build_system_prompt() -> str:
    schema = json.dumps(EXTRACTION_SCHEMA, separators=(",", ":"))
    return SYSTEM_PROMPT_TEMPLATE.format(schema=schema, default_cuisine=DEFAULT_CUISINE)


def build_prompt(body_text: str) -> PromptMessages:
    """Pair the fixed system prompt with the recipe text, untouched and untruncated."""
    return PromptMessages(system=build_system_prompt(), user=body_text)
