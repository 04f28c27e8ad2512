"""Normalization of the model's JSON reply into a complete ExtractedRecipe."""

import json

from recipe_organizer.errors import MalformedResponseError

from .models import ExtractedRecipe
from .prompts import DEFAULT_CUISINE


EXCERPT_LENGTH = 200


def parse_response(raw: str) -> dict:
    """
    Decode the model reply.

    Raises MalformedResponseError if it is not JSON or not a JSON object.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(
            f"Completion API returned invalid JSON: {e}", raw=_excerpt(raw)
        ) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Completion API returned JSON {type(data).__name__}, expected an object",
            raw=_excerpt(raw),
        )
    return data


def normalize_recipe(raw: str, original_url: str | None = None) -> ExtractedRecipe:
    """
    Parse the reply and fill every field with a type-correct value.

    Falsy values ("", [], 0, null) count as missing. A caller-supplied URL
    always wins over the model's sourceUrl.
    """
    data = parse_response(raw)

    return ExtractedRecipe(
        title=_string(data.get("title")),
        ingredients=normalize_string_list(data.get("ingredients")),
        steps=normalize_string_list(data.get("steps")),
        cuisine=_string(data.get("cuisine")) or DEFAULT_CUISINE,
        image=extract_image_url(data.get("image")),
        source_url=original_url or _string(data.get("sourceUrl")),
    )


def normalize_string_list(value) -> list[str]:
    """
    Coerce a list-ish value to a list of non-blank strings.

    Handles:
        - List of strings
        - List of dicts with 'text' or 'name' field
        - A single string (becomes a one-item list)
    """
    if not value:
        return []

    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, list):
        value = [value]

    result = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("text") or item.get("name") or ""
        text = _string(item)
        if text:
            result.append(text)
    return result


def extract_image_url(image) -> str:
    """
    Extract an image URL from a string, a dict or a list of either.

    Returns "" when nothing usable is present.
    """
    if not image:
        return ""

    if isinstance(image, str):
        return image.strip()

    if isinstance(image, dict):
        return _string(image.get("url") or image.get("contentUrl"))

    if isinstance(image, list):
        return extract_image_url(image[0])

    return ""


def _string(value) -> str:
    if not value:
        return ""
    if isinstance(value, list):
        return _string(value[0])
    if isinstance(value, (dict, bool)):
        return ""
    return str(value).strip()


def _excerpt(raw) -> str:
    text = raw if isinstance(raw, str) else repr(raw)
    if len(text) > EXCERPT_LENGTH:
        return text[:EXCERPT_LENGTH] + "..."
    return text
