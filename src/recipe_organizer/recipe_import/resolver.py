"""Decide whether a request is served from its URL or its text."""

import logging
import re
from urllib.parse import urlparse

from recipe_organizer.errors import InputValidationError

from .models import ExtractionPath, ExtractionRequest, ResolvedInput

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "either text or a valid URL must be provided"


def is_valid_url(url: str | None) -> bool:
    """Syntactic check only: http(s) scheme and a host, no whitespace."""
    if not url or not url.strip():
        return False

    url = url.strip()
    if not re.match(r"^https?://", url, re.IGNORECASE):
        return False
    if re.search(r"\s", url):
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    if parsed.scheme.lower() not in ("http", "https"):
        return False
    if not parsed.hostname:
        return False
    return True


def resolve_input(request: ExtractionRequest) -> ResolvedInput:
    """
    Pick the execution path for a request.

    A valid URL always wins, even when text is also supplied. Otherwise
    non-blank text is used as-is. Anything else is rejected.
    """
    if is_valid_url(request.url):
        url = request.url.strip()
        if request.text and request.text.strip():
            logger.info(f"Both text and URL supplied, using URL: {url}")
        return ResolvedInput(path=ExtractionPath.URL, url=url)

    if isinstance(request.text, str) and request.text.strip():
        return ResolvedInput(path=ExtractionPath.TEXT, text=request.text)

    raise InputValidationError(MISSING_INPUT_MESSAGE)
