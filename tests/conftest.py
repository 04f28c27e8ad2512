"""
Pytest configuration and fixtures for Recipe Organizer tests.
"""

import asyncio
import os
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# Set test environment before importing recipe_organizer modules
os.environ.setdefault("AZURE_OPENAI_ENDPOINT", "https://test-resource.openai.azure.com")
os.environ.setdefault("AZURE_OPENAI_API_KEY", "test-key-not-real")
os.environ["LOG_PROMPTS"] = "false"

from recipe_organizer.config import load_settings
from recipe_organizer.llm.client import ExtractionClient


SAMPLE_RECIPE_PAGE = """
<html>
  <head>
    <title>Chocolate Chip Cookies</title>
    <style>.recipe { color: red; }</style>
    <script>window.analytics = {track: function() {}};</script>
  </head>
  <body>
    <nav>Home | Recipes | About</nav>
    <main>
      <h1>Chocolate Chip Cookies</h1>
      <ul>
        <li>2 cups flour</li>
        <li>1 cup chocolate chips</li>
        <li>1/2 cup butter</li>
      </ul>
      <ol>
        <li>Cream the butter and sugar.</li>
        <li>Fold in flour and chips, then bake at 350F for 12 minutes.</li>
      </ol>
    </main>
    <footer>Copyright 2024</footer>
  </body>
</html>
"""

SAMPLE_MODEL_REPLY = (
    '{"title": "Chocolate Chip Cookies",'
    ' "ingredients": ["2 cups flour", "1 cup chocolate chips", "1/2 cup butter"],'
    ' "steps": ["Cream the butter and sugar.", "Fold in flour and chips, then bake."],'
    ' "cuisine": "American", "image": "", "sourceUrl": ""}'
)


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio needed)."""
    return asyncio.run(coro)


def _make_chat_completion(content: str | None) -> MagicMock:
    """Build a mock ChatCompletion response."""
    choice = MagicMock()
    choice.message.content = content
    resp = MagicMock()
    resp.choices = [choice]
    return resp


def _html_transport(html: str, status_code: int = 200) -> httpx.MockTransport:
    """Transport that answers every request with the given page."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, html=html)

    return httpx.MockTransport(handler)


@pytest.fixture
def settings():
    """Settings with fake Azure credentials, ignoring any local .env."""
    return load_settings(
        _env_file=None,
        azure_openai_endpoint="https://test-resource.openai.azure.com",
        azure_openai_api_key="test-key-not-real",
    )


@pytest.fixture
def mock_openai():
    """Mock AsyncAzureOpenAI client returning SAMPLE_MODEL_REPLY."""
    mock_client = AsyncMock()
    mock_client.chat.completions.create.return_value = _make_chat_completion(SAMPLE_MODEL_REPLY)
    return mock_client


@pytest.fixture
def extraction_client(settings, mock_openai):
    """ExtractionClient wired to the mock OpenAI client."""
    return ExtractionClient(settings, openai_client=mock_openai)
