"""
LLM Client.

Provides JSON-mode completions via Azure OpenAI.
"""

from recipe_organizer.llm.client import ExtractionClient

__all__ = [
    "ExtractionClient",
]
