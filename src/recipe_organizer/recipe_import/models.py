"""Data models for recipe extraction."""

from dataclasses import dataclass, field
from enum import Enum


class ExtractionPath(str, Enum):
    """Where the recipe text for a request comes from."""

    TEXT = "text"
    URL = "url"


@dataclass
class ExtractionRequest:
    """Caller input: pasted text, a recipe page URL, or both."""

    text: str | None = None
    url: str | None = None


@dataclass
class ResolvedInput:
    """The path chosen for a request and the value it will use."""

    path: ExtractionPath
    text: str | None = None
    url: str | None = None


@dataclass
class ScrapedContent:
    """Cleaned page text. Only exists on the URL path, never returned."""

    source_url: str
    cleaned_text: str


@dataclass
class PromptMessages:
    """System and user messages sent to the completion API."""

    system: str
    user: str


@dataclass
class ExtractedRecipe:
    """Normalized recipe returned to the caller."""

    title: str = ""
    ingredients: list[str] = field(default_factory=list)
    steps: list[str] = field(default_factory=list)
    cuisine: str = "Western"
    image: str = ""
    source_url: str = ""

    def to_dict(self) -> dict:
        """Wire format (camelCase source URL)."""
        return {
            "title": self.title,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
            "cuisine": self.cuisine,
            "image": self.image,
            "sourceUrl": self.source_url,
        }
