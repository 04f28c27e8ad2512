"""API endpoint for recipe extraction from pasted text or a URL."""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from recipe_organizer.config import Settings
from recipe_organizer.llm.client import ExtractionClient
from recipe_organizer.recipe_import import ExtractionRequest, extract_recipe

logger = logging.getLogger(__name__)

router = APIRouter(tags=["extract"])


# =============================================================================
# Request/Response Models
# =============================================================================


class ExtractRequest(BaseModel):
    """Recipe text to structure, or a recipe page to scrape. A valid URL wins."""

    text: str | None = None
    url: str | None = None


class ExtractedRecipeResponse(BaseModel):
    """Structured recipe; every field is always present."""

    title: str = ""
    ingredients: list[str] = []
    steps: list[str] = []
    cuisine: str = "Western"
    image: str = ""
    source_url: str = Field(default="", serialization_alias="sourceUrl")


# =============================================================================
# Dependencies
# =============================================================================


def get_extraction_client(request: Request) -> ExtractionClient:
    return request.app.state.extraction_client


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "/extract",
    response_model=ExtractedRecipeResponse,
    response_model_by_alias=True,
)
async def extract(
    req: ExtractRequest,
    request: Request,
    client: ExtractionClient = Depends(get_extraction_client),
    settings: Settings = Depends(get_app_settings),
) -> ExtractedRecipeResponse:
    """
    Extract a structured recipe.

    Validation and scrape failures surface as 400 via the app's exception
    handlers; provider and malformed-reply failures as a generic 500.
    """
    recipe = await extract_recipe(
        ExtractionRequest(text=req.text, url=req.url),
        client=client,
        settings=settings,
        transport=request.app.state.http_transport,
    )

    return ExtractedRecipeResponse(
        title=recipe.title,
        ingredients=recipe.ingredients,
        steps=recipe.steps,
        cuisine=recipe.cuisine,
        image=recipe.image,
        source_url=recipe.source_url,
    )
