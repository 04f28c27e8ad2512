"""
Recipe Organizer Web API - FastAPI application.

Exposes POST /api/extract. Authentication and recipe storage are handled by
other services; this app only extracts.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipe_organizer import __version__
from recipe_organizer.config import Settings, get_settings
from recipe_organizer.errors import (
    ExtractionApiError,
    InputValidationError,
    MalformedResponseError,
    ScrapeError,
)
from recipe_organizer.llm.client import ExtractionClient
from recipe_organizer.llm.prompt_logger import enable_prompt_logging
from recipe_organizer.web.extract_routes import router as extract_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


def create_app(
    settings: Settings | None = None,
    *,
    extraction_client: ExtractionClient | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Settings are resolved here, so missing Azure OpenAI credentials raise
    ConfigurationError before the server starts accepting requests.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    if settings.log_prompts:
        enable_prompt_logging(True)

    client = extraction_client or ExtractionClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Recipe Organizer starting up...")
        logger.info(f"  Deployment: {settings.azure_openai_deployment}")
        logger.info(f"  API version: {settings.azure_openai_api_version}")
        logger.info(f"  Prompt file logging: {settings.log_prompts}")
        yield
        await client.close()

    app = FastAPI(title="Recipe Organizer", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.extraction_client = client
    app.state.http_transport = http_transport

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(extract_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        return {"ok": True}

    _register_exception_handlers(app)
    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(request: Request, exc: InputValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(ScrapeError)
    async def scrape_error_handler(request: Request, exc: ScrapeError):
        logger.warning(f"Scrape failed for {exc.url}: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(ExtractionApiError)
    async def extraction_api_handler(request: Request, exc: ExtractionApiError):
        logger.error(f"Completion API failure on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    @app.exception_handler(MalformedResponseError)
    async def malformed_response_handler(request: Request, exc: MalformedResponseError):
        logger.error(f"Malformed completion reply on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})
