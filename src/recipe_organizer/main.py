"""
Recipe Organizer - CLI Entry Point.

Usage:
    recipe-organizer extract --url URL       Extract a recipe from a web page
    recipe-organizer extract --file recipe.txt
    recipe-organizer serve                   Run the HTTP API
    recipe-organizer health                  Check configuration
    recipe-organizer --help                  Show help
"""

import asyncio
import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from recipe_organizer.errors import (
    ConfigurationError,
    InputValidationError,
    RecipeOrganizerError,
    ScrapeError,
)

app = typer.Typer(
    name="recipe-organizer",
    help="Recipe Organizer - turn recipe text or web pages into structured recipes.",
    add_completion=False,
)
console = Console()


def _load_settings():
    from recipe_organizer.config import get_settings

    try:
        return get_settings()
    except ConfigurationError as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)


@app.command()
def extract(
    url: str = typer.Option(None, "--url", "-u", help="Recipe page to scrape"),
    text: str = typer.Option(None, "--text", "-t", help="Recipe text to structure"),
    file: Path = typer.Option(None, "--file", "-f", help="Read recipe text from a file", exists=True, dir_okay=False),
    log_prompts: bool = typer.Option(False, "--log-prompts", "-l", help="Log LLM prompts to prompt_logs/"),
) -> None:
    """Extract a structured recipe and print it as JSON."""
    from recipe_organizer.llm.client import ExtractionClient
    from recipe_organizer.llm.prompt_logger import enable_prompt_logging
    from recipe_organizer.recipe_import import ExtractionRequest, extract_recipe

    settings = _load_settings()
    logging.basicConfig(level=settings.log_level)

    if log_prompts or settings.log_prompts:
        enable_prompt_logging(True)
        console.print("[dim]Prompt logging enabled. Check prompt_logs/ after the run.[/dim]")

    if file is not None:
        text = file.read_text(encoding="utf-8")

    async def _run():
        client = ExtractionClient(settings)
        try:
            return await extract_recipe(
                ExtractionRequest(text=text, url=url),
                client=client,
                settings=settings,
            )
        finally:
            await client.close()

    try:
        with console.status("Extracting recipe..."):
            recipe = asyncio.run(_run())
    except (InputValidationError, ScrapeError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    except RecipeOrganizerError as e:
        console.print(f"[red]❌ Extraction failed: {e}[/red]")
        raise typer.Exit(2)

    console.print_json(json.dumps(recipe.to_dict()))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(4000, "--port", "-p", help="Port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes (dev only)"),
) -> None:
    """Run the extraction API with uvicorn."""
    import uvicorn

    settings = _load_settings()
    console.print(
        Panel.fit(
            f"[bold green]Recipe Organizer API[/bold green]\n"
            f"[dim]http://{host}:{port}/api/extract[/dim]\n"
            f"[dim]Deployment: {settings.azure_openai_deployment}[/dim]",
            border_style="green",
        )
    )
    uvicorn.run(
        "recipe_organizer.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def health() -> None:
    """Check configuration."""
    console.print("\n[bold]Recipe Organizer Health Check[/bold]\n")

    settings = _load_settings()
    console.print("✅ Configuration loaded")
    console.print(f"   Environment: {settings.app_env}")
    console.print(f"   Log level: {settings.log_level}")

    console.print(f"✅ Azure OpenAI endpoint: {settings.azure_openai_endpoint}")
    console.print(f"   Deployment: {settings.azure_openai_deployment}")
    console.print(f"   API version: {settings.azure_openai_api_version}")

    if settings.extraction_temperature is None:
        console.print("ℹ️  Temperature: model default (not sent)")
    else:
        console.print(f"⚠️  Temperature override: {settings.extraction_temperature}")

    console.print("\n[green]All checks passed![/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from recipe_organizer import __version__

    console.print(f"Recipe Organizer version {__version__}")


if __name__ == "__main__":
    app()
