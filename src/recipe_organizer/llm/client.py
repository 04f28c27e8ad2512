"""
LLM Client.

Wraps Azure OpenAI chat completions in JSON-object mode. One client is
built at startup from Settings and shared by every request.
"""

import logging

from openai import AsyncAzureOpenAI, OpenAIError

from recipe_organizer.config import Settings
from recipe_organizer.errors import ExtractionApiError
from recipe_organizer.llm.prompt_logger import log_prompt

logger = logging.getLogger(__name__)

EMPTY_JSON_OBJECT = "{}"


class ExtractionClient:
    """
    Structured-completion client for recipe extraction.

    Timeouts and retries (exponential backoff on connection errors, 408,
    409, 429 and 5xx) are delegated to the OpenAI SDK and bounded by
    Settings.llm_timeout_seconds / Settings.llm_max_retries.
    """

    def __init__(self, settings: Settings, openai_client: AsyncAzureOpenAI | None = None):
        self.settings = settings
        self.deployment = settings.azure_openai_deployment
        self._client = openai_client or AsyncAzureOpenAI(
            azure_endpoint=settings.azure_openai_endpoint,
            api_key=settings.azure_openai_api_key,
            api_version=settings.azure_openai_api_version,
            timeout=settings.llm_timeout_seconds,
            max_retries=settings.llm_max_retries,
        )

    def _request_kwargs(self, system_message: str, user_message: str) -> dict:
        kwargs = {
            "model": self.deployment,
            "messages": [
                {"role": "system", "content": system_message},
                {"role": "user", "content": user_message},
            ],
            "response_format": {"type": "json_object"},
        }
        # Omitted by default; see Settings.extraction_temperature
        if self.settings.extraction_temperature is not None:
            kwargs["temperature"] = self.settings.extraction_temperature
        return kwargs

    async def complete(self, system_message: str, user_message: str) -> str:
        """
        Run one completion and return the raw JSON text.

        An empty reply comes back as "{}". Provider failures are raised as
        ExtractionApiError for the caller to handle.
        """
        try:
            result = await self._client.chat.completions.create(
                **self._request_kwargs(system_message, user_message)
            )
        except OpenAIError as e:
            logger.warning(f"Azure OpenAI call failed ({type(e).__name__}): {e}")
            log_prompt(
                label="extract",
                model=self.deployment,
                system_prompt=system_message,
                user_prompt=user_message,
                error=str(e),
            )
            raise ExtractionApiError(f"Completion API call failed: {e}") from e

        content = _first_message_content(result) or EMPTY_JSON_OBJECT

        log_prompt(
            label="extract",
            model=self.deployment,
            system_prompt=system_message,
            user_prompt=user_message,
            response=content,
        )
        return content

    async def close(self) -> None:
        await self._client.close()


def _first_message_content(result) -> str | None:
    choices = getattr(result, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None)
