"""Exception types raised by the extraction pipeline."""


class RecipeOrganizerError(Exception):
    """Base class for all application errors."""


class ConfigurationError(RecipeOrganizerError):
    """Required configuration is missing or invalid. Raised at startup."""


class InputValidationError(RecipeOrganizerError):
    """The request carried neither usable text nor a valid URL."""


class ScrapeError(RecipeOrganizerError):
    """
    The recipe page could not be turned into usable text.

    Covers timeouts, network/TLS failures, non-2xx responses and pages whose
    cleaned text is too short to be a recipe. The message always names the
    underlying cause.
    """

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ExtractionApiError(RecipeOrganizerError):
    """The completion API call failed (auth, rate limit, network, provider)."""


class MalformedResponseError(RecipeOrganizerError):
    """The completion API returned content that is not a JSON object."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw
