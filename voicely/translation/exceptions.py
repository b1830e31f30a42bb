from voicely.exceptions import VoicelyError


class TranslationError(VoicelyError):
    """Base exception for translation failures."""

    kind = "TranslationError"


class InvalidTranslationInputError(TranslationError):
    """Raised when the text or target language is missing."""

    kind = "InvalidTranslationInput"


class InputTooLongError(TranslationError):
    """Raised before any provider call when the text exceeds the length cap."""

    kind = "InputTooLong"

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Text too long ({length} characters, max {limit})")
        self.length = length
        self.limit = limit


class ProviderError(TranslationError):
    """Raised when a single translation provider fails."""

    kind = "ProviderError"

    def __init__(self, provider: str, cause: str) -> None:
        super().__init__(f"{provider} translation failed: {cause}")
        self.provider = provider
        self.cause = cause


class AllProvidersUnavailableError(TranslationError):
    """Raised when every provider in the fallback chain failed."""

    kind = "AllProvidersUnavailable"

    def __init__(self, failures: dict[str, str]) -> None:
        super().__init__("All translation services are currently unavailable")
        self.failures = failures
