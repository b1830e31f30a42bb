from voicely.config.settings import Settings
from voicely.exceptions import ConfigurationError
from voicely.translation.base import BaseTranslationProvider
from voicely.translation.deepl_provider import DeepLProvider
from voicely.translation.example_provider import ExampleTranslationProvider
from voicely.translation.gateway import TranslationGateway
from voicely.translation.google_provider import GoogleTranslateProvider
from voicely.translation.openai_provider import OpenAITranslationProvider


class TranslationGatewayFactory:
    """Builds the provider chain named in settings."""

    @classmethod
    def create(cls, settings: Settings) -> TranslationGateway:
        """Create a gateway whose chain order follows `translation_providers`.

        Raises:
            ConfigurationError: a provider is unknown or lacks its API key.
        """
        providers = [
            cls.create_provider(name, settings) for name in settings.translation_providers
        ]
        return TranslationGateway(providers, max_chars=settings.max_translation_chars)

    @classmethod
    def create_provider(cls, name: str, settings: Settings) -> BaseTranslationProvider:
        provider = name.lower()
        if provider == "example":
            return ExampleTranslationProvider()
        if provider == "deepl":
            return DeepLProvider(
                api_key=cls._require(settings.deepl_api_key, "deepl_api_key", provider),
                api_url=settings.deepl_api_url,
                timeout_seconds=settings.translation_timeout_seconds,
            )
        if provider == "google":
            return GoogleTranslateProvider(
                api_key=cls._require(settings.google_api_key, "google_api_key", provider),
                api_url=settings.google_api_url,
                timeout_seconds=settings.translation_timeout_seconds,
            )
        if provider == "openai":
            return OpenAITranslationProvider(
                api_key=cls._require(settings.openai_api_key, "openai_api_key", provider),
                model=settings.openai_model_name,
                timeout_seconds=settings.translation_timeout_seconds,
                base_url=settings.openai_base_url,
            )
        raise ConfigurationError(
            f"Unknown translation provider '{name}'. "
            "Choose from: ['deepl', 'google', 'openai', 'example']"
        )

    @staticmethod
    def _require(value: str, field_name: str, provider: str) -> str:
        key = (value or "").strip()
        if not key:
            raise ConfigurationError(f"{field_name} is required for provider '{provider}'")
        return key
