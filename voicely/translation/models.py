from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationRequest:
    """Text to translate and the language pair."""

    source_text: str
    target_language_code: str
    source_language_code: str | None = None


@dataclass(frozen=True)
class ProviderTranslation:
    """What a single provider returned."""

    translated_text: str
    detected_source_language: str | None = None


@dataclass(frozen=True)
class TranslationResult:
    """Gateway output; `provider_used` is always a provider that succeeded."""

    translated_text: str
    provider_used: str
    detected_source_language: str | None = None
