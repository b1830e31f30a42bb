from collections.abc import Sequence

from voicely.exceptions import ConfigurationError
from voicely.logging.logger import Log
from voicely.text_utils import code_unit_length
from voicely.translation.base import BaseTranslationProvider
from voicely.translation.exceptions import (
    AllProvidersUnavailableError,
    InputTooLongError,
    InvalidTranslationInputError,
    ProviderError,
)
from voicely.translation.models import ProviderTranslation, TranslationRequest, TranslationResult

DEFAULT_MAX_CHARS = 5000


class TranslationGateway:
    """Translates text through an ordered chain of providers.

    The first provider that succeeds wins. Failures are logged and the next
    provider is tried; only exhaustion of the whole chain is reported. A
    caller can pin one provider, which disables fallback.
    """

    def __init__(
        self,
        providers: Sequence[BaseTranslationProvider],
        max_chars: int = DEFAULT_MAX_CHARS,
    ) -> None:
        if not providers:
            raise ConfigurationError("TranslationGateway needs at least one provider")
        self._providers = list(providers)
        self._max_chars = max_chars

    def close(self) -> None:
        """Close every provider in the chain."""
        for provider in self._providers:
            provider.close()

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self._providers]

    def translate(
        self,
        text: str,
        target: str,
        source: str | None = None,
        provider: str | None = None,
    ) -> TranslationResult:
        """Translate `text` into `target`.

        Raises:
            InvalidTranslationInputError: blank text or target language.
            InputTooLongError: text longer than the configured cap.
            ProviderError: the pinned provider failed or is not configured.
            AllProvidersUnavailableError: every provider in the chain failed.
        """
        request = self._validate(text, target, source)
        if provider is not None:
            return self._translate_pinned(request, provider)

        failures: dict[str, str] = {}
        for candidate in self._providers:
            try:
                translation = self._submit(candidate, request)
            except Exception as exc:
                Log.warning(f"{candidate.name} translation failed, trying next provider: {exc}")
                failures[candidate.name] = str(exc)
                continue
            return self._result(candidate, translation)

        Log.error(f"All translation providers failed: {failures}")
        raise AllProvidersUnavailableError(failures)

    def _translate_pinned(self, request: TranslationRequest, name: str) -> TranslationResult:
        pinned = next(
            (p for p in self._providers if p.name == name.strip().lower()),
            None,
        )
        if pinned is None:
            raise ProviderError(name, "provider is not configured")
        try:
            translation = self._submit(pinned, request)
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError(pinned.name, str(exc)) from exc
        return self._result(pinned, translation)

    def _validate(self, text: str, target: str, source: str | None) -> TranslationRequest:
        if not text or not text.strip():
            raise InvalidTranslationInputError("Text is required and must be a non-empty string")
        if not target or not target.strip():
            raise InvalidTranslationInputError("Target language is required")
        length = code_unit_length(text)
        if length > self._max_chars:
            raise InputTooLongError(length, self._max_chars)
        return TranslationRequest(
            source_text=text,
            target_language_code=target.strip(),
            source_language_code=source.strip() if source and source.strip() else None,
        )

    @staticmethod
    def _submit(
        provider: BaseTranslationProvider,
        request: TranslationRequest,
    ) -> ProviderTranslation:
        return provider.submit(
            request.source_text,
            request.target_language_code,
            request.source_language_code,
        )

    @staticmethod
    def _result(
        provider: BaseTranslationProvider,
        translation: ProviderTranslation,
    ) -> TranslationResult:
        Log.info(
            f"Translated {len(translation.translated_text)} chars with {provider.name}"
        )
        return TranslationResult(
            translated_text=translation.translated_text,
            provider_used=provider.name,
            detected_source_language=translation.detected_source_language,
        )
