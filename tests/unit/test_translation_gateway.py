from unittest.mock import MagicMock

import pytest

from voicely.exceptions import ConfigurationError
from voicely.translation.base import BaseTranslationProvider
from voicely.translation.exceptions import (
    AllProvidersUnavailableError,
    InputTooLongError,
    InvalidTranslationInputError,
    ProviderError,
)
from voicely.translation.gateway import TranslationGateway
from voicely.translation.models import ProviderTranslation


class _RecordingProvider(BaseTranslationProvider):
    def __init__(self, name: str, text: str = "", error: Exception | None = None) -> None:
        self.name = name
        self._text = text
        self._error = error
        self.calls: list[tuple[str, str, str | None]] = []

    def submit(self, text: str, target: str, source: str | None = None) -> ProviderTranslation:
        self.calls.append((text, target, source))
        if self._error is not None:
            raise self._error
        return ProviderTranslation(translated_text=self._text, detected_source_language="en")


class TestFallbackChain:
    def test_first_provider_wins(self) -> None:
        primary = _RecordingProvider("deepl", text="Merhaba.")
        secondary = _RecordingProvider("google", text="unused")

        result = TranslationGateway([primary, secondary]).translate("Hello.", "tr")

        assert result.translated_text == "Merhaba."
        assert result.provider_used == "deepl"
        assert result.detected_source_language == "en"
        assert secondary.calls == []

    def test_falls_back_when_primary_fails(self) -> None:
        primary = _RecordingProvider("deepl", error=ProviderError("deepl", "HTTP 500"))
        secondary = _RecordingProvider("google", text="Merhaba.")

        result = TranslationGateway([primary, secondary]).translate("Hello.", "tr", "en")

        assert result.provider_used == "google"
        assert result.translated_text == "Merhaba."
        assert primary.calls == [("Hello.", "tr", "en")]
        assert secondary.calls == [("Hello.", "tr", "en")]

    def test_unexpected_exception_also_falls_back(self) -> None:
        primary = _RecordingProvider("deepl", error=KeyError("translations"))
        secondary = _RecordingProvider("google", text="ok")
        result = TranslationGateway([primary, secondary]).translate("Hello.", "tr")
        assert result.provider_used == "google"

    def test_all_failing_raises_unavailable(self) -> None:
        primary = _RecordingProvider("deepl", error=ProviderError("deepl", "HTTP 500"))
        secondary = _RecordingProvider("google", error=ProviderError("google", "timed out"))

        with pytest.raises(AllProvidersUnavailableError) as exc_info:
            TranslationGateway([primary, secondary]).translate("Hello.", "tr")

        assert exc_info.value.message == "All translation services are currently unavailable"
        assert set(exc_info.value.failures) == {"deepl", "google"}

    def test_provider_names_follow_chain_order(self) -> None:
        gateway = TranslationGateway([_RecordingProvider("google"), _RecordingProvider("deepl")])
        assert gateway.provider_names == ["google", "deepl"]

    def test_empty_chain_is_a_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            TranslationGateway([])


class TestValidation:
    def test_text_over_limit_is_rejected_before_any_call(self) -> None:
        provider = _RecordingProvider("deepl", text="x")

        with pytest.raises(InputTooLongError) as exc_info:
            TranslationGateway([provider]).translate("a" * 5001, "tr")

        assert exc_info.value.length == 5001
        assert exc_info.value.limit == 5000
        assert provider.calls == []

    def test_text_at_limit_is_accepted(self) -> None:
        provider = _RecordingProvider("deepl", text="x")
        TranslationGateway([provider]).translate("a" * 5000, "tr")
        assert len(provider.calls) == 1

    def test_custom_limit(self) -> None:
        provider = _RecordingProvider("deepl", text="x")
        with pytest.raises(InputTooLongError):
            TranslationGateway([provider], max_chars=10).translate("a" * 11, "tr")

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_blank_text_is_invalid(self, text: str) -> None:
        provider = _RecordingProvider("deepl")
        with pytest.raises(InvalidTranslationInputError):
            TranslationGateway([provider]).translate(text, "tr")
        assert provider.calls == []

    def test_blank_target_is_invalid(self) -> None:
        with pytest.raises(InvalidTranslationInputError, match="Target language"):
            TranslationGateway([_RecordingProvider("deepl")]).translate("Hello.", " ")

    def test_blank_source_is_treated_as_absent(self) -> None:
        provider = _RecordingProvider("deepl", text="x")
        TranslationGateway([provider]).translate("Hello.", " tr ", "  ")
        assert provider.calls == [("Hello.", "tr", None)]


class TestPinnedProvider:
    def test_pinned_provider_is_used_alone(self) -> None:
        primary = _RecordingProvider("deepl", text="unused")
        secondary = _RecordingProvider("google", text="Merhaba.")

        result = TranslationGateway([primary, secondary]).translate(
            "Hello.", "tr", provider="Google"
        )

        assert result.provider_used == "google"
        assert primary.calls == []

    def test_pinned_failure_does_not_fall_back(self) -> None:
        primary = _RecordingProvider("deepl", error=ProviderError("deepl", "HTTP 403"))
        secondary = _RecordingProvider("google", text="Merhaba.")

        with pytest.raises(ProviderError, match="HTTP 403"):
            TranslationGateway([primary, secondary]).translate("Hello.", "tr", provider="deepl")

        assert secondary.calls == []

    def test_pinned_unexpected_exception_is_wrapped(self) -> None:
        primary = _RecordingProvider("deepl", error=RuntimeError("boom"))
        with pytest.raises(ProviderError, match="deepl translation failed: boom"):
            TranslationGateway([primary]).translate("Hello.", "tr", provider="deepl")

    def test_unconfigured_pin_raises_provider_error(self) -> None:
        with pytest.raises(ProviderError, match="not configured"):
            TranslationGateway([_RecordingProvider("deepl")]).translate(
                "Hello.", "tr", provider="openai"
            )


class TestCodeUnitCap:
    def test_astral_characters_count_twice_toward_the_cap(self) -> None:
        provider = _RecordingProvider("deepl", text="x")

        with pytest.raises(InputTooLongError) as exc_info:
            TranslationGateway([provider]).translate("\U0001f600" * 5000, "tr")

        assert exc_info.value.length == 10000
        assert provider.calls == []

    def test_astral_text_within_cap_is_accepted(self) -> None:
        provider = _RecordingProvider("deepl", text="x")
        TranslationGateway([provider]).translate("\U0001f600" * 2500, "tr")
        assert len(provider.calls) == 1


class TestClose:
    def test_close_releases_every_provider(self) -> None:
        primary = MagicMock(spec=BaseTranslationProvider)
        primary.name = "deepl"
        fallback = MagicMock(spec=BaseTranslationProvider)
        fallback.name = "google"

        TranslationGateway([primary, fallback]).close()

        primary.close.assert_called_once_with()
        fallback.close.assert_called_once_with()
