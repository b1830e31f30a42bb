from pathlib import Path

import pytest
from pydantic import ValidationError

from voicely.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_provider_chain_is_deepl_then_google(self) -> None:
        s = Settings()
        assert s.translation_providers == ["deepl", "google"]

    def test_default_translation_limits(self) -> None:
        s = Settings()
        assert s.translation_timeout_seconds == 10
        assert s.max_translation_chars == 5000

    def test_default_upload_ceiling_is_50_mb(self) -> None:
        s = Settings()
        assert s.max_upload_bytes == 50 * 1024 * 1024

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_transcription_engine(self) -> None:
        s = Settings()
        assert s.transcription_engine == "placeholder"

    def test_default_speech_settings(self) -> None:
        s = Settings()
        assert s.tts_engine == "placeholder"
        assert s.max_speech_chars == 5000
        assert s.google_tts_api_url == "https://texttospeech.googleapis.com/v1"

    def test_dev_env_includes_error_details(self) -> None:
        assert Settings(app_env="dev").include_error_details is True
        assert Settings(app_env="production").include_error_details is False


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_provider_chain_from_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSLATION_PROVIDERS", '["Google", "deepl"]')
        s = Settings()
        assert s.translation_providers == ["google", "deepl"]

    def test_loads_artifacts_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARTIFACTS_DIR", "/tmp/voicely-artifacts")
        s = Settings()
        assert s.artifacts_dir == Path("/tmp/voicely-artifacts")

    def test_loads_api_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEEPL_API_KEY", "deepl-key")
        monkeypatch.setenv("GOOGLE_API_KEY", "google-key")
        s = Settings()
        assert s.deepl_api_key == "deepl-key"
        assert s.google_api_key == "google-key"


class TestSettingsValidation:
    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValidationError, match="Unknown translation providers"):
            Settings(translation_providers=["deepl", "babelfish"])

    def test_empty_provider_chain_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings(translation_providers=[])

    def test_repeated_provider_raises(self) -> None:
        with pytest.raises(ValidationError, match="must not repeat"):
            Settings(translation_providers=["google", "google"])

    def test_invalid_upload_ceiling_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()
