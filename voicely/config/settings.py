from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_TRANSLATION_PROVIDERS = ("deepl", "google", "openai", "example")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    uploads_dir: Path = Path("data/uploads")
    artifacts_dir: Path = Path("data/artifacts")
    max_upload_bytes: int = 50 * 1024 * 1024

    pdf_engine: str = "pdfplumber"

    transcription_engine: str = "placeholder"
    placeholder_transcription_delay_seconds: float = 2.0

    translation_providers: list[str] = ["deepl", "google"]
    translation_timeout_seconds: float = 10.0
    max_translation_chars: int = 5000

    deepl_api_key: str = ""
    deepl_api_url: str = "https://api-free.deepl.com/v2/translate"

    google_api_key: str = ""
    google_api_url: str = "https://translation.googleapis.com/language/translate/v2"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    openai_transcription_model: str = "whisper-1"
    openai_timeout_seconds: int = 30

    tts_engine: str = "placeholder"
    tts_timeout_seconds: float = 15.0
    max_speech_chars: int = 5000
    google_tts_api_key: str = ""
    google_tts_api_url: str = "https://texttospeech.googleapis.com/v1"

    @field_validator("translation_providers")
    @classmethod
    def _check_provider_names(cls, value: list[str]) -> list[str]:
        names = [name.strip().lower() for name in value if name.strip()]
        if not names:
            raise ValueError("translation_providers must name at least one provider")
        unknown = [name for name in names if name not in KNOWN_TRANSLATION_PROVIDERS]
        if unknown:
            raise ValueError(
                f"Unknown translation providers {unknown}. "
                f"Choose from: {list(KNOWN_TRANSLATION_PROVIDERS)}"
            )
        if len(set(names)) != len(names):
            raise ValueError("translation_providers must not repeat a provider")
        return names

    @property
    def include_error_details(self) -> bool:
        return self.app_env.lower() in ("dev", "development")
