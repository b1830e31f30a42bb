from voicely.config.settings import Settings
from voicely.exceptions import ConfigurationError
from voicely.speech.base import BaseSpeechSynthesizer
from voicely.speech.google_synthesizer import GoogleTextToSpeechSynthesizer
from voicely.speech.placeholder_synthesizer import PlaceholderSpeechSynthesizer
from voicely.speech.text_to_speech import TextToSpeech


class SpeechSynthesizerFactory:
    """Creates the configured text-to-speech adapter."""

    ENGINES = ("placeholder", "google")

    @classmethod
    def create(cls, settings: Settings) -> BaseSpeechSynthesizer:
        engine = settings.tts_engine.lower()
        if engine == "placeholder":
            return PlaceholderSpeechSynthesizer()
        if engine == "google":
            api_key = (settings.google_tts_api_key or settings.google_api_key).strip()
            if not api_key:
                raise ConfigurationError(
                    "google_tts_api_key or google_api_key is required for tts_engine=google"
                )
            return GoogleTextToSpeechSynthesizer(
                api_key=api_key,
                api_url=settings.google_tts_api_url,
                timeout_seconds=settings.tts_timeout_seconds,
            )
        raise ConfigurationError(
            f"Unknown TTS engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )


def build_text_to_speech(settings: Settings) -> TextToSpeech:
    return TextToSpeech(
        SpeechSynthesizerFactory.create(settings),
        max_chars=settings.max_speech_chars,
    )
