from voicely.logging.logger import Log
from voicely.speech.base import BaseSpeechSynthesizer
from voicely.speech.exceptions import (
    InvalidSpeechInputError,
    SpeechError,
    SpeechInputTooLongError,
    SpeechSynthesisFailedError,
    VoiceListingFailedError,
)
from voicely.speech.models import (
    AUDIO_ENCODINGS,
    DEFAULT_AUDIO_ENCODING,
    DEFAULT_LANGUAGE_CODE,
    MAX_PITCH,
    MAX_SPEAKING_RATE,
    MIN_PITCH,
    MIN_SPEAKING_RATE,
    SpeechRequest,
    SynthesizedSpeech,
    Voice,
    clamp,
    default_voice,
    group_voices_by_language,
)
from voicely.text_utils import code_unit_length


class TextToSpeech:
    """Validates speech requests and hands them to a synthesizer.

    Speaking rate and pitch are clamped into the engine's accepted range
    rather than rejected. When no voice is named, the language's default
    voice is used.
    """

    def __init__(self, synthesizer: BaseSpeechSynthesizer, max_chars: int = 5000) -> None:
        self._synthesizer = synthesizer
        self._max_chars = max_chars

    def synthesize(
        self,
        text: str,
        language_code: str = DEFAULT_LANGUAGE_CODE,
        voice_name: str | None = None,
        audio_encoding: str = DEFAULT_AUDIO_ENCODING,
        speaking_rate: float = 1.0,
        pitch: float = 0.0,
    ) -> SynthesizedSpeech:
        request = self._build_request(
            text, language_code, voice_name, audio_encoding, speaking_rate, pitch
        )
        Log.info(
            f"Synthesizing {code_unit_length(request.text)} chars with {request.voice_name} "
            f"({request.audio_encoding}, rate {request.speaking_rate}, pitch {request.pitch})"
        )
        try:
            audio = self._synthesizer.synthesize(request)
        except SpeechError:
            raise
        except Exception as exc:
            raise SpeechSynthesisFailedError(f"Text-to-speech failed: {exc}") from exc
        if not audio:
            raise SpeechSynthesisFailedError("Text-to-speech failed: no audio content")
        return SynthesizedSpeech(
            audio=audio,
            audio_encoding=request.audio_encoding,
            language_code=request.language_code,
            voice_name=request.voice_name,
        )

    def voices_by_language(self) -> dict[str, list[Voice]]:
        try:
            voices = self._synthesizer.list_voices()
        except SpeechError:
            raise
        except Exception as exc:
            raise VoiceListingFailedError(f"Failed to fetch available voices: {exc}") from exc
        return group_voices_by_language(voices)

    def close(self) -> None:
        self._synthesizer.close()

    def _build_request(
        self,
        text: str,
        language_code: str,
        voice_name: str | None,
        audio_encoding: str,
        speaking_rate: float,
        pitch: float,
    ) -> SpeechRequest:
        if not text or not text.strip():
            raise InvalidSpeechInputError("Text is required")
        length = code_unit_length(text)
        if length > self._max_chars:
            raise SpeechInputTooLongError(length, self._max_chars)

        encoding = (audio_encoding or DEFAULT_AUDIO_ENCODING).strip().upper()
        if encoding not in AUDIO_ENCODINGS:
            raise InvalidSpeechInputError(
                f"Unsupported audio encoding '{audio_encoding}'. "
                f"Choose from: {sorted(AUDIO_ENCODINGS)}"
            )
        language = (language_code or DEFAULT_LANGUAGE_CODE).strip()
        return SpeechRequest(
            text=text,
            language_code=language,
            voice_name=(voice_name or "").strip() or default_voice(language),
            audio_encoding=encoding,
            speaking_rate=clamp(speaking_rate, MIN_SPEAKING_RATE, MAX_SPEAKING_RATE),
            pitch=clamp(pitch, MIN_PITCH, MAX_PITCH),
        )
