import io
import wave

from voicely.logging.logger import Log
from voicely.speech.base import BaseSpeechSynthesizer
from voicely.speech.models import DEFAULT_VOICES, SpeechRequest, Voice


class PlaceholderSpeechSynthesizer(BaseSpeechSynthesizer):
    """Stand-in synthesizer that never calls a speech service.

    Returns a short silent 16-bit mono WAV clip whatever encoding was asked
    for, and offers the default voice of each known language.
    """

    SAMPLE_RATE = 16000
    DURATION_SECONDS = 0.5

    def synthesize(self, request: SpeechRequest) -> bytes:
        Log.debug(f"Placeholder speech for {len(request.text)} chars ({request.voice_name})")
        frames = int(self.SAMPLE_RATE * self.DURATION_SECONDS)
        buffer = io.BytesIO()
        with wave.open(buffer, "wb") as clip:
            clip.setnchannels(1)
            clip.setsampwidth(2)
            clip.setframerate(self.SAMPLE_RATE)
            clip.writeframes(b"\x00\x00" * frames)
        return buffer.getvalue()

    def list_voices(self) -> list[Voice]:
        return [
            Voice(
                name=name,
                gender="NEUTRAL",
                natural_sample_rate_hertz=self.SAMPLE_RATE,
                language_codes=(language_code,),
            )
            for language_code, name in DEFAULT_VOICES.items()
        ]
