import base64
from dataclasses import dataclass

DEFAULT_LANGUAGE_CODE = "en-US"
DEFAULT_AUDIO_ENCODING = "MP3"
AUDIO_ENCODINGS = frozenset({"MP3", "LINEAR16", "OGG_OPUS"})

MIN_SPEAKING_RATE = 0.25
MAX_SPEAKING_RATE = 4.0
MIN_PITCH = -20.0
MAX_PITCH = 20.0

DEFAULT_VOICES: dict[str, str] = {
    "en-US": "en-US-Wavenet-D",
    "tr-TR": "tr-TR-Wavenet-A",
    "es-ES": "es-ES-Wavenet-A",
    "fr-FR": "fr-FR-Wavenet-A",
    "de-DE": "de-DE-Wavenet-A",
    "it-IT": "it-IT-Wavenet-A",
    "pt-PT": "pt-PT-Wavenet-A",
    "ru-RU": "ru-RU-Wavenet-A",
    "ja-JP": "ja-JP-Wavenet-A",
    "ko-KR": "ko-KR-Wavenet-A",
    "zh-CN": "zh-CN-Wavenet-A",
}


def default_voice(language_code: str) -> str:
    """Voice used when the caller names none (e.g. "nl-NL" -> "nl-NL-Wavenet-A")."""
    return DEFAULT_VOICES.get(language_code, f"{language_code}-Wavenet-A")


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class SpeechRequest:
    """A validated synthesis request; rate and pitch are already clamped."""

    text: str
    language_code: str
    voice_name: str
    audio_encoding: str
    speaking_rate: float
    pitch: float


@dataclass(frozen=True)
class SynthesizedSpeech:
    audio: bytes
    audio_encoding: str
    language_code: str
    voice_name: str

    @property
    def audio_base64(self) -> str:
        return base64.b64encode(self.audio).decode("ascii")


@dataclass(frozen=True)
class Voice:
    name: str
    gender: str
    natural_sample_rate_hertz: int
    language_codes: tuple[str, ...]


def group_voices_by_language(voices: list[Voice]) -> dict[str, list[Voice]]:
    """Index voices under every language code they support."""
    grouped: dict[str, list[Voice]] = {}
    for voice in voices:
        for language_code in voice.language_codes:
            grouped.setdefault(language_code, []).append(voice)
    return grouped
