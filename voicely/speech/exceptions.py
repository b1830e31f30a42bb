from voicely.exceptions import VoicelyError


class SpeechError(VoicelyError):
    """Base exception for text-to-speech failures."""

    kind = "SpeechError"


class InvalidSpeechInputError(SpeechError):
    """Raised when the text is blank or the audio encoding is unknown."""

    kind = "InvalidSpeechInput"


class SpeechInputTooLongError(SpeechError):
    """Raised before synthesis when the text exceeds the length cap."""

    kind = "InputTooLong"

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Text too long for TTS ({length} characters, max {limit})")
        self.length = length
        self.limit = limit


class SpeechSynthesisFailedError(SpeechError):
    kind = "SpeechSynthesisFailed"


class VoiceListingFailedError(SpeechError):
    kind = "VoiceListingFailed"
